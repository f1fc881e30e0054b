# path: seed.py
"""
Crea las tablas, el rol administrador y (si hay ADMIN_EMAIL / ADMIN_PASSWORD
en el .env) el primer usuario admin. Se puede correr varias veces.

    python seed.py
"""
import logging

from sqlmodel import Session, select

import config
from database import create_db_and_tables, engine
from models import Role, User
from services.security import hash_password

logger = logging.getLogger("seed")


def seed_roles(session: Session) -> Role:
    rol = session.exec(select(Role).where(Role.nombre == config.ADMIN_ROLE)).first()
    if rol:
        logger.info("Rol '%s' ya existe, se omite", rol.nombre)
        return rol

    rol = Role(nombre=config.ADMIN_ROLE, descripcion="Acceso completo")
    session.add(rol)
    session.commit()
    session.refresh(rol)
    logger.info("Rol '%s' creado (id=%s)", rol.nombre, rol.id)
    return rol


def seed_admin(session: Session, rol: Role) -> User | None:
    if not config.ADMIN_EMAIL or not config.ADMIN_PASSWORD:
        logger.warning("Sin ADMIN_EMAIL / ADMIN_PASSWORD, no se crea usuario admin")
        return None

    email = config.ADMIN_EMAIL.strip().lower()
    existing = session.exec(select(User).where(User.email == email)).first()
    if existing:
        logger.info("Usuario admin '%s' ya existe, se omite", email)
        return existing

    admin = User(
        rol_id=rol.id,
        nombre="Administrador",
        email=email,
        password_hash=hash_password(config.ADMIN_PASSWORD),
        activo=True,
    )
    session.add(admin)
    session.commit()
    session.refresh(admin)
    logger.info("Usuario admin '%s' creado", email)
    return admin


def main():
    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s %(message)s")
    create_db_and_tables()
    with Session(engine) as session:
        rol = seed_roles(session)
        seed_admin(session, rol)


if __name__ == "__main__":
    main()
