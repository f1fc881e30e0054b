"""Fixtures compartidos.

La app usa una base SQLite en memoria (StaticPool) y una sola Session por
test, inyectada con dependency_overrides sobre get_session.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "secret-de-tests")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app import app
from database import get_session
from models import Role, User
from tests.factories import crear_usuario, headers_para


@pytest.fixture
def session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def client(session: Session):
    app.dependency_overrides[get_session] = lambda: session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def rol_admin(session: Session) -> Role:
    rol = Role(nombre="Administrador", descripcion="Acceso completo")
    session.add(rol)
    session.commit()
    session.refresh(rol)
    return rol


@pytest.fixture
def rol_operador(session: Session) -> Role:
    rol = Role(nombre="Operador")
    session.add(rol)
    session.commit()
    session.refresh(rol)
    return rol



@pytest.fixture
def admin_user(session: Session, rol_admin: Role) -> User:
    return crear_usuario(session, rol_admin, "admin@example.com")


@pytest.fixture
def operador_user(session: Session, rol_operador: Role) -> User:
    return crear_usuario(session, rol_operador, "operador@example.com")


@pytest.fixture
def admin_headers(admin_user: User) -> dict[str, str]:
    return headers_para(admin_user, "Administrador")


@pytest.fixture
def operador_headers(operador_user: User) -> dict[str, str]:
    return headers_para(operador_user, "Operador")
