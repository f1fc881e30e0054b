# path: services/user_service.py

from __future__ import annotations

import logging

from sqlalchemy import func
from sqlmodel import Session, select

from exceptions import EntityNotFoundException, ValidationException
from models.role import Role
from models.users import User
from schemas.user import UserDTO, UserRequest
from services.db_errors import id_en_rango, operacion_db
from services.security import hash_password

logger = logging.getLogger(__name__)

ENTIDAD = "Usuario"
MIN_PASSWORD = 6


class UserService:
    def __init__(self, session: Session):
        self.session = session

    def get_all(self) -> list[UserDTO]:
        with operacion_db(self.session, "listar usuarios"):
            users = self.session.exec(
                select(User)
                .where(User.activo == True)  # noqa: E712
                .order_by(User.id)
            ).all()
        return [UserDTO.model_validate(u) for u in users]

    def get_by_id(self, user_id: int) -> UserDTO:
        return UserDTO.model_validate(self._get_or_404(user_id))

    def create(self, dto: UserRequest) -> UserDTO:
        nombre, email = self._validar(dto)
        if not dto.password or len(dto.password) < MIN_PASSWORD:
            raise ValidationException(
                f"La contraseña es obligatoria y debe tener al menos {MIN_PASSWORD} caracteres"
            )

        with operacion_db(self.session, "crear el usuario"):
            user = User(
                rol_id=dto.rol_id,
                nombre=nombre,
                email=email,
                password_hash=hash_password(dto.password),
                activo=dto.activo,
            )
            self.session.add(user)
            self.session.commit()
            self.session.refresh(user)

        logger.info("Usuario creado id=%s email=%s", user.id, user.email)
        return UserDTO.model_validate(user)

    def update(self, dto: UserRequest) -> UserDTO:
        user = self._get_or_404(dto.id)
        nombre, email = self._validar(dto, excluir_id=user.id)

        # password solo si viene una nueva
        if dto.password is not None and len(dto.password) < MIN_PASSWORD:
            raise ValidationException(
                f"La contraseña debe tener al menos {MIN_PASSWORD} caracteres"
            )

        with operacion_db(self.session, "actualizar el usuario"):
            user.rol_id = dto.rol_id
            user.nombre = nombre
            user.email = email
            if dto.password:
                user.password_hash = hash_password(dto.password)
            self.session.add(user)
            self.session.commit()
            self.session.refresh(user)

        return UserDTO.model_validate(user)

    def delete_logical(self, user_id: int) -> None:
        user = self._get_or_404(user_id)
        with operacion_db(self.session, "eliminar lógicamente el usuario"):
            user.activo = False
            self.session.add(user)
            self.session.commit()

    def delete_permanent(self, user_id: int) -> None:
        user = self._get_or_404(user_id)
        with operacion_db(self.session, "eliminar el usuario"):
            self.session.delete(user)
            self.session.commit()

    def _get_or_404(self, user_id: int | None) -> User:
        if user_id is None or user_id <= 0:
            raise ValidationException("El ID del usuario debe ser mayor que cero")
        if not id_en_rango(user_id):
            raise EntityNotFoundException(ENTIDAD, user_id)

        with operacion_db(self.session, "obtener el usuario"):
            user = self.session.get(User, user_id)
        if not user:
            raise EntityNotFoundException(ENTIDAD, user_id)
        return user

    def _validar(self, dto: UserRequest, excluir_id: int | None = None) -> tuple[str, str]:
        nombre = (dto.nombre or "").strip()
        if not nombre:
            raise ValidationException("El nombre del usuario es obligatorio")

        email = str(dto.email).strip().lower()

        q = select(User).where(func.lower(User.email) == email)
        if excluir_id is not None:
            q = q.where(User.id != excluir_id)

        with operacion_db(self.session, "validar el usuario"):
            existente = self.session.exec(q).first()
            rol = self.session.get(Role, dto.rol_id) if id_en_rango(dto.rol_id) else None

        if existente:
            raise ValidationException("El email ya existe")
        if not rol or not rol.activo:
            raise ValidationException("Rol inválido")

        return nombre, email
