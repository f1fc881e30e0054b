# path: services/rol_service.py

from __future__ import annotations

import logging

from sqlalchemy import func
from sqlmodel import Session, select

from exceptions import EntityNotFoundException, ValidationException
from models.role import Role
from models.users import User
from schemas.rol import RolDTO
from services.db_errors import id_en_rango, operacion_db

logger = logging.getLogger(__name__)

ENTIDAD = "Rol"


class RolService:
    def __init__(self, session: Session):
        self.session = session

    # -------------------------
    # LECTURA
    # -------------------------
    def get_all(self) -> list[RolDTO]:
        with operacion_db(self.session, "listar roles"):
            roles = self.session.exec(
                select(Role)
                .where(Role.activo == True)  # noqa: E712
                .order_by(Role.id)
            ).all()
        return [RolDTO.model_validate(r) for r in roles]

    def get_by_id(self, rol_id: int) -> RolDTO:
        return RolDTO.model_validate(self._get_or_404(rol_id))

    # -------------------------
    # ESCRITURA
    # -------------------------
    def create(self, dto: RolDTO) -> RolDTO:
        nombre = self._validar(dto)

        with operacion_db(self.session, "crear el rol"):
            rol = Role(nombre=nombre, descripcion=dto.descripcion, activo=dto.activo)
            self.session.add(rol)
            self.session.commit()
            self.session.refresh(rol)

        logger.info("Rol creado id=%s nombre=%s", rol.id, rol.nombre)
        return RolDTO.model_validate(rol)

    def update(self, dto: RolDTO) -> RolDTO:
        rol = self._get_or_404(dto.id)
        nombre = self._validar(dto, excluir_id=rol.id)

        with operacion_db(self.session, "actualizar el rol"):
            rol.nombre = nombre
            rol.descripcion = dto.descripcion
            self.session.add(rol)
            self.session.commit()
            self.session.refresh(rol)

        return RolDTO.model_validate(rol)

    def delete_logical(self, rol_id: int) -> None:
        rol = self._get_or_404(rol_id)
        with operacion_db(self.session, "eliminar lógicamente el rol"):
            rol.activo = False
            self.session.add(rol)
            self.session.commit()

    def delete_permanent(self, rol_id: int) -> None:
        rol = self._get_or_404(rol_id)

        with operacion_db(self.session, "eliminar el rol"):
            asignados = self.session.exec(
                select(func.count()).select_from(User).where(User.rol_id == rol.id)
            ).one()
        if asignados:
            raise ValidationException(
                f"El rol tiene {asignados} usuario(s) asignado(s) y no se puede eliminar"
            )

        with operacion_db(self.session, "eliminar el rol"):
            self.session.delete(rol)
            self.session.commit()

    # -------------------------
    # HELPERS
    # -------------------------
    def _get_or_404(self, rol_id: int | None) -> Role:
        if rol_id is None or rol_id <= 0:
            raise ValidationException("El ID del rol debe ser mayor que cero")
        if not id_en_rango(rol_id):
            raise EntityNotFoundException(ENTIDAD, rol_id)

        with operacion_db(self.session, "obtener el rol"):
            rol = self.session.get(Role, rol_id)
        if not rol:
            raise EntityNotFoundException(ENTIDAD, rol_id)
        return rol

    def _validar(self, dto: RolDTO, excluir_id: int | None = None) -> str:
        nombre = (dto.nombre or "").strip()
        if not nombre:
            raise ValidationException("El nombre del rol es obligatorio")

        q = select(Role).where(func.lower(Role.nombre) == nombre.lower())
        if excluir_id is not None:
            q = q.where(Role.id != excluir_id)

        with operacion_db(self.session, "validar el rol"):
            existente = self.session.exec(q).first()
        if existente:
            raise ValidationException(f"Ya existe un rol con el nombre '{nombre}'")

        return nombre
