# path: controllers/rol_controller.py
from __future__ import annotations

import logging

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlmodel import Session, select

from controllers.respuestas import bad_request, mensaje, respuesta_error
from exceptions import AppException
from models.role import Role
from schemas.rol import RolDTO
from services.db_errors import operacion_db
from services.permissions import Identidad, tiene_privilegio
from services.rol_service import RolService

logger = logging.getLogger(__name__)


def listar_roles(service: RolService):
    try:
        return service.get_all()
    except Exception as exc:
        return respuesta_error(exc, "Error al obtener roles", logger)


def listar_roles_jwt(identidad: Identidad, session: Session, service: RolService):
    try:
        if tiene_privilegio(identidad):
            # admin: todos los roles, activos o no, directo de la base
            with operacion_db(session, "listar todos los roles"):
                roles = session.exec(select(Role).order_by(Role.id)).all()
            return [RolDTO.model_validate(r) for r in roles]

        return service.get_all()
    except Exception as exc:
        return respuesta_error(exc, "Error al obtener los roles con JWT", logger)


def obtener_rol(rol_id: int, service: RolService):
    try:
        return service.get_by_id(rol_id)
    except AppException as exc:
        return respuesta_error(exc, f"Error al obtener rol con ID {rol_id}", logger)


def crear_rol(dto: RolDTO, request: Request, service: RolService):
    try:
        creado = service.create(dto)
    except AppException as exc:
        return respuesta_error(exc, "Error al crear el rol", logger)

    location = request.url_for("obtener_rol_por_id", rol_id=creado.id)
    return JSONResponse(
        status_code=201,
        content=jsonable_encoder(creado),
        headers={"Location": str(location)},
    )


def actualizar_rol(dto: RolDTO | None, service: RolService):
    if dto is None or dto.id is None or dto.id <= 0:
        return bad_request("El ID del rol debe ser mayor que cero y no nulo")

    try:
        return service.update(dto)
    except AppException as exc:
        return respuesta_error(exc, f"Error al actualizar el rol con ID {dto.id}", logger)


def eliminar_rol(rol_id: int, service: RolService):
    if rol_id <= 0:
        return bad_request("El ID del rol debe ser mayor que cero")

    try:
        service.delete_permanent(rol_id)
    except AppException as exc:
        return respuesta_error(exc, f"Error al eliminar el rol con ID {rol_id}", logger)
    return mensaje("Rol eliminado correctamente")


def eliminar_rol_logico(rol_id: int, service: RolService):
    if rol_id <= 0:
        return bad_request("El ID del rol debe ser mayor que cero")

    try:
        service.delete_logical(rol_id)
    except AppException as exc:
        return respuesta_error(exc, f"Error al eliminar lógicamente el rol con ID {rol_id}", logger)
    return mensaje("Rol eliminado lógico correctamente")
