# path: controllers/user_controller.py
from __future__ import annotations

import logging

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlmodel import Session, select

from controllers.respuestas import bad_request, mensaje, respuesta_error
from exceptions import AppException
from models.users import User
from schemas.user import UserDTO, UserRequest
from services.db_errors import operacion_db
from services.permissions import Identidad, tiene_privilegio
from services.user_service import UserService

logger = logging.getLogger(__name__)


def listar_usuarios(service: UserService):
    try:
        return service.get_all()
    except Exception as exc:
        return respuesta_error(exc, "Error al obtener usuarios", logger)


def listar_usuarios_jwt(identidad: Identidad, session: Session, service: UserService):
    try:
        if tiene_privilegio(identidad):
            with operacion_db(session, "listar los usuarios activos"):
                users = session.exec(
                    select(User)
                    .where(User.activo == True)  # noqa: E712
                    .order_by(User.id)
                ).all()
            return [UserDTO.model_validate(u) for u in users]

        return service.get_all()
    except Exception as exc:
        return respuesta_error(exc, "Error al obtener los usuarios con JWT", logger)


def obtener_usuario(user_id: int, service: UserService):
    try:
        return service.get_by_id(user_id)
    except AppException as exc:
        return respuesta_error(exc, f"Error al obtener usuario con ID {user_id}", logger)


def crear_usuario(dto: UserRequest, request: Request, service: UserService):
    try:
        creado = service.create(dto)
    except AppException as exc:
        return respuesta_error(exc, "Error al crear el usuario", logger)

    location = request.url_for("obtener_usuario_por_id", user_id=creado.id)
    return JSONResponse(
        status_code=201,
        content=jsonable_encoder(creado),
        headers={"Location": str(location)},
    )


def actualizar_usuario(dto: UserRequest | None, service: UserService):
    if dto is None or dto.id is None or dto.id <= 0:
        return bad_request("El ID del usuario debe ser mayor que cero y no nulo")

    try:
        return service.update(dto)
    except AppException as exc:
        return respuesta_error(exc, f"Error al actualizar el usuario con ID {dto.id}", logger)


def eliminar_usuario(user_id: int, service: UserService):
    if user_id <= 0:
        return bad_request("El ID del usuario debe ser mayor que cero")

    try:
        service.delete_permanent(user_id)
    except AppException as exc:
        return respuesta_error(exc, f"Error al eliminar el usuario con ID {user_id}", logger)
    return mensaje("Usuario eliminado correctamente")


def eliminar_usuario_logico(user_id: int, service: UserService):
    if user_id <= 0:
        return bad_request("El ID del usuario debe ser mayor que cero")

    try:
        service.delete_logical(user_id)
    except AppException as exc:
        return respuesta_error(exc, f"Error al eliminar lógicamente el usuario con ID {user_id}", logger)
    return mensaje("Usuario eliminado lógico correctamente")
