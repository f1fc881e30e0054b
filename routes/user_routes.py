# path: routes/user_routes.py
from fastapi import APIRouter, Body, Depends, Request
from sqlmodel import Session

from controllers.user_controller import (
    actualizar_usuario,
    crear_usuario,
    eliminar_usuario,
    eliminar_usuario_logico,
    listar_usuarios,
    listar_usuarios_jwt,
    obtener_usuario,
)
from database import get_session
from dependencies.auth import get_current_identity
from dependencies.services import get_user_service
from schemas.user import UserDTO, UserRequest
from services.permissions import Identidad
from services.user_service import UserService

router = APIRouter(
    prefix="/api/User",
    tags=["Users"],
    dependencies=[Depends(get_current_identity)],
)

ERRORES = {
    400: {"description": "Datos inválidos"},
    404: {"description": "Usuario no encontrado"},
    500: {"description": "Error interno"},
}


@router.get("", response_model=list[UserDTO], responses={500: ERRORES[500]})
def get_all_users(service: UserService = Depends(get_user_service)):
    return listar_usuarios(service)


@router.get("/jwt", response_model=list[UserDTO], responses={500: ERRORES[500]})
def get_all_users_jwt(
    identidad: Identidad = Depends(get_current_identity),
    session: Session = Depends(get_session),
    service: UserService = Depends(get_user_service),
):
    return listar_usuarios_jwt(identidad, session, service)


@router.get("/{user_id}", response_model=UserDTO, name="obtener_usuario_por_id", responses=ERRORES)
def get_user_by_id(user_id: int, service: UserService = Depends(get_user_service)):
    return obtener_usuario(user_id, service)


@router.post(
    "",
    status_code=201,
    response_model=UserDTO,
    responses={400: ERRORES[400], 500: ERRORES[500]},
)
def create_user(
    data: UserRequest,
    request: Request,
    service: UserService = Depends(get_user_service),
):
    return crear_usuario(data, request, service)


@router.put("", response_model=UserDTO, responses=ERRORES)
def update_user(
    data: UserRequest | None = Body(default=None),
    service: UserService = Depends(get_user_service),
):
    return actualizar_usuario(data, service)


@router.delete("/permanent/{user_id}", responses=ERRORES)
def delete_user(user_id: int, service: UserService = Depends(get_user_service)):
    return eliminar_usuario(user_id, service)


@router.put("/Logico/{user_id}", responses=ERRORES)
def delete_user_logical(user_id: int, service: UserService = Depends(get_user_service)):
    return eliminar_usuario_logico(user_id, service)
