# path: routes/rol_routes.py
from fastapi import APIRouter, Body, Depends, Request
from sqlmodel import Session

from controllers.rol_controller import (
    actualizar_rol,
    crear_rol,
    eliminar_rol,
    eliminar_rol_logico,
    listar_roles,
    listar_roles_jwt,
    obtener_rol,
)
from database import get_session
from dependencies.auth import get_current_identity
from dependencies.services import get_rol_service
from schemas.rol import RolDTO
from services.permissions import Identidad
from services.rol_service import RolService

router = APIRouter(
    prefix="/api/Rol",
    tags=["Rol"],
    dependencies=[Depends(get_current_identity)],
)

ERRORES = {
    400: {"description": "Datos inválidos"},
    404: {"description": "Rol no encontrado"},
    500: {"description": "Error interno"},
}


@router.get("", response_model=list[RolDTO], responses={500: ERRORES[500]})
def get_all_roles(service: RolService = Depends(get_rol_service)):
    return listar_roles(service)


# antes de /{rol_id} para que "jwt" no se tome como id
@router.get("/jwt", response_model=list[RolDTO], responses={500: ERRORES[500]})
def get_all_roles_jwt(
    identidad: Identidad = Depends(get_current_identity),
    session: Session = Depends(get_session),
    service: RolService = Depends(get_rol_service),
):
    return listar_roles_jwt(identidad, session, service)


@router.get("/{rol_id}", response_model=RolDTO, name="obtener_rol_por_id", responses=ERRORES)
def get_rol_by_id(rol_id: int, service: RolService = Depends(get_rol_service)):
    return obtener_rol(rol_id, service)


@router.post(
    "",
    status_code=201,
    response_model=RolDTO,
    responses={400: ERRORES[400], 500: ERRORES[500]},
)
def create_rol(
    data: RolDTO,
    request: Request,
    service: RolService = Depends(get_rol_service),
):
    return crear_rol(data, request, service)


@router.put("", response_model=RolDTO, responses=ERRORES)
def update_rol(
    data: RolDTO | None = Body(default=None),
    service: RolService = Depends(get_rol_service),
):
    return actualizar_rol(data, service)


@router.delete("/permanent/{rol_id}", responses=ERRORES)
def delete_rol(rol_id: int, service: RolService = Depends(get_rol_service)):
    return eliminar_rol(rol_id, service)


@router.put("/Logico/{rol_id}", responses=ERRORES)
def delete_rol_logical(rol_id: int, service: RolService = Depends(get_rol_service)):
    return eliminar_rol_logico(rol_id, service)
