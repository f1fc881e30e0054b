# path: dependencies/services.py
from fastapi import Depends
from sqlmodel import Session

from database import get_session
from services.rol_service import RolService
from services.user_service import UserService


def get_rol_service(session: Session = Depends(get_session)) -> RolService:
    return RolService(session)


def get_user_service(session: Session = Depends(get_session)) -> UserService:
    return UserService(session)
