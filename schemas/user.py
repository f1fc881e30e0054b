# path: schemas/user.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr


class UserDTO(BaseModel):
    """Lo que se devuelve hacia afuera (sin password_hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    rol_id: int
    nombre: str
    email: str
    activo: bool


class UserRequest(BaseModel):
    """
    Alta / modificación. En el alta el id se ignora y password es obligatoria.
    activo solo se usa en el alta: la modificación no lo toca (la baja va por /Logico).
    """

    id: Optional[int] = None
    rol_id: int
    nombre: str
    email: EmailStr
    password: str | None = None
    activo: bool = True
