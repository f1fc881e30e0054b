# path: schemas/rol.py
from typing import Optional
from pydantic import BaseModel, ConfigDict


class RolDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    nombre: str
    descripcion: str | None = None
    # solo se usa en el alta, update no lo modifica
    activo: bool = True
