# models/users.py
from sqlmodel import SQLModel, Field
from typing import Optional

class User(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    rol_id: int = Field(foreign_key="role.id")

    nombre: str
    email: str = Field(index=True, unique=True)
    password_hash: str
    activo: bool = True
