# path: services/permissions.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

import config

ROL_ADMINISTRADOR = config.ADMIN_ROLE


@dataclass(frozen=True)
class Identidad:
    """Quién hace el request, armado a partir de los claims del token."""

    user_id: int
    email: str | None = None
    roles: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def desde_claims(cls, user_id: int, email: str | None, roles: Iterable[str] | str | None) -> "Identidad":
        if roles is None:
            roles = ()
        elif isinstance(roles, str):
            roles = (roles,)
        return cls(user_id=user_id, email=email, roles=frozenset(str(r) for r in roles))


def tiene_privilegio(identidad: Identidad | None, rol: str = ROL_ADMINISTRADOR) -> bool:
    # pertenencia simple, igual que el claim de rol del token
    if identidad is None:
        return False
    return rol in identidad.roles
