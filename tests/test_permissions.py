"""Tests de la política de privilegios (sin HTTP)."""
from services.permissions import Identidad, tiene_privilegio


def test_admin_tiene_privilegio() -> None:
    identidad = Identidad.desde_claims(1, "a@x.com", ["Administrador"])
    assert tiene_privilegio(identidad) is True


def test_otro_rol_no_tiene_privilegio() -> None:
    identidad = Identidad.desde_claims(2, "b@x.com", ["Operador", "Ventas"])
    assert tiene_privilegio(identidad) is False


def test_claim_de_rol_como_string() -> None:
    identidad = Identidad.desde_claims(3, None, "Administrador")
    assert identidad.roles == frozenset({"Administrador"})
    assert tiene_privilegio(identidad)


def test_sin_roles_ni_identidad() -> None:
    assert tiene_privilegio(Identidad.desde_claims(4, None, None)) is False
    assert tiene_privilegio(None) is False


def test_pertenencia_exacta() -> None:
    # no hay coincidencia parcial ni por mayúsculas
    identidad = Identidad.desde_claims(5, None, ["administrador", "Administradores"])
    assert tiene_privilegio(identidad) is False


def test_rol_explicito() -> None:
    identidad = Identidad.desde_claims(6, None, ["Auditor"])
    assert tiene_privilegio(identidad, "Auditor")
