"""Precondiciones de los controllers y mapeo de fallas externas.

Los servicios se reemplazan con dobles vía dependency_overrides para ver
qué llega (o no) a la capa de servicios.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app import app
from controllers import rol_controller, user_controller
from dependencies.services import get_rol_service, get_user_service
from exceptions import ExternalServiceException


class ServicioEspia:
    """Registra cada llamada; nunca debería usarse en los casos de id <= 0."""

    def __init__(self):
        self.llamadas = []

    def __getattr__(self, nombre):
        def _llamada(*args, **kwargs):
            self.llamadas.append(nombre)
            raise AssertionError(f"no se esperaba llamar a {nombre}")
        return _llamada


class ServicioCaido:
    """Todas las operaciones fallan como si la base no respondiera."""

    def __getattr__(self, nombre):
        def _falla(*args, **kwargs):
            raise ExternalServiceException("Base de datos no disponible")
        return _falla


class ServicioRoto:
    def get_all(self):
        raise RuntimeError("algo inesperado")


ENTIDADES = [
    ("Rol", get_rol_service, {"nombre": "X"}),
    ("User", get_user_service, {"rol_id": 1, "nombre": "X", "email": "x@example.com"}),
]


@pytest.fixture
def reemplazar_servicio(client: TestClient):
    def _reemplazar(dependency, servicio):
        app.dependency_overrides[dependency] = lambda: servicio
        return servicio
    return _reemplazar


@pytest.mark.parametrize("entidad, dependency, body", ENTIDADES)
@pytest.mark.parametrize("id_invalido", [0, -1, -250])
def test_ids_no_positivos_no_llegan_al_servicio(
    client: TestClient,
    admin_headers: dict,
    reemplazar_servicio,
    entidad: str,
    dependency,
    body: dict,
    id_invalido: int,
) -> None:
    espia = reemplazar_servicio(dependency, ServicioEspia())

    respuestas = [
        client.put(f"/api/{entidad}", json={**body, "id": id_invalido}, headers=admin_headers),
        client.delete(f"/api/{entidad}/permanent/{id_invalido}", headers=admin_headers),
        client.put(f"/api/{entidad}/Logico/{id_invalido}", headers=admin_headers),
    ]

    assert [r.status_code for r in respuestas] == [400, 400, 400]
    assert all("mayor que cero" in r.json()["message"] for r in respuestas)
    assert espia.llamadas == []


@pytest.mark.parametrize("entidad, dependency, body", ENTIDADES)
def test_falla_externa_devuelve_500(
    client: TestClient,
    admin_headers: dict,
    reemplazar_servicio,
    entidad: str,
    dependency,
    body: dict,
) -> None:
    reemplazar_servicio(dependency, ServicioCaido())
    body = {**body, "password": "secreto1"}

    respuestas = [
        client.get(f"/api/{entidad}", headers=admin_headers),
        client.get(f"/api/{entidad}/1", headers=admin_headers),
        client.post(f"/api/{entidad}", json=body, headers=admin_headers),
        client.put(f"/api/{entidad}", json={**body, "id": 1}, headers=admin_headers),
        client.delete(f"/api/{entidad}/permanent/1", headers=admin_headers),
        client.put(f"/api/{entidad}/Logico/1", headers=admin_headers),
    ]

    for r in respuestas:
        assert r.status_code == 500
        assert r.json() == {"message": "Base de datos no disponible"}


@pytest.mark.parametrize("entidad, dependency, body", ENTIDADES)
def test_jwt_no_admin_falla_inesperada(
    client: TestClient,
    operador_headers: dict,
    reemplazar_servicio,
    entidad: str,
    dependency,
    body: dict,
) -> None:
    reemplazar_servicio(dependency, ServicioRoto())

    response = client.get(f"/api/{entidad}/jwt", headers=operador_headers)
    assert response.status_code == 500
    assert response.json() == {"message": "algo inesperado"}


def test_jwt_admin_no_usa_el_servicio(
    client: TestClient, admin_headers: dict, reemplazar_servicio
) -> None:
    espia = reemplazar_servicio(get_rol_service, ServicioEspia())

    response = client.get("/api/Rol/jwt", headers=admin_headers)
    assert response.status_code == 200
    assert espia.llamadas == []


@pytest.mark.parametrize(
    "entidad, modulo, mensaje",
    [
        ("Rol", rol_controller, "Error de base de datos al listar todos los roles"),
        ("User", user_controller, "Error de base de datos al listar los usuarios activos"),
    ],
)
def test_jwt_admin_falla_de_base(
    client: TestClient,
    admin_headers: dict,
    monkeypatch: pytest.MonkeyPatch,
    entidad: str,
    modulo,
    mensaje: str,
) -> None:
    def _select_caido(*args, **kwargs):
        raise OperationalError("SELECT * FROM tabla", {}, Exception("sin conexión"))

    monkeypatch.setattr(modulo, "select", _select_caido)

    response = client.get(f"/api/{entidad}/jwt", headers=admin_headers)
    assert response.status_code == 500
    assert response.json() == {"message": mensaje}
    assert "SELECT" not in response.json()["message"]
