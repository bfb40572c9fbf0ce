"""
Component tests for /listausers
"""
from sqlalchemy.exc import SQLAlchemyError

from gamestore.repos.user_repo import UserRepo
from tests.conftest import CUSTOMER


def test_admin_gets_projected_user_list(test_client):
    response = test_client.get("/listausers")

    assert response.status_code == 200
    assert response.json() == [
        {
            "UsuarioID": 1,
            "Nombre": "Administrador",
            "Correo": "admin@gamestore.local",
            "Alias": "admin",
            "Foto": None,
        },
        {
            "UsuarioID": 2,
            "Nombre": "Cliente",
            "Correo": "cliente@gamestore.local",
            "Alias": "cliente",
            "Foto": None,
        },
    ]


def test_non_admin_is_forbidden(test_client, caller):
    caller["identity"] = CUSTOMER

    response = test_client.get("/listausers")

    assert response.status_code == 403
    assert response.json() == {"msg": "Acceso denegado: Se requiere rol de administrador."}


def test_anonymous_is_forbidden(test_client, caller):
    caller["identity"] = None

    assert test_client.get("/listausers").status_code == 403


def test_store_failure_is_reported_as_generic_500(test_client, monkeypatch):
    def broken(self):
        raise SQLAlchemyError("connection lost")

    monkeypatch.setattr(UserRepo, "list_users", broken)

    response = test_client.get("/listausers")

    assert response.status_code == 500
    assert response.json() == {"msg": "Error interno del servidor al obtener los usuarios."}
