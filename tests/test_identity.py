"""
Tests for identity providers and their wiring into the API.
"""
import pytest

from gamestore.api.deps import get_identity
from gamestore.domain.identity import Identity
from gamestore.services.identity import (
    JwtIdentityProvider,
    StubIdentityProvider,
    build_access_token,
    get_identity_provider,
)

SECRET = "test-secret"


class TestStubProvider:

    def test_always_yields_fixed_admin(self):
        provider = StubIdentityProvider()

        assert provider.resolve(None) == Identity(user_id=1, role="ADMIN")
        assert provider.resolve("Bearer whatever") == Identity(user_id=1, role="ADMIN")
        assert provider.resolve(None).is_admin


class TestJwtProvider:

    def test_valid_token(self):
        token = build_access_token(user_id=7, role="CLIENTE", secret=SECRET)

        identity = JwtIdentityProvider(secret=SECRET).resolve(f"Bearer {token}")

        assert identity == Identity(user_id=7, role="CLIENTE")
        assert not identity.is_admin

    @pytest.mark.parametrize("header", [None, "", "Bearer", "Basic abc", "Bearer not-a-jwt"])
    def test_malformed_header_yields_no_identity(self, header):
        assert JwtIdentityProvider(secret=SECRET).resolve(header) is None

    def test_wrong_secret_yields_no_identity(self):
        token = build_access_token(user_id=1, role="ADMIN", secret="other-secret")

        assert JwtIdentityProvider(secret=SECRET).resolve(f"Bearer {token}") is None

    def test_expired_token_yields_no_identity(self):
        token = build_access_token(user_id=1, role="ADMIN", secret=SECRET, expires_in_s=-10)

        assert JwtIdentityProvider(secret=SECRET).resolve(f"Bearer {token}") is None


class TestApiWiring:

    @pytest.fixture
    def jwt_client(self, test_client):
        # real get_identity, JWT provider behind it
        from gamestore.main import app

        app.dependency_overrides.pop(get_identity, None)
        app.dependency_overrides[get_identity_provider] = lambda: JwtIdentityProvider(secret=SECRET)
        return test_client

    def test_bearer_token_reaches_cart(self, jwt_client):
        token = build_access_token(user_id=2, role="CLIENTE", secret=SECRET)
        headers = {"Authorization": f"Bearer {token}"}

        jwt_client.post("/api/carrito/items", json={"juegoId": 1, "cantidad": 2}, headers=headers)
        data = jwt_client.get("/api/carrito", headers=headers).json()

        assert [(i["id"], i["cantidad"]) for i in data["items"]] == [(1, 2)]

    def test_no_token_is_401_on_cart_and_403_on_admin(self, jwt_client):
        assert jwt_client.get("/api/carrito").status_code == 401
        assert jwt_client.get("/listausers").status_code == 403

    def test_admin_token_lists_users(self, jwt_client):
        token = build_access_token(user_id=1, role="ADMIN", secret=SECRET)

        response = jwt_client.get("/listausers", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
