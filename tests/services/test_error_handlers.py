"""Error Handlers — unknown routes, blank identifiers, unexpected failures.

Tests:
    - Unknown route → 404 {"error": "Route non trouvée", "message": ...}
    - Blank id segment → 400 "ID ... requis"
    - Unexpected exception → 500, message echoed outside production only
    - Store errors map through StoreErrorKind
"""

import pytest
from httpx import ASGITransport, AsyncClient

from cynova.api.error_handlers import build_server_error_body
from cynova.config import get_settings
from cynova.core.errors import StoreError, StoreErrorKind
from cynova.main import app
from cynova.services.product_service import ProductService


async def test_unknown_route(client):
    response = await client.get("/api/unknown")
    assert response.status_code == 404
    assert response.json() == {
        "error": "Route non trouvée",
        "message": "La route /api/unknown n'existe pas",
    }


@pytest.mark.parametrize("path, error", [
    ("/api/products/%20", "ID du produit requis"),
    ("/api/ingredients/%20", "ID de l'ingrédient requis"),
    ("/api/blogs/%20", "ID du blog requis"),
    ("/api/users/%20", "ID de l'utilisateur requis"),
])
async def test_blank_identifier(client, path, error):
    response = await client.get(path)
    assert response.status_code == 400
    assert response.json() == {"error": error}


@pytest.fixture
async def raw_client(client):
    """Client that returns 500 responses instead of re-raising app errors."""
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


async def test_unexpected_error_returns_500(raw_client, monkeypatch):
    async def explode(self, record_id):
        raise RuntimeError("connexion perdue")

    monkeypatch.setattr(ProductService, "get_by_id", explode)

    response = await raw_client.get("/api/products/abc")
    assert response.status_code == 500
    assert response.json() == {"error": "Erreur serveur", "message": "connexion perdue"}


async def test_store_error_maps_by_kind(client, monkeypatch):
    async def fail(self, record_id):
        raise StoreError(StoreErrorKind.FOREIGN_KEY_VIOLATION, "delete")

    monkeypatch.setattr(ProductService, "delete", fail)

    response = await client.delete("/api/products/abc")
    assert response.status_code == 400
    assert response.json()["error"] == "Violation de contrainte"


def test_server_error_body_hides_detail_in_production(monkeypatch):
    monkeypatch.setattr(get_settings(), "environment", "production")
    assert build_server_error_body(RuntimeError("secret")) == {
        "error": "Erreur serveur",
        "message": "Une erreur est survenue",
    }


def test_server_error_body_outside_production():
    assert build_server_error_body(ValueError()) == {
        "error": "Erreur serveur",
        "message": "ValueError",
    }
