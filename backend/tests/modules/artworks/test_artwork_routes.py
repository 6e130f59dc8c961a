"""Tests for the artwork API endpoints."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from api.app import app
from api.dependencies import get_artwork_service
from api.middleware.auth import get_current_user
from modules.artworks.exceptions import ArtworkAccessDeniedError, ArtworkNotFoundError
from modules.artworks.models import (
    Artwork,
    ArtworkListItem,
    ArtworkStatus,
    ImageUploadResponse,
)
from shared.models import AuthenticatedUser

USER = AuthenticatedUser(id="user-1", email="seller@example.com")


@pytest.fixture
def service():
    service = MagicMock()
    artwork = Artwork(id="art-1", user_id="user-1", title="Harbour", price=1200)
    service.submit_artwork = AsyncMock(return_value=artwork)
    service.get_artwork = AsyncMock(return_value=artwork)
    service.list_latest = AsyncMock(return_value=[
        ArtworkListItem(id="art-1", title="Harbour", status=ArtworkStatus.APPROVED)
    ])
    service.list_for_user = AsyncMock(return_value=[])
    service.link_images = AsyncMock(return_value=2)
    service.upload_image = AsyncMock(return_value=ImageUploadResponse(
        file_path="art-1/1-abc.png", url="https://test.supabase.co/a.png"
    ))
    service.delete_image = AsyncMock(return_value=None)
    return service


@pytest.fixture
def client(service):
    app.dependency_overrides[get_artwork_service] = lambda: service
    app.dependency_overrides[get_current_user] = lambda: USER
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client(service):
    app.dependency_overrides[get_artwork_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestSubmit:
    def test_submit(self, client, service):
        response = client.post("/api/artworks", json={"title": "Harbour", "price": 1200})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["artwork"]["status"] == "pending"
        assert body["artwork"]["price_display"] == "£1,200"
        user_id, request = service.submit_artwork.await_args.args
        assert user_id == "user-1"
        assert request.title == "Harbour"

    def test_missing_title_is_400(self, client, service):
        response = client.post("/api/artworks", json={"price": 10})

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Missing required fields"
        assert "title" in body["details"]["missing"]
        service.submit_artwork.assert_not_awaited()

    def test_negative_price_is_400(self, client):
        response = client.post("/api/artworks", json={"title": "x", "price": -1})
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request"

    def test_requires_auth(self, anonymous_client):
        response = anonymous_client.post("/api/artworks", json={"title": "Harbour"})
        assert response.status_code == 401


class TestBrowse:
    def test_latest_is_public(self, anonymous_client, service):
        response = anonymous_client.get("/api/artworks", params={"limit": 6})
        assert response.status_code == 200
        assert response.json()[0]["id"] == "art-1"
        service.list_latest.assert_awaited_once_with(6)

    def test_mine(self, client, service):
        assert client.get("/api/artworks/mine").status_code == 200
        service.list_for_user.assert_awaited_once_with("user-1")

    def test_get_artwork(self, anonymous_client):
        response = anonymous_client.get("/api/artworks/art-1")
        assert response.status_code == 200
        assert response.json()["title"] == "Harbour"

    def test_get_artwork_not_found(self, anonymous_client, service):
        service.get_artwork.side_effect = ArtworkNotFoundError("missing")

        response = anonymous_client.get("/api/artworks/missing")

        assert response.status_code == 404
        assert response.json()["error"] == "ARTWORK_NOT_FOUND"


class TestImages:
    def test_link_images(self, client, service):
        response = client.post("/api/artwork-images", json={"images": [
            {"artwork_id": "art-1", "file_path": "art-1/a.png", "is_primary": True},
            {"artwork_id": "art-1", "file_path": "art-1/b.png"},
        ]})

        assert response.status_code == 200
        assert response.json() == {"success": True, "count": 2}

    def test_link_images_denied(self, client, service):
        service.link_images.side_effect = ArtworkAccessDeniedError("art-1", "user-1")
        response = client.post("/api/artwork-images", json={"images": [
            {"artwork_id": "art-1", "file_path": "art-1/a.png"},
        ]})
        assert response.status_code == 403

    def test_upload(self, client, service):
        response = client.post(
            "/api/artworks/art-1/images",
            files={"file": ("photo.png", b"png-bytes", "image/png")},
            data={"is_primary": "true"},
        )

        assert response.status_code == 200
        assert response.json()["file_path"] == "art-1/1-abc.png"
        service.upload_image.assert_awaited_once_with(
            "user-1", "art-1", "photo.png", b"png-bytes",
            content_type="image/png", is_primary=True,
        )

    def test_delete(self, client, service):
        response = client.delete("/api/artworks/art-1/images", params={"file_path": "art-1/a.png"})
        assert response.status_code == 204
        service.delete_image.assert_awaited_once_with("user-1", "art-1", "art-1/a.png")
