"""
Smoke tests for the Person Works API.

These tests run without network access: the TMDb credits source is replaced
through FastAPI dependency overrides.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from api import deps
from api.main import app
from person_works.integrations.tmdb.client import TmdbClientError


@pytest.fixture
def mock_source():
    """Create a mock credits source returning a small combined-credits payload."""
    source = MagicMock()
    source.get.return_value = {
        "cast": [
            {"id": 1, "title": "A", "vote_average": 7, "media_type": "movie", "release_date": "2001-01-01"},
            {"id": 3, "name": "C", "vote_average": 9, "media_type": "tv", "first_air_date": "2015-03-01"},
        ],
        "crew": [
            {"id": 1, "job": "Director", "media_type": "movie"},
            {"id": 2, "title": "B", "job": "Writer", "media_type": "tv"},
        ],
    }
    return source


@pytest.fixture
def client(mock_source):
    """Create a test client with the credits source overridden."""
    app.dependency_overrides[deps.get_credits_source] = lambda: mock_source
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealthEndpoints:
    """Test health check endpoints."""

    def test_root_returns_ok(self, client: TestClient):
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["service"] == "person-works"

    def test_health_returns_healthy(self, client: TestClient):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestWidgetEndpoint:
    def test_widget_descriptor(self, client: TestClient):
        response = client.get("/api/v1/works/widget")
        assert response.status_code == 200
        data = response.json()
        assert data["id"] == "gerenzuopin"
        assert [m["id"] for m in data["modules"]] == ["allWorks", "actorWorks", "directorWorks", "otherWorks"]


class TestWorksEndpoints:
    def test_all_works(self, client: TestClient, mock_source: MagicMock):
        response = client.get(
            "/api/v1/works/allWorks",
            params={"personId": "42", "sort_by": "vote_average.desc"},
        )
        assert response.status_code == 200
        assert response.headers["cache-control"] == "public, max-age=172800"
        data = response.json()
        assert [w["id"] for w in data] == [3, 1, 2]
        assert all(w["type"] == "tmdb" for w in data)
        assert data[0]["releaseDate"] == "2015-03-01"
        mock_source.get.assert_called_once_with("person/42/combined_credits", params={"language": "zh-CN"})

    def test_director_works_filtered_by_type(self, client: TestClient):
        response = client.get("/api/v1/works/directorWorks", params={"personId": "42", "type": "movie"})
        assert response.status_code == 200
        assert [w["id"] for w in response.json()] == [1]

    def test_other_works(self, client: TestClient):
        response = client.get("/api/v1/works/otherWorks", params={"personId": "42"})
        assert response.status_code == 200
        assert [w["id"] for w in response.json()] == [2]

    def test_unknown_module_returns_404(self, client: TestClient):
        response = client.get("/api/v1/works/producerWorks", params={"personId": "42"})
        assert response.status_code == 404

    def test_missing_person_id_returns_422(self, client: TestClient):
        response = client.get("/api/v1/works/allWorks")
        assert response.status_code == 422

    def test_invalid_type_returns_422(self, client: TestClient):
        response = client.get("/api/v1/works/allWorks", params={"personId": "42", "type": "person"})
        assert response.status_code == 422

    def test_fetch_failure_returns_502(self, client: TestClient, mock_source: MagicMock):
        mock_source.get.side_effect = TmdbClientError("TMDb request failed with HTTP 404.", status_code=404)
        response = client.get("/api/v1/works/actorWorks", params={"personId": "42"})
        assert response.status_code == 502
        assert response.json()["detail"] == "获取作品数据失败"

    def test_unconfigured_tmdb_returns_503(self, monkeypatch: pytest.MonkeyPatch):
        def _no_key():
            raise RuntimeError("TMDB_API_KEY is not set.")

        monkeypatch.setattr(deps, "TmdbClient", _no_key)
        response = TestClient(app).get("/api/v1/works/allWorks", params={"personId": "42"})
        assert response.status_code == 503
