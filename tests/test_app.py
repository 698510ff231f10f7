from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from app import app
from utils.exceptions import ConfigurationError


@patch("app.get_gmap_client")
def test_startup_with_api_key(mock_get_client):
    with TestClient(app) as client:
        assert client.get("/api").status_code == 200
    mock_get_client.assert_called_once()


def test_startup_without_api_key_fails():
    with patch("utils.constants.GOOGLE_MAPS_API_KEY", ""):
        with pytest.raises(ConfigurationError):
            with TestClient(app):
                pass


@patch("app.get_gmap_client", side_effect=ValueError("Invalid API key provided."))
def test_startup_with_rejected_api_key_fails(_):
    with pytest.raises(ConfigurationError):
        with TestClient(app):
            pass


def test_missing_key_at_request_time_is_server_error(api_client, places_api):
    with patch("integrations.google_places.GOOGLE_MAPS_API_KEY", ""):
        resp = api_client.post("/api/res", json={"latitude": 25.03, "longitude": 121.56})

    assert resp.status_code == 500
    assert resp.json() == {"error": "GOOGLE_MAPS_API_KEY is not configured"}
    assert places_api.requests == []
