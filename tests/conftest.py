import asyncio
import os

os.environ.setdefault("GOOGLE_MAPS_API_KEY", "AIzaTestKey")

import httpx
import pytest
from fastapi.testclient import TestClient

from app import app
from integrations.google_places import get_places_http_client


def make_place(place_id: str, name: str, photos: list[str] | None = None, **fields) -> dict:
    place = {
        "id": place_id,
        "displayName": {"text": name},
        "formattedAddress": f"{name} street 1",
        "rating": 4.2,
        "location": {"latitude": 25.03, "longitude": 121.56},
        "photos": [{"name": photo} for photo in photos or []],
    }
    place.update(fields)
    return place


class FakePlacesApi:
    """Stands in for places.googleapis.com and records every request it sees"""

    def __init__(self):
        self.places: list[dict] = []
        self.search_status = 200
        self.search_error: type[httpx.HTTPError] | None = None
        # photo name -> photoUri, HTTP status, or httpx exception class
        self.photos: dict = {}
        self.photo_delays: dict[str, float] = {}
        self.requests: list[httpx.Request] = []

    @property
    def search_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith("places:searchNearby")]

    @property
    def media_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith("/media")]

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.endswith("places:searchNearby"):
            if self.search_error:
                raise self.search_error("search failed", request=request)
            if self.search_status != 200:
                return httpx.Response(self.search_status, json={"error": {"code": self.search_status}})
            return httpx.Response(200, json={"places": self.places} if self.places else {})

        if path.endswith("/media"):
            name = path.removeprefix("/v1/").removesuffix("/media")
            if name in self.photo_delays:
                await asyncio.sleep(self.photo_delays[name])
            outcome = self.photos.get(name, 404)
            if isinstance(outcome, type):
                raise outcome("photo failed", request=request)
            if isinstance(outcome, int):
                return httpx.Response(outcome, json={"error": {"code": outcome}})
            return httpx.Response(200, json={"name": name, "photoUri": outcome})

        return httpx.Response(404)

    def async_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def places_api() -> FakePlacesApi:
    return FakePlacesApi()


@pytest.fixture
def api_client(places_api):
    async def _override():
        async with places_api.async_client() as client:
            yield client

    app.dependency_overrides[get_places_http_client] = _override
    yield TestClient(app)
    app.dependency_overrides.clear()
