from typing import AsyncGenerator

import httpx
from pydantic import ValidationError

from models.maps import GoogleNearbySearchResponse, GooglePhotoMedia, GooglePlace
from utils.constants import (
    GOOGLE_MAPS_API_KEY,
    MAX_RESULT_COUNT,
    PHOTO_MAX_HEIGHT_PX,
    PHOTO_MAX_WIDTH_PX,
    PLACES_API_BASE_URL,
    UPSTREAM_TIMEOUT_SECONDS,
)
from utils.exceptions import ConfigurationError, MediaUnresolved, UpstreamUnavailable
from utils.logging import logger

SEARCH_FIELD_MASK = ",".join(
    [
        "places.id",
        "places.displayName.text",
        "places.formattedAddress",
        "places.websiteUri",
        "places.rating",
        "places.location",
        "places.photos.name",
    ]
)


async def get_places_http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """One HTTP client per inbound request, every call bounded by the upstream timeout"""
    async with httpx.AsyncClient(timeout=UPSTREAM_TIMEOUT_SECONDS) as client:
        yield client


async def search_nearby_restaurants(
    client: httpx.AsyncClient, latitude: float, longitude: float, radius: int
) -> list[GooglePlace]:
    """Search restaurants within `radius` meters of a point using the Places API"""
    if not GOOGLE_MAPS_API_KEY:
        raise ConfigurationError("GOOGLE_MAPS_API_KEY is not configured")

    body = {
        "includedTypes": ["restaurant"],
        "maxResultCount": MAX_RESULT_COUNT,
        "locationRestriction": {
            "circle": {
                "center": {"latitude": latitude, "longitude": longitude},
                "radius": float(radius),
            }
        },
    }
    headers = {
        "Content-Type": "application/json",
        "X-Goog-Api-Key": GOOGLE_MAPS_API_KEY,
        "X-Goog-FieldMask": SEARCH_FIELD_MASK,
    }

    logger.info(f"Searching restaurants near ({latitude}, {longitude}) within {radius}m")
    try:
        response = await client.post(f"{PLACES_API_BASE_URL}/places:searchNearby", json=body, headers=headers)
        response.raise_for_status()
        places = GoogleNearbySearchResponse.model_validate(response.json()).places
    except httpx.HTTPStatusError as e:
        logger.error(f"Nearby search failed with status {e.response.status_code}")
        raise UpstreamUnavailable(f"Places search returned status {e.response.status_code}") from e
    except httpx.HTTPError as e:
        logger.error(f"Nearby search request failed: {e!r}")
        raise UpstreamUnavailable("Places search is unreachable") from e
    except (ValueError, ValidationError) as e:
        logger.error(f"Nearby search returned an unreadable body: {e}")
        raise UpstreamUnavailable("Places search returned an invalid response") from e

    logger.info(f"Nearby search returned {len(places)} places")
    return places


async def resolve_photo_uri(client: httpx.AsyncClient, photo_name: str) -> str:
    """Exchange a photo reference for a directly fetchable image URL"""
    params = {
        "maxHeightPx": PHOTO_MAX_HEIGHT_PX,
        "maxWidthPx": PHOTO_MAX_WIDTH_PX,
        "skipHttpRedirect": "true",
    }
    headers = {"Accept": "application/json", "X-Goog-Api-Key": GOOGLE_MAPS_API_KEY}
    try:
        response = await client.get(f"{PLACES_API_BASE_URL}/{photo_name}/media", params=params, headers=headers)
        response.raise_for_status()
        media = GooglePhotoMedia.model_validate(response.json())
    except httpx.HTTPStatusError as e:
        raise MediaUnresolved(f"Photo {photo_name} returned status {e.response.status_code}") from e
    except httpx.HTTPError as e:
        raise MediaUnresolved(f"Photo {photo_name} could not be fetched: {e!r}") from e
    except (ValueError, ValidationError) as e:
        raise MediaUnresolved(f"Photo {photo_name} returned an invalid response") from e

    if not media.photo_uri:
        raise MediaUnresolved(f"Photo {photo_name} has no photoUri")
    return media.photo_uri
