import asyncio

import httpx

from integrations.google_places import resolve_photo_uri, search_nearby_restaurants
from models.maps import GooglePlace
from models.restaurant import RestaurantLocation, RestaurantSearchPayload, RestaurantSummary
from utils.exceptions import MediaUnresolved
from utils.logging import logger


async def get_nearby_restaurants(
    client: httpx.AsyncClient, payload: RestaurantSearchPayload
) -> list[RestaurantSummary]:
    """Search nearby restaurants and resolve a photo for each of them.

    The search is all-or-nothing: its errors propagate to the caller. Photo
    lookups run concurrently and a failed one only blanks that place's image.
    Output order is the provider's order.
    """
    places = await search_nearby_restaurants(client, payload.latitude, payload.longitude, payload.distance)
    if not places:
        return []

    image_uris = await asyncio.gather(*(_get_image_uri(client, place) for place in places))
    return [_to_restaurant_summary(place, image_uri) for place, image_uri in zip(places, image_uris)]


async def _get_image_uri(client: httpx.AsyncClient, place: GooglePlace) -> str:
    """Resolve the first photo of a place, or an empty string"""
    if not place.photos:
        return ""

    # only the first reference is tried
    photo_name = place.photos[0].name
    try:
        return await resolve_photo_uri(client, photo_name)
    except MediaUnresolved as e:
        logger.warning(f"No image for place {place.id}: {e.message}")
        return ""


def _to_restaurant_summary(place: GooglePlace, image_uri: str) -> RestaurantSummary:
    location = None
    if place.location:
        location = RestaurantLocation(latitude=place.location.latitude, longitude=place.location.longitude)

    return RestaurantSummary(
        id=place.id,
        name=place.display_name.text if place.display_name else "",
        address=place.formatted_address,
        website_uri=place.website_uri or "",
        rating=place.rating,
        image_uri=image_uri,
        location=location,
    )
