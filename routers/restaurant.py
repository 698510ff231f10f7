import httpx
from fastapi import APIRouter, Depends

from business.nearby_restaurants import get_nearby_restaurants
from integrations.google_maps import fetch_restaurant_details
from integrations.google_places import get_places_http_client
from models.restaurant import RestaurantDetails, RestaurantSearchPayload, RestaurantSummary
from utils.logging import logger

router = APIRouter(prefix="/api/res", tags=["restaurants"])


@router.post("")
async def search_restaurants(
    payload: RestaurantSearchPayload, client: httpx.AsyncClient = Depends(get_places_http_client)
) -> list[RestaurantSummary]:
    """Get nearby restaurants with a resolved photo for each"""
    logger.info(f"Restaurant search at ({payload.latitude}, {payload.longitude}) within {payload.distance}m")
    return await get_nearby_restaurants(client, payload)


@router.get("/{place_id}")
def restaurant_details(place_id: str) -> RestaurantDetails:
    """Get open status, opening hours and reviews of a restaurant"""
    return fetch_restaurant_details(place_id)
