from functools import cache

import googlemaps
from googlemaps.exceptions import ApiError, HTTPError, Timeout, TransportError

from models.restaurant import RestaurantDetails, RestaurantReview
from utils.constants import GOOGLE_MAPS_API_KEY, UPSTREAM_TIMEOUT_SECONDS
from utils.exceptions import PlaceNotFound, UpstreamUnavailable
from utils.logging import logger

DETAIL_FIELDS = ["opening_hours", "reviews"]
NOT_FOUND_STATUSES = {"NOT_FOUND", "INVALID_REQUEST"}


@cache
def get_gmap_client() -> googlemaps.Client:
    """Build the Google Maps client once per process.

    The library re-sends 5xx responses with backoff; `retry_timeout` caps the
    whole lookup, retries included, at the upstream timeout.
    """
    return googlemaps.Client(
        key=GOOGLE_MAPS_API_KEY,
        timeout=UPSTREAM_TIMEOUT_SECONDS,
        retry_timeout=UPSTREAM_TIMEOUT_SECONDS,
        retry_over_query_limit=False,
    )


def fetch_restaurant_details(place_id: str) -> RestaurantDetails:
    """Fetch open status, opening hours and reviews for a place"""
    logger.info(f"Fetching details for place_id: {place_id}")
    try:
        response = get_gmap_client().place(place_id=place_id, fields=DETAIL_FIELDS)
    except ApiError as e:
        if e.status in NOT_FOUND_STATUSES:
            logger.info(f"Place {place_id} not found: {e.status}")
            raise PlaceNotFound(f"Restaurant {place_id} not found") from e
        logger.error(f"Place details for {place_id} failed: {e}")
        raise UpstreamUnavailable("Places details lookup failed") from e
    except (HTTPError, Timeout, TransportError) as e:
        logger.error(f"Place details for {place_id} unreachable: {e!r}")
        raise UpstreamUnavailable("Places details lookup is unreachable") from e

    details = response.get("result")
    if details is None:
        raise PlaceNotFound(f"Restaurant {place_id} not found")
    return _to_restaurant_details(details)


def _to_restaurant_details(details: dict) -> RestaurantDetails:
    """Reshape a Place Details result into the client-facing details"""
    opening_hours = details.get("opening_hours", {})
    return RestaurantDetails(
        is_open_now=opening_hours.get("open_now", False),
        opening_hours=opening_hours.get("weekday_text", []),
        reviews=[
            RestaurantReview(
                author=r.get("author_name", ""),
                text=r.get("text", ""),
                relative_time=r.get("relative_time_description", ""),
            )
            for r in details.get("reviews", [])
        ],
    )
