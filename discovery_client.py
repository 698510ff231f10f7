"""Command line client for the FoodGuide API.

    python discovery_client.py 25.0330 121.5654 --distance 1000 --details 1

Searches restaurants around a position, prints them, and optionally fetches
opening hours and reviews for one of the results.
"""
import argparse

import httpx

from models.restaurant import RestaurantDetails, RestaurantSummary
from utils.constants import ALLOWED_DISTANCES_METERS, API_BASE_URL, DEFAULT_DISTANCE_METERS


class DiscoveryClientError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class DiscoveryClient:
    def __init__(self, http_client: httpx.Client):
        self.http_client = http_client

    def search(
        self, latitude: float, longitude: float, distance: int = DEFAULT_DISTANCE_METERS
    ) -> list[RestaurantSummary]:
        """Get the restaurants around a position"""
        response = self.http_client.post(
            "/api/res", json={"latitude": latitude, "longitude": longitude, "distance": distance}
        )
        return [RestaurantSummary.model_validate(item) for item in _json_or_raise(response)]

    def get_details(self, place_id: str) -> RestaurantDetails:
        """Get opening hours and reviews of one restaurant"""
        response = self.http_client.get(f"/api/res/{place_id}")
        return RestaurantDetails.model_validate(_json_or_raise(response))


def _json_or_raise(response: httpx.Response):
    if response.is_success:
        return response.json()
    try:
        message = response.json().get("error", response.text)
    except (ValueError, AttributeError):
        message = response.text
    raise DiscoveryClientError(response.status_code, message)


def format_summary(index: int, restaurant: RestaurantSummary) -> str:
    rating = restaurant.rating if restaurant.rating is not None else "-"
    lines = [f"{index}. {restaurant.name} ({rating})", f"   {restaurant.address}"]
    if restaurant.website_uri:
        lines.append(f"   {restaurant.website_uri}")
    if restaurant.image_uri:
        lines.append(f"   photo: {restaurant.image_uri}")
    return "\n".join(lines)


def format_details(details: RestaurantDetails) -> str:
    lines = ["Open now" if details.is_open_now else "Closed now"]
    lines.extend(f"  {hours}" for hours in details.opening_hours)
    for review in details.reviews:
        lines.append(f'- {review.author} ({review.relative_time}): "{review.text}"')
    return "\n".join(lines)


def main(argv: list[str] | None = None, http_client: httpx.Client | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find restaurants near a position")
    parser.add_argument("latitude", type=float)
    parser.add_argument("longitude", type=float)
    parser.add_argument("--distance", type=int, default=DEFAULT_DISTANCE_METERS, choices=ALLOWED_DISTANCES_METERS)
    parser.add_argument("--details", type=int, metavar="N", help="show details of the N-th result")
    parser.add_argument("--api", default=API_BASE_URL, help="FoodGuide API base URL")
    args = parser.parse_args(argv)

    owns_client = http_client is None
    http_client = http_client or httpx.Client(base_url=args.api, timeout=30)
    client = DiscoveryClient(http_client)
    try:
        restaurants = client.search(args.latitude, args.longitude, args.distance)
        if not restaurants:
            print("No restaurants nearby.")
            return 0
        for index, restaurant in enumerate(restaurants, start=1):
            print(format_summary(index, restaurant))

        if args.details:
            if not 1 <= args.details <= len(restaurants):
                print(f"No result number {args.details}.")
                return 1
            selected = restaurants[args.details - 1]
            print(f"\n{selected.name}")
            print(format_details(client.get_details(selected.id)))
    except DiscoveryClientError as e:
        print(f"Request failed with {e.status_code}: {e.message}")
        return 1
    except httpx.HTTPError as e:
        print(f"Could not reach {args.api}: {e}")
        return 1
    finally:
        if owns_client:
            http_client.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
