import os

from dotenv import load_dotenv

from utils.exceptions import ConfigurationError

load_dotenv()


GOOGLE_MAPS_API_KEY = os.getenv("GOOGLE_MAPS_API_KEY", "")
PLACES_API_BASE_URL = os.getenv("PLACES_API_BASE_URL", "https://places.googleapis.com/v1")
UPSTREAM_TIMEOUT_SECONDS = float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "5"))
MAX_RESULT_COUNT = int(os.getenv("MAX_RESULT_COUNT", "10"))
PHOTO_MAX_WIDTH_PX = int(os.getenv("PHOTO_MAX_WIDTH_PX", "400"))
PHOTO_MAX_HEIGHT_PX = int(os.getenv("PHOTO_MAX_HEIGHT_PX", "400"))
DEFAULT_DISTANCE_METERS = 500
ALLOWED_DISTANCES_METERS = (500, 1000, 2000, 3000)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")


def validate_configuration() -> None:
    """Fail fast when the Google Maps credential is missing"""
    if not GOOGLE_MAPS_API_KEY:
        raise ConfigurationError("GOOGLE_MAPS_API_KEY is not configured")
