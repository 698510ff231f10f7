class FoodGuideError(Exception):
    """Base error rendered as {"error": message} by the API"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequest(FoodGuideError):
    status_code = 400


class UpstreamUnavailable(FoodGuideError):
    status_code = 500


class PlaceNotFound(FoodGuideError):
    status_code = 404


class ConfigurationError(FoodGuideError):
    status_code = 500


class MediaUnresolved(FoodGuideError):
    """A single photo could not be resolved; recovered per place, never rendered"""
