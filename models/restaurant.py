from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from utils.constants import ALLOWED_DISTANCES_METERS, DEFAULT_DISTANCE_METERS


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RestaurantSearchPayload(BaseModel):
    latitude: float = Field(..., strict=True, ge=-90, le=90)
    longitude: float = Field(..., strict=True, ge=-180, le=180)
    distance: int = Field(DEFAULT_DISTANCE_METERS, strict=True, description="Search radius in meters")

    @field_validator("distance")
    @classmethod
    def check_distance(cls, value: int) -> int:
        """Only the radii offered by the client filter are accepted"""
        if value not in ALLOWED_DISTANCES_METERS:
            allowed = ", ".join(str(d) for d in ALLOWED_DISTANCES_METERS)
            raise ValueError(f"distance must be one of {allowed}")
        return value


class RestaurantLocation(CamelModel):
    latitude: float
    longitude: float


class RestaurantSummary(CamelModel):
    id: str
    name: str
    address: str
    website_uri: str = ""
    rating: float | None = None
    image_uri: str = ""
    location: RestaurantLocation | None = None


class RestaurantReview(CamelModel):
    author: str
    text: str
    relative_time: str


class RestaurantDetails(CamelModel):
    is_open_now: bool = False
    opening_hours: list[str] = Field(default_factory=list)
    reviews: list[RestaurantReview] = Field(default_factory=list)
