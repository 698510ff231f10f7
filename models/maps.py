from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class GoogleModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GoogleDisplayName(GoogleModel):
    text: str = Field("")


class GoogleLatLng(GoogleModel):
    latitude: float = Field(...)
    longitude: float = Field(...)


class GooglePhoto(GoogleModel):
    name: str = Field(...)


class GooglePlace(GoogleModel):
    """A place as returned by places:searchNearby under our field mask"""

    id: str = Field(...)
    display_name: GoogleDisplayName | None = Field(None)
    formatted_address: str = Field("")
    website_uri: str | None = Field(None)
    rating: float | None = Field(None)
    location: GoogleLatLng | None = Field(None)
    photos: list[GooglePhoto] = Field(default_factory=list)


class GoogleNearbySearchResponse(GoogleModel):
    places: list[GooglePlace] = Field(default_factory=list)


class GooglePhotoMedia(GoogleModel):
    name: str | None = Field(None)
    photo_uri: str | None = Field(None)
