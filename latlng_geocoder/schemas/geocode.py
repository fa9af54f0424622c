import math
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def is_numberish(value: Any) -> bool:
    """True for finite ints/floats and strings that parse as one. Booleans are not numbers here."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return math.isfinite(value)
    if isinstance(value, str):
        try:
            return math.isfinite(float(value))
        except ValueError:
            return False
    return False


def _check_numberish(value: Any) -> Any:
    if not is_numberish(value):
        raise ValueError(f"not a coordinate: {value!r}")
    return value


# Kept as given so "40.7" and 40.7 both render unchanged in the latlng string.
Coordinate = Annotated[Union[int, float, str], BeforeValidator(_check_numberish)]


def format_latlng(latitude: Any, longitude: Any) -> str:
    return f"{latitude},{longitude}"


class LatLng(BaseModel):
    lat: Coordinate
    lng: Coordinate


class Bounds(BaseModel):
    southwest: LatLng
    northeast: LatLng


class Coordinates(BaseModel):
    kind: Literal["coordinates"] = "coordinates"
    latitude: Coordinate
    longitude: Coordinate

    def to_query(self) -> dict[str, Any]:
        return {"latlng": format_latlng(self.latitude, self.longitude)}


class CoordinatesWithLanguage(BaseModel):
    kind: Literal["coordinates_with_language"] = "coordinates_with_language"
    latitude: Coordinate
    longitude: Coordinate
    language: str

    def to_query(self) -> dict[str, Any]:
        return {"latlng": format_latlng(self.latitude, self.longitude), "language": self.language}


class NamedPoint(BaseModel):
    """A point given as a {latitude, longitude[, language]} mapping. Language falls back to English."""

    kind: Literal["named_point"] = "named_point"
    latitude: Coordinate
    longitude: Coordinate
    language: str = "en"

    def to_query(self) -> dict[str, Any]:
        return {"latlng": format_latlng(self.latitude, self.longitude), "language": self.language}


class Address(BaseModel):
    kind: Literal["address"] = "address"
    address: str = Field(min_length=1)

    def to_query(self) -> dict[str, Any]:
        return {"address": self.address}


class AddressWithBounds(BaseModel):
    kind: Literal["address_with_bounds"] = "address_with_bounds"
    address: str = Field(min_length=1)
    bounds: Bounds

    def to_query(self) -> dict[str, Any]:
        return {"address": self.address, "bounds": self.bounds}


GeocodeInput = Annotated[
    Union[Coordinates, CoordinatesWithLanguage, NamedPoint, Address, AddressWithBounds],
    Field(discriminator="kind"),
]

GEOCODE_INPUT_TYPES = (Coordinates, CoordinatesWithLanguage, NamedPoint, Address, AddressWithBounds)


class GeocodeResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    status: str
    results: list[dict[str, Any]] = []
    error_message: str | None = None


class HealthOut(BaseModel):
    status: str = "ok"
    geocoder_configured: bool
