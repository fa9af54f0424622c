"""
Turns loosely shaped geocoding arguments into a Google geocode JSON URL.

Accepted call shapes, checked in this order (first match wins):

1. ``latitude, longitude`` as two numbers (or numeric strings)
2. ``[latitude, longitude, language]``
3. ``[latitude, longitude]``
4. ``{"latitude": .., "longitude": .., "language"|"lang": ..}``, language defaults to ``"en"``
5. any other mapping with ``lat``/``lng`` style keys, no language
6. ``address, bounds``
7. ``address``

A single tagged input (``Coordinates``, ``Address`` ...) is used as-is.
"""
import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from latlng_geocoder.core.errors import InvalidParametersError, NotInitiatedError
from latlng_geocoder.schemas.geocode import (
    GEOCODE_INPUT_TYPES,
    Address,
    AddressWithBounds,
    Bounds,
    Coordinates,
    CoordinatesWithLanguage,
    NamedPoint,
    is_numberish,
)

logger = logging.getLogger(__name__)

GEOCODE_URL = "https://maps.google.com/maps/api/geocode/json"

# Characters encodeURIComponent leaves alone, on top of alphanumerics.
_UNRESERVED = "-_.!~*'()"


class GeocoderConfig(BaseModel):
    api_key: str
    options: dict[str, Any] = {}


def _pick(mapping: Mapping, *keys: str) -> Any:
    """First truthy value among `keys`, else the first one present (so 0 is kept)."""
    present = [mapping[key] for key in keys if mapping.get(key) is not None]
    for value in present:
        if value:
            return value
    return present[0] if present else None


def _classify(args: tuple) -> BaseModel | None:
    first = args[0] if args else None
    second = args[1] if len(args) > 1 else None

    if len(args) == 1 and isinstance(first, GEOCODE_INPUT_TYPES):
        return first
    if len(args) >= 2 and is_numberish(first) and is_numberish(second):
        return Coordinates(latitude=first, longitude=second)
    if isinstance(first, (list, tuple)) and len(first) == 3:
        return CoordinatesWithLanguage(latitude=first[0], longitude=first[1], language=first[2])
    if isinstance(first, (list, tuple)):
        if len(first) < 2:
            return None
        return Coordinates(latitude=first[0], longitude=first[1])
    if isinstance(first, Mapping) and "latitude" in first and "longitude" in first:
        return NamedPoint(
            latitude=_pick(first, "latitude", "lat"),
            longitude=_pick(first, "longitude", "lng"),
            language=first.get("language") or first.get("lang") or "en",
        )
    if isinstance(first, Mapping):
        latitude = _pick(first, "lat", "latitude")
        longitude = _pick(first, "lng", "longitude")
        if latitude is None or longitude is None:
            return None
        return Coordinates(latitude=latitude, longitude=longitude)
    if isinstance(first, str) and isinstance(second, (Mapping, Bounds)):
        return AddressWithBounds(address=first, bounds=second)
    if isinstance(first, str):
        return Address(address=first)
    return None


def classify(*args: Any) -> BaseModel:
    """Map a call's positional arguments onto one of the tagged geocode inputs."""
    try:
        geocode_input = _classify(args)
    except ValidationError as exc:
        raise InvalidParametersError(f"Invalid parameters: {args!r}", origin=args) from exc
    if geocode_input is None:
        raise InvalidParametersError(f"Invalid parameters: {args!r}", origin=args)
    return geocode_input


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_stringify(item) for item in value)
    return str(value)


def encode_value(value: Any) -> str:
    return quote(_stringify(value), safe=_UNRESERVED)


def encode_bounds(bounds: Bounds | Mapping) -> str:
    if not isinstance(bounds, Bounds):
        try:
            bounds = Bounds.model_validate(bounds)
        except ValidationError as exc:
            raise InvalidParametersError(f"Invalid bounds: {bounds!r}", origin=bounds) from exc
    sw, ne = bounds.southwest, bounds.northeast
    return (
        f"{encode_value(sw.lat)}{encode_value(',')}{encode_value(sw.lng)}"
        f"{encode_value('|')}"
        f"{encode_value(ne.lat)}{encode_value(',')}{encode_value(ne.lng)}"
    )


def encode_component(key: str, value: Any) -> str:
    if key == "bounds":
        return encode_bounds(value)
    return encode_value(value)


def to_query_string(params: Mapping[str, Any]) -> str:
    return "&".join(f"{key}={encode_component(key, value)}" for key, value in params.items() if value)


class GeocodeRequestBuilder:
    def __init__(self, config: GeocoderConfig | None = None):
        self.config = config

    def configure(self, api_key: str, options: Mapping[str, Any] | None = None) -> None:
        """Store the key and default query options, replacing any previous ones."""
        self.config = GeocoderConfig(api_key=api_key, options=dict(options or {}))

    @property
    def is_configured(self) -> bool:
        return bool(self.config and self.config.api_key)

    def _require_config(self) -> GeocoderConfig:
        if not self.is_configured:
            raise NotInitiatedError()
        return self.config

    def build_request(self, *args: Any) -> dict[str, Any]:
        self._require_config()
        return classify(*args).to_query()

    def build_url(self, query: Mapping[str, Any]) -> str:
        config = self._require_config()
        params = {"key": config.api_key, **config.options, **query}
        redacted = {k: v for k, v in params.items() if k != "key"}
        logger.debug(f"Geocode query: {redacted}")
        return f"{GEOCODE_URL}?{to_query_string(params)}"
