"""
latlng-geocoder.

Google geocoding & reverse geocoding client, with a small FastAPI service on top.
"""

from latlng_geocoder.core.errors import (
    FetchError,
    GeocoderError,
    GeocoderErrorCode,
    InvalidParametersError,
    NotInitiatedError,
    ParseError,
    ServerError,
)
from latlng_geocoder.schemas.geocode import (
    Address,
    AddressWithBounds,
    Bounds,
    Coordinates,
    CoordinatesWithLanguage,
    LatLng,
    NamedPoint,
)
from latlng_geocoder.services.google_geocoder import GoogleGeocoder

__version__ = "0.1.0"

__all__ = [
    "Address",
    "AddressWithBounds",
    "Bounds",
    "Coordinates",
    "CoordinatesWithLanguage",
    "FetchError",
    "GeocoderError",
    "GeocoderErrorCode",
    "GoogleGeocoder",
    "InvalidParametersError",
    "LatLng",
    "NamedPoint",
    "NotInitiatedError",
    "ParseError",
    "ServerError",
]
