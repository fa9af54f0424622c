from latlng_geocoder.services.google_geocoder import GoogleGeocoder, get_google_geocoder
from latlng_geocoder.services.request_builder import GeocodeRequestBuilder, GeocoderConfig, classify

__all__ = [
    "GeocodeRequestBuilder",
    "GeocoderConfig",
    "GoogleGeocoder",
    "classify",
    "get_google_geocoder",
]
