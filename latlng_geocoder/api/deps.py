from typing import Annotated

from fastapi import Depends

from latlng_geocoder.services.google_geocoder import GoogleGeocoder, get_google_geocoder

GeocoderDep = Annotated[GoogleGeocoder, Depends(get_google_geocoder)]
