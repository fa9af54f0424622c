from fastapi import APIRouter

from latlng_geocoder.api.deps import GeocoderDep
from latlng_geocoder.schemas.geocode import HealthOut

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
async def health(geocoder: GeocoderDep):
    return HealthOut(geocoder_configured=geocoder.is_configured)
