from fastapi import APIRouter

from latlng_geocoder.api.v1.endpoints import geocode, health

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router)
api_router.include_router(geocode.router)
