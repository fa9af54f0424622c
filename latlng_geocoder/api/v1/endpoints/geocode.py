from fastapi import APIRouter, Query
from pydantic import RootModel

from latlng_geocoder.api.deps import GeocoderDep
from latlng_geocoder.core.errors import InvalidParametersError
from latlng_geocoder.schemas.geocode import Bounds, GeocodeInput, GeocodeResponse

router = APIRouter(prefix="/geocode", tags=["geocode"])


class GeocodeRequest(RootModel[GeocodeInput]):
    pass


def parse_bounds(raw: str) -> Bounds:
    """`swLat,swLng|neLat,neLng` -> Bounds"""
    try:
        southwest, northeast = raw.split("|")
        sw_lat, sw_lng = southwest.split(",")
        ne_lat, ne_lng = northeast.split(",")
        return Bounds.model_validate(
            {
                "southwest": {"lat": sw_lat.strip(), "lng": sw_lng.strip()},
                "northeast": {"lat": ne_lat.strip(), "lng": ne_lng.strip()},
            }
        )
    except ValueError as exc:
        raise InvalidParametersError(f"Invalid bounds: {raw!r}", origin=raw) from exc


@router.get("/address", responses={200: {"model": GeocodeResponse}})
async def geocode_address(
    geocoder: GeocoderDep,
    address: str = Query(min_length=1),
    bounds: str | None = Query(default=None, description="swLat,swLng|neLat,neLng"),
):
    """
    주소(또는 장소명)를 좌표로 변환합니다. bounds 를 주면 해당 영역의 결과를 우선합니다.
    """
    if bounds:
        return await geocoder.geocode(address, parse_bounds(bounds))
    return await geocoder.geocode(address)


@router.get("/reverse", responses={200: {"model": GeocodeResponse}})
async def reverse_geocode(
    geocoder: GeocoderDep,
    lat: float = Query(ge=-90, le=90),
    lng: float = Query(ge=-180, le=180),
    language: str | None = None,
):
    """
    좌표를 사람이 읽을 수 있는 주소로 변환합니다.
    """
    if language:
        return await geocoder.geocode([lat, lng, language])
    return await geocoder.geocode(lat, lng)


@router.post("", responses={200: {"model": GeocodeResponse}})
async def geocode(payload: GeocodeRequest, geocoder: GeocoderDep):
    return await geocoder.geocode(payload.root)
