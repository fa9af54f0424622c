import logging
from collections.abc import Mapping
from typing import Any

import httpx

from latlng_geocoder.core.config import get_settings
from latlng_geocoder.core.errors import FetchError, ParseError, ServerError
from latlng_geocoder.services.request_builder import GeocodeRequestBuilder, GeocoderConfig

logger = logging.getLogger(__name__)


class GoogleGeocoder(GeocodeRequestBuilder):
    """
    Google geocoding & reverse geocoding over a single GET request.
    No caching, no retries; every failure is raised as a GeocoderError.
    """

    def __init__(
        self,
        api_key: str | None = None,
        options: Mapping[str, Any] | None = None,
        *,
        timeout: float | None = 10,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        config = GeocoderConfig(api_key=api_key, options=dict(options or {})) if api_key else None
        super().__init__(config)
        self.timeout = timeout
        self.transport = transport
        self.http_client = http_client

    async def _get(self, url: str) -> httpx.Response:
        if self.http_client is not None:
            return await self.http_client.get(url)
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            return await client.get(url)

    async def execute(self, url: str) -> dict[str, Any]:
        try:
            resp = await self._get(url)
        except httpx.HTTPError as exc:
            logger.error(f"Geocode fetch failed: {exc!r}")
            raise FetchError(origin=exc) from exc

        try:
            data = resp.json()
        except ValueError as exc:
            logger.error(f"Geocode response is not JSON (HTTP {resp.status_code})")
            raise ParseError(origin=resp) from exc

        # Only the body status counts; the HTTP status code is not checked.
        status = data.get("status") if isinstance(data, dict) else None
        if status != "OK":
            logger.error(f"Geocode server status: {status!r}")
            raise ServerError(origin=data)
        return data

    async def geocode(self, *args: Any) -> dict[str, Any]:
        """
        Geocode an address or reverse geocode coordinates.
        See `request_builder` for the accepted argument shapes.
        """
        query = self.build_request(*args)
        return await self.execute(self.build_url(query))


def get_google_geocoder() -> GoogleGeocoder:
    settings = get_settings()
    return GoogleGeocoder(
        settings.google_maps_api_key,
        settings.geocode_options,
        timeout=settings.http_timeout,
    )
