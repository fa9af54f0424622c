from __future__ import annotations

import httpx
import pytest

from latlng_geocoder.core.config import get_settings
from latlng_geocoder.services.google_geocoder import GoogleGeocoder
from tests.fixtures import OK_RESPONSE, Recorder


@pytest.fixture
def recorder() -> Recorder:
    return Recorder(lambda request: httpx.Response(200, json=OK_RESPONSE))


@pytest.fixture
def make_geocoder():
    def _make(handler, api_key: str | None = "KEY123", options: dict | None = None) -> GoogleGeocoder:
        return GoogleGeocoder(api_key, options, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
