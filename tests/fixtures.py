"""Canned Google geocode responses and a request recorder for httpx.MockTransport."""

from __future__ import annotations

from typing import Callable

import httpx

OK_RESPONSE = {
    "status": "OK",
    "results": [
        {
            "formatted_address": "1600 Amphitheatre Pkwy, Mountain View, CA 94043, USA",
            "geometry": {"location": {"lat": 37.4224764, "lng": -122.0842499}},
            "place_id": "ChIJ2eUgeAK6j4ARbn5u_wAGqWA",
            "types": ["street_address"],
        }
    ],
}

ZERO_RESULTS_RESPONSE = {"status": "ZERO_RESULTS", "results": []}

REQUEST_DENIED_RESPONSE = {
    "status": "REQUEST_DENIED",
    "results": [],
    "error_message": "The provided API key is invalid.",
}


class Recorder:
    """Collects the requests a MockTransport handler has seen."""

    def __init__(self, response: Callable[[httpx.Request], httpx.Response]):
        self.response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response(request)
