from enum import IntEnum
from typing import Any


class GeocoderErrorCode(IntEnum):
    NOT_INITIATED = 0
    INVALID_PARAMETERS = 1
    FETCHING = 2
    PARSING = 3
    SERVER = 4


class GeocoderError(Exception):
    """
    Base failure of a geocoding call.
    `origin` keeps the underlying cause (exception, response or parsed body).
    """

    code: GeocoderErrorCode
    default_message = "Geocoding failed."

    def __init__(self, message: str | None = None, origin: Any = None):
        self.message = message or self.default_message
        self.origin = origin
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {"code": int(self.code), "message": self.message}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code.name}, message={self.message!r})"


class NotInitiatedError(GeocoderError):
    code = GeocoderErrorCode.NOT_INITIATED
    default_message = "Geocoder isn't initialized. Call configure() with your app's API key."


class InvalidParametersError(GeocoderError):
    code = GeocoderErrorCode.INVALID_PARAMETERS
    default_message = "Invalid parameters."


class FetchError(GeocoderError):
    code = GeocoderErrorCode.FETCHING
    default_message = "Error while fetching. Check your network."


class ParseError(GeocoderError):
    code = GeocoderErrorCode.PARSING
    default_message = "Error parsing response body into JSON."


class ServerError(GeocoderError):
    code = GeocoderErrorCode.SERVER
    default_message = "Error from the server while geocoding."

    @property
    def status(self) -> str | None:
        if isinstance(self.origin, dict):
            return self.origin.get("status")
        return None
