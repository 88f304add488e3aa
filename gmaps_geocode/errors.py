from typing import Optional


class GeocodeError(Exception):
    """Base class for errors raised by gmaps_geocode itself.

    Network failures are not wrapped: they reach the caller as the
    `requests.RequestException` the session raised.
    """


class MissingLocatorError(GeocodeError, ValueError):
    def __init__(self, message: str = "Lat,Lng or PlaceId is required"):
        super().__init__(message)


class RequestAlreadyExecutedError(GeocodeError):
    def __init__(self, message: str = "Request was already executed, build a new one to retry"):
        super().__init__(message)


class HTTPStatusError(GeocodeError):
    def __init__(self, status_code: int, body: str):
        self.status_code: int = status_code
        self.body: str = body
        super().__init__(f"bad resp {status_code}: {body}")


class DecodeError(GeocodeError):
    pass


class GeocodeAPIError(GeocodeError):
    """The API answered with a well-formed body whose status is not OK."""

    def __init__(self, status: str, message: Optional[str] = None):
        self.status: str = status
        self.message: Optional[str] = message
        super().__init__(f"{status}: {message}" if message else status)
