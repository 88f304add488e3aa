"""Client for the Google Geocoding reverse-geocoding API."""
from .errors import (
    DecodeError,
    GeocodeAPIError,
    GeocodeError,
    HTTPStatusError,
    MissingLocatorError,
    RequestAlreadyExecutedError,
)
from .models import AddressComponent, GeocodeResponse, GeocodeResult, Geometry, Location, Viewport
from .reverse_geocode import ReverseGeocodeRequest
from .service import DEFAULT_BASE_URL, GeocodeService

__all__ = [
    "DEFAULT_BASE_URL",
    "GeocodeService",
    "ReverseGeocodeRequest",
    "GeocodeResponse",
    "GeocodeResult",
    "AddressComponent",
    "Geometry",
    "Location",
    "Viewport",
    "GeocodeError",
    "MissingLocatorError",
    "RequestAlreadyExecutedError",
    "HTTPStatusError",
    "DecodeError",
    "GeocodeAPIError",
]
