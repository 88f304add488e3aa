import requests, os, logging
from typing import Optional
from .reverse_geocode import ReverseGeocodeRequest

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://maps.googleapis.com/maps/api/geocode"

class GeocodeService:
    """Client for the Google Geocoding API.

    Holds the HTTP session, the API key and the endpoint, and hands out request
    builders. The key is not checked locally; a bad key comes back from the API
    as a `GeocodeAPIError` (usually REQUEST_DENIED).

    `base_url` is plain shared state: do not call `set_base_url` while requests
    built from this service are executing on other threads.
    """
    API_KEY_ENV: str = "GOOGLE_MAPS_API_KEY"
    BASE_URL_ENV: str = "GOOGLE_MAPS_GEOCODE_URL"
    TIMEOUT_ENV: str = "GOOGLE_MAPS_TIMEOUT"

    def __init__(self, session: Optional[requests.Session], api_key: str,
                 base_url: str = DEFAULT_BASE_URL, timeout: Optional[float] = None):
        self.__owns_session: bool = session is None
        self.session: requests.Session = session if session is not None else requests.Session()
        self.api_key: str = api_key
        self.base_url: str = base_url.rstrip('/')
        self.timeout: Optional[float] = timeout

    @classmethod
    def from_env(cls, session: Optional[requests.Session] = None) -> 'GeocodeService':
        api_key = os.getenv(cls.API_KEY_ENV)
        if not api_key:
            raise ValueError("Google Maps API Key is missing. Set it in the environment variables.")

        base_url = os.getenv(cls.BASE_URL_ENV) or DEFAULT_BASE_URL
        timeout = os.getenv(cls.TIMEOUT_ENV)
        try:
            timeout_s = float(timeout) if timeout else None
        except ValueError:
            raise ValueError(f"{cls.TIMEOUT_ENV} must be a number of seconds, got {timeout!r}.") from None
        return cls(session, api_key, base_url=base_url, timeout=timeout_s)

    def set_base_url(self, url: str) -> None:
        logger.debug(f"Geocode base URL changed from {self.base_url} to {url}")
        self.base_url = url.rstrip('/')

    def reverse_geocode(self, lat: float, lng: float) -> ReverseGeocodeRequest:
        return ReverseGeocodeRequest(self, lat, lng)

    def close(self) -> None:
        if self.__owns_session:
            self.session.close()

    def __enter__(self) -> 'GeocodeService':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
