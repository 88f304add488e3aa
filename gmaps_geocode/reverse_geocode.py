import logging
from typing import TYPE_CHECKING
from urllib.parse import quote_plus, urlencode
from pydantic import ValidationError
from .errors import DecodeError, GeocodeAPIError, HTTPStatusError, MissingLocatorError, RequestAlreadyExecutedError
from .models.google_maps_geocoding_response import GeocodeResponse

if TYPE_CHECKING:
    from .service import GeocodeService

logger = logging.getLogger(__name__)

class ReverseGeocodeRequest:
    """One reverse-geocode call: coordinates or a place ID in, addresses out.

    Built by `GeocodeService.reverse_geocode`, configured with the `with_*`
    setters and sent once with `execute()`. A builder cannot be reused after
    `execute()`, successful or not; build a new one to retry.

    Coordinates of exactly (0, 0) count as "not set", so the origin itself can
    only be looked up through a place ID.
    """
    JSON_PATH: str = "/json"
    STATUS_OK: str = "OK"
    TYPES_SEPARATOR: str = "|"

    def __init__(self, service: 'GeocodeService', lat: float, lng: float):
        self.service: 'GeocodeService' = service
        self.lat: float = lat
        self.lng: float = lng
        self.place_id: str = ''
        self.language: str = ''
        self.result_type: list[str] = []
        self.location_type: list[str] = []
        self.executed: bool = False

    def __check_configurable(self) -> None:
        if self.executed:
            raise RequestAlreadyExecutedError()

    def with_place_id(self, place_id: str) -> 'ReverseGeocodeRequest':
        self.__check_configurable()
        self.place_id = place_id
        return self

    def with_language(self, language: str) -> 'ReverseGeocodeRequest':
        self.__check_configurable()
        self.language = language
        return self

    def with_result_type(self, *types: str) -> 'ReverseGeocodeRequest':
        """Restrict results to address types such as country, street_address or postal_code."""
        self.__check_configurable()
        self.result_type.extend(t for t in types if t not in self.result_type)
        return self

    def with_location_type(self, *types: str) -> 'ReverseGeocodeRequest':
        """Restrict results to location types such as ROOFTOP or APPROXIMATE."""
        self.__check_configurable()
        self.location_type.extend(t for t in types if t not in self.location_type)
        return self

    @property
    def has_coordinates(self) -> bool:
        return self.lat != 0 or self.lng != 0

    def validate(self) -> None:
        if self.has_coordinates or self.place_id:
            return
        raise MissingLocatorError()

    def build_query(self) -> str:
        params: dict[str, str] = {"key": self.service.api_key}

        if self.has_coordinates:
            params["latlng"] = f"{self.lat:f},{self.lng:f}"
        if self.place_id:
            params["place_id"] = self.place_id
        if self.language:
            params["language"] = self.language
        if self.result_type:
            params["result_type"] = self.TYPES_SEPARATOR.join(self.result_type)
        if self.location_type:
            params["location_type"] = self.TYPES_SEPARATOR.join(self.location_type)

        return urlencode(sorted(params.items()))

    def url(self) -> str:
        return f"{self.service.base_url}{self.JSON_PATH}?{self.build_query()}"

    def __redacted_url(self) -> str:
        return self.url().replace(f"key={quote_plus(self.service.api_key)}", "key=***", 1)

    def execute(self) -> GeocodeResponse:
        self.__check_configurable()
        self.validate()
        self.executed = True

        logger.debug(f"GET {self.__redacted_url()}")
        response = self.service.session.get(self.url(), timeout=self.service.timeout)
        if response.status_code != 200:
            logger.warning(f"Geocoding HTTP error ({response.status_code}) for ({self.lat}, {self.lng})")
            raise HTTPStatusError(response.status_code, response.text)

        try:
            # raw bytes: JSON is UTF-8 whatever charset requests guesses
            data = GeocodeResponse.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning(f"Parsing error: {e}")
            raise DecodeError(f"Unable to decode geocode response: {e}") from e

        if data.status != self.STATUS_OK:
            logger.warning(f"Geocoding status {data.status} for ({self.lat}, {self.lng}): {data.error_message}")
            raise GeocodeAPIError(data.status, data.error_message)

        logger.debug(f"Geocoding returned {len(data.results)} result(s)")
        return data
