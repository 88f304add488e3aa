from pydantic import AliasChoices, BaseModel, Field
from typing import Optional

class AddressComponent(BaseModel):
    types: list[str] = []
    long_name: str = ''
    short_name: str = ''

class Location(BaseModel):
    lat: float
    lng: float

class Viewport(BaseModel):
    southwest: Location
    northeast: Location

class Geometry(BaseModel):
    location: Location
    location_type: Optional[str] = None
    # the API sends `viewport`, older payloads use `view_port`
    viewport: Optional[Viewport] = Field(default=None, validation_alias=AliasChoices('viewport', 'view_port'))
    bounds: Optional[Viewport] = None

class GeocodeResult(BaseModel):
    types: list[str] = []
    formatted_address: str = ''
    address_components: list[AddressComponent] = []
    formatted_phone_number: Optional[str] = None
    geometry: Optional[Geometry] = None
    partial_match: Optional[bool] = None
    place_id: str = ''

    def component(self, type_: str) -> Optional[AddressComponent]:
        """First address component tagged with `type_`, e.g. 'postal_code'."""
        return next((c for c in self.address_components if type_ in c.types), None)

class GeocodeResponse(BaseModel):
    results: list[GeocodeResult] = []
    status: str
    error_message: Optional[str] = None
    html_attributions: list[str] = []

    @property
    def first(self) -> Optional[GeocodeResult]:
        return self.results[0] if self.results else None
