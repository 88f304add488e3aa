from .google_maps_geocoding_response import (
    AddressComponent,
    GeocodeResponse,
    GeocodeResult,
    Geometry,
    Location,
    Viewport,
)
