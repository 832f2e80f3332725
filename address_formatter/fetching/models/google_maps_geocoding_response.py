from pydantic import BaseModel, ConfigDict
from typing import ClassVar, Optional
from ..components import ComponentType, NameForm
from ..errors import AmbiguousResultError, ComponentNotFoundError, LocationNotFoundError, StatusNotOKError

class GeocodingModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra='ignore')

class AddressComponent(GeocodingModel):
    long_name: str
    short_name: str
    types: tuple[str, ...] = ()

    @property
    def primary_type(self) -> Optional[str]:
        return self.types[0] if self.types else None

class Location(GeocodingModel):
    lat: float
    lng: float

class BoundingBox(GeocodingModel):
    northeast: Location
    southwest: Location

class Geometry(GeocodingModel):
    bounds: Optional[BoundingBox] = None
    location: Location
    location_type: str
    viewport: BoundingBox

class PlusCode(GeocodingModel):
    compound_code: Optional[str] = None
    global_code: str

class Result(GeocodingModel):
    address_components: tuple[AddressComponent, ...] = ()
    formatted_address: str
    geometry: Geometry
    partial_match: bool = False
    place_id: str
    plus_code: Optional[PlusCode] = None
    types: tuple[str, ...] = ()

class GeocodeResponse(GeocodingModel):
    OK_STATUS: ClassVar[str] = 'OK'
    COORDINATES_PRECISION: ClassVar[int] = 10

    results: tuple[Result, ...] = ()
    status: str
    error_message: Optional[str] = None

    def validate_results(self, strict: bool = False) -> Result:
        """Return the single usable result or raise the matching lookup error.

        In strict mode a response carrying more than one result is rejected
        as ambiguous instead of silently picking the first one.
        """
        if self.status != self.OK_STATUS:
            raise StatusNotOKError(self.status, self.error_message)
        if not self.results:
            raise LocationNotFoundError("Location not found: response contains no results.")
        if strict and len(self.results) > 1:
            raise AmbiguousResultError(len(self.results))
        return self.results[0]

    def get_component(self, component_type: ComponentType, form: NameForm = NameForm.LONG) -> str:
        component_type = ComponentType(component_type)
        form = NameForm(form)
        result = self.validate_results()
        for component in result.address_components:
            if component.primary_type == component_type.value:
                return getattr(component, form.value)
        raise ComponentNotFoundError(component_type.value)

    def get_formatted(self) -> str:
        return self.validate_results().formatted_address

    def get_location(self) -> Location:
        return self.validate_results().geometry.location

    def get_coordinates(self) -> str:
        location = self.get_location()
        precision = self.COORDINATES_PRECISION
        return f"{location.lat:.{precision}f}, {location.lng:.{precision}f}"

    def get_street_number_long(self) -> str:
        return self.get_component(ComponentType.STREET_NUMBER, NameForm.LONG)

    def get_street_number_short(self) -> str:
        return self.get_component(ComponentType.STREET_NUMBER, NameForm.SHORT)

    def get_street_long(self) -> str:
        return self.get_component(ComponentType.STREET, NameForm.LONG)

    def get_street_short(self) -> str:
        return self.get_component(ComponentType.STREET, NameForm.SHORT)

    def get_city_long(self) -> str:
        return self.get_component(ComponentType.CITY, NameForm.LONG)

    def get_city_short(self) -> str:
        return self.get_component(ComponentType.CITY, NameForm.SHORT)

    def get_state_long(self) -> str:
        return self.get_component(ComponentType.STATE, NameForm.LONG)

    def get_state_short(self) -> str:
        return self.get_component(ComponentType.STATE, NameForm.SHORT)

    def get_country_long(self) -> str:
        return self.get_component(ComponentType.COUNTRY, NameForm.LONG)

    def get_country_short(self) -> str:
        return self.get_component(ComponentType.COUNTRY, NameForm.SHORT)

    def get_postal_code_long(self) -> str:
        return self.get_component(ComponentType.POSTAL_CODE, NameForm.LONG)

    def get_postal_code_short(self) -> str:
        return self.get_component(ComponentType.POSTAL_CODE, NameForm.SHORT)
