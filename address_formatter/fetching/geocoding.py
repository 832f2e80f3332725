import requests, os, logging
from typing import Optional
from pydantic import ValidationError
from .errors import AmbiguousResultError, LocationNotFoundError, NetworkError, ParseError
from .models.google_maps_geocoding_response import GeocodeResponse

log = logging.getLogger(__name__)

class GoogleMapsGeocoder(requests.Session):
    BASE_URL: str = "https://maps.googleapis.com/maps/api/geocode/json"
    API_KEY_ENV_VAR: str = "GOOGLE_MAPS_API_KEY"
    DEFAULT_TIMEOUT: float = 10.0

    def __init__(self, api_key: Optional[str] = None, timeout: float = DEFAULT_TIMEOUT, allow_ambiguous: bool = False):
        api_key = api_key or os.getenv(self.API_KEY_ENV_VAR)
        if not api_key:
            raise ValueError("Google Maps API Key is missing. Pass it explicitly or set it in the environment variables.")
        super().__init__()
        self.api_key: str = api_key
        self.timeout: float = timeout
        self.allow_ambiguous: bool = allow_ambiguous

    def build_request(self, location: str) -> requests.PreparedRequest:
        address = location.strip()
        if not address:
            raise ValueError("Location must not be empty.")

        params = {
            "address": address,
            "key": self.api_key
        }
        return self.prepare_request(requests.Request("GET", self.BASE_URL, params=params))

    def __fetch_geocode(self, location: str) -> dict:
        request = self.build_request(location)
        address = location.strip()
        log.debug("Sending geocoding request for '%s'", address)

        # the key is part of the URL, so exception text never goes into messages
        try:
            settings = self.merge_environment_settings(request.url, {}, None, None, None)
            with self.send(request, timeout=self.timeout, **settings) as response:
                response.raise_for_status()
                return response.json()
        except requests.JSONDecodeError as e:
            log.warning("Geocoding response for '%s' is not valid JSON", address)
            raise ParseError(f"Geocoding response for '{address}' is not valid JSON.") from e
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            log.warning("Geocoding request for '%s' returned HTTP status %s", address, status_code)
            raise NetworkError(f"Received status code {status_code} for '{address}'.") from e
        except requests.RequestException as e:
            log.warning("Geocoding request for '%s' failed: %s", address, type(e).__name__)
            raise NetworkError(f"Geocoding request for '{address}' failed: {type(e).__name__}.") from e

    def geocode(self, location: str) -> GeocodeResponse:
        data = self.__fetch_geocode(location)

        try:
            response = GeocodeResponse.model_validate(data)
        except ValidationError as e:
            raise ParseError(f"Unexpected geocoding response shape for '{location.strip()}': {e}") from e

        try:
            response.validate_results(strict=not self.allow_ambiguous)
        except (LocationNotFoundError, AmbiguousResultError) as e:
            log.warning("Geocoding lookup for '%s' rejected: %s", location.strip(), e)
            raise
        return response

def geocode(location: str, api_key: Optional[str] = None, timeout: float = GoogleMapsGeocoder.DEFAULT_TIMEOUT,
            allow_ambiguous: bool = False) -> GeocodeResponse:
    with GoogleMapsGeocoder(api_key, timeout, allow_ambiguous) as geocoder:
        return geocoder.geocode(location)
