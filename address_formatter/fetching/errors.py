from typing import Optional

class GeocodingError(Exception):
    pass

class NetworkError(GeocodingError):
    pass

class ParseError(GeocodingError):
    pass

class LocationNotFoundError(GeocodingError):
    pass

class StatusNotOKError(LocationNotFoundError):
    def __init__(self, status: str, error_message: Optional[str] = None):
        self.status: str = status
        self.error_message: Optional[str] = error_message
        super().__init__(f"{status}: {error_message}" if error_message else status)

class AmbiguousResultError(GeocodingError):
    def __init__(self, results_count: int):
        self.results_count: int = results_count
        super().__init__(f"Ambiguous location: {results_count} results returned, expected exactly one.")

class ComponentNotFoundError(GeocodingError, LookupError):
    def __init__(self, component_type: str):
        self.component_type: str = component_type
        super().__init__(f"Address component '{component_type}' not found.")
