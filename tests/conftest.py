import json
import pytest
import requests

def make_response(payload, status_code: int = 200) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.encoding = 'utf-8'
    response._content = payload if isinstance(payload, bytes) else json.dumps(payload).encode('utf-8')
    return response

def make_result(address_components: list, formatted_address: str, lat: float, lng: float) -> dict:
    return {
        "address_components": address_components,
        "formatted_address": formatted_address,
        "geometry": {
            "location": {"lat": lat, "lng": lng},
            "location_type": "ROOFTOP",
            "viewport": {
                "northeast": {"lat": lat + 0.001, "lng": lng + 0.001},
                "southwest": {"lat": lat - 0.001, "lng": lng - 0.001},
            },
        },
        "place_id": "ChIJd8BlQ2BZwokRAFUEcm_qrcA",
        "types": ["street_address"],
    }

@pytest.fixture
def address_components() -> list:
    return [
        {"long_name": "350", "short_name": "350", "types": ["street_number"]},
        {"long_name": "5th Avenue", "short_name": "5th Ave", "types": ["route"]},
        {"long_name": "Manhattan", "short_name": "Manhattan", "types": ["political", "sublocality"]},
        {"long_name": "New York", "short_name": "New York", "types": ["locality", "political"]},
        {"long_name": "New York County", "short_name": "New York County", "types": ["administrative_area_level_2", "political"]},
        {"long_name": "New York", "short_name": "NY", "types": ["administrative_area_level_1", "political"]},
        {"long_name": "United States", "short_name": "US", "types": ["country", "political"]},
        {"long_name": "10118", "short_name": "10118", "types": ["postal_code"]},
    ]

@pytest.fixture
def ok_payload(address_components) -> dict:
    return {
        "results": [make_result(address_components, "350 5th Ave, New York, NY 10118, USA", 40.7128, -74.006)],
        "status": "OK",
    }

@pytest.fixture
def ambiguous_payload(ok_payload, address_components) -> dict:
    second = make_result(address_components[:4], "350 5th Ave, Brooklyn, NY 11215, USA", 40.6712, -73.9814)
    return {"results": ok_payload["results"] + [second], "status": "OK"}

@pytest.fixture
def api_key(monkeypatch) -> str:
    monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "test-key")
    return "test-key"

@pytest.fixture
def response_factory():
    return make_response
