"""Unit tests for the get_nearby lambda handler."""

import json
import random
from unittest.mock import MagicMock, patch

import pytest

from nearbyindia.lambda_handlers.get_nearby import handler
from nearbyindia.services.location_data import LocationDataGenerator


@pytest.fixture
def seeded_generator():
    """Generator with a fixed seed."""
    return LocationDataGenerator(random.Random(11))


@pytest.fixture
def authenticated_context():
    """Request context with a Cognito authorizer."""
    return {
        "authorizer": {
            "claims": {
                "sub": "test_user_123",
                "cognito:username": "testuser",
                "email": "test@example.com",
            }
        },
        "requestId": "test-request-id",
    }


@patch("nearbyindia.lambda_handlers.get_nearby.get_location_data_generator")
def test_handler_srinagar(mock_get_generator, seeded_generator, authenticated_context):
    """A click in Srinagar returns a full bundle."""
    mock_get_generator.return_value = seeded_generator

    event = {
        "body": json.dumps({"latitude": 34.0837, "longitude": 74.7973}),
        "requestContext": authenticated_context,
    }

    response = handler(event, {})

    assert response["statusCode"] == 200
    assert response["headers"]["Content-Type"] == "application/json"
    assert response["headers"]["Access-Control-Allow-Origin"] == "*"

    body = json.loads(response["body"])
    assert body["success"] is True
    assert body["message"] == "Found 29 locations within 5km"
    assert body["coordinates"] == {"latitude": 34.0837, "longitude": 74.7973, "radius": 5.0}
    assert body["isAuthenticated"] is True

    data = body["data"]
    assert len(data["places"]) == 8
    assert data["totalResults"]["places"] == 8
    assert data["totalResults"]["hotels"] == len(data["hotels"])
    assert data["totalResults"]["restaurants"] == len(data["restaurants"])
    assert data["totalResults"]["transportation"] == len(data["transportation"])
    for place in data["places"]:
        assert abs(float(place["latitude"]) - 34.0837) <= 0.01 + 1e-9
        assert abs(float(place["longitude"]) - 74.7973) <= 0.01 + 1e-9
        assert 30 <= place["rating"] <= 50


@patch("nearbyindia.lambda_handlers.get_nearby.get_location_data_generator")
def test_handler_dict_body_and_radius(mock_get_generator, seeded_generator):
    mock_get_generator.return_value = seeded_generator

    event = {
        "body": {"latitude": 19.076, "longitude": 72.8777, "radius": 2.5},
        "requestContext": {"requestId": "test-request-id-2"},
    }

    response = handler(event, {})

    assert response["statusCode"] == 200
    body = json.loads(response["body"])
    assert body["message"] == "Found 29 locations within 2.5km"
    assert body["coordinates"]["radius"] == 2.5
    assert body["isAuthenticated"] is False


@patch("nearbyindia.lambda_handlers.get_nearby.get_location_data_generator")
def test_handler_outside_india(mock_get_generator):
    """Coordinates outside India are rejected before any generation."""
    event = {"body": json.dumps({"latitude": 50.0, "longitude": 74.0}), "requestContext": {}}

    response = handler(event, {})

    assert response["statusCode"] == 400
    body = json.loads(response["body"])
    assert body["message"] == "Coordinates must be within India's geographical bounds"
    assert body["provided"] == {"latitude": 50.0, "longitude": 74.0}
    assert "6.4°N to 37.6°N" in body["hint"]
    mock_get_generator.assert_not_called()


@pytest.mark.parametrize(
    "payload",
    [
        {"longitude": 74.7973},
        {"latitude": 34.0837, "longitude": 74.7973, "radius": 50},
        {"latitude": 95.0, "longitude": 74.7973},
        {"latitude": "somewhere", "longitude": 74.7973},
    ],
)
@patch("nearbyindia.lambda_handlers.get_nearby.get_location_data_generator")
def test_handler_invalid_payload(mock_get_generator, payload):
    response = handler({"body": json.dumps(payload)}, {})

    assert response["statusCode"] == 400
    body = json.loads(response["body"])
    assert body["message"] == "Invalid coordinates provided"
    assert body["errors"]
    mock_get_generator.assert_not_called()


@pytest.mark.parametrize("raw_body", ["{not json", "[1, 2]"])
@patch("nearbyindia.lambda_handlers.get_nearby.get_location_data_generator")
def test_handler_malformed_body(mock_get_generator, raw_body):
    response = handler({"body": raw_body}, {})

    assert response["statusCode"] == 400
    assert json.loads(response["body"])["message"] == "Invalid coordinates provided"
    mock_get_generator.assert_not_called()


def test_handler_missing_body():
    response = handler({}, {})

    assert response["statusCode"] == 400


@patch("nearbyindia.lambda_handlers.get_nearby.get_location_data_generator")
def test_handler_generation_failure(mock_get_generator):
    mock_generator = MagicMock(spec=LocationDataGenerator)
    mock_generator.generate_nearby_location_data.side_effect = Exception("boom")
    mock_get_generator.return_value = mock_generator

    event = {"body": {"latitude": 22.5726, "longitude": 88.3639}}

    response = handler(event, {})

    assert response["statusCode"] == 500
    body = json.loads(response["body"])
    assert body["message"] == "Failed to generate location data"
    assert body["error"] == "boom"
    mock_generator.generate_nearby_location_data.assert_called_once_with(22.5726, 88.3639, 5)
