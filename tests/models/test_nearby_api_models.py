"""Unit tests for API models using pytest."""

import pytest
from pydantic import ValidationError

from nearbyindia.models.api import BaseRequest, CognitoUser, GetNearbyRequest


@pytest.fixture
def sample_cognito_claims():
    """Create sample Cognito claims for testing."""
    return {
        "sub": "12345678-1234-1234-1234-123456789012",
        "cognito:username": "testuser",
        "email": "test@example.com",
        "cognito:groups": "premium,beta-tester",
    }


@pytest.fixture
def sample_request_context(sample_cognito_claims):
    """Create a sample API Gateway request context with Cognito authorizer."""
    return {"requestId": "request-123", "authorizer": {"claims": sample_cognito_claims}}


def test_cognito_user_from_request_context(sample_request_context):
    user = CognitoUser.from_request_context(sample_request_context)

    assert user is not None
    assert user.user_id == "12345678-1234-1234-1234-123456789012"
    assert user.username == "testuser"
    assert user.email == "test@example.com"
    assert user.groups == ["premium", "beta-tester"]


def test_cognito_user_group_list():
    context = {"authorizer": {"claims": {"sub": "user-1", "cognito:groups": ["admins"]}}}
    user = CognitoUser.from_request_context(context)
    assert user.groups == ["admins"]


@pytest.mark.parametrize(
    "context",
    [
        {},
        None,
        {"requestId": "request-123"},
        {"authorizer": {}},
        {"authorizer": {"claims": {}}},
        {"authorizer": {"claims": {"email": "nosub@example.com"}}},
    ],
)
def test_cognito_user_missing(context):
    assert CognitoUser.from_request_context(context) is None


def test_base_request_extracts_context(sample_request_context):
    request = BaseRequest.model_validate({"requestContext": sample_request_context})

    assert request.user is not None
    assert request.user.user_id == "12345678-1234-1234-1234-123456789012"
    assert request.request_id == "request-123"
    assert request.timestamp is not None


def test_get_nearby_request_defaults():
    request = GetNearbyRequest.model_validate({"latitude": 34.0837, "longitude": 74.7973})

    assert request.radius == 5
    assert request.user is None
    assert request.request_id is None


def test_get_nearby_request_with_context(sample_request_context):
    request = GetNearbyRequest.model_validate(
        {
            "latitude": 19.076,
            "longitude": 72.8777,
            "radius": 2.5,
            "requestContext": sample_request_context,
        }
    )

    assert request.radius == 2.5
    assert request.user.username == "testuser"


@pytest.mark.parametrize(
    "payload",
    [
        {"longitude": 74.7973},
        {"latitude": 34.0837},
        {"latitude": 91, "longitude": 74.7973},
        {"latitude": 34.0837, "longitude": -181},
        {"latitude": 34.0837, "longitude": 74.7973, "radius": 0.1},
        {"latitude": 34.0837, "longitude": 74.7973, "radius": 50},
        {"latitude": "north", "longitude": 74.7973},
    ],
)
def test_get_nearby_request_validation(payload):
    with pytest.raises(ValidationError):
        GetNearbyRequest.model_validate(payload)
