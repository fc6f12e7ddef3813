"""API models for the nearbyindia API Gateway integration."""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

from ..models.location import CamelModel, LocationBundle


class CognitoUser(BaseModel):
    """Model for Cognito user information extracted from the request context"""

    user_id: str = Field(..., description="Cognito user ID (sub)")
    username: Optional[str] = Field(None, description="Cognito username")
    email: Optional[str] = Field(None, description="User email address")
    groups: List[str] = Field(default_factory=list, description="Cognito user groups")

    @classmethod
    def from_request_context(cls, request_context: Dict) -> Optional["CognitoUser"]:
        """Extract user information from the API Gateway request context"""
        if not request_context or "authorizer" not in request_context:
            return None

        authorizer = request_context.get("authorizer", {})
        if not authorizer or "claims" not in authorizer:
            return None

        claims = authorizer.get("claims", {})
        if not claims or "sub" not in claims:
            return None

        groups = []
        cognito_groups = claims.get("cognito:groups")
        if cognito_groups:
            if isinstance(cognito_groups, str):
                groups = [g.strip() for g in cognito_groups.split(",")]
            elif isinstance(cognito_groups, list):
                groups = cognito_groups

        return cls(
            user_id=claims.get("sub"),
            username=claims.get("cognito:username"),
            email=claims.get("email"),
            groups=groups,
        )


class BaseRequest(BaseModel):
    """Base request model with user information"""

    user: Optional[CognitoUser] = Field(None, description="User information from Cognito")
    request_id: Optional[str] = Field(None, description="Unique request identifier")
    timestamp: Optional[datetime] = Field(None, description="Request timestamp")

    @model_validator(mode="before")
    @classmethod
    def extract_context_data(cls, data: Dict) -> Dict:
        """Extract context data from the raw event if available"""
        if isinstance(data, dict) and "requestContext" in data:
            request_context = data.get("requestContext") or {}
            data["user"] = CognitoUser.from_request_context(request_context)
            data["request_id"] = request_context.get("requestId")
            data["timestamp"] = datetime.now()
        return data


class GetNearbyRequest(BaseRequest):
    """Request model for the data shown around a map click"""

    latitude: float = Field(..., ge=-90, le=90, description="Latitude of the clicked point")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude of the clicked point")
    radius: float = Field(5, ge=0.5, le=20, description="Search radius in km")


class GetNearbyResponse(CamelModel):
    """Response model for the data shown around a map click"""

    success: bool = True
    message: str
    data: LocationBundle
    coordinates: Dict[str, float]
    is_authenticated: bool = Field(False, description="Whether the request was authenticated")
