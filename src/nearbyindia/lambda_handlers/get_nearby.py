import json
import logging
from typing import Dict

from pydantic import ValidationError

from ..models.api import GetNearbyRequest, GetNearbyResponse
from ..utils.general_utils import get_location_data_generator
from ..utils.geo_utils import INDIA_BOUNDS_HINT, validate_coordinates

logger = logging.getLogger(__name__)

RESPONSE_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",  # For CORS support
}


def _response(status_code: int, body: str) -> Dict:
    return {"statusCode": status_code, "body": body, "headers": dict(RESPONSE_HEADERS)}


def handler(event, context):
    """Generate places, hotels, restaurants and transport around a clicked map point."""
    body = event.get("body") or {}
    try:
        if isinstance(body, str):
            # API Gateway might send the body as a JSON string
            body = json.loads(body)

        # Merge the body with the request context so the user can be extracted too
        merged_event = {**body, "requestContext": event.get("requestContext", {})}
        request = GetNearbyRequest.model_validate(merged_event)
    except (json.JSONDecodeError, TypeError) as e:
        logger.warning(f"Rejecting malformed request body: {str(e)}")
        return _response(
            400,
            json.dumps({"message": "Invalid coordinates provided", "errors": [str(e)]}),
        )
    except ValidationError as e:
        logger.warning(f"Rejecting invalid nearby request: {e.error_count()} error(s)")
        return _response(
            400,
            json.dumps(
                {
                    "message": "Invalid coordinates provided",
                    "errors": json.loads(e.json(include_url=False, include_input=False)),
                }
            ),
        )

    if not validate_coordinates(request.latitude, request.longitude):
        logger.info(f"Coordinates outside India: ({request.latitude}, {request.longitude})")
        return _response(
            400,
            json.dumps(
                {
                    "message": "Coordinates must be within India's geographical bounds",
                    "provided": {"latitude": request.latitude, "longitude": request.longitude},
                    "hint": INDIA_BOUNDS_HINT,
                }
            ),
        )

    try:
        generator = get_location_data_generator()
        bundle = generator.generate_nearby_location_data(
            request.latitude, request.longitude, request.radius
        )

        response = GetNearbyResponse(
            message=f"Found {bundle.total_count} locations within {request.radius:g}km",
            data=bundle,
            coordinates={
                "latitude": request.latitude,
                "longitude": request.longitude,
                "radius": request.radius,
            },
            is_authenticated=request.user is not None,
        )
        return _response(200, response.model_dump_json(by_alias=True))

    except Exception as e:
        logger.exception(f"Error generating location data: {str(e)}")
        return _response(
            500,
            json.dumps({"message": "Failed to generate location data", "error": str(e)}),
        )
