"""POST /v1/travels handler."""

import logging
from typing import Any

from pydantic import ValidationError

from core.clients import get_travel_service
from core.errors import ErrorCode, SpaceDriversError
from core.models.travel import TravelRequest
from handlers.responses import error_response, json_response

logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    try:
        request = TravelRequest.model_validate_json(event.get("body") or "")
    except ValidationError as e:
        logger.info("Invalid create travel body: %d errors", e.error_count())
        return error_response(ErrorCode.INVALID_REQUEST, status_code=422)

    try:
        travel = get_travel_service().create(request)
    except SpaceDriversError as e:
        return error_response(e.code)
    except Exception:
        logger.exception("Unexpected error creating travel")
        return error_response(ErrorCode.INTERNAL_ERROR)

    return json_response(201, travel.to_public())
