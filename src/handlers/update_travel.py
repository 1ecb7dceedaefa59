"""PUT /v1/travels/{id} handler."""

import logging
from typing import Any

from pydantic import ValidationError

from core.auth import identity_from_event
from core.clients import get_travel_service
from core.errors import ErrorCode, SpaceDriversError
from core.models.travel import TravelRequest
from handlers.responses import error_response, json_response, travel_id_from_path

logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    try:
        travel_id = travel_id_from_path(event)
    except ValueError:
        return error_response(ErrorCode.INVALID_REQUEST)

    try:
        request = TravelRequest.model_validate_json(event.get("body") or "")
    except ValidationError as e:
        logger.info("Invalid update body for travel %s: %d errors", travel_id, e.error_count())
        return error_response(ErrorCode.INVALID_REQUEST, status_code=422)

    try:
        travel = get_travel_service().update(travel_id, request, identity_from_event(event))
    except SpaceDriversError as e:
        return error_response(e.code)
    except Exception:
        logger.exception("Unexpected error updating travel %s", travel_id)
        return error_response(ErrorCode.INTERNAL_ERROR)

    return json_response(200, travel.to_public())
