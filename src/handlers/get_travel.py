"""GET /v1/travels/{id} handler."""

import logging
from typing import Any

from core.clients import get_travel_service
from core.errors import ErrorCode, SpaceDriversError
from handlers.responses import error_response, json_response, travel_id_from_path

logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    try:
        travel_id = travel_id_from_path(event)
    except ValueError:
        return error_response(ErrorCode.INVALID_REQUEST)

    try:
        travel = get_travel_service().get(travel_id)
    except SpaceDriversError as e:
        return error_response(e.code)
    except Exception:
        logger.exception("Unexpected error getting travel %s", travel_id)
        return error_response(ErrorCode.INTERNAL_ERROR)

    return json_response(200, travel.to_public())
