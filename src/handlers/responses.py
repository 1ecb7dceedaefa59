"""API Gateway proxy responses and the error-code to HTTP status lookup."""

import json
from typing import Any

from core.errors import DETAILS, ErrorCode

STATUS_CODES: dict[ErrorCode, int] = {
    ErrorCode.AUTH_FAILED: 401,
    ErrorCode.INVALID_TOKEN: 401,
    ErrorCode.EXPIRED_TOKEN: 401,
    ErrorCode.NO_IDENTITY: 401,
    ErrorCode.ACCESS_DENIED: 403,
    ErrorCode.TRAVEL_NOT_FOUND: 404,
    ErrorCode.INVALID_STATUS: 400,
    ErrorCode.INVALID_LOCATION_EDIT: 400,
    ErrorCode.INVALID_USER: 400,
    ErrorCode.INVALID_TRAVEL_USER: 400,
    ErrorCode.STORAGE_SAVE_FAILED: 500,
    ErrorCode.STORAGE_UPDATE_FAILED: 500,
    ErrorCode.STORAGE_GET_FAILED: 500,
    ErrorCode.STORAGE_USER_GET_FAILED: 500,
    ErrorCode.INVALID_REQUEST: 400,
    ErrorCode.INTERNAL_ERROR: 500,
}


def json_response(status_code: int, body: Any) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def error_response(code: ErrorCode, status_code: int | None = None) -> dict[str, Any]:
    """Client-facing error body; internal exception messages are never included."""
    return json_response(
        status_code or STATUS_CODES.get(code, 500),
        {"code": code.value, "detail": DETAILS.get(code, DETAILS[ErrorCode.INTERNAL_ERROR])},
    )


def travel_id_from_path(event: dict[str, Any]) -> int:
    """Raises ValueError when the path carries no usable travel id."""
    params = event.get("pathParameters") or {}
    raw = params.get("id")
    if raw is None:
        raise ValueError("missing travel id")
    return int(raw)
