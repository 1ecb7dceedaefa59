"""Resolve the caller identity published by the Lambda authorizer."""

import logging
from typing import Any

from pydantic import ValidationError

from core.auth.interface import Identity

logger = logging.getLogger(__name__)


def identity_from_context(authorizer_context: dict[str, Any] | None) -> Identity | None:
    """Return the caller identity, or None when the request carries none.

    API Gateway stringifies authorizer context values, so ``userId`` arrives as text.
    """
    if not authorizer_context:
        return None

    try:
        return Identity(user_id=authorizer_context["userId"], role=authorizer_context["role"])
    except (KeyError, ValidationError):
        logger.warning("Unusable authorizer context keys: %s", sorted(authorizer_context))
        return None


def identity_from_event(event: dict[str, Any]) -> Identity | None:
    request_context = event.get("requestContext") or {}
    return identity_from_context(request_context.get("authorizer"))
