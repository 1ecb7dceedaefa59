"""REST API Lambda authorizer: validates the bearer JWT and publishes the caller identity."""

import asyncio
import logging
from typing import Any

from core.auth import get_auth_provider
from core.errors import AuthenticationError

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    header = event.get("authorizationToken") or ""
    if not header.startswith(BEARER_PREFIX):
        logger.info("Denied request without bearer token")
        return _deny_policy(event["methodArn"])

    # AuthProvider methods are async; asyncio.run() bridges them into this sync Lambda handler.
    try:
        auth_provider = get_auth_provider()
        identity = asyncio.run(auth_provider.verify_token(header[len(BEARER_PREFIX) :]))
    except AuthenticationError as e:
        logger.info("Denied request: %s", e.code.value)
        return _deny_policy(event["methodArn"])

    return _allow_policy(event["methodArn"], str(identity.user_id), identity.role.value)


def _allow_policy(method_arn: str, user_id: str, role: str) -> dict[str, Any]:
    return {
        "principalId": user_id,
        "policyDocument": {
            "Version": "2012-10-17",
            "Statement": [{"Action": "execute-api:Invoke", "Effect": "Allow", "Resource": method_arn}],
        },
        "context": {"userId": user_id, "role": role},
    }


def _deny_policy(method_arn: str) -> dict[str, Any]:
    return {
        "principalId": "unauthorized",
        "policyDocument": {
            "Version": "2012-10-17",
            "Statement": [{"Action": "execute-api:Invoke", "Effect": "Deny", "Resource": method_arn}],
        },
    }
