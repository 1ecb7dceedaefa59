"""Unit tests for the REST API Lambda authorizer."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from core.auth import Identity, Role
from core.errors import AuthenticationError, ErrorCode
from handlers.authorizer import handler


@pytest.fixture
def authorizer_event():
    return {
        "type": "TOKEN",
        "methodArn": "arn:aws:execute-api:us-east-1:123456789:abc123/v1/PUT/travels/1",
        "authorizationToken": "Bearer valid_jwt_token",
    }


def test_authorizer_valid_token(authorizer_event):
    with patch("handlers.authorizer.get_auth_provider") as mock_get_provider:
        mock_provider = MagicMock()
        mock_provider.verify_token = AsyncMock(return_value=Identity(user_id=12, role=Role.DRIVER))
        mock_get_provider.return_value = mock_provider

        result = handler(authorizer_event, None)

        mock_provider.verify_token.assert_awaited_once_with("valid_jwt_token")
        assert result["principalId"] == "12"
        assert result["policyDocument"]["Statement"][0]["Effect"] == "Allow"
        assert result["policyDocument"]["Statement"][0]["Resource"] == authorizer_event["methodArn"]
        assert result["context"] == {"userId": "12", "role": "driver"}


def test_authorizer_invalid_token(authorizer_event):
    with patch("handlers.authorizer.get_auth_provider") as mock_get_provider:
        mock_provider = MagicMock()
        mock_provider.verify_token = AsyncMock(
            side_effect=AuthenticationError("Invalid token", code=ErrorCode.INVALID_TOKEN)
        )
        mock_get_provider.return_value = mock_provider

        result = handler(authorizer_event, None)

        assert result["principalId"] == "unauthorized"
        assert result["policyDocument"]["Statement"][0]["Effect"] == "Deny"
        assert "context" not in result


@pytest.mark.parametrize("header", [None, "", "valid_jwt_token", "Basic dXNlcjpwdw=="])
def test_authorizer_without_bearer_token(authorizer_event, header):
    authorizer_event["authorizationToken"] = header

    with patch("handlers.authorizer.get_auth_provider") as mock_get_provider:
        result = handler(authorizer_event, None)

    mock_get_provider.assert_not_called()
    assert result["principalId"] == "unauthorized"
    assert result["policyDocument"]["Statement"][0]["Effect"] == "Deny"
