"""Unit tests for configuration management."""

import os
from unittest.mock import MagicMock, patch

import pydantic
import pytest

from core.config import _reset_config, get_config


@pytest.fixture(autouse=True)
def _clear_config_cache():
    _reset_config()
    yield
    _reset_config()


def test_get_config_defaults():
    """Test that get_config provides sensible defaults."""
    with patch.dict(os.environ, {}, clear=True):
        config = get_config()
        assert config.aws_region == "us-east-1"
        assert config.db_host == "localhost"
        assert config.db_port == 5432
        assert config.db_name == "space_drivers"
        assert config.environment == "local"
        assert config.db_secret_arn is None
        assert config.jwt_secret == ""
        assert config.jwt_algorithm == "HS256"


def test_db_port_string_coercion():
    with patch.dict(os.environ, {"DB_PORT": "5433"}, clear=False):
        config = get_config()
        assert config.db_port == 5433
        assert isinstance(config.db_port, int)


def test_get_config_is_cached():
    with patch.dict(os.environ, {"DB_HOST": "first"}, clear=True):
        first = get_config()
    with patch.dict(os.environ, {"DB_HOST": "second"}, clear=True):
        assert get_config() is first


def test_jwt_secret_from_env():
    with patch.dict(os.environ, {"JWT_SECRET": "local-signing-secret"}, clear=True):
        assert get_config().jwt_secret == "local-signing-secret"


def test_jwt_secret_from_secrets_manager():
    arn = "arn:aws:secretsmanager:us-east-1:123456789012:secret:jwt"
    sm = MagicMock()
    sm.get_secret_value.return_value = {"SecretString": "deployed-signing-secret"}

    with patch.dict(os.environ, {"JWT_SECRET_ARN": arn}, clear=True):
        with patch("core.config.boto3.client", return_value=sm) as mock_client:
            assert get_config().jwt_secret == "deployed-signing-secret"

    mock_client.assert_called_once_with("secretsmanager")
    sm.get_secret_value.assert_called_once_with(SecretId=arn)


def test_config_is_immutable():
    with patch.dict(os.environ, {}, clear=True):
        config = get_config()
        with pytest.raises(pydantic.ValidationError):
            config.aws_region = "eu-west-1"  # type: ignore[misc]
