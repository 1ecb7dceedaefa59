from os import environ

import boto3
from pydantic import BaseModel, ConfigDict

_cached_jwt_secret: str | None = None


def _resolve_jwt_secret() -> str:
    """Fetch the JWT signing secret from Secrets Manager at runtime, with caching."""
    global _cached_jwt_secret
    if _cached_jwt_secret is not None:
        return _cached_jwt_secret

    # Local dev: use env var directly
    direct = environ.get("JWT_SECRET", "")
    if direct:
        _cached_jwt_secret = direct
        return direct

    # Deployed: fetch from Secrets Manager by ARN
    arn = environ.get("JWT_SECRET_ARN", "")
    if not arn:
        return ""

    client = boto3.client("secretsmanager")
    _cached_jwt_secret = client.get_secret_value(SecretId=arn)["SecretString"]
    return _cached_jwt_secret


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    db_host: str
    db_port: int
    db_name: str
    db_user: str
    db_password: str
    db_secret_arn: str | None = None
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    environment: str


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config — for testing only."""
    global _cached_config, _cached_jwt_secret
    _cached_config = None
    _cached_jwt_secret = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        db_host=environ.get("DB_HOST", "localhost"),
        db_port=int(environ.get("DB_PORT", "5432")),
        db_name=environ.get("DB_NAME", "space_drivers"),
        db_user=environ.get("DB_USER", "space_drivers"),
        db_password=environ.get("DB_PASSWORD", "localdev"),
        db_secret_arn=environ.get("DB_SECRET_ARN"),
        jwt_secret=_resolve_jwt_secret(),
        jwt_algorithm=environ.get("JWT_ALGORITHM", "HS256"),
        environment=environ.get("ENVIRONMENT", "local"),
    )
    return _cached_config
