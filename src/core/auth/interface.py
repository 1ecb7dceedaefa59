from abc import ABC, abstractmethod
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    ADMIN = "admin"
    DRIVER = "driver"


class Identity(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: int = Field(gt=0)
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


class AuthProvider(ABC):
    @abstractmethod
    async def verify_token(self, token: str) -> Identity: ...

    @abstractmethod
    async def decode_claims(self, token: str) -> dict[str, object]: ...


def get_auth_provider() -> AuthProvider:
    from core.config import get_config

    config = get_config()
    jwt_secret = config.jwt_secret
    if not jwt_secret:
        raise ValueError("JWT_SECRET not configured")

    from core.auth.jwt_provider import JwtAuthProvider

    return JwtAuthProvider(secret_key=jwt_secret, algorithm=config.jwt_algorithm)
