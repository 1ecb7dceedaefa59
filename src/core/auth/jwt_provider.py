import jwt
from pydantic import ValidationError

from core.errors import AuthenticationError, ErrorCode

from .interface import AuthProvider, Identity

USER_ID_CLAIM = "user_id"
ROLE_CLAIM = "role"


class JwtAuthProvider(AuthProvider):
    """Verifies HMAC-signed bearer tokens carrying ``user_id`` and ``role`` claims."""

    def __init__(self, secret_key: str, algorithm: str = "HS256"):
        self._secret_key = secret_key
        self._algorithm = algorithm

    async def verify_token(self, token: str) -> Identity:
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["exp", USER_ID_CLAIM, ROLE_CLAIM]},
            )
        except jwt.ExpiredSignatureError as e:
            raise AuthenticationError(f"Token expired: {e}", code=ErrorCode.EXPIRED_TOKEN) from e
        except jwt.InvalidTokenError as e:
            raise AuthenticationError(f"Token verification failed: {e}", code=ErrorCode.INVALID_TOKEN) from e

        try:
            return Identity(user_id=claims[USER_ID_CLAIM], role=claims[ROLE_CLAIM])
        except ValidationError as e:
            raise AuthenticationError(f"Invalid token claims: {e}", code=ErrorCode.AUTH_FAILED) from e

    async def decode_claims(self, token: str) -> dict[str, object]:
        """Decode JWT claims WITHOUT signature verification. For logging/routing only."""
        try:
            decoded: dict[str, object] = jwt.decode(token, options={"verify_signature": False})
            return decoded
        except jwt.InvalidTokenError as e:
            raise AuthenticationError(f"Invalid token: {e}", code=ErrorCode.INVALID_TOKEN) from e
