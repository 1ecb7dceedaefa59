"""Authentication abstraction layer."""

from core.auth.context import identity_from_context, identity_from_event
from core.auth.interface import AuthProvider, Identity, Role, get_auth_provider
from core.auth.jwt_provider import JwtAuthProvider

__all__ = [
    "AuthProvider",
    "Identity",
    "JwtAuthProvider",
    "Role",
    "get_auth_provider",
    "identity_from_context",
    "identity_from_event",
]
