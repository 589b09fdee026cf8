"""Authentication primitives shared across bounded contexts."""

from shared_kernel.auth.context import AuthContext, AuthenticatedUser, RequestMetadata

__all__ = [
    "AuthContext",
    "AuthenticatedUser",
    "RequestMetadata",
]
