"""Domain layer for the identity bounded context."""

from identity.domain.value_objects import MembershipRole, OAuthProvider

__all__ = ["MembershipRole", "OAuthProvider"]
