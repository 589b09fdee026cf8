"""Value objects for the identity bounded context."""

from __future__ import annotations

from enum import StrEnum


class OAuthProvider(StrEnum):
    """Supported external identity providers."""

    GITHUB = "github"
    GOOGLE = "google"


class MembershipRole(StrEnum):
    """Role a user holds within a workspace."""

    MEMBER = "member"
    ADMIN = "admin"
    OWNER = "owner"
