"""SQLAlchemy ORM models for the identity bounded context."""

from identity.infrastructure.models.membership import MembershipModel
from identity.infrastructure.models.oauth import OAuthModel
from identity.infrastructure.models.otp import OtpModel
from identity.infrastructure.models.session import SessionModel
from identity.infrastructure.models.user import UserModel

__all__ = [
    "MembershipModel",
    "OAuthModel",
    "OtpModel",
    "SessionModel",
    "UserModel",
]
