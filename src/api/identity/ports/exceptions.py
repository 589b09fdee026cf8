"""Exceptions for the identity bounded context."""


class AuthenticationError(Exception):
    """Raised when a request cannot be tied to a user and tenant.

    Covers missing credentials, unknown or expired sessions and tenant
    selections the user holds no membership for.
    """

    def __init__(self, message: str, reason: str):
        super().__init__(message)
        self.reason = reason
