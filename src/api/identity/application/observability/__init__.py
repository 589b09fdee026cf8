"""Observability for identity application services."""

from identity.application.observability.authentication_probe import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)

__all__ = ["AuthenticationProbe", "DefaultAuthenticationProbe"]
