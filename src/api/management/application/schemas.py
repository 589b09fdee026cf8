"""Input and result models for management procedures.

Payloads arrive in camelCase (``apiId``, ``ipWhitelist``); snake_case field
names are accepted too so that procedures can be called in-process.
"""

from __future__ import annotations

import re
from typing import Annotated

from pydantic import (
    BaseModel,
    ConfigDict,
    StrictBool,
    StringConstraints,
    field_validator,
)
from pydantic.alias_generators import to_camel

from management.domain.ip_whitelist import normalize_ip_whitelist

ROLE_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9_:\-\.]+$")
ROLE_NAME_MESSAGE = (
    "Must be at least 3 characters long and only contain alphanumeric, "
    "colons, periods, dashes and underscores"
)

KeyName = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)
]


class ProcedureInput(BaseModel):
    """Base for procedure payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class UpdateIpWhitelistInput(ProcedureInput):
    """Payload for ``api.updateIpWhitelist``.

    ``ip_whitelist`` is normalised on validation: an empty string becomes
    None and address lists are stored comma-joined without whitespace.
    """

    api_id: str
    workspace_id: str
    ip_whitelist: str | None

    @field_validator("ip_whitelist")
    @classmethod
    def normalize_whitelist(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return normalize_ip_whitelist(value)


class UpdateKeyNameInput(ProcedureInput):
    """Payload for ``key.updateName``. An explicit None clears the name."""

    key_id: str
    name: KeyName | None


class DisconnectPermissionFromRoleInput(ProcedureInput):
    """Payload for ``rbac.disconnectPermissionFromRole``."""

    role_id: str
    permission_id: str


class UpdateRoleInput(ProcedureInput):
    """Payload for ``rbac.updateRole``. Both name and description are required keys."""

    id: str
    name: Annotated[str, StringConstraints(max_length=512)]
    description: str | None

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if len(value) < 3 or not ROLE_NAME_PATTERN.match(value):
            raise ValueError(ROLE_NAME_MESSAGE)
        return value


class ToggleWebhookInput(ProcedureInput):
    """Payload for ``webhook.toggle``."""

    webhook_id: str
    enabled: StrictBool


class ToggleWebhookResult(BaseModel):
    """Result of ``webhook.toggle``: the flag now stored."""

    enabled: bool
