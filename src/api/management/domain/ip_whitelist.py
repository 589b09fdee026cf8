"""IP whitelist normalization.

Whitelists are entered as free text separated by commas or newlines and
stored as a single comma-joined string.
"""

from __future__ import annotations

import ipaddress
import re

_SEPARATORS = re.compile(r",|\n")


def normalize_ip_whitelist(raw: str) -> str | None:
    """Normalize whitelist input to its stored form.

    An empty string means "no whitelist" and returns None. Otherwise the
    input is split on commas and newlines, every token is trimmed and must
    be a valid IPv4 or IPv6 address.

    Args:
        raw: The whitelist as entered by the user

    Returns:
        Comma-joined addresses, e.g. "1.1.1.1,2.2.2.2", or None

    Raises:
        ValueError: Naming the first token that is not an IP address
    """
    if raw == "":
        return None

    addresses = [token.strip() for token in _SEPARATORS.split(raw)]
    for address in addresses:
        try:
            ipaddress.ip_address(address)
        except ValueError:
            raise ValueError(f"Invalid IP address: '{address}'") from None

    return ",".join(addresses)
