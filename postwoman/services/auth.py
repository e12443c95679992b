"""
Applies a request's authentication settings to its outgoing headers.
"""

import base64
from typing import MutableMapping

from ..schemas.enums import AuthType


def basic_credentials(username: str, password: str) -> str:
    """Return ``base64(username:password)`` as used by HTTP Basic auth."""
    return base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")


def apply_auth(
    auth_type: AuthType,
    headers: MutableMapping[str, str],
    bearer_token: str | None = None,
    basic_username: str | None = None,
    basic_password: str | None = None,
) -> None:
    """
    Set the Authorization header for the given auth type.

    At most one header is touched. Missing credentials leave the headers
    unchanged rather than raising; OAuth 2.0 is never applied.

    Args:
        auth_type: Authentication scheme to apply
        headers: Outgoing headers, modified in place
        bearer_token: Token for Bearer auth; sent verbatim
        basic_username: Username for Basic auth; not escaped
        basic_password: Password for Basic auth; may be empty but not None
    """
    if auth_type is AuthType.BEARER:
        if bearer_token:
            headers["Authorization"] = f"Bearer {bearer_token}"
    elif auth_type is AuthType.BASIC:
        if basic_username is not None and basic_password is not None:
            headers["Authorization"] = f"Basic {basic_credentials(basic_username, basic_password)}"
