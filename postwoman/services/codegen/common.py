"""
Selection rules shared by all code generators.

These decide *what* goes into generated code (which headers, which auth
construct, whether a Content-Type must be added); the generators only
decide how to spell it.
"""

from ...schemas.enums import AuthType
from ...schemas.key_value import KeyValuePair, enabled_pairs
from ...schemas.request import RequestConfig
from .escaping import percent_encode


def bearer_token(config: RequestConfig) -> str | None:
    """Token to send as ``Authorization: Bearer``, if Bearer auth applies."""
    if config.auth_type is AuthType.BEARER and config.auth_bearer_token:
        return config.auth_bearer_token
    return None


def basic_auth(config: RequestConfig) -> tuple[str, str] | None:
    """``(username, password)`` if Basic auth applies."""
    if (
        config.auth_type is AuthType.BASIC
        and config.auth_basic_username is not None
        and config.auth_basic_password is not None
    ):
        return config.auth_basic_username, config.auth_basic_password
    return None


def request_headers(config: RequestConfig) -> list[KeyValuePair]:
    """
    Headers to write out, in order.

    When auth produces an Authorization header, hand-written Authorization
    headers are left out so the auth setting wins.
    """
    headers = enabled_pairs(config.headers)
    if bearer_token(config) is not None or basic_auth(config) is not None:
        headers = [h for h in headers if h.key.lower() != "authorization"]
    return headers


def query_params(config: RequestConfig) -> list[KeyValuePair]:
    return enabled_pairs(config.query_params)


def has_content_type(config: RequestConfig) -> bool:
    return any(h.key.lower() == "content-type" for h in enabled_pairs(config.headers))


def implied_content_type(config: RequestConfig) -> str | None:
    """Content-Type to add because a body is sent and none was set by hand."""
    if not config.has_body or has_content_type(config):
        return None
    return config.body_type.mime_type


def encoded_query(pairs: list[KeyValuePair]) -> str:
    return "&".join(f"{percent_encode(p.key)}={percent_encode(p.value)}" for p in pairs)
