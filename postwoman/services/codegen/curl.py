"""
cURL command generation.
"""

from ...schemas.enums import HTTPMethod
from ...schemas.request import RequestConfig
from .common import (
    basic_auth,
    bearer_token,
    encoded_query,
    implied_content_type,
    query_params,
    request_headers,
)
from .escaping import shell_quote

LINE_CONTINUATION = " \\\n  "


def generate_curl(config: RequestConfig) -> str:
    """
    Render a request as a cURL command.

    GET is written out only when a body is sent; a bare body makes cURL
    use POST. Query parameters are percent-encoded and appended to the
    URL; Basic auth uses ``-u``.
    Arguments are joined with line continuations.
    """
    parts = ["curl"]

    if config.method is not HTTPMethod.GET or config.has_body:
        parts.append(f"-X {config.method.value}")

    url = config.url
    query = encoded_query(query_params(config))
    if query:
        url += ("&" if "?" in config.url else "?") + query
    parts.append(shell_quote(url))

    for header in request_headers(config):
        parts.append(f"-H {shell_quote(f'{header.key}: {header.value}')}")

    token = bearer_token(config)
    if token is not None:
        parts.append(f"-H {shell_quote(f'Authorization: Bearer {token}')}")

    credentials = basic_auth(config)
    if credentials is not None:
        username, password = credentials
        parts.append(f"-u {shell_quote(f'{username}:{password}')}")

    if config.has_body:
        parts.append(f"--data-raw {shell_quote(config.body_content)}")
        mime_type = implied_content_type(config)
        if mime_type:
            parts.append(f"-H {shell_quote(f'Content-Type: {mime_type}')}")

    return LINE_CONTINUATION.join(parts)
