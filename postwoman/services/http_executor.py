"""
HTTP execution service for sending request configurations.

This service turns a ``RequestConfig`` into an httpx request, sends it and
normalizes what comes back into an ``HTTPResponse``. Request building is
kept separate from dispatch so the exact wire request can be inspected.
"""

import logging
import time

import httpx

from ..config import REQUEST_TIMEOUT
from ..exceptions import InvalidResponseError, InvalidURLError, TransportError
from ..schemas.key_value import KeyValuePair, enabled_pairs
from ..schemas.request import RequestConfig
from ..schemas.response import HTTPResponse
from .auth import apply_auth

log = logging.getLogger(__name__)

# Fixed timeout for outgoing requests, in seconds
DEFAULT_TIMEOUT = REQUEST_TIMEOUT


def build_url(raw_url: str, query_params: list[KeyValuePair]) -> httpx.URL:
    """
    Parse the request URL and append its enabled query parameters.

    Parameters are encoded and added after any query already present in
    the URL, in order. The existing query is kept byte for byte and nothing
    in the URL is substituted.

    Raises:
        InvalidURLError: if the URL cannot be parsed or is not an absolute http(s) URL
    """
    try:
        url = httpx.URL(raw_url)
    except (httpx.InvalidURL, TypeError) as e:
        raise InvalidURLError(raw_url, str(e)) from e

    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidURLError(raw_url, "expected an absolute http or https URL")

    params = enabled_pairs(query_params)
    if params:
        appended = str(httpx.QueryParams([(p.key, p.value) for p in params]))
        query = url.query.decode("ascii")
        query = f"{query}&{appended}" if query else appended
        url = url.copy_with(query=query.encode("ascii"))
    return url


def build_headers(config: RequestConfig) -> httpx.Headers:
    """
    Build the outgoing headers for a request configuration.

    User headers are applied first, in order; a later header with the same
    name replaces an earlier one. Authentication is applied afterwards so it
    always wins over a hand-written Authorization header. When a body is sent
    and no Content-Type was given, one is derived from the body type.
    """
    headers = httpx.Headers(encoding="utf-8")
    for header in enabled_pairs(config.headers):
        headers[header.key] = header.value

    apply_auth(
        config.auth_type,
        headers,
        bearer_token=config.auth_bearer_token,
        basic_username=config.auth_basic_username,
        basic_password=config.auth_basic_password,
    )

    if config.has_body and "content-type" not in headers:
        mime_type = config.body_type.mime_type
        if mime_type:
            headers["Content-Type"] = mime_type
    return headers


def build_request(
    config: RequestConfig,
    client: httpx.AsyncClient,
    timeout: float = DEFAULT_TIMEOUT
) -> httpx.Request:
    """
    Translate a request configuration into an httpx request.

    Form Data and URL Encoded bodies are sent as the raw text the user
    typed; no multipart or form encoding is performed.

    Raises:
        InvalidURLError: if the URL is unusable
    """
    url = build_url(config.url, config.query_params)
    headers = build_headers(config)
    content = config.body_content.encode("utf-8") if config.has_body else None

    return client.build_request(
        method=config.method.value,
        url=url,
        headers=headers,
        content=content,
        timeout=timeout,
    )


def parse_response(response: httpx.Response, elapsed_ms: float) -> HTTPResponse:
    """
    Normalize an httpx response.

    The body is decoded as UTF-8; bodies that are not valid UTF-8 are
    reported as ``None``.
    """
    try:
        body: str | None = response.content.decode("utf-8")
    except UnicodeDecodeError:
        body = None

    return HTTPResponse(
        status_code=response.status_code,
        headers=[
            KeyValuePair(key=key, value=value)
            for key, value in response.headers.multi_items()
        ],
        body=body,
        response_time_ms=elapsed_ms,
        content_type=response.headers.get("content-type"),
    )


async def _dispatch(
    config: RequestConfig,
    client: httpx.AsyncClient,
    timeout: float
) -> HTTPResponse:
    request = build_request(config, client, timeout)
    log.debug("sending %s %s", request.method, request.url)

    try:
        start_time = time.perf_counter()
        response = await client.send(request)
        elapsed_ms = (time.perf_counter() - start_time) * 1000
    except httpx.RemoteProtocolError as e:
        raise InvalidResponseError(f"Invalid response from server: {e}") from e
    except httpx.DecodingError as e:
        raise InvalidResponseError(f"Could not decode response: {e}") from e
    except httpx.TimeoutException as e:
        raise TransportError(
            f"Request timed out after {timeout:g} seconds", timed_out=True
        ) from e
    except httpx.TransportError as e:
        raise TransportError(str(e) or type(e).__name__) from e
    except httpx.InvalidURL as e:
        raise InvalidURLError(config.url, str(e)) from e

    return parse_response(response, elapsed_ms)


async def send_request(
    config: RequestConfig,
    client: httpx.AsyncClient | None = None,
    timeout: float = DEFAULT_TIMEOUT
) -> HTTPResponse:
    """
    Send a request and return its normalized response.

    Args:
        config: The request configuration to send
        client: Client to send with; a short-lived one is created if omitted
        timeout: Request timeout in seconds

    Returns:
        The normalized response

    Raises:
        InvalidURLError: the URL could not be parsed
        InvalidResponseError: the server reply was not a usable HTTP response
        TransportError: the request could not be delivered (DNS, connect, TLS, timeout)
    """
    if client is not None:
        return await _dispatch(config, client, timeout)

    async with httpx.AsyncClient(timeout=timeout) as owned_client:
        return await _dispatch(config, owned_client, timeout)


async def execute_request(
    config: RequestConfig,
    client: httpx.AsyncClient | None = None,
    timeout: float = DEFAULT_TIMEOUT
) -> HTTPResponse:
    """
    Send a request, reporting delivery failures as a status-0 response.

    Network-level failures are converted with ``HTTPResponse.from_error`` so
    they can be displayed and recorded like any other result. Invalid URLs
    and invalid responses are still raised.
    """
    try:
        return await send_request(config, client=client, timeout=timeout)
    except TransportError as e:
        log.warning("request to %s failed: %s", config.url, e.detail)
        return HTTPResponse.from_error(e)
