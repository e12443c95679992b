"""
Python (requests) code generation.
"""

from typing import Any

from ...schemas.enums import BodyType
from ...schemas.request import RequestConfig
from ..json_formatter import parse_json
from .common import (
    basic_auth,
    bearer_token,
    implied_content_type,
    query_params,
    request_headers,
)
from .escaping import python_string

INDENT = "    "

RESPONSE_HANDLING = '''print(f"Status Code: {response.status_code}")
print(f"Headers: {dict(response.headers)}")
print("Response Body:")
print(response.text)

# For JSON responses, you can also use:
# print(response.json())
'''


def python_literal(value: Any, level: int = 0) -> str:
    """Render a parsed JSON value as a Python literal."""
    pad = INDENT * (level + 1)
    closing = INDENT * level

    if isinstance(value, dict):
        if not value:
            return "{}"
        items = [
            f"{pad}{python_string(key)}: {python_literal(item, level + 1)},"
            for key, item in value.items()
        ]
        return "{\n" + "\n".join(items) + f"\n{closing}}}"
    if isinstance(value, list):
        if not value:
            return "[]"
        items = [f"{pad}{python_literal(item, level + 1)}," for item in value]
        return "[\n" + "\n".join(items) + f"\n{closing}]"
    if value is None:
        return "None"
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, int):
        return str(value)
    return python_string(str(value))


def _mapping_block(name: str, pairs: list[tuple[str, str]]) -> str:
    # Repeated keys would collapse in a dict, so fall back to a list of tuples
    keys = [key for key, _ in pairs]
    if len(set(keys)) != len(keys):
        lines = [f"{INDENT}({python_string(k)}, {python_string(v)})," for k, v in pairs]
        return f"{name} = [\n" + "\n".join(lines) + "\n]\n\n"
    lines = [f"{INDENT}{python_string(k)}: {python_string(v)}," for k, v in pairs]
    return f"{name} = {{\n" + "\n".join(lines) + "\n}\n\n"


def _string_body(text: str) -> str:
    literal = python_string(text)
    if not text.isascii():
        # requests would send a str body as Latin-1
        literal += '.encode("utf-8")'
    return literal


def generate_python(config: RequestConfig) -> str:
    """
    Render a request as a Python script using ``requests``.

    JSON bodies become a Python literal passed as ``json=``; if the body is
    not valid JSON, or is of another type, it is sent verbatim via ``data=``.
    """
    code = "import requests\n\n"
    code += f"url = {python_string(config.url)}\n\n"
    args = ["url"]

    params = [(p.key, p.value) for p in query_params(config)]
    if params:
        code += _mapping_block("params", params)
        args.append("params=params")

    headers = [(h.key, h.value) for h in request_headers(config)]
    token = bearer_token(config)
    if token is not None:
        headers.append(("Authorization", f"Bearer {token}"))
    mime_type = implied_content_type(config)
    if mime_type:
        headers.append(("Content-Type", mime_type))
    if headers:
        code += _mapping_block("headers", headers)
        args.append("headers=headers")

    if config.has_body:
        parsed, value = (False, None)
        if config.body_type is BodyType.JSON:
            parsed, value = parse_json(config.body_content)
        if parsed:
            code += f"json_data = {python_literal(value)}\n\n"
            args.append("json=json_data")
        else:
            code += f"data = {_string_body(config.body_content)}\n\n"
            args.append("data=data")

    credentials = basic_auth(config)
    if credentials is not None:
        username, password = credentials
        code += f"auth = ({python_string(username)}, {python_string(password)})\n\n"
        args.append("auth=auth")

    method = config.method.value.lower()
    code += f"response = requests.{method}({', '.join(args)})\n\n"
    code += RESPONSE_HANDLING
    return code
