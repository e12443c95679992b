"""
Swift (URLSession) code generation.
"""

import json

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
from .escaping import swift_escape, swift_string

IMPORTS = """import Foundation
#if canImport(FoundationNetworking)
import FoundationNetworking
#endif

"""

RESPONSE_HANDLING = r"""
let task = URLSession.shared.dataTask(with: request) { data, response, error in
    if let error = error {
        print("Error: \(error.localizedDescription)")
        return
    }

    guard let httpResponse = response as? HTTPURLResponse else {
        print("Invalid response")
        return
    }

    print("Status Code: \(httpResponse.statusCode)")

    if let data = data, let body = String(data: data, encoding: .utf8) {
        print("Response Body:")
        print(body)
    }
}
task.resume()

// Keep the program running to allow the async request to complete
RunLoop.main.run(until: Date(timeIntervalSinceNow: 30))
"""


def _set_header(value: str, field: str) -> str:
    return f"request.setValue({swift_string(value)}, forHTTPHeaderField: {swift_string(field)})\n"


def _json_body(text: str) -> str | None:
    """Multi-line string literal holding the pretty-printed JSON, or None if not JSON."""
    parsed, value = parse_json(text)
    if not parsed:
        return None
    pretty = json.dumps(value, indent=2, ensure_ascii=False)
    lines = "\n".join(swift_escape(line) for line in pretty.split("\n"))
    return f'let jsonBody = """\n{lines}\n"""\nrequest.httpBody = jsonBody.data(using: .utf8)\n'


def generate_swift(config: RequestConfig) -> str:
    """
    Render a request as a Swift script using URLSession.

    Query items are appended to any query already in the URL. Basic auth is
    computed with Base64 at run time rather than written out pre-encoded.
    """
    code = IMPORTS

    params = query_params(config)
    if params:
        code += f"var components = URLComponents(string: {swift_string(config.url)})!\n"
        code += "components.queryItems = (components.queryItems ?? []) + [\n"
        for param in params:
            code += (
                f"    URLQueryItem(name: {swift_string(param.key)}, "
                f"value: {swift_string(param.value)}),\n"
            )
        code += "]\nlet url = components.url!\n"
    else:
        code += f"let url = URL(string: {swift_string(config.url)})!\n"

    code += "\nvar request = URLRequest(url: url)\n"
    code += f"request.httpMethod = {swift_string(config.method.value)}\n"
    code += "request.timeoutInterval = 30\n"

    for header in request_headers(config):
        code += _set_header(header.value, header.key)

    token = bearer_token(config)
    if token is not None:
        code += _set_header(f"Bearer {token}", "Authorization")

    credentials = basic_auth(config)
    if credentials is not None:
        username, password = credentials
        code += (
            f"\nlet credentials = {swift_string(f'{username}:{password}')}\n"
            "let base64Credentials = Data(credentials.utf8).base64EncodedString()\n"
            'request.setValue("Basic \\(base64Credentials)", forHTTPHeaderField: "Authorization")\n'
        )

    if config.has_body:
        body = None
        if config.body_type is BodyType.JSON:
            body = _json_body(config.body_content)
        if body is None:
            body = f"request.httpBody = {swift_string(config.body_content)}.data(using: .utf8)\n"
        code += "\n" + body

        mime_type = implied_content_type(config)
        if mime_type:
            code += _set_header(mime_type, "Content-Type")

    code += RESPONSE_HANDLING
    return code
