"""
Enumerations shared by request configurations, generators and the export format.

Values are the display spellings written to exported collections, so they
must not change.
"""

from enum import Enum


class HTTPMethod(str, Enum):
    """Supported HTTP methods."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class BodyType(str, Enum):
    """Request body types and the MIME type each one implies."""
    NONE = "None"
    JSON = "JSON"
    FORM_DATA = "Form Data"
    URL_ENCODED = "URL Encoded"
    XML = "XML"
    TEXT = "Plain Text"

    @property
    def mime_type(self) -> str | None:
        """Content-Type to send for this body type, None when no body is sent."""
        return _MIME_TYPES.get(self)


_MIME_TYPES = {
    BodyType.JSON: "application/json",
    BodyType.FORM_DATA: "multipart/form-data",
    BodyType.URL_ENCODED: "application/x-www-form-urlencoded",
    BodyType.XML: "application/xml",
    BodyType.TEXT: "text/plain",
}


class AuthType(str, Enum):
    """Authentication schemes a request can carry."""
    NONE = "None"
    BEARER = "Bearer Token"
    BASIC = "Basic Auth"
    # Reserved: no authorization flow exists, applying it is a no-op
    OAUTH2 = "OAuth 2.0"


class CodeLanguage(str, Enum):
    """Targets for code generation."""
    CURL = "curl"
    SWIFT = "swift"
    PYTHON = "python"
