"""
Normalized result of executing a request configuration.
"""

from http import HTTPStatus

from pydantic import BaseModel, ConfigDict, computed_field

from .key_value import KeyValuePair


# Fallback phrases by status class when the code is not a registered one
_STATUS_CLASS_TEXT = {
    1: "Informational",
    2: "Success",
    3: "Redirection",
    4: "Client Error",
    5: "Server Error",
}


def reason_phrase(status_code: int) -> str:
    """Return the standard reason phrase for an HTTP status code."""
    if status_code == 0:
        return "Error"
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return _STATUS_CLASS_TEXT.get(status_code // 100, "Unknown")


class HTTPResponse(BaseModel):
    """
    Response received for one execution.

    A transport failure is represented by a response with ``status_code`` 0
    and the error message as the body (see ``from_error``).
    """
    model_config = ConfigDict(frozen=True)

    status_code: int
    headers: list[KeyValuePair] = []
    body: str | None = None
    response_time_ms: float = 0.0
    content_type: str | None = None

    @computed_field
    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @computed_field
    @property
    def status_text(self) -> str:
        return reason_phrase(self.status_code)

    @computed_field
    @property
    def size_bytes(self) -> int:
        """Size of the decoded body in bytes (UTF-8)."""
        if not self.body:
            return 0
        return len(self.body.encode("utf-8"))

    @property
    def is_error(self) -> bool:
        """True for the status-0 sentinel built from a transport failure."""
        return self.status_code == 0

    @classmethod
    def from_error(cls, error: Exception) -> "HTTPResponse":
        """Build the status-0 response shown when no HTTP response was received."""
        message = getattr(error, "detail", None) or str(error) or type(error).__name__
        return cls(status_code=0, body=f"Error: {message}")
