"""
Pydantic schemas for request execution.
"""

from pydantic import BaseModel

from .response import HTTPResponse


class ExecuteResult(BaseModel):
    """
    Result of executing a request from the API.

    ``response`` is always present; transport failures come back as the
    status-0 sentinel so the history entry and the UI see the same thing.
    """
    response: HTTPResponse
    history_id: int | None = None
