"""
Pydantic schemas for request execution history.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from .enums import HTTPMethod
from .key_value import KeyValuePair


class HistoryResponse(BaseModel):
    """Schema for history record response with all fields."""
    id: int
    timestamp: datetime
    url: str
    method: HTTPMethod
    request_headers: list[KeyValuePair]
    request_body: str | None
    status_code: int | None
    response_headers: list[KeyValuePair] | None
    response_body: str | None
    response_time_ms: float | None
    response_size_bytes: int | None
    error_message: str | None
    was_successful: bool
    saved_request_id: int | None

    model_config = ConfigDict(from_attributes=True)


class HistoryListResponse(BaseModel):
    """Schema for paginated history list response."""
    items: list[HistoryResponse]
    total: int
