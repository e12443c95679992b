"""
History model for storing executed request records.

Each execution creates one entry holding a snapshot of what was sent and
what came back. Entries are never updated, only deleted.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import String, Text, JSON, Integer, Float, Boolean
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base


class History(Base):
    """
    SQLAlchemy model for request execution history.

    Attributes:
        id: Unique identifier for the history entry
        timestamp: When the request was executed
        url: Request URL as configured
        method: HTTP method used
        request_headers: Header pairs configured on the request
        request_body: Body sent, None when empty
        status_code: Response status code (0 for transport failures)
        response_headers: Headers received in the response
        response_body: Body received in the response
        response_time_ms: Elapsed time in milliseconds
        response_size_bytes: Response body size in bytes
        error_message: Transport error message, if the request failed to send
        was_successful: Whether the status code was 2xx
        saved_request_id: ID of the saved request this came from; not a foreign key
    """
    __tablename__ = "history"

    id: Mapped[int] = mapped_column(primary_key=True)
    timestamp: Mapped[datetime] = mapped_column(default=datetime.utcnow)
    url: Mapped[str] = mapped_column(Text)
    method: Mapped[str] = mapped_column(String(10))
    request_headers: Mapped[list] = mapped_column(JSON, default=list)
    request_body: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status_code: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    response_headers: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)
    response_body: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    response_time_ms: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    response_size_bytes: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    error_message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    was_successful: Mapped[bool] = mapped_column(Boolean, default=False)
    saved_request_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
