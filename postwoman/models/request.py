"""
Request model for storing HTTP request configurations.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING

from sqlalchemy import String, Text, JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..database import Base
from ..schemas.request import RequestConfig

if TYPE_CHECKING:
    from .folder import Folder


class Request(Base):
    """
    SQLAlchemy model for saved request configurations.

    Enumerated fields hold their display strings (``"GET"``, ``"JSON"``,
    ``"Bearer Token"``); header and query pairs are stored as JSON lists.

    Attributes:
        id: Unique identifier for the request
        name: Human-readable name for the request
        url: Target URL, stored and sent verbatim
        method: HTTP method
        headers: Ordered header pairs
        query_params: Ordered query parameter pairs
        body_type: Body type display string
        body_content: Raw body text
        auth_type: Authentication type display string
        auth_bearer_token: Bearer token (plaintext)
        auth_basic_username: Basic auth username
        auth_basic_password: Basic auth password (plaintext)
        auth_oauth_config: Stored OAuth 2.0 settings
        folder_id: Optional reference to the owning folder
        sort_order: Order within the folder
        created_at: Timestamp when the request was created
        updated_at: Timestamp when the request was last updated
    """
    __tablename__ = "requests"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    url: Mapped[str] = mapped_column(Text, default="")
    method: Mapped[str] = mapped_column(String(10), default="GET")
    headers: Mapped[list] = mapped_column(JSON, default=list)
    query_params: Mapped[list] = mapped_column(JSON, default=list)
    body_type: Mapped[str] = mapped_column(String(20), default="None")
    body_content: Mapped[str] = mapped_column(Text, default="")
    auth_type: Mapped[str] = mapped_column(String(20), default="None")
    auth_bearer_token: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    auth_basic_username: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    auth_basic_password: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    auth_oauth_config: Mapped[Optional[dict]] = mapped_column(JSON, nullable=True)
    folder_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("folders.id", ondelete="CASCADE"),
        nullable=True
    )
    sort_order: Mapped[int] = mapped_column(default=0)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, onupdate=datetime.utcnow)

    folder: Mapped[Optional["Folder"]] = relationship("Folder", back_populates="requests")

    @classmethod
    def from_config(cls, config: RequestConfig, **extra) -> "Request":
        """Create an unsaved row from a request configuration."""
        data = config.model_dump(mode="json", include=set(RequestConfig.model_fields))
        return cls(**data, **extra)

    def apply_config(self, values: dict) -> None:
        """Copy JSON-ready field values (as produced by ``model_dump(mode="json")``)."""
        for field, value in values.items():
            setattr(self, field, value)

    def to_config(self) -> RequestConfig:
        """Project the row back onto a request configuration."""
        return RequestConfig.model_validate(
            {field: getattr(self, field) for field in RequestConfig.model_fields}
        )
