"""
Folder model for organizing requests.

A folder is a named, ordered collection of requests and the unit of
import/export.
"""

from datetime import datetime
from typing import List, TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..database import Base

if TYPE_CHECKING:
    from .request import Request


class Folder(Base):
    """
    SQLAlchemy model for folders.

    Deleting a folder cascades to all contained requests.

    Attributes:
        id: Unique identifier for the folder
        name: Human-readable name for the folder
        sort_order: Order among folders in the sidebar
        created_at: Timestamp when the folder was created
        updated_at: Timestamp when the folder was last updated
        requests: Requests in this folder, in display order
    """
    __tablename__ = "folders"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    sort_order: Mapped[int] = mapped_column(default=0)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, onupdate=datetime.utcnow)

    requests: Mapped[List["Request"]] = relationship(
        "Request",
        back_populates="folder",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Request.sort_order",
    )
