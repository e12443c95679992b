"""
Pydantic schemas for folders.

Defines schemas for creating, updating, and returning folder data,
optionally with the folder's requests inlined.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from .request import RequestResponse


class FolderBase(BaseModel):
    """Base schema with common folder fields."""
    name: str


class FolderCreate(FolderBase):
    """Schema for creating a new folder."""
    pass


class FolderUpdate(BaseModel):
    """Schema for updating an existing folder. All fields are optional."""
    name: str | None = None


class FolderResponse(FolderBase):
    """Schema for folder response with all fields."""
    id: int
    sort_order: int = 0
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class FolderWithRequests(FolderResponse):
    """Schema for folder response including its requests in display order."""
    requests: list[RequestResponse] = []


class ReorderFolders(BaseModel):
    """Schema for reordering folders."""
    folder_ids: list[int]
