"""
Folder management API routes.

Provides CRUD operations for folders plus collection import and export.
"""

from urllib.parse import quote

from fastapi import APIRouter, Depends, Request as HTTPRequest, Response, status
from sqlalchemy import func
from sqlalchemy.orm import Session

from ..database import get_db
from ..exceptions import BadRequestError, ResourceNotFoundError, error_responses
from ..models.folder import Folder
from ..schemas.folder import (
    FolderCreate,
    FolderUpdate,
    FolderResponse,
    FolderWithRequests,
    ReorderFolders,
)
from ..services.collection_codec import export_folder, import_folder


router = APIRouter(
    prefix="/api/folders",
    tags=["folders"],
    responses=error_responses(400, 404, 422),
)


def get_folder_or_404(db: Session, folder_id: int) -> Folder:
    db_folder = db.query(Folder).filter(Folder.id == folder_id).first()
    if db_folder is None:
        raise ResourceNotFoundError("Folder", folder_id)
    return db_folder


@router.post("/reorder", status_code=status.HTTP_200_OK)
def reorder_folders(reorder_data: ReorderFolders, db: Session = Depends(get_db)):
    """Reorder folders by updating their sort_order."""
    for index, folder_id in enumerate(reorder_data.folder_ids):
        folder = db.query(Folder).filter(Folder.id == folder_id).first()
        if folder:
            folder.sort_order = index
    db.commit()
    return {"message": "Folders reordered successfully"}


@router.post("/import", response_model=FolderWithRequests, status_code=status.HTTP_201_CREATED)
async def import_collection(request: HTTPRequest, db: Session = Depends(get_db)):
    """
    Import a collection document sent as the raw request body.

    The folder is created after all existing folders; its requests keep
    the order they have in the document.
    """
    data = await request.body()
    if not data:
        raise BadRequestError("Request body is empty")
    existing_folder_count = db.query(func.count(Folder.id)).scalar() or 0
    return import_folder(data, db, existing_folder_count)


@router.get("", response_model=list[FolderWithRequests])
def list_folders(db: Session = Depends(get_db)):
    """List all folders with their requests, in sidebar order."""
    return db.query(Folder).order_by(Folder.sort_order, Folder.id).all()


@router.post("", response_model=FolderResponse, status_code=status.HTTP_201_CREATED)
def create_folder(folder_data: FolderCreate, db: Session = Depends(get_db)):
    """Create a new folder at the end of the list."""
    max_sort_order = db.query(func.max(Folder.sort_order)).scalar()
    new_sort_order = (max_sort_order + 1) if max_sort_order is not None else 0

    db_folder = Folder(name=folder_data.name, sort_order=new_sort_order)
    db.add(db_folder)
    db.commit()
    db.refresh(db_folder)
    return db_folder


@router.get("/{folder_id}", response_model=FolderWithRequests)
def get_folder(folder_id: int, db: Session = Depends(get_db)):
    """Get a folder and its requests."""
    return get_folder_or_404(db, folder_id)


@router.put("/{folder_id}", response_model=FolderResponse)
def update_folder(
    folder_id: int,
    folder_data: FolderUpdate,
    db: Session = Depends(get_db)
):
    """Rename a folder."""
    db_folder = get_folder_or_404(db, folder_id)

    update_data = folder_data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(db_folder, field, value)

    db.commit()
    db.refresh(db_folder)
    return db_folder


@router.delete("/{folder_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_folder(folder_id: int, db: Session = Depends(get_db)):
    """Delete a folder by ID. Cascades to all of its requests."""
    db_folder = get_folder_or_404(db, folder_id)
    db.delete(db_folder)
    db.commit()
    return None


@router.get("/{folder_id}/export")
def export_collection(folder_id: int, db: Session = Depends(get_db)):
    """Download a folder as a collection document."""
    db_folder = get_folder_or_404(db, folder_id)
    data = export_folder(db_folder)
    filename = quote(f"{db_folder.name}.json")
    return Response(
        content=data,
        media_type="application/json",
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{filename}"},
    )
