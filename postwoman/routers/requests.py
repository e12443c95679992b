"""
Request management API routes.

Provides CRUD operations for saved request configurations, duplication and
code generation for a saved request.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from sqlalchemy import func
from sqlalchemy.orm import Session

from ..database import get_db
from ..exceptions import ResourceNotFoundError, error_responses
from ..models.folder import Folder
from ..models.request import Request
from ..schemas.enums import CodeLanguage
from ..schemas.request import (
    RequestConfig,
    RequestCreate,
    RequestUpdate,
    RequestResponse,
    ReorderRequests,
)
from ..services.codegen import generate_code


router = APIRouter(
    prefix="/api/requests",
    tags=["requests"],
    responses=error_responses(404, 422),
)


def get_request_or_404(db: Session, request_id: int) -> Request:
    db_request = db.query(Request).filter(Request.id == request_id).first()
    if db_request is None:
        raise ResourceNotFoundError("Request", request_id)
    return db_request


def next_sort_order(db: Session, folder_id: int | None) -> int:
    """Sort order that places a new request after its siblings."""
    max_sort_order = db.query(func.max(Request.sort_order)).filter(
        Request.folder_id.is_(None) if folder_id is None else Request.folder_id == folder_id
    ).scalar()
    return (max_sort_order + 1) if max_sort_order is not None else 0


@router.post("/reorder", status_code=status.HTTP_200_OK)
def reorder_requests(reorder_data: ReorderRequests, db: Session = Depends(get_db)):
    """
    Reorder requests by updating their sort_order.

    Args:
        reorder_data: List of request IDs in the desired order
        db: Database session
    """
    for index, request_id in enumerate(reorder_data.request_ids):
        db_request = db.query(Request).filter(Request.id == request_id).first()
        if db_request:
            db_request.sort_order = index
    db.commit()
    return {"message": "Requests reordered successfully"}


@router.post("", response_model=RequestResponse, status_code=status.HTTP_201_CREATED)
def create_request(request_data: RequestCreate, db: Session = Depends(get_db)):
    """
    Save a new request configuration.

    The request is placed after the existing requests of its folder.

    Raises:
        ResourceNotFoundError: 404 if the folder does not exist
    """
    if request_data.folder_id is not None:
        if db.query(Folder).filter(Folder.id == request_data.folder_id).first() is None:
            raise ResourceNotFoundError("Folder", request_data.folder_id)

    db_request = Request.from_config(
        request_data,
        folder_id=request_data.folder_id,
        sort_order=next_sort_order(db, request_data.folder_id),
    )
    db.add(db_request)
    db.commit()
    db.refresh(db_request)
    return db_request


@router.get("", response_model=list[RequestResponse])
def list_requests(folder_id: int | None = None, db: Session = Depends(get_db)):
    """
    List saved requests, optionally only those in one folder.

    Args:
        folder_id: Restrict the list to this folder
        db: Database session
    """
    query = db.query(Request)
    if folder_id is not None:
        query = query.filter(Request.folder_id == folder_id)
    return query.order_by(Request.sort_order, Request.id).all()


@router.get("/{request_id}", response_model=RequestResponse)
def get_request(request_id: int, db: Session = Depends(get_db)):
    """
    Get a single request by ID.

    Raises:
        ResourceNotFoundError: 404 if request not found
    """
    return get_request_or_404(db, request_id)


@router.put("/{request_id}", response_model=RequestResponse)
def update_request(
    request_id: int,
    request_data: RequestUpdate,
    db: Session = Depends(get_db)
):
    """
    Update an existing request. Only provided fields are changed.

    Raises:
        ResourceNotFoundError: 404 if the request or the target folder is not found
    """
    db_request = get_request_or_404(db, request_id)

    update_data = request_data.model_dump(mode="json", exclude_unset=True)
    folder_id = update_data.get("folder_id")
    if folder_id is not None:
        if db.query(Folder).filter(Folder.id == folder_id).first() is None:
            raise ResourceNotFoundError("Folder", folder_id)

    db_request.apply_config(update_data)
    db.commit()
    db.refresh(db_request)
    return db_request


@router.delete("/{request_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_request(request_id: int, db: Session = Depends(get_db)):
    """
    Delete a request by ID.

    Raises:
        ResourceNotFoundError: 404 if request not found
    """
    db_request = get_request_or_404(db, request_id)
    db.delete(db_request)
    db.commit()
    return None


@router.post(
    "/{request_id}/duplicate",
    response_model=RequestResponse,
    status_code=status.HTTP_201_CREATED
)
def duplicate_request(request_id: int, db: Session = Depends(get_db)):
    """
    Copy a request, including its auth settings, into the same folder.

    The copy is named "<name> (Copy)" and placed after its siblings.
    """
    original = get_request_or_404(db, request_id)
    config: RequestConfig = original.to_config()
    config.name = f"{original.name} (Copy)"

    duplicate = Request.from_config(
        config,
        folder_id=original.folder_id,
        sort_order=next_sort_order(db, original.folder_id),
    )
    db.add(duplicate)
    db.commit()
    db.refresh(duplicate)
    return duplicate


@router.get("/{request_id}/code", response_class=PlainTextResponse)
def get_request_code(
    request_id: int,
    language: CodeLanguage = CodeLanguage.CURL,
    db: Session = Depends(get_db)
):
    """Render a saved request as cURL, Swift or Python source."""
    db_request = get_request_or_404(db, request_id)
    return generate_code(db_request.to_config(), language)
