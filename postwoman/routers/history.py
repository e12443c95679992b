"""
History record API routes.

Provides endpoints for viewing and managing request execution history.
History records are automatically created when requests are executed.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy import or_
from sqlalchemy.orm import Session

from ..database import get_db
from ..exceptions import ResourceNotFoundError, error_responses
from ..models.history import History
from ..models.request import Request
from ..schemas.history import HistoryResponse, HistoryListResponse
from ..schemas.request import RequestResponse
from ..services.history_service import restore_request
from .requests import next_sort_order


router = APIRouter(
    prefix="/api/history",
    tags=["history"],
    responses=error_responses(404, 422),
)


def get_history_or_404(db: Session, history_id: int) -> History:
    db_history = db.query(History).filter(History.id == history_id).first()
    if db_history is None:
        raise ResourceNotFoundError("History record", history_id)
    return db_history


@router.get("", response_model=HistoryListResponse)
def list_history(
    search: str | None = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db)
):
    """
    Get history records ordered by execution time (newest first).

    Args:
        search: Case-insensitive filter on URL or method
        skip: Number of records to skip (for pagination)
        limit: Maximum number of records to return
        db: Database session

    Returns:
        HistoryListResponse with items and total count
    """
    query = db.query(History)
    if search:
        pattern = f"%{search}%"
        query = query.filter(or_(History.url.ilike(pattern), History.method.ilike(pattern)))

    total = query.count()
    items = (
        query
        .order_by(History.timestamp.desc(), History.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )
    return HistoryListResponse(items=items, total=total)


@router.get("/{history_id}", response_model=HistoryResponse)
def get_history(history_id: int, db: Session = Depends(get_db)):
    """
    Get a single history record by ID.

    Raises:
        ResourceNotFoundError: 404 if history record not found
    """
    return get_history_or_404(db, history_id)


@router.post(
    "/{history_id}/restore",
    response_model=RequestResponse,
    status_code=status.HTTP_201_CREATED
)
def restore_history(history_id: int, db: Session = Depends(get_db)):
    """Create a new standalone request from a history record."""
    entry = get_history_or_404(db, history_id)
    db_request = Request.from_config(
        restore_request(entry), folder_id=None, sort_order=next_sort_order(db, None)
    )
    db.add(db_request)
    db.commit()
    db.refresh(db_request)
    return db_request


@router.delete("/{history_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_history(history_id: int, db: Session = Depends(get_db)):
    """
    Delete a single history record by ID.

    Raises:
        ResourceNotFoundError: 404 if history record not found
    """
    db_history = get_history_or_404(db, history_id)
    db.delete(db_history)
    db.commit()
    return None


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def clear_all_history(db: Session = Depends(get_db)):
    """Clear all history records."""
    db.query(History).delete()
    db.commit()
    return None
