"""
Request execution API routes.

Provides endpoints for executing HTTP requests, both saved and temporary.
Every execution that produces a response, including a status-0 response
for a delivery failure, is recorded in history.
"""

from typing import AsyncIterator

import httpx
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..config import REQUEST_TIMEOUT
from ..database import get_db
from ..exceptions import ResourceNotFoundError, error_responses
from ..models.request import Request
from ..schemas.execute import ExecuteResult
from ..schemas.request import RequestConfig
from ..services.http_executor import execute_request
from ..services.history_service import save_history


router = APIRouter(
    prefix="/api/execute",
    tags=["execute"],
    responses=error_responses(400, 404, 422, 502),
)


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """Dependency providing the client outgoing requests are sent with."""
    async with httpx.AsyncClient(timeout=REQUEST_TIMEOUT) as client:
        yield client


async def _execute_and_record(
    config: RequestConfig,
    db: Session,
    client: httpx.AsyncClient,
    saved_request_id: int | None = None
) -> ExecuteResult:
    response = await execute_request(config, client=client)
    history = save_history(db, config, response, saved_request_id=saved_request_id)
    return ExecuteResult(response=response, history_id=history.id)


@router.post("/{request_id}", response_model=ExecuteResult)
async def execute_saved_request(
    request_id: int,
    db: Session = Depends(get_db),
    client: httpx.AsyncClient = Depends(get_http_client)
):
    """
    Execute a saved HTTP request by ID.

    Returns:
        The normalized response and the ID of the new history entry

    Raises:
        ResourceNotFoundError: 404 if request not found
        InvalidURLError: 400 if the URL cannot be parsed
        InvalidResponseError: 502 if the server reply is not valid HTTP
    """
    db_request = db.query(Request).filter(Request.id == request_id).first()
    if db_request is None:
        raise ResourceNotFoundError("Request", request_id)

    return await _execute_and_record(
        db_request.to_config(), db, client, saved_request_id=request_id
    )


@router.post("", response_model=ExecuteResult)
async def execute_temporary_request(
    request: RequestConfig,
    db: Session = Depends(get_db),
    client: httpx.AsyncClient = Depends(get_http_client)
):
    """
    Execute an unsaved request configuration.

    Raises:
        InvalidURLError: 400 if the URL cannot be parsed
        InvalidResponseError: 502 if the server reply is not valid HTTP
    """
    return await _execute_and_record(request, db, client)
