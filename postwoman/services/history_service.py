"""
History service for recording request executions.

``build_history`` is a pure projection of (configuration, response) onto a
new history row; ``save_history`` persists it.
"""

from sqlalchemy.orm import Session

from ..models.history import History
from ..schemas.enums import BodyType
from ..schemas.request import RequestConfig
from ..schemas.response import HTTPResponse


def build_history(
    config: RequestConfig,
    response: HTTPResponse,
    saved_request_id: int | None = None
) -> History:
    """
    Create an unsaved history entry for one execution.

    Args:
        config: The executed request configuration
        response: The response received, or the status-0 error response
        saved_request_id: ID of the saved request that was executed, if any

    Returns:
        A new History row, not yet added to any session
    """
    entry = History(
        url=config.url,
        method=config.method.value,
        request_headers=[pair.model_dump(mode="json") for pair in config.headers],
        request_body=config.body_content or None,
        status_code=response.status_code,
        response_headers=[pair.model_dump(mode="json") for pair in response.headers],
        response_body=response.body,
        response_time_ms=response.response_time_ms,
        response_size_bytes=response.size_bytes if response.body is not None else None,
        was_successful=response.is_success,
        saved_request_id=saved_request_id,
    )
    if response.is_error:
        entry.error_message = response.body
    return entry


def save_history(
    db: Session,
    config: RequestConfig,
    response: HTTPResponse,
    saved_request_id: int | None = None
) -> History:
    """
    Save a request execution to history.

    Args:
        db: Database session
        config: The executed request configuration
        response: The response received
        saved_request_id: Optional ID of the saved request

    Returns:
        The created history record
    """
    history = build_history(config, response, saved_request_id)
    db.add(history)
    db.commit()
    db.refresh(history)
    return history


def restore_request(entry: History) -> RequestConfig:
    """
    Rebuild a request configuration from a history entry.

    History keeps no body type, so a stored body comes back as plain text.
    """
    config = RequestConfig.model_validate({
        "name": f"Restored: {entry.url}",
        "url": entry.url,
        "method": entry.method,
        "headers": entry.request_headers or [],
    })
    if entry.request_body:
        config.body_type = BodyType.TEXT
        config.body_content = entry.request_body
    return config
