"""
Collection import/export.

A folder is exported as a versioned, pretty-printed JSON document with
sorted keys. Importing always creates a new folder and new requests;
identities in the document are never reused.

Secrets (bearer tokens, basic passwords, OAuth client secrets) are written
in plaintext.
"""

import json
import logging
from datetime import datetime, timezone

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from ..config import EXPORT_FORMAT_VERSION
from ..exceptions import ExportEncodeError, ImportDecodeError
from ..models.folder import Folder
from ..models.request import Request
from ..schemas.export import ExportableFolder, ExportableRequest, ExportContainer

log = logging.getLogger(__name__)


def _iso8601(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def build_container(folder: Folder, exported_at: datetime | None = None) -> ExportContainer:
    """Project a folder and its requests onto the export document."""
    requests = sorted(folder.requests, key=lambda r: r.sort_order)
    return ExportContainer(
        version=EXPORT_FORMAT_VERSION,
        export_date=exported_at or datetime.now(timezone.utc),
        folder=ExportableFolder(
            name=folder.name,
            requests=[ExportableRequest.from_config(r.to_config()) for r in requests],
        ),
    )


def export_folder(folder: Folder, exported_at: datetime | None = None) -> bytes:
    """
    Encode a folder as an export document.

    Args:
        folder: Folder to export; its requests are written in sort order
        exported_at: Export timestamp, defaults to now

    Returns:
        UTF-8 encoded JSON

    Raises:
        ExportEncodeError: if the folder cannot be encoded
    """
    try:
        container = build_container(folder, exported_at)
        document = container.model_dump(mode="json", by_alias=True, exclude_none=True)
        document["exportDate"] = _iso8601(container.export_date)
        data = json.dumps(document, indent=2, sort_keys=True, ensure_ascii=False)
    except (PydanticValidationError, TypeError, ValueError) as e:
        raise ExportEncodeError(str(e)) from e

    log.info("exported folder %r with %d requests", folder.name, len(container.folder.requests))
    return data.encode("utf-8")


def decode_container(data: bytes | str) -> ExportContainer:
    """
    Parse and validate an export document.

    Raises:
        ImportDecodeError: if the data is not JSON or does not have the expected shape
    """
    try:
        return ExportContainer.model_validate_json(data)
    except PydanticValidationError as e:
        raise ImportDecodeError(_describe(e)) from e
    except (UnicodeDecodeError, ValueError) as e:
        raise ImportDecodeError(str(e)) from e


def _describe(error: PydanticValidationError) -> str:
    messages = []
    for item in error.errors():
        loc = " -> ".join(str(part) for part in item["loc"])
        messages.append(f"{loc}: {item['msg']}" if loc else item["msg"])
    return "; ".join(messages)


def import_folder(data: bytes | str, db: Session, existing_folder_count: int) -> Folder:
    """
    Create a new folder from an export document.

    Args:
        data: The exported JSON document
        db: Database session the new rows are added to
        existing_folder_count: Number of folders already present; the new
            folder is placed after them

    Returns:
        The new, committed folder

    Raises:
        ImportDecodeError: if the document is malformed
    """
    container = decode_container(data)

    folder = Folder(name=container.folder.name, sort_order=existing_folder_count)
    for index, exported in enumerate(container.folder.requests):
        folder.requests.append(Request.from_config(exported.to_config(), sort_order=index))

    db.add(folder)
    db.commit()
    db.refresh(folder)
    log.info(
        "imported folder %r (format %s) with %d requests",
        folder.name, container.version, len(folder.requests)
    )
    return folder
