"""
Pydantic schemas package.

Exports all schemas for request configurations, responses and API payloads.
"""

from .enums import (
    HTTPMethod,
    BodyType,
    AuthType,
    CodeLanguage,
)

from .key_value import KeyValuePair, enabled_pairs

from .request import (
    OAuthConfig,
    RequestConfig,
    RequestCreate,
    RequestUpdate,
    RequestResponse,
    ReorderRequests,
)

from .response import HTTPResponse, reason_phrase

from .folder import (
    FolderBase,
    FolderCreate,
    FolderUpdate,
    FolderResponse,
    FolderWithRequests,
    ReorderFolders,
)

from .history import (
    HistoryResponse,
    HistoryListResponse,
)

from .execute import ExecuteResult

from .codegen import (
    CodeGenerationRequest,
    CodeGenerationResponse,
    JSONText,
    JSONFormatResult,
)

from .export import (
    ExportableKeyValuePair,
    ExportableOAuthConfig,
    ExportableRequest,
    ExportableFolder,
    ExportContainer,
)

__all__ = [
    # Enumerations
    "HTTPMethod",
    "BodyType",
    "AuthType",
    "CodeLanguage",
    # Request configuration
    "KeyValuePair",
    "enabled_pairs",
    "OAuthConfig",
    "RequestConfig",
    "RequestCreate",
    "RequestUpdate",
    "RequestResponse",
    "ReorderRequests",
    # Response
    "HTTPResponse",
    "reason_phrase",
    # Folder schemas
    "FolderBase",
    "FolderCreate",
    "FolderUpdate",
    "FolderResponse",
    "FolderWithRequests",
    "ReorderFolders",
    # History schemas
    "HistoryResponse",
    "HistoryListResponse",
    # Execute schemas
    "ExecuteResult",
    # Code generation and JSON utilities
    "CodeGenerationRequest",
    "CodeGenerationResponse",
    "JSONText",
    "JSONFormatResult",
    # Export format
    "ExportableKeyValuePair",
    "ExportableOAuthConfig",
    "ExportableRequest",
    "ExportableFolder",
    "ExportContainer",
]
