"""
Pydantic schemas for code generation and the JSON utilities.
"""

from pydantic import BaseModel

from .enums import CodeLanguage
from .request import RequestConfig


class CodeGenerationRequest(BaseModel):
    """Schema for rendering an unsaved request as code."""
    language: CodeLanguage = CodeLanguage.CURL
    request: RequestConfig


class CodeGenerationResponse(BaseModel):
    """Generated source for one target language."""
    language: CodeLanguage
    code: str


class JSONText(BaseModel):
    """Raw text submitted to the JSON utilities."""
    text: str


class JSONFormatResult(BaseModel):
    """Formatted text, or None when the input was not valid JSON."""
    result: str | None
    valid: bool
