"""
Code generation and JSON utility routes for unsaved content.
"""

from fastapi import APIRouter

from ..exceptions import error_responses

from ..schemas.codegen import (
    CodeGenerationRequest,
    CodeGenerationResponse,
    JSONText,
    JSONFormatResult,
)
from ..services.codegen import generate_code
from ..services.json_formatter import format_json, is_valid_json, minify_json


router = APIRouter(prefix="/api", tags=["tools"], responses=error_responses(422))


@router.post("/codegen", response_model=CodeGenerationResponse)
def generate(payload: CodeGenerationRequest):
    """Render an unsaved request configuration as source code."""
    return CodeGenerationResponse(
        language=payload.language,
        code=generate_code(payload.request, payload.language),
    )


@router.post("/json/format", response_model=JSONFormatResult)
def format_text(payload: JSONText):
    """Pretty-print JSON; ``result`` is null when the text is not JSON."""
    result = format_json(payload.text)
    return JSONFormatResult(result=result, valid=result is not None)


@router.post("/json/minify", response_model=JSONFormatResult)
def minify_text(payload: JSONText):
    """Minify JSON; ``result`` is null when the text is not JSON."""
    result = minify_json(payload.text)
    return JSONFormatResult(result=result, valid=result is not None)


@router.post("/json/validate", response_model=JSONFormatResult)
def validate_text(payload: JSONText):
    """Report whether the text is valid JSON."""
    return JSONFormatResult(result=None, valid=is_valid_json(payload.text))
