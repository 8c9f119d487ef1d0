"""Stateless endpoints: POST /validate and POST /format."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from jsonworkbench.api.deps import get_default_policy
from jsonworkbench.api.responses import WorkbenchJSONResponse
from jsonworkbench.api.schemas import (
    ErrorDetail,
    FormatRequest,
    FormatResponse,
    ValidateRequest,
    ValidateResponse,
)
from jsonworkbench.models.errors import InvalidResult
from jsonworkbench.models.policy import Policy
from jsonworkbench.parser.formatter import format_json
from jsonworkbench.parser.validator import validate

router = APIRouter()


@router.post("/validate", response_model=ValidateResponse)
async def validate_text(
    body: ValidateRequest,
    default_policy: Policy = Depends(get_default_policy),  # noqa: B008
) -> ValidateResponse | WorkbenchJSONResponse:
    """Validate JSON text under the given (or default) policy."""
    result = validate(body.text, body.policy or default_policy)
    if isinstance(result, InvalidResult):
        d = result.diagnostic
        return ValidateResponse(
            valid=False,
            error=ErrorDetail(
                code=d.code.value, message=d.message, line=d.line, column=d.column
            ),
        )
    # The parsed value goes out as-is; response-model encoding would coerce
    # exact big numbers through int/float.
    return WorkbenchJSONResponse({"valid": True, "value": result.value, "error": None})


@router.post("/format", response_model=FormatResponse)
async def format_text(body: FormatRequest) -> FormatResponse:
    """Pretty-print strict JSON with 2-space indentation."""
    formatted = format_json(body.text)
    if formatted is None:
        raise HTTPException(status_code=422, detail="Cannot format invalid JSON")
    return FormatResponse(formatted=formatted)
