"""Saved-document endpoints: GET /document and PUT /document."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from jsonworkbench.api.deps import get_default_policy, get_document_store
from jsonworkbench.api.schemas import (
    DocumentResponse,
    DocumentSaveRequest,
    DocumentSaveResponse,
)
from jsonworkbench.models.errors import InvalidResult
from jsonworkbench.models.policy import Policy
from jsonworkbench.parser.validator import validate
from jsonworkbench.service.document_store import DocumentStore, PersistenceError

router = APIRouter()


@router.get("", response_model=DocumentResponse)
async def get_document(
    store: DocumentStore = Depends(get_document_store),  # noqa: B008
) -> DocumentResponse:
    """Return the saved document and when it was saved."""
    return DocumentResponse(content=store.load(), last_saved=store.last_saved)


@router.put("", response_model=DocumentSaveResponse)
async def save_document(
    body: DocumentSaveRequest,
    store: DocumentStore = Depends(get_document_store),  # noqa: B008
    policy: Policy = Depends(get_default_policy),  # noqa: B008
) -> DocumentSaveResponse:
    """Persist the document; only valid, non-empty JSON is accepted."""
    if not body.content:
        raise HTTPException(status_code=422, detail="Cannot save an empty document")
    result = validate(body.content, policy)
    if isinstance(result, InvalidResult):
        d = result.diagnostic
        raise HTTPException(
            status_code=422,
            detail={
                "message": "Cannot save invalid JSON",
                "error": {
                    "code": d.code.value,
                    "message": d.message,
                    "line": d.line,
                    "column": d.column,
                },
            },
        )
    try:
        saved_at = store.save(body.content)
    except PersistenceError:
        raise HTTPException(status_code=500, detail="Failed to save JSON") from None
    return DocumentSaveResponse(last_saved=saved_at)
