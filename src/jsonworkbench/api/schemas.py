"""API request/response Pydantic schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from jsonworkbench.models.policy import Policy


class ErrorDetail(BaseModel):
    """A single validation error detail."""

    code: str
    message: str
    line: int | None = None
    column: int | None = None


class ValidateRequest(BaseModel):
    """Request body for POST /validate."""

    text: str = Field(description="JSON text to validate")
    policy: Policy | None = Field(
        default=None, description="Strictness policy; server default when omitted"
    )


class ValidateResponse(BaseModel):
    """Response body for POST /validate."""

    valid: bool
    value: Any = None
    error: ErrorDetail | None = None


class FormatRequest(BaseModel):
    """Request body for POST /format."""

    text: str = Field(description="JSON text to pretty-print")


class FormatResponse(BaseModel):
    """Response body for POST /format."""

    formatted: str


class SampleResponse(BaseModel):
    """A catalog sample."""

    index: int
    name: str
    description: str
    content: str


class SampleListResponse(BaseModel):
    """Response for GET /samples."""

    samples: list[SampleResponse] = []


class DocumentResponse(BaseModel):
    """Response for GET /document."""

    content: str | None = None
    last_saved: datetime | None = None


class DocumentSaveRequest(BaseModel):
    """Request body for PUT /document."""

    content: str = Field(description="JSON text to persist")


class DocumentSaveResponse(BaseModel):
    """Response for PUT /document."""

    last_saved: datetime


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str = ""


class WorkspaceResponse(BaseModel):
    """Current editor state: buffer, policy and latest validation outcome."""

    content: str
    policy: Policy
    valid: bool
    error: ErrorDetail | None = None
    error_message: str | None = None
    character_count: int
    is_over_limit: bool
    can_save: bool
    last_saved: datetime | None = None


class WorkspaceContentRequest(BaseModel):
    """Request body for PUT /workspace/content."""

    content: str = Field(description="New editor buffer")


class WorkspacePolicyRequest(BaseModel):
    """Request body for PATCH /workspace/policy.

    Limits are taken as typed by the user; values that are not positive
    integers are ignored.  An empty or null ``max_depth`` clears the limit.
    """

    max_characters: int | str | None = None
    max_depth: int | str | None = None
    allow_comments: bool | None = None
    allow_trailing_commas: bool | None = None


class NoticeResponse(BaseModel):
    """Outcome of a workspace action plus the resulting state."""

    ok: bool
    level: str
    message: str
    workspace: WorkspaceResponse
