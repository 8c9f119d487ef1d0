"""Editor workspace endpoints: live buffer, policy edits, format and save."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from jsonworkbench.api.deps import get_workspace
from jsonworkbench.api.schemas import (
    ErrorDetail,
    NoticeResponse,
    WorkspaceContentRequest,
    WorkspacePolicyRequest,
    WorkspaceResponse,
)
from jsonworkbench.models.errors import InvalidResult
from jsonworkbench.service.workspace import Notice, Workspace

router = APIRouter()


def _state(workspace: Workspace) -> WorkspaceResponse:
    result = workspace.result
    error = None
    if isinstance(result, InvalidResult):
        d = result.diagnostic
        error = ErrorDetail(code=d.code.value, message=d.message, line=d.line, column=d.column)
    return WorkspaceResponse(
        content=workspace.content,
        policy=workspace.policy,
        valid=result.valid,
        error=error,
        error_message=workspace.error_message,
        character_count=workspace.character_count,
        is_over_limit=workspace.is_over_limit,
        can_save=workspace.can_save,
        last_saved=workspace.last_saved,
    )


def _notice(notice: Notice, workspace: Workspace) -> NoticeResponse:
    return NoticeResponse(
        ok=notice.ok,
        level=notice.level.value,
        message=notice.message,
        workspace=_state(workspace),
    )


@router.get("", response_model=WorkspaceResponse)
async def get_state(
    workspace: Workspace = Depends(get_workspace),  # noqa: B008
) -> WorkspaceResponse:
    """Return the buffer with its current validation result."""
    return _state(workspace)


@router.put("/content", response_model=WorkspaceResponse)
async def set_content(
    body: WorkspaceContentRequest,
    workspace: Workspace = Depends(get_workspace),  # noqa: B008
) -> WorkspaceResponse:
    """Replace the buffer and re-validate."""
    workspace.set_content(body.content)
    return _state(workspace)


@router.patch("/policy", response_model=WorkspaceResponse)
async def update_policy(
    body: WorkspacePolicyRequest,
    workspace: Workspace = Depends(get_workspace),  # noqa: B008
) -> WorkspaceResponse:
    """Apply the policy fields present in the request and re-validate."""
    if "max_characters" in body.model_fields_set:
        workspace.set_max_characters(body.max_characters)
    if "max_depth" in body.model_fields_set:
        workspace.set_max_depth(body.max_depth)
    flags = {
        name: value
        for name, value in (
            ("allow_comments", body.allow_comments),
            ("allow_trailing_commas", body.allow_trailing_commas),
        )
        if value is not None
    }
    if flags:
        workspace.update_policy(**flags)
    return _state(workspace)


@router.post("/samples/{index}", response_model=WorkspaceResponse)
async def load_sample(
    index: int,
    workspace: Workspace = Depends(get_workspace),  # noqa: B008
) -> WorkspaceResponse:
    """Load a catalog sample into the buffer."""
    if not workspace.apply_sample(index):
        raise HTTPException(status_code=404, detail=f"Sample {index} not found")
    return _state(workspace)


@router.post("/format", response_model=NoticeResponse)
async def format_buffer(
    workspace: Workspace = Depends(get_workspace),  # noqa: B008
) -> NoticeResponse:
    """Pretty-print the buffer in place when it is strict JSON."""
    return _notice(workspace.format(), workspace)


@router.post("/save", response_model=NoticeResponse)
async def save_buffer(
    workspace: Workspace = Depends(get_workspace),  # noqa: B008
) -> NoticeResponse:
    """Persist the buffer when it is valid and non-empty."""
    return _notice(workspace.save(), workspace)
