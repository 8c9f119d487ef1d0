"""Sample catalog endpoints: GET /samples and GET /samples/{index}."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from jsonworkbench.api.schemas import SampleListResponse, SampleResponse
from jsonworkbench.service.samples import get_sample, list_samples

router = APIRouter()


@router.get("", response_model=SampleListResponse)
async def list_all_samples() -> SampleListResponse:
    """List every built-in sample document."""
    return SampleListResponse(
        samples=[
            SampleResponse(index=i, name=s.name, description=s.description, content=s.content)
            for i, s in enumerate(list_samples())
        ]
    )


@router.get("/{index}", response_model=SampleResponse)
async def get_one_sample(index: int) -> SampleResponse:
    """Return a single sample by position."""
    sample = get_sample(index)
    if sample is None:
        raise HTTPException(status_code=404, detail=f"Sample {index} not found")
    return SampleResponse(
        index=index, name=sample.name, description=sample.description, content=sample.content
    )
