"""Workflow run artifact as returned by the GitHub Actions API."""

from typing import Optional
from pydantic import BaseModel, Field


class WorkflowRunRef(BaseModel):
    """The workflow run an artifact belongs to."""
    id: Optional[int] = None
    head_branch: Optional[str] = None
    head_sha: Optional[str] = None

    class Config:
        extra = "allow"


class Artifact(BaseModel):
    """
    Build artifact. The delivery core never inspects these; processors may.

    Unknown GitHub fields are kept so processors see the full payload.
    """
    id: int = Field(..., description="Artifact id")
    name: str = Field(..., description="Artifact name")
    size_in_bytes: int = Field(default=0, ge=0)
    archive_download_url: Optional[str] = None
    expired: bool = False
    created_at: Optional[str] = None
    expires_at: Optional[str] = None
    workflow_run: Optional[WorkflowRunRef] = None

    class Config:
        extra = "allow"
