"""Pydantic contracts for GitHub resources handled by prtifact."""

from .artifact import Artifact, WorkflowRunRef
from .comment import Comment

__all__ = ["Artifact", "WorkflowRunRef", "Comment"]
