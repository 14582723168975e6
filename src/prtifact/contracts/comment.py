"""Issue comment as returned by the GitHub REST API."""

from typing import Optional
from pydantic import BaseModel, Field


class Comment(BaseModel):
    """Remote issue/PR comment. Only the fields prtifact reads are modelled."""
    id: int = Field(..., description="Numeric comment id used for updates")
    body: Optional[str] = Field(default=None, description="Raw markdown body, may be null")
    html_url: Optional[str] = Field(default=None, description="Browser URL of the comment")

    class Config:
        extra = "ignore"

    def contains(self, hidden_key: str) -> bool:
        """Case-insensitive substring match of ``hidden_key`` against the body."""
        if self.body is None:
            return False
        return hidden_key.lower() in self.body.lower()
