"""Custom exception classes for prtifact."""

from typing import List, Optional


class PrtifactError(Exception):
    """Base exception for all prtifact errors."""
    pass


class InvalidArgumentError(PrtifactError, ValueError):
    """Raised when a caller passes an unusable argument (empty hidden key, unknown comment mode)."""
    pass


class CommentNotFoundError(PrtifactError):
    """Raised when Update/Append finds no comment carrying the hidden key."""
    pass


class ConflictingCommentsError(PrtifactError):
    """Raised when more than one comment on an issue carries the same hidden key."""
    pass


class GitHubAPIError(PrtifactError):
    """Raised when a GitHub REST call fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ConfigError(PrtifactError):
    """Raised when configuration is invalid or missing."""
    pass


class ReportDeliveryError(PrtifactError):
    """
    Raised by the router when one or more generation or upload tasks failed.

    Every underlying exception is kept in ``errors`` so callers can report
    all of them, not just the first.
    """

    def __init__(self, errors: List[BaseException]):
        self.errors = list(errors)
        summary = "; ".join(f"{type(e).__name__}: {e}" for e in self.errors)
        super().__init__(f"{len(self.errors)} report delivery task(s) failed: {summary}")

    def __len__(self) -> int:
        return len(self.errors)
