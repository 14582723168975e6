"""
GitHub issue/PR comment destination.

Every comment written here starts with ``hidden_key + "\\n"``. The hidden key
is how a later run finds the comment again: ``get_comment`` lists all comments
on the issue and keeps those whose body contains the key (case-insensitive
substring). Update and append modes always locate before writing, which is
what keeps at most one tagged comment per issue. Two delivery cycles running
against the same issue at the same time can still break that; callers must
not do that.

The five comment modes differ only in what they do when the tagged comment
is absent or present:

    mode            absent     present
    Create          create     create (no lookup)
    Update          error      replace
    CreateOrUpdate  create     replace
    Append          error      existing body + separator + report
    CreateOrAppend  create     existing body + separator + report
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional
from ..contracts.comment import Comment
from ..utils.errors import CommentNotFoundError, ConflictingCommentsError, InvalidArgumentError
from ..utils.logging import get_logger
from .base import ReportDestination

logger = get_logger("destinations.github")


class CommentMode(str, Enum):
    """How a report is written to the issue."""
    CREATE = "Create"
    CREATE_OR_APPEND = "CreateOrAppend"
    CREATE_OR_UPDATE = "CreateOrUpdate"
    UPDATE = "Update"
    APPEND = "Append"


class OnAbsent(str, Enum):
    CREATE = "create"
    FAIL = "fail"


class OnPresent(str, Enum):
    CREATE = "create"
    REPLACE = "replace"
    APPEND = "append"


@dataclass(frozen=True)
class Transition:
    """What a mode does for each remote state."""
    locates: bool
    on_absent: OnAbsent
    on_present: OnPresent


TRANSITIONS: Dict[CommentMode, Transition] = {
    CommentMode.CREATE: Transition(locates=False, on_absent=OnAbsent.CREATE, on_present=OnPresent.CREATE),
    CommentMode.UPDATE: Transition(locates=True, on_absent=OnAbsent.FAIL, on_present=OnPresent.REPLACE),
    CommentMode.CREATE_OR_UPDATE: Transition(locates=True, on_absent=OnAbsent.CREATE, on_present=OnPresent.REPLACE),
    CommentMode.APPEND: Transition(locates=True, on_absent=OnAbsent.FAIL, on_present=OnPresent.APPEND),
    CommentMode.CREATE_OR_APPEND: Transition(locates=True, on_absent=OnAbsent.CREATE, on_present=OnPresent.APPEND),
}


class GitHubCommentDestination(ReportDestination[str]):
    """
    Writes string reports to a GitHub issue or pull request comment.

    Prefer ``create_github_web_strategy`` from ``prtifact.destinations.web_comment``
    over building this directly.
    """

    def __init__(
        self,
        client,
        issue: int,
        owner: str,
        repo: str,
        hidden_key: str,
        mode: CommentMode = CommentMode.CREATE_OR_UPDATE,
        separator: str = "\n"
    ):
        """
        Args:
            client: Object with iter_issue_comment_pages, create_issue_comment
                and update_issue_comment (normally a GitHubClient)
            issue: Issue or pull request number
            owner: Repository owner
            repo: Repository name
            hidden_key: Marker written at the top of every comment body
            mode: Comment mode
            separator: Inserted between the existing body and the new report in append modes
        """
        self.client = client
        self.issue = issue
        self.owner = owner
        self.repo = repo
        self.hidden_key = hidden_key
        self.mode = CommentMode(mode)
        self.separator = separator

    def __repr__(self) -> str:
        return (
            f"GitHubCommentDestination(mode={self.mode.value}, "
            f"target={self.owner}/{self.repo}#{self.issue})"
        )

    def _with_marker(self, body: str) -> str:
        return f"{self.hidden_key}\n{body}"

    def create_comment(self, body: str) -> None:
        """Create a new comment; the hidden key is prefixed to ``body``."""
        self.client.create_issue_comment(self.owner, self.repo, self.issue, self._with_marker(body))
        logger.info(f"Created comment on {self.owner}/{self.repo}#{self.issue}")

    def update_comment(self, comment_id: int, body: str) -> None:
        """Replace the whole body of ``comment_id``; the hidden key is prefixed to ``body``."""
        self.client.update_issue_comment(self.owner, self.repo, comment_id, self._with_marker(body))
        logger.info(f"Updated comment {comment_id} on {self.owner}/{self.repo}#{self.issue}")

    def get_comment(self, hidden_key: str) -> Optional[Comment]:
        """
        Find the single comment on the issue whose body contains ``hidden_key``.

        Args:
            hidden_key: Marker to look for (case-insensitive substring match)

        Returns:
            The matching comment, or None when no comment carries the key

        Raises:
            InvalidArgumentError: If hidden_key is empty (checked before any request)
            ConflictingCommentsError: If more than one comment carries the key
        """
        if not hidden_key:
            raise InvalidArgumentError("No hidden key provided.")

        found: List[Comment] = []
        for page in self.client.iter_issue_comment_pages(self.owner, self.repo, self.issue):
            found.extend(comment for comment in page if comment.contains(hidden_key))

        if len(found) > 1:
            ids = ", ".join(str(c.id) for c in found)
            raise ConflictingCommentsError(
                f"Multiple comments found with the same hidden key on "
                f"{self.owner}/{self.repo}#{self.issue}: {ids}"
            )
        return found[0] if found else None

    def upload_report(self, report: str) -> None:
        """
        Write ``report`` according to this destination's comment mode.

        Raises:
            CommentNotFoundError: Update/Append mode and no tagged comment exists
            ConflictingCommentsError: More than one tagged comment exists
        """
        transition = TRANSITIONS[self.mode]
        if not transition.locates:
            self.create_comment(report)
            return

        comment = self.get_comment(self.hidden_key)
        if comment is None:
            if transition.on_absent is OnAbsent.FAIL:
                raise CommentNotFoundError("Unable to find comment with specified hidden key.")
            self.create_comment(report)
        elif transition.on_present is OnPresent.APPEND:
            existing = comment.body or ""
            self.update_comment(comment.id, existing + self.separator + report)
        elif transition.on_present is OnPresent.REPLACE:
            self.update_comment(comment.id, report)
        else:
            self.create_comment(report)
