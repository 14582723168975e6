"""Comment mode parsing and the GitHub comment destination factory."""

from typing import Union
from ..utils.errors import InvalidArgumentError
from .github_strategies import CommentMode, GitHubCommentDestination

COMMENT_MODES = tuple(mode.value for mode in CommentMode)


def parse_comment_mode(maybe_comment_mode: str) -> CommentMode:
    """
    Parse a comment mode literal (case-sensitive, exact match).

    Raises:
        InvalidArgumentError: If the text is not one of COMMENT_MODES
    """
    for mode in CommentMode:
        if mode.value == maybe_comment_mode:
            return mode
    raise InvalidArgumentError(f"Could not parse comment mode: {maybe_comment_mode}")


def create_github_web_strategy(
    client,
    issue: int,
    comment_mode: Union[CommentMode, str],
    hidden_key: str,
    owner: str,
    repo: str,
    separator: str
) -> GitHubCommentDestination:
    """
    Build the comment destination for ``comment_mode``.

    Args:
        client: GitHub client used for every request
        issue: Issue or pull request number
        comment_mode: A CommentMode or its literal name
        hidden_key: Marker used to find the comment on later runs
        owner: Repository owner
        repo: Repository name
        separator: Text inserted between the old body and the new report when appending
    """
    mode = comment_mode if isinstance(comment_mode, CommentMode) else parse_comment_mode(comment_mode)
    return GitHubCommentDestination(
        client,
        issue=issue,
        owner=owner,
        repo=repo,
        hidden_key=hidden_key,
        mode=mode,
        separator=separator
    )
