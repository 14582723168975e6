"""Report destinations: GitHub comments and console output."""

from .base import ReportDestination, ReportProcessor
from .console import GitHubConsoleDestination, NativeConsoleDestination
from .github_strategies import CommentMode, GitHubCommentDestination
from .web_comment import COMMENT_MODES, create_github_web_strategy, parse_comment_mode

__all__ = [
    "ReportDestination",
    "ReportProcessor",
    "GitHubConsoleDestination",
    "NativeConsoleDestination",
    "CommentMode",
    "GitHubCommentDestination",
    "COMMENT_MODES",
    "create_github_web_strategy",
    "parse_comment_mode",
]
