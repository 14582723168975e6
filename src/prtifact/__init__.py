"""prtifact - deliver build artifact reports to GitHub comments and other destinations."""

from typing import Any, Optional
from .config import DeliverySettings, load_settings
from .delivery import build_router, run_delivery
from .destinations import (
    CommentMode,
    GitHubCommentDestination,
    ReportDestination,
    ReportProcessor,
    create_github_web_strategy,
    parse_comment_mode,
)
from .github import GitHubClient
from .routing import Router
from .utils.errors import (
    CommentNotFoundError,
    ConfigError,
    ConflictingCommentsError,
    GitHubAPIError,
    InvalidArgumentError,
    PrtifactError,
    ReportDeliveryError,
)
from .utils.logging import setup_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    "deliver",
    "Router",
    "ReportProcessor",
    "ReportDestination",
    "CommentMode",
    "GitHubCommentDestination",
    "GitHubClient",
    "create_github_web_strategy",
    "parse_comment_mode",
    "DeliverySettings",
    "load_settings",
    "build_router",
    "PrtifactError",
    "InvalidArgumentError",
    "CommentNotFoundError",
    "ConflictingCommentsError",
    "GitHubAPIError",
    "ConfigError",
    "ReportDeliveryError",
]

setup_logging()
logger = get_logger("main")


def deliver(body: str, config_path: Optional[str] = None, **overrides: Any) -> None:
    """
    Deliver a report using layered configuration.

    Args:
        body: Report text, or a path to a file holding it
        config_path: Optional YAML config file
        **overrides: DeliverySettings fields that win over every other layer

    Raises:
        ConfigError: Invalid configuration
        ReportDeliveryError: One or more destinations (or the processor) failed
    """
    settings = load_settings(config_path, overrides)
    try:
        run_delivery(settings, body)
    except ReportDeliveryError as e:
        for error in e.errors:
            logger.error(f"Delivery failure: {type(error).__name__}: {error}")
        raise
