"""Wire settings into a router and run one delivery cycle."""

import os
from typing import Any, List, Optional
from .config.settings import DeliverySettings
from .destinations.console import GitHubConsoleDestination, NativeConsoleDestination
from .destinations.web_comment import create_github_web_strategy
from .github.client import GitHubClient
from .processors.text import TextReportProcessor
from .routing.router import Router
from .utils.errors import ConfigError, PrtifactError, ReportDeliveryError
from .utils.logging import get_logger

logger = get_logger("delivery")


def build_client(settings: DeliverySettings) -> GitHubClient:
    """Create the GitHub client described by ``settings``."""
    return GitHubClient(settings.token, api_url=settings.api_url, timeout=settings.timeout)


def build_router(settings: DeliverySettings, body: str, client: Optional[GitHubClient] = None) -> Router[str]:
    """
    Register the text processor against every destination ``settings`` asks for.

    Raises:
        ConfigError: If no destination is enabled, or a comment target is set without a client
    """
    router: Router[str] = Router(max_workers=settings.max_workers)
    processor = TextReportProcessor(body)

    if settings.console:
        if os.getenv("GITHUB_ACTIONS") == "true":
            router.register_route(processor, GitHubConsoleDestination())
        else:
            router.register_route(processor, NativeConsoleDestination())

    if settings.has_comment_target:
        if client is None:
            raise ConfigError("A GitHub client is required to post comments")
        strategy = create_github_web_strategy(
            client,
            issue=settings.issue,
            comment_mode=settings.comment_mode,
            hidden_key=settings.hidden_key,
            owner=settings.owner,
            repo=settings.repo,
            separator=settings.separator
        )
        router.register_route(processor, strategy)
    elif settings.missing_comment_target:
        logger.warning(
            f"Incomplete comment target, missing {', '.join(settings.missing_comment_target)}: "
            "no comment will be posted"
        )

    if not router.routes:
        raise ConfigError("No destination configured: enable the console or set repository and issue")
    return router


def fetch_artifacts(settings: DeliverySettings, client: GitHubClient) -> List[Any]:
    """Artifacts of ``settings.workflow_run_id``, or an empty list when it cannot be queried."""
    if not (settings.workflow_run_id and settings.owner and settings.repo and settings.token):
        logger.debug("No workflow run to query, delivering without artifacts")
        return []
    return client.list_workflow_run_artifacts(settings.owner, settings.repo, settings.workflow_run_id)


def needs_artifacts(router: Router) -> bool:
    """True when at least one registered processor reads the run's artifacts."""
    return any(route.processor.uses_artifacts for route in router.routes)


def run_delivery(settings: DeliverySettings, body: str, client: Optional[GitHubClient] = None) -> None:
    """
    Deliver ``body`` (report text or a path to it) to every configured destination.

    Artifacts are only fetched when a registered processor reads them.

    Raises:
        ReportDeliveryError: If fetching artifacts, a destination or the processor failed
    """
    if client is None:
        client = build_client(settings)
    router = build_router(settings, body, client)

    artifacts: List[Any] = []
    if needs_artifacts(router):
        try:
            artifacts = fetch_artifacts(settings, client)
        except PrtifactError as e:
            logger.error(f"Failed to fetch workflow run artifacts: {e}")
            raise ReportDeliveryError([e]) from e

    logger.info(
        f"Delivering report ({settings.comment_mode.value}) to {len(router.routes[0].destinations)} destination(s)"
    )
    router.upload_report(artifacts)
