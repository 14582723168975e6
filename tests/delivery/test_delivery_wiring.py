"""Tests for building routers from settings."""

import logging
from unittest.mock import Mock, patch
import pytest
from prtifact.config.settings import DeliverySettings
from prtifact.delivery import build_router, fetch_artifacts, run_delivery
from prtifact.destinations.console import GitHubConsoleDestination, NativeConsoleDestination
from prtifact.destinations.github_strategies import CommentMode, GitHubCommentDestination
from prtifact.processors.text import TextReportProcessor
from prtifact.utils.errors import CommentNotFoundError, ConfigError, GitHubAPIError, ReportDeliveryError

TARGET = {"owner": "octo", "repo": "widgets", "issue": 7}


class TestBuildRouter:
    def test_console_only(self, monkeypatch):
        monkeypatch.delenv("GITHUB_ACTIONS", raising=False)

        router = build_router(DeliverySettings(), "report")

        (route,) = router.routes
        assert [type(d) for d in route.destinations] == [NativeConsoleDestination]

    def test_uses_log_group_inside_actions(self, monkeypatch):
        monkeypatch.setenv("GITHUB_ACTIONS", "true")

        router = build_router(DeliverySettings(), "report")

        assert isinstance(router.routes[0].destinations[0], GitHubConsoleDestination)

    def test_comment_target_adds_strategy_on_same_route(self, make_client, monkeypatch):
        monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
        settings = DeliverySettings(comment_mode="Append", separator="--", hidden_key="k", **TARGET)

        router = build_router(settings, "report", make_client())

        (route,) = router.routes
        strategy = route.destinations[-1]
        assert isinstance(strategy, GitHubCommentDestination)
        assert strategy.mode is CommentMode.APPEND
        assert (strategy.hidden_key, strategy.separator) == ("k", "--")

    def test_comment_target_requires_client(self):
        with pytest.raises(ConfigError, match="client is required"):
            build_router(DeliverySettings(**TARGET), "report")

    def test_partial_target_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="prtifact.delivery"):
            router = build_router(DeliverySettings(owner="octo", repo="widgets"), "report")

        assert len(router.routes[0].destinations) == 1
        assert "missing issue" in caplog.text

    def test_no_warning_without_any_target(self, caplog):
        with caplog.at_level(logging.WARNING, logger="prtifact.delivery"):
            build_router(DeliverySettings(), "report")

        assert "Incomplete comment target" not in caplog.text

    def test_no_destination_is_an_error(self):
        with pytest.raises(ConfigError, match="No destination configured"):
            build_router(DeliverySettings(console=False), "report")


class TestFetchArtifacts:
    def test_skipped_without_run_or_token(self, make_client):
        client = make_client()

        assert fetch_artifacts(DeliverySettings(workflow_run_id=5, **TARGET), client) == []
        assert client.calls == []

    def test_queries_run_when_configured(self, make_client):
        client = make_client()
        client.artifacts = [{"id": 1, "name": "dist"}]
        settings = DeliverySettings(workflow_run_id=5, token="t", **TARGET)

        assert fetch_artifacts(settings, client) == [{"id": 1, "name": "dist"}]
        assert client.calls == [("artifacts", "octo", "widgets", 5)]


class TestRunDelivery:
    def test_posts_comment_and_prints(self, make_client, capsys, monkeypatch):
        monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
        client = make_client()

        run_delivery(DeliverySettings(hidden_key="k", **TARGET), "hello", client)

        assert client.calls_of("create") == [("create", "octo", "widgets", 7, "k\nhello")]
        assert "hello" in capsys.readouterr().out

    def test_failures_surface_as_delivery_error(self, make_client):
        client = make_client()
        settings = DeliverySettings(comment_mode="Update", console=False, **TARGET)

        with pytest.raises(ReportDeliveryError) as exc_info:
            run_delivery(settings, "hello", client)

        assert [type(e) for e in exc_info.value.errors] == [CommentNotFoundError]

    def test_builds_client_from_settings(self, make_client):
        client = make_client()
        settings = DeliverySettings(token="t", timeout=5, console=False, **TARGET)

        with patch("prtifact.delivery.GitHubClient", return_value=client) as client_cls:
            run_delivery(settings, "hello")

        client_cls.assert_called_once_with("t", api_url=settings.api_url, timeout=5)
        assert len(client.calls_of("create")) == 1

    def test_text_report_skips_artifact_fetch(self, make_client):
        client = make_client()
        client.list_workflow_run_artifacts = Mock(side_effect=GitHubAPIError("GitHub denied the request.", 403))
        settings = DeliverySettings(workflow_run_id=5, token="t", console=False, **TARGET)

        run_delivery(settings, "hello", client)

        client.list_workflow_run_artifacts.assert_not_called()
        assert client.calls_of("create") == [("create", "octo", "widgets", 7, f"{settings.hidden_key}\nhello")]

    def test_artifacts_fetched_for_processor_that_reads_them(self, make_client, monkeypatch):
        monkeypatch.setattr(TextReportProcessor, "uses_artifacts", True)
        client = make_client()
        settings = DeliverySettings(workflow_run_id=5, token="t", console=False, **TARGET)

        run_delivery(settings, "hello", client)

        assert client.calls_of("artifacts") == [("artifacts", "octo", "widgets", 5)]
        assert len(client.calls_of("create")) == 1

    def test_failing_artifact_fetch_is_a_delivery_error(self, make_client, monkeypatch):
        monkeypatch.setattr(TextReportProcessor, "uses_artifacts", True)
        client = make_client()
        error = GitHubAPIError("GitHub denied the request.", 403)
        client.list_workflow_run_artifacts = Mock(side_effect=error)
        settings = DeliverySettings(workflow_run_id=5, token="t", console=False, **TARGET)

        with pytest.raises(ReportDeliveryError) as exc_info:
            run_delivery(settings, "hello", client)

        assert exc_info.value.errors == [error]
        assert client.calls_of("create") == []
