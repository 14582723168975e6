"""Tests for the deliver, modes and version CLI commands."""

from unittest.mock import patch
import pytest
from click.testing import CliRunner
from prtifact import __version__
from prtifact.cli.main import cli

CI_VARS = [
    "GITHUB_ACTIONS", "GITHUB_TOKEN", "GITHUB_REPOSITORY", "GITHUB_RUN_ID", "GITHUB_API_URL", "GITHUB_EVENT_PATH",
    "PRTIFACT_ISSUE", "PRTIFACT_COMMENT_MODE", "PRTIFACT_HIDDEN_KEY", "PRTIFACT_SEPARATOR",
]


@pytest.fixture(autouse=True)
def clean_environment(tmp_path, monkeypatch):
    """Run every command from an empty directory with no CI variables or user config."""
    for var in CI_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)


class TestDeliverCommand:
    def test_prints_report_to_console(self):
        result = CliRunner().invoke(cli, ['deliver', '--body', 'hello report'])

        assert result.exit_code == 0
        assert "hello report" in result.output

    def test_reads_report_from_file(self, tmp_path):
        report = tmp_path / "report.md"
        report.write_text("from file", encoding="utf-8")

        result = CliRunner().invoke(cli, ['deliver', '--body', str(report)])

        assert result.exit_code == 0
        assert "from file" in result.output

    def test_posts_comment(self, make_client):
        client = make_client([{"id": 4, "body": "<!-- prtifact-report -->\nold"}])

        with patch("prtifact.delivery.GitHubClient", return_value=client):
            result = CliRunner().invoke(cli, [
                'deliver', '--body', 'new', '--repo', 'octo/widgets', '--issue', '7',
                '--mode', 'CreateOrAppend', '--separator', '\n---\n', '--no-console', '--token', 't',
            ])

        assert result.exit_code == 0, result.output
        assert client.calls_of("update") == [
            ("update", "octo", "widgets", 4, "<!-- prtifact-report -->\n<!-- prtifact-report -->\nold\n---\nnew")
        ]
        assert "Delivered report to octo/widgets#7" in result.output

    def test_reports_every_delivery_failure(self, make_client):
        client = make_client()

        with patch("prtifact.delivery.GitHubClient", return_value=client):
            result = CliRunner().invoke(cli, [
                'deliver', '--body', 'new', '--repo', 'octo/widgets', '--issue', '7',
                '--mode', 'Update', '--no-console',
            ])

        assert result.exit_code == 1
        assert "1 delivery task(s) failed" in result.output
        assert "CommentNotFoundError" in result.output

    def test_rejects_unknown_mode(self):
        result = CliRunner().invoke(cli, ['deliver', '--body', 'x', '--mode', 'Upsert'])

        assert result.exit_code == 1
        assert "Could not parse comment mode: Upsert" in result.output

    def test_rejects_malformed_repository(self):
        result = CliRunner().invoke(cli, ['deliver', '--body', 'x', '--repo', 'widgets', '--issue', '7'])

        assert result.exit_code == 1
        assert "Invalid repository format" in result.output

    def test_rejects_repository_without_issue(self):
        result = CliRunner().invoke(cli, ['deliver', '--body', 'x', '--repo', 'octo/widgets'])

        assert result.exit_code == 1
        assert "Incomplete comment target, missing issue" in result.output

    def test_rejects_issue_without_repository(self):
        result = CliRunner().invoke(cli, ['deliver', '--body', 'x', '--issue', '7'])

        assert result.exit_code == 1
        assert "Incomplete comment target, missing repository" in result.output

    def test_requires_a_destination(self):
        result = CliRunner().invoke(cli, ['deliver', '--body', 'x', '--no-console'])

        assert result.exit_code == 1
        assert "No destination configured" in result.output


class TestInfoCommands:
    def test_modes_lists_all_modes(self):
        result = CliRunner().invoke(cli, ['modes'])

        assert result.exit_code == 0
        assert result.output.split() == ["Create", "CreateOrAppend", "CreateOrUpdate", "Update", "Append"]

    def test_version_command(self):
        result = CliRunner().invoke(cli, ['version'])

        assert result.output.strip() == f"prtifact version {__version__}"

    def test_version_option(self):
        result = CliRunner().invoke(cli, ['--version'])

        assert __version__ in result.output
