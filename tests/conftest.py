"""Shared fixtures: an in-memory stand-in for GitHubClient."""

from typing import Dict, List, Optional
import pytest
from prtifact.contracts.comment import Comment


class FakeGitHubClient:
    """Records every call and serves comments from memory, ``page_size`` per page."""

    def __init__(self, comments: Optional[List[Dict]] = None, page_size: int = 2):
        self.comments = [dict(c) for c in (comments or [])]
        self.page_size = page_size
        self.calls: List[tuple] = []
        self.artifacts: List = []
        self._next_id = 1000

    def iter_issue_comment_pages(self, owner, repo, issue):
        self.calls.append(("list", owner, repo, issue))
        for start in range(0, len(self.comments), self.page_size):
            yield [Comment(**c) for c in self.comments[start:start + self.page_size]]

    def create_issue_comment(self, owner, repo, issue, body):
        self.calls.append(("create", owner, repo, issue, body))
        self._next_id += 1
        self.comments.append({"id": self._next_id, "body": body})
        return Comment(id=self._next_id, body=body)

    def update_issue_comment(self, owner, repo, comment_id, body):
        self.calls.append(("update", owner, repo, comment_id, body))
        for comment in self.comments:
            if comment["id"] == comment_id:
                comment["body"] = body
        return Comment(id=comment_id, body=body)

    def list_workflow_run_artifacts(self, owner, repo, run_id):
        self.calls.append(("artifacts", owner, repo, run_id))
        return list(self.artifacts)

    def calls_of(self, kind: str) -> List[tuple]:
        return [call for call in self.calls if call[0] == kind]


@pytest.fixture
def make_client():
    """Factory for FakeGitHubClient instances."""
    return FakeGitHubClient
