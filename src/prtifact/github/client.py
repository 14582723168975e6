"""Thin GitHub REST client for issue comments and workflow artifacts."""

from typing import Any, Dict, Iterator, List, Optional, Tuple
import requests
from ..contracts.artifact import Artifact
from ..contracts.comment import Comment
from ..utils.errors import GitHubAPIError, InvalidArgumentError
from ..utils.logging import get_logger

logger = get_logger("github.client")

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0
MAX_PER_PAGE = 100


def parse_repository(repository: str) -> Tuple[str, str]:
    """
    Split "owner/repo" into its two parts.

    Raises:
        InvalidArgumentError: If the string is not in owner/repo form
    """
    owner, sep, name = (repository or "").strip().partition("/")
    if not sep or not owner or not name or "/" in name:
        raise InvalidArgumentError(f"Invalid repository format: {repository}. Expected 'owner/repo'")
    return owner, name


class GitHubClient:
    """
    Issue comment and artifact calls over a shared ``requests.Session``.

    Errors from the REST API surface as ``GitHubAPIError``; nothing here retries.
    """

    def __init__(
        self,
        token: Optional[str],
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        per_page: int = MAX_PER_PAGE,
        session: Optional[requests.Session] = None
    ):
        """
        Args:
            token: GitHub token; anonymous requests are made when empty
            api_url: REST API root (GitHub Enterprise uses https://host/api/v3)
            timeout: Per-request timeout in seconds
            per_page: Page size for list calls (capped at 100)
            session: Optional pre-built session
        """
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.per_page = max(1, min(per_page, MAX_PER_PAGE))
        self.session = session or requests.Session()
        self.session.headers.update({
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        })
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    def _url(self, path: str) -> str:
        return f"{self.api_url}/{path.lstrip('/')}"

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
            return response
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            if status == 401:
                raise GitHubAPIError("GitHub authentication failed. Check your GITHUB_TOKEN.", status) from e
            if status == 403:
                raise GitHubAPIError(
                    "GitHub denied the request. The token needs issues: write or pull-requests: write permission.",
                    status
                ) from e
            if status == 404:
                raise GitHubAPIError(f"GitHub resource not found: {method} {url}", status) from e
            error_msg = e.response.text if e.response is not None else str(e)
            raise GitHubAPIError(f"GitHub API error ({status}): {error_msg}", status) from e
        except requests.exceptions.RequestException as e:
            raise GitHubAPIError(f"GitHub request failed: {method} {url}: {e}") from e

    def _paginate(self, url: str, params: Optional[Dict[str, Any]] = None) -> Iterator[requests.Response]:
        """Yield each page, following the Link rel="next" header."""
        next_url: Optional[str] = url
        next_params: Optional[Dict[str, Any]] = dict(params or {}, per_page=self.per_page)
        while next_url:
            response = self._request("GET", next_url, params=next_params)
            yield response
            next_url = response.links.get("next", {}).get("url")
            # The next link already carries the query string
            next_params = None

    def iter_issue_comment_pages(self, owner: str, repo: str, issue: int) -> Iterator[List[Comment]]:
        """Yield the comments of an issue or PR one page at a time."""
        url = self._url(f"repos/{owner}/{repo}/issues/{issue}/comments")
        for page_number, response in enumerate(self._paginate(url), start=1):
            payload = response.json()
            if not isinstance(payload, list):
                raise GitHubAPIError(f"Unexpected comment listing payload on page {page_number}")
            logger.debug(f"Fetched {len(payload)} comments from {owner}/{repo}#{issue} (page {page_number})")
            yield [Comment(**item) for item in payload]

    def create_issue_comment(self, owner: str, repo: str, issue: int, body: str) -> Comment:
        """Create a comment on an issue or PR."""
        url = self._url(f"repos/{owner}/{repo}/issues/{issue}/comments")
        response = self._request("POST", url, json={"body": body})
        return Comment(**response.json())

    def update_issue_comment(self, owner: str, repo: str, comment_id: int, body: str) -> Comment:
        """Replace the body of an existing comment."""
        url = self._url(f"repos/{owner}/{repo}/issues/comments/{comment_id}")
        response = self._request("PATCH", url, json={"body": body})
        return Comment(**response.json())

    def list_workflow_run_artifacts(self, owner: str, repo: str, run_id: int) -> List[Artifact]:
        """List every artifact uploaded by a workflow run."""
        url = self._url(f"repos/{owner}/{repo}/actions/runs/{run_id}/artifacts")
        artifacts: List[Artifact] = []
        for response in self._paginate(url):
            payload = response.json()
            items = payload.get("artifacts", []) if isinstance(payload, dict) else []
            artifacts.extend(Artifact(**item) for item in items)
        logger.info(f"Found {len(artifacts)} artifacts for run {run_id} in {owner}/{repo}")
        return artifacts
