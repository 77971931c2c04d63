"""
GitHub Client - thin consumer of the GitHub Actions REST API.

Lists workflows, runs and artifacts (following pagination) and downloads
artifact archives. Requests are issued one at a time and never retried.
"""

import logging
from typing import Any

import httpx

from workflow_artifacts.config import GitHubConfig
from workflow_artifacts.core.exceptions import (
    GitHubAPIError,
    GitHubAuthenticationError,
    GitHubNotFoundError,
)
from workflow_artifacts.core.models import (
    ArtifactDescriptor,
    RepositoryIdentity,
    WorkflowInfo,
    WorkflowRunInfo,
)

logger = logging.getLogger(__name__)


class GitHubClient:
    """
    GitHub Actions API client.

    Redirects are followed: renamed or transferred repositories answer with
    301 to /repositories/<id>/..., and artifact downloads redirect to storage.

    Environment variables (read by GitHubConfig.from_env):
    - GITHUB_TOKEN: Default credential
    - GITHUB_API_URL: API base URL (GitHub Enterprise Server)
    """

    def __init__(
        self,
        config: GitHubConfig | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize GitHub client with configuration."""
        self._config = config or GitHubConfig.from_env()
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": self._config.api_version,
        }
        if self._config.token:
            headers["Authorization"] = f"Bearer {self._config.token}"

        self._client = httpx.Client(
            base_url=self._config.api_url,
            headers=headers,
            timeout=self._config.timeout_seconds,
            follow_redirects=True,
            transport=transport,
        )

    @property
    def api_url(self) -> str:
        """Get the API base URL."""
        return self._config.api_url

    def list_workflows(self, repo: RepositoryIdentity) -> list[WorkflowInfo]:
        """List every workflow defined in the repository."""
        items = self._paginate(f"/repos/{repo.full_name}/actions/workflows", "workflows")
        return [WorkflowInfo.model_validate(item) for item in items]

    def list_workflow_runs(
        self, repo: RepositoryIdentity, workflow_id: int
    ) -> list[WorkflowRunInfo]:
        """List every run of a workflow."""
        items = self._paginate(
            f"/repos/{repo.full_name}/actions/workflows/{workflow_id}/runs",
            "workflow_runs",
        )
        return [WorkflowRunInfo.model_validate(item) for item in items]

    def list_run_artifacts(
        self, repo: RepositoryIdentity, run_id: int
    ) -> list[ArtifactDescriptor]:
        """List every artifact attached to a run."""
        items = self._paginate(
            f"/repos/{repo.full_name}/actions/runs/{run_id}/artifacts",
            "artifacts",
        )
        return [ArtifactDescriptor.model_validate(item) for item in items]

    def download_artifact(self, repo: RepositoryIdentity, artifact_id: int) -> bytes:
        """
        Download an artifact as a zip archive.

        The API answers with a redirect to short-lived storage; httpx drops
        the Authorization header when the redirect crosses origins.

        Returns:
            Raw archive bytes
        """
        url = f"/repos/{repo.full_name}/actions/artifacts/{artifact_id}/zip"
        response = self._request(url)
        logger.debug(f"Downloaded artifact {artifact_id}: {len(response.content)} bytes")
        return response.content

    def _paginate(self, url: str, key: str) -> list[dict[str, Any]]:
        """Collect `key` from every page, following rel="next" links."""
        items: list[dict[str, Any]] = []
        params: dict[str, Any] | None = {"per_page": self._config.per_page}
        next_url: str | None = url

        while next_url:
            response = self._request(next_url, params=params)
            page = response.json().get(key) or []
            items.extend(page)
            next_url = response.links.get("next", {}).get("url")
            # The next link already carries the query string
            params = None

        logger.debug(f"Listed {len(items)} {key} from {url}")
        return items

    def _request(
        self,
        url: str,
        *,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        try:
            response = self._client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            self._handle_http_error(e)
        except httpx.HTTPError as e:
            raise GitHubAPIError(f"HTTP error during GitHub request: {e}", url=str(url)) from e
        return response

    def _handle_http_error(self, error: httpx.HTTPStatusError) -> None:
        """Convert HTTP errors to appropriate GitHub exceptions."""
        status_code = error.response.status_code
        url = str(error.request.url)

        if status_code in (401, 403):
            raise GitHubAuthenticationError(
                f"GitHub rejected the credential: {status_code}",
                status_code=status_code,
                url=url,
            ) from error
        elif status_code == 404:
            raise GitHubNotFoundError(f"GitHub resource not found: {url}", url=url) from error
        elif status_code >= 500:
            raise GitHubAPIError(
                f"Server error from GitHub: {status_code}",
                status_code=status_code,
                url=url,
            ) from error
        else:
            raise GitHubAPIError(
                f"HTTP error from GitHub: {status_code}",
                status_code=status_code,
                url=url,
            ) from error

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, *args):
        """Context manager exit."""
        self.close()
