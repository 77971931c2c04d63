"""
Orchestrator Core - the download pipeline.

Runs workflow resolution, run resolution and artifact fetching in sequence.
A workflow or run that does not exist ends the pipeline successfully with
nothing downloaded.
"""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from workflow_artifacts.config import DownloadSettings
from workflow_artifacts.core.models import RepositoryIdentity
from workflow_artifacts.download.fetcher import fetch_artifacts
from workflow_artifacts.download.resolver import resolve_run, resolve_workflow
from workflow_artifacts.github.client import GitHubClient

logger = logging.getLogger(__name__)


class DownloadOutcome(Enum):
    """How a download operation ended."""

    DOWNLOADED = "downloaded"
    WORKFLOW_NOT_FOUND = "workflow_not_found"
    RUN_NOT_FOUND = "run_not_found"


@dataclass
class DownloadResult:
    """Result of a download operation."""

    outcome: DownloadOutcome
    download_path: Path
    workflow_id: int | None = None
    run_id: int | None = None
    artifact_dirs: list[Path] = field(default_factory=list)


def resolve_destination(path: str) -> Path:
    """
    Expand a leading ~ and make the destination absolute.

    An empty path resolves to the current working directory.
    """
    return Path(os.path.expanduser(path)).resolve()


class Orchestrator:
    """Sequential workflow -> run -> artifacts pipeline over one client handle."""

    def __init__(self, client: GitHubClient):
        self._client = client

    def download(
        self,
        repo: RepositoryIdentity,
        workflow_name: str,
        run_number: int,
        names: list[str],
        destination: str,
    ) -> DownloadResult:
        """
        Download the named artifacts of a workflow run.

        Args:
            repo: Repository identity
            workflow_name: Exact workflow display name
            run_number: Run number within the workflow
            names: Requested artifact names
            destination: Output directory, may start with ~

        Returns:
            DownloadResult whose download_path is set on every outcome

        Raises:
            WorkflowArtifactsError: On ambiguity, no matching artifacts,
                extraction or API failure
        """
        download_path = resolve_destination(destination)
        logger.debug(f"Resolved path is {download_path}")

        workflow_id = resolve_workflow(self._client, repo, workflow_name)
        if workflow_id is None:
            logger.info(f"No workflow named {workflow_name!r} in {repo}, nothing to download")
            return DownloadResult(DownloadOutcome.WORKFLOW_NOT_FOUND, download_path)

        run_id = resolve_run(self._client, repo, workflow_id, run_number)
        if run_id is None:
            logger.info(f"No run #{run_number} of {workflow_name!r}, nothing to download")
            return DownloadResult(
                DownloadOutcome.RUN_NOT_FOUND, download_path, workflow_id=workflow_id
            )

        artifact_dirs = fetch_artifacts(self._client, repo, run_id, names, download_path)
        return DownloadResult(
            DownloadOutcome.DOWNLOADED,
            download_path,
            workflow_id=workflow_id,
            run_id=run_id,
            artifact_dirs=artifact_dirs,
        )


def run_download(
    settings: DownloadSettings, client: GitHubClient | None = None
) -> DownloadResult:
    """
    Run the pipeline described by settings.

    A client is created from the settings when none is given, and closed
    afterwards; a caller-supplied client is left open.
    """
    if client is not None:
        return Orchestrator(client).download(
            settings.repo, settings.workflow, settings.run, settings.names, settings.path
        )

    with GitHubClient(settings.github_config()) as owned:
        return Orchestrator(owned).download(
            settings.repo, settings.workflow, settings.run, settings.names, settings.path
        )
