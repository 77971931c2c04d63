"""
Artifact fetching.

Selects the requested artifacts of a run, downloads each archive and
extracts it into a directory named after the artifact. Artifacts are
processed one after another; the first failure aborts the operation.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from workflow_artifacts.core.exceptions import NoArtifactsFound
from workflow_artifacts.core.models import ArtifactDescriptor, RepositoryIdentity
from workflow_artifacts.download.extractor import extract_archive

if TYPE_CHECKING:
    from workflow_artifacts.github.client import GitHubClient

logger = logging.getLogger(__name__)


def parse_artifact_names(names: str) -> list[str]:
    """Split a comma-separated name list, trimming whitespace and dropping blanks and repeats."""
    parsed: list[str] = []
    for name in names.split(","):
        name = name.strip()
        if name and name not in parsed:
            parsed.append(name)
    return parsed


def select_artifacts(
    artifacts: list[ArtifactDescriptor], names: list[str]
) -> list[ArtifactDescriptor]:
    """Keep the artifacts whose name was requested, in listing order."""
    wanted = set(names)
    selected = [a for a in artifacts if a.name in wanted]

    missing = wanted - {a.name for a in selected}
    if missing:
        logger.debug(f"Requested artifacts not present on run: {', '.join(sorted(missing))}")
    return selected


def fetch_artifacts(
    client: "GitHubClient",
    repo: RepositoryIdentity,
    run_id: int,
    names: list[str],
    output_base: Path,
) -> list[Path]:
    """
    Download and extract the requested artifacts of a run.

    Args:
        client: GitHub client handle
        repo: Repository owning the run
        run_id: Resolved run id
        names: Requested artifact names
        output_base: Directory receiving one subdirectory per artifact

    Returns:
        The per-artifact directories, in processing order

    Raises:
        NoArtifactsFound: If no requested name matches an artifact of the run
        ExtractionFailed: If an archive cannot be extracted
        GitHubAPIError: If listing or downloading fails
    """
    artifacts = client.list_run_artifacts(repo, run_id)
    selected = select_artifacts(artifacts, names)
    if not selected:
        raise NoArtifactsFound(
            run_id=run_id,
            requested=list(names),
            available=[a.name for a in artifacts],
        )

    directories: list[Path] = []
    for artifact in selected:
        logger.info(f"Downloading artifact {artifact.name} ({artifact.id})")
        data = client.download_artifact(repo, artifact.id)
        target = output_base / artifact.name
        extract_archive(data, target)
        directories.append(target)

    return directories
