"""Pytest configuration and fixtures."""

import io
import tempfile
import zipfile
from pathlib import Path
from typing import Callable, Generator

import pytest

from workflow_artifacts.core.models import (
    ArtifactDescriptor,
    RepositoryIdentity,
    WorkflowInfo,
    WorkflowRunInfo,
)


def build_zip(entries: dict[str, bytes | None]) -> bytes:
    """Build a zip archive in memory; a None value marks a directory entry."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for name, content in entries.items():
            if content is None:
                archive.writestr(zipfile.ZipInfo(name), b"")
            else:
                archive.writestr(name, content)
    return buffer.getvalue()


class FakeGitHubClient:
    """In-memory stand-in for GitHubClient."""

    def __init__(
        self,
        workflows: list[WorkflowInfo] | None = None,
        runs: dict[int, list[WorkflowRunInfo]] | None = None,
        artifacts: dict[int, list[ArtifactDescriptor]] | None = None,
        archives: dict[int, bytes] | None = None,
    ):
        self.workflows = workflows or []
        self.runs = runs or {}
        self.artifacts = artifacts or {}
        self.archives = archives or {}
        self.calls: list[tuple] = []
        self.downloaded: list[int] = []

    def list_workflows(self, repo: RepositoryIdentity) -> list[WorkflowInfo]:
        self.calls.append(("list_workflows", repo.full_name))
        return list(self.workflows)

    def list_workflow_runs(self, repo: RepositoryIdentity, workflow_id: int) -> list[WorkflowRunInfo]:
        self.calls.append(("list_workflow_runs", workflow_id))
        return list(self.runs.get(workflow_id, []))

    def list_run_artifacts(self, repo: RepositoryIdentity, run_id: int) -> list[ArtifactDescriptor]:
        self.calls.append(("list_run_artifacts", run_id))
        return list(self.artifacts.get(run_id, []))

    def download_artifact(self, repo: RepositoryIdentity, artifact_id: int) -> bytes:
        self.calls.append(("download_artifact", artifact_id))
        self.downloaded.append(artifact_id)
        return self.archives[artifact_id]


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def repo() -> RepositoryIdentity:
    """Repository identity used across tests."""
    return RepositoryIdentity(owner="octo", name="widgets")


@pytest.fixture
def make_zip() -> Callable[[dict[str, bytes | None]], bytes]:
    """Provide the in-memory zip builder."""
    return build_zip


@pytest.fixture
def fake_client() -> FakeGitHubClient:
    """
    Fake client for a repository with one "CI" workflow (id 10).

    Run #7 (id 700) carries artifacts a, b and c.
    """
    return FakeGitHubClient(
        workflows=[
            WorkflowInfo(id=10, name="CI", path=".github/workflows/ci.yml"),
            WorkflowInfo(id=11, name="Release", path=".github/workflows/release.yml"),
        ],
        runs={
            10: [
                WorkflowRunInfo(id=600, run_number=6),
                WorkflowRunInfo(id=700, run_number=7),
            ]
        },
        artifacts={
            700: [
                ArtifactDescriptor(id=1, name="a"),
                ArtifactDescriptor(id=2, name="b"),
                ArtifactDescriptor(id=3, name="c"),
            ]
        },
        archives={
            1: build_zip({"a.txt": b"alpha"}),
            2: build_zip({"dir1/": None, "dir1/file.txt": b"bravo"}),
            3: build_zip({"c.txt": b"charlie"}),
        },
    )
