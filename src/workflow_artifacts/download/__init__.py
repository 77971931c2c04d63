"""
Workflow Artifacts Download Module.

Resolution of workflows and runs, artifact fetching and archive extraction.
"""

__all__ = [
    "extract_archive",
    "fetch_artifacts",
    "find_run",
    "find_workflow",
    "parse_artifact_names",
    "resolve_run",
    "resolve_workflow",
    "select_artifacts",
]

from workflow_artifacts.download.extractor import extract_archive
from workflow_artifacts.download.fetcher import (
    fetch_artifacts,
    parse_artifact_names,
    select_artifacts,
)
from workflow_artifacts.download.resolver import (
    find_run,
    find_workflow,
    resolve_run,
    resolve_workflow,
)
