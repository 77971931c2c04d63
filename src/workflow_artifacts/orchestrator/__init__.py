"""
Workflow Artifacts Orchestrator Module.

Provides the sequential download pipeline.
"""

__all__ = [
    "DownloadOutcome",
    "DownloadResult",
    "Orchestrator",
    "resolve_destination",
    "run_download",
]

from workflow_artifacts.orchestrator.core import (
    DownloadOutcome,
    DownloadResult,
    Orchestrator,
    resolve_destination,
    run_download,
)
