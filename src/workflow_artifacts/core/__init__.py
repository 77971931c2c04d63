"""
Workflow Artifacts Core Module.

Provides the data model and exception hierarchy shared by every stage.
"""

__all__ = [
    "ArtifactDescriptor",
    "Lookup",
    "LookupStatus",
    "RepositoryIdentity",
    "WorkflowInfo",
    "WorkflowRunInfo",
    # Exceptions
    "WorkflowArtifactsError",
    "ConfigurationError",
    "AmbiguousWorkflowName",
    "AmbiguousRunNumber",
    "NoArtifactsFound",
    "ExtractionFailed",
    "GitHubAPIError",
    "GitHubAuthenticationError",
    "GitHubNotFoundError",
]

from workflow_artifacts.core.exceptions import (
    AmbiguousRunNumber,
    AmbiguousWorkflowName,
    ConfigurationError,
    ExtractionFailed,
    GitHubAPIError,
    GitHubAuthenticationError,
    GitHubNotFoundError,
    NoArtifactsFound,
    WorkflowArtifactsError,
)
from workflow_artifacts.core.models import (
    ArtifactDescriptor,
    Lookup,
    LookupStatus,
    RepositoryIdentity,
    WorkflowInfo,
    WorkflowRunInfo,
)
