"""
Workflow Artifacts Exception Hierarchy.

Defines all custom exceptions raised while resolving workflows, runs and
artifacts and while extracting downloaded archives. Every error is fatal:
nothing here is retried.
"""

from typing import Any


class WorkflowArtifactsError(Exception):
    """
    Base exception for all workflow-artifacts errors.

    All custom exceptions inherit from this class, allowing
    a single top-level handler to report any pipeline failure.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None):
        """
        Initialize a WorkflowArtifactsError.

        Args:
            message: Human-readable error message
            details: Optional structured data for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation with details."""
        base = self.message
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{base} ({details_str})"
        return base

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(WorkflowArtifactsError):
    """
    Errors in configuration loading or validation.

    Raised when:
    - A required input is missing
    - An input value cannot be parsed (run number, repository identity)
    """

    def __init__(
        self,
        message: str,
        *,
        input_name: str | None = None,
        env_var: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        details = details or {}
        if input_name:
            details["input"] = input_name
        if env_var:
            details["env_var"] = env_var

        super().__init__(message, details=details)
        self.input_name = input_name
        self.env_var = env_var


class AmbiguousWorkflowName(WorkflowArtifactsError):
    """Raised when more than one workflow in the repository has the requested name."""

    def __init__(self, workflow_name: str, *, matches: int):
        super().__init__(
            f"More than one workflow found matching the name {workflow_name}",
            details={"matches": matches},
        )
        self.workflow_name = workflow_name
        self.matches = matches


class AmbiguousRunNumber(WorkflowArtifactsError):
    """Raised when more than one run of a workflow carries the requested run number."""

    def __init__(self, run_number: int, *, workflow_id: int | None = None, matches: int):
        details: dict[str, Any] = {"matches": matches}
        if workflow_id is not None:
            details["workflow_id"] = workflow_id
        super().__init__(
            f"More than one run found matching the run number {run_number}",
            details=details,
        )
        self.run_number = run_number
        self.workflow_id = workflow_id
        self.matches = matches


class NoArtifactsFound(WorkflowArtifactsError):
    """
    Raised when none of the requested names match an artifact on the run.

    Requested names that match nothing are tolerated individually; only an
    empty selection is an error.
    """

    def __init__(
        self,
        message: str = "no artifacts found",
        *,
        run_id: int | None = None,
        requested: list[str] | None = None,
        available: list[str] | None = None,
    ):
        details: dict[str, Any] = {}
        if run_id is not None:
            details["run_id"] = run_id
        if requested is not None:
            details["requested"] = requested
        if available is not None:
            details["available"] = available

        super().__init__(message, details=details)
        self.run_id = run_id
        self.requested = requested or []
        self.available = available or []


class ExtractionFailed(WorkflowArtifactsError):
    """
    Errors while unpacking a downloaded archive.

    Raised when:
    - The archive is malformed or truncated
    - An entry would be written outside the destination directory
    - The filesystem rejects a directory creation or file write
    """

    def __init__(
        self,
        message: str,
        *,
        destination: str | None = None,
        entry: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        details = details or {}
        if destination:
            details["destination"] = destination
        if entry:
            details["entry"] = entry

        super().__init__(message, details=details)
        self.destination = destination
        self.entry = entry


class GitHubAPIError(WorkflowArtifactsError):
    """
    Errors from GitHub REST API interactions.

    Raised when:
    - A request returns a non-success status
    - The transport fails (DNS, connection reset, timeout)
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        url: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        details = details or {}
        if status_code:
            details["status_code"] = status_code
        if url:
            details["url"] = url

        super().__init__(message, details=details)
        self.status_code = status_code
        self.url = url


class GitHubAuthenticationError(GitHubAPIError):
    """Raised when the token is rejected or lacks permission."""

    def __init__(
        self,
        message: str = "GitHub authentication failed",
        *,
        status_code: int = 401,
        url: str | None = None,
    ):
        super().__init__(message, status_code=status_code, url=url)


class GitHubNotFoundError(GitHubAPIError):
    """Raised when the repository, workflow, run or artifact does not exist."""

    def __init__(self, message: str = "GitHub resource not found", *, url: str | None = None):
        super().__init__(message, status_code=404, url=url)


def format_exception(error: Exception) -> str:
    """
    Format an exception for user-friendly display.

    Args:
        error: The exception to format

    Returns:
        Formatted error message string
    """
    if isinstance(error, WorkflowArtifactsError):
        return str(error)
    return f"{error.__class__.__name__}: {error}"
