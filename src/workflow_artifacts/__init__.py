"""
Workflow Artifacts - download GitHub Actions artifacts by workflow name and run number.

Resolves a workflow by display name, a run by run number, then downloads the
requested artifacts of that run and extracts each into its own directory.
"""

from workflow_artifacts.version import __version__

__all__ = ["__version__"]
