"""
Workflow Artifacts GitHub Module.

Provides the REST client used by the resolvers and the fetcher.
"""

__all__ = ["GitHubClient"]

from workflow_artifacts.github.client import GitHubClient
