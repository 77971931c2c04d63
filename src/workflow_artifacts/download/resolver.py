"""
Workflow and run resolution.

Maps a workflow display name to its id, then a run number to its run id.
Zero matches means "nothing to do" and is returned as None; more than one
match is a configuration error.
"""

import logging
from typing import TYPE_CHECKING

from workflow_artifacts.core.exceptions import AmbiguousRunNumber, AmbiguousWorkflowName
from workflow_artifacts.core.models import (
    Lookup,
    LookupStatus,
    RepositoryIdentity,
    WorkflowInfo,
    WorkflowRunInfo,
)

if TYPE_CHECKING:
    from workflow_artifacts.github.client import GitHubClient

logger = logging.getLogger(__name__)


def find_workflow(workflows: list[WorkflowInfo], name: str) -> Lookup:
    """Match workflows by exact display name."""
    return Lookup.from_matches([w.id for w in workflows if w.name == name])


def find_run(runs: list[WorkflowRunInfo], run_number: int) -> Lookup:
    """Match runs by exact run number."""
    return Lookup.from_matches([r.id for r in runs if r.run_number == run_number])


def resolve_workflow(
    client: "GitHubClient", repo: RepositoryIdentity, workflow_name: str
) -> int | None:
    """
    Resolve a workflow display name to its id.

    Args:
        client: GitHub client handle
        repo: Repository to search
        workflow_name: Exact workflow name

    Returns:
        The workflow id, or None if no workflow has that name

    Raises:
        AmbiguousWorkflowName: If more than one workflow has that name
    """
    lookup = find_workflow(client.list_workflows(repo), workflow_name)
    match lookup.status:
        case LookupStatus.ABSENT:
            logger.debug(f"No workflow named {workflow_name!r} in {repo}")
            return None
        case LookupStatus.FOUND:
            logger.debug(f"Workflow {workflow_name!r} resolved to {lookup.ref}")
            return lookup.ref
        case LookupStatus.AMBIGUOUS:
            raise AmbiguousWorkflowName(workflow_name, matches=lookup.matches)


def resolve_run(
    client: "GitHubClient", repo: RepositoryIdentity, workflow_id: int, run_number: int
) -> int | None:
    """
    Resolve a run number of a workflow to its run id.

    Returns:
        The run id, or None if the workflow has no run with that number

    Raises:
        AmbiguousRunNumber: If more than one run has that number
    """
    lookup = find_run(client.list_workflow_runs(repo, workflow_id), run_number)
    match lookup.status:
        case LookupStatus.ABSENT:
            logger.debug(f"No run #{run_number} for workflow {workflow_id}")
            return None
        case LookupStatus.FOUND:
            logger.debug(f"Run #{run_number} resolved to {lookup.ref}")
            return lookup.ref
        case LookupStatus.AMBIGUOUS:
            raise AmbiguousRunNumber(
                run_number, workflow_id=workflow_id, matches=lookup.matches
            )
