"""
Workflow Artifacts CLI - Command-line interface.

Download artifacts of a workflow run from the terminal or as a GitHub Action
step. Every option can also be supplied through the INPUT_* variable the
Actions runner sets for the matching action input.
"""

import logging
from typing import Optional

import typer
from rich.console import Console

from workflow_artifacts.config import DownloadSettings
from workflow_artifacts.core.exceptions import format_exception
from workflow_artifacts.orchestrator.core import DownloadOutcome, run_download
from workflow_artifacts.outputs import DOWNLOAD_PATH_OUTPUT, set_failed, set_output

app = typer.Typer(
    name="workflow-artifacts",
    help="Workflow Artifacts - download GitHub Actions artifacts by workflow name and run number",
    no_args_is_help=True,
)
console = Console()
logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(message)s")
    logging.getLogger().setLevel(level)


@app.command()
def download(
    token: Optional[str] = typer.Option(
        None,
        "--token",
        envvar=["INPUT_TOKEN", "GITHUB_TOKEN"],
        help="GitHub token",
        show_default=False,
    ),
    repo: Optional[str] = typer.Option(
        None, "--repo", "-r", envvar="INPUT_REPO", help="Repository as owner/name"
    ),
    names: Optional[str] = typer.Option(
        None, "--names", "-n", envvar="INPUT_NAMES", help="Comma-separated artifact names"
    ),
    workflow: Optional[str] = typer.Option(
        None, "--workflow", "-w", envvar="INPUT_WORKFLOW", help="Workflow display name"
    ),
    run: Optional[str] = typer.Option(
        None, "--run", envvar="INPUT_RUN", help="Run number"
    ),
    path: Optional[str] = typer.Option(
        None, "--path", "-p", envvar="INPUT_PATH", help="Destination directory"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Download and extract the named artifacts of a workflow run."""
    _configure_logging(verbose)

    try:
        settings = DownloadSettings.from_inputs(
            token=token,
            repo=repo,
            names=names,
            workflow=workflow,
            run=run,
            path=path,
        )
        result = run_download(settings)
    except Exception as e:
        logger.debug("Artifact download failed", exc_info=True)
        set_failed(format_exception(e))
        raise typer.Exit(1)

    if result.outcome is not DownloadOutcome.DOWNLOADED:
        logger.debug(f"Nothing downloaded: {result.outcome.value}")

    set_output(DOWNLOAD_PATH_OUTPUT, str(result.download_path))
    console.print("Artifact download has finished successfully")


@app.command()
def version():
    """Show Workflow Artifacts version."""
    from workflow_artifacts import __version__

    console.print(f"Workflow Artifacts v{__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
