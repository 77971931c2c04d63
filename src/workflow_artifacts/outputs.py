"""
GitHub Actions outputs and failure reporting.

Outputs are appended to the file named by GITHUB_OUTPUT when running on an
Actions runner and printed as name=value lines otherwise.
"""

import os
import uuid
from pathlib import Path

from rich.console import Console

DOWNLOAD_PATH_OUTPUT = "download-path"

console = Console()


def _escape_command_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def set_output(name: str, value: str, *, out: Console | None = None) -> None:
    """Publish an output value of the step."""
    output_file = os.getenv("GITHUB_OUTPUT")
    if output_file:
        if "\n" in value:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            line = f"{name}<<{delimiter}\n{value}\n{delimiter}\n"
        else:
            line = f"{name}={value}\n"
        with Path(output_file).open("a", encoding="utf-8") as fh:
            fh.write(line)
        return

    (out or console).print(f"{name}={value}", markup=False, highlight=False, soft_wrap=True)


def set_failed(message: str, *, out: Console | None = None) -> None:
    """Report the step as failed with an error annotation."""
    (out or console).print(
        f"::error::{_escape_command_data(message)}",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )
