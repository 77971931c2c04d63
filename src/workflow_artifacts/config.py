"""
Runtime configuration.

Inputs arrive either as CLI options or, when running as a GitHub Action, as
INPUT_<NAME> environment variables. Both routes end in DownloadSettings.
"""

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from workflow_artifacts.core.exceptions import ConfigurationError
from workflow_artifacts.core.models import RepositoryIdentity
from workflow_artifacts.download.fetcher import parse_artifact_names

DEFAULT_API_URL = "https://api.github.com"

# Input name -> environment variable set by the Actions runner
INPUT_ENV_VARS = {
    "token": "INPUT_TOKEN",
    "repo": "INPUT_REPO",
    "names": "INPUT_NAMES",
    "workflow": "INPUT_WORKFLOW",
    "run": "INPUT_RUN",
    "path": "INPUT_PATH",
}


class GitHubConfig(BaseModel):
    """Configuration for the GitHub REST client."""

    token: str = ""
    api_url: str = DEFAULT_API_URL
    api_version: str = "2022-11-28"
    timeout_seconds: int = 60
    per_page: int = Field(default=100, ge=1, le=100)

    @classmethod
    def from_env(cls, token: str = "") -> "GitHubConfig":
        """Load client configuration from environment."""
        return cls(
            token=token or os.getenv("GITHUB_TOKEN", ""),
            api_url=os.getenv("GITHUB_API_URL", DEFAULT_API_URL),
        )


class DownloadSettings(BaseModel):
    """Validated inputs of one download operation."""

    token: str = Field(min_length=1)
    repo: RepositoryIdentity
    workflow: str = Field(min_length=1)
    run: int
    names: list[str] = Field(min_length=1)
    path: str

    model_config = {"frozen": True}

    @field_validator("repo", mode="before")
    @classmethod
    def _parse_repo(cls, value: Any) -> Any:
        if isinstance(value, str):
            return RepositoryIdentity.parse(value)
        return value

    @field_validator("run", mode="before")
    @classmethod
    def _strip_run(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("names", mode="before")
    @classmethod
    def _parse_names(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_artifact_names(value)
        return value

    @classmethod
    def from_inputs(cls, **inputs: Any) -> "DownloadSettings":
        """
        Build settings from raw input values.

        Raises:
            ConfigurationError: If an input is missing or cannot be parsed
        """
        for name in INPUT_ENV_VARS:
            value = inputs.get(name)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise ConfigurationError(
                    f"Input required and not supplied: {name}",
                    input_name=name,
                    env_var=INPUT_ENV_VARS[name],
                )

        try:
            return cls(**inputs)
        except ValidationError as e:
            error = e.errors()[0]
            name = str(error["loc"][0]) if error["loc"] else None
            raise ConfigurationError(
                f"Invalid value for input {name}: {error['msg']}",
                input_name=name,
            ) from e

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "DownloadSettings":
        """Load settings from INPUT_* variables, falling back to GITHUB_TOKEN for the token."""
        environ = os.environ if environ is None else environ
        inputs = {name: environ.get(var) for name, var in INPUT_ENV_VARS.items()}
        if not inputs["token"]:
            inputs["token"] = environ.get("GITHUB_TOKEN")
        return cls.from_inputs(**inputs)

    def github_config(self) -> GitHubConfig:
        """Client configuration carrying this operation's credential."""
        return GitHubConfig.from_env(token=self.token)
