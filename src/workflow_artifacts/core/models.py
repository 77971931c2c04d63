"""
Core data models for workflow artifact downloads.

Payloads reported by the GitHub API are parsed into these schemas; lookups
against them produce a three-way Lookup result.
"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field

from workflow_artifacts.core.exceptions import ConfigurationError


class RepositoryIdentity(BaseModel):
    """Immutable "owner/name" repository identity."""

    owner: str = Field(min_length=1)
    name: str = Field(min_length=1)

    model_config = {"frozen": True}

    @classmethod
    def parse(cls, value: str) -> "RepositoryIdentity":
        """Parse an "owner/name" string."""
        owner, sep, name = value.strip().partition("/")
        owner, name = owner.strip(), name.strip()
        if not sep or not owner or not name or "/" in name:
            raise ConfigurationError(
                f"Repository must be given as owner/name, got {value!r}",
                input_name="repo",
            )
        return cls(owner=owner, name=name)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    def __str__(self) -> str:
        return self.full_name


class WorkflowInfo(BaseModel):
    """A workflow as listed by the platform."""

    id: int
    name: str
    path: str = ""
    state: str | None = None

    model_config = {"extra": "ignore"}


class WorkflowRunInfo(BaseModel):
    """One execution of a workflow."""

    id: int
    run_number: int
    status: str | None = None
    conclusion: str | None = None

    model_config = {"extra": "ignore"}


class ArtifactDescriptor(BaseModel):
    """An artifact attached to a workflow run."""

    id: int
    name: str
    size_in_bytes: int = 0
    expired: bool = False

    model_config = {"extra": "ignore"}


class LookupStatus(Enum):
    """Outcome of matching a name or number against a listing."""

    ABSENT = "absent"
    FOUND = "found"
    AMBIGUOUS = "ambiguous"


@dataclass(frozen=True)
class Lookup:
    """Tagged result of a single lookup: absent, found(ref) or ambiguous."""

    status: LookupStatus
    ref: int | None = None
    matches: int = 0

    @classmethod
    def absent(cls) -> "Lookup":
        return cls(LookupStatus.ABSENT)

    @classmethod
    def found(cls, ref: int) -> "Lookup":
        return cls(LookupStatus.FOUND, ref=ref, matches=1)

    @classmethod
    def ambiguous(cls, matches: int) -> "Lookup":
        return cls(LookupStatus.AMBIGUOUS, matches=matches)

    @classmethod
    def from_matches(cls, ids: list[int]) -> "Lookup":
        """Build the lookup variant that corresponds to a list of matching ids."""
        match len(ids):
            case 0:
                return cls.absent()
            case 1:
                return cls.found(ids[0])
            case count:
                return cls.ambiguous(count)
