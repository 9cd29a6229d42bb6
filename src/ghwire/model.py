# model.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .expressions import Expression, StepOutput
from .triggers import Triggers


# Access levels for Permissions fields
READ = "read"
WRITE = "write"
NONE = "none"

# Whole-token shorthands accepted in place of a Permissions value
READ_ALL = "read-all"
WRITE_ALL = "write-all"


def is_zero(value: Any) -> bool:
    """True when a value is the 'absent' representation of its type."""
    if value is None:
        return True
    if isinstance(value, bool):
        return value is False
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    return False


# ---------------------------------------------------------------------
# Step
# ---------------------------------------------------------------------

@dataclass(frozen=True)
class Step:
    """A single step inside a job: either `uses` an action or `run`s a command."""
    id: str = ""
    name: str = ""
    if_: Union[str, Expression] = field(default="", metadata={"key": "if"})
    uses: str = ""
    with_: Dict[str, Any] = field(default_factory=dict, metadata={"key": "with"})
    run: str = ""
    shell: str = ""
    env: Dict[str, Any] = field(default_factory=dict)
    working_directory: str = ""
    continue_on_error: Union[bool, Expression] = False
    timeout_minutes: int = 0

    def output(self, name: str) -> StepOutput:
        if not self.id:
            raise ValueError(f"Step {self.name or self.uses or self.run!r} needs an id to expose outputs")
        return StepOutput(self.id, name)


# ---------------------------------------------------------------------
# Job-level records
# ---------------------------------------------------------------------

@dataclass(frozen=True)
class Permissions:
    actions: str = ""
    attestations: str = ""
    checks: str = ""
    contents: str = ""
    deployments: str = ""
    discussions: str = ""
    id_token: str = ""
    issues: str = ""
    packages: str = ""
    pages: str = ""
    pull_requests: str = ""
    repository_projects: str = ""
    security_events: str = ""
    statuses: str = ""


@dataclass(frozen=True)
class Environment:
    name: str = field(default="", metadata={"required": True})
    url: Union[str, Expression] = ""


@dataclass(frozen=True)
class Concurrency:
    group: Union[str, Expression] = field(default="", metadata={"required": True})
    cancel_in_progress: Union[bool, Expression] = False


@dataclass(frozen=True)
class RunDefaults:
    shell: str = ""
    working_directory: str = ""


@dataclass(frozen=True)
class Defaults:
    run: Optional[RunDefaults] = None


@dataclass(frozen=True)
class Credentials:
    username: str = ""
    password: str = ""


@dataclass(frozen=True)
class Container:
    image: str = field(default="", metadata={"required": True})
    credentials: Optional[Credentials] = None
    env: Dict[str, Any] = field(default_factory=dict)
    ports: List[Union[int, str]] = field(default_factory=list)
    volumes: List[str] = field(default_factory=list)
    options: str = ""


@dataclass(frozen=True)
class Service(Container):
    """A service container; same shape as the job container."""


@dataclass(frozen=True)
class RunnerGroup:
    group: str = ""
    labels: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Matrix:
    """
    values:  dimension -> ordered list of values (or an Expression)
    include: extra combinations; may introduce new dimensions
    exclude: combinations to drop; only known dimensions
    """
    values: Dict[str, Any] = field(default_factory=dict)
    include: List[Dict[str, Any]] = field(default_factory=list)
    exclude: List[Dict[str, Any]] = field(default_factory=list)

    def __post_init__(self) -> None:
        for i, combo in enumerate(self.exclude):
            unknown = sorted(k for k in combo if k not in self.values)
            if unknown:
                raise ValueError(
                    f"Matrix exclude[{i}] references unknown dimension(s) {unknown}. "
                    f"Known dimensions: {sorted(self.values)}"
                )


@dataclass(frozen=True)
class Strategy:
    matrix: Union[Matrix, Expression, None] = None
    # None leaves GitHub's default (true) in place
    fail_fast: Optional[bool] = field(default=None, metadata={"omit": "none"})
    max_parallel: int = 0


# ---------------------------------------------------------------------
# Job
# ---------------------------------------------------------------------

@dataclass(frozen=True)
class Job:
    """
    A workflow job.

    `needs` entries are job ids (str) or other Job values from the same
    workflow; Job values are rewritten to their ids when serialized.
    A single id or Job may be given on its own.
    `steps` entries are Step values, action wrappers, or plain mappings.
    """
    name: str = ""
    runs_on: Union[str, Expression, List[str], RunnerGroup] = ""
    needs: Union[str, "Job", List[Union[str, "Job"]]] = field(default_factory=list)
    if_: Union[str, Expression] = field(default="", metadata={"key": "if"})
    permissions: Union[Permissions, str, None] = None
    environment: Union[Environment, str, None] = None
    concurrency: Union[Concurrency, str, None] = None
    outputs: Dict[str, Any] = field(default_factory=dict)
    env: Dict[str, Any] = field(default_factory=dict)
    defaults: Optional[Defaults] = None
    strategy: Optional[Strategy] = None
    container: Union[Container, str, None] = None
    services: Dict[str, Service] = field(default_factory=dict)
    steps: List[Any] = field(default_factory=list)
    timeout_minutes: int = 0
    continue_on_error: Union[bool, Expression] = False

    # Calling a reusable workflow instead of running steps
    uses: str = ""
    with_: Dict[str, Any] = field(default_factory=dict, metadata={"key": "with"})
    secrets: Union[Dict[str, Any], str] = field(default_factory=dict)


# ---------------------------------------------------------------------
# Workflow
# ---------------------------------------------------------------------

@dataclass(frozen=True)
class Workflow:
    """
    A workflow file. `jobs` keeps the caller's insertion order; keys are
    the job ids referenced by `needs`.
    """
    name: str = ""
    run_name: str = ""
    on: Triggers = field(default_factory=Triggers)
    env: Dict[str, Any] = field(default_factory=dict)
    defaults: Optional[Defaults] = None
    concurrency: Union[Concurrency, str, None] = None
    permissions: Union[Permissions, str, None] = None
    jobs: Dict[str, Job] = field(default_factory=dict)
