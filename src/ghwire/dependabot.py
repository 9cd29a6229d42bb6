# dependabot.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union


# Schedule intervals
DAILY = "daily"
WEEKLY = "weekly"
MONTHLY = "monthly"


@dataclass(frozen=True)
class Schedule:
    interval: str = field(default="", metadata={"required": True})
    day: str = ""        # weekly only: monday..sunday
    time: str = ""       # hh:mm
    timezone: str = ""   # IANA name


@dataclass(frozen=True)
class Allow:
    dependency_name: str = ""
    dependency_type: str = ""  # direct | indirect | all | production | development


@dataclass(frozen=True)
class Ignore:
    dependency_name: str = ""
    versions: List[str] = field(default_factory=list)
    update_types: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Group:
    applies_to: str = ""  # version-updates | security-updates
    dependency_type: str = ""
    patterns: List[str] = field(default_factory=list)
    exclude_patterns: List[str] = field(default_factory=list)
    update_types: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class CommitMessage:
    prefix: str = ""
    prefix_development: str = ""
    include: str = ""  # "scope"


@dataclass(frozen=True)
class PullRequestBranchName:
    separator: str = ""


@dataclass(frozen=True)
class Update:
    """One entry of `updates:`; needs an ecosystem, a directory and a schedule."""
    package_ecosystem: str = field(default="", metadata={"required": True})
    directory: str = ""
    directories: List[str] = field(default_factory=list)
    schedule: Optional[Schedule] = field(default=None, metadata={"required": True})
    allow: List[Allow] = field(default_factory=list)
    ignore: List[Ignore] = field(default_factory=list)
    labels: List[str] = field(default_factory=list)
    assignees: List[str] = field(default_factory=list)
    reviewers: List[str] = field(default_factory=list)
    milestone: int = 0
    open_pull_requests_limit: int = 0
    rebase_strategy: str = ""
    versioning_strategy: str = ""
    vendor: bool = False
    target_branch: str = ""
    registries: Union[str, List[str]] = field(default_factory=list)
    groups: Dict[str, Group] = field(default_factory=dict)
    commit_message: Optional[CommitMessage] = None
    pull_request_branch_name: Optional[PullRequestBranchName] = None
    insecure_external_code_execution: str = ""  # allow | deny


@dataclass(frozen=True)
class Registry:
    """A private registry, referenced from Update.registries by its map key."""
    type: str = field(default="", metadata={"required": True})
    url: str = ""
    username: str = ""
    password: str = ""
    token: str = ""
    key: str = ""
    organization: str = ""
    replaces_base: bool = False


@dataclass(frozen=True)
class Dependabot:
    version: int = field(default=2, metadata={"required": True})
    enable_beta_ecosystems: bool = False
    registries: Dict[str, Registry] = field(default_factory=dict)
    updates: List[Update] = field(default_factory=list)
