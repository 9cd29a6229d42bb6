# triggers.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .expressions import Expression


# ---------------------------------------------------------------------
# Filtered events
# ---------------------------------------------------------------------

@dataclass(frozen=True)
class Push:
    branches: List[str] = field(default_factory=list)
    branches_ignore: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    tags_ignore: List[str] = field(default_factory=list)
    paths: List[str] = field(default_factory=list)
    paths_ignore: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class PullRequest:
    types: List[str] = field(default_factory=list)
    branches: List[str] = field(default_factory=list)
    branches_ignore: List[str] = field(default_factory=list)
    paths: List[str] = field(default_factory=list)
    paths_ignore: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class PullRequestTarget(PullRequest):
    pass


@dataclass(frozen=True)
class Schedule:
    """One `schedule` entry (POSIX cron, UTC)."""
    cron: str = field(default="", metadata={"required": True})


# ---------------------------------------------------------------------
# Manual and reusable workflows
# ---------------------------------------------------------------------

@dataclass(frozen=True)
class WorkflowInput:
    description: str = ""
    required: bool = False
    # omitted only when None so `default: false` survives
    default: Any = field(default=None, metadata={"omit": "none"})
    type: str = ""  # string | boolean | number | choice | environment
    options: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class WorkflowDispatch:
    inputs: Dict[str, WorkflowInput] = field(default_factory=dict)


@dataclass(frozen=True)
class WorkflowOutput:
    description: str = ""
    value: Optional[Expression] = field(default=None, metadata={"required": True})


@dataclass(frozen=True)
class WorkflowSecret:
    description: str = ""
    required: bool = False


@dataclass(frozen=True)
class WorkflowCall:
    inputs: Dict[str, WorkflowInput] = field(default_factory=dict)
    outputs: Dict[str, WorkflowOutput] = field(default_factory=dict)
    secrets: Dict[str, WorkflowSecret] = field(default_factory=dict)


@dataclass(frozen=True)
class WorkflowRun:
    workflows: List[str] = field(default_factory=list)
    types: List[str] = field(default_factory=list)  # completed, requested, in_progress
    branches: List[str] = field(default_factory=list)
    branches_ignore: List[str] = field(default_factory=list)


# ---------------------------------------------------------------------
# Activity-type events
# ---------------------------------------------------------------------

@dataclass(frozen=True)
class _Typed:
    types: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class RepositoryDispatch(_Typed):
    pass


@dataclass(frozen=True)
class IssueComment(_Typed):
    pass


@dataclass(frozen=True)
class Issues(_Typed):
    pass


@dataclass(frozen=True)
class Label(_Typed):
    pass


@dataclass(frozen=True)
class Milestone(_Typed):
    pass


@dataclass(frozen=True)
class Project(_Typed):
    pass


@dataclass(frozen=True)
class ProjectCard(_Typed):
    pass


@dataclass(frozen=True)
class ProjectColumn(_Typed):
    pass


@dataclass(frozen=True)
class PullRequestReview(_Typed):
    pass


@dataclass(frozen=True)
class PullRequestReviewComment(_Typed):
    pass


@dataclass(frozen=True)
class Release(_Typed):
    pass


@dataclass(frozen=True)
class Watch(_Typed):
    pass


@dataclass(frozen=True)
class CheckRun(_Typed):
    pass


@dataclass(frozen=True)
class CheckSuite(_Typed):
    pass


@dataclass(frozen=True)
class Discussion(_Typed):
    pass


@dataclass(frozen=True)
class DiscussionComment(_Typed):
    pass


@dataclass(frozen=True)
class MergeGroup(_Typed):
    pass


@dataclass(frozen=True)
class BranchProtectionRule(_Typed):
    pass


@dataclass(frozen=True)
class RegistryPackage(_Typed):
    pass


# ---------------------------------------------------------------------
# Payload-free events: presence is the signal
# ---------------------------------------------------------------------

@dataclass(frozen=True)
class Create:
    pass


@dataclass(frozen=True)
class Delete:
    pass


@dataclass(frozen=True)
class Fork:
    pass


@dataclass(frozen=True)
class Gollum:
    pass


@dataclass(frozen=True)
class PageBuild:
    pass


@dataclass(frozen=True)
class Public:
    pass


@dataclass(frozen=True)
class Status:
    pass


@dataclass(frozen=True)
class Deployment:
    pass


@dataclass(frozen=True)
class DeploymentStatus:
    pass


# ---------------------------------------------------------------------
# Trigger set
# ---------------------------------------------------------------------

def _event(key: str):
    return field(default=None, metadata={"key": key})


@dataclass(frozen=True)
class Triggers:
    """
    The `on:` block. Each populated field becomes one event key, in
    declaration order; unset events are left out.
    """
    push: Optional[Push] = _event("push")
    pull_request: Optional[PullRequest] = _event("pull_request")
    pull_request_target: Optional[PullRequestTarget] = _event("pull_request_target")
    schedule: List[Schedule] = field(default_factory=list, metadata={"key": "schedule"})
    workflow_dispatch: Optional[WorkflowDispatch] = _event("workflow_dispatch")
    workflow_call: Optional[WorkflowCall] = _event("workflow_call")
    workflow_run: Optional[WorkflowRun] = _event("workflow_run")
    repository_dispatch: Optional[RepositoryDispatch] = _event("repository_dispatch")
    create: Optional[Create] = _event("create")
    delete: Optional[Delete] = _event("delete")
    fork: Optional[Fork] = _event("fork")
    gollum: Optional[Gollum] = _event("gollum")
    issue_comment: Optional[IssueComment] = _event("issue_comment")
    issues: Optional[Issues] = _event("issues")
    label: Optional[Label] = _event("label")
    milestone: Optional[Milestone] = _event("milestone")
    page_build: Optional[PageBuild] = _event("page_build")
    project: Optional[Project] = _event("project")
    project_card: Optional[ProjectCard] = _event("project_card")
    project_column: Optional[ProjectColumn] = _event("project_column")
    public: Optional[Public] = _event("public")
    pull_request_review: Optional[PullRequestReview] = _event("pull_request_review")
    pull_request_review_comment: Optional[PullRequestReviewComment] = _event("pull_request_review_comment")
    release: Optional[Release] = _event("release")
    status: Optional[Status] = _event("status")
    watch: Optional[Watch] = _event("watch")
    check_run: Optional[CheckRun] = _event("check_run")
    check_suite: Optional[CheckSuite] = _event("check_suite")
    discussion: Optional[Discussion] = _event("discussion")
    discussion_comment: Optional[DiscussionComment] = _event("discussion_comment")
    merge_group: Optional[MergeGroup] = _event("merge_group")
    branch_protection_rule: Optional[BranchProtectionRule] = _event("branch_protection_rule")
    deployment: Optional[Deployment] = _event("deployment")
    deployment_status: Optional[DeploymentStatus] = _event("deployment_status")
    registry_package: Optional[RegistryPackage] = _event("registry_package")


# event key -> variant type, used when reading YAML back in
EVENT_TYPES: Dict[str, type] = {
    "push": Push,
    "pull_request": PullRequest,
    "pull_request_target": PullRequestTarget,
    "workflow_dispatch": WorkflowDispatch,
    "workflow_call": WorkflowCall,
    "workflow_run": WorkflowRun,
    "repository_dispatch": RepositoryDispatch,
    "create": Create,
    "delete": Delete,
    "fork": Fork,
    "gollum": Gollum,
    "issue_comment": IssueComment,
    "issues": Issues,
    "label": Label,
    "milestone": Milestone,
    "page_build": PageBuild,
    "project": Project,
    "project_card": ProjectCard,
    "project_column": ProjectColumn,
    "public": Public,
    "pull_request_review": PullRequestReview,
    "pull_request_review_comment": PullRequestReviewComment,
    "release": Release,
    "status": Status,
    "watch": Watch,
    "check_run": CheckRun,
    "check_suite": CheckSuite,
    "discussion": Discussion,
    "discussion_comment": DiscussionComment,
    "merge_group": MergeGroup,
    "branch_protection_rule": BranchProtectionRule,
    "deployment": Deployment,
    "deployment_status": DeploymentStatus,
    "registry_package": RegistryPackage,
}
