# actions/repo.py
# Issue and pull request housekeeping, notifications.
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .base import Action


@dataclass(frozen=True)
class Labeler(Action):
    ref: ClassVar[str] = "actions/labeler@v5"

    repo_token: str = ""
    configuration_path: str = ""
    sync_labels: bool = False
    dot: bool = False
    pr_number: int = 0


@dataclass(frozen=True)
class Stale(Action):
    ref: ClassVar[str] = "actions/stale@v9"

    repo_token: str = ""
    stale_issue_message: str = ""
    stale_pr_message: str = ""
    close_issue_message: str = ""
    close_pr_message: str = ""
    days_before_stale: int = 0
    days_before_close: int = 0
    days_before_issue_stale: int = 0
    days_before_pr_stale: int = 0
    days_before_issue_close: int = 0
    days_before_pr_close: int = 0
    stale_issue_label: str = ""
    stale_pr_label: str = ""
    exempt_issue_labels: str = ""
    exempt_pr_labels: str = ""
    only_labels: str = ""
    only_issue_labels: str = ""
    only_pr_labels: str = ""
    operations_per_run: int = 0
    remove_stale_when_updated: bool = False
    remove_issue_stale_when_updated: bool = False
    remove_pr_stale_when_updated: bool = False
    debug_only: bool = False
    ascending: bool = False
    delete_branch: bool = False
    start_date: str = ""
    exempt_assignees: bool = False
    exempt_issue_assignees: bool = False
    exempt_pr_assignees: bool = False
    exempt_milestones: bool = False
    exempt_issue_milestones: bool = False
    exempt_pr_milestones: bool = False
    exempt_all_milestones: bool = False
    exempt_all_issue_milestones: bool = False
    exempt_all_pr_milestones: bool = False
    enable_statistics: bool = False
    labels_to_remove_when_stale: str = ""
    labels_to_add_when_unstale: str = ""
    ignore_issues: bool = False
    ignore_prs: bool = False


@dataclass(frozen=True)
class FirstInteraction(Action):
    ref: ClassVar[str] = "actions/first-interaction@v1"

    repo_token: str = ""
    issue_message: str = ""
    pr_message: str = ""


@dataclass(frozen=True)
class Slack(Action):
    ref: ClassVar[str] = "slackapi/slack-github-action@v1"

    channel_id: str = ""
    slack_message: str = ""
    payload: str = ""
    payload_delimiter: str = ""
    payload_file_path: str = ""
    payload_file_path_parsed: bool = False
    update_ts: str = ""
