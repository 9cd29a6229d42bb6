# actions/release.py
# Releases, bot pull requests and Pages deployment.
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .base import Action, SNAKE


@dataclass(frozen=True)
class GhRelease(Action):
    ref: ClassVar[str] = "softprops/action-gh-release@v2"
    input_style: ClassVar[str] = SNAKE

    body: str = ""
    body_path: str = ""
    name: str = ""
    tag_name: str = ""
    target_commitish: str = ""
    draft: bool = False
    prerelease: bool = False
    generate_release_notes: bool = False
    files: str = ""
    fail_on_unmatched_files: bool = False
    token: str = ""
    repository: str = ""
    append_body: bool = False
    make_latest: str = ""
    discussion_category_name: str = ""


@dataclass(frozen=True)
class CreatePullRequest(Action):
    ref: ClassVar[str] = "peter-evans/create-pull-request@v6"

    token: str = ""
    path: str = ""
    add_paths: str = ""
    commit_message: str = ""
    committer: str = ""
    author: str = ""
    signoff: bool = False
    branch: str = ""
    branch_suffix: str = ""
    delete_branch: bool = False
    title: str = ""
    body: str = ""
    body_path: str = ""
    labels: str = ""
    assignees: str = ""
    reviewers: str = ""
    team_reviewers: str = ""
    milestone: int = 0
    draft: bool = False


@dataclass(frozen=True)
class ConfigurePages(Action):
    ref: ClassVar[str] = "actions/configure-pages@v5"
    input_style: ClassVar[str] = SNAKE

    static_site_generator: str = ""
    generator_config_file: str = ""
    token: str = ""


@dataclass(frozen=True)
class UploadPagesArtifact(Action):
    ref: ClassVar[str] = "actions/upload-pages-artifact@v3"

    path: str = ""
    name: str = ""
    retention_days: int = 0


@dataclass(frozen=True)
class DeployPages(Action):
    ref: ClassVar[str] = "actions/deploy-pages@v4"
    input_style: ClassVar[str] = SNAKE

    token: str = ""
    timeout: int = 0
    error_count: int = 0
    reporting_interval: int = 0
    artifact_name: str = ""
