# actions/quality.py
# Lint and test reporting.
from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .base import Action, SNAKE, as_input


@dataclass(frozen=True)
class Codecov(Action):
    ref: ClassVar[str] = "codecov/codecov-action@v5"
    input_style: ClassVar[str] = SNAKE

    token: str = ""
    files: str = ""
    directory: str = ""
    flags: str = ""
    name: str = ""
    fail_ci_if_error: bool = False
    verbose: bool = False
    working_directory: str = field(default="", metadata=as_input("working-directory"))
    env_vars: str = ""
    os: str = ""
    slug: str = ""
    version: str = ""
    dry_run: bool = False
    use_oidc: bool = False
    codecov_yml_path: str = ""
    plugin: str = ""


@dataclass(frozen=True)
class GolangciLint(Action):
    ref: ClassVar[str] = "golangci/golangci-lint-action@v6"

    version: str = ""
    working_directory: str = ""
    args: str = ""
    only_new_issues: bool = False
    skip_build_cache: bool = False
    skip_pkg_cache: bool = False
    problem_matchers: bool = False
    github_token: str = ""
    install_mode: str = ""
    go_modules: bool = False
    skip_cache: bool = False


@dataclass(frozen=True)
class PreCommit(Action):
    ref: ClassVar[str] = "pre-commit/action@v3.0.1"
    input_style: ClassVar[str] = SNAKE

    extra_args: str = ""
    token: str = ""
