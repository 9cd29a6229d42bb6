"""Test configuration and fixtures."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from ghwire.dsl import job, sh, wf
from ghwire.model import Workflow
from ghwire.serialize import to_yaml
from ghwire.triggers import Push, Triggers


@pytest.fixture
def ci_workflow() -> Workflow:
    """A two-job workflow where `test` needs `build` by value."""
    build = job("build", sh("Build", "make build"))
    test = job("test", sh("Test", "make test"), needs=[build])
    return wf("CI", build, test, on=Triggers(push=Push(branches=["main"])))


@pytest.fixture
def ci_yaml(ci_workflow: Workflow) -> str:
    return to_yaml(ci_workflow).decode("utf-8")


@pytest.fixture
def declarations_dir(tmp_path: Path) -> Path:
    """A directory holding one declaration file with a workflow and CODEOWNERS."""
    source = tmp_path / "decls"
    source.mkdir()
    (source / "ci.py").write_text(textwrap.dedent("""
        from ghwire.codeowners import Codeowners, Rule
        from ghwire.dsl import job, sh, wf
        from ghwire.triggers import Push, Triggers

        _build = job("build", sh("Build", "make"))
        CI = wf("CI", _build, job("test", sh("Test", "make test"), needs=[_build]),
                on=Triggers(push=Push()))
        owners = Codeowners(rules=[Rule("*", ["@org/team"])])
        not_an_artifact = 42
    """))
    (source / "_helpers.py").write_text("raise RuntimeError('private modules are not loaded')\n")
    (source / "test_ci.py").write_text("raise RuntimeError('tests are not loaded')\n")
    return source
