# src/ghwire/dsl.py
from __future__ import annotations

import re
from dataclasses import replace
from typing import Any, Dict, List, Optional, Union

from .actions.base import Action
from .expressions import Expression
from .model import Job, Matrix, Step, Strategy, Workflow
from .triggers import Triggers


# ---------------------------------------------------------------------
# Step helpers
# ---------------------------------------------------------------------

def sh(name: str, cmd: str, *, cwd: str | None = None, shell: str = "", id: str = "") -> Step:
    """Create a shell step."""
    return Step(id=id, name=name, run=cmd, shell=shell, working_directory=cwd or "")


def uses(action: Union[Action, str], name: str = "", **step_fields: Any) -> Step:
    """
    Create an action step from a wrapper or a raw `owner/repo@ref`.

        uses(Checkout(fetch_depth=0), name="Checkout", id="co")
        uses("octo/custom@v1", with_={"mode": "fast"})
    """
    if isinstance(action, Action):
        return action.step(name=name, **step_fields)
    return Step(name=name, uses=action, **step_fields)


# ---------------------------------------------------------------------
# Functional Job helper
# ---------------------------------------------------------------------

def job(
    name: str,
    *steps: Any,  # Step | Action | dict
    steps_list: Optional[List[Any]] = None,
    runs_on: Union[str, Expression, List[str]] = "ubuntu-latest",
    needs: Union[str, Job, List[Union[str, Job]], None] = None,
    if_: Union[str, Expression] = "",
    env: Optional[Dict[str, Any]] = None,
    strategy: Optional[Strategy] = None,
    timeout_minutes: int = 0,
    cwd: str | None = None,  # default working directory for run steps missing one
    **job_fields: Any,
) -> Job:
    steps_final: List[Any] = []
    if steps_list:
        steps_final.extend(list(steps_list))
    steps_final.extend(list(steps))

    if not steps_final and strategy is None:
        raise ValueError(f"job({name!r}) must have at least one step")

    if cwd is not None:
        steps_final = [
            replace(s, working_directory=cwd)
            if isinstance(s, Step) and s.run and not s.working_directory else s
            for s in steps_final
        ]

    return Job(
        name=name,
        runs_on=runs_on,
        needs=[needs] if isinstance(needs, (str, Job)) else list(needs or []),
        if_=if_,
        env=dict(env or {}),
        strategy=strategy,
        steps=steps_final,
        timeout_minutes=timeout_minutes,
        **job_fields,
    )


# ---------------------------------------------------------------------
# Builder API
# ---------------------------------------------------------------------

class JobBuilder:
    def __init__(self, name: str):
        self.name = name
        self._runs_on: Union[str, Expression, List[str]] = "ubuntu-latest"
        self._needs: list[Union[str, Job]] = []
        self._steps: list[Any] = []
        self._env: dict[str, Any] = {}
        self._if: Union[str, Expression] = ""
        self._strategy: Optional[Strategy] = None
        self._timeout: int = 0

    def runs_on(self, runner: Union[str, Expression, List[str]]):
        self._runs_on = runner
        return self

    def depends_on(self, *jobs: Union[str, Job]):
        self._needs.extend(jobs)
        return self

    def when(self, condition: Union[str, Expression]):
        self._if = condition
        return self

    def define_step(self, name: str, run: str, cwd: str | None = None):
        self._steps.append(sh(name, run, cwd=cwd))
        return self

    def use(self, action: Union[Action, str], name: str = "", **step_fields: Any):
        self._steps.append(uses(action, name, **step_fields))
        return self

    def with_env(self, **env):
        self._env.update(env)
        return self

    def with_matrix(self, strategy: Strategy):
        self._strategy = strategy
        return self

    def timeout(self, minutes: int):
        self._timeout = minutes
        return self

    def build(self) -> Job:
        if not self._steps and self._strategy is None:
            raise ValueError(f"Job '{self.name}' has no steps")

        return Job(
            name=self.name,
            runs_on=self._runs_on,
            needs=list(self._needs),
            if_=self._if,
            env=dict(self._env),
            strategy=self._strategy,
            steps=list(self._steps),
            timeout_minutes=self._timeout,
        )


def build(name: str) -> JobBuilder:
    """Convenience: build('test').define_step(...).build()"""
    return JobBuilder(name)


# ---------------------------------------------------------------------
# Matrix
# ---------------------------------------------------------------------

def matrix(
    *,
    include: Optional[List[Dict[str, Any]]] = None,
    exclude: Optional[List[Dict[str, Any]]] = None,
    fail_fast: Optional[bool] = None,
    max_parallel: int = 0,
    **dimensions: Any,
) -> Strategy:
    """
    Matrix strategy from keyword dimensions.

    Example:
        job("test", sh("Test", "pytest"),
            runs_on=expressions.matrix.os,
            strategy=matrix(os=["ubuntu-latest", "macos-latest"], python=["3.11", "3.12"]))
    """
    return Strategy(
        matrix=Matrix(values=dimensions, include=list(include or []), exclude=list(exclude or [])),
        fail_fast=fail_fast,
        max_parallel=max_parallel,
    )


# ---------------------------------------------------------------------
# Workflow helper (single-file story)
# ---------------------------------------------------------------------

def job_id(name: str) -> str:
    """Job id derived from a display name: 'Build & Test' -> 'build-test'."""
    slug = re.sub(r"[^A-Za-z0-9_-]+", "-", name.strip()).strip("-").lower()
    return slug or "job"


def wf(name: str, *jobs: Job, on: Optional[Triggers] = None, **workflow_fields: Any) -> Workflow:
    """
    Workflow definition helper. Jobs are keyed by `job_id(job.name)` in
    the order given.

        CI = wf("CI", job("lint", ...), job("test", ...), on=Triggers(push=Push()))
    """
    keyed: Dict[str, Job] = {}
    for j in jobs:
        key = job_id(j.name)
        if key in keyed:
            raise ValueError(f"Duplicate job id {key!r} (from job name {j.name!r})")
        keyed[key] = j
    return Workflow(name=name, on=on or Triggers(), jobs=keyed, **workflow_fields)


workflow = wf
