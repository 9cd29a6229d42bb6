# serialize/workflow.py
from __future__ import annotations

import re
from typing import Any, Dict, List, Optional

from ..actions.base import Action
from ..errors import IncompleteRequired, InvalidIdentifier, InvalidStepShape, UnknownJobReference
from ..model import Job, Matrix, Step, Workflow
from .emitter import FlowList, PlainKey, dump
from .records import join_path, mapping, projector, record, value_of

IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")

# needs lists up to this length are written inline: [a, b, c]
FLOW_NEEDS_MAX = 3


# ---------------------------------------------------------------------
# Job references
# ---------------------------------------------------------------------

def job_key(job: Job, jobs: Dict[str, Job]) -> Optional[str]:
    """Key of `job` in `jobs`: same object first, then an equal value."""
    for key, candidate in jobs.items():
        if candidate is job:
            return key
    for key, candidate in jobs.items():
        if candidate == job:
            return key
    return None


def resolve_needs(needs: List[Any], jobs: Dict[str, Job], path: str = "needs") -> List[str]:
    """Rewrite a needs list to job ids; strings pass through unchanged."""
    if isinstance(needs, (str, Job)):
        needs = [needs]
    resolved: List[str] = []
    for i, ref in enumerate(needs):
        ref_path = f"{path}[{i}]"
        if isinstance(ref, str):
            resolved.append(ref)
            continue
        if isinstance(ref, Job):
            key = job_key(ref, jobs)
            if key is None:
                label = ref.name or "<unnamed>"
                raise UnknownJobReference(
                    f"job {label!r} is not part of this workflow. Known jobs: {list(jobs)}",
                    path=ref_path,
                )
            resolved.append(key)
            continue
        raise UnknownJobReference(
            f"needs entries must be job ids or Job values, got {type(ref).__name__}",
            path=ref_path,
        )
    return resolved


# ---------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------

@projector(Step)
def step_data(step: Step, path: str) -> Dict[str, Any]:
    if step.uses and step.run:
        raise InvalidStepShape("a step sets either `uses` or `run`, not both", path=path)
    if step.with_ and step.run:
        raise InvalidStepShape("`with` only applies to `uses` steps", path=join_path(path, "with"))
    if step.id and not IDENTIFIER.match(step.id):
        raise InvalidIdentifier(f"invalid step id {step.id!r}", path=join_path(path, "id"))
    return record(step, path)


def steps_data(steps: List[Any], path: str) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for i, item in enumerate(steps):
        item_path = f"{path}[{i}]"
        if isinstance(item, Step):
            out.append(step_data(item, item_path))
        elif isinstance(item, Action):
            out.append(step_data(item.step(), item_path))
        elif isinstance(item, dict):
            out.append(mapping(item, item_path))
        else:
            raise InvalidStepShape(
                f"expected a Step, an action or a mapping, got {type(item).__name__}",
                path=item_path,
            )
    return out


# ---------------------------------------------------------------------
# Jobs
# ---------------------------------------------------------------------

@projector(Matrix)
def matrix_data(matrix: Matrix, path: str) -> Dict[str, Any]:
    out = mapping(matrix.values, path)
    if matrix.include:
        out["include"] = value_of(matrix.include, join_path(path, "include"))
    if matrix.exclude:
        out["exclude"] = value_of(matrix.exclude, join_path(path, "exclude"))
    return out


def job_data(job: Job, path: str, jobs: Dict[str, Job]) -> Dict[str, Any]:
    if job.uses:
        if job.steps:
            raise InvalidStepShape("a job calling a reusable workflow cannot have steps", path=join_path(path, "steps"))
    else:
        if not job.runs_on:
            raise IncompleteRequired("'runs-on' is required", path=join_path(path, "runs-on"))
        if not job.steps and job.strategy is None:
            raise IncompleteRequired("a job needs at least one step", path=join_path(path, "steps"))

    def needs(value: List[Any], needs_path: str) -> List[str]:
        ids = resolve_needs(value, jobs, needs_path)
        return FlowList(ids) if len(ids) <= FLOW_NEEDS_MAX else ids

    return record(job, path, special={"needs": needs, "steps": steps_data})


def jobs_data(jobs: Dict[str, Job], path: str = "jobs") -> Dict[str, Any]:
    """Jobs keep the caller's order; every other user map is sorted."""
    out: Dict[str, Any] = {}
    for key, job in jobs.items():
        if not IDENTIFIER.match(key):
            raise InvalidIdentifier(f"invalid job id {key!r}", path=join_path(path, key))
        out[key] = job_data(job, join_path(path, key), jobs)
    return out


@projector(Job)
def _lone_job(job: Job, path: str) -> Dict[str, Any]:
    # a Job outside any workflow: only string needs can resolve
    return job_data(job, path, {})


# ---------------------------------------------------------------------
# Workflow
# ---------------------------------------------------------------------

@projector(Workflow)
def workflow_data(workflow: Workflow, path: str = "") -> Dict[str, Any]:
    data = record(workflow, path, special={"jobs": jobs_data})
    # `on` is a YAML 1.1 boolean word; GitHub reads it unquoted
    return {PlainKey(k) if k == "on" else k: v for k, v in data.items()}


def to_yaml(workflow: Workflow) -> bytes:
    return dump(workflow_data(workflow))
