# differ.py
"""
Semantic comparison of two workflow files.

Compares parsed YAML, so formatting, quoting and key order don't show up
as differences. Jobs are matched by id; steps by position.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

import yaml

from .errors import ImportFailure

logger = logging.getLogger(__name__)

ADDED = "added"
MODIFIED = "modified"
REMOVED = "removed"

_ACTION_ORDER = {ADDED: 0, MODIFIED: 1, REMOVED: 2}


@dataclass(frozen=True)
class DiffEntry:
    resource: str           # workflow name or "job:<id>"
    kind: str               # "workflow" | "job"
    action: str             # added | modified | removed
    changes: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class DiffSummary:
    added: int = 0
    modified: int = 0
    removed: int = 0

    @property
    def total(self) -> int:
        return self.added + self.modified + self.removed


@dataclass(frozen=True)
class DiffResult:
    entries: List[DiffEntry]
    summary: DiffSummary

    @property
    def identical(self) -> bool:
        return not self.entries


def _parse(text: str, what: str) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ImportFailure(f"invalid YAML in {what}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ImportFailure(f"{what} must be a YAML mapping, got {type(data).__name__}")
    if True in data:
        data["on"] = data.pop(True)
    return data


def _normalize(value: Any, ignore_order: bool) -> Any:
    if isinstance(value, dict):
        return {str(k): _normalize(v, ignore_order) for k, v in value.items()}
    if isinstance(value, list):
        items = [_normalize(v, ignore_order) for v in value]
        return sorted(items, key=repr) if ignore_order else items
    return value


def _changed(a: Any, b: Any, ignore_order: bool) -> bool:
    return _normalize(a, ignore_order) != _normalize(b, ignore_order)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _step_label(step: Dict[str, Any]) -> str:
    if step.get("name"):
        return repr(step["name"])
    if step.get("uses"):
        return str(step["uses"])
    if step.get("run"):
        run = str(step["run"])
        if len(run) > 30:
            run = run[:27] + "..."
        return f"run:{run!r}"
    return "unnamed"


# ---------------------------------------------------------------------
# Comparisons
# ---------------------------------------------------------------------

def _workflow_changes(old: Dict[str, Any], new: Dict[str, Any], ignore_order: bool) -> List[str]:
    changes = []
    if _text(old.get("name")) != _text(new.get("name")):
        changes.append(f"name: {_text(old.get('name'))!r} -> {_text(new.get('name'))!r}")
    for key, label in (("on", "triggers"), ("permissions", "permissions"),
                       ("env", "env"), ("concurrency", "concurrency")):
        if _changed(old.get(key), new.get(key), ignore_order):
            changes.append(f"{label} changed")
    return changes


def _step_changes(index: int, old: Dict[str, Any], new: Dict[str, Any], ignore_order: bool) -> List[str]:
    prefix = f"step[{index}]"
    changes = []
    for key in ("name", "id", "uses"):
        if _text(old.get(key)) != _text(new.get(key)):
            changes.append(f"{prefix}.{key}: {_text(old.get(key))!r} -> {_text(new.get(key))!r}")
    if _text(old.get("run")) != _text(new.get("run")):
        changes.append(f"{prefix}.run changed")
    for key in ("with", "env"):
        if _changed(old.get(key), new.get(key), ignore_order):
            changes.append(f"{prefix}.{key} changed")
    if _text(old.get("if")) != _text(new.get("if")):
        changes.append(f"{prefix}.if: {_text(old.get('if'))!r} -> {_text(new.get('if'))!r}")
    if bool(old.get("continue-on-error")) != bool(new.get("continue-on-error")):
        changes.append(
            f"{prefix}.continue-on-error: {bool(old.get('continue-on-error'))} -> "
            f"{bool(new.get('continue-on-error'))}"
        )
    if _text(old.get("working-directory")) != _text(new.get("working-directory")):
        changes.append(
            f"{prefix}.working-directory: {_text(old.get('working-directory'))!r} -> "
            f"{_text(new.get('working-directory'))!r}"
        )
    return changes


def _steps_changes(old: List[Dict[str, Any]], new: List[Dict[str, Any]], ignore_order: bool) -> List[str]:
    changes = []
    if len(old) != len(new):
        changes.append(f"steps count: {len(old)} -> {len(new)}")
    common = min(len(old), len(new))
    for i in range(common):
        changes.extend(_step_changes(i, old[i] or {}, new[i] or {}, ignore_order))
    for i in range(common, len(new)):
        changes.append(f"step[{i}]: {_step_label(new[i] or {})} added")
    for i in range(common, len(old)):
        changes.append(f"step[{i}]: {_step_label(old[i] or {})} removed")
    return changes


def _job_changes(old: Dict[str, Any], new: Dict[str, Any], ignore_order: bool) -> List[str]:
    changes = []
    if _text(old.get("name")) != _text(new.get("name")):
        changes.append(f"name: {_text(old.get('name'))!r} -> {_text(new.get('name'))!r}")
    if _changed(old.get("runs-on"), new.get("runs-on"), ignore_order):
        changes.append(f"runs-on: {old.get('runs-on')} -> {new.get('runs-on')}")
    if _changed(_as_list(old.get("needs")), _as_list(new.get("needs")), ignore_order):
        changes.append("needs changed")
    if _text(old.get("if")) != _text(new.get("if")):
        changes.append(f"if: {_text(old.get('if'))!r} -> {_text(new.get('if'))!r}")
    for key in ("strategy", "env", "environment", "permissions"):
        if _changed(old.get(key), new.get(key), ignore_order):
            changes.append(f"{key} changed")
    changes.extend(_steps_changes(old.get("steps") or [], new.get("steps") or [], ignore_order))
    if _changed(old.get("outputs"), new.get("outputs"), ignore_order):
        changes.append("outputs changed")
    return changes


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


# ---------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------

def diff_workflows(old_text: str, new_text: str, ignore_order: bool = False) -> DiffResult:
    """
    Compare two workflow documents.

    Args:
        old_text: YAML of the baseline workflow
        new_text: YAML of the changed workflow
        ignore_order: Treat lists as unordered when comparing values

    Returns:
        DiffResult with entries sorted added -> modified -> removed, then by resource
    """
    old = _parse(old_text, "old workflow")
    new = _parse(new_text, "new workflow")
    entries: List[DiffEntry] = []

    wf_changes = _workflow_changes(old, new, ignore_order)
    if wf_changes:
        entries.append(DiffEntry(_text(old.get("name")), "workflow", MODIFIED, wf_changes))

    old_jobs = old.get("jobs") or {}
    new_jobs = new.get("jobs") or {}

    for job_id, job in new_jobs.items():
        if job_id not in old_jobs:
            runs_on = (job or {}).get("runs-on")
            entries.append(DiffEntry(f"job:{job_id}", "job", ADDED, [f"runs-on: {runs_on}"]))
    for job_id in old_jobs:
        if job_id not in new_jobs:
            entries.append(DiffEntry(f"job:{job_id}", "job", REMOVED))
    for job_id, job in old_jobs.items():
        if job_id in new_jobs:
            changes = _job_changes(job or {}, new_jobs[job_id] or {}, ignore_order)
            if changes:
                entries.append(DiffEntry(f"job:{job_id}", "job", MODIFIED, changes))

    entries.sort(key=lambda e: (_ACTION_ORDER[e.action], e.resource))
    summary = DiffSummary(
        added=sum(1 for e in entries if e.action == ADDED),
        modified=sum(1 for e in entries if e.action == MODIFIED),
        removed=sum(1 for e in entries if e.action == REMOVED),
    )
    logger.debug("diff: %d added, %d modified, %d removed", summary.added, summary.modified, summary.removed)
    return DiffResult(entries=entries, summary=summary)
