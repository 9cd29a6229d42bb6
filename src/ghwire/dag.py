# dag.py
from __future__ import annotations

from collections import deque
from typing import Dict, List, Set, Tuple

from .model import Workflow
from .serialize.workflow import resolve_needs

DIRECTIONS = ("TB", "BT", "LR", "RL")


def build_dag(workflow: Workflow) -> Tuple[Dict[str, Set[str]], Dict[str, int]]:
    """
    Build a DAG from a workflow's jobs.

    Edges run need -> job (the need must finish before the job starts).
    Job values in `needs` are resolved to their ids first.
    """
    jobs = workflow.jobs
    adj: Dict[str, Set[str]] = {k: set() for k in jobs}
    indeg: Dict[str, int] = {k: 0 for k in jobs}

    for key, job in jobs.items():
        for need in resolve_needs(job.needs, jobs, f"jobs.{key}.needs"):
            if need not in adj:
                raise ValueError(
                    f"Job '{key}' needs missing job '{need}'. "
                    f"Known jobs: {sorted(adj)}"
                )
            if key not in adj[need]:
                adj[need].add(key)
                indeg[key] += 1

    return adj, indeg


def topo_levels(adj: Dict[str, Set[str]], indeg: Dict[str, int]) -> List[List[str]]:
    """
    Convert DAG into topological "levels" (stages).
    Jobs in one stage can run in parallel.
    """
    indeg = dict(indeg)  # copy (we mutate it)
    q = deque(sorted([n for n, d in indeg.items() if d == 0]))

    levels: List[List[str]] = []
    processed = 0

    while q:
        level_size = len(q)
        level: List[str] = []

        for _ in range(level_size):
            node = q.popleft()
            level.append(node)
            processed += 1

            for child in sorted(adj.get(node, set())):
                indeg[child] -= 1
                if indeg[child] == 0:
                    q.append(child)

        levels.append(sorted(level))

    if processed != len(indeg):
        remaining = sorted([n for n, d in indeg.items() if d > 0])
        raise ValueError(f"Job graph has a cycle. Stuck jobs: {remaining}")

    return levels


def stages(workflow: Workflow) -> List[List[str]]:
    adj, indeg = build_dag(workflow)
    return topo_levels(adj, indeg)


# ---------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------

def _edges(workflow: Workflow) -> List[Tuple[str, str]]:
    adj, _ = build_dag(workflow)
    return [(src, dst) for src in workflow.jobs for dst in sorted(adj[src])]


def _check_direction(direction: str) -> str:
    direction = direction.upper()
    if direction not in DIRECTIONS:
        raise ValueError(f"direction must be one of {DIRECTIONS}, got {direction!r}")
    return direction


def render_dot(workflow: Workflow, direction: str = "TB") -> str:
    """Graphviz DOT for the job graph."""
    lines = [
        "digraph workflow {",
        f"  rankdir={_check_direction(direction)};",
        "  node [shape=box];",
    ]
    for key, job in workflow.jobs.items():
        label = (job.name or key).replace("\\", "\\\\").replace('"', '\\"')
        lines.append(f'  "{key}" [label="{label}"];')
    for src, dst in _edges(workflow):
        lines.append(f'  "{src}" -> "{dst}";')
    lines.append("}")
    return "\n".join(lines) + "\n"


def render_mermaid(workflow: Workflow, direction: str = "TB") -> str:
    """Mermaid flowchart for the job graph."""
    lines = [f"graph {_check_direction(direction)}"]
    for key, job in workflow.jobs.items():
        label = (job.name or key).replace('"', "'")
        lines.append(f'  {_mermaid_id(key)}["{label}"]')
    for src, dst in _edges(workflow):
        lines.append(f"  {_mermaid_id(src)} --> {_mermaid_id(dst)}")
    return "\n".join(lines) + "\n"


def _mermaid_id(key: str) -> str:
    return key.replace("-", "_")
