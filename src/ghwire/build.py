# build.py
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from . import discover as d
from .errors import DuplicateArtifact, GhwireError
from .serialize import serialize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Artifact:
    path: str      # relative to the repository root, "/" separated
    content: bytes
    name: str = ""
    kind: str = ""


@dataclass
class BuildResult:
    artifacts: List[Artifact] = field(default_factory=list)
    errors: List[GhwireError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def slug(name: str) -> str:
    """
    File-name slug for a declaration name.

        CIWorkflow   -> ci-workflow
        release_flow -> release-flow
        BugReport    -> bug-report
    """
    s = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1-\2", name)
    s = re.sub(r"([a-z0-9])([A-Z])", r"\1-\2", s)
    s = re.sub(r"[^A-Za-z0-9]+", "-", s)
    return s.strip("-").lower()


def artifact_path(decl: d.Declaration) -> str:
    if decl.kind == d.WORKFLOW:
        return f".github/workflows/{slug(decl.name)}.yml"
    if decl.kind == d.DEPENDABOT:
        return ".github/dependabot.yml"
    if decl.kind == d.ISSUE_TEMPLATE:
        return f".github/ISSUE_TEMPLATE/{slug(decl.name)}.yml"
    if decl.kind == d.DISCUSSION_TEMPLATE:
        return f".github/DISCUSSION_TEMPLATE/{slug(decl.name)}.yml"
    if decl.kind == d.PR_TEMPLATE:
        return f".github/{decl.value.filename()}"
    if decl.kind == d.CODEOWNERS:
        return ".github/CODEOWNERS"
    raise ValueError(f"Unknown declaration kind: {decl.kind!r}")


def build(declarations: Iterable[d.Declaration]) -> BuildResult:
    """
    Serialize every declaration independently.

    A failing declaration is reported in `errors` and produces no
    artifact; the rest still build. Artifacts come back sorted by path.
    """
    result = BuildResult()
    by_path: Dict[str, Artifact] = {}

    for decl in declarations:
        try:
            path = artifact_path(decl)
            content = serialize(decl.value)
        except GhwireError as e:
            logger.debug("failed to build %s: %s", decl.name, e)
            result.errors.append(e.for_artifact(decl.name))
            continue

        if path in by_path:
            result.errors.append(DuplicateArtifact(
                f"{path} is already produced by {by_path[path].name!r}",
                path=path,
                artifact=decl.name,
            ))
            continue

        by_path[path] = Artifact(path=path, content=content, name=decl.name, kind=decl.kind)

    result.artifacts = [by_path[p] for p in sorted(by_path)]
    return result


def build_source(source) -> BuildResult:
    """Discover declarations under `source` and build them."""
    return build(d.discover(source))
