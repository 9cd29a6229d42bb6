# discover.py
from __future__ import annotations

import logging
import runpy
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from .codeowners import Codeowners
from .dependabot import Dependabot
from .errors import DiscoveryError
from .model import Workflow
from .templates import DiscussionTemplate, IssueTemplate, PRTemplate

logger = logging.getLogger(__name__)

WORKFLOW = "workflow"
DEPENDABOT = "dependabot"
ISSUE_TEMPLATE = "issue-template"
DISCUSSION_TEMPLATE = "discussion-template"
PR_TEMPLATE = "pr-template"
CODEOWNERS = "codeowners"

KINDS = {
    Workflow: WORKFLOW,
    Dependabot: DEPENDABOT,
    IssueTemplate: ISSUE_TEMPLATE,
    DiscussionTemplate: DISCUSSION_TEMPLATE,
    PRTemplate: PR_TEMPLATE,
    Codeowners: CODEOWNERS,
}


@dataclass(frozen=True)
class Declaration:
    kind: str
    name: str
    value: Any
    source: str


def kind_of(value: Any) -> Optional[str]:
    for cls, kind in KINDS.items():
        if isinstance(value, cls):
            return kind
    return None


def find_declaration_files(source: str | Path) -> List[Path]:
    """
    Python files to load from `source`.

    A file is returned as-is; a directory yields its *.py files (sorted,
    non-recursive), skipping private modules and tests.
    """
    path = Path(source)
    if path.is_file():
        return [path]
    if not path.is_dir():
        raise DiscoveryError(f"source not found: {path}", artifact=str(path))
    return sorted(
        p for p in path.glob("*.py")
        if not p.name.startswith("_") and not p.name.startswith("test_")
    )


def load_file(path: str | Path) -> List[Declaration]:
    """
    Execute one declaration file and collect its artifacts.

    The file may define:
      - declarations() -> {name: artifact, ...}
      - or module-level artifact values (names starting with "_" are ignored)
    """
    file_path = Path(path).expanduser().resolve()
    if file_path.suffix != ".py":
        raise DiscoveryError(f"declaration files must be .py, got: {file_path.name}", artifact=str(path))

    module_name = f"ghwire_declarations_{file_path.stem}"
    try:
        globals_dict = runpy.run_path(str(file_path), run_name=module_name)
    except Exception as e:
        raise DiscoveryError(f"failed to load {file_path.name}: {e}", artifact=str(path)) from e

    values: Dict[str, Any]
    if callable(globals_dict.get("declarations")):
        try:
            values = globals_dict["declarations"]()
        except Exception as e:
            raise DiscoveryError(
                f"declarations() failed in {file_path.name}: {e}",
                artifact=str(path),
            ) from e
        if not isinstance(values, dict):
            raise DiscoveryError(
                "declarations() must return a dict of name -> artifact",
                artifact=str(path),
            )
    else:
        values = {k: v for k, v in globals_dict.items() if not k.startswith("_")}

    found: List[Declaration] = []
    for name, value in values.items():
        kind = kind_of(value)
        if kind is None:
            continue
        found.append(Declaration(kind=kind, name=name, value=value, source=str(path)))
        logger.debug("found %s %s in %s", kind, name, file_path.name)
    return found


def discover(source: str | Path) -> Iterator[Declaration]:
    """Yield declarations file by file, in definition order within a file."""
    for path in find_declaration_files(source):
        yield from load_file(path)
