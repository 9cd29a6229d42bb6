# importer.py
"""
Read existing GitHub files back into model values.

Import is lossy where the model is stricter than GitHub: unknown keys
are skipped (logged at debug level), and `${{ }}` strings only become
Expression values where the field accepts one.
"""
from __future__ import annotations

import dataclasses
import logging
import re
import typing
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from .actions import Action, catalog
from .actions.base import input_key
from .codeowners import Codeowners, Rule
from .dependabot import Dependabot
from .errors import ImportFailure
from .expressions import Expression
from .model import Job, Matrix, Step, Strategy, Workflow
from .serialize.records import wire_key
from .serialize.text import CODEOWNERS_HEADER
from .templates import ELEMENT_TYPES, TOP, VALIDATIONS, DiscussionTemplate, IssueTemplate, PRTemplate
from .triggers import EVENT_TYPES, Triggers

logger = logging.getLogger(__name__)

_EXPRESSION = re.compile(r"^\$\{\{\s*(.*?)\s*\}\}$", re.DOTALL)

WORKFLOW = "workflow"
DEPENDABOT = "dependabot"
ISSUE_TEMPLATE = "issue-template"
DISCUSSION_TEMPLATE = "discussion-template"
PR_TEMPLATE = "pr-template"
CODEOWNERS = "codeowners"
TYPES = (WORKFLOW, DEPENDABOT, ISSUE_TEMPLATE, DISCUSSION_TEMPLATE, PR_TEMPLATE, CODEOWNERS)


def parse_expression(value: str) -> Optional[Expression]:
    """`${{ x }}` -> Expression("x"); anything else -> None."""
    m = _EXPRESSION.match(value.strip())
    if m is None or "${{" in m.group(1):
        return None
    return Expression(m.group(1))


# ---------------------------------------------------------------------
# Generic reconstruction from type hints
# ---------------------------------------------------------------------

def _hints(cls: type) -> Dict[str, Any]:
    return typing.get_type_hints(cls)


def _convert(hint: Any, value: Any, path: str) -> Any:
    origin = typing.get_origin(hint)
    args = typing.get_args(hint)

    if hint is Any or hint is None:
        return value
    if origin is typing.Union:
        return _convert_union(args, value, path)
    if origin in (list, List):
        items = value if isinstance(value, list) else [value]
        return [_convert(args[0] if args else Any, v, f"{path}[{i}]") for i, v in enumerate(items)]
    if origin in (dict, Dict):
        if not isinstance(value, dict):
            raise ImportFailure(f"expected a mapping, got {type(value).__name__}", path=path)
        inner = args[1] if len(args) == 2 else Any
        return {str(k): _convert(inner, v, f"{path}.{k}") for k, v in value.items()}
    if hint is Expression:
        if isinstance(value, str):
            return parse_expression(value) or Expression(value)
        return value
    if dataclasses.is_dataclass(hint):
        return from_data(hint, value, path)
    if hint is str and value is not None and not isinstance(value, str):
        # YAML typed it (e.g. a version like 3.10 read as float); keep the text
        return str(value) if not isinstance(value, bool) else ("true" if value else "false")
    return value


def _convert_union(args: Tuple[Any, ...], value: Any, path: str) -> Any:
    options = [a for a in args if a is not type(None)]
    if value is None:
        return None
    if isinstance(value, str):
        if Expression in options:
            expr = parse_expression(value)
            if expr is not None:
                return expr
            if str not in options:
                return Expression(value)
        if str in options:
            return value
    if isinstance(value, bool) and bool in options:
        return value
    if isinstance(value, dict):
        for opt in options:
            if dataclasses.is_dataclass(opt):
                return from_data(opt, value, path)
            if typing.get_origin(opt) in (dict, Dict):
                return _convert(opt, value, path)
    if isinstance(value, list):
        for opt in options:
            if typing.get_origin(opt) in (list, List):
                return _convert(opt, value, path)
    for opt in options:
        if opt in (str, int, float, bool, Any) or opt is Any:
            return _convert(opt, value, path)
    if options and typing.get_origin(options[0]) in (list, List):
        return _convert(options[0], value, path)
    return value


def from_data(cls: type, data: Any, path: str = "") -> Any:
    """Rebuild a model dataclass from loaded YAML data."""
    if data is None:
        return cls()
    if not isinstance(data, dict):
        raise ImportFailure(f"expected a mapping for {cls.__name__}, got {type(data).__name__}", path=path)

    hooks = _HOOKS.get(cls, {})
    fields_by_key = {wire_key(f): f for f in dataclasses.fields(cls)}
    hints = _hints(cls)
    kwargs: Dict[str, Any] = {}
    for key, value in data.items():
        f = fields_by_key.get(str(key))
        field_path = f"{path}.{key}" if path else str(key)
        if f is None:
            logger.debug("ignoring unknown key %s", field_path)
            continue
        hook = hooks.get(f.name)
        if hook is not None:
            kwargs[f.name] = hook(value, field_path)
        else:
            kwargs[f.name] = _convert(hints[f.name], value, field_path)
    return cls(**kwargs)


# ---------------------------------------------------------------------
# Shapes the hints can't express
# ---------------------------------------------------------------------

def _triggers(value: Any, path: str) -> Triggers:
    # on: push | on: [push, pull_request] | on: {push: {...}}
    if isinstance(value, str):
        value = [value]
    if isinstance(value, list):
        value = {str(v): {} for v in value}
    # `push:` with nothing after it loads as None but still means "present"
    value = {k: ({} if v is None else v) for k, v in (value or {}).items()}
    for event in value:
        if event != "schedule" and event not in EVENT_TYPES:
            logger.warning("skipping unknown event %r at %s", event, path)
    return from_data(Triggers, value, path)


def _needs(value: Any, path: str) -> List[str]:
    if isinstance(value, str):
        return [value]
    return [str(v) for v in value or []]


def _steps(value: Any, path: str) -> List[Step]:
    return [from_data(Step, s, f"{path}[{i}]") for i, s in enumerate(value or [])]


def _matrix(value: Any, path: str) -> Any:
    if isinstance(value, str):
        return parse_expression(value) or Expression(value)
    values = {k: v for k, v in value.items() if k not in ("include", "exclude")}
    return Matrix(
        values=values,
        include=list(value.get("include") or []),
        exclude=list(value.get("exclude") or []),
    )


def _form_body(value: Any, path: str) -> List[Any]:
    out = []
    for i, item in enumerate(value or []):
        item_path = f"{path}[{i}]"
        cls = ELEMENT_TYPES.get(item.get("type")) if isinstance(item, dict) else None
        if cls is None:
            raise ImportFailure(f"unknown form element type {item!r}", path=item_path)
        flat: Dict[str, Any] = {}
        for f in dataclasses.fields(cls):
            section = f.metadata.get("section")
            source = item if section == TOP else item.get(section or "attributes") or {}
            if f.name in source:
                flat[f.name] = source[f.name]
        out.append(from_data(cls, flat, item_path))
    return out


_HOOKS: Dict[type, Dict[str, Any]] = {
    Workflow: {"on": _triggers},
    Job: {"needs": _needs, "steps": _steps},
    Strategy: {"matrix": _matrix},
    IssueTemplate: {"body": _form_body},
    DiscussionTemplate: {"body": _form_body},
}


# ---------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------

def _load(text: str, what: str) -> Dict[Any, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ImportFailure(f"invalid YAML in {what}: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ImportFailure(f"{what} must be a YAML mapping, got {type(data).__name__}")
    return data


def import_workflow(text: str) -> Workflow:
    data = _load(text, "workflow")
    if True in data:
        # YAML 1.1 reads the bare `on` key as boolean true
        data["on"] = data.pop(True)
    return from_data(Workflow, data)


def import_dependabot(text: str) -> Dependabot:
    return from_data(Dependabot, _load(text, "dependabot config"))


def import_issue_template(text: str) -> IssueTemplate:
    return from_data(IssueTemplate, _load(text, "issue template"))


def import_discussion_template(text: str) -> DiscussionTemplate:
    return from_data(DiscussionTemplate, _load(text, "discussion template"))


def import_pr_template(name: str, text: str) -> PRTemplate:
    return PRTemplate(name=name, content=text)


def import_codeowners(text: str) -> Codeowners:
    """
    Parse CODEOWNERS text. Comment lines directly above a rule become its
    comment; a blank line drops pending comments.
    """
    rules: List[Rule] = []
    pending: List[str] = []
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            pending = []
            continue
        if line.startswith("#"):
            if line != CODEOWNERS_HEADER:
                pending.append(line[1:].strip())
            continue
        if " #" in line:
            line = line.split(" #", 1)[0].rstrip()
        parts = line.split()
        rules.append(Rule(pattern=parts[0], owners=parts[1:], comment="\n".join(pending)))
        pending = []
    return Codeowners(rules=rules)


def detect_type(path: str | Path) -> str:
    p = Path(path)
    parts = set(p.parts)
    if p.name == "CODEOWNERS":
        return CODEOWNERS
    if p.stem == "dependabot":
        return DEPENDABOT
    if p.suffix.lower() == ".md":
        return PR_TEMPLATE
    if "ISSUE_TEMPLATE" in parts:
        return ISSUE_TEMPLATE
    if "DISCUSSION_TEMPLATE" in parts:
        return DISCUSSION_TEMPLATE
    return WORKFLOW


def import_file(path: str | Path, kind: str = "auto", name: str = "") -> Any:
    p = Path(path)
    if kind == "auto":
        kind = detect_type(p)
    text = p.read_text(encoding="utf-8")
    if kind == WORKFLOW:
        return import_workflow(text)
    if kind == DEPENDABOT:
        return import_dependabot(text)
    if kind == ISSUE_TEMPLATE:
        return import_issue_template(text)
    if kind == DISCUSSION_TEMPLATE:
        return import_discussion_template(text)
    if kind == PR_TEMPLATE:
        if not name:
            name = "" if p.stem == "PULL_REQUEST_TEMPLATE" else p.stem
        return import_pr_template(name, text)
    if kind == CODEOWNERS:
        return import_codeowners(text)
    raise ImportFailure(f"unknown import type {kind!r}; expected one of {TYPES}")


# ---------------------------------------------------------------------
# Python source generation
# ---------------------------------------------------------------------

class _SourceWriter:
    INDENT = "    "

    def __init__(self):
        self.imports: Dict[str, set] = {}

    def _use(self, cls: type) -> str:
        module = cls.__module__
        if module.startswith("ghwire.actions."):
            module = "ghwire.actions"
        self.imports.setdefault(module, set()).add(cls.__name__)
        return cls.__name__

    def expr(self, value: Any, level: int = 0) -> str:
        if isinstance(value, Expression):
            return f"{self._use(Expression)}({value.raw!r})"
        if isinstance(value, Step):
            action = step_as_action(value)
            if action is not None:
                return self._step_with_action(value, action, level)
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return self._call(self._use(type(value)), _non_default_fields(value), level)
        if isinstance(value, dict):
            if not value:
                return "{}"
            pad = self.INDENT * (level + 1)
            items = [f"{pad}{k!r}: {self.expr(v, level + 1)}," for k, v in value.items()]
            return "{\n" + "\n".join(items) + "\n" + self.INDENT * level + "}"
        if isinstance(value, (list, tuple)):
            if not value:
                return "[]"
            if all(isinstance(v, (str, int, float, bool)) for v in value) and len(value) <= 4:
                return "[" + ", ".join(repr(v) for v in value) + "]"
            pad = self.INDENT * (level + 1)
            items = [f"{pad}{self.expr(v, level + 1)}," for v in value]
            return "[\n" + "\n".join(items) + "\n" + self.INDENT * level + "]"
        return repr(value)

    def _call(self, name: str, kwargs: List[Tuple[str, Any]], level: int) -> str:
        if not kwargs:
            return f"{name}()"
        pad = self.INDENT * (level + 1)
        args = [f"{pad}{k}={self.expr(v, level + 1)}," for k, v in kwargs]
        return f"{name}(\n" + "\n".join(args) + "\n" + self.INDENT * level + ")"

    def _step_with_action(self, step: Step, action: Action, level: int) -> str:
        rendered = self.expr(action, level)
        rest = [(k, v) for k, v in _non_default_fields(step) if k not in ("uses", "with_")]
        if not rest:
            return rendered
        return self._call(f"{rendered}.step", rest, level)

    def header(self) -> str:
        lines = ["from __future__ import annotations", ""]
        for module in sorted(self.imports):
            lines.append(f"from {module} import {', '.join(sorted(self.imports[module]))}")
        return "\n".join(lines) + "\n"


def _non_default_fields(value: Any) -> List[Tuple[str, Any]]:
    out = []
    for f in dataclasses.fields(value):
        current = getattr(value, f.name)
        if f.default is not dataclasses.MISSING:
            default = f.default
        elif f.default_factory is not dataclasses.MISSING:
            default = f.default_factory()
        else:
            out.append((f.name, current))
            continue
        if current != default:
            out.append((f.name, current))
    return out


def step_as_action(step: Step) -> Optional[Action]:
    """Known action reference with wrapper-expressible inputs -> wrapper value."""
    cls = catalog().get(step.uses)
    if cls is None or step.run:
        return None
    names = {input_key(cls, f): f.name for f in dataclasses.fields(cls)}
    kwargs = {}
    for key, value in step.with_.items():
        if key not in names:
            return None
        kwargs[names[key]] = value
    return cls(**kwargs)


def to_source(value: Any, var_name: str = "value") -> str:
    """Python source that rebuilds `value` with ghwire constructors."""
    writer = _SourceWriter()
    body = writer.expr(value)
    return writer.header() + "\n\n" + f"{var_name} = {body}\n"
