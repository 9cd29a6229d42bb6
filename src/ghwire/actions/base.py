# actions/base.py
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, ClassVar, Dict

from ..model import Step, is_zero

KEBAB = "kebab"
SNAKE = "snake"


@dataclass(frozen=True)
class Action:
    """
    Typed wrapper around one published action.

    Subclasses set `ref` (owner/name@version) and declare one field per
    action input. Fields left at their zero value are not passed, so the
    action falls back to its own default. Fields with metadata
    {"omit": "none"} are only dropped when None, so 0 and false can be
    passed explicitly.

    Input keys come from the field name: snake_case turned into
    kebab-case, or kept as-is when `input_style` is SNAKE. A field's
    metadata {"input": "..."} names the key exactly.
    """
    ref: ClassVar[str] = ""
    input_style: ClassVar[str] = KEBAB

    def action_ref(self) -> str:
        return self.ref

    def inputs(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.metadata.get("omit") == "none":
                if value is None:
                    continue
            elif is_zero(value):
                continue
            out[input_key(type(self), f)] = value
        return out

    def step(self, **step_fields: Any) -> Step:
        """Wrap in an explicit Step to add id/name/if/env."""
        return Step(uses=self.ref, with_=self.inputs(), **step_fields)


def input_key(cls: type, f) -> str:
    if "input" in f.metadata:
        return f.metadata["input"]
    if getattr(cls, "input_style", KEBAB) == SNAKE:
        return f.name
    return f.name.replace("_", "-")


def as_input(name: str):
    """Field metadata naming an input key that doesn't follow the class style."""
    return {"input": name}
