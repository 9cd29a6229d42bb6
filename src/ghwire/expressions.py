# expressions.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Expression:
    """
    A GitHub Actions expression, kept unwrapped.

    `raw` is the text between the braces; `str(expr)` is the form GitHub
    substitutes: ``${{ raw }}``. Compose expressions through `raw` so the
    wrapper is only ever applied once.
    """
    raw: str

    def render(self) -> str:
        return "${{ " + self.raw + " }}"

    def __str__(self) -> str:
        return self.render()

    # ----- comparisons -----

    def eq(self, other: Any) -> "Expression":
        return Expression(f"{self.raw} == {literal(other)}")

    def ne(self, other: Any) -> "Expression":
        return Expression(f"{self.raw} != {literal(other)}")

    # ----- boolean operators: a & b, a | b, ~a -----

    def __and__(self, other: Any) -> "Expression":
        return and_(self, other)

    def __or__(self, other: Any) -> "Expression":
        return or_(self, other)

    def __invert__(self) -> "Expression":
        return not_(self)


@dataclass(frozen=True)
class StepOutput:
    """Reference to `steps.<step_id>.outputs.<output>`."""
    step_id: str
    output: str

    def expression(self) -> Expression:
        return Expression(f"steps.{self.step_id}.outputs.{self.output}")

    def __str__(self) -> str:
        return self.expression().render()


# ---------------------------------------------------------------------
# Operand rendering
# ---------------------------------------------------------------------

def raw(value: Any) -> str:
    """Raw text of an expression-like value; plain strings are taken as raw."""
    if isinstance(value, Expression):
        return value.raw
    if isinstance(value, StepOutput):
        return value.expression().raw
    if isinstance(value, str):
        return value
    raise TypeError(f"Cannot use {type(value).__name__} as an expression")


def literal(value: Any) -> str:
    """Render a Python value as an expression-language literal."""
    if isinstance(value, (Expression, StepOutput)):
        return raw(value)
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        # single quotes are escaped by doubling
        return "'" + value.replace("'", "''") + "'"
    raise TypeError(f"No expression literal for {type(value).__name__}")


def _call(fn: str, *args: Any) -> Expression:
    return Expression(f"{fn}({', '.join(literal(a) for a in args)})")


# ---------------------------------------------------------------------
# Boolean combinators
# ---------------------------------------------------------------------

def and_(*exprs: Any) -> Expression:
    if not exprs:
        raise ValueError("and_() needs at least one expression")
    return Expression(" && ".join(f"({raw(e)})" for e in exprs))


def or_(*exprs: Any) -> Expression:
    if not exprs:
        raise ValueError("or_() needs at least one expression")
    return Expression(" || ".join(f"({raw(e)})" for e in exprs))


def not_(expr: Any) -> Expression:
    return Expression(f"!({raw(expr)})")


# ---------------------------------------------------------------------
# Functions
# ---------------------------------------------------------------------

def contains(haystack: Any, needle: Any) -> Expression:
    return _call("contains", haystack, needle)


def starts_with(value: Any, prefix: Any) -> Expression:
    return _call("startsWith", value, prefix)


def ends_with(value: Any, suffix: Any) -> Expression:
    return _call("endsWith", value, suffix)


def format_(template: str, *args: Any) -> Expression:
    return _call("format", template, *args)


def join(array: Any, separator: Optional[str] = None) -> Expression:
    if separator is None:
        return _call("join", array)
    return _call("join", array, separator)


def to_json(value: Any) -> Expression:
    return _call("toJSON", value)


def from_json(value: Any) -> Expression:
    return _call("fromJSON", value)


def hash_files(*patterns: str) -> Expression:
    return _call("hashFiles", *patterns)


def always() -> Expression:
    return Expression("always()")


def success() -> Expression:
    return Expression("success()")


def failure() -> Expression:
    return Expression("failure()")


def cancelled() -> Expression:
    return Expression("cancelled()")


# ---------------------------------------------------------------------
# Contexts
# ---------------------------------------------------------------------

class _Context:
    """
    Dotted accessor for a flat context, usable two ways:

        secrets.NPM_TOKEN
        secrets("NPM_TOKEN")
    """

    def __init__(self, prefix: str):
        self._prefix = prefix

    def __call__(self, name: str) -> Expression:
        return Expression(f"{self._prefix}.{name}")

    def __getattr__(self, name: str) -> Expression:
        if name.startswith("_"):
            raise AttributeError(name)
        return self(name)

    def __repr__(self) -> str:
        return f"<context {self._prefix}>"


class _GitHub(_Context):
    def __init__(self):
        super().__init__("github")

    def event(self, path: str = "") -> Expression:
        return Expression(f"github.event.{path}" if path else "github.event")


class _Steps:
    def output(self, step_id: str, name: str) -> StepOutput:
        return StepOutput(step_id, name)

    def outcome(self, step_id: str) -> Expression:
        return Expression(f"steps.{step_id}.outcome")

    def conclusion(self, step_id: str) -> Expression:
        return Expression(f"steps.{step_id}.conclusion")


class _Needs:
    def output(self, job_id: str, name: str) -> Expression:
        return Expression(f"needs.{job_id}.outputs.{name}")

    def result(self, job_id: str) -> Expression:
        return Expression(f"needs.{job_id}.result")


github = _GitHub()
runner = _Context("runner")
secrets = _Context("secrets")
matrix = _Context("matrix")
inputs = _Context("inputs")
vars_ = _Context("vars")
env = _Context("env")
steps = _Steps()
needs = _Needs()


def __getattr__(name: str):
    # e.vars without shadowing the builtin
    if name == "vars":
        return vars_
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


# ---------------------------------------------------------------------
# Common conditions
# ---------------------------------------------------------------------

def on_branch(name: str) -> Expression:
    return github.ref.eq(f"refs/heads/{name}")


def is_tag() -> Expression:
    return starts_with(github.ref, "refs/tags/")


def on_tag(prefix: str) -> Expression:
    return starts_with(github.ref, f"refs/tags/{prefix}")


def is_event(name: str) -> Expression:
    return github.event_name.eq(name)


def is_push() -> Expression:
    return is_event("push")


def is_pull_request() -> Expression:
    return is_event("pull_request")


def on_default_branch() -> Expression:
    default_ref = format_("refs/heads/{0}", github.event("repository.default_branch"))
    return github.ref.eq(default_ref)


class ConditionBuilder:
    """
    Fold conditions left to right:

        ConditionBuilder(is_push()).and_(on_branch("main")).or_(is_tag()).build()
    """

    def __init__(self, initial: Any = None):
        self._expr: Optional[Expression] = None if initial is None else Expression(raw(initial))

    def and_(self, expr: Any):
        self._expr = Expression(raw(expr)) if self._expr is None else and_(self._expr, expr)
        return self

    def or_(self, expr: Any):
        self._expr = Expression(raw(expr)) if self._expr is None else or_(self._expr, expr)
        return self

    def build(self) -> Expression:
        if self._expr is None:
            raise ValueError("ConditionBuilder has no conditions")
        return self._expr
