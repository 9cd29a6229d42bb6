from __future__ import annotations

from typing import Any

from ..codeowners import Codeowners
from ..dependabot import Dependabot
from ..errors import UnrenderableValue
from ..model import Workflow
from ..templates import DiscussionTemplate, IssueTemplate, PRTemplate
from .dependabot import dependabot_to_yaml
from .forms import discussion_template_to_yaml, issue_template_to_yaml
from .text import CODEOWNERS_HEADER, codeowners_to_text, pr_template_to_markdown
from .workflow import resolve_needs, to_yaml

_SERIALIZERS = [
    (Workflow, to_yaml),
    (Dependabot, dependabot_to_yaml),
    (IssueTemplate, issue_template_to_yaml),
    (DiscussionTemplate, discussion_template_to_yaml),
    (PRTemplate, pr_template_to_markdown),
    (Codeowners, codeowners_to_text),
]


def serialize(value: Any) -> bytes:
    """Render any top-level artifact to the bytes GitHub reads."""
    for cls, fn in _SERIALIZERS:
        if isinstance(value, cls):
            return fn(value)
    raise UnrenderableValue(f"{type(value).__name__} is not a GitHub artifact")


__all__ = [
    "serialize",
    "to_yaml",
    "dependabot_to_yaml",
    "issue_template_to_yaml",
    "discussion_template_to_yaml",
    "pr_template_to_markdown",
    "codeowners_to_text",
    "resolve_needs",
    "CODEOWNERS_HEADER",
]
