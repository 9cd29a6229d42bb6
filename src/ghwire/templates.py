# templates.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, List, Union

# Where each form-element field lands on the wire:
#   attributes.<key>  (default)
#   validations.<key>
#   top level, next to `type`
ATTRIBUTES = "attributes"
VALIDATIONS = "validations"
TOP = "top"


def _top(default: Any = ""):
    return field(default=default, metadata={"section": TOP})


def _validation(default: Any = False):
    return field(default=default, metadata={"section": VALIDATIONS})


# ---------------------------------------------------------------------
# Form elements
# ---------------------------------------------------------------------

@dataclass(frozen=True)
class Markdown:
    """Static text shown in the form; not submitted."""
    element_type: ClassVar[str] = "markdown"

    value: str = field(default="", metadata={"required": True})
    id: str = _top()


@dataclass(frozen=True)
class Input:
    element_type: ClassVar[str] = "input"

    label: str = field(default="", metadata={"required": True})
    id: str = _top()
    description: str = ""
    placeholder: str = ""
    value: str = ""
    required: bool = _validation()


@dataclass(frozen=True)
class Textarea:
    element_type: ClassVar[str] = "textarea"

    label: str = field(default="", metadata={"required": True})
    id: str = _top()
    description: str = ""
    placeholder: str = ""
    value: str = ""
    render: str = ""  # syntax highlighting language, e.g. "shell"
    required: bool = _validation()


@dataclass(frozen=True)
class Dropdown:
    element_type: ClassVar[str] = "dropdown"

    label: str = field(default="", metadata={"required": True})
    id: str = _top()
    description: str = ""
    multiple: bool = False
    options: List[str] = field(default_factory=list, metadata={"required": True})
    default: int = 0  # index into options
    required: bool = _validation()


@dataclass(frozen=True)
class CheckboxOption:
    label: str = field(default="", metadata={"required": True})
    required: bool = False


@dataclass(frozen=True)
class Checkboxes:
    element_type: ClassVar[str] = "checkboxes"

    label: str = field(default="", metadata={"required": True})
    id: str = _top()
    description: str = ""
    options: List[CheckboxOption] = field(default_factory=list, metadata={"required": True})


FormElement = Union[Markdown, Input, Textarea, Dropdown, Checkboxes]

ELEMENT_TYPES = {cls.element_type: cls for cls in (Markdown, Input, Textarea, Dropdown, Checkboxes)}


# ---------------------------------------------------------------------
# Forms
# ---------------------------------------------------------------------

@dataclass(frozen=True)
class IssueTemplate:
    """An issue form under .github/ISSUE_TEMPLATE/."""
    name: str = field(default="", metadata={"required": True})
    description: str = field(default="", metadata={"required": True})
    title: str = ""
    labels: List[str] = field(default_factory=list)
    projects: List[str] = field(default_factory=list)
    assignees: List[str] = field(default_factory=list)
    body: List[FormElement] = field(default_factory=list, metadata={"required": True})


@dataclass(frozen=True)
class DiscussionTemplate:
    """A discussion category form under .github/DISCUSSION_TEMPLATE/."""
    title: str = ""
    description: str = ""
    labels: List[str] = field(default_factory=list)
    body: List[FormElement] = field(default_factory=list, metadata={"required": True})


# ---------------------------------------------------------------------
# Pull request templates
# ---------------------------------------------------------------------

DEFAULT_PR_TEMPLATE = "default"


@dataclass(frozen=True)
class PRTemplate:
    """
    Markdown pre-filled into new pull requests.

    An empty name (or "default") is the repository's base template; any
    other name is an alternative picked with `?template=<name>.md`.
    """
    name: str = ""
    content: str = ""

    @property
    def is_default(self) -> bool:
        return self.name in ("", DEFAULT_PR_TEMPLATE)

    def filename(self) -> str:
        if self.is_default:
            return "PULL_REQUEST_TEMPLATE.md"
        return f"PULL_REQUEST_TEMPLATE/{self.name}.md"
