# serialize/forms.py
from __future__ import annotations

import dataclasses
from typing import Any, Dict, List

from ..errors import IncompleteRequired, UnrenderableValue
from ..model import is_zero
from ..templates import (
    ATTRIBUTES, TOP, VALIDATIONS,
    Checkboxes, DiscussionTemplate, Dropdown, Input, IssueTemplate, Markdown, Textarea,
)
from .emitter import dump
from .records import join_path, record, value_of, wire_key

ELEMENTS = (Markdown, Input, Textarea, Dropdown, Checkboxes)


def element_data(element: Any, path: str) -> Dict[str, Any]:
    """
    Re-nest a flat form element into GitHub's shape:

        type: input
        id: ...
        attributes: {label, description, ...}
        validations: {required: true}
    """
    if not isinstance(element, ELEMENTS):
        raise UnrenderableValue(
            f"expected a form element, got {type(element).__name__}", path=path,
        )

    sections: Dict[str, Dict[str, Any]] = {TOP: {}, ATTRIBUTES: {}, VALIDATIONS: {}}
    for f in dataclasses.fields(element):
        section = f.metadata.get("section", ATTRIBUTES)
        key = wire_key(f)
        value = getattr(element, f.name)
        field_path = join_path(path, key if section == TOP else f"{section}.{key}")
        if is_zero(value):
            if f.metadata.get("required"):
                raise IncompleteRequired(f"{key!r} is required for {element.element_type} elements", path=field_path)
            continue
        sections[section][key] = value_of(value, field_path)

    out: Dict[str, Any] = {"type": element.element_type}
    out.update(sections[TOP])
    if sections[ATTRIBUTES]:
        out[ATTRIBUTES] = sections[ATTRIBUTES]
    if sections[VALIDATIONS]:
        out[VALIDATIONS] = sections[VALIDATIONS]
    return out


def body_data(body: List[Any], path: str) -> List[Dict[str, Any]]:
    return [element_data(e, f"{path}[{i}]") for i, e in enumerate(body)]


def issue_template_data(template: IssueTemplate) -> Dict[str, Any]:
    return record(template, special={"body": body_data})


def discussion_template_data(template: DiscussionTemplate) -> Dict[str, Any]:
    return record(template, special={"body": body_data})


def issue_template_to_yaml(template: IssueTemplate) -> bytes:
    return dump(issue_template_data(template))


def discussion_template_to_yaml(template: DiscussionTemplate) -> bytes:
    return dump(discussion_template_data(template))
