# serialize/text.py
from __future__ import annotations

from typing import List

from ..codeowners import Codeowners
from ..errors import IncompleteRequired
from ..templates import PRTemplate

CODEOWNERS_HEADER = "# CODEOWNERS file generated by ghwire"


def codeowners_to_text(codeowners: Codeowners) -> bytes:
    lines: List[str] = [CODEOWNERS_HEADER, ""]
    for i, rule in enumerate(codeowners.rules):
        if not rule.pattern:
            raise IncompleteRequired("'pattern' is required", path=f"rules[{i}].pattern")
        if rule.comment:
            for comment_line in rule.comment.splitlines():
                lines.append(f"# {comment_line}".rstrip())
        lines.append(" ".join([rule.pattern, *rule.owners]))
    return ("\n".join(lines) + "\n").encode("utf-8")


def pr_template_to_markdown(template: PRTemplate) -> bytes:
    return template.content.encode("utf-8")
