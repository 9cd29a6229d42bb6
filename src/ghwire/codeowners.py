# codeowners.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Rule:
    """`pattern owner...`; a rule with no owners un-assigns the pattern."""
    pattern: str
    owners: List[str] = field(default_factory=list)
    comment: str = ""


@dataclass(frozen=True)
class Codeowners:
    """
    Ordered CODEOWNERS rules. GitHub applies the last matching rule, so
    order is kept exactly as given.
    """
    rules: List[Rule] = field(default_factory=list)

    def patterns(self) -> List[str]:
        return [r.pattern for r in self.rules]
