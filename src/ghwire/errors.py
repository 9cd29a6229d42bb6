# errors.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar


@dataclass(eq=False)
class GhwireError(Exception):
    """
    Structured error with enough context for:
      - clean CLI output (kind + locator)
      - per-artifact reporting during a build

    eq=False keeps exceptions hashable.
    """
    kind: ClassVar[str] = "GhwireError"

    message: str
    path: str = ""
    artifact: str = ""

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        lines = [f"{self.kind}: {self.message}"]
        if self.artifact:
            lines.append(f"artifact={self.artifact}")
        if self.path:
            lines.append(f"path={self.path}")
        return "\n".join(lines)

    def for_artifact(self, name: str) -> "GhwireError":
        """Copy of this error tagged with the declaration it came from."""
        return replace(self, artifact=name)


@dataclass(eq=False)
class UnknownJobReference(GhwireError):
    kind: ClassVar[str] = "UnknownJobReference"


@dataclass(eq=False)
class InvalidStepShape(GhwireError):
    kind: ClassVar[str] = "InvalidStepShape"


@dataclass(eq=False)
class IncompleteRequired(GhwireError):
    kind: ClassVar[str] = "IncompleteRequired"


@dataclass(eq=False)
class UnrenderableValue(GhwireError):
    kind: ClassVar[str] = "UnrenderableValue"


@dataclass(eq=False)
class DuplicateArtifact(GhwireError):
    kind: ClassVar[str] = "DuplicateArtifact"


@dataclass(eq=False)
class DiscoveryError(GhwireError):
    kind: ClassVar[str] = "DiscoveryError"


@dataclass(eq=False)
class ImportFailure(GhwireError):
    kind: ClassVar[str] = "ImportFailure"


@dataclass(eq=False)
class InvalidIdentifier(GhwireError):
    kind: ClassVar[str] = "InvalidIdentifier"
