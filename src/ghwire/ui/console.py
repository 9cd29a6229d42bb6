"""Console output formatting utilities for ghwire."""

from __future__ import annotations

import sys
from typing import Optional


class Console:
    """Centralized console output formatting."""

    def __init__(self, debug: bool = False):
        """
        Initialize console formatter.

        Args:
            debug: If True, show detailed output including stack traces
        """
        self.debug = debug

    def print_header(self, title: str) -> None:
        """Print a section header."""
        print(f"\n{title}")
        print("-" * len(title))

    def print_build_started(self, source: str, output: str, count: int) -> None:
        """Print build start information."""
        print("\nBUILD STARTED")
        print(f"Source: {source}")
        print(f"Output: {output}")
        print(f"Declarations: {count}")
        print()

    def print_artifact(self, path: str, status: str) -> None:
        """Print one artifact line: written, unchanged or dry-run."""
        print(f"  {path} ({status})")

    def print_artifact_failed(self, error) -> None:
        """
        Print a per-artifact failure.

        Args:
            error: GhwireError carrying kind, artifact and path
        """
        print(f"ARTIFACT FAILED: {error.artifact or '<unknown>'}", file=sys.stderr)
        print(f"  {error.kind}: {error.message}", file=sys.stderr)
        if error.path:
            print(f"  at {error.path}", file=sys.stderr)

    def print_declaration(self, kind: str, name: str, source: str) -> None:
        """Print one discovered declaration."""
        print(f"  {kind:<20} {name:<24} {source}")

    def print_summary(self, written: int, unchanged: int, failed: int) -> None:
        """Print final build summary."""
        print("\n" + "=" * 40)
        print("RESULTS")
        print("=" * 40)
        print(f"  written:   {written}")
        print(f"  unchanged: {unchanged}")
        print(f"  failed:    {failed}")

    def print_error(
        self,
        title: str,
        message: str,
        details: Optional[list[str]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        """
        Print structured error message.

        Args:
            title: Error title
            message: Main error message
            details: Optional list of detail lines
            suggestion: Optional suggestion for user
        """
        print(f"\nERROR: {title}", file=sys.stderr)
        print(f"{message}", file=sys.stderr)
        if details:
            for detail in details:
                print(f"  {detail}", file=sys.stderr)
        if suggestion:
            print(f"\n{suggestion}", file=sys.stderr)

    def print_exception(self, exc: Exception) -> None:
        """Print exception, with full traceback only in debug mode."""
        if self.debug:
            import traceback
            traceback.print_exception(type(exc), exc, exc.__traceback__)
        else:
            print(f"Error: {exc}", file=sys.stderr)

    def print_info(self, message: str) -> None:
        """Print informational message."""
        print(message)

    def print_text(self, text: str) -> None:
        """Print generated text verbatim (no added newline)."""
        sys.stdout.write(text)

    def print_debug(self, message: str) -> None:
        """Print debug message (only if debug mode enabled)."""
        if self.debug:
            print(f"[DEBUG] {message}", file=sys.stderr)


# Global console instance (will be initialized by CLI)
_console: Optional[Console] = None


def get_console() -> Console:
    """Get the global console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_console(console: Console) -> None:
    """Set the global console instance."""
    global _console
    _console = console
