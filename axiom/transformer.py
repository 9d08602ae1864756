"""Line transformations: table detection, Markdown rows and volume guarding."""

from __future__ import annotations

from axiom.intent import IntentContext


def looks_like_table(line: str) -> bool:
    """True when a line has three or more blocks separated by double spaces."""
    stripped = line.strip()
    if len(stripped.encode("utf-8")) < 10:
        return False
    parts = [part for part in stripped.split("  ") if part.strip()]
    return len(parts) >= 3


def to_markdown(line: str) -> str:
    """Turn a space-aligned line into a Markdown table row."""
    parts = line.split()
    if len(parts) < 2:
        return line
    return "| " + " | ".join(parts) + " |"


def should_guard(command: str, line_count: int, context: IntentContext) -> bool:
    """Whether volume guarding applies to this line of a ``cat`` command."""
    return (
        command.startswith("cat")
        and line_count > 100
        and not context.is_relevant("full file")
    )