"""Detection of AI agents among the ancestors of the current process."""

from __future__ import annotations

from collections.abc import Iterator

import psutil

KNOWN_AGENTS = ("gemini", "claude", "cursor", "node", "windsurf", "idx")

_MAX_DEPTH = 4


def matches_agent(name: str) -> bool:
    """True when a process name contains a known agent name, ignoring case."""
    lowered = name.lower()
    return any(agent in lowered for agent in KNOWN_AGENTS)


def _ancestry(limit: int) -> Iterator[str]:
    """Names of the current process and its parents, at most ``limit`` of them."""
    try:
        process = psutil.Process()
        for _ in range(limit):
            yield process.name()
            process = process.parent()
            if process is None:
                return
    except psutil.Error:
        return


def is_called_by_ai() -> bool:
    """Whether this process or one of its nearest ancestors is a known agent."""
    return any(matches_agent(name) for name in _ancestry(_MAX_DEPTH))


def parent_name() -> str:
    """Name of the parent process, or ``"unknown"`` when it cannot be found."""
    try:
        parent = psutil.Process().parent()
        if parent is None:
            return "unknown"
        return parent.name()
    except psutil.Error:
        return "unknown"