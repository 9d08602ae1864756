"""Raw log of the last command's output."""

from __future__ import annotations

import os
from pathlib import Path


def default_log_path() -> Path:
    """``$HOME/.axiom/logs/last_run.log``, with /tmp when HOME is unset."""
    home = os.environ.get("HOME", "/tmp")
    return Path(home) / ".axiom" / "logs" / "last_run.log"


def _split_lines(content: str) -> list[str]:
    if not content:
        return []
    parts = content.split("\n")
    if content.endswith("\n"):
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


class LogManager:
    """Keeps an untouched copy of every output line of a run."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else default_log_path()

    def append_line(self, line: str) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError:
            pass
        with self.path.open("a", encoding="utf-8", newline="") as handle:
            handle.write(f"{line}\n")

    def reset_log(self) -> None:
        """Remove the log so that a new run starts empty."""
        if self.path.exists():
            self.path.unlink()

    def get_last_logs(self, tail: int | None = None, grep: str | None = None) -> list[str]:
        """Logged lines, filtered case-insensitively by ``grep``, then the last ``tail``."""
        if not self.path.exists():
            raise FileNotFoundError(f"Log file not found at {self.path}")
        content = self.path.read_text(encoding="utf-8", errors="strict")
        lines = _split_lines(content)
        if grep is not None:
            needle = grep.lower()
            lines = [line for line in lines if needle in line.lower()]
        if tail is not None:
            lines = lines[max(0, len(lines) - tail):]
        return lines

    def total_bytes(self) -> int:
        try:
            return self.path.stat().st_size
        except OSError:
            return 0