"""Savings statistics and the efficiency dashboard."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TextIO

_TOOL_PREFIXES = [
    ("git", "git"),
    ("docker", "docker"),
    ("npm", "npm"),
    ("cargo", "cargo"),
    ("kubectl", "k8s"),
    ("terraform", "tf"),
]


@dataclass
class SessionStats:
    raw_bytes: int
    saved_bytes: int


def canonicalize_tool(cmd: str) -> str:
    """Group a full command line under a short tool name."""
    lowered = cmd.lower()
    for prefix, tool in _TOOL_PREFIXES:
        if lowered.startswith(prefix):
            return tool
    return "other"


@dataclass
class EfficiencyReport:
    """Totals of original and compressed sizes, overall and per tool."""

    total_original: int = 0
    total_compressed: int = 0
    tool_savings: dict[str, tuple[int, int]] = field(default_factory=dict)

    @classmethod
    def from_history(cls, raw_data: Iterable[tuple[str, int, int]]) -> EfficiencyReport:
        report = cls()
        for command, original, compressed in raw_data:
            report.total_original += original
            report.total_compressed += compressed
            tool = canonicalize_tool(command)
            prev_orig, prev_comp = report.tool_savings.get(tool, (0, 0))
            report.tool_savings[tool] = (prev_orig + original, prev_comp + compressed)
        return report

    def saved_chars(self) -> int:
        return max(0, self.total_original - self.total_compressed)

    def ratio(self) -> float:
        if self.total_original == 0:
            return 0.0
        return self.saved_chars() / self.total_original * 100.0

    def estimated_usd_saved(self) -> float:
        tokens = self.saved_chars() // 4
        return tokens / 1_000_000.0 * 15.0


def format_bytes(n: int) -> str:
    if n >= 1_000_000:
        return f"{n / 1_000_000.0:.1f}M"
    if n >= 1_000:
        return f"{n / 1_000.0:.1f}k"
    return str(n)


def render_dashboard(report: EfficiencyReport, stream: TextIO | None = None) -> None:
    """Write the savings dashboard to ``stream`` (standard output by default)."""
    out = stream if stream is not None else sys.stdout

    def emit(text: str = "") -> None:
        out.write(f"{text}\n")

    emit("\x1b[1m📊 Axiom Efficiency Dashboard (SOLID v1.0)\x1b[0m")
    emit("-------------------------------------------\n")

    emit("\x1b[1mTop Savings by Tool:\x1b[0m")
    emit(f"{'Tool':<12} | {'Original':<10} | {'Saved':<10} | {'Efficiency':<8}")
    emit("-" * 50)

    tools = sorted(
        report.tool_savings.items(),
        key=lambda item: item[1][0] - item[1][1],
        reverse=True,
    )
    for tool, (original, compressed) in tools:
        saved = max(0, original - compressed)
        efficiency = saved / original * 100.0 if original > 0 else 0.0
        emit(
            f"{tool:<12} | {format_bytes(original):<10} | "
            f"{format_bytes(saved):<10} | {efficiency:.1f}%"
        )

    emit("\n\x1b[1mAggregate Impact:\x1b[0m")
    emit(f"  Tokens Avoided:    \x1b[33m~{report.saved_chars() // 4}\x1b[0m")
    emit(
        f"  Credits Saved:     \x1b[32m~${report.estimated_usd_saved():.2f} USD\x1b[0m"
        " (Premium Estimate)"
    )
    emit(f"  Total Efficiency:  \x1b[36m{report.ratio():.1f}%\x1b[0m")
    emit("\n\x1b[2mKeep it clean. Keep it fast. Axiom.\x1b[0m")