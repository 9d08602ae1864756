"""Laboratory-mode reports and the savings footer shown after a run."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from axiom.detective import is_called_by_ai
from axiom.traces import LineTrace, TraceKind

_KEEP = "\x1b[32mKEEP\x1b[0m"
_DROP = "\x1b[31mDROP\x1b[0m"
_ROW_LIMIT = 100
_EDGE_ROWS = 50
_FOOTER_MIN_BYTES = 500

_EVENT_LABELS = {
    TraceKind.DEDUPLICATED: "Dedup",
    TraceKind.TRANSFORMED: "Trans",
    TraceKind.GUARDED: "Guard",
    TraceKind.REDACTED: "Redact",
    TraceKind.BUFFERED: "Buffer",
}


def _shorten(text: str, width: int) -> str:
    if len(text) > width:
        return f"{text[:width - 3]}..."
    return text


def _describe(trace: LineTrace) -> tuple[str, str]:
    """Primary reason and the chain of stage summaries of one trace."""
    primary_reason = "Unknown"
    summary = []
    for event in trace.events:
        if event.kind is TraceKind.ANALYZED:
            primary_reason = event.detail
            summary.append("Analyzed")
        elif event.kind is TraceKind.PLUGIN_TRANSFORMED:
            summary.append(f"Plugin:{event.subject}({event.detail})")
        else:
            summary.append(f"{_EVENT_LABELS[event.kind]}({event.detail})")
    return primary_reason, " -> ".join(summary)


def render_trace_report(traces: Sequence[LineTrace], stream: TextIO | None = None) -> None:
    """Write a table of every traced line and the decisions taken for it."""
    out = stream if stream is not None else sys.stdout

    def emit(text: str = "") -> None:
        out.write(f"{text}\n")

    emit("\n\x1b[1;35m🔬 Axiom Developer Laboratory Report\x1b[0m")
    emit("---------------------------------------\n")

    if not traces:
        emit("No traces captured. Did any output occur?")
        return

    emit(
        f"{'Line':<6} | {'Status':<10} | {'Primary Reason':<25} | "
        f"{'Output Preview':<30} | Events/Stages"
    )
    emit("-" * 120)

    total = len(traces)
    show_all = total <= _ROW_LIMIT
    for index, trace in enumerate(traces):
        if not show_all and _EDGE_ROWS <= index < total - _EDGE_ROWS:
            if index == _EDGE_ROWS:
                emit(f"... [{total - _ROW_LIMIT} lines hidden for brevity] ...")
            continue

        status = _KEEP if trace.final_output is not None else _DROP
        preview = trace.final_output if trace.final_output is not None else "[EMPTY]"
        primary_reason, events = _describe(trace)
        emit(
            f"{trace.line_number:<6} | {status:<10} | "
            f"{_shorten(primary_reason, 25):<25} | {_shorten(preview, 30):<30} | {events}"
        )

    emit(f"\n\x1b[1mSummary:\x1b[0m {total} total lines analyzed.")
    emit("\x1b[2mUse 'axiom last' to see the raw output of these lines.\x1b[0m\n")


def savings_message(raw_bytes: int, saved_bytes: int) -> str:
    """The footer line describing how much output was reduced."""
    if raw_bytes <= 0:
        raise ValueError("raw_bytes must be positive")
    reduction = (raw_bytes - saved_bytes) / raw_bytes * 100.0
    return (
        f"\n\x1b[32m✨ Axiom: {raw_bytes} bytes → {saved_bytes} bytes "
        f"({reduction:.1f}% reduction)\x1b[0m"
    )


def render_session_savings(
    raw_bytes: int, saved_bytes: int, stream: TextIO | None = None
) -> bool:
    """Write the savings footer when the run produced more than 500 bytes.

    Without an explicit stream, agents get it on standard error so that
    standard output stays clean; people get it on standard output.
    Returns whether the footer was written.
    """
    if raw_bytes <= _FOOTER_MIN_BYTES:
        return False
    if stream is None:
        stream = sys.stderr if is_called_by_ai() else sys.stdout
    stream.write(f"{savings_message(raw_bytes, saved_bytes)}\n")
    return True