"""Records of the decisions taken for each line in laboratory mode."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class TraceKind(enum.Enum):
    """Pipeline stage that produced a trace event."""

    DEDUPLICATED = "deduplicated"
    TRANSFORMED = "transformed"
    GUARDED = "guarded"
    REDACTED = "redacted"
    ANALYZED = "analyzed"
    BUFFERED = "buffered"
    PLUGIN_TRANSFORMED = "plugin_transformed"


@dataclass(frozen=True)
class TraceEvent:
    """One stage's verdict on a line.

    ``subject`` holds the action for ANALYZED events and the plugin name
    for PLUGIN_TRANSFORMED events; ``detail`` is the reason or result.
    """

    kind: TraceKind
    detail: str
    subject: str | None = None


@dataclass
class LineTrace:
    """The path of one source line through the pipeline."""

    line_number: int
    original: str
    final_output: str | None = None
    events: list[TraceEvent] = field(default_factory=list)