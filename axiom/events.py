"""Terminal events and the filter that turns raw output into them."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_ANSI = re.compile(
    r"[\x1b\x9b][\[()#;?]*(?:[0-9]{1,4}(?:;[0-9]{0,4})*)?[0-9A-ORZcf-nqry=><]"
)


class EventKind(enum.Enum):
    STATIC_LINE = "static_line"
    PROGRESS_UPDATE = "progress_update"
    STREAM_END = "stream_end"


@dataclass(frozen=True)
class TerminalEvent:
    """A complete line, a transient progress update, or the end of a stream."""

    kind: EventKind
    text: str = ""


class StreamPipeline:
    """Strips ANSI codes and splits output into line and progress events."""

    def __init__(self) -> None:
        self._buffer: list[str] = []

    def process(self, chunk: bytes) -> list[TerminalEvent]:
        text = _ANSI.sub("", chunk.decode("utf-8", errors="replace"))
        events = []
        for char in text:
            if char == "\n":
                events.append(TerminalEvent(EventKind.STATIC_LINE, "".join(self._buffer)))
                self._buffer.clear()
            elif char == "\r":
                if self._buffer:
                    events.append(
                        TerminalEvent(EventKind.PROGRESS_UPDATE, "".join(self._buffer))
                    )
                    self._buffer.clear()
            else:
                self._buffer.append(char)
        return events