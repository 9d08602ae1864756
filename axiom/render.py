"""Writing processed lines and summaries to the terminal."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

_HEADER = "\x1b[1;33m[AXIOM]\x1b[0m"


class TtyRenderer:
    """Writes lines to standard output or standard error.

    A broken pipe on the reading side ends the program quietly.
    """

    def __init__(self, stdout: TextIO | None = None, stderr: TextIO | None = None) -> None:
        self._stdout = stdout
        self._stderr = stderr

    def _stream(self, is_stderr: bool) -> TextIO:
        if is_stderr:
            return self._stderr if self._stderr is not None else sys.stderr
        return self._stdout if self._stdout is not None else sys.stdout

    def render_line(self, text: str, is_stderr: bool = False) -> None:
        stream = self._stream(is_stderr)
        try:
            stream.write(f"{text}\n")
            stream.flush()
        except BrokenPipeError:
            sys.exit(0)
        except OSError:
            pass

    def render_summary(self, summaries: Sequence[str], is_stderr: bool = False) -> None:
        if not summaries:
            return
        self.render_line(_HEADER, is_stderr)
        for summary in summaries:
            self.render_line(f"\x1b[33m• {summary}\x1b[0m", is_stderr)