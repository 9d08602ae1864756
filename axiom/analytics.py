"""Token savings records."""

from __future__ import annotations

import time
from dataclasses import dataclass


@dataclass
class TokenSavings:
    """Bytes before and after processing one command, with a Unix timestamp."""

    raw_bytes: int = 0
    processed_bytes: int = 0
    command: str = ""
    timestamp: int = 0

    @classmethod
    def create(cls, command: str, raw_bytes: int, processed_bytes: int) -> TokenSavings:
        """A record stamped with the current time."""
        return cls(
            raw_bytes=raw_bytes,
            processed_bytes=processed_bytes,
            command=command,
            timestamp=int(time.time()),
        )

    def savings_percentage(self) -> float:
        if self.raw_bytes == 0:
            return 0.0
        return 100.0 * (1.0 - self.processed_bytes / self.raw_bytes)