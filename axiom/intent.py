"""The user's intent, used to decide which output lines matter."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class IntentContext:
    """What the user asked for, the command being run and extra keywords."""

    last_message: str = "Automated Session"
    command: str = "unknown"
    keywords: list[str] = field(default_factory=list)

    def is_relevant(self, text: str) -> bool:
        """Return True when ``text`` relates to the user's message."""
        message = self.last_message.lower()
        target = text.lower()

        if any(kw in message and kw in target for kw in self.keywords):
            return True

        return any(
            len(word.encode("utf-8")) > 3 and word in target
            for word in message.split()
        )