"""Redaction of secrets and personal data from terminal output."""

from __future__ import annotations

import re
import string
from collections.abc import Callable, Iterable
from dataclasses import dataclass

EntropyFunction = Callable[[str], float]

_SECRET_PATTERNS = [
    re.compile(r"AKIA[0-9A-Z]{16}"),
    re.compile(r"gh[pousr]_[A-Za-z0-9_]{36,255}"),
    re.compile(r"eyJ[a-zA-Z0-9_-]+\.[a-zA-Z0-9_-]+\.[a-zA-Z0-9_-]+"),
    re.compile(r"\bsk-ant-api03-[a-zA-Z0-9_-]{20,}\b"),
    re.compile(r"\bgsk_[a-zA-Z0-9]{32,}\b"),
    re.compile(r"\b(?:sk|pk)_(?:test|live)_[0-9a-zA-Z]{10,}\b"),
    re.compile(r"\bya29\.[a-zA-Z0-9_-]{20,}\b"),
    re.compile(r"\bsk-proj-[a-zA-Z0-9_-]{20,}\b"),
    re.compile(r"\bsk-[a-zA-Z0-9]{48}\b"),
]

_WORD = re.compile(r"[a-zA-Z0-9_-]+")
_HEX_DIGITS = frozenset(string.hexdigits)

_DEFAULT_THRESHOLD = 4.5
_DEFAULT_PII = [
    r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}",
    r"\b\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}\b",
]

SECRET_MARK = "[REDACTED_SECRET]"
PII_MARK = "[REDACTED_PII]"


def _compile_lenient(patterns: Iterable[str]) -> list[re.Pattern[str]]:
    compiled = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error:
            continue
    return compiled


class PrivacyRedactor:
    """Replaces known credentials, PII and high-entropy words with markers.

    ``entropy`` scores a word; when it is None the entropy stage is skipped.
    """

    def __init__(
        self,
        entropy_threshold: float,
        pii_patterns: Iterable[str] = (),
        entropy: EntropyFunction | None = None,
    ) -> None:
        self.entropy_threshold = entropy_threshold
        self.pii_patterns = _compile_lenient(pii_patterns)
        self.entropy = entropy

    @classmethod
    def with_defaults(cls, entropy: EntropyFunction | None = None) -> PrivacyRedactor:
        """A redactor with the standard threshold and e-mail/IP patterns."""
        return cls(_DEFAULT_THRESHOLD, _DEFAULT_PII, entropy)

    def redact(self, text: str) -> str:
        output = text
        for pattern in _SECRET_PATTERNS:
            output = pattern.sub(SECRET_MARK, output)
        for pattern in self.pii_patterns:
            output = pattern.sub(PII_MARK, output)
        if self.entropy is None:
            return output
        return _WORD.sub(self._redact_word, output)

    def _redact_word(self, match: re.Match[str]) -> str:
        word = match.group(0)
        # Git SHAs (40) and container ids (64) are noisy but harmless.
        is_hex_hash = len(word) in (40, 64) and all(c in _HEX_DIGITS for c in word)
        if (
            not is_hex_hash
            and len(word) > 15
            and not word.startswith("REDACTED")
            and self.entropy(word) > self.entropy_threshold
        ):
            return SECRET_MARK
        return word


@dataclass
class EnterpriseRedactor:
    """Context-aware redaction hook.

    Without a ``fallback`` redactor the text is left unchanged; with one, the
    basic redaction of that redactor is applied.
    """

    fallback: PrivacyRedactor | None = None

    def contextual_redact(self, text: str) -> str:
        if self.fallback is None:
            return text
        return self.fallback.redact(text)