"""Exception hierarchy for the package."""

from __future__ import annotations


class AxiomError(Exception):
    """Base class of every error raised by the package."""

    prefix = "Unknown error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"


class DatabaseError(AxiomError):
    """A persistence operation failed."""

    prefix = "Database error"


class SchemaError(AxiomError):
    """A tool schema could not be parsed or compiled."""

    prefix = "Schema parsing error"


class ConfigError(AxiomError):
    """The configuration is invalid."""

    prefix = "Configuration error"