"""Tool schemas: per-command rules deciding what happens to output lines."""

from __future__ import annotations

import enum
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from axiom.errors import SchemaError


class Action(enum.Enum):
    """What to do with a line that a rule matches."""

    KEEP = "keep"
    COLLAPSE = "collapse"
    REDACT = "redact"
    HIDDEN = "hidden"
    SYNTHESIZE = "synthesize"


@dataclass
class TransformationRule:
    """A pattern with the action to take and its priority."""

    name: str
    pattern: str
    action: Action
    priority: int
    _compiled: re.Pattern[str] | None = field(
        default=None, init=False, repr=False, compare=False
    )


@dataclass
class ToolSchema:
    """Rules for the commands that ``command_pattern`` matches."""

    name: str
    command_pattern: str
    rules: list[TransformationRule] = field(default_factory=list)
    _compiled_command: re.Pattern[str] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    @classmethod
    def from_dict(cls, data: Any) -> ToolSchema:
        """Build a schema from parsed YAML or JSON data."""
        if not isinstance(data, Mapping):
            raise SchemaError("schema must be a mapping")
        raw_rules = _require(data, "rules", list)
        return cls(
            name=_require(data, "name", str),
            command_pattern=_require(data, "command_pattern", str),
            rules=[_rule_from_dict(rule) for rule in raw_rules],
        )

    def compile(self) -> None:
        """Compile every regular expression, raising SchemaError on a bad one."""
        try:
            self._compiled_command = re.compile(self.command_pattern)
            for rule in self.rules:
                rule._compiled = re.compile(rule.pattern)
        except re.error as exc:
            raise SchemaError(str(exc)) from exc

    def matches(self, command: str) -> bool:
        return self._compiled_command is not None and bool(
            self._compiled_command.search(command)
        )

    def apply_rules(self, line: str) -> Action | None:
        """Action of the highest-priority matching rule; the last one wins ties."""
        best: TransformationRule | None = None
        for rule in self.rules:
            if rule._compiled is None or not rule._compiled.search(line):
                continue
            if best is None or rule.priority >= best.priority:
                best = rule
        return best.action if best is not None else None


def _require(data: Mapping, key: str, kind: type) -> Any:
    if key not in data:
        raise SchemaError(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise SchemaError(f"field `{key}` must be of type {kind.__name__}")
    return value


def _rule_from_dict(data: Any) -> TransformationRule:
    if not isinstance(data, Mapping):
        raise SchemaError("rule must be a mapping")
    action_name = _require(data, "action", str)
    try:
        action = Action(action_name)
    except ValueError as exc:
        raise SchemaError(f"unknown action `{action_name}`") from exc
    return TransformationRule(
        name=_require(data, "name", str),
        pattern=_require(data, "pattern", str),
        action=action,
        priority=_require(data, "priority", int),
    )


def load_schemas(directory: str | Path) -> list[ToolSchema]:
    """Load and compile every ``*.yaml`` schema in ``directory``.

    Unreadable or malformed files are skipped; a schema with an invalid
    regular expression raises SchemaError.
    """
    root = Path(directory)
    if not root.is_dir():
        return []
    schemas = []
    for path in sorted(root.iterdir()):
        if path.suffix != ".yaml" or not path.is_file():
            continue
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
            schema = ToolSchema.from_dict(data)
        except (OSError, UnicodeDecodeError, yaml.YAMLError, SchemaError):
            continue
        schema.compile()
        schemas.append(schema)
    return schemas