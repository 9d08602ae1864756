"""SQLite-backed storage of settings, learned templates and savings."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from axiom.analytics import TokenSavings
from axiom.errors import DatabaseError

_SCHEMA = """
PRAGMA journal_mode = WAL;
PRAGMA synchronous = NORMAL;
PRAGMA temp_store = MEMORY;
PRAGMA cache_size = -2000;
CREATE TABLE IF NOT EXISTS learned_templates (
    id INTEGER PRIMARY KEY,
    template TEXT UNIQUE,
    frequency INTEGER DEFAULT 0,
    last_seen DATETIME DEFAULT CURRENT_TIMESTAMP
);
CREATE TABLE IF NOT EXISTS savings_log (
    id INTEGER PRIMARY KEY,
    command TEXT,
    original_size INTEGER,
    compressed_size INTEGER,
    timestamp DATETIME DEFAULT CURRENT_TIMESTAMP
);
CREATE TABLE IF NOT EXISTS session_settings (
    session_id TEXT PRIMARY KEY,
    intelligence_mode TEXT,
    last_updated DATETIME DEFAULT CURRENT_TIMESTAMP
);
CREATE TABLE IF NOT EXISTS global_settings (
    key TEXT PRIMARY KEY,
    value TEXT,
    last_updated DATETIME DEFAULT CURRENT_TIMESTAMP
);
INSERT OR IGNORE INTO global_settings (key, value) VALUES ('enabled', 'true');
INSERT OR IGNORE INTO global_settings (key, value) VALUES ('bypass_count', '0');
"""

_SET_GLOBAL = """
INSERT INTO global_settings (key, value) VALUES (?, ?)
ON CONFLICT(key) DO UPDATE SET value = excluded.value, last_updated = CURRENT_TIMESTAMP
"""


@contextmanager
def _db_errors() -> Iterator[None]:
    try:
        yield
    except sqlite3.Error as exc:
        raise DatabaseError(str(exc)) from exc


class PersistenceManager:
    """Opens (and creates if needed) the database at ``db_path``."""

    def __init__(self, db_path: str | Path = "axiom.db") -> None:
        with _db_errors():
            self._conn = sqlite3.connect(str(db_path), isolation_level=None)
            self._conn.executescript(_SCHEMA)

    def __enter__(self) -> PersistenceManager:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._conn.close()

    def _execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        with _db_errors():
            return self._conn.execute(sql, params)

    def _global_value(self, key: str) -> str | None:
        row = self._execute(
            "SELECT value FROM global_settings WHERE key = ?", (key,)
        ).fetchone()
        return None if row is None else row[0]

    def get_global_enabled(self) -> bool:
        value = self._global_value("enabled")
        return True if value is None else value == "true"

    def set_global_enabled(self, enabled: bool) -> None:
        self._execute(_SET_GLOBAL, ("enabled", "true" if enabled else "false"))

    def get_bypass_count(self) -> int:
        value = self._global_value("bypass_count")
        if value is None:
            return 0
        try:
            count = int(value)
        except ValueError:
            return 0
        return count if count >= 0 else 0

    def set_bypass_count(self, count: int) -> None:
        if count < 0:
            raise ValueError("bypass count cannot be negative")
        self._execute(_SET_GLOBAL, ("bypass_count", str(count)))

    def decrement_bypass_count(self) -> int:
        """Lower the bypass count by one, never below zero; return the new value."""
        current = self.get_bypass_count()
        if current == 0:
            return 0
        self.set_bypass_count(current - 1)
        return current - 1

    def set_session_intelligence(self, session_id: str, mode: str) -> None:
        self._execute(
            """
            INSERT INTO session_settings (session_id, intelligence_mode) VALUES (?, ?)
            ON CONFLICT(session_id) DO UPDATE SET
                intelligence_mode = excluded.intelligence_mode,
                last_updated = CURRENT_TIMESTAMP
            """,
            (session_id, mode),
        )

    def get_session_intelligence(self, session_id: str) -> str | None:
        row = self._execute(
            "SELECT intelligence_mode FROM session_settings WHERE session_id = ?",
            (session_id,),
        ).fetchone()
        return None if row is None else row[0]

    def delete_template(self, template: str) -> None:
        self._execute("DELETE FROM learned_templates WHERE template = ?", (template,))

    def clear_templates(self) -> None:
        self._execute("DELETE FROM learned_templates")

    def upsert_template(self, template: str, frequency: int) -> None:
        self._execute(
            """
            INSERT INTO learned_templates (template, frequency) VALUES (?, ?)
            ON CONFLICT(template) DO UPDATE SET
                frequency = excluded.frequency,
                last_seen = CURRENT_TIMESTAMP
            """,
            (template, frequency),
        )

    def get_known_templates(self) -> list[tuple[str, int]]:
        rows = self._execute(
            "SELECT template, frequency FROM learned_templates"
        ).fetchall()
        return [(template, int(freq)) for template, freq in rows]

    def log_saving(self, command: str, original: int, compressed: int) -> None:
        self._execute(
            "INSERT INTO savings_log (command, original_size, compressed_size) "
            "VALUES (?, ?, ?)",
            (command, original, compressed),
        )

    def record_savings(self, savings: TokenSavings) -> None:
        self.log_saving(savings.command, savings.raw_bytes, savings.processed_bytes)

    def get_total_savings(self) -> tuple[int, int]:
        """Total (original, compressed) sizes over every logged command."""
        row = self._execute(
            "SELECT SUM(original_size), SUM(compressed_size) FROM savings_log"
        ).fetchone()
        if row is None:
            return (0, 0)
        original, compressed = row
        return (int(original or 0), int(compressed or 0))

    def get_recent_history(self, limit: int) -> list[tuple[str, int, int]]:
        """The last ``limit`` logged commands, newest first."""
        rows = self._execute(
            "SELECT command, original_size, compressed_size FROM savings_log "
            "ORDER BY id DESC LIMIT ?",
            (limit,),
        ).fetchall()
        return [(command, int(orig), int(comp)) for command, orig, comp in rows]