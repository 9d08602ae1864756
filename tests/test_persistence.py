import pytest

from axiom.analytics import TokenSavings
from axiom.errors import DatabaseError
from axiom.persistence import PersistenceManager


@pytest.fixture
def db(tmp_path):
    manager = PersistenceManager(tmp_path / "axiom.db")
    yield manager
    manager.close()


def test_defaults(db):
    assert db.get_global_enabled() is True
    assert db.get_bypass_count() == 0


def test_global_enabled_round_trip(db):
    db.set_global_enabled(False)
    assert db.get_global_enabled() is False
    db.set_global_enabled(True)
    assert db.get_global_enabled() is True


def test_settings_persist_across_connections(tmp_path):
    path = tmp_path / "state.db"
    with PersistenceManager(path) as first:
        first.set_global_enabled(False)
        first.set_bypass_count(3)
    with PersistenceManager(path) as second:
        assert second.get_global_enabled() is False
        assert second.get_bypass_count() == 3


def test_decrement_bypass_count(db):
    db.set_bypass_count(2)
    assert db.decrement_bypass_count() == 1
    assert db.decrement_bypass_count() == 0
    assert db.decrement_bypass_count() == 0
    assert db.get_bypass_count() == 0


def test_negative_bypass_count_rejected(db):
    with pytest.raises(ValueError):
        db.set_bypass_count(-1)


def test_session_intelligence(db):
    assert db.get_session_intelligence("shell-1") is None
    db.set_session_intelligence("shell-1", "fuzzy")
    db.set_session_intelligence("shell-1", "neural")
    db.set_session_intelligence("shell-2", "off")
    assert db.get_session_intelligence("shell-1") == "neural"
    assert db.get_session_intelligence("shell-2") == "off"


def test_templates_upsert_delete_clear(db):
    db.upsert_template("File <*> saved", 2)
    db.upsert_template("File <*> saved", 7)
    db.upsert_template("Compiling <*>", 4)
    assert sorted(db.get_known_templates()) == [("Compiling <*>", 4), ("File <*> saved", 7)]

    db.delete_template("Compiling <*>")
    assert db.get_known_templates() == [("File <*> saved", 7)]

    db.clear_templates()
    assert db.get_known_templates() == []


def test_total_savings_empty(db):
    assert db.get_total_savings() == (0, 0)


def test_log_and_total_savings(db):
    db.log_saving("git status", 1000, 200)
    db.record_savings(TokenSavings.create("cargo check", 2000, 100))
    assert db.get_total_savings() == (1000 + 2000, 200 + 100)


def test_recent_history_newest_first_and_limited(db):
    db.log_saving("first", 10, 5)
    db.log_saving("second", 20, 6)
    db.log_saving("third", 30, 7)
    assert db.get_recent_history(2) == [("third", 30, 7), ("second", 20, 6)]
    assert len(db.get_recent_history(10000)) == 3


def test_closed_connection_raises_database_error(tmp_path):
    manager = PersistenceManager(tmp_path / "closed.db")
    manager.close()
    with pytest.raises(DatabaseError):
        manager.get_global_enabled()


def test_unopenable_path_raises_database_error(tmp_path):
    with pytest.raises(DatabaseError):
        PersistenceManager(tmp_path / "missing" / "dir" / "axiom.db")