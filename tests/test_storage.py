import pytest

from axiom.storage import LogManager, default_log_path


@pytest.fixture
def manager(tmp_path):
    return LogManager(tmp_path / "logs" / "last_run.log")


def test_log_filtering(manager):
    manager.append_line("Error: disk full")
    manager.append_line("Success: operation ok")
    manager.append_line("Error: connection lost")

    errors = manager.get_last_logs(None, "error")
    assert len(errors) == 2
    assert "disk full" in errors[0]

    last_one = manager.get_last_logs(1, None)
    assert len(last_one) == 1
    assert "connection lost" in last_one[0]

    filtered = manager.get_last_logs(1, "error")
    assert len(filtered) == 1
    assert "connection lost" in filtered[0]


def test_missing_log_raises(manager):
    with pytest.raises(FileNotFoundError):
        manager.get_last_logs()


def test_reset_log_clears(manager):
    manager.append_line("one")
    assert manager.total_bytes() > 0
    manager.reset_log()
    assert manager.total_bytes() == 0
    with pytest.raises(FileNotFoundError):
        manager.get_last_logs()


def test_reset_without_log_is_quiet(manager):
    manager.reset_log()
    assert manager.total_bytes() == 0


def test_total_bytes_counts_lines(manager):
    manager.append_line("abc")
    manager.append_line("de")
    assert manager.total_bytes() == len("abc\n") + len("de\n")


def test_tail_larger_than_log_and_zero(manager):
    manager.append_line("a")
    manager.append_line("b")
    assert manager.get_last_logs(10) == ["a", "b"]
    assert manager.get_last_logs(0) == []


def test_empty_lines_preserved(manager):
    manager.append_line("")
    manager.append_line("x")
    assert manager.get_last_logs() == ["", "x"]


def test_default_log_path_uses_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert default_log_path() == tmp_path / ".axiom" / "logs" / "last_run.log"
    assert LogManager().path == tmp_path / ".axiom" / "logs" / "last_run.log"


def test_default_log_path_without_home(monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    assert str(default_log_path()) == "/tmp/.axiom/logs/last_run.log"