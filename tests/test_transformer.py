from axiom.intent import IntentContext
from axiom.transformer import looks_like_table, should_guard, to_markdown


def test_table_line_detected():
    assert looks_like_table("NAME  READY  STATUS") is True


def test_short_line_is_not_table():
    assert looks_like_table("a  b  c") is False


def test_two_columns_is_not_table():
    assert looks_like_table("first column  second column") is False


def test_to_markdown_row():
    assert to_markdown("NAME   READY   STATUS") == "| NAME | READY | STATUS |"


def test_to_markdown_single_word_unchanged():
    assert to_markdown("  lonely ") == "  lonely "


def test_to_markdown_preserves_cells():
    row = to_markdown("a b c d")
    assert row.startswith("| ") and row.endswith(" |")
    assert row.strip("| ").split(" | ") == ["a", "b", "c", "d"]


def test_guard_after_hundred_lines_of_cat():
    ctx = IntentContext()
    assert should_guard("cat big.txt", 101, ctx) is True
    assert should_guard("cat big.txt", 100, ctx) is False


def test_guard_only_for_cat():
    assert should_guard("ls -la", 500, IntentContext()) is False


def test_guard_disabled_when_user_wants_full_file():
    ctx = IntentContext(last_message="show me the full file")
    assert should_guard("cat big.txt", 500, ctx) is False