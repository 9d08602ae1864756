from axiom.events import EventKind, StreamPipeline, TerminalEvent


def static(text):
    return TerminalEvent(EventKind.STATIC_LINE, text)


def progress(text):
    return TerminalEvent(EventKind.PROGRESS_UPDATE, text)


def test_lines_are_split():
    pipeline = StreamPipeline()
    assert pipeline.process(b"one\ntwo\n") == [static("one"), static("two")]


def test_partial_lines_are_buffered_across_chunks():
    pipeline = StreamPipeline()
    assert pipeline.process(b"ab") == []
    assert pipeline.process(b"c\n") == [static("abc")]


def test_ansi_codes_are_stripped():
    pipeline = StreamPipeline()
    assert pipeline.process(b"\x1b[31mred\x1b[0m\n") == [static("red")]


def test_carriage_return_emits_progress():
    pipeline = StreamPipeline()
    assert pipeline.process(b"50%\r100%\n") == [progress("50%"), static("100%")]


def test_repeated_carriage_returns_emit_once():
    pipeline = StreamPipeline()
    assert pipeline.process(b"x\r\r") == [progress("x")]


def test_empty_line_is_emitted():
    pipeline = StreamPipeline()
    assert pipeline.process(b"\n") == [static("")]


def test_empty_chunk_produces_nothing():
    pipeline = StreamPipeline()
    pipeline.process(b"pending")
    assert pipeline.process(b"") == []


def test_invalid_utf8_is_replaced():
    pipeline = StreamPipeline()
    events = pipeline.process(b"a\xffb\n")
    assert events == [static("a\ufffdb")]