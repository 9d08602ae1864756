from axiom.intent import IntentContext


def test_default_context():
    ctx = IntentContext()
    assert ctx.last_message == "Automated Session"
    assert ctx.command == "unknown"
    assert ctx.keywords == []


def test_keyword_in_message_and_text_is_relevant():
    ctx = IntentContext(last_message="fix the deploy", keywords=["deploy"])
    assert ctx.is_relevant("Deploy finished") is True


def test_keyword_missing_from_message_is_not_enough():
    ctx = IntentContext(last_message="hi", keywords=["deploy"])
    assert ctx.is_relevant("deploy finished") is False


def test_long_message_word_makes_text_relevant():
    ctx = IntentContext(last_message="Show ERRORS please")
    assert ctx.is_relevant("3 errors found") is True


def test_short_words_are_ignored():
    ctx = IntentContext(last_message="the cat")
    assert ctx.is_relevant("the cat sat") is False


def test_unrelated_text_is_not_relevant():
    ctx = IntentContext(last_message="compile the project")
    assert ctx.is_relevant("network timeout") is False


def test_keywords_are_not_lowercased():
    ctx = IntentContext(last_message="Deploy", keywords=["Deploy"])
    assert ctx.is_relevant("Deploy") is True  # via the message word path
    ctx_short = IntentContext(last_message="ABC", keywords=["ABC"])
    assert ctx_short.is_relevant("ABC") is False