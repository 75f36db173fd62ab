import logging

from scaffold.core.diagnostics import format_stack_trace


def test_format_stack_trace_renders_raised_exception():
    try:
        raise ValueError("bad value")
    except ValueError as exc:
        text = format_stack_trace(exc)

    assert text.startswith("Traceback (most recent call last):")
    assert "ValueError: bad value" in text


def test_format_stack_trace_renders_unraised_exception():
    assert format_stack_trace(ValueError("bad value")) == "ValueError: bad value\n"


def test_format_stack_trace_failure_returns_empty_string(monkeypatch, caplog):
    def broken_format_exception(*args, **kwargs):
        raise RuntimeError("formatter broke")

    monkeypatch.setattr("scaffold.core.diagnostics.traceback.format_exception", broken_format_exception)

    with caplog.at_level(logging.ERROR, logger="scaffold.core.diagnostics"):
        text = format_stack_trace(ValueError("bad value"))

    assert text == ""
    assert "Failed to format stack trace for ValueError" in caplog.text
