import logging

import pytest

from graphopt.trace import Trace, emit


def test_lines_and_str() -> None:
    trace = Trace()

    trace.write("first")
    trace.section("step")
    trace.write("a\nb")

    assert trace.lines == ["first", "--- step ---", "a", "b"]
    assert len(trace) == 4
    assert str(trace) == "first\n--- step ---\na\nb\n"


def test_empty_trace() -> None:
    assert str(Trace()) == ""


def test_emit_without_trace_is_noop() -> None:
    emit(None, "ignored")


def test_lines_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    trace = Trace(logging.getLogger("graphopt.test"))

    with caplog.at_level(logging.DEBUG, logger="graphopt.test"):
        emit(trace, "hello")

    assert caplog.messages == ["hello"]
