"""Tests for the line-based decode source and console feedback."""

import io
import queue

import pytest

from stockroom.application.ports import DecodeConfig, StatusLevel
from stockroom.domain.exceptions import CapabilityUnavailableError
from stockroom.infrastructure.scanning.console_feedback import ConsoleFeedback
from stockroom.infrastructure.scanning.line_decode_source import LineDecodeSource


def _drain(channel: queue.Queue) -> list:
    items = []
    while True:
        item = channel.get(timeout=2)
        items.append(item)
        if item is None:
            return items


class _FeedStream:
    """A text stream whose lines arrive only when the test feeds them."""

    closed = False

    def __init__(self) -> None:
        self._lines: queue.Queue = queue.Queue()

    def feed(self, line: str) -> None:
        self._lines.put(line)

    def end(self) -> None:
        self._lines.put(None)

    def __iter__(self):
        while True:
            line = self._lines.get()
            if line is None:
                return
            yield line


class TestLineDecodeSource:

    def test_each_line_is_a_payload(self):
        channel: queue.Queue = queue.Queue()
        LineDecodeSource(io.StringIO("SKU-1\n\n  SKU-2  \n")).start(DecodeConfig(), channel)
        assert _drain(channel) == ["SKU-1", "SKU-2", None]

    def test_closed_stream_unavailable(self):
        stream = io.StringIO("")
        stream.close()
        with pytest.raises(CapabilityUnavailableError):
            LineDecodeSource(stream).start(DecodeConfig(), queue.Queue())

    def test_restart_reuses_reader_and_moves_to_new_channel(self):
        stream = _FeedStream()
        source = LineDecodeSource(stream)
        first: queue.Queue = queue.Queue()
        second: queue.Queue = queue.Queue()

        source.start(DecodeConfig(), first)
        reader = source._thread
        source.stop()
        source.start(DecodeConfig(), second)
        assert source._thread is reader

        stream.feed("SKU-3\n")
        stream.end()
        assert _drain(second) == ["SKU-3", None]
        assert first.empty()

    def test_lines_after_stop_are_dropped(self):
        stream = _FeedStream()
        source = LineDecodeSource(stream)
        channel: queue.Queue = queue.Queue()

        source.start(DecodeConfig(), channel)
        stream.feed("SKU-1\n")
        assert channel.get(timeout=2) == "SKU-1"
        source.stop()
        stream.feed("SKU-2\n")
        stream.end()
        source._thread.join(timeout=2)

        assert channel.empty()
        with pytest.raises(CapabilityUnavailableError, match="has ended"):
            source.start(DecodeConfig(), queue.Queue())


class TestConsoleFeedback:

    def test_status_printed(self, capsys):
        ConsoleFeedback(sound=False).status("Ready to scan...", StatusLevel.READY)
        assert "Ready to scan..." in capsys.readouterr().out

    def test_errors_go_to_stderr(self, capsys):
        ConsoleFeedback(sound=False).status("SKU not found: X", StatusLevel.ERROR)
        assert "SKU not found: X" in capsys.readouterr().err

    def test_bells(self, capsys):
        feedback = ConsoleFeedback()
        feedback.success()
        feedback.failure()
        assert capsys.readouterr().out == "\a\a\a"

    def test_silent_mode(self, capsys):
        feedback = ConsoleFeedback(sound=False)
        feedback.success()
        feedback.failure()
        assert capsys.readouterr().out == ""
