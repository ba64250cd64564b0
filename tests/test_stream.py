"""Tests for stream module."""

import pytest

pytest.importorskip("oldphone.stream")

from oldphone.stream import KeypadStream
from oldphone.keypad import KeypadEvent
from oldphone.config import KeypadConfig


def feed(stream: KeypadStream, sequence: str) -> list:
    """Feed a key sequence into a stream and collect results."""
    return [stream.process_event(KeypadEvent(symbol, 0.0)) for symbol in sequence]


class TestKeypadStream:
    """Test KeypadStream class."""

    def test_initialization(self):
        """Test keypad stream initialization."""
        stream = KeypadStream()
        assert stream.is_running() is False
        assert stream.config is not None
        assert stream.keypad is not None
        assert stream.decoder is not None

    def test_custom_config(self):
        """Test initialization with custom config."""
        config = KeypadConfig(debounce_time=0.5)
        stream = KeypadStream(config)
        assert stream.keypad.config.debounce_time == 0.5

    def test_decodes_on_terminator(self):
        """Test text is produced only when the terminator arrives."""
        texts = []
        stream = KeypadStream(text_callback=texts.append)
        results = feed(stream, "4433555 555666#")
        assert results[:-1] == [None] * 14
        assert results[-1] == "HELLO"
        assert texts == ["HELLO"]
        assert stream.pending() == ""

    def test_key_callback(self):
        """Test every symbol reaches the key callback."""
        keys = []
        stream = KeypadStream(key_callback=keys.append)
        feed(stream, "22 2#")
        assert keys == ["2", "2", " ", "2", "#"]

    def test_pending(self):
        """Test unterminated presses are kept pending."""
        stream = KeypadStream()
        feed(stream, "227")
        assert stream.pending() == "227"
        feed(stream, "*#")
        assert stream.pending() == ""

    def test_clear(self):
        """Test clearing pending presses."""
        texts = []
        stream = KeypadStream(text_callback=texts.append)
        feed(stream, "999")
        stream.clear()
        feed(stream, "33#")
        assert texts == ["E"]

    def test_sequences_are_independent(self):
        """Test each terminated sequence decodes on its own."""
        texts = []
        stream = KeypadStream(text_callback=texts.append)
        feed(stream, "22#*#2#")
        assert texts == ["B", "", "A"]

    def test_decode_error(self, capsys):
        """Test decode errors are reported and the sequence dropped."""
        texts = []
        config = KeypadConfig(key_map={"2": "ABC"})
        stream = KeypadStream(config, text_callback=texts.append)
        results = feed(stream, "3#")
        assert results[-1] is None
        assert texts == []
        assert stream.pending() == ""
        assert "Error:" in capsys.readouterr().err

    def test_double_stop(self):
        """Test that stopping an idle stream is safe."""
        stream = KeypadStream()
        stream.stop()
        assert stream.is_running() is False
