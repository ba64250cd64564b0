"""Tests for audio module."""

import numpy as np
import pytest

try:
    from oldphone.audio import DTMFAudio, DTMF_FREQUENCIES
except (ImportError, OSError):
    pytest.skip("audio backend not available", allow_module_level=True)


class TestDTMFAudio:
    """Test DTMFAudio class."""

    def test_frequency_table(self):
        """Test the keypad has a tone pair for every key."""
        assert set(DTMF_FREQUENCIES) == set("0123456789*#")
        assert DTMF_FREQUENCIES["1"] == (697, 1209)
        assert DTMF_FREQUENCIES["0"] == (941, 1336)
        assert DTMF_FREQUENCIES["#"] == (941, 1477)

    def test_tone_length(self):
        """Test tone sample count follows duration and rate."""
        audio = DTMFAudio(duration=0.1, sample_rate=8000)
        tone = audio.generate_tone("5")
        assert tone.dtype == np.float32
        assert len(tone) == 800

    def test_tone_volume(self):
        """Test samples stay within the volume level."""
        audio = DTMFAudio(volume=0.3)
        tone = audio.generate_tone("9")
        assert np.max(np.abs(tone)) <= 0.3 + 1e-6
        assert np.max(np.abs(tone)) > 0.1

    def test_envelope(self):
        """Test the tone starts and ends at silence."""
        tone = DTMFAudio().generate_tone("2")
        assert tone[0] == pytest.approx(0.0, abs=1e-6)
        assert tone[-1] == pytest.approx(0.0, abs=1e-3)

    def test_unknown_symbol(self):
        """Test symbols without a tone are rejected."""
        with pytest.raises(ValueError):
            DTMFAudio().generate_tone(" ")

    def test_play_separator_is_silent(self, monkeypatch):
        """Test playing the separator does not touch the device."""
        calls = []
        monkeypatch.setattr("oldphone.audio.sd.play", lambda *args: calls.append(args))
        DTMFAudio().play(" ")
        assert calls == []
        DTMFAudio().play("3")
        assert len(calls) == 1
