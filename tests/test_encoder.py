"""Tests for encoder module."""

import pytest
from oldphone.encoder import encode
from oldphone.decoder import decode
from oldphone.config import KeypadConfig


class TestEncode:
    """Test encode function."""

    def test_single_letters(self):
        """Test encoding single letters."""
        assert encode("A") == "2#"
        assert encode("S") == "7777#"

    def test_same_key_letters_separated(self):
        """Test letters on the same key get a separator."""
        assert encode("CAB") == "222 2 22#"

    def test_word(self):
        """Test encoding a word."""
        assert encode("hello") == "4433555 555666#"

    def test_space(self):
        """Test spaces map to the space key."""
        assert encode("A A") == "202#"

    def test_empty(self):
        """Test empty text encodes to the terminator alone."""
        assert encode("") == "#"

    def test_unknown_character(self):
        """Test characters without a key are rejected."""
        with pytest.raises(ValueError, match="'!'"):
            encode("HI!")

    def test_decodes_back(self):
        """Test encoded text decodes to the upper-cased input."""
        text = "the quick brown fox jumps over the lazy dog"
        assert decode(encode(text)) == text.upper()

    def test_custom_config(self):
        """Test encoding with alternate operators."""
        config = KeypadConfig(separator="-", terminator=".")
        assert encode("CAB", config) == "222-2-22."
