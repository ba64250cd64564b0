"""Encoder module for converting text into keypad sequences."""

from typing import List, Optional
from .config import KeypadConfig


def encode(text: str, config: Optional[KeypadConfig] = None) -> str:
    """
    Encode text as a terminated multi-tap key sequence.

    Consecutive letters on the same key are split with the separator
    so that the sequence decodes back to the same letters.

    Args:
        text: Letters and spaces to encode (case-insensitive)
        config: Configuration object, uses defaults if None

    Returns:
        Key sequence ending with the terminator

    Raises:
        ValueError: If a character cannot be typed on the keypad
    """
    config = config or KeypadConfig()
    parts: List[str] = []
    last_key: Optional[str] = None

    for char in text:
        if char == " ":
            parts.append(config.space_key)
            last_key = None
            continue

        found = config.key_for(char)
        if found is None:
            raise ValueError(f"Cannot encode character: {char!r}")

        key, presses = found
        if key == last_key:
            parts.append(config.separator)
        parts.append(key * presses)
        last_key = key

    parts.append(config.terminator)
    return "".join(parts)
