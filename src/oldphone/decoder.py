"""Keypad decoder module for converting multi-tap key presses to text."""

from typing import List, Optional
from .config import KeypadConfig


class KeypadError(ValueError):
    """Base class for key sequence decoding failures."""


class MissingTerminatorError(KeypadError):
    """Raised when a non-empty key sequence does not end with the terminator."""

    def __init__(self, terminator: str = "#"):
        super().__init__(f"Input must end with '{terminator}'")
        self.terminator = terminator


class InvalidCharacterError(KeypadError):
    """Raised when a key sequence contains a character outside the keypad."""

    def __init__(self, character: str, position: int):
        super().__init__(f"Invalid character {character!r} at position {position}")
        self.character = character
        self.position = position


class KeyRun:
    """Represents consecutive presses of one key, not yet resolved to a letter."""

    def __init__(self, key: str, count: int = 1):
        """
        Initialize key run.

        Args:
            key: The key being pressed
            count: Number of presses so far
        """
        self.key = key
        self.count = count

    def resolve(self, letters: str) -> str:
        """
        Resolve the run to a letter.

        Presses cycle through the letters and wrap after the last one.

        Args:
            letters: Ordered letters mapped to the key

        Returns:
            The selected letter
        """
        return letters[(self.count - 1) % len(letters)]

    def __repr__(self) -> str:
        return f"KeyRun({self.key!r} x{self.count})"


class _DecodeSession:
    """Run and output buffer for a single decode pass."""

    def __init__(self, config: KeypadConfig):
        self.config = config
        self.run: Optional[KeyRun] = None
        self.output: List[str] = []

    def press(self, key: str) -> None:
        if self.run is not None and self.run.key == key:
            self.run.count += 1
        else:
            self.commit()
            self.run = KeyRun(key)

    def commit(self) -> None:
        if self.run is None:
            return
        self.output.append(self.run.resolve(self.config.letters_for(self.run.key)))
        self.run = None

    def space(self) -> None:
        self.commit()
        self.output.append(" ")

    def backspace(self) -> None:
        # An open run is cancelled; committed text is only touched when idle
        if self.run is not None:
            self.run = None
        elif self.output:
            self.output.pop()

    def text(self) -> str:
        return "".join(self.output)


class KeypadDecoder:
    """
    Decodes old phone keypad sequences into text.

    Keys 2-9 cycle through their letters on repeated presses, a space
    separates two letters on the same key, 0 types a space, * is backspace
    and # ends the sequence.
    """

    def __init__(self, config: Optional[KeypadConfig] = None):
        """
        Initialize keypad decoder.

        Args:
            config: Configuration object, uses defaults if None
        """
        self.config = config or KeypadConfig()

    def decode(self, sequence: Optional[str]) -> str:
        """
        Decode a complete key sequence.

        Args:
            sequence: Key presses ending with the terminator

        Returns:
            Decoded text, empty for empty or None input

        Raises:
            MissingTerminatorError: If non-empty input lacks the terminator
            InvalidCharacterError: If a character is not a keypad symbol
        """
        if not sequence:
            return ""

        config = self.config
        if not sequence.endswith(config.terminator):
            raise MissingTerminatorError(config.terminator)

        session = _DecodeSession(config)
        for position, symbol in enumerate(sequence):
            if symbol == config.terminator:
                break
            elif config.is_letter_key(symbol):
                session.press(symbol)
            elif symbol == config.separator:
                session.commit()
            elif symbol == config.space_key:
                session.space()
            elif symbol == config.backspace_key:
                session.backspace()
            else:
                raise InvalidCharacterError(symbol, position)

        session.commit()
        return session.text()


def decode(sequence: Optional[str], config: Optional[KeypadConfig] = None) -> str:
    """
    Decode a key sequence with the given or default layout.

    Args:
        sequence: Key presses ending with '#'
        config: Configuration object, uses defaults if None

    Returns:
        Decoded text
    """
    return KeypadDecoder(config).decode(sequence)
