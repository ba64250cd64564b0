"""Configuration module for OLDPHONE package."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


# Standard ITU E.161 letter assignment
DEFAULT_KEY_MAP: Mapping[str, str] = MappingProxyType(
    {
        "2": "ABC",
        "3": "DEF",
        "4": "GHI",
        "5": "JKL",
        "6": "MNO",
        "7": "PQRS",
        "8": "TUV",
        "9": "WXYZ",
    }
)


@dataclass(frozen=True)
class KeypadConfig:
    """Configuration for the keypad decoder and live keypad input."""

    # Letter keys
    key_map: Mapping[str, str] = field(default_factory=lambda: DEFAULT_KEY_MAP)

    # Structural operators
    separator: str = " "  # Splits runs of the same key
    space_key: str = "0"  # Appends a literal space
    backspace_key: str = "*"
    terminator: str = "#"

    # Live input
    debounce_time: float = 0.02  # 20ms debounce

    def __post_init__(self) -> None:
        operators = self.operators
        for symbol in operators:
            if len(symbol) != 1:
                raise ValueError(f"Operator symbol must be a single character: {symbol!r}")
        if len(set(operators)) != len(operators):
            raise ValueError(f"Operator symbols must be distinct: {operators!r}")

        for key, letters in self.key_map.items():
            if len(key) != 1:
                raise ValueError(f"Key must be a single character: {key!r}")
            if key in operators:
                raise ValueError(f"Key {key!r} collides with an operator symbol")
            if not letters:
                raise ValueError(f"Key {key!r} has no letters")

        # Read-only copy of the layout
        object.__setattr__(self, "key_map", MappingProxyType(dict(self.key_map)))

    @property
    def operators(self) -> tuple:
        """Get the structural operator symbols."""
        return (self.separator, self.space_key, self.backspace_key, self.terminator)

    def is_letter_key(self, symbol: str) -> bool:
        """Check if symbol is a key with a letter mapping."""
        return symbol in self.key_map

    def letters_for(self, key: str) -> str:
        """
        Get the ordered letters produced by a key.

        Args:
            key: Keypad digit

        Returns:
            Letters in press order

        Raises:
            KeyError: If the key has no letter mapping
        """
        return self.key_map[key]

    def key_for(self, letter: str) -> Optional[tuple]:
        """
        Find the key and press count that produce a letter.

        Args:
            letter: Letter to look up (case-insensitive)

        Returns:
            Tuple of (key, presses) or None if no key produces the letter
        """
        if len(letter) != 1:
            return None

        for key, letters in self.key_map.items():
            index = letters.upper().find(letter.upper())
            if index >= 0:
                return (key, index + 1)
        return None
