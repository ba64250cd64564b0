"""Keypad interface module for handling keyboard input as phone key presses."""

import sys
import time
from typing import Dict, Optional, Union
from queue import Queue, Empty
from pynput import keyboard
from .config import KeypadConfig


# Windows numpad virtual-key codes (VK_NUMPAD0..VK_NUMPAD9, VK_MULTIPLY)
WINDOWS_NUMPAD_VK: Dict[int, str] = {
    **{96 + n: str(n) for n in range(10)},
    106: "*",
}

# Other backends report these codes for ordinary keys (X11 keysyms of a..j)
NUMPAD_VK_TO_SYMBOL: Dict[int, str] = WINDOWS_NUMPAD_VK if sys.platform == "win32" else {}


class KeypadEvent:
    """Represents a single keypad press."""

    def __init__(self, symbol: str, timestamp: float):
        """
        Initialize keypad event.

        Args:
            symbol: Keypad symbol (0-9, *, # or separator)
            timestamp: Event timestamp in seconds
        """
        self.symbol = symbol
        self.timestamp = timestamp

    def __repr__(self) -> str:
        return f"KeypadEvent({self.symbol!r} @ {self.timestamp:.3f}s)"


class KeypadInterface:
    """
    Interface that turns keyboard presses into phone keypad symbols.

    Mapping:
    - Digits (main row or numpad) = the same digit
    - * or Backspace = backspace
    - # or Enter = terminator
    - Space bar = separator
    """

    def __init__(self, config: Optional[KeypadConfig] = None):
        """
        Initialize keypad interface.

        Args:
            config: Configuration object, uses defaults if None
        """
        self.config = config or KeypadConfig()
        self._event_queue: Queue[KeypadEvent] = Queue()
        self._listener: Optional[keyboard.Listener] = None
        self._running = False

        # Debounce state
        self._last_symbol: Optional[str] = None
        self._last_time = 0.0

    def start(self) -> None:
        """Start listening for keypad input."""
        if self._running:
            return

        self._running = True
        self._listener = keyboard.Listener(on_press=self._on_key_press)
        self._listener.start()

    def stop(self) -> None:
        """Stop listening for keypad input."""
        if not self._running:
            return

        self._running = False
        if self._listener:
            self._listener.stop()
            self._listener = None

    def normalize_key(self, key: Union[keyboard.Key, keyboard.KeyCode, None]) -> Optional[str]:
        """
        Convert a pynput key to a keypad symbol.

        Args:
            key: The key that was pressed

        Returns:
            Keypad symbol, or None if the key is not part of the keypad
        """
        if key is None:
            return None

        if key == keyboard.Key.space:
            return self.config.separator
        if key == keyboard.Key.backspace:
            return self.config.backspace_key
        if key == keyboard.Key.enter:
            return self.config.terminator

        char = getattr(key, "char", None)
        if char:
            if char in "0123456789" or char in (self.config.backspace_key, self.config.terminator):
                return char
            return None

        # Numpad keys without a character (Windows, NumLock handling)
        vk = getattr(key, "vk", None)
        if isinstance(vk, int) and vk in NUMPAD_VK_TO_SYMBOL:
            return NUMPAD_VK_TO_SYMBOL[vk]

        return None

    def _on_key_press(self, key: Union[keyboard.Key, keyboard.KeyCode, None]) -> None:
        """
        Handle key press events.

        Args:
            key: The key that was pressed
        """
        if not self._running:
            return

        symbol = self.normalize_key(key)
        if symbol is None:
            return

        current_time = time.time()

        # Debounce
        if (
            symbol == self._last_symbol
            and current_time - self._last_time < self.config.debounce_time
        ):
            return
        self._last_symbol = symbol
        self._last_time = current_time

        self._event_queue.put(KeypadEvent(symbol=symbol, timestamp=current_time))

    def get_event(self, timeout: Optional[float] = None) -> Optional[KeypadEvent]:
        """
        Get the next keypad event from the queue.

        Args:
            timeout: Maximum time to wait in seconds, None for blocking

        Returns:
            KeypadEvent or None if timeout
        """
        try:
            return self._event_queue.get(timeout=timeout)
        except Empty:
            return None

    def is_running(self) -> bool:
        """Check if the interface is running."""
        return self._running

    def __enter__(self) -> "KeypadInterface":
        """Context manager entry."""
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.stop()
