"""Real-time streaming module for keypad decoding."""

import sys
import threading
from typing import Callable, List, Optional
from .keypad import KeypadInterface, KeypadEvent
from .decoder import KeypadDecoder, KeypadError
from .config import KeypadConfig

# Try to import audio module, but make it optional
try:
    from .audio import play_key
    _AUDIO_AVAILABLE = True
except (ImportError, OSError):
    _AUDIO_AVAILABLE = False
    play_key = None


class KeypadStream:
    """
    Real-time stream of decoded keypad text.

    Key presses are collected until the terminator arrives, then the
    complete sequence is decoded and handed to the text callback.
    """

    def __init__(
        self,
        config: Optional[KeypadConfig] = None,
        text_callback: Optional[Callable[[str], None]] = None,
        key_callback: Optional[Callable[[str], None]] = None,
    ):
        """
        Initialize keypad stream.

        Args:
            config: Configuration object, uses defaults if None
            text_callback: Optional callback for each decoded sequence
            key_callback: Optional callback for each keypad symbol
        """
        self.config = config or KeypadConfig()
        self.keypad = KeypadInterface(self.config)
        self.decoder = KeypadDecoder(self.config)
        self.text_callback = text_callback
        self.key_callback = key_callback
        self._pending: List[str] = []
        self._lock = threading.Lock()
        self._running = False
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        """Start the keypad stream."""
        if self._running:
            return

        self._running = True
        self.keypad.start()
        self._thread = threading.Thread(target=self._process_loop, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop the keypad stream."""
        if not self._running:
            return

        self._running = False
        self.keypad.stop()
        if self._thread:
            self._thread.join(timeout=1.0)
            self._thread = None

    def _process_loop(self) -> None:
        """Main processing loop."""
        while self._running:
            event = self.keypad.get_event(timeout=0.1)
            if event is None:
                continue
            self.process_event(event)

    def process_event(self, event: KeypadEvent) -> Optional[str]:
        """
        Process a keypad event and return decoded text if a sequence ended.

        Args:
            event: Keypad event to process

        Returns:
            Decoded text when the event is the terminator, None otherwise
        """
        if self.key_callback:
            self.key_callback(event.symbol)

        with self._lock:
            self._pending.append(event.symbol)
            if event.symbol != self.config.terminator:
                return None
            sequence = "".join(self._pending)
            self._pending = []

        try:
            text = self.decoder.decode(sequence)
        except KeypadError as e:
            print(f"\nError: {e}", file=sys.stderr)
            return None

        if self.text_callback:
            self.text_callback(text)
        return text

    def pending(self) -> str:
        """
        Get the key presses typed since the last terminator.

        Returns:
            Pending key sequence
        """
        with self._lock:
            return "".join(self._pending)

    def clear(self) -> None:
        """Discard the pending key presses."""
        with self._lock:
            self._pending = []

    def is_running(self) -> bool:
        """Check if the stream is running."""
        return self._running

    def __enter__(self) -> "KeypadStream":
        """Context manager entry."""
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.stop()


def print_key(symbol: str) -> None:
    """
    Print a keypad symbol as it is pressed.

    Args:
        symbol: Keypad symbol to print
    """
    print(symbol, end="", flush=True)


def print_text(text: str) -> None:
    """
    Print a decoded sequence.

    Args:
        text: Decoded text to print
    """
    print(f"\nOutput: '{text}'", flush=True)


def play_audio_key(symbol: str) -> None:
    """
    Play the DTMF tone for a keypad symbol.

    Args:
        symbol: Keypad symbol to play
    """
    if _AUDIO_AVAILABLE and play_key is not None:
        play_key(symbol)
