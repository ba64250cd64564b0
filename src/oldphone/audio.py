"""Audio feedback for keypad input.

Generates DTMF tones for key presses.
"""

import numpy as np
import sounddevice as sd
from typing import Dict, Optional, Tuple


# (row, column) frequencies in Hz
DTMF_FREQUENCIES: Dict[str, Tuple[int, int]] = {
    "1": (697, 1209),
    "2": (697, 1336),
    "3": (697, 1477),
    "4": (770, 1209),
    "5": (770, 1336),
    "6": (770, 1477),
    "7": (852, 1209),
    "8": (852, 1336),
    "9": (852, 1477),
    "*": (941, 1209),
    "0": (941, 1336),
    "#": (941, 1477),
}


class DTMFAudio:
    """Audio feedback generator for keypad presses."""

    def __init__(
        self,
        duration: float = 0.1,
        sample_rate: int = 44100,
        volume: float = 0.3,
    ):
        """Initialize DTMF audio generator.

        Args:
            duration: Tone duration in seconds (default 0.1s / 100ms)
            sample_rate: Audio sample rate in Hz (default 44100)
            volume: Volume level from 0.0 to 1.0 (default 0.3)
        """
        self.duration = duration
        self.sample_rate = sample_rate
        self.volume = volume

    def generate_tone(self, symbol: str) -> np.ndarray:
        """Generate the dual tone for a keypad symbol.

        Args:
            symbol: Keypad symbol (0-9, * or #)

        Returns:
            NumPy array of audio samples

        Raises:
            ValueError: If the symbol has no DTMF tone
        """
        if symbol not in DTMF_FREQUENCIES:
            raise ValueError(f"No DTMF tone for symbol: {symbol!r}")

        low, high = DTMF_FREQUENCIES[symbol]
        t = np.linspace(0, self.duration, int(self.sample_rate * self.duration), False)

        # Equal-weight sum of both sines, kept within [-1, 1]
        tone = 0.5 * (np.sin(2 * np.pi * low * t) + np.sin(2 * np.pi * high * t))

        # Apply envelope to avoid clicks (5ms rise/fall)
        envelope_samples = int(0.005 * self.sample_rate)
        if len(tone) > envelope_samples * 2:
            tone[:envelope_samples] *= np.linspace(0, 1, envelope_samples)
            tone[-envelope_samples:] *= np.linspace(1, 0, envelope_samples)

        tone *= self.volume

        return tone.astype(np.float32)

    def play(self, symbol: str) -> None:
        """Play the tone for a keypad symbol.

        Symbols without a tone (such as the separator) are silent.

        Args:
            symbol: Keypad symbol
        """
        if symbol not in DTMF_FREQUENCIES:
            return
        sd.play(self.generate_tone(symbol), self.sample_rate)

    def stop(self) -> None:
        """Stop all audio playback."""
        sd.stop()


_audio_instance: Optional[DTMFAudio] = None


def get_audio_instance() -> DTMFAudio:
    """Get or create the global DTMF audio instance.

    Returns:
        Global DTMFAudio instance
    """
    global _audio_instance
    if _audio_instance is None:
        _audio_instance = DTMFAudio()
    return _audio_instance


def play_key(symbol: str) -> None:
    """Play a key tone using the global audio instance.

    Args:
        symbol: Keypad symbol
    """
    get_audio_instance().play(symbol)


def stop_audio() -> None:
    """Stop all audio playback."""
    if _audio_instance is not None:
        _audio_instance.stop()
