"""
OLDPHONE - Python decoder for old mobile phone keypad input.

This package converts multi-tap keypad sequences (as typed on pre-smartphone
phones) into text, with an interactive shell, live keyboard input and
optional DTMF key tones.
"""

__version__ = "0.1.0"

from .config import KeypadConfig, DEFAULT_KEY_MAP
from .decoder import (
    KeypadDecoder,
    KeypadError,
    MissingTerminatorError,
    InvalidCharacterError,
    decode,
)
from .encoder import encode

# Live input is optional (requires a display server for pynput)
try:
    from .keypad import KeypadInterface, KeypadEvent
    from .stream import KeypadStream
    _live_available = True
except (ImportError, OSError):
    KeypadInterface = None
    KeypadEvent = None
    KeypadStream = None
    _live_available = False

# Audio module is optional (requires PortAudio)
try:
    from .audio import DTMFAudio
    _audio_available = True
except (ImportError, OSError):
    DTMFAudio = None
    _audio_available = False

__all__ = [
    "KeypadConfig",
    "DEFAULT_KEY_MAP",
    "KeypadDecoder",
    "KeypadError",
    "MissingTerminatorError",
    "InvalidCharacterError",
    "decode",
    "encode",
]

if _live_available:
    __all__.extend(["KeypadInterface", "KeypadEvent", "KeypadStream"])

if _audio_available:
    __all__.append("DTMFAudio")
