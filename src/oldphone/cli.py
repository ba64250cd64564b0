"""Command-line interface for OLDPHONE package."""

import sys
import argparse
import signal
import time
from typing import List, Optional, TextIO
from . import __version__
from .config import KeypadConfig
from .decoder import KeypadDecoder
from .encoder import encode


BANNER = """Old Phone Keypad Simulator
=========================

Instructions:
- Keys 2-9: Press multiple times to cycle through letters
- Space: Separator (allows same key sequences)
- *: Backspace (removes last character)
- 0: Adds a space to output
- #: End of input

Examples:
  33# -> E
  227*# -> B
  4433555 555666# -> HELLO
  222 2 22# -> CAB
"""

QUIT_COMMAND = "quit"


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        description="OLDPHONE - Old phone keypad decoder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Decode a key sequence
  oldphone "4433555 555666#"

  # Start the interactive shell
  oldphone

  # Encode text as key presses
  oldphone --encode "hello"

  # Type on the keyboard as a phone keypad, with key tones
  oldphone --live --audio

Keys:
  2-9   letters (press repeatedly to cycle)
  0     space
  *     backspace
  #     end of input
  ' '   separator between letters on the same key
        """,
    )

    parser.add_argument(
        "sequences",
        nargs="*",
        metavar="SEQUENCE",
        help="Key sequence(s) to decode; starts the interactive shell if omitted",
    )

    parser.add_argument(
        "--encode",
        type=str,
        metavar="TEXT",
        help="Encode TEXT as a key sequence instead of decoding",
    )

    parser.add_argument(
        "--live",
        action="store_true",
        help="Read key presses from the keyboard in real time",
    )

    parser.add_argument(
        "--audio",
        action="store_true",
        help="Enable DTMF tones for key presses (live mode)",
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def signal_handler(signum, frame):
    """Handle interrupt signal."""
    print("\n\nStopping OLDPHONE...", file=sys.stderr)
    sys.exit(0)


def run_shell(
    decoder: KeypadDecoder,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """
    Run the interactive read-decode-print loop.

    Args:
        decoder: Decoder used for every line
        stdin: Input stream, defaults to sys.stdin
        stdout: Output stream, defaults to sys.stdout

    Returns:
        Exit status
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    print(BANNER, file=stdout)

    while True:
        print(f"Enter input (or '{QUIT_COMMAND}' to exit): ", end="", file=stdout, flush=True)
        line = stdin.readline()
        if not line:
            # EOF
            print(file=stdout)
            break

        line = line.rstrip("\r\n")
        if not line:
            continue
        if line.lower() == QUIT_COMMAND:
            break

        try:
            output = decoder.decode(line)
            print(f"Output: '{output}'", file=stdout)
        except ValueError as e:
            print(f"Error: {e}", file=stdout)
        except Exception as e:
            print(f"Unexpected error: {e}", file=stdout)
        print(file=stdout)

    print("Thanks for using the Old Phone Keypad Simulator!", file=stdout)
    return 0


def run_live(config: KeypadConfig, audio: bool) -> int:
    """
    Decode key presses typed on the keyboard until interrupted.

    Args:
        config: Keypad configuration
        audio: Play DTMF tones for key presses

    Returns:
        Exit status
    """
    # pynput needs a display server
    from .stream import KeypadStream, print_key, print_text, play_audio_key

    signal.signal(signal.SIGINT, signal_handler)

    print("OLDPHONE live keypad", file=sys.stderr)
    print(f"Audio: {'Enabled' if audio else 'Disabled'}", file=sys.stderr)
    print("", file=sys.stderr)
    print("Ready to receive key presses (Ctrl+C to exit)...", file=sys.stderr)
    print("=" * 50, file=sys.stderr)
    print("", file=sys.stderr)

    def on_key(symbol: str) -> None:
        print_key(symbol)
        if audio:
            play_audio_key(symbol)

    with KeypadStream(config=config, text_callback=print_text, key_callback=on_key) as stream:
        while stream.is_running():
            time.sleep(0.1)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    config = KeypadConfig()
    decoder = KeypadDecoder(config)

    try:
        if args.encode is not None:
            print(encode(args.encode, config))
            return 0

        if args.live:
            return run_live(config, args.audio)

        if not args.sequences:
            return run_shell(decoder)

        status = 0
        for sequence in args.sequences:
            try:
                print(decoder.decode(sequence))
            except ValueError as e:
                print(f"Error: {e}", file=sys.stderr)
                status = 1
        return status

    except KeyboardInterrupt:
        print("\n\nStopping OLDPHONE...", file=sys.stderr)
        return 0
    except Exception as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
