#!/usr/bin/env python3
"""
Live decoding example for OLDPHONE package.

Type on the keyboard as if it were a phone keypad; every sequence
ending with '#' (or Enter) is decoded.
"""

import time
from oldphone import KeypadConfig, KeypadStream


def main():
    """Main function."""
    config = KeypadConfig(debounce_time=0.02)

    print("OLDPHONE Live Decode Example")
    print("Keys: 2-9 letters, space separator, 0 space, * backspace, # end")
    print("\nReady to receive key presses (Ctrl+C to exit)...")
    print("=" * 50)
    print()

    def on_key(symbol: str):
        print(symbol, end="", flush=True)

    def on_text(text: str):
        print(f"\n-> {text}")

    with KeypadStream(config=config, text_callback=on_text, key_callback=on_key) as stream:
        try:
            while stream.is_running():
                time.sleep(0.1)
        except KeyboardInterrupt:
            print("\n\nStopping...")

    print("Done!")


if __name__ == "__main__":
    main()
