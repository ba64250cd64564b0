#!/usr/bin/env python3
"""
Basic usage example for OLDPHONE package.

This example decodes a few key sequences and shows how failures
are reported.
"""

from oldphone import KeypadDecoder, KeypadConfig, KeypadError, encode


def main():
    """Main function."""
    decoder = KeypadDecoder()

    for sequence in ["33#", "227*#", "4433555 555666#", "8 88777444666*664#", "22"]:
        try:
            print(f"{sequence!r:24} -> {decoder.decode(sequence)!r}")
        except KeypadError as e:
            print(f"{sequence!r:24} -> Error: {e}")

    # Round trip through the encoder
    sequence = encode("old phone")
    print(f"\nencode('old phone') = {sequence!r}")
    print(f"decoded back        = {decoder.decode(sequence)!r}")

    # Alternate layout
    config = KeypadConfig(key_map={"2": "01", "3": "+-"})
    print(f"\nCustom layout: {KeypadDecoder(config).decode('2 22 3#')!r}")


if __name__ == "__main__":
    main()
