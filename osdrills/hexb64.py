"""Convert a hexadecimal string to standard base64."""

from __future__ import annotations

import base64
import binascii
import sys

DEFAULT_HEX = (
    "49276d206b696c6c696e6720796f757220627261"
    "696e206c696b65206120706f69736f6e6f7573206"
    "d757368726f6f6d"
)


def hex_to_base64(hex_string: str) -> str:
    """Decode ``hex_string`` and return its bytes encoded as padded base64."""
    try:
        raw = binascii.unhexlify(hex_string)
    except (binascii.Error, ValueError) as exc:
        raise ValueError("Failed to decode hex") from exc
    return base64.b64encode(raw).decode("ascii")


def main(argv: list[str] | None = None) -> int:
    """Print the base64 form of the given hex string, or of the built-in one."""
    args = sys.argv[1:] if argv is None else argv
    hex_string = args[0] if args else DEFAULT_HEX
    try:
        print(hex_to_base64(hex_string))
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())