"""RFC 4648 Base32 alphabet.

    A B C D E F G H I J K  L  M  N  O  P  Q  R  S  T  U  V  W  X  Y  Z  2  3  4  5  6  7
    0 1 2 3 4 5 6 7 8 9 10 11 12 13 14 15 16 17 18 19 20 21 22 23 24 25 26 27 28 29 30 31

Uppercase only: lowercase letters are not folded, and the padding
character '=' is not part of the alphabet.

See: RFC 4648, section 6, table 3
"""

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
_DECODE_MAP = {c: i for i, c in enumerate(ALPHABET)}


def value_of(ch: str) -> int | None:
    """5-bit symbol value of ``ch``, or None if it is not a Base32 character."""
    return _DECODE_MAP.get(ch)


def char_of(value: int) -> str:
    if not 0 <= value < len(ALPHABET):
        raise ValueError(f"base32 symbol value out of range: {value}")
    return ALPHABET[value]
