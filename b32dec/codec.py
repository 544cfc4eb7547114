"""RFC 4648 Base32 group decoding.

A group is up to 8 symbols of 5 bits each (40 bits = 5 bytes). Without
padding, a short final group still decodes, as long as its bit count
covers a whole number of bytes with fewer than 5 bits left over:

    chars  bits  bytes  leftover bits
      0      0     0        0
      2     10     1        2
      4     20     2        4
      5     25     3        1
      7     35     4        3
      8     40     5        0

Lengths 1, 3 and 6 can never be produced by an encoder (their leftover
would be a whole symbol), so they are rejected as InvalidSize.

See: RFC 4648, section 6
"""

from b32dec.accumulator import iter_groups
from b32dec.alphabet import value_of
from b32dec.errors import InvalidData, InvalidSize

GROUP_BYTES = {0: 0, 2: 1, 4: 2, 5: 3, 7: 4, 8: 5}


def decode_group(group: str) -> bytes:
    """Decode a single group of 0-8 Base32 characters.

    The length is checked before any character, and characters are
    checked left to right; the first bad one raises and the rest of the
    group is never looked at.
    """
    out_len = GROUP_BYTES.get(len(group))
    if out_len is None:
        raise InvalidSize(len(group))
    if out_len == 0:
        return b""

    # 40 bits at most, so the whole group fits in one int.
    acc = 0
    for i, ch in enumerate(group):
        digit = value_of(ch)
        if digit is None:
            raise InvalidData(ch, i)
        acc = (acc << 5) | digit

    nbits = len(group) * 5
    acc >>= nbits - out_len * 8  # drop the alignment bits
    return acc.to_bytes(out_len, "big")


def decode(text: str) -> bytes:
    """Decode a whole Base32 string, ignoring whitespace."""
    return b"".join(decode_group(g) for g in iter_groups([text]))


def to_hex(data: bytes) -> bytes:
    """Lowercase ASCII hex, two characters per byte."""
    return data.hex().encode("ascii")
