"""b32dec: streaming RFC 4648 Base32 decoder.

Input text is regrouped into blocks of 8 symbols and every block is
decoded as soon as it is complete, so arbitrarily large streams decode
in constant memory:

    stdin → iter_groups → decode_group → [to_hex] → SinkWriter → stdout

The codec never exits the process; errors are raised as exceptions and
only ``b32dec.main`` turns them into diagnostics and an exit status.
"""

from b32dec.accumulator import GROUP_SIZE
from b32dec.codec import GROUP_BYTES, decode, decode_group, to_hex
from b32dec.errors import Base32Error, InvalidData, InvalidSize, WriteFailed

__version__ = "0.1.0"

__all__ = [
    "decode", "decode_group", "to_hex", "GROUP_SIZE", "GROUP_BYTES",
    "Base32Error", "InvalidData", "InvalidSize", "WriteFailed",
]
