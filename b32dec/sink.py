"""Checked writes to the output stream.

Raw binary streams may accept only part of a write and report the
count; buffered ones raise. Either way a write that did not go through
completely is a WriteFailed, and nothing is retried.
"""

from typing import BinaryIO

from b32dec.errors import WriteFailed


class SinkWriter:
    def __init__(self, stream: BinaryIO):
        self.stream = stream
        self.bytes_written = 0

    def write(self, data: bytes) -> None:
        if not data:
            return
        try:
            n = self.stream.write(data)
        except OSError as e:
            raise WriteFailed(f"write failed: {e}", len(data)) from e
        # Some streams return None instead of a count; they either write
        # everything or raise.
        if n is not None and n != len(data):
            raise WriteFailed(f"short write: {n} of {len(data)} bytes", len(data), n)
        self.bytes_written += len(data)

    def flush(self) -> None:
        try:
            self.stream.flush()
        except OSError as e:
            raise WriteFailed(f"flush failed: {e}") from e
