"""Decode and output errors.

Every error ends the run: the driver reports it and exits non-zero.
Decode errors are ValueErrors (bad input), write failures are OSErrors
(bad output), so callers using b32dec as a library can catch them with
the usual built-in categories.
"""


class Base32Error(ValueError):
    pass


class InvalidData(Base32Error):
    """A character outside the Base32 alphabet."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"invalid base32 character {char!r} at position {position}")


class InvalidSize(Base32Error):
    """A group whose length has no byte mapping (1, 3 or 6 characters)."""

    def __init__(self, size: int):
        self.size = size
        super().__init__(f"invalid base32 group size: {size}")


class WriteFailed(OSError):
    """The output stream rejected or truncated a write."""

    def __init__(self, message: str, requested: int = 0, written: int | None = None):
        self.requested = requested
        self.written = written
        super().__init__(message)
