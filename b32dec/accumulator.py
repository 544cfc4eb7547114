"""Regroup a character stream into Base32 groups.

Whitespace is dropped wherever it appears, so groups freely span line
breaks: "NBSW\nY3DP" is the single group "NBSWY3DP".
"""

from collections.abc import Iterable, Iterator

# C isspace() in the "C" locale
WHITESPACE = frozenset(" \t\n\r\v\f")
GROUP_SIZE = 8


class GroupBuffer:
    """Fixed-capacity character buffer for one group."""

    def __init__(self, capacity: int = GROUP_SIZE):
        self.capacity = capacity
        self._chars: list[str] = []

    def __len__(self) -> int:
        return len(self._chars)

    @property
    def full(self) -> bool:
        return len(self._chars) >= self.capacity

    def append(self, ch: str) -> None:
        if self.full:
            raise OverflowError(f"group buffer full ({self.capacity} characters)")
        self._chars.append(ch)

    def take(self) -> str:
        """Return the buffered characters and empty the buffer."""
        group = "".join(self._chars)
        self._chars.clear()
        return group


def iter_groups(pieces: Iterable[str], size: int = GROUP_SIZE) -> Iterator[str]:
    """Yield groups of ``size`` non-whitespace characters, in input order.

    ``pieces`` can be lines, single characters or any other split of the
    input. A group is yielded as soon as it is full; the remainder (if
    any) is yielded once when the input runs out.
    """
    buf = GroupBuffer(size)
    for piece in pieces:
        for ch in piece:
            if ch in WHITESPACE:
                continue
            buf.append(ch)
            if buf.full:
                yield buf.take()
    if len(buf):
        yield buf.take()
