#!/usr/bin/env python3
"""b32dec — decode Base32 from stdin to stdout."""

import argparse
import os
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import BinaryIO

from b32dec import __version__
from b32dec.accumulator import iter_groups
from b32dec.codec import decode_group, to_hex
from b32dec.errors import Base32Error, InvalidData, InvalidSize, WriteFailed
from b32dec.sink import SinkWriter

PROG = "b32dec"
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
# Upper bound per read; read1() returns as soon as anything is available.
READ_SIZE = 4096


@dataclass
class DecodeStats:
    groups: int = 0
    decoded_bytes: int = 0
    written_bytes: int = 0


class Driver:
    """Runs groups through decode → [hex] → write until input ends or something fails.

    Once an error has been raised the driver is halted: ``error`` holds
    the exception and ``run`` refuses to continue.
    """

    def __init__(self, out: BinaryIO, hex_output: bool = False):
        self.sink = SinkWriter(out)
        self.hex_output = hex_output
        self.stats = DecodeStats()
        self.error: Exception | None = None

    @property
    def halted(self) -> bool:
        return self.error is not None

    def run(self, pieces: Iterable[str]) -> DecodeStats:
        if self.halted:
            raise RuntimeError("driver halted after an earlier error") from self.error
        try:
            for group in iter_groups(pieces):
                self._process(group)
            self.sink.flush()
        except (Base32Error, OSError) as e:
            self.error = e
            raise
        self.stats.written_bytes = self.sink.bytes_written
        return self.stats

    def _process(self, group: str) -> None:
        data = decode_group(group)
        self.stats.groups += 1
        self.stats.decoded_bytes += len(data)
        self.sink.write(to_hex(data) if self.hex_output else data)
        self.stats.written_bytes = self.sink.bytes_written


def run(pieces: Iterable[str], out: BinaryIO, hex_output: bool = False) -> DecodeStats:
    """Decode all of ``pieces`` into ``out``. The first error propagates."""
    return Driver(out, hex_output).run(pieces)


def _read_pieces(stream: BinaryIO):
    # Latin-1 maps every byte to one character, so stray non-ASCII bytes
    # reach the decoder and fail as invalid data.
    for piece in iter(lambda: stream.read1(READ_SIZE), b""):
        yield piece.decode("latin-1")


def _describe(error: Base32Error | OSError, stats: DecodeStats) -> str:
    group_no = stats.groups + 1
    if isinstance(error, InvalidData):
        return (f"Invalid data value encountered on STDIN "
                f"({error.char!r} at offset {error.position} of group {group_no}).")
    if isinstance(error, InvalidSize):
        return (f"Invalid data size encountered on STDIN "
                f"({error.size} characters in final group).")
    if isinstance(error, WriteFailed):
        return f"Write to STDOUT failed ({error})."
    if isinstance(error, Base32Error):
        return f"Invalid data encountered on STDIN ({error})."
    code = error.errno if error.errno is not None else -1
    text = error.strerror or str(error)
    return f"Unexpected error {code} ({text}) encountered."


def _discard_stdout() -> None:
    """Point fd 1 at devnull so the exit-time flush of unwritten output cannot fail again."""
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, fd)
    finally:
        os.close(devnull)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Decode Base32 (RFC 4648, no padding) from STDIN to STDOUT.",
    )
    parser.add_argument("-x", "--hex-output", action="store_true",
                        help="write decoded data as lowercase hex instead of binary")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true",
                           help="print a summary to STDERR when done")
    verbosity.add_argument("-q", "--quiet", action="store_true",
                           help="suppress error messages (exit status still reports failure)")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    driver = Driver(sys.stdout.buffer, hex_output=args.hex_output)
    try:
        stats = driver.run(_read_pieces(sys.stdin.buffer))
    except (Base32Error, OSError) as e:
        if isinstance(e, WriteFailed):
            _discard_stdout()
        if not args.quiet:
            print(f"{PROG}: {_describe(e, driver.stats)}", file=sys.stderr)
        return EXIT_FAILURE

    if args.verbose:
        print(f"{PROG}: {stats.groups} groups, {stats.decoded_bytes} bytes decoded, "
              f"{stats.written_bytes} bytes written", file=sys.stderr)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
