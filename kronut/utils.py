"""Hex dump helpers."""

import sys
from collections.abc import Iterator
from typing import IO, Optional

_CHUNK = 8


def hex_lines(data: bytes) -> Iterator[str]:
    """Yield hex dump lines of eight bytes each: offset, hex bytes, printable text."""
    for offset in range(0, len(data), _CHUNK):
        chunk = data[offset:offset + _CHUNK]
        hexes = "".join(f" {b:02x}" for b in chunk)
        printable = "".join(chr(b) if 32 <= b < 127 else "." for b in chunk)
        yield f"{offset:08x}   {hexes:<{_CHUNK * 3}} {printable}"


def dump_hex(data: Optional[bytes], msg: str, file: Optional[IO[str]] = None) -> None:
    """Write `msg` followed by a hex dump of `data` to `file` (stdout by default)."""
    out = sys.stdout if file is None else file
    print(msg, file=out)
    if data is None:
        print("<null>", file=out)
        return
    if len(data) == 0:
        print("<empty>", file=out)
        return
    for line in hex_lines(data):
        print(line, file=out)