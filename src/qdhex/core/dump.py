"""Hex dump rendering.

Two shapes are produced:

* formatted dumps, one line per 16-byte row::

      00002000  41 42 43 7f                                      ABC.

  address (8 lowercase hex digits, widened when the address needs more),
  two spaces, 16 hex slots, two spaces, then the printable-ASCII column;

* bare dumps, hex pairs separated by single spaces (``"00 01 02"``).

Everything here is pure; the ``write_*`` variants only append to the
buffer handed in by the caller.
"""
from __future__ import annotations

import operator
from typing import Iterable, Union

BYTES_PER_ROW = 16
ADDRESS_DIGITS = 8

ByteSource = Union[bytes, bytearray, memoryview, Iterable[int]]

_EMPTY_SLOT = "  "


def _as_bytes(data: ByteSource) -> bytes:
    if isinstance(data, int):
        # bytes(n) would silently build n zero bytes
        raise TypeError(f"expected a byte sequence, got int {data!r}")
    return bytes(data)


def _check_address(base_address: int) -> int:
    addr = operator.index(base_address)
    if addr < 0:
        raise ValueError(f"base address must be non-negative, got {addr}")
    return addr


def _ascii(b: int) -> str:
    return chr(b) if 0x20 <= b <= 0x7E else "."


def _format_row(address: int, row: bytes) -> str:
    slots = []
    for i in range(BYTES_PER_ROW):
        slots.append(f"{row[i]:02x}" if i < len(row) else _EMPTY_SLOT)
    hexpart = " ".join(slots)
    asciipart = "".join(_ascii(b) for b in row)
    return f"{address:0{ADDRESS_DIGITS}x}  {hexpart}  {asciipart}"


def formatted_dump_string(base_address: int, data: ByteSource) -> str:
    """Render ``data`` as address / hex / ASCII rows.

    Row ``i`` is printed at ``base_address + 16 * i``. Addresses wider than
    eight hex digits are printed in full rather than truncated. The result
    has no trailing newline and is empty for empty input.
    """
    addr = _check_address(base_address)
    raw = _as_bytes(data)
    lines = []
    for off in range(0, len(raw), BYTES_PER_ROW):
        lines.append(_format_row(addr + off, raw[off : off + BYTES_PER_ROW]))
    return "\n".join(lines)


def formatted_dump(base_address: int, data: ByteSource) -> bytes:
    return formatted_dump_string(base_address, data).encode("ascii")


def write_formatted_dump(base_address: int, data: ByteSource, target: bytearray) -> None:
    """Append the formatted dump to ``target``; existing content is kept."""
    target.extend(formatted_dump(base_address, data))


def bare_dump_string(data: ByteSource) -> str:
    return " ".join(f"{b:02x}" for b in _as_bytes(data))


def bare_dump(data: ByteSource) -> bytes:
    return bare_dump_string(data).encode("ascii")


def write_bare_dump(data: ByteSource, target: bytearray) -> None:
    target.extend(bare_dump(data))
