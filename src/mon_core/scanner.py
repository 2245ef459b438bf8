"""Cursor driven scanning of mON records.

A Scanner owns one buffer and one cursor. Each field scanner consumes its
field, including the trailing delimiter, and leaves the cursor on the first
byte of the next field. Errors are terminal: once a scan method raises, the
Scanner is spent and its cursor is not meaningful.
"""
from __future__ import annotations

from typing import Iterator

from .errors import BadStructure, Incomplete, NoContent, NoStructure
from .protocol import LENGTH_DELIM, NAME_DELIM, TEXT_ENCODING
from .record import Record


def _as_buffer(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode(TEXT_ENCODING)
    return bytes(data)


class Scanner:
    """Single pass reader over a complete in-memory buffer."""

    def __init__(self, data: bytes | bytearray | memoryview | str, pos: int = 0):
        self.data = _as_buffer(data)
        if pos < 0 or pos > len(self.data):
            raise ValueError(f"cursor {pos} outside buffer of {len(self.data)} bytes")
        self.pos = pos

    def at_end(self) -> bool:
        return self.pos == len(self.data)

    def _find(self, delim: bytes) -> int:
        """Offset of the next `delim`, or raise NoStructure and exhaust the buffer."""
        end = self.data.find(delim, self.pos)
        if end == -1:
            self.pos = len(self.data)
            raise NoStructure()
        return end

    def scan_name(self) -> str:
        end = self._find(NAME_DELIM)
        raw = self.data[self.pos:end]

        # '|' as the final byte leaves no room for a length field
        if end + 1 == len(self.data):
            shown = raw.decode(TEXT_ENCODING, errors="replace")
            self.pos = end
            raise Incomplete(f"No more data after name ({shown}) field at position {end}.")

        if not raw:
            raise BadStructure(f"Empty name field at position {self.pos}.")
        try:
            name = raw.decode(TEXT_ENCODING)
        except UnicodeDecodeError:
            raise BadStructure(f"Name field at position {self.pos} is not valid {TEXT_ENCODING}: {raw!r}") from None
        if LENGTH_DELIM in raw:
            raise BadStructure(f"Name field contains '~': {name}")

        self.pos = end + 1
        return name

    def scan_length(self, name: str) -> int:
        end = self._find(LENGTH_DELIM)
        raw = self.data[self.pos:end]

        # bytes.isdigit() is ASCII only: no sign, no whitespace, no underscores
        if not raw.isdigit():
            text = raw.decode(TEXT_ENCODING, errors="replace")
            raise BadStructure(f"Could not parse the length field. Contains: {text}")
        try:
            length = int(raw.decode("ascii"))
        except ValueError:
            # digit runs past the interpreter's int conversion limit
            raise BadStructure(f"Could not parse the length field. Contains: {raw.decode('ascii')}") from None

        self.pos = end + 1
        # '~' may end the buffer only for a record without content
        if self.at_end() and length != 0:
            raise Incomplete(f"No more data after length (name: {name}) field at position {end}.")
        return length

    def scan_content(self, name: str, length: int) -> bytes:
        """Copy exactly `length` bytes. Delimiters inside content are not interpreted."""
        if length == 0:
            raise NoContent()

        available = len(self.data) - self.pos
        if available < length:
            self.pos = len(self.data)
            raise Incomplete(f"The object (name: {name}) is incomplete. Bytes missing = {length - available} .")

        chunk = self.data[self.pos:self.pos + length]
        self.pos += length
        return chunk

    def scan_record(self) -> Record:
        """Scan name, length and (for non-zero length) content of one record."""
        name = self.scan_name()
        length = self.scan_length(name)

        rec = Record(name)
        if length != 0:
            rec.set_content(self.scan_content(name, length))
        return rec


def parse_one(data: bytes | bytearray | memoryview | str, offset: int = 0) -> Record:
    """Parse the record starting at `offset`. Bytes after it are not examined.

    Raises:
        MonError: if the record is malformed or truncated.
    """
    return Scanner(data, offset).scan_record()


def iter_records(data: bytes | bytearray | memoryview | str) -> Iterator[tuple[int, Record]]:
    """Yield `(offset, record)` for each record of a sequence, in order.

    Records already yielded stay valid if a later record fails to parse.
    """
    scanner = Scanner(data)
    while not scanner.at_end():
        start = scanner.pos
        yield start, scanner.scan_record()


def parse_all(data: bytes | bytearray | memoryview | str) -> list[Record]:
    """Parse a whole buffer as a back-to-back sequence of records.

    Nested records are not decoded; call parse_all again on a record's
    content to do so. An empty buffer is an empty sequence.

    Raises:
        MonError: on the first malformed record. No partial result is returned.
    """
    return [rec for _, rec in iter_records(data)]
