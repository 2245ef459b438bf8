"""mON records and their canonical encoding.

A record is rendered as:
    <name>|<length>~<content>

Example:
    greeting|13~Hello, world!

`length` counts encoded bytes. A record without content has length 0 and
renders as `<name>|0~`.
"""
from __future__ import annotations

from typing import Iterable

from .protocol import LENGTH_DELIM, NAME_DELIM, TEXT_ENCODING


def _as_bytes(value: str | bytes) -> bytes:
    if isinstance(value, str):
        return value.encode(TEXT_ENCODING)
    return bytes(value)


def check_name(name: str) -> str:
    """Validate a record name.

    Raises:
        ValueError: if the name is empty or contains a delimiter.
    """
    if not isinstance(name, str):
        raise ValueError(f"record name must be str, got {type(name).__name__}")
    if not name:
        raise ValueError("record name must not be empty")
    bad = [c for c in name if c.encode(TEXT_ENCODING) in (NAME_DELIM, LENGTH_DELIM)]
    if bad:
        raise ValueError(f"record name {name!r} contains reserved delimiter {bad[0]!r}")
    return name


class Record:
    """One tagged value: name, content length and optional content."""

    __slots__ = ("_name", "_content")

    def __init__(self, name: str):
        self._name = check_name(name)
        self._content: bytes | None = None

    @classmethod
    def with_content(cls, name: str, content: str | bytes) -> "Record":
        rec = cls(name)
        rec.set_content(content)
        return rec

    @classmethod
    def container(cls, name: str, children: Iterable["Record"]) -> "Record":
        """Build a record whose content is the encoding of `children`."""
        return cls.with_content(name, serialize_all(children))

    @property
    def name(self) -> str:
        return self._name

    @property
    def length(self) -> int:
        return 0 if self._content is None else len(self._content)

    @property
    def content(self) -> bytes | None:
        return self._content

    @property
    def text(self) -> str | None:
        """Content decoded as text, or None when there is no content."""
        if self._content is None:
            return None
        return self._content.decode(TEXT_ENCODING)

    def set_content(self, content: str | bytes) -> None:
        """Attach content. Empty content leaves the record without content."""
        data = _as_bytes(content)
        self._content = data if data else None

    def clear_content(self) -> None:
        self._content = None

    def to_bytes(self) -> bytes:
        return serialize(self)

    def as_string(self) -> str:
        return serialize(self).decode(TEXT_ENCODING)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return self._name == other._name and self._content == other._content

    def __repr__(self) -> str:
        return f"Record(name={self._name!r}, length={self.length}, content={self._content!r})"


def serialize(r: Record) -> bytes:
    """Render a Record to its canonical encoding."""
    out = bytearray(r.name.encode(TEXT_ENCODING))
    out += NAME_DELIM
    out += str(r.length).encode("ascii")
    out += LENGTH_DELIM
    if r.content is not None:
        out += r.content
    return bytes(out)


def serialize_all(records: Iterable[Record]) -> bytes:
    """Concatenate the encodings of many records into one sequence."""
    return b"".join(serialize(r) for r in records)
