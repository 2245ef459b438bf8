"""mON Core - Minimal Object Notation records, scanner and serializer."""
from .errors import BadStructure, Incomplete, MonError, NoContent, NoStructure
from .record import Record, serialize, serialize_all
from .scanner import Scanner, iter_records, parse_all, parse_one

__all__ = [
    "Record",
    "serialize",
    "serialize_all",
    "Scanner",
    "parse_one",
    "parse_all",
    "iter_records",
    "MonError",
    "Incomplete",
    "NoStructure",
    "BadStructure",
    "NoContent",
]
