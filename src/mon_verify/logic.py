import json
from pathlib import Path
from warnings import warn
from mon_core import MonError, Record, parse_all
from mon_core.protocol import TEXT_ENCODING
from .const import DEFAULT_MAX_EXPAND_DEPTH, ERRORS

CANONICAL_JSON_KW = {"sort_keys": True, "separators": (",", ":"), "ensure_ascii": False}

def canonical_json(obj) -> str:
    return json.dumps(obj, **CANONICAL_JSON_KW)

def _fail(errors: list) -> dict:
    return {"status":"FAIL","error_count":len(errors),"errors":errors,"record_count":0}

def verify_buffer(data: bytes) -> dict:
    try:
        records = parse_all(data)
    except MonError as e:
        return _fail([{"code":e.code,"message":ERRORS[e.code],"detail":e.describe()}])
    return {"status":"PASS","error_count":0,"errors":[],"record_count":len(records)}

def verify_file(path: Path) -> dict:
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        return _fail([{"code":"E_INPUT_READ","message":ERRORS["E_INPUT_READ"],"path":str(path),"detail":str(e)}])
    return verify_buffer(data)

def content_view(content: bytes | None):
    """JSON friendly form of record content: text when it decodes, else hex."""
    if content is None:
        return None
    try:
        return content.decode(TEXT_ENCODING)
    except UnicodeDecodeError:
        return {"hex": content.hex()}

def describe_record(rec: Record, expand: frozenset = frozenset(), depth: int = 0) -> dict:
    """Describe a record, re-parsing the content of records named in `expand`.

    Content that does not parse as a sequence, or that sits deeper than
    DEFAULT_MAX_EXPAND_DEPTH levels, is left opaque with a warning.
    """
    out = {"name": rec.name, "length": rec.length}
    if rec.name in expand and rec.content is not None and depth >= DEFAULT_MAX_EXPAND_DEPTH:
        warn(f"Record {rec.name!r} is nested deeper than {DEFAULT_MAX_EXPAND_DEPTH} levels. Leaving it opaque.")
    elif rec.name in expand and rec.content is not None:
        try:
            children = parse_all(rec.content)
        except MonError as e:
            warn(f"Content of record {rec.name!r} is not a mON sequence ({e}). Leaving it opaque.")
        else:
            out["records"] = [describe_record(child, expand, depth + 1) for child in children]
            return out
    out["content"] = content_view(rec.content)
    return out
