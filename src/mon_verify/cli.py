from pathlib import Path
import click
from mon_core import MonError, iter_records
from .logic import canonical_json, describe_record, verify_file

@click.group()
def main():
    pass

@main.command("check")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def check_cmd(path: Path):
    """Check that a file is exactly a sequence of mON records."""
    result = verify_file(path)
    click.echo(canonical_json(result))
    if result["status"] != "PASS":
        raise SystemExit(1)

@main.command("decode")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--expand", "expand", multiple=True, help="Decode content of records with this name as a nested sequence")
def decode_cmd(path: Path, expand: tuple[str, ...]):
    """Print one JSON line per top-level record."""
    data = path.read_bytes()
    names = frozenset(expand)
    lines = []
    try:
        for offset, rec in iter_records(data):
            view = describe_record(rec, names)
            view["offset"] = offset
            lines.append(canonical_json(view))
    except MonError as e:
        # Fail closed: nothing is printed for a buffer that does not fully parse.
        click.echo(f"FATAL: {e}", err=True)
        raise SystemExit(1)
    for line in lines:
        click.echo(line)

if __name__ == "__main__":
    main()
