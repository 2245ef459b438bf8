"""mON Compile - build record sequences from command line fields."""
from __future__ import annotations

from pathlib import Path

import click

from mon_core import Record, serialize, serialize_all


def parse_field(field: str) -> Record:
    """Turn `name=value` or `name=@path` into a Record.

    An empty value gives a record without content.
    """
    name, sep, value = field.partition("=")
    if not sep:
        raise ValueError(f"field {field!r} is not of the form name=value")

    rec = Record(name)
    if value.startswith("@"):
        rec.set_content(Path(value[1:]).read_bytes())
    else:
        rec.set_content(value)
    return rec


def compile_records(records: list[Record], container: str | None = None) -> bytes:
    """Encode records back to back, optionally wrapped in one container record."""
    if container is None:
        return serialize_all(records)
    return serialize(Record.container(container, records))


@click.command()
@click.argument("fields", nargs=-1, required=True)
@click.option("--container", default=None, help="Wrap all fields in one record with this name")
@click.option("--out", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Write to a file instead of stdout")
def main(fields: tuple[str, ...], container: str | None, out: Path | None) -> None:
    """Compile FIELDS (name=value or name=@path) into mON records."""
    try:
        records = [parse_field(f) for f in fields]
        data = compile_records(records, container)
    except (ValueError, OSError) as e:
        # Fail closed with a single-line reason.
        click.echo(f"FATAL: {e}")
        raise SystemExit(1)

    if out is None:
        click.echo(data, nl=False)
        return

    out.write_bytes(data)
    click.echo(f"PASS: {len(records)} record(s) written to {out}")


if __name__ == "__main__":
    main()
