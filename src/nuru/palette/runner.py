from pathlib import Path
from typing import Any, Dict

import typer
import yaml

from nuru.errors import NuruError
from nuru.palette import decode
from nuru.palette.types import Palette

app = typer.Typer()


def describe(palette: Palette, entries: bool = False) -> Dict[str, Any]:
    header = palette.header
    ptype = header.palette_type
    info: Dict[str, Any] = {
        'signature': header.signature.decode('ascii'),
        'version': header.version,
        'type': ptype.name if ptype is not None else header.type,
        'ch_key': header.ch_key,
        'fg_key': header.fg_key,
        'bg_key': header.bg_key,
        'userdata': header.userdata.hex(),
        'entries': len(palette.table),
    }
    if entries:
        info['entries'] = [
            list(entry) if isinstance(entry, tuple) else entry
            for entry in palette.table.entries
        ]
    return info


@app.command()
def info(
    filename: Path = typer.Argument(..., help='Palette file to read from'),
    entries: bool = typer.Option(False, '--entries', help='Dump all entries'),
) -> None:
    try:
        palette = decode.from_path(str(filename))
    except (NuruError, OSError) as exc:
        typer.echo(f'{filename}: {exc}', err=True)
        raise typer.Exit(code=1)
    typer.echo(yaml.safe_dump(describe(palette, entries), sort_keys=False), nl=False)
