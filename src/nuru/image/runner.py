import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import typer
import yaml

from nuru.errors import NuruError
from nuru.graphics.grid import COLOR_FIELDS, to_pil_image
from nuru.graphics.text import render_text
from nuru.image import decode
from nuru.image.types import Image
from nuru.palette import decode as palette_decode
from nuru.palette.types import Palette

app = typer.Typer()


def describe(image: Image) -> Dict[str, Any]:
    header = image.header
    return {
        'signature': header.signature.decode('ascii'),
        'version': header.version,
        'glyph_mode': header.glyph_mode.name,
        'color_mode': header.color_mode.name,
        'mdata_mode': header.mdata_mode.name,
        'cols': header.cols,
        'rows': header.rows,
        'ch_key': header.ch_key,
        'fg_key': header.fg_key,
        'bg_key': header.bg_key,
        'glyph_palette': image.glyph_palette_name,
        'color_palette': image.color_palette_name,
        'cells': image.num_cells,
        'cell_size': image.cell_size,
    }


def load(
    filename: Path, palette: Optional[Path] = None
) -> Tuple[Image, Optional[Palette]]:
    try:
        image = decode.from_path(str(filename))
        pal = palette_decode.from_path(str(palette)) if palette else None
    except (NuruError, OSError) as exc:
        typer.echo(f'{filename}: {exc}', err=True)
        raise typer.Exit(code=1)
    return image, pal


@app.command()
def info(
    filename: Path = typer.Argument(..., help='Image file to read from'),
) -> None:
    image, _ = load(filename)
    typer.echo(yaml.safe_dump(describe(image), sort_keys=False), nl=False)


@app.command()
def text(
    filename: Path = typer.Argument(..., help='Image file to read from'),
    palette: Optional[Path] = typer.Option(None, '--palette', '-p', help='Glyph palette'),
) -> None:
    image, pal = load(filename, palette)
    try:
        lines = render_text(image, pal)
    except (NuruError, ValueError) as exc:
        typer.echo(f'{filename}: {exc}', err=True)
        raise typer.Exit(code=1)
    for line in lines:
        typer.echo(line)


@app.command()
def preview(
    filename: Path = typer.Argument(..., help='Image file to read from'),
    palette: Optional[Path] = typer.Option(None, '--palette', '-p', help='Color palette'),
    field: str = typer.Option('bg', '--field', '-f', help=f'One of {COLOR_FIELDS}'),
    target_dir: str = typer.Option('out', '--target', '-t', help='Target directory'),
) -> None:
    image, pal = load(filename, palette)
    try:
        im = to_pil_image(image, field, pal)
    except (NuruError, ValueError) as exc:
        typer.echo(f'{filename}: {exc}', err=True)
        raise typer.Exit(code=1)
    os.makedirs(target_dir, exist_ok=True)
    output = os.path.join(target_dir, f'{filename.stem}_{field}.png')
    im.save(output)
    print(f'Saved preview: {output}')
