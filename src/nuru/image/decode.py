import io
from contextlib import contextmanager
from typing import IO, Iterator, List, Optional

from nuru.errors import CellReadError, ImageReleased, OutOfMemory, ShortRead
from nuru.image.cell import Cell, CellLayout, cell_layout
from nuru.image.header import read_header
from nuru.image.types import Image
from nuru.kernel.helpers import check_version
from nuru.kernel.stream import read_exact
from nuru.settings import DEFAULT_SETTINGS, DecodeSettings


@contextmanager
def allocate_cells(cfg: DecodeSettings, ncells: int) -> Iterator[List[Cell]]:
    """Provide a cell buffer of `ncells` slots, emptied if decoding fails."""
    if cfg.max_cells is not None and ncells > cfg.max_cells:
        raise OutOfMemory(ncells, cfg.max_cells)
    try:
        cells: List[Cell] = [None] * ncells  # type: ignore
    except MemoryError as exc:
        raise OutOfMemory(ncells) from exc
    try:
        yield cells
    except Exception:
        cells.clear()
        raise


def read_payload(stream: IO[bytes], layout: CellLayout, ncells: int) -> bytes:
    """Read all cell records at once, naming the first incomplete one on failure."""
    try:
        return read_exact(stream, layout.size * ncells)
    except ShortRead as exc:
        index, offset = divmod(exc.given, layout.size)
        raise CellReadError(index, layout.field_at(offset)) from exc


def decode_image(stream: IO[bytes], cfg: DecodeSettings = DEFAULT_SETTINGS) -> Image:
    header = read_header(stream)
    check_version(cfg, 'image', header.version)
    layout = cell_layout(header)
    cfg.logger.debug(
        f'image {header.cols}x{header.rows} glyph={header.glyph_mode.name} '
        f'color={header.color_mode.name} metadata={header.mdata_mode.name} '
        f'({layout.size} bytes per cell)'
    )
    with allocate_cells(cfg, header.num_cells) as cells:
        payload = read_payload(stream, layout, header.num_cells)
        for idx, cell in enumerate(layout.unpack(payload, header.num_cells)):
            cells[idx] = cell
    return Image(header, cells)


def release(image: Image) -> None:
    if image.cells is None:
        raise ImageReleased()
    image.cells = None


def get_cell(image: Image, col: int, row: int) -> Optional[Cell]:
    """Cell at (col, row), None when the position falls outside the grid."""
    if image.cells is None:
        raise ImageReleased()
    if not (0 <= col < image.cols and 0 <= row < image.rows):
        return None
    return image.cells[row * image.cols + col]


def from_bytes(data: bytes, cfg: DecodeSettings = DEFAULT_SETTINGS) -> Image:
    with io.BytesIO(data) as stream:
        return decode_image(stream, cfg)


def from_path(path: str, cfg: DecodeSettings = DEFAULT_SETTINGS) -> Image:
    with open(path, 'rb') as stream:
        return decode_image(stream, cfg)
