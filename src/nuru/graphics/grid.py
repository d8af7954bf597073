from typing import List, Optional, Sequence, Tuple

import numpy as np
from PIL import Image as PILImage

from nuru.errors import ImageReleased, PaletteTypeMismatch
from nuru.image.cell import Cell
from nuru.image.types import Image
from nuru.palette.types import ColorIndexTable, EmptyTable, Palette, RgbTable
from nuru.utils.funcutils import flatten

Color = Tuple[int, int, int]

COLOR_FIELDS = ('fg', 'bg')

XTERM_16: Sequence[Color] = (
    (0, 0, 0),
    (205, 0, 0),
    (0, 205, 0),
    (205, 205, 0),
    (0, 0, 238),
    (205, 0, 205),
    (0, 205, 205),
    (229, 229, 229),
    (127, 127, 127),
    (255, 0, 0),
    (0, 255, 0),
    (255, 255, 0),
    (92, 92, 255),
    (255, 0, 255),
    (0, 255, 255),
    (255, 255, 255),
)


def xterm_color(index: int) -> Color:
    if index < 16:
        return XTERM_16[index]
    if index < 232:
        # 6x6x6 color cube
        idx = index - 16
        r, g, b = idx // 36, (idx % 36) // 6, idx % 6
        return tuple(0 if v == 0 else 55 + 40 * v for v in (r, g, b))  # type: ignore
    gray = 8 + (index - 232) * 10
    return gray, gray, gray


XTERM_256: Sequence[Color] = tuple(xterm_color(idx) for idx in range(256))


def color_table(palette: Optional[Palette] = None) -> List[Color]:
    """RGB value of each 8-bit cell color, resolved through an optional palette."""
    if palette is None or isinstance(palette.table, EmptyTable):
        return list(XTERM_256)
    if isinstance(palette.table, RgbTable):
        return [tuple(rgb) for rgb in palette.table.entries]  # type: ignore
    if isinstance(palette.table, ColorIndexTable):
        return [XTERM_256[idx] for idx in palette.table.entries]
    raise PaletteTypeMismatch('color', palette.table.kind)


def to_array(image: Image, field: str = 'glyph') -> np.ndarray:
    """One cell field as a (rows, cols) matrix."""
    if image.cells is None:
        raise ImageReleased()
    if field not in Cell._fields:
        raise ValueError(f'unknown cell field: {field}')
    npp = np.array([getattr(cell, field) for cell in image.cells], dtype=np.uint16)
    return npp.reshape(image.rows, image.cols)


def to_pil_image(
    image: Image, field: str = 'bg', palette: Optional[Palette] = None
) -> PILImage.Image:
    if field not in COLOR_FIELDS:
        raise ValueError(f'expected one of {COLOR_FIELDS} but got {field}')
    npp = to_array(image, field).astype(np.uint8)
    im = PILImage.frombytes('P', (image.cols, image.rows), npp.tobytes())
    im.putpalette(list(flatten(color_table(palette))))
    return im
