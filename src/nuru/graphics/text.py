from typing import Iterator, List, Optional

from nuru.errors import ImageReleased
from nuru.image.cell import SPACE
from nuru.image.header import GlyphMode
from nuru.image.types import Image
from nuru.palette.decode import get_glyph
from nuru.palette.types import Palette
from nuru.utils.funcutils import chunked


def resolve_glyphs(image: Image, glyphs: Optional[Palette] = None) -> Iterator[int]:
    if image.cells is None:
        raise ImageReleased()
    indexed = image.header.glyph_mode == GlyphMode.PALETTE
    if indexed and glyphs is None:
        raise ValueError('palette glyph mode requires a glyph palette')
    for cell in image.cells:
        yield get_glyph(glyphs, cell.glyph) if indexed else cell.glyph


def printable(code: int) -> str:
    char = chr(code)
    return char if char.isprintable() else chr(SPACE)


def render_text(image: Image, glyphs: Optional[Palette] = None) -> List[str]:
    """Glyph plane as text, one string per row."""
    chars = (printable(code) for code in resolve_glyphs(image, glyphs))
    return [''.join(row) for row in chunked(chars, image.cols)]
