import numpy as np
import pytest

from nuru.errors import ImageReleased, PaletteTypeMismatch
from nuru.graphics.grid import XTERM_256, color_table, to_array, to_pil_image, xterm_color
from nuru.graphics.text import render_text
from nuru.image import decode
from nuru.image.header import ColorMode, GlyphMode
from nuru.palette import decode as palette_decode
from nuru.palette.header import PaletteType


@pytest.fixture
def colored(make_image):
    # 3x2 grid, ascii glyphs with 8-bit fg/bg
    cells = b''.join(bytes([ord('a') + idx, idx, 10 + idx]) for idx in range(6))
    return decode.from_bytes(
        make_image(cells, GlyphMode.ASCII, ColorMode.COLOR_8BIT, cols=3, rows=2)
    )


def test_xterm_table():
    assert len(XTERM_256) == 256
    assert xterm_color(1) == (205, 0, 0)
    assert xterm_color(16) == (0, 0, 0)
    assert xterm_color(231) == (255, 255, 255)
    assert xterm_color(232) == (8, 8, 8)
    assert xterm_color(255) == (238, 238, 238)


def test_to_array(colored):
    glyphs = to_array(colored, 'glyph')
    assert glyphs.shape == (2, 3)
    assert glyphs[1, 0] == ord('d')
    np.testing.assert_array_equal(to_array(colored, 'bg'), [[10, 11, 12], [13, 14, 15]])


def test_to_array_unknown_field(colored):
    with pytest.raises(ValueError):
        to_array(colored, 'alpha')


def test_to_array_released(colored):
    decode.release(colored)
    with pytest.raises(ImageReleased):
        to_array(colored)


def test_color_table_from_palettes(make_palette):
    rgb = palette_decode.from_bytes(
        make_palette(bytes(range(256)) * 3, PaletteType.COLOR_RGB)
    )
    assert color_table(rgb)[1] == (3, 4, 5)
    indexed = palette_decode.from_bytes(
        make_palette(bytes([9] * 256), PaletteType.COLOR_8BIT)
    )
    assert color_table(indexed)[0] == XTERM_256[9]
    assert color_table(None) == list(XTERM_256)


def test_color_table_rejects_glyphs(make_palette):
    glyphs = palette_decode.from_bytes(make_palette(bytes(512), PaletteType.GLYPH_UNICODE))
    with pytest.raises(PaletteTypeMismatch):
        color_table(glyphs)


def test_to_pil_image(colored):
    im = to_pil_image(colored, 'fg')
    assert im.mode == 'P'
    assert im.size == (3, 2)
    assert im.getpixel((2, 1)) == 5
    assert im.getpalette()[3:6] == list(XTERM_256[1])


def test_to_pil_image_rejects_glyph_plane(colored):
    with pytest.raises(ValueError):
        to_pil_image(colored, 'glyph')


def test_render_text(colored):
    assert render_text(colored) == ['abc', 'def']


def test_render_text_blank(make_image):
    image = decode.from_bytes(make_image(cols=2, rows=2))
    assert render_text(image) == ['  ', '  ']


def test_render_text_replaces_control_codes(make_image):
    image = decode.from_bytes(make_image(b'\x07x', GlyphMode.ASCII, cols=2, rows=1))
    assert render_text(image) == [' x']


def test_render_text_through_glyph_palette(make_image, make_palette, u16):
    codes = [0x2588] * 256
    codes[1] = 0x2591
    glyphs = palette_decode.from_bytes(make_palette(u16(codes), PaletteType.GLYPH_UNICODE))
    image = decode.from_bytes(make_image(b'\x00\x01', GlyphMode.PALETTE, cols=2, rows=1))
    assert render_text(image, glyphs) == ['█░']
    with pytest.raises(ValueError):
        render_text(image)
