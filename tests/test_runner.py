import pytest
import yaml
from typer.testing import CliRunner

from nuru.image.header import ColorMode, GlyphMode
from nuru.palette.header import PaletteType
from nuru.runner import app

runner = CliRunner()


@pytest.fixture
def image_file(make_image, tmp_path):
    path = tmp_path / 'art.nui'
    cells = b''.join(bytes([ord('x'), 0x1F]) for _ in range(4))
    path.write_bytes(
        make_image(
            cells,
            GlyphMode.ASCII,
            ColorMode.COLOR_4BIT,
            cols=2,
            rows=2,
            color_palette=b'ansi',
        )
    )
    return path


@pytest.fixture
def palette_file(make_palette, tmp_path):
    path = tmp_path / 'colors.nup'
    path.write_bytes(make_palette(bytes(768), PaletteType.COLOR_RGB, userdata=b'\x01\x02\x03\x04'))
    return path


def test_image_info(image_file):
    result = runner.invoke(app, ['image', 'info', str(image_file)])
    assert result.exit_code == 0
    info = yaml.safe_load(result.stdout)
    assert info['glyph_mode'] == 'ASCII'
    assert info['color_mode'] == 'COLOR_4BIT'
    assert info['cols'] == 2
    assert info['cells'] == 4
    assert info['cell_size'] == 2
    assert info['color_palette'] == 'ansi'


def test_image_info_bad_file(tmp_path):
    path = tmp_path / 'bad.nui'
    path.write_bytes(b'NURUXXX')
    result = runner.invoke(app, ['image', 'info', str(path)])
    assert result.exit_code == 1


def test_image_text(image_file):
    result = runner.invoke(app, ['image', 'text', str(image_file)])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ['xx', 'xx']


def test_image_preview(image_file, palette_file, tmp_path):
    target = tmp_path / 'out'
    result = runner.invoke(
        app,
        [
            'image',
            'preview',
            str(image_file),
            '--palette',
            str(palette_file),
            '--field',
            'fg',
            '--target',
            str(target),
        ],
    )
    assert result.exit_code == 0
    assert (target / 'art_fg.png').exists()


def test_palette_info(palette_file):
    result = runner.invoke(app, ['palette', 'info', str(palette_file), '--entries'])
    assert result.exit_code == 0
    info = yaml.safe_load(result.stdout)
    assert info['type'] == 'COLOR_RGB'
    assert info['userdata'] == '01020304'
    assert len(info['entries']) == 256
    assert info['entries'][0] == [0, 0, 0]


def test_palette_info_missing(tmp_path):
    result = runner.invoke(app, ['palette', 'info', str(tmp_path / 'missing.nup')])
    assert result.exit_code == 1
