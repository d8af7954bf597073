import struct
from typing import Iterable, Sequence

import pytest

IMAGE_HEADER = struct.Struct('>4B2H3B7s7s')
PALETTE_HEADER = struct.Struct('>5B4s')


def build_image(
    cells: bytes = b'',
    glyph_mode: int = 0,
    color_mode: int = 0,
    mdata_mode: int = 0,
    cols: int = 0,
    rows: int = 0,
    version: int = 1,
    keys: Sequence[int] = (0, 0, 0),
    glyph_palette: bytes = b'',
    color_palette: bytes = b'',
    signature: bytes = b'NURUIMG',
) -> bytes:
    header = IMAGE_HEADER.pack(
        version,
        glyph_mode,
        color_mode,
        mdata_mode,
        cols,
        rows,
        *keys,
        glyph_palette,
        color_palette,
    )
    return signature + header + cells


def build_palette(
    entries: bytes = b'',
    ptype: int = 0,
    version: int = 1,
    keys: Sequence[int] = (0, 0, 0),
    userdata: bytes = b'\0\0\0\0',
    signature: bytes = b'NURUPAL',
) -> bytes:
    return signature + PALETTE_HEADER.pack(version, ptype, *keys, userdata) + entries


def pack_u16(values: Iterable[int]) -> bytes:
    return b''.join(value.to_bytes(2, 'big') for value in values)


@pytest.fixture
def make_image():
    return build_image


@pytest.fixture
def make_palette():
    return build_palette


@pytest.fixture
def u16():
    return pack_u16
