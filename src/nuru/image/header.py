import struct
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import IO, Type, TypeVar

from nuru.errors import (
    HeaderReadError,
    ShortRead,
    UnsupportedColorMode,
    UnsupportedGlyphMode,
    UnsupportedMetadataMode,
    UnsupportedMode,
)
from nuru.kernel.helpers import read_signature
from nuru.kernel.structured import StructuredTuple

IMAGE_SIGNATURE = b'NURUIMG'
NAME_SIZE = 7


class GlyphMode(IntEnum):
    NONE = 0
    ASCII = 1
    UNICODE = 2
    PALETTE = 129


class ColorMode(IntEnum):
    NONE = 0
    COLOR_4BIT = 1
    COLOR_8BIT = 2
    PALETTE = 130


class MetadataMode(IntEnum):
    NONE = 0
    ONE_BYTE = 1
    TWO_BYTE = 2


@dataclass(frozen=True)
class ImageHeader:
    version: int
    glyph_mode: GlyphMode
    color_mode: ColorMode
    mdata_mode: MetadataMode
    cols: int
    rows: int
    ch_key: int
    fg_key: int
    bg_key: int
    glyph_palette: bytes
    color_palette: bytes
    signature: bytes = IMAGE_SIGNATURE

    @property
    def num_cells(self) -> int:
        return self.cols * self.rows


IMAGE_HEADER = StructuredTuple(
    (
        'version',
        'glyph_mode',
        'color_mode',
        'mdata_mode',
        'cols',
        'rows',
        'ch_key',
        'fg_key',
        'bg_key',
        'glyph_palette',
        'color_palette',
    ),
    struct.Struct(f'>4B2H3B{NAME_SIZE}s{NAME_SIZE}s'),
    ImageHeader,
)

_ModeT = TypeVar('_ModeT', bound=IntEnum)


def as_mode(
    enum: Type[_ModeT], error: Type[UnsupportedMode], value: int
) -> _ModeT:
    try:
        return enum(value)
    except ValueError as exc:
        raise error(value) from exc


def validate_modes(header: ImageHeader) -> ImageHeader:
    return replace(
        header,
        glyph_mode=as_mode(GlyphMode, UnsupportedGlyphMode, header.glyph_mode),
        color_mode=as_mode(ColorMode, UnsupportedColorMode, header.color_mode),
        mdata_mode=as_mode(MetadataMode, UnsupportedMetadataMode, header.mdata_mode),
    )


def read_header(stream: IO[bytes]) -> ImageHeader:
    """Read image signature and header fields, validating the cell modes."""
    read_signature(stream, IMAGE_SIGNATURE)
    try:
        header = IMAGE_HEADER.unpack(stream)
    except ShortRead as exc:
        raise HeaderReadError('image') from exc
    return validate_modes(header)
