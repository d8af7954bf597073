import struct
from dataclasses import dataclass
from functools import cached_property
from itertools import repeat
from typing import Callable, Generic, Iterator, Mapping, NamedTuple, Tuple, TypeVar

from nuru.image.header import ColorMode, GlyphMode, ImageHeader, MetadataMode
from nuru.kernel.stream import split_nibbles

T = TypeVar('T')

SPACE = ord(' ')


class Cell(NamedTuple):
    glyph: int
    fg: int
    bg: int
    metadata: int


def constant(value: T) -> Callable[[], T]:
    def convert() -> T:
        return value

    return convert


def same(value: int) -> int:
    return value


def color_pair(fg: int, bg: int) -> Tuple[int, int]:
    return fg, bg


@dataclass(frozen=True)
class CellField(Generic[T]):
    """Sub-record of a cell

    name: field name reported on truncated input

    fmt: big-endian struct codes of the field, empty when no bytes are stored

    convert: unpacked values -> decoded field
    """

    name: str
    fmt: str
    convert: Callable[..., T]

    @property
    def size(self) -> int:
        return struct.calcsize(f'>{self.fmt}')


GLYPH_FIELDS: Mapping[GlyphMode, CellField[int]] = {
    GlyphMode.NONE: CellField('glyph', '', constant(SPACE)),
    GlyphMode.ASCII: CellField('glyph', 'B', same),
    GlyphMode.PALETTE: CellField('glyph', 'B', same),
    GlyphMode.UNICODE: CellField('glyph', 'H', same),
}

COLOR_FIELDS: Mapping[ColorMode, CellField[Tuple[int, int]]] = {
    ColorMode.NONE: CellField('color', '', constant((0, 0))),
    ColorMode.COLOR_4BIT: CellField('color', 'B', split_nibbles),
    ColorMode.COLOR_8BIT: CellField('color', 'BB', color_pair),
    ColorMode.PALETTE: CellField('color', 'BB', color_pair),
}

METADATA_FIELDS: Mapping[MetadataMode, CellField[int]] = {
    MetadataMode.NONE: CellField('metadata', '', constant(0)),
    MetadataMode.ONE_BYTE: CellField('metadata', 'B', same),
    MetadataMode.TWO_BYTE: CellField('metadata', 'H', same),
}


@dataclass(frozen=True)
class CellLayout(object):
    glyph: CellField[int]
    color: CellField[Tuple[int, int]]
    metadata: CellField[int]

    @cached_property
    def structure(self) -> struct.Struct:
        return struct.Struct(f'>{self.glyph.fmt}{self.color.fmt}{self.metadata.fmt}')

    @property
    def size(self) -> int:
        return self.structure.size

    def field_at(self, offset: int) -> str:
        """Name of the sub-record covering byte `offset` of a cell."""
        for field in (self.glyph, self.color):
            if offset < field.size:
                return field.name
            offset -= field.size
        return self.metadata.name

    def unpack(self, payload: bytes, ncells: int) -> Iterator[Cell]:
        if not self.size:
            glyph, (fg, bg), metadata = (
                self.glyph.convert(),
                self.color.convert(),
                self.metadata.convert(),
            )
            return repeat(Cell(glyph, fg, bg, metadata), ncells)
        nglyph = len(self.glyph.fmt)
        ncolor = nglyph + len(self.color.fmt)
        return (
            Cell(
                self.glyph.convert(*values[:nglyph]),
                *self.color.convert(*values[nglyph:ncolor]),
                self.metadata.convert(*values[ncolor:]),
            )
            for values in self.structure.iter_unpack(payload)
        )


def cell_layout(header: ImageHeader) -> CellLayout:
    """Select the cell sub-record formats for the modes of a validated header."""
    return CellLayout(
        glyph=GLYPH_FIELDS[header.glyph_mode],
        color=COLOR_FIELDS[header.color_mode],
        metadata=METADATA_FIELDS[header.mdata_mode],
    )
