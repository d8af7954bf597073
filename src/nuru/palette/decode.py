import io
from functools import partial
from typing import IO, Any, Callable, Mapping, Tuple, Type

import deal

from nuru.errors import (
    PaletteReadError,
    PaletteTypeMismatch,
    ShortRead,
    UnsupportedPaletteType,
)
from nuru.kernel.helpers import check_version
from nuru.kernel.stream import RGB, read_int, read_rgb
from nuru.palette.header import NUM_ENTRIES, PaletteType, read_header
from nuru.palette.types import (
    ColorIndexTable,
    EmptyTable,
    EntryTable,
    GlyphTable,
    Palette,
    RgbTable,
)
from nuru.settings import DEFAULT_SETTINGS, DecodeSettings

ENTRY_FORMATS: Mapping[PaletteType, Tuple[Type[EntryTable], Callable[[IO[bytes]], Any]]] = {
    PaletteType.COLOR_8BIT: (ColorIndexTable, partial(read_int, width=1)),
    PaletteType.GLYPH_UNICODE: (GlyphTable, partial(read_int, width=2)),
    PaletteType.COLOR_RGB: (RgbTable, read_rgb),
}


def read_entries(cfg: DecodeSettings, stream: IO[bytes], ptype: int) -> EntryTable:
    if ptype not in ENTRY_FORMATS:
        if ptype != PaletteType.NONE:
            if cfg.strict:
                raise UnsupportedPaletteType(ptype)
            cfg.logger.warning(f'unknown palette type {ptype}, no entries decoded')
        return EmptyTable()

    table, read_entry = ENTRY_FORMATS[PaletteType(ptype)]
    entries = []
    for idx in range(NUM_ENTRIES):
        try:
            entries.append(read_entry(stream))
        except ShortRead as exc:
            raise PaletteReadError(idx) from exc
    return table(tuple(entries))


def decode_palette(stream: IO[bytes], cfg: DecodeSettings = DEFAULT_SETTINGS) -> Palette:
    header = read_header(stream)
    check_version(cfg, 'palette', header.version)
    cfg.logger.debug(f'palette type={header.type} version={header.version}')
    return Palette(header, read_entries(cfg, stream, header.type))


def lookup(palette: Palette, table: Type[EntryTable], idx: int) -> Any:
    if not isinstance(palette.table, table):
        raise PaletteTypeMismatch(table.kind, palette.table.kind)
    return palette.table.entries[idx]


@deal.pre(lambda _: 0 <= _.idx < NUM_ENTRIES)
def get_color_index(palette: Palette, idx: int) -> int:
    return lookup(palette, ColorIndexTable, idx)


@deal.pre(lambda _: 0 <= _.idx < NUM_ENTRIES)
def get_glyph(palette: Palette, idx: int) -> int:
    return lookup(palette, GlyphTable, idx)


@deal.pre(lambda _: 0 <= _.idx < NUM_ENTRIES)
def get_rgb(palette: Palette, idx: int) -> RGB:
    return lookup(palette, RgbTable, idx)


def from_bytes(data: bytes, cfg: DecodeSettings = DEFAULT_SETTINGS) -> Palette:
    with io.BytesIO(data) as stream:
        return decode_palette(stream, cfg)


def from_path(path: str, cfg: DecodeSettings = DEFAULT_SETTINGS) -> Palette:
    with open(path, 'rb') as stream:
        return decode_palette(stream, cfg)
