from dataclasses import dataclass, field
from typing import ClassVar, Tuple

from nuru.kernel.stream import RGB
from nuru.palette.header import PaletteHeader


@dataclass(frozen=True)
class EntryTable:
    """Palette payload, one subclass per entry representation."""

    kind: ClassVar[str] = 'no'
    entries: Tuple = field(default=(), repr=False)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class EmptyTable(EntryTable):
    pass


@dataclass(frozen=True)
class ColorIndexTable(EntryTable):
    kind: ClassVar[str] = 'color index'
    entries: Tuple[int, ...] = field(default=(), repr=False)


@dataclass(frozen=True)
class GlyphTable(EntryTable):
    kind: ClassVar[str] = 'glyph'
    entries: Tuple[int, ...] = field(default=(), repr=False)


@dataclass(frozen=True)
class RgbTable(EntryTable):
    kind: ClassVar[str] = 'rgb'
    entries: Tuple[RGB, ...] = field(default=(), repr=False)


@dataclass(frozen=True)
class Palette:
    header: PaletteHeader
    table: EntryTable

    @property
    def empty(self) -> bool:
        return not self.table
