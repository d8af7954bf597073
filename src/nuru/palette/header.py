import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import IO, Optional

from nuru.errors import HeaderReadError, ShortRead
from nuru.kernel.helpers import read_signature
from nuru.kernel.structured import StructuredTuple

PALETTE_SIGNATURE = b'NURUPAL'
USERDATA_SIZE = 4
NUM_ENTRIES = 256


class PaletteType(IntEnum):
    NONE = 0
    COLOR_8BIT = 1
    GLYPH_UNICODE = 2
    COLOR_RGB = 3


@dataclass(frozen=True)
class PaletteHeader:
    version: int
    type: int
    ch_key: int
    fg_key: int
    bg_key: int
    userdata: bytes
    signature: bytes = PALETTE_SIGNATURE

    @property
    def palette_type(self) -> Optional[PaletteType]:
        try:
            return PaletteType(self.type)
        except ValueError:
            return None


PALETTE_HEADER = StructuredTuple(
    ('version', 'type', 'ch_key', 'fg_key', 'bg_key', 'userdata'),
    struct.Struct(f'>5B{USERDATA_SIZE}s'),
    PaletteHeader,
)


def read_header(stream: IO[bytes]) -> PaletteHeader:
    read_signature(stream, PALETTE_SIGNATURE)
    try:
        return PALETTE_HEADER.unpack(stream)
    except ShortRead as exc:
        raise HeaderReadError('palette') from exc
