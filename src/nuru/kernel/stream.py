from typing import IO, NamedTuple, Tuple

import deal

from nuru.errors import ShortRead

BYTEORDER = 'big'


class RGB(NamedTuple):
    r: int
    g: int
    b: int


def split_nibbles(packed: int) -> Tuple[int, int]:
    return packed >> 4, packed & 0x0F


def read_available(stream: IO[bytes], size: int) -> bytes:
    """Read up to `size` bytes, a stream closed by the caller reads as empty."""
    try:
        return stream.read(size)
    except ValueError:
        if not getattr(stream, 'closed', False):
            raise
        return b''


@deal.pre(lambda _: _.size >= 0)
def read_exact(stream: IO[bytes], size: int) -> bytes:
    """Read exactly `size` bytes, a shorter result means the source ran dry."""
    data = read_available(stream, size)
    if len(data) != size:
        raise ShortRead(size, len(data))
    return data


@deal.pre(lambda _: _.width in (1, 2))
def read_int(stream: IO[bytes], width: int) -> int:
    # multi-byte values are always network byte order
    return int.from_bytes(read_exact(stream, width), byteorder=BYTEORDER, signed=False)


def read_packed_color(stream: IO[bytes]) -> Tuple[int, int]:
    """Split one byte into (fg, bg) taken from the high and low nibbles."""
    return split_nibbles(read_exact(stream, 1)[0])


def read_rgb(stream: IO[bytes]) -> RGB:
    return RGB(*read_exact(stream, 3))


@deal.pre(lambda _: _.size >= 0)
def read_fixed_string(stream: IO[bytes], size: int) -> bytes:
    # raw bytes, no text decoding: names may hold anything
    return read_exact(stream, size)
