from typing import Optional


class NuruError(Exception):
    """Base class for every decode failure raised by nuru."""


class ShortRead(NuruError, EOFError):
    def __init__(self, expected: int, given: int) -> None:
        super().__init__(f'Expected {expected} bytes but got {given}')
        self.expected = expected
        self.given = given


class BadSignature(NuruError, ValueError):
    def __init__(self, expected: bytes, given: bytes) -> None:
        super().__init__(f'Expected signature {expected!r} but got {given!r}')
        self.expected = expected
        self.given = given


class HeaderReadError(NuruError):
    def __init__(self, kind: str) -> None:
        super().__init__(f'Truncated {kind} header')
        self.kind = kind


class UnsupportedMode(NuruError, ValueError):
    field = 'mode'

    def __init__(self, value: int) -> None:
        super().__init__(f'Unsupported {self.field}: {value}')
        self.value = value


class UnsupportedGlyphMode(UnsupportedMode):
    field = 'glyph mode'


class UnsupportedColorMode(UnsupportedMode):
    field = 'color mode'


class UnsupportedMetadataMode(UnsupportedMode):
    field = 'metadata mode'


class UnsupportedPaletteType(UnsupportedMode):
    field = 'palette type'


class UnsupportedVersion(NuruError, ValueError):
    def __init__(self, expected: int, given: int) -> None:
        super().__init__(f'Expected format version {expected} but got {given}')
        self.expected = expected
        self.given = given


class CellReadError(NuruError):
    def __init__(self, index: int, field: str) -> None:
        super().__init__(f'Truncated cell data: cell {index}, field {field}')
        self.index = index
        self.field = field


class PaletteReadError(NuruError):
    def __init__(self, index: int) -> None:
        super().__init__(f'Truncated palette data: entry {index}')
        self.index = index


class OutOfMemory(NuruError, MemoryError):
    def __init__(self, ncells: int, limit: Optional[int] = None) -> None:
        reason = f' (limit is {limit})' if limit is not None else ''
        super().__init__(f'Cannot allocate {ncells} cells{reason}')
        self.ncells = ncells
        self.limit = limit


class ImageReleased(NuruError):
    def __init__(self) -> None:
        super().__init__('Image cells were already released')


class PaletteTypeMismatch(NuruError, TypeError):
    def __init__(self, expected: str, given: str) -> None:
        super().__init__(f'Palette holds {given} entries, not {expected}')
        self.expected = expected
        self.given = given
