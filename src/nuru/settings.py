import logging
from dataclasses import dataclass, field
from typing import Optional

FORMAT_VERSION = 1
MAX_CELLS = 16 * 1024 * 1024


@dataclass(frozen=True)
class DecodeSettings(object):
    """Setting for image and palette decoding

    max_cells: limit for cols * rows before allocating the cell grid,
        None for unlimited

    strict: if set to True, throws error on unknown format version or palette
        type, otherwise log warning

    logger: destination for warnings and debug records
    """

    max_cells: Optional[int] = MAX_CELLS
    strict: bool = False
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger('nuru'))


DEFAULT_SETTINGS = DecodeSettings()
