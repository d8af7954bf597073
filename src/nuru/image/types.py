from dataclasses import dataclass, field
from typing import List, Optional

from nuru.image.cell import Cell, cell_layout
from nuru.image.header import ImageHeader
from nuru.kernel.helpers import decode_name


@dataclass
class Image:
    """Decoded image

    header: fixed header fields

    cells: row-major cell grid, None once released
    """

    header: ImageHeader
    cells: Optional[List[Cell]] = field(repr=False)

    @property
    def cols(self) -> int:
        return self.header.cols

    @property
    def rows(self) -> int:
        return self.header.rows

    @property
    def num_cells(self) -> int:
        return self.header.num_cells

    @property
    def cell_size(self) -> int:
        return cell_layout(self.header).size

    @property
    def released(self) -> bool:
        return self.cells is None

    @property
    def glyph_palette_name(self) -> str:
        return decode_name(self.header.glyph_palette)

    @property
    def color_palette_name(self) -> str:
        return decode_name(self.header.color_palette)
