"""Render one palette page as a PNG swatch.

Each (line, column) of the page becomes a `cell` x `cell` square.
Empty and unresolved cells are left transparent.
"""

import numpy as np
from PIL import Image

from ramp_palette.core.data import PaletteData


def render_swatch(data: PaletteData, page: int = 0, cell: int = 16) -> Image.Image:
    """Build an RGBA image of `page`, line per row and column per column."""
    if cell < 1:
        raise ValueError(f'cell size must be positive, got {cell}')
    if not 0 <= page < data.page_count:
        raise ValueError(f'page {page} outside palette of {data.page_count} pages')

    rows = data.default_line_count
    cols = data.default_column_count
    grid = np.zeros((rows, cols, 4), dtype=np.uint8)
    for address, slot in data.items():
        if address.page != page or not data.check_address(address):
            continue
        color = slot.get_color(data.lookup)
        if color is None:
            continue
        grid[address.line, address.column] = (color.r, color.g, color.b, 255)

    # Upscale each cell without interpolation
    pixels = np.repeat(np.repeat(grid, cell, axis=0), cell, axis=1)
    return Image.fromarray(pixels)
