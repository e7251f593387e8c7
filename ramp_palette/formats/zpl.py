"""ZPL palette format (Zelda Classic 2.50 build 24 palette export).

Geometry: 255 pages x 16 lines x 16 columns. Each page that holds at least
one slot is written as a block of 16x16 colors, 3 bytes per color, in
address order. Channels are stored at 6-bit depth (8-bit value x 0.25);
empty or unresolved cells are written as black.

Layout:
    header   12 bytes
    body     256 * 3 bytes per occupied page
    footer   A x1, B x109, C x1, D x79, E x1

New pages are named 'Level <n>'. Reading ZPL files is not supported.

Example:
    uv run ramp-palette new out.zpl --format zpl --name Dungeon --color '#ff0000'
"""

from __future__ import annotations

import logging
from typing import BinaryIO

import numpy as np

from ramp_palette.core.address import Group
from ramp_palette.core.data import PaletteData
from ramp_palette.core.format import PaletteFormat

_logger = logging.getLogger(__name__)

ZPL_PAGE_COUNT = 255
ZPL_LINE_COUNT = 16
ZPL_COLUMN_COUNT = 16

ZPL_COLOR_DEPTH_SCALE = 0.25

ZPL_HEADER = bytes([0x43, 0x53, 0x45, 0x54, 0x04, 0x00, 0x01, 0x00, 0x9C, 0x0D, 0x05, 0x00])

ZPL_FOOTER_A = bytes([0x5A, 0x00, 0x00, 0x00])
ZPL_FOOTER_B = bytes([0x00, 0x00, 0x00, 0x00])  # x 109
ZPL_FOOTER_C = bytes(
    [
        0x00, 0x00, 0x00, 0x36, 0x00, 0x00, 0x4E, 0x00, 0x00, 0x14,
        0x00, 0x00, 0x36, 0x00, 0x00, 0x4E, 0x00, 0x00, 0x14, 0x00,
    ]
)  # fmt: skip
ZPL_FOOTER_D = bytes([0x00, 0x00, 0x00, 0x00])  # x 79
ZPL_FOOTER_E = bytes(
    [
        0x22, 0x00, 0x00, 0x66, 0x00, 0x00, 0x5A, 0x00, 0x00, 0x22, 0x00, 0x00,
        0x86, 0x00, 0x00, 0x3C, 0x00, 0x00, 0x22, 0x00, 0x00, 0x86, 0x00, 0x00,
        0x3C, 0x00, 0x00, 0x20, 0x30, 0x40, 0x3F, 0x3F, 0x3F, 0x07, 0x07, 0x07,
    ]
)  # fmt: skip

ZPL_FOOTER_B_REPEAT = 109
ZPL_FOOTER_D_REPEAT = 79

ZPL_FOOTER = (
    ZPL_FOOTER_A
    + ZPL_FOOTER_B * ZPL_FOOTER_B_REPEAT
    + ZPL_FOOTER_C
    + ZPL_FOOTER_D * ZPL_FOOTER_D_REPEAT
    + ZPL_FOOTER_E
)


def _name_new_page(data: PaletteData, group: Group) -> None:
    if data.get_name(group) is None:
        data.set_name(group, f'Level {group.page}')


class ZplPalette(PaletteFormat):
    name = 'zpl'
    extension = '.zpl'
    help = 'Zelda Classic palette (write only).'

    def __init__(self, palette_name: str):
        super().__init__(palette_name)
        self.core.set_label(Group.all(), 'ZplPalette 1.0.0')
        self.core.set_name(Group.all(), palette_name)
        self.core.page_count = ZPL_PAGE_COUNT
        self.core.default_line_count = ZPL_LINE_COUNT
        self.core.default_column_count = ZPL_COLUMN_COUNT
        self.core.prepare_new_page = _name_new_page
        self.core.set_initialized(Group.all(), True)

    def _page_blocks(self) -> dict[int, np.ndarray]:
        """8-bit color blocks for every occupied page, keyed by page."""
        blocks: dict[int, np.ndarray] = {}
        for address, slot in self.core.items():
            if not self.core.check_address(address):
                _logger.warning('skipping out-of-bounds slot %s', address)
                continue
            block = blocks.get(address.page)
            if block is None:
                block = blocks[address.page] = np.zeros((ZPL_LINE_COUNT, ZPL_COLUMN_COUNT, 3), dtype=np.uint8)
            color = slot.get_color(self.core.lookup)
            if color is None:
                _logger.debug('unresolved slot %s written as black', address)
                continue
            block[address.line, address.column] = color.to_tuple()
        return blocks

    def write_palette(self, out: BinaryIO) -> None:
        out.write(ZPL_HEADER)
        for _page, block in sorted(self._page_blocks().items()):
            scaled = (block.astype(np.float32) * ZPL_COLOR_DEPTH_SCALE).astype(np.uint8)
            out.write(scaled.tobytes())
        out.write(ZPL_FOOTER)


palette_format = ZplPalette
