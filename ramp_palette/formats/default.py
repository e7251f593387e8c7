"""Default palette format: a JSON document, readable and writable.

    {
      "format": "ramp-palette",
      "version": 1,
      "name": "My palette",
      "label": "RampPalette 1.0.0",
      "bounds": [pages, lines, columns],
      "groups": [{"group": [level, page, line], "name": "..."}],
      "slots": [{"address": [page, line, column], "color": "#rrggbb", "order": 0}]
    }

Slots are written in address order. Derived elements are stored as their
resolved color (unresolved ones are skipped) and read back as zeroth-order
colors; "order" is informational.

Example:
    uv run ramp-palette new out.json --format default --name Sky --color '#7dc7ff'
"""

from __future__ import annotations

import json
import logging
from typing import Any, BinaryIO

from ramp_palette.core.address import Address, Group
from ramp_palette.core.color import Color
from ramp_palette.core.errors import PaletteError
from ramp_palette.core.format import FormatError, PaletteFormat

_logger = logging.getLogger(__name__)

FORMAT_TAG = 'ramp-palette'
FORMAT_VERSION = 1
DEFAULT_LABEL = 'RampPalette 1.0.0'


def _int_triple(value: Any, what: str) -> tuple[int, int, int]:
    if not isinstance(value, list) or len(value) != 3 or not all(isinstance(v, int) and v >= 0 for v in value):
        raise FormatError(f'{what} must be a list of three non-negative integers, got {value!r}')
    return (value[0], value[1], value[2])


class DefaultPalette(PaletteFormat):
    name = 'default'
    extension = '.json'
    help = 'JSON palette document (read and write).'

    def __init__(self, palette_name: str):
        super().__init__(palette_name)
        self.core.set_label(Group.all(), DEFAULT_LABEL)
        self.core.set_name(Group.all(), palette_name)
        self.core.set_initialized(Group.all(), True)

    def to_dict(self) -> dict[str, Any]:
        core = self.core
        groups = []
        for group, meta in sorted(core.metadata.items()):
            if group == Group.all() or meta.name is None:
                continue
            groups.append({'group': [group.level, group.page, group.line], 'name': meta.name})

        slots = []
        for address, slot in core.items():
            color = slot.get_color(core.lookup)
            if color is None:
                _logger.warning('skipping unresolved slot %s', address)
                continue
            slots.append({'address': address.to_list(), 'color': color.hex, 'order': slot.get_order(core.lookup)})

        return {
            'format': FORMAT_TAG,
            'version': FORMAT_VERSION,
            'name': core.get_name(Group.all()),
            'label': core.get_label(Group.all()),
            'bounds': [core.page_count, core.default_line_count, core.default_column_count],
            'groups': groups,
            'slots': slots,
        }

    def write_palette(self, out: BinaryIO) -> None:
        out.write(json.dumps(self.to_dict(), indent=2).encode('utf-8'))

    @classmethod
    def read_palette(cls, in_buf: BinaryIO) -> DefaultPalette:
        try:
            doc = json.loads(in_buf.read().decode('utf-8'))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise FormatError(f'not a {FORMAT_TAG} document: {e}') from e
        if not isinstance(doc, dict) or doc.get('format') != FORMAT_TAG:
            raise FormatError(f'not a {FORMAT_TAG} document')
        if doc.get('version') != FORMAT_VERSION:
            raise FormatError(f'unsupported {FORMAT_TAG} version: {doc.get("version")!r}')

        pal = cls(str(doc.get('name') or ''))
        if doc.get('label'):
            pal.core.set_label(Group.all(), str(doc['label']))
        pages, lines, columns = _int_triple(doc.get('bounds'), 'bounds')
        pal.core.page_count = pages
        pal.core.default_line_count = lines
        pal.core.default_column_count = columns

        for entry in doc.get('groups', []):
            if not isinstance(entry, dict):
                raise FormatError(f'malformed group entry: {entry!r}')
            level, page, line = _int_triple(entry.get('group'), 'group')
            if level not in (1, 2):
                raise FormatError(f'unknown group level: {level}')
            group = Group.of_page(page) if level == 1 else Group.of_line(page, line)
            pal.core.set_name(group, str(entry.get('name', '')))

        slots = doc.get('slots', [])
        if not isinstance(slots, list):
            raise FormatError('slots must be a list')
        for entry in slots:
            if not isinstance(entry, dict):
                raise FormatError(f'malformed slot entry: {entry!r}')
            address = Address(*_int_triple(entry.get('address'), 'address'))
            try:
                color = Color.from_hex(str(entry.get('color', '')))
                pal.core.set_color(address, color)
            except (ValueError, PaletteError) as e:
                raise FormatError(f'bad slot {address}: {e}') from e
        return pal


palette_format = DefaultPalette
