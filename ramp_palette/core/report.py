"""Report builder — text and JSON output for a palette."""

import json
from typing import Any

from ramp_palette.core.address import Group
from ramp_palette.core.data import PaletteData

EMPTY_COLOR = '------'


def format_text(data: PaletteData) -> str:
    """Format a palette as a human-readable table."""
    lines = []
    root = data.metadata.get(Group.all())
    if root is not None and str(root):
        lines.append(f' {root}')
    lines.append(
        f' [{data.page_count} pages] [wrap {data.default_line_count}:{data.default_column_count}]'
        f' [cursor {data.address_cursor}]'
    )
    lines.append('')
    lines.append('\tAddress   Color    Order  Name')

    for address, slot in data.items():
        color = slot.get_color(data.lookup)
        hex_color = color.hex[1:].upper() if color is not None else EMPTY_COLOR
        name = data.get_name(address.line_group()) or data.get_name(address.page_group()) or ''
        lines.append(f'\t{address}  {hex_color}   {slot.get_order(data.lookup):<5}  {name}'.rstrip())

    lines.append('')
    lines.append(f'{len(data)} slots')
    return '\n'.join(lines)


def format_json(data: PaletteData) -> str:
    """Format a palette as JSON."""
    obj: dict[str, Any] = {
        'label': data.get_label(Group.all()),
        'name': data.get_name(Group.all()),
        'bounds': {
            'pages': data.page_count,
            'lines': data.default_line_count,
            'columns': data.default_column_count,
        },
        'cursor': data.address_cursor.to_list(),
    }

    obj['slots'] = []
    for address, slot in data.items():
        color = slot.get_color(data.lookup)
        obj['slots'].append(
            {
                'address': address.to_list(),
                'color': color.hex if color is not None else None,
                'order': slot.get_order(data.lookup),
            }
        )

    obj['groups'] = [
        {'group': str(group), 'label': meta.label, 'name': meta.name}
        for group, meta in sorted(data.metadata.items())
        if meta.label is not None or meta.name is not None
    ]
    obj['summary'] = {'total': len(data), 'capacity': data.capacity}
    return json.dumps(obj, indent=2)
