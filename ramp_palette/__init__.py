"""ramp_palette — addressable color palettes and the formats that store them.

A palette is a grid of color slots addressed by (page, line, column).
ramp_palette.core.data.PaletteData allocates, mutates and queries those
slots; file formats in ramp_palette.formats own a PaletteData and
serialize it.

Quick start:
    from ramp_palette.core.color import Color
    from ramp_palette.core.data import PaletteData

    data = PaletteData()
    data.add_color(Color(255, 0, 0))  # Address(0, 0, 0)
"""

__version__ = '0.1.0'
