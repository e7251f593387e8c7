"""PaletteFormat: the contract a palette file format implements.

A format owns exactly one PaletteData (`self.core`). Its constructor sets
the bounds, the Group.all() label/name and any prepare hooks for the
format's fixed geometry. Formats are found by ramp_palette.registry, which
looks for a module-level `palette_format` naming the class.

Usage in a format module:

    class MyPalette(PaletteFormat):
        name = 'mine'
        extension = '.pal'
        help = 'One-line description'

        def write_palette(self, out): ...

    palette_format = MyPalette
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import BinaryIO

from ramp_palette.core.address import Group
from ramp_palette.core.data import PaletteData


class FormatError(Exception):
    """A palette stream could not be read or written (bad magic, truncation, malformed data)."""


class PaletteFormat(ABC):
    name: str = ''
    extension: str = ''
    help: str = ''

    def __init__(self, palette_name: str):
        self.core = PaletteData()

    @property
    def palette_name(self) -> str | None:
        return self.core.get_name(Group.all())

    @abstractmethod
    def write_palette(self, out: BinaryIO) -> None:
        """Serialize the palette to a binary stream."""

    @classmethod
    def read_palette(cls, in_buf: BinaryIO) -> PaletteFormat:
        """Parse a palette from a binary stream."""
        raise NotImplementedError(f'reading {cls.name or cls.__name__} palettes is not supported')

    def __str__(self) -> str:
        from ramp_palette.core.report import format_text

        return format_text(self.core)
