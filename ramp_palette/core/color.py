"""Color value type and the RGB transforms used by derived elements.

Colors are opaque 8-bit RGB triples. The transforms here (lighten, darken,
blend) work per channel in RGB and clamp to 0..255.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NamedTuple


class _RGB(NamedTuple):
    r: int
    g: int
    b: int


class Color(_RGB):
    """An 8-bit RGB color. Channels must be ints within 0..255."""

    __slots__ = ()

    def __new__(cls, r: int, g: int, b: int) -> Color:
        for channel in (r, g, b):
            if not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ValueError(f'color channels must be ints within 0..255, got {(r, g, b)}')
        return super().__new__(cls, r, g, b)

    @classmethod
    def from_hex(cls, hex_str: str) -> Color:
        """Parse '#rrggbb', '#rgb' or the same without '#' (case-insensitive)."""
        s = hex_str.strip().lower().lstrip('#')
        if len(s) == 3:
            s = ''.join(ch * 2 for ch in s)
        if len(s) != 6:
            raise ValueError(f'invalid hex colour: {hex_str!r}')
        try:
            return cls(int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16))
        except ValueError:
            raise ValueError(f'invalid hex colour: {hex_str!r}') from None

    @property
    def hex(self) -> str:
        return f'#{self.r:02x}{self.g:02x}{self.b:02x}'

    def to_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __str__(self) -> str:
        return self.hex.upper()


def _clamp(value: float) -> int:
    return max(0, min(255, int(round(value))))


def lighten(amount: int) -> Callable[[Color], Color]:
    """Transform adding `amount` to every channel."""

    def _apply(color: Color) -> Color:
        return Color(_clamp(color.r + amount), _clamp(color.g + amount), _clamp(color.b + amount))

    return _apply


def darken(amount: int) -> Callable[[Color], Color]:
    """Transform subtracting `amount` from every channel."""
    return lighten(-amount)


def blend(ratio: float = 0.5) -> Callable[[Color, Color], Color]:
    """Linear mix of two colors; ratio 0.0 gives the first, 1.0 the second."""
    if not 0.0 <= ratio <= 1.0:
        raise ValueError(f'blend ratio must be within 0..1, got {ratio}')

    def _apply(a: Color, b: Color) -> Color:
        return Color(
            _clamp(a.r + (b.r - a.r) * ratio),
            _clamp(a.g + (b.g - a.g) * ratio),
            _clamp(a.b + (b.b - a.b) * ratio),
        )

    return _apply
