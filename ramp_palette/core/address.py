"""Palette addressing: Address (page, line, column) and Group selectors.

Addresses are totally ordered (page, then line, then column), which is also
the iteration order of a palette's slot map and therefore the order formats
serialize in.

The address space is a ring: wrapped_next() on the last address inside the
bounds returns Address(0, 0, 0).
"""

from __future__ import annotations

from dataclasses import dataclass

PAGE_MAX = 256
LINE_MAX = 256
COLUMN_MAX = 256


@dataclass(frozen=True, order=True)
class Group:
    """Metadata selector: the whole palette, one page, or one line of a page.

    Build with Group.all(), Group.of_page(p) or Group.of_line(p, l).
    """

    level: int  # 0 = all, 1 = page, 2 = line
    page: int = 0
    line: int = 0

    @classmethod
    def all(cls) -> Group:
        return cls(0)

    @classmethod
    def of_page(cls, page: int) -> Group:
        return cls(1, page)

    @classmethod
    def of_line(cls, page: int, line: int) -> Group:
        return cls(2, page, line)

    def __str__(self) -> str:
        if self.level == 0:
            return '*'
        if self.level == 1:
            return f'{self.page:02X}:*'
        return f'{self.page:02X}:{self.line:02X}:*'


@dataclass(frozen=True, order=True)
class Address:
    """A slot coordinate."""

    page: int = 0
    line: int = 0
    column: int = 0

    def page_group(self) -> Group:
        return Group.of_page(self.page)

    def line_group(self) -> Group:
        return Group.of_line(self.page, self.line)

    def wrapped_next(self, page_count: int, line_count: int, column_count: int) -> Address:
        """Return the next address in the ring bounded by the given counts.

        Rolls column -> line -> page and wraps the page back to zero. A
        component already at or past its bound overflows like the last valid
        value would, so an out-of-bounds address re-enters the ring.
        """
        column = self.column + 1
        line = self.line
        page = self.page
        if column >= column_count:
            column = 0
            line += 1
            if line >= line_count:
                line = 0
                page += 1
                if page >= page_count:
                    page = 0
        return Address(page, line, column)

    def to_list(self) -> list[int]:
        return [self.page, self.line, self.column]

    def __str__(self) -> str:
        return f'{self.page:02X}:{self.line:02X}:{self.column:02X}'
