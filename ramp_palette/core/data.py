"""PaletteData: the addressable slot store.

Holds the slot map (Address -> Slot), per-group Metadata, the allocation
cursor and the palette bounds. Formats own one PaletteData and configure
its bounds, metadata and prepare hooks.

Occupancy: an address is occupied when a slot exists there, whether or not
that slot currently resolves to a color. Capacity counts only slots inside
the current bounds, so shrinking the bounds never makes the free scan loop.

Prepare hooks: the first time any address of a page (or line) is written
through the store, prepare_new_page (then prepare_new_line) is called as
hook(store, group) and the group is marked initialized. Each hook fires at
most once per group. A hook that raises leaves its group uninitialized and
the slot unwritten, so the hook runs again on the next write to that group.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence

from ramp_palette.core.address import COLUMN_MAX, LINE_MAX, PAGE_MAX, Address, Group
from ramp_palette.core.color import Color
from ramp_palette.core.element import ColorElement, FirstOrder, SecondOrder, Slot, ZerothOrder
from ramp_palette.core.errors import (
    AddressInUse,
    CannotSetDerivedColor,
    EmptyAddress,
    InvalidAddress,
    MaxCellLimitExceeded,
)
from ramp_palette.core.metadata import Metadata

_logger = logging.getLogger(__name__)

PrepareHook = Callable[['PaletteData', Group], None]


def no_op(data: PaletteData, group: Group) -> None:
    """Default prepare hook."""


class PaletteData:
    """A single palette: slots, metadata, cursor and bounds."""

    def __init__(
        self,
        prepare_new_page: PrepareHook | None = None,
        prepare_new_line: PrepareHook | None = None,
    ):
        self.slotmap: dict[Address, Slot] = {}
        self.metadata: dict[Group, Metadata] = {}
        self.address_cursor = Address(0, 0, 0)
        self.page_count = PAGE_MAX
        self.default_line_count = LINE_MAX
        self.default_column_count = COLUMN_MAX
        self.prepare_new_page: PrepareHook = prepare_new_page or no_op
        self.prepare_new_line: PrepareHook = prepare_new_line or no_op

    # -- queries --------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.slotmap)

    def __contains__(self, address: object) -> bool:
        return address in self.slotmap

    def __iter__(self) -> Iterator[Address]:
        return iter(sorted(self.slotmap))

    def items(self) -> list[tuple[Address, Slot]]:
        """(address, slot) pairs in address order."""
        return sorted(self.slotmap.items())

    @property
    def capacity(self) -> int:
        return self.page_count * self.default_line_count * self.default_column_count

    def lookup(self, address: Address) -> Slot | None:
        """Slot at address, or None. Used by derived elements to find parents."""
        return self.slotmap.get(address)

    def get_color(self, address: Address) -> Color | None:
        """Color at address; None if the address is empty or unresolved."""
        slot = self.slotmap.get(address)
        if slot is None:
            return None
        return slot.get_color(self.lookup)

    def get_element(self, address: Address) -> ColorElement | None:
        slot = self.slotmap.get(address)
        return slot.element if slot is not None else None

    def get_order(self, address: Address) -> int | None:
        slot = self.slotmap.get(address)
        return slot.get_order(self.lookup) if slot is not None else None

    def check_address(self, address: Address) -> bool:
        """Whether address lies inside the current bounds. Ignores occupancy."""
        return (
            0 <= address.page < self.page_count
            and 0 <= address.line < self.default_line_count
            and 0 <= address.column < self.default_column_count
        )

    # -- allocation -----------------------------------------------------------

    def next_free_address(self) -> Address:
        """First unoccupied address at or after the cursor, without moving it.

        Raises MaxCellLimitExceeded if every address inside the bounds is taken.
        """
        occupied = sum(1 for a in self.slotmap if self.check_address(a))
        if occupied >= self.capacity:
            raise MaxCellLimitExceeded()

        address = self.address_cursor
        if not self.check_address(address):
            address = Address(0, 0, 0)
        while address in self.slotmap:
            address = address.wrapped_next(self.page_count, self.default_line_count, self.default_column_count)
        return address

    def next_free_address_advance_cursor(self) -> Address:
        """Like next_free_address(), then move the cursor past the result."""
        address = self.next_free_address()
        self.address_cursor = address.wrapped_next(
            self.page_count, self.default_line_count, self.default_column_count
        )
        return address

    def add_color(self, color: Color) -> Address:
        return self.add_element(ZerothOrder(color))

    def add_element(self, element: ColorElement) -> Address:
        return self.add_slot(Slot(element))

    def add_slot(self, slot: Slot) -> Address:
        """Store slot at the next free address and return that address.

        If a prepare hook raises, the slot is removed and the cursor restored
        before the error propagates.
        """
        cursor = self.address_cursor
        address = self.next_free_address_advance_cursor()
        self.slotmap[address] = slot
        try:
            self._prepare_address(address)
        except Exception:
            del self.slotmap[address]
            self.address_cursor = cursor
            raise
        _logger.debug('allocated %s', address)
        return address

    def add_derived(
        self,
        parents: Address | Sequence[Address],
        build: Callable[..., Color],
    ) -> Address:
        """Allocate a derived element built from one or two parent addresses.

        Every parent must be inside the bounds and currently hold a color.
        """
        if isinstance(parents, Address):
            parents = (parents,)
        parents = tuple(parents)
        if len(parents) not in (1, 2):
            raise ValueError(f'derived elements take 1 or 2 parents, got {len(parents)}')
        for parent in parents:
            if not self.check_address(parent):
                raise InvalidAddress(parent)
            if self.get_color(parent) is None:
                raise EmptyAddress(parent)

        if len(parents) == 1:
            element: ColorElement = FirstOrder(parents[0], build)
        else:
            element = SecondOrder((parents[0], parents[1]), build)
        return self.add_element(element)

    # -- mutation -------------------------------------------------------------

    def set_color(self, address: Address, color: Color) -> Color | None:
        """Assign a zeroth-order color at address and return the previous color.

        Raises InvalidAddress outside the bounds and CannotSetDerivedColor
        when the existing element is derived; use set_element for those.
        """
        if not self.check_address(address):
            raise InvalidAddress(address)
        slot = self.slotmap.get(address)
        if slot is not None and slot.get_order(self.lookup) != 0:
            raise CannotSetDerivedColor()

        self._prepare_address(address)
        if slot is None:
            self.slotmap[address] = Slot(ZerothOrder(color))
            return None
        old = slot.replace(ZerothOrder(color))
        return old.current_color(self.lookup)

    def set_element(self, address: Address, element: ColorElement) -> ColorElement | None:
        """Put element at address, replacing any element there (derived included)."""
        if not self.check_address(address):
            raise InvalidAddress(address)
        self._prepare_address(address)
        slot = self.slotmap.get(address)
        if slot is None:
            self.slotmap[address] = Slot(element)
            return None
        return slot.replace(element)

    def insert_element(self, address: Address, element: ColorElement) -> None:
        """Put element at an empty address; raises AddressInUse if occupied."""
        if not self.check_address(address):
            raise InvalidAddress(address)
        if address in self.slotmap:
            raise AddressInUse(address)
        self._prepare_address(address)
        self.slotmap[address] = Slot(element)

    def remove(self, address: Address) -> ColorElement | None:
        """Drop the slot at address. Elements derived from it become unresolved."""
        slot = self.slotmap.pop(address, None)
        return slot.element if slot is not None else None

    # -- metadata -------------------------------------------------------------

    def _meta(self, group: Group) -> Metadata:
        meta = self.metadata.get(group)
        if meta is None:
            meta = self.metadata[group] = Metadata()
        return meta

    def get_label(self, group: Group) -> str | None:
        meta = self.metadata.get(group)
        return meta.label if meta else None

    def set_label(self, group: Group, label: str) -> None:
        self._meta(group).label = label

    def get_name(self, group: Group) -> str | None:
        meta = self.metadata.get(group)
        return meta.name if meta else None

    def set_name(self, group: Group, name: str) -> None:
        self._meta(group).name = name

    def is_initialized(self, group: Group) -> bool:
        meta = self.metadata.get(group)
        return meta.initialized if meta else False

    def set_initialized(self, group: Group, value: bool) -> None:
        self._meta(group).initialized = value

    def _prepare_address(self, address: Address) -> None:
        page_group = address.page_group()
        if not self.is_initialized(page_group):
            _logger.debug('preparing new page %s', page_group)
            self.prepare_new_page(self, page_group)
            self.set_initialized(page_group, True)
        line_group = address.line_group()
        if not self.is_initialized(line_group):
            _logger.debug('preparing new line %s', line_group)
            self.prepare_new_line(self, line_group)
            self.set_initialized(line_group, True)

    def __repr__(self) -> str:
        return (
            f'PaletteData(len={len(self)}, cursor={self.address_cursor}, '
            f'bounds=({self.page_count}, {self.default_line_count}, {self.default_column_count}))'
        )
