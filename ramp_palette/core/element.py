"""Color elements and the Slot that holds one.

An element is either a zeroth-order color stored literally, or a derived
color built from other slots. Derived elements refer to their parents by
Address and resolve them through a lookup callable supplied by the owning
palette (normally PaletteData.slotmap.get), never by holding the parent
slot itself.

    ZerothOrder(color)                  order 0
    FirstOrder(parent, transform)       order 1 + order(parent)
    SecondOrder((a, b), blend)          order 1 + max(order(a), order(b))

A derived element whose parents are missing, unresolved, or part of a
reference cycle has no current color. Parents are walked with an explicit
stack, so chain length is not limited by the interpreter's recursion depth.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Union

from ramp_palette.core.address import Address
from ramp_palette.core.color import Color

Lookup = Callable[[Address], 'Slot | None']

# (current color, order) of one element
Resolved = tuple['Color | None', int]

_UNRESOLVED: Resolved = (None, 0)


def _no_lookup(address: Address) -> None:
    return None


def _resolve(root: _Element, lookup: Lookup) -> Resolved:
    """Color and order of root, evaluating ancestors depth-first without recursion.

    An address met again while still on the current path is a cycle and
    contributes no color and order 0, as does a missing parent.
    """
    if not root.parents:
        return root.combine(())

    done: dict[Address, Resolved] = {}
    on_path: set[Address] = set()
    # (address, element) entries; element is set once the address has been expanded
    stack: list[tuple[Address, _Element | None]] = [(p, None) for p in root.parents]
    while stack:
        address, element = stack.pop()
        if element is not None:
            on_path.discard(address)
            done[address] = element.combine(tuple(done.get(p, _UNRESOLVED) for p in element.parents))
            continue
        if address in done or address in on_path:
            continue
        slot = lookup(address)
        if slot is None:
            done[address] = _UNRESOLVED
            continue
        on_path.add(address)
        stack.append((address, slot.element))
        stack.extend((p, None) for p in slot.element.parents)

    return root.combine(tuple(done.get(p, _UNRESOLVED) for p in root.parents))


class _Element:
    parents: tuple[Address, ...]

    def combine(self, parents: tuple[Resolved, ...]) -> Resolved:
        raise NotImplementedError

    def order(self, lookup: Lookup = _no_lookup) -> int:
        return _resolve(self, lookup)[1]

    def current_color(self, lookup: Lookup = _no_lookup) -> Color | None:
        return _resolve(self, lookup)[0]


@dataclass(frozen=True)
class ZerothOrder(_Element):
    """A directly assigned color."""

    color: Color

    @property
    def parents(self) -> tuple[Address, ...]:
        return ()

    def combine(self, parents: tuple[Resolved, ...]) -> Resolved:
        return (self.color, 0)


@dataclass(frozen=True)
class FirstOrder(_Element):
    """A color computed from one parent slot."""

    parent: Address
    transform: Callable[[Color], Color]

    @property
    def parents(self) -> tuple[Address, ...]:
        return (self.parent,)

    def combine(self, parents: tuple[Resolved, ...]) -> Resolved:
        color, order = parents[0]
        return (self.transform(color) if color is not None else None, 1 + order)


@dataclass(frozen=True)
class SecondOrder(_Element):
    """A color computed from two parent slots."""

    parents: tuple[Address, Address]  # type: ignore[assignment]
    blend: Callable[[Color, Color], Color]

    def combine(self, parents: tuple[Resolved, ...]) -> Resolved:
        (first, first_order), (second, second_order) = parents
        order = 1 + max(first_order, second_order)
        if first is None or second is None:
            return (None, order)
        return (self.blend(first, second), order)


ColorElement = Union[ZerothOrder, FirstOrder, SecondOrder]


class Slot:
    """Mutable cell holding one ColorElement."""

    __slots__ = ('element',)

    def __init__(self, element: ColorElement):
        self.element = element

    def get_color(self, lookup: Lookup = _no_lookup) -> Color | None:
        return self.element.current_color(lookup)

    def get_order(self, lookup: Lookup = _no_lookup) -> int:
        return self.element.order(lookup)

    def replace(self, element: ColorElement) -> ColorElement:
        """Swap in a new element and return the previous one."""
        old = self.element
        self.element = element
        return old

    def __repr__(self) -> str:
        return f'Slot({self.element!r})'
