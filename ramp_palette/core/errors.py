"""Errors raised by palette store operations.

Every error is raised before the store is mutated, so catching one leaves
the palette exactly as it was.
"""

from __future__ import annotations

from ramp_palette.core.address import Address


class PaletteError(Exception):
    """Base class for palette store errors."""

    message = 'palette operation failed'

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class MaxCellLimitExceeded(PaletteError):
    message = 'maximum number of color slots for palette exceeded'


class CannotSetDerivedColor(PaletteError):
    message = 'cannot assign color to a location containing a derived color value'


class _AddressError(PaletteError):
    def __init__(self, address: Address):
        self.address = address
        super().__init__(f'{self.message}: {address}')


class InvalidAddress(_AddressError):
    message = 'address lies outside of allowed range'


class EmptyAddress(_AddressError):
    message = 'empty address provided to an operation requiring a color'


class AddressInUse(_AddressError):
    message = 'the address is in use'
