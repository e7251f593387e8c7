"""Per-group metadata record."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Metadata:
    """Auxiliary data for a Group. A missing entry behaves like Metadata()."""

    label: str | None = None  # format label, e.g. 'ZplPalette 1.0.0'
    name: str | None = None
    initialized: bool = False  # prepare hook already fired for this group

    def __str__(self) -> str:
        parts = [p for p in (self.label, self.name) if p]
        return ' '.join(parts)
