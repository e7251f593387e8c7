"""Palette format auto-discovery and registration.

Scans ramp_palette/formats/ for modules that define a `palette_format`
attribute naming a PaletteFormat subclass. Collects them into a dict keyed
by the format's name.

Handles both normal Python (pkgutil.iter_modules) and frozen PyInstaller
binaries (where iter_modules returns nothing — falls back to explicit
imports from formats/__init__.py).
"""

import importlib
import pkgutil

from ramp_palette.core.format import PaletteFormat

_registry: dict[str, type[PaletteFormat]] = {}

# Known format module names, fallback for frozen binaries
_FORMAT_MODULES = [
    'default',
    'zpl',
]


def discover() -> dict[str, type[PaletteFormat]]:
    """Import all format modules and return the registry."""
    if _registry:
        return _registry

    import ramp_palette.formats as pkg

    # Try pkgutil first (works in normal Python)
    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]

    # Frozen binary fallback: pkgutil finds nothing, use known list
    if not found_modules:
        found_modules = _FORMAT_MODULES

    for modname in found_modules:
        module = importlib.import_module(f'ramp_palette.formats.{modname}')
        fmt = getattr(module, 'palette_format', None)
        if isinstance(fmt, type) and issubclass(fmt, PaletteFormat):
            _registry[fmt.name] = fmt

    return _registry


def get(name: str) -> type[PaletteFormat]:
    """Get a format class by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown format: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_formats() -> dict[str, type[PaletteFormat]]:
    """Return all registered formats."""
    return discover()


def for_path(path: str) -> type[PaletteFormat] | None:
    """Guess a format from a file extension, or None."""
    lowered = path.lower()
    for fmt in discover().values():
        if fmt.extension and lowered.endswith(fmt.extension):
            return fmt
    return None
