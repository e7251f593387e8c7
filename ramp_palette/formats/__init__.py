"""Auto-discovery of palette format modules.

Every .py file in this package that defines a `palette_format` class is
auto-registered by ramp_palette.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in the frozen binary. Without them, pkgutil.iter_modules cannot find
the format files at runtime.
"""

# PyInstaller hidden imports: keep this list in sync with format modules
import ramp_palette.formats.default as _default  # noqa: F401
import ramp_palette.formats.zpl as _zpl  # noqa: F401
