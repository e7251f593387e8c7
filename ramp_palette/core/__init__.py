"""ramp_palette.core — Foundation layer.

Contains addresses, colors, elements, the PaletteData store, the format
contract, and the text/JSON/swatch renderers.
This module has NO dependencies on ramp_palette.formats or ramp_palette.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
