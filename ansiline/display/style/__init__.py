# display/style/__init__.py

from .definitions import (
    Color,
    Font,
    Style,
    NamedColor,
    IndexedColor,
    RgbColor,
    ColorVariant,
    DEFAULT_COLOR,
    to_color_variant,
)

__all__ = [
    'Color',
    'Font',
    'Style',
    'NamedColor',
    'IndexedColor',
    'RgbColor',
    'ColorVariant',
    'DEFAULT_COLOR',
    'to_color_variant',
]
