"""
paintcolor colors
=================

The Color value type and its compact literal constructor.

>>> from paintcolor.colors import Color, color
>>> Color.from_hex("#F80").into_rgba8()
(255, 136, 0, 255)
>>> color(0x123) == color(0x112233)
True
>>> Color.from_rgb(0.25, 0.5, 1.0).inverse().into_rgba8()
(191, 128, 0, 255)
"""

from .color import Color, BLACK, WHITE, TRANSPARENT
from .literal import color, from_channels, from_packed

__all__ = [
    'Color',
    'BLACK',
    'WHITE',
    'TRANSPARENT',
    'color',
    'from_channels',
    'from_packed',
]
