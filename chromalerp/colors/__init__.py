"""
Color Classes
=============

Immutable signed 8-bit RGB colors.

>>> from chromalerp.colors import RGB, rgb_from_sequence
>>> RGB((12, 16, 24))
RGB { r: 12, g: 16, b: 24 }
>>> rgb_from_sequence([25.8, 300, -1.9])
RGB { r: 25, g: 44, b: -1 }

Notes
-----
- Instances are frozen after initialization
- The constructor rejects components outside [-128, 127]
- ``rgb_from_sequence`` narrows instead: truncate toward zero, then wrap
"""

from .color_base import ColorBase
from .rgb import ColorRGBI8, RGB, rgb_from_sequence


__all__ = ['ColorBase', 'ColorRGBI8', 'RGB', 'rgb_from_sequence']
