"""
Planar shapes with point containment queries.

Contains:
- Shape - base class declaring contains_point
- Rectangle - oriented rectangle
"""

from .shape import Shape
from .rectangle import Rectangle

__all__ = [
    'Shape',
    'Rectangle',
]
