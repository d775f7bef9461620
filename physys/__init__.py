"""
physys - 2D geometry primitives for shape queries.

Main modules:
- geombase - basic geometric classes (Point2D, Vector2D, Pose2)
- shapes - shapes with point containment (Shape, Rectangle)
- util - vector helpers, angle conversion, float comparison
"""

from .geombase import Point2D, Vector2D, Pose2
from .shapes import Shape, Rectangle
from .util import vector_from_A_to_B, deg_to_radians, nearly_equal

__version__ = '0.1.0'

__all__ = [
    # Geombase
    'Point2D',
    'Vector2D',
    'Pose2',
    # Shapes
    'Shape',
    'Rectangle',
    # Util
    'vector_from_A_to_B',
    'deg_to_radians',
    'nearly_equal',
]
