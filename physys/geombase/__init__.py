"""
Basic geometric classes (Geometric Base).

Contains:
- Point2D - a location in the plane
- Vector2D - a displacement or direction in the plane
- Pose2 - pose (position + orientation) in 2D space
"""

from .point import Point2D, Vector2D
from .pose2 import Pose2

__all__ = [
    'Point2D',
    'Vector2D',
    'Pose2',
]
