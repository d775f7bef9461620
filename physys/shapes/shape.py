"""Shape capability shared by all planar shapes."""

from __future__ import annotations

from abc import ABC, abstractmethod

from physys.geombase.point import Point2D


class Shape(ABC):
    """
    Base class for planar shapes.

    A shape owns its center and answers point queries. Concrete shapes
    also provide value equality and ``copy()``; a circle would be built
    from center + radius and contain every point within radius of center.
    """

    __slots__ = ('center',)

    def __init__(self, center: Point2D | None = None):
        self.center = center.copy() if center is not None else Point2D()

    @abstractmethod
    def contains_point(self, point: Point2D) -> bool:
        """True if ``point`` lies inside the shape or on its border."""
