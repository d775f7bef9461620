"""Rectangle - oriented rectangle with point containment."""

from __future__ import annotations

import math
import numpy

from physys import log
from physys.geombase.point import Point2D, Vector2D
from physys.geombase.pose2 import Pose2
from physys.shapes.shape import Shape
from physys.util import EPSILON, deg_to_radians, nearly_equal, vector_from_A_to_B


class Rectangle(Shape):
    """
    Oriented rectangle.

    Parameters:
        center: Center of the rectangle
        half_extents_major: Half-width along axis_major
        half_extents_minor: Half-width along axis_minor
        rotation: Counter-clockwise rotation in degrees. None keeps the
            rectangle aligned with world X / Y.

    Half-extents are stored as absolute values. axis_major and axis_minor
    are orthonormal.
    """

    __slots__ = ('half_extents_major', 'half_extents_minor', 'axis_major', 'axis_minor')

    def __init__(
        self,
        center: Point2D,
        half_extents_major: float,
        half_extents_minor: float,
        rotation: float | None = None,
    ):
        super().__init__(center)

        if half_extents_major < 0 or half_extents_minor < 0:
            log.debug(
                f"Rectangle: negative half-extents ({half_extents_major}, {half_extents_minor}) "
                f"taken by absolute value")
        self.half_extents_major = abs(float(half_extents_major))
        self.half_extents_minor = abs(float(half_extents_minor))
        if self.half_extents_major == 0.0 or self.half_extents_minor == 0.0:
            log.debug(f"Rectangle: degenerate rectangle at {self.center}")

        self.axis_major = Vector2D(1.0, 0.0)
        self.axis_minor = Vector2D(0.0, 1.0)

        if rotation is not None:
            rot_radians = deg_to_radians(rotation)
            self.axis_major = Vector2D(math.cos(rot_radians), math.sin(rot_radians))
            self.axis_minor = Vector2D(-math.sin(rot_radians), math.cos(rot_radians))

    @staticmethod
    def from_corners(bottom_left: Point2D, top_right: Point2D) -> "Rectangle":
        """Axis-aligned rectangle spanned by two opposite corners."""
        diagonal = vector_from_A_to_B(bottom_left, top_right)
        center = Point2D(bottom_left.x + diagonal.x / 2.0, bottom_left.y + diagonal.y / 2.0)
        return Rectangle(center, abs(diagonal.x / 2.0), abs(diagonal.y / 2.0))

    def copy(self) -> "Rectangle":
        """Create a copy of the Rectangle."""
        result = type(self).__new__(type(self))
        result.assign(self)
        return result

    def __copy__(self):
        return self.copy()

    def assign(self, other: "Rectangle"):
        """Overwrite all fields with those of ``other``."""
        if not isinstance(other, Rectangle):
            raise TypeError("Can only assign Rectangle to Rectangle")
        self.center = other.center.copy()
        self.half_extents_major = other.half_extents_major
        self.half_extents_minor = other.half_extents_minor
        self.axis_major = other.axis_major.copy()
        self.axis_minor = other.axis_minor.copy()

    def __eq__(self, other):
        if not isinstance(other, Rectangle):
            return NotImplemented
        return (self.center == other.center
                and self.half_extents_major == other.half_extents_major
                and self.half_extents_minor == other.half_extents_minor
                and self.axis_major == other.axis_major
                and self.axis_minor == other.axis_minor)

    def contains_point(self, point: Point2D) -> bool:
        vec_center_pt = vector_from_A_to_B(self.center, point)
        magnitude_major = abs(vec_center_pt.dot_product(self.axis_major))
        magnitude_minor = abs(vec_center_pt.dot_product(self.axis_minor))

        if magnitude_major <= self.half_extents_major and magnitude_minor <= self.half_extents_minor:
            return True

        # Point at the border, within float rounding on both axes
        if (nearly_equal(magnitude_major, self.half_extents_major)
                and nearly_equal(magnitude_minor, self.half_extents_minor)):
            return True

        # At the border of one axis only
        if nearly_equal(magnitude_major, self.half_extents_major) and magnitude_minor <= self.half_extents_minor:
            return True
        if magnitude_major <= self.half_extents_major and nearly_equal(magnitude_minor, self.half_extents_minor):
            return True

        return False

    def contains_points(self, points) -> numpy.ndarray:
        """
        Batch form of contains_point.

        points: array-like of shape (N, 2)
        Returns a boolean array of shape (N,). Every entry equals
        contains_point of the corresponding row.
        """
        pts = numpy.asarray(points, dtype=numpy.float64)
        if pts.ndim != 2 or pts.shape[1] != 2:
            raise ValueError("points must have shape (N, 2)")

        dx = pts[:, 0] - self.center.x
        dy = pts[:, 1] - self.center.y
        magnitude_major = numpy.abs(dx * self.axis_major.x + dy * self.axis_major.y)
        magnitude_minor = numpy.abs(dx * self.axis_minor.x + dy * self.axis_minor.y)

        inside_major = magnitude_major <= self.half_extents_major
        inside_minor = magnitude_minor <= self.half_extents_minor
        border_major = numpy.abs(magnitude_major - self.half_extents_major) < EPSILON
        border_minor = numpy.abs(magnitude_minor - self.half_extents_minor) < EPSILON

        return ((inside_major & inside_minor)
                | (border_major & border_minor)
                | (border_major & inside_minor)
                | (inside_major & border_minor))

    def pose(self) -> Pose2:
        """Pose mapping rectangle-local coordinates to world coordinates."""
        ang = math.atan2(self.axis_major.y, self.axis_major.x)
        return Pose2(ang=ang, lin=self.center)

    def corners(self) -> numpy.ndarray:
        """Corners, shape (4, 2), counter-clockwise from (-major, -minor)."""
        c = self.center.to_numpy()
        a = self.axis_major.to_numpy() * self.half_extents_major
        b = self.axis_minor.to_numpy() * self.half_extents_minor
        return numpy.array([
            c - a - b,
            c + a - b,
            c + a + b,
            c - a + b,
        ])

    def __repr__(self):
        return (f"Rectangle(center={self.center}, "
                f"half_extents=({self.half_extents_major}, {self.half_extents_minor}), "
                f"axis_major={self.axis_major}, axis_minor={self.axis_minor})")
