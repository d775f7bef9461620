"""Point2D and Vector2D - coordinate pairs in a right-handed, Y-up plane.

Both types share one representation but play different roles:
a Point2D is a location, a Vector2D is a displacement or a direction.
They never compare equal to each other and arithmetic only combines them
in geometrically meaningful ways:

    Point2D - Point2D  -> Vector2D
    Point2D + Vector2D -> Point2D
    Vector2D +/- Vector2D -> Vector2D
"""

import math
import numbers
import numpy


class _Coord2:
    """Two read-only float coordinates. Base for Point2D and Vector2D."""

    __slots__ = ('_x', '_y')

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self._x = float(x)
        self._y = float(y)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def copy(self):
        return type(self)(self.x, self.y)

    def __copy__(self):
        return self.copy()

    def to_numpy(self) -> numpy.ndarray:
        """Coordinates as a float64 array of shape (2,)."""
        return numpy.array([self.x, self.y], dtype=numpy.float64)

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other):
        # Exact comparison, no tolerance.
        if type(other) is not type(self):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((type(self).__name__, self.x, self.y))

    def __repr__(self):
        return f"{type(self).__name__}(x={self.x}, y={self.y})"


class Point2D(_Coord2):
    """A location in the plane."""

    __slots__ = ()

    def __sub__(self, other: "Point2D") -> "Vector2D":
        if not isinstance(other, Point2D):
            return NotImplemented
        return Vector2D(self.x - other.x, self.y - other.y)

    def __add__(self, other: "Vector2D") -> "Point2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Point2D(self.x + other.x, self.y + other.y)


class Vector2D(_Coord2):
    """A displacement or direction in the plane."""

    __slots__ = ()

    def dot_product(self, other: "Vector2D") -> float:
        """Euclidean dot product.

        With a unit ``other`` this is the signed length of the projection
        of self onto that axis.
        """
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def __add__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Vector2D(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Vector2D":
        return self.__mul__(scalar)
