"""Free vector helpers, angle conversion and float comparison shared by shapes."""

from physys.geombase.point import Point2D, Vector2D

# Truncated value kept for compatibility of rotated axes with existing data.
PI = 3.14159265359

# Absolute tolerance used for border classification.
EPSILON = 1e-5


def vector_from_A_to_B(A: Point2D, B: Point2D) -> Vector2D:
    """Displacement leading from point A to point B."""
    return B - A


def deg_to_radians(degrees: float) -> float:
    """Convert degrees to radians after wrapping the angle into [0, 360)."""
    return (degrees % 360.0) / 180.0 * PI


def nearly_equal(a: float, b: float) -> bool:
    return abs(a - b) < EPSILON
