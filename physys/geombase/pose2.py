import math
import numpy

from physys.geombase.point import Point2D, Vector2D
from physys.util import deg_to_radians


def _as_array(value, what: str) -> numpy.ndarray:
    if isinstance(value, (Point2D, Vector2D)):
        return value.to_numpy()
    arr = numpy.asarray(value, dtype=numpy.float64)
    if arr.shape != (2,):
        raise ValueError(f"{what} must be a 2D vector")
    return arr


class Pose2:
    """A 2D Pose represented by rotation angle and translation vector.

    Points and vectors may be passed either as Point2D / Vector2D or as
    array-likes of shape (2,). The result has the same kind as the argument.
    """

    def __init__(self, ang: float = 0.0, lin=None):
        """
        Args:
            ang: Rotation angle in radians
            lin: Translation vector [x, y]
        """
        if lin is None:
            lin = numpy.array([0.0, 0.0])
        self.ang = float(ang)
        self.lin = _as_array(lin, "lin")
        self._rot_matrix = None  # Lazy computation
        self._mat = None  # Lazy computation

    @staticmethod
    def identity() -> 'Pose2':
        """Create an identity pose (no rotation, no translation)."""
        return Pose2(ang=0.0, lin=numpy.array([0.0, 0.0]))

    @staticmethod
    def rotation(angle: float) -> 'Pose2':
        """Create a rotation pose by a given angle."""
        return Pose2(ang=angle)

    @staticmethod
    def translation(x: float, y: float) -> 'Pose2':
        """Create a translation pose."""
        return Pose2(ang=0.0, lin=numpy.array([x, y]))

    @staticmethod
    def rotation_about(center: Point2D, degrees: float) -> 'Pose2':
        """Rotation by ``degrees`` counter-clockwise about ``center``.

        The angle is converted with deg_to_radians, the same conversion
        rotated rectangles use for their axes.
        """
        c = _as_array(center, "center")
        return (Pose2.translation(c[0], c[1])
                * Pose2.rotation(deg_to_radians(degrees))
                * Pose2.translation(-c[0], -c[1]))

    def rotation_matrix(self) -> numpy.ndarray:
        """Get the 2x2 rotation matrix corresponding to the pose's orientation."""
        if self._rot_matrix is None:
            c = math.cos(self.ang)
            s = math.sin(self.ang)
            self._rot_matrix = numpy.array([
                [c, -s],
                [s,  c]
            ])
        return self._rot_matrix

    def as_matrix(self) -> numpy.ndarray:
        """Get the 3x3 homogeneous transformation matrix."""
        if self._mat is None:
            self._mat = numpy.eye(3)
            self._mat[:2, :2] = self.rotation_matrix()
            self._mat[:2, 2] = self.lin
        return self._mat

    def inverse(self) -> 'Pose2':
        """Compute the inverse of the pose."""
        R = self.rotation_matrix()
        return Pose2(-self.ang, R.T @ -self.lin)

    def transform_point(self, point):
        """Transform a 2D point using the pose."""
        p = self.rotation_matrix() @ _as_array(point, "point") + self.lin
        if isinstance(point, Point2D):
            return Point2D(p[0], p[1])
        return p

    def transform_vector(self, vector):
        """Transform a 2D vector using the pose (ignoring translation)."""
        v = self.rotation_matrix() @ _as_array(vector, "vector")
        if isinstance(vector, Vector2D):
            return Vector2D(v[0], v[1])
        return v

    def inverse_transform_point(self, point):
        """Transform a 2D point using the inverse of the pose."""
        p = self.rotation_matrix().T @ (_as_array(point, "point") - self.lin)
        if isinstance(point, Point2D):
            return Point2D(p[0], p[1])
        return p

    def __mul__(self, other: 'Pose2') -> 'Pose2':
        """Compose this pose with another pose."""
        if not isinstance(other, Pose2):
            raise TypeError("Can only multiply Pose2 with Pose2")
        new_lin = self.lin + self.rotation_matrix() @ other.lin
        return Pose2(ang=self.ang + other.ang, lin=new_lin)

    def __repr__(self):
        return f"Pose2(ang={self.ang}, lin={self.lin})"
