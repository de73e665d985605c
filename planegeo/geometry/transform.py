"""2D affine transforms."""

import math
from typing import Optional

import numpy as np

from .types import Point


class AffineTransform:
    """2D affine transform stored as a 3x3 homogeneous matrix.

    Points are column vectors [x, y, 1]^T, so `(t1 @ t2).apply(p)` applies
    t2 first.
    """

    def __init__(self, m: Optional[np.ndarray] = None):
        if m is None:
            self.m = np.eye(3, dtype=float)
        else:
            self.m = np.array(m, dtype=float).reshape(3, 3)

    def __matmul__(self, other: "AffineTransform") -> "AffineTransform":
        return AffineTransform(self.m @ other.m)

    def __eq__(self, other):
        if not isinstance(other, AffineTransform):
            return NotImplemented
        return bool(np.array_equal(self.m, other.m))

    __hash__ = None

    def __repr__(self):
        a, c, tx = self.m[0]
        b, d, ty = self.m[1]
        return f"AffineTransform(a={a}, b={b}, c={c}, d={d}, tx={tx}, ty={ty})"

    def apply(self, point: Point) -> Point:
        x, y, _ = self.m @ np.array([point.x, point.y, 1.0], dtype=float)
        return Point(float(x), float(y))

    __call__ = apply

    def inverted(self) -> "AffineTransform":
        """Inverse transform; raises numpy.linalg.LinAlgError when singular."""
        return AffineTransform(np.linalg.inv(self.m))

    @staticmethod
    def identity() -> "AffineTransform":
        return AffineTransform()

    @staticmethod
    def translation(tx: float, ty: float) -> "AffineTransform":
        m = np.eye(3)
        m[0, 2] = tx
        m[1, 2] = ty
        return AffineTransform(m)

    @staticmethod
    def scaling(sx: float, sy: Optional[float] = None) -> "AffineTransform":
        if sy is None:
            sy = sx
        m = np.eye(3)
        m[0, 0] = sx
        m[1, 1] = sy
        return AffineTransform(m)

    @staticmethod
    def rotation(angle: float, pivot: Optional[Point] = None) -> "AffineTransform":
        """Rotation by `angle` radians, counter-clockwise about `pivot`."""
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        r = AffineTransform([[cos_a, -sin_a, 0.0], [sin_a, cos_a, 0.0], [0.0, 0.0, 1.0]])
        if pivot is None:
            return r
        return AffineTransform.translation(pivot.x, pivot.y) @ r @ AffineTransform.translation(-pivot.x, -pivot.y)

    @staticmethod
    def matrix(a: float, b: float, c: float, d: float, tx: float, ty: float) -> "AffineTransform":
        """From the (a b c d tx ty) form: x' = a*x + c*y + tx, y' = b*x + d*y + ty."""
        return AffineTransform([[a, c, tx], [b, d, ty], [0.0, 0.0, 1.0]])
