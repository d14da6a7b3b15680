"""Immutable 3D point with right-handed axis rotations."""

from typing import NamedTuple

import numpy as np


class Point3(NamedTuple):
    """A point in 3D space.

    Every operation returns a new ``Point3``; equality is structural.
    Rotation angles are given in degrees.
    """
    x: float
    y: float
    z: float

    def rotate_x(self, theta: float) -> 'Point3':
        """Rotate about the x-axis by ``theta`` degrees."""
        sin, cos = _sincos(theta)
        return Point3(
            self.x,
            self.y * cos - self.z * sin,
            self.y * sin + self.z * cos,
        )

    def rotate_y(self, theta: float) -> 'Point3':
        """Rotate about the y-axis by ``theta`` degrees."""
        sin, cos = _sincos(theta)
        return Point3(
            self.x * cos + self.z * sin,
            self.y,
            -self.x * sin + self.z * cos,
        )

    def rotate_z(self, theta: float) -> 'Point3':
        """Rotate about the z-axis by ``theta`` degrees."""
        sin, cos = _sincos(theta)
        return Point3(
            self.x * cos - self.y * sin,
            self.x * sin + self.y * cos,
            self.z,
        )

    def __sub__(self, other: 'Point3') -> 'Point3':
        return Point3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> 'Point3':
        return Point3(-self.x, -self.y, -self.z)

    def norm(self) -> float:
        return float(np.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, a) -> 'Point3':
        a = np.asarray(a, dtype=np.float64).reshape(3)
        return cls(float(a[0]), float(a[1]), float(a[2]))


def _sincos(theta):
    rad = np.radians(theta)
    return float(np.sin(rad)), float(np.cos(rad))


ORIGIN = Point3(0.0, 0.0, 0.0)
