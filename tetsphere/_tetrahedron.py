"""Tetrahedron defined by four ordered vertices."""

from dataclasses import dataclass

import numpy as np

from tetsphere._point import Point3

# Every 3-subset of the four vertices, i.e. the four triangular faces.
FACE_INDICES = ((0, 1, 2), (0, 1, 3), (0, 2, 3), (1, 2, 3))


@dataclass(frozen=True)
class Tetrahedron:
    """Four vertices ``p0..p3``.

    The order matters only in that ``p0`` is the reference vertex of the
    barycentric transformation; any order describes the same solid.
    """
    p0: Point3
    p1: Point3
    p2: Point3
    p3: Point3

    def points(self) -> tuple:
        return (self.p0, self.p1, self.p2, self.p3)

    def barycentric_matrix(self) -> np.ndarray:
        """Transformation matrix into the barycentric frame of ``p0``.

        Returns
        -------
        M : ndarray of shape (3, 3)
            Columns are the edge vectors ``p1 - p0``, ``p2 - p0`` and
            ``p3 - p0``, so ``M[i, j]`` is coordinate ``i`` of
            ``p[j + 1] - p0``.
        """
        p0 = self.p0
        return np.array([
            [self.p1.x - p0.x, self.p2.x - p0.x, self.p3.x - p0.x],
            [self.p1.y - p0.y, self.p2.y - p0.y, self.p3.y - p0.y],
            [self.p1.z - p0.z, self.p2.z - p0.z, self.p3.z - p0.z],
        ], dtype=np.float64)

    def faces(self) -> list:
        """The four triangular faces as triples of ``(x, y, z)`` tuples."""
        pts = self.points()
        return [tuple(tuple(pts[i]) for i in face) for face in FACE_INDICES]

    def volume(self) -> float:
        """Signed volume, positive when ``p1, p2, p3`` wind right-handed about ``p0``."""
        return float(np.linalg.det(self.barycentric_matrix()) / 6.0)

    def is_degenerate(self, tol: float = 1e-12) -> bool:
        """True if the vertices are (numerically) coplanar."""
        return abs(self.volume()) <= tol

    def as_array(self) -> np.ndarray:
        return np.array([tuple(p) for p in self.points()], dtype=np.float64)

    @classmethod
    def from_array(cls, a) -> 'Tetrahedron':
        a = np.asarray(a, dtype=np.float64)
        if a.shape != (4, 3):
            raise ValueError(f"Tetrahedron needs a (4, 3) array, got shape {a.shape}")
        return cls(*(Point3.from_array(row) for row in a))
