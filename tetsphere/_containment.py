"""
Point-in-tetrahedron test via barycentric coordinates.

A point ``q`` is written relative to the reference vertex ``p0`` as

    q - p0 = t1 (p1 - p0) + t2 (p2 - p0) + t3 (p3 - p0)

which is the 3x3 system ``M t = q - p0`` with ``M`` from
``Tetrahedron.barycentric_matrix``. With ``t0 = 1 - t1 - t2 - t3`` the point
lies in the closed tetrahedron iff all four weights are in [0, 1].
"""

import numpy as np
import scipy.linalg

from tetsphere._point import ORIGIN, Point3
from tetsphere._tetrahedron import Tetrahedron


class SingularMatrixError(np.linalg.LinAlgError):
    """The barycentric matrix of a tetrahedron cannot be inverted.

    Happens when the four vertices are affinely dependent (coplanar).

    Attributes
    ----------
    tetrahedron : Tetrahedron
        The degenerate tetrahedron.
    trial : int or None
        1-based trial index when raised during a Monte Carlo run.
    """

    def __init__(self, tetrahedron: Tetrahedron, trial=None):
        self.tetrahedron = tetrahedron
        self.trial = trial
        super().__init__(self._message())

    def _message(self) -> str:
        msg = f"Singular barycentric matrix for degenerate tetrahedron {self.tetrahedron}"
        if self.trial is not None:
            msg = f"Trial {self.trial}: {msg}"
        return msg

    def __reduce__(self):
        # Rebuild from fields, not the message, when crossing process boundaries.
        return (SingularMatrixError, (self.tetrahedron, self.trial))

    def at_trial(self, trial: int) -> 'SingularMatrixError':
        """Copy of this error tagged with a trial index."""
        return SingularMatrixError(self.tetrahedron, trial=trial)


def barycentric_coordinates(tetra: Tetrahedron, point: Point3 = ORIGIN) -> np.ndarray:
    """Solve for the weights ``(t1, t2, t3)`` of ``point`` relative to ``p0``.

    Parameters
    ----------
    tetra : Tetrahedron
        The tetrahedron.
    point : Point3
        Query point (default: the origin, giving right-hand side ``-p0``).

    Returns
    -------
    t : ndarray of shape (3,)

    Raises
    ------
    SingularMatrixError
        If the barycentric matrix is singular.
    """
    M = tetra.barycentric_matrix()
    b = (point - tetra.p0).as_array()
    try:
        return scipy.linalg.solve(M, b)
    except scipy.linalg.LinAlgError as err:
        raise SingularMatrixError(tetra) from err


def includes_point(tetra: Tetrahedron, point: Point3) -> bool:
    """Whether ``point`` lies in the closed tetrahedron (boundary counts)."""
    t = barycentric_coordinates(tetra, point)
    return bool(
        t[0] >= 0.0 and t[0] <= 1.0
        and t[1] >= 0.0 and t[1] <= 1.0 - t[0]
        and t[2] >= 0.0 and t[2] <= 1.0 - t[0] - t[1]
    )


def includes_origin(tetra: Tetrahedron) -> bool:
    """Whether the origin lies in the closed tetrahedron."""
    return includes_point(tetra, ORIGIN)
