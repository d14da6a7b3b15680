"""
Random points and tetrahedra on the unit sphere.

Two samplers are registered:

``rotation``
    Start at the pole (0, 0, 1) and rotate about x, then y, then z by three
    independent angles drawn uniformly from [0, 360) degrees. This is the
    historical method. It always lands on the sphere but is not exactly
    uniform over the surface.
``gaussian``
    Normalize a standard-normal 3-vector, which is uniform on the sphere.

Every function takes the random source explicitly so runs can be seeded.

Usage
-----
    rng = as_generator(42)
    p = random_point_on_sphere(rng)
    tetra = tetrahedron_on_sphere(rng, method='gaussian')
"""

import numpy as np

from tetsphere._point import Point3
from tetsphere._registry import MethodRegistry
from tetsphere._tetrahedron import Tetrahedron

POLE = Point3(0.0, 0.0, 1.0)

sphere_samplers = MethodRegistry("sphere_sampler")


def as_generator(seed=None) -> np.random.Generator:
    """Return a ``numpy.random.Generator`` for a seed, a SeedSequence or a generator."""
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


@sphere_samplers.register("rotation")
def random_point_on_sphere(rng=None) -> Point3:
    """Sample a point on the unit sphere by composing three axis rotations.

    Parameters
    ----------
    rng : numpy.random.Generator, int or None
        Random source. ``None`` draws fresh OS entropy.

    Returns
    -------
    Point3
        A point with unit norm (up to round-off).
    """
    rng = as_generator(rng)
    p = POLE
    p = p.rotate_x(rng.uniform(0.0, 360.0))
    p = p.rotate_y(rng.uniform(0.0, 360.0))
    p = p.rotate_z(rng.uniform(0.0, 360.0))
    return p


@sphere_samplers.register("gaussian")
def gaussian_point_on_sphere(rng=None) -> Point3:
    """Sample a point uniformly on the unit sphere (Gaussian -> normalize)."""
    rng = as_generator(rng)
    v = rng.standard_normal(3)
    norm = np.linalg.norm(v)
    # A zero draw has probability zero; redraw rather than divide by zero.
    while norm == 0.0:
        v = rng.standard_normal(3)
        norm = np.linalg.norm(v)
    return Point3.from_array(v / norm)


def available_samplers() -> list[str]:
    return sphere_samplers.available()


def tetrahedron_on_sphere(rng=None, method: str = "rotation") -> Tetrahedron:
    """Four independent sphere samples, kept in draw order."""
    sample = sphere_samplers[method]
    rng = as_generator(rng)
    return Tetrahedron(sample(rng), sample(rng), sample(rng), sample(rng))
