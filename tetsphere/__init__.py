"""
Monte Carlo estimation of the probability that four random points on the
unit sphere span a tetrahedron containing the sphere's center.

Submodules
----------
estimation    : serial/parallel Monte Carlo runners and EstimationRun
reporting     : console text for results
visualization : matplotlib plot and rotating animation of a tetrahedron
"""

from tetsphere._point import Point3, ORIGIN
from tetsphere._tetrahedron import Tetrahedron, FACE_INDICES
from tetsphere._sampling import (
    as_generator,
    random_point_on_sphere,
    gaussian_point_on_sphere,
    tetrahedron_on_sphere,
    available_samplers,
)
from tetsphere._containment import (
    SingularMatrixError,
    barycentric_coordinates,
    includes_point,
    includes_origin,
)

__all__ = [
    'Point3', 'ORIGIN',
    'Tetrahedron', 'FACE_INDICES',
    'as_generator', 'random_point_on_sphere', 'gaussian_point_on_sphere',
    'tetrahedron_on_sphere', 'available_samplers',
    'SingularMatrixError', 'barycentric_coordinates', 'includes_point',
    'includes_origin',
]
