"""Visualization of sampled tetrahedra.

Submodules
----------
_render : static 3D plot and rotating GIF animation (matplotlib)
"""

from tetsphere.visualization._render import (
    plot_tetrahedron,
    animate_tetrahedron,
)

__all__ = [
    'plot_tetrahedron',
    'animate_tetrahedron',
]
