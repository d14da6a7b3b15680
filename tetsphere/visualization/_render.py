"""Matplotlib rendering of a single tetrahedron inside the unit cube."""

import logging
import os

import numpy as np

from tetsphere._tetrahedron import FACE_INDICES, Tetrahedron

logger = logging.getLogger(__name__)

_DEFAULT_FIG_DIR = os.path.join('results', 'fig')

# RGB colours for vertices/faces and the origin marker
_BLUE = (0.0, 0.0, 1.0)
_RED = (1.0, 0.0, 0.0)


def _save_fig(fig, save_path, dpi=150):
    """Save *fig* to *save_path*, creating parent directories as needed."""
    parent = os.path.dirname(save_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    fig.savefig(save_path, dpi=dpi, bbox_inches='tight')
    logger.info("Figure saved to %s", save_path)


def _draw_scene(ax, tetra: Tetrahedron, face_alpha: float, title=None):
    from mpl_toolkits.mplot3d.art3d import Poly3DCollection

    pts = tetra.as_array()
    triangles = [pts[list(face)] for face in FACE_INDICES]

    ax.scatter([0.0], [0.0], [0.0], color=_RED, s=20)
    ax.scatter(pts[:, 0], pts[:, 1], pts[:, 2], color=_BLUE, s=20)
    pc = Poly3DCollection(
        triangles, facecolors=_BLUE + (face_alpha,), edgecolors=_BLUE,
        linewidths=0.6,
    )
    ax.add_collection3d(pc)

    ax.set_xlim(-1.0, 1.0)
    ax.set_ylim(-1.0, 1.0)
    ax.set_zlim(-1.0, 1.0)
    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.set_zlabel('z')
    if title:
        ax.set_title(title)
    return pc


def plot_tetrahedron(
    tetra: Tetrahedron,
    ax=None,
    inside: bool = None,
    face_alpha: float = 0.2,
    save_path: str = None,
    dpi: int = 150,
):
    """Static 3D plot of a tetrahedron, its vertices and the origin.

    Parameters
    ----------
    tetra : Tetrahedron
        Tetrahedron to draw.
    ax : mpl_toolkits.mplot3d.Axes3D or None
        If None, a new 3D figure is created.
    inside : bool or None
        If given, the title states whether the origin is contained.
    face_alpha : float
        Face transparency.
    save_path : str or None
        Save the figure here if given.
    dpi : int
        Resolution for the saved image.

    Returns
    -------
    fig, ax
    """
    import matplotlib.pyplot as plt

    if ax is None:
        fig = plt.figure()
        ax = fig.add_subplot(111, projection='3d')
    else:
        fig = ax.get_figure()

    title = None
    if inside is not None:
        title = 'origin inside' if inside else 'origin outside'
    _draw_scene(ax, tetra, face_alpha, title=title)

    if save_path is not None:
        _save_fig(fig, save_path, dpi=dpi)
    return fig, ax


def animate_tetrahedron(
    tetra: Tetrahedron,
    n_frames: int = 128,
    yaw_step: float = 0.05,
    fps: int = 30,
    face_alpha: float = 0.2,
    figsize: tuple = (5.12, 5.12),
    save_path: str = os.path.join(_DEFAULT_FIG_DIR, 'tetrahedron.gif'),
    dpi: int = 100,
):
    """Rotate the camera around a tetrahedron and optionally write a GIF.

    Parameters
    ----------
    tetra : Tetrahedron
        Tetrahedron to draw.
    n_frames : int
        Number of frames.
    yaw_step : float
        Camera azimuth increment per frame, in radians.
    fps : int
        Frames per second of the written file.
    face_alpha : float
        Face transparency.
    figsize : tuple
        Figure size in inches.
    save_path : str or None
        Output GIF path. Set to ``None`` to skip saving.
    dpi : int
        Resolution of the written frames.

    Returns
    -------
    anim : FuncAnimation
    """
    import matplotlib.pyplot as plt
    from matplotlib.animation import FuncAnimation, PillowWriter

    if n_frames < 1:
        raise ValueError(f"n_frames must be >= 1, got {n_frames}")

    fig = plt.figure(figsize=figsize)
    ax = fig.add_subplot(111, projection='3d')
    _draw_scene(ax, tetra, face_alpha)

    def update(frame):
        ax.view_init(elev=0.0, azim=float(np.degrees(yaw_step * frame)))
        return ()

    anim = FuncAnimation(fig, update, frames=n_frames,
                         interval=1000.0 / fps, blit=False)

    if save_path is not None:
        parent = os.path.dirname(save_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        anim.save(save_path, writer=PillowWriter(fps=fps), dpi=dpi)
        logger.info("Animation with %d frames saved to %s", n_frames, save_path)
    return anim
