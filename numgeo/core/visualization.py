"""Matplotlib rendering of paths and their self-intersecting triads."""
from __future__ import annotations

import os as _os
import matplotlib as _mpl
# Ensure a non-interactive backend in headless environments before importing pyplot
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import matplotlib.pyplot as plt

from .logging_utils import get_logger

logger = get_logger('numgeo.viz')


def plot_path(path, outname="path.png", highlight_intersections=True, title=None):
    """Plot a path and save it to ``outname``.

    Args:
        path: Path-like with .points and .is_closed (and .self_intersection_indices()
            when highlighting)
        outname: output image path
        highlight_intersections: if True, mark the shared point of every intersecting
            adjacent-segment pair in red
        title: figure title; defaults to the class name and point count

    Returns:
        The output path.
    """
    pts = path.to_array()
    fig, ax = plt.subplots(figsize=(6, 6))
    if pts.shape[0] >= 1:
        xs = list(pts[:, 0])
        ys = list(pts[:, 1])
        if path.is_closed and pts.shape[0] >= 2:
            xs.append(pts[0, 0])
            ys.append(pts[0, 1])
        ax.plot(xs, ys, color=(0.2, 0.3, 0.8), linewidth=1.6)
        # Scale marker size down for dense point sets so points don't dominate
        s = max(0.6, min(12.0, 200.0 / float(pts.shape[0])))
        ax.scatter(pts[:, 0], pts[:, 1], s=s, color='black', zorder=3)
    hits = []
    if highlight_intersections and hasattr(path, 'self_intersection_indices'):
        hits = path.self_intersection_indices()
        if hits:
            ax.scatter(pts[hits, 0], pts[hits, 1], s=40, color=(0.85, 0.2, 0.2), zorder=4)
    ax.set_title(title or f"{type(path).__name__} ({pts.shape[0]} points, {len(hits)} intersecting triads)")
    ax.set_aspect('equal')
    fig.savefig(outname, dpi=150)
    plt.close(fig)
    logger.info("wrote %s (%d points, %d intersecting triads)", outname, pts.shape[0], len(hits))
    return outname


__all__ = ['plot_path']
