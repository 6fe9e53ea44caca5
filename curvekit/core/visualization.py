"""Plotting helpers for edge sequences and polylines.

Kept out of the geometry modules so that importing curvekit never pulls in
pyplot.
"""
from __future__ import annotations

import os as _os
import matplotlib as _mpl
# Ensure a non-interactive backend in headless environments before importing pyplot
if not _os.environ.get('MPLBACKEND'):
    try:
        _mpl.use('Agg')
    except Exception:
        pass
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import PathPatch

from .curves import CubicBezier, QuadCurve
from .logging_utils import get_logger
from .path import edges_to_path

logger = get_logger('curvekit.viz')


def plot_edges(
    edges,
    outname="edges.png",
    polyline=None,
    show_control_points: bool = True,
    title=None,
):
    """Draw a curvilinear edge sequence to an image file.

    Args:
        edges: CurvilinearEdges to stroke
        outname: output image path
        polyline: optional source Polyline, drawn dashed underneath
        show_control_points: if True, draw Bezier control handles
        title: figure title (defaults to ``outname``)
    """
    plt.figure(figsize=(6, 6))
    ax = plt.gca()
    if polyline is not None and len(polyline) >= 2:
        pts = polyline.as_array()
        ax.plot(pts[:, 0], pts[:, 1], linestyle='--', color=(0.6, 0.6, 0.6), linewidth=1.0)
        ax.scatter(pts[:, 0], pts[:, 1], s=8, color='black')
    if len(edges) == 0:
        plt.title('empty edge sequence')
        plt.savefig(outname, dpi=150)
        plt.close()
        logger.info('Wrote %s (no edges)', outname)
        return
    ax.add_patch(PathPatch(edges_to_path(edges), fill=False, edgecolor=(0.85, 0.2, 0.2), linewidth=1.8))
    if show_control_points:
        for edge in edges:
            if isinstance(edge, CubicBezier):
                handles = [(edge.origin, edge.origin_control_point), (edge.end, edge.end_control_point)]
            elif isinstance(edge, QuadCurve):
                handles = [(edge.origin, edge.control_point), (edge.end, edge.control_point)]
            else:
                continue
            for a, b in handles:
                ax.plot([a.x, b.x], [a.y, b.y], color=(0.2, 0.4, 0.85), linewidth=0.6)
                ax.scatter([b.x], [b.y], s=6, color=(0.2, 0.4, 0.85))
    box = edges.bounding_box
    if polyline is not None and len(polyline) >= 1:
        box = box.union(polyline.bounding_box)
    pad = 0.05 * max(box.width, box.height, 1.0)
    ax.set_xlim(box.min_x - pad, box.max_x + pad)
    ax.set_ylim(box.min_y - pad, box.max_y + pad)
    ax.set_aspect('equal')
    plt.title(title if title is not None else outname)
    plt.savefig(outname, dpi=150)
    plt.close()
    logger.info('Wrote %s (%d edges)', outname, len(edges))


def plot_polyline(polyline, outname="polyline.png", closed: bool = False):
    """Draw the raw vertex chain, closing it when ``closed``."""
    pts = np.asarray(polyline.as_array())
    plt.figure(figsize=(6, 6))
    if pts.shape[0] >= 1:
        if closed and pts.shape[0] >= 2:
            pts = np.vstack([pts, pts[:1]])
        plt.plot(pts[:, 0], pts[:, 1], color=(0.85, 0.2, 0.2), linewidth=1.8)
        plt.scatter(pts[:, 0], pts[:, 1], s=8, color='black')
    plt.gca().set_aspect('equal')
    plt.title(outname)
    plt.savefig(outname, dpi=150)
    plt.close()
    logger.info('Wrote %s (%d vertices)', outname, len(polyline))
