"""Corner-rounding engine: turn a polyline into straight runs joined by Beziers.

Two strategies are provided:

``rounded_corners``
    Each interior corner is cut back by a *reach* along its two edges and the
    gap is bridged with one cubic Bezier. Reaches are negotiated so that two
    corners never claim more of a shared edge than it has: corners are
    decided from the one with the shortest edge upward, and a corner next to
    an already decided one only gets what that neighbour left over.

``bezier_corners``
    Fixed-radius fillets. Every interior vertex is replaced by a split point
    on its angle bisector and the whole chain becomes a run of cubic Beziers
    tangent to the local edge directions.

Neither function raises: requested distances are clamped to what the
geometry can hold, and negative distances are treated as zero.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Union

import numpy as np

from .config import BezierCornerConfig, RoundingConfig
from .constants import EPS_DEFAULT, EPS_DEGENERATE
from .curves import CubicBezier
from .edges import CurvilinearEdges
from .linear import Segment
from .logging_utils import get_logger
from .point import Point
from .polyline import Polyline
from .scalar import is_equal, is_greater_than_zero, is_less, is_less_or_equal
from .stats import RoundingStats

logger = get_logger('curvekit.rounding')

__all__ = ['rounded_corners', 'bezier_corners', 'round_polyline', 'corner_reaches']


def _as_polyline(vertices) -> Polyline:
    if isinstance(vertices, Polyline):
        return vertices
    return Polyline(vertices)


def _is_straight(origin: Point, corner: Point, end: Point, tol: float) -> bool:
    return is_equal(origin.length(end), origin.length(corner) + corner.length(end), tol)


def _direction(start: Point, stop: Point) -> Point:
    """Unit vector from ``start`` to ``stop``; zero when they coincide."""
    length = start.length(stop)
    if length <= EPS_DEGENERATE:
        return Point(0.0, 0.0)
    return (stop - start) * (1.0 / length)


def corner_reaches(triplets, point_distance: float, tol: float = EPS_DEFAULT) -> List[float]:
    """Reach of every triplet of a duplicate-free polyline.

    Triplets are visited in stable order of their shorter edge. A straight
    triplet gets 0. Otherwise the reach is the smallest of ``point_distance``
    and what each side allows: the leftover of an already decided neighbour,
    half of an edge shared with an undecided neighbour, or the whole edge when
    it is the polyline's first or last edge and the shorter of the two.
    """
    point_distance = max(0.0, point_distance)
    count = len(triplets)
    first_lengths = [o.length(c) for o, c, _ in triplets]
    second_lengths = [c.length(e) for _, c, e in triplets]
    min_lengths = [min(a, b) for a, b in zip(first_lengths, second_lengths)]

    reaches: Dict[int, float] = {}
    for index in sorted(range(count), key=lambda i: min_lengths[i]):
        origin, corner, end = triplets[index]
        oc, ce = first_lengths[index], second_lengths[index]
        prev_reach = reaches.get(index - 1)
        next_reach = reaches.get(index + 1)
        first_is_terminal = index == 0 and is_less_or_equal(oc, ce, tol)
        last_is_terminal = index == count - 1 and is_less_or_equal(ce, oc, tol)

        if _is_straight(origin, corner, end, tol):
            reach = 0.0
        elif prev_reach is not None and next_reach is not None:
            reach = min(oc - prev_reach, ce - next_reach, point_distance)
        elif next_reach is not None:
            reach = min(oc / (1.0 if first_is_terminal else 2.0), ce - next_reach, point_distance)
        elif prev_reach is not None:
            reach = min(oc - prev_reach, ce / (1.0 if last_is_terminal else 2.0), point_distance)
        else:
            divisor = 1.0 if (first_is_terminal or last_is_terminal) else 2.0
            reach = min(point_distance, min_lengths[index] / divisor)
        reaches[index] = max(0.0, reach)

    return [reaches[i] for i in range(count)]


def rounded_corners(vertices, point_distance: float, control_point_distance: float,
                    tol: float = EPS_DEFAULT, stats: Optional[RoundingStats] = None) -> CurvilinearEdges:
    """Replace every corner of ``vertices`` with a cubic Bezier.

    Parameters
    ----------
    vertices : Polyline or sequence of Point
    point_distance : float
        Requested reach: how far from the corner, along each edge, the curve
        starts and ends.
    control_point_distance : float
        How far the control points sit from the curve ends, back toward the
        corner. Never more than the corner's reach.
    tol : float
        Tolerance for the straightness and length tests.
    stats : RoundingStats, optional
        Filled with counters when given.

    Returns
    -------
    CurvilinearEdges
        Empty for a zero-length input, a single Segment for one edge.
    """
    result = CurvilinearEdges()
    polyline = _as_polyline(vertices).without_duplicate_points(tol)
    if not is_greater_than_zero(polyline.length, tol):
        return result
    edges = polyline.edges
    if len(edges) == 1:
        result.add_linear_edge(edges[0])
        if stats is not None:
            stats.edges_emitted += 1
        return result

    point_distance = max(0.0, point_distance)
    control_point_distance = max(0.0, control_point_distance)
    triplets = polyline.triplets
    reaches = corner_reaches(triplets, point_distance, tol)
    logger.debug("corner reaches: %s", ', '.join(f"{r:.4g}" for r in reaches))

    for index, (origin, corner, end) in enumerate(triplets):
        straight_corner = _is_straight(origin, corner, end, tol)
        reach = reaches[index]
        prev_reach = reaches[index - 1] if index > 0 else 0.0
        control_distance = min(control_point_distance, reach)
        d_in = _direction(origin, corner)
        d_out = _direction(corner, end)

        run_start = origin + d_in * prev_reach
        curve_origin = corner - d_in * reach
        curve_end = corner + d_out * reach

        if is_greater_than_zero(run_start.length(curve_origin), tol):
            result.add_linear_edge(Segment(run_start, curve_origin))
        if not straight_corner:
            result.add_bezier_edge(CubicBezier(
                curve_origin,
                curve_origin + d_in * control_distance,
                curve_end - d_out * control_distance,
                curve_end,
            ))
        if index == len(triplets) - 1 and is_greater_than_zero(curve_end.length(end), tol):
            result.add_linear_edge(Segment(curve_end, end))

        if stats is not None:
            stats.triplets += 1
            if straight_corner:
                stats.straight_triplets += 1
            else:
                stats.record_reach(reach)
                if is_less(reach, point_distance, tol):
                    stats.clamped_corners += 1

    emitted = result.edge_count
    pruned = result.remove_redundant_edges(tol)
    if stats is not None:
        stats.edges_emitted += emitted
        stats.edges_pruned += pruned
    return result


def _unit_rows(vectors: np.ndarray) -> np.ndarray:
    norms = np.linalg.norm(vectors, axis=1)
    out = np.zeros_like(vectors)
    ok = norms > EPS_DEGENERATE
    out[ok] = vectors[ok] / norms[ok, None]
    return out


def bezier_corners(vertices, radius: float, control_point_distance: float,
                   tol: float = EPS_DEFAULT, stats: Optional[RoundingStats] = None) -> CurvilinearEdges:
    """Fillet every interior vertex with a fixed radius.

    Each interior vertex moves to a split point at ``radius`` along its
    interior bisector (radius capped at half the shorter incident edge). The
    chain ``v0 -> split_1 -> ... -> split_n -> v_last`` is then drawn with
    cubic Beziers whose control points sit ``control_point_distance`` along
    the local tangent from each end.
    """
    result = CurvilinearEdges()
    polyline = _as_polyline(vertices).without_duplicate_points(tol)
    n = len(polyline)
    if n < 2:
        return result
    if n == 2:
        result.add_linear_edge(polyline.edges[0])
        if stats is not None:
            stats.edges_emitted += 1
        return result

    radius = max(0.0, radius)
    control_point_distance = max(0.0, control_point_distance)
    pts = polyline.as_array()
    diffs = np.diff(pts, axis=0)
    lengths = np.linalg.norm(diffs, axis=1)
    dirs = _unit_rows(diffs)

    d_in, d_out = dirs[:-1], dirs[1:]
    bisectors = _unit_rows(d_out - d_in)
    tangents = _unit_rows(d_in + d_out)
    # a full reversal has no tangent sum; follow the outgoing edge
    reversed_rows = np.linalg.norm(d_in + d_out, axis=1) <= EPS_DEGENERATE
    tangents[reversed_rows] = d_out[reversed_rows]
    radii = np.minimum(radius, np.minimum(lengths[:-1], lengths[1:]) / 2.0)

    anchors = [pts[0]]
    anchor_tangents = [dirs[0]]
    for i in range(n - 2):
        corner = pts[i + 1]
        straight = _is_straight(Point(*pts[i]), Point(*corner), Point(*pts[i + 2]), tol)
        if straight or not np.any(bisectors[i]):
            anchors.append(corner)
        else:
            anchors.append(corner + radii[i] * bisectors[i])
        anchor_tangents.append(tangents[i])
        if stats is not None:
            stats.triplets += 1
            if straight:
                stats.straight_triplets += 1
            else:
                stats.record_reach(float(radii[i]))
                if is_less(float(radii[i]), radius, tol):
                    stats.clamped_corners += 1
    anchors.append(pts[-1])
    anchor_tangents.append(dirs[-1])

    for k in range(len(anchors) - 1):
        p, q = anchors[k], anchors[k + 1]
        c1 = p + control_point_distance * anchor_tangents[k]
        c2 = q - control_point_distance * anchor_tangents[k + 1]
        result.add_bezier_edge(CubicBezier(Point(*p), Point(*c1), Point(*c2), Point(*q)))

    if stats is not None:
        stats.edges_emitted += result.edge_count
    logger.debug("bezier corners: %d curve(s), radii %s", result.edge_count,
                 ', '.join(f"{r:.4g}" for r in radii))
    return result


def round_polyline(polyline, config: Union[RoundingConfig, BezierCornerConfig],
                   stats: Optional[RoundingStats] = None) -> CurvilinearEdges:
    """Run the strategy matching ``config``."""
    if isinstance(config, BezierCornerConfig):
        return bezier_corners(polyline, config.radius, config.control_point_distance,
                              tol=config.eps, stats=stats)
    if isinstance(config, RoundingConfig):
        return rounded_corners(polyline, config.point_distance, config.control_point_distance,
                               tol=config.eps, stats=stats)
    raise TypeError(f"unsupported rounding config: {type(config).__name__}")
