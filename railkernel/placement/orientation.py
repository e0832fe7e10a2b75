"""Orientation of placements along the path.

The tangent of the segment under a placement is used when it exists.
Zero-length segments, single-vertex paths and reversals can leave that
tangent degenerate; the fallbacks below are tried in order and the last
one always succeeds, so no caller ever receives a zero vector.

  1. the first non-degenerate segment whose distance range holds the
     placement (vertices bounding the segment)
  2. previous distinct vertex → next distinct vertex around it
  3. +X
"""

from __future__ import annotations

from typing import Iterable, Sequence

from railkernel.geometry.path import Path, Point, Vector, X_AXIS, unit_vector

from .models import PlacementPoint, Station


def orientation_at(
    path: Path,
    position: Sequence[float],
    distance: float | None = None,
) -> Vector:
    """Unit tangent at *position*.

    *distance* skips the projection step for positions the path itself
    generated; external positions are projected onto the path first.
    """
    eps = path.rules.geometry_epsilon
    if distance is None:
        d = path.distance_at_closest_point(position)
    else:
        d = path.clamp_distance(distance)

    tx, ty = path.tangent_at_distance(d)
    if tx * tx + ty * ty >= path.rules.epsilon_sq:
        return (tx, ty)

    return (
        _bounding_segment_direction(path, d, eps)
        or _neighbour_direction(path, d, eps)
        or X_AXIS
    )


def orient_stations(path: Path, stations: Iterable[Station]) -> list[PlacementPoint]:
    """Attach orientations to ordered (point, distance) pairs."""
    return [
        PlacementPoint(position=p, orientation=orientation_at(path, p, d), distance=d)
        for p, d in stations
    ]


def _bounding_segment_direction(path: Path, d: float, eps: float) -> Vector | None:
    for seg in path.segments():
        if seg.contains_distance(d, eps):
            u = unit_vector(*seg.delta, eps)
            if u is not None:
                return u
    return None


def _apart(a: Point, b: Point, eps: float) -> bool:
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2 >= eps * eps


def _neighbour_direction(path: Path, d: float, eps: float) -> Vector | None:
    i = path.segment_index_at_distance(d)
    if i < 0:
        return None
    verts = path.vertices
    anchor = verts[i]
    prev = next((v for v in reversed(verts[:i]) if _apart(v, anchor, eps)), anchor)
    nxt = next((v for v in verts[i + 1:] if _apart(v, anchor, eps)), anchor)
    return unit_vector(nxt[0] - prev[0], nxt[1] - prev[1], eps)
