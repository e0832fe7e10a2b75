"""Duplicate suppression and ordering along the path.

Every placement pass emits positions in whatever order is convenient
(segment starts, interior points, segment ends).  ``dedupe_and_order``
sorts them by cumulative distance and merges positions that agree to
``dedup_decimals`` places.

The sort is stable and the first position of each rounded key wins, so
two inputs that collapse onto the same key at the same distance always
resolve to the one that came first.  Points sitting exactly on a
rounding boundary therefore never produce a different answer between
runs.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from railkernel.config import RAILING_RULES
from railkernel.geometry.path import Path, Point, as_point

from .models import Station


def dedup_key(point: Point, decimals: int) -> tuple[float, float, float]:
    return (
        round(point[0], decimals),
        round(point[1], decimals),
        round(point[2], decimals),
    )


def dedupe_and_order(
    stations: Iterable[Station],
    *,
    decimals: int = RAILING_RULES.dedup_decimals,
) -> list[Station]:
    """Sort (point, distance) pairs by distance and drop coincident points."""
    seen: set[tuple[float, float, float]] = set()
    result: list[Station] = []
    for point, distance in sorted(stations, key=lambda s: s[1]):
        key = dedup_key(point, decimals)
        if key in seen:
            continue
        seen.add(key)
        result.append((point, distance))
    return result


def attach_distances(path: Path, points: Iterable[Sequence[float]]) -> list[Station]:
    """Pair each point with the path distance of its projection."""
    return [(as_point(p), path.distance_at_closest_point(p)) for p in points]


def order_points(
    path: Path,
    points: Iterable[Sequence[float]],
    *,
    decimals: int | None = None,
) -> list[Point]:
    """Deduplicate arbitrary points and order them along *path*."""
    if decimals is None:
        decimals = path.rules.dedup_decimals
    return [p for p, _ in dedupe_and_order(attach_distances(path, points), decimals=decimals)]
