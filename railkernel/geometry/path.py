"""Railing path — an open polyline with arc-length queries.

Vertices are (x, y, z) tuples.  Elevation is carried through
interpolation but every distance and direction is planar.
"""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from dataclasses import dataclass
from typing import Iterator, Sequence

from shapely.geometry import LineString, Point as ShapelyPoint

from railkernel.config import RAILING_RULES, RailingRules
from railkernel.errors import DegenerateInputError

Point = tuple[float, float, float]     # x, y, elevation
Vector = tuple[float, float]           # planar direction

ZERO_VECTOR: Vector = (0.0, 0.0)
X_AXIS: Vector = (1.0, 0.0)


def as_point(v: Sequence[float]) -> Point:
    """Coerce an (x, y) or (x, y, z) sequence to a float 3-tuple."""
    if len(v) == 2:
        p = (float(v[0]), float(v[1]), 0.0)
    elif len(v) == 3:
        p = (float(v[0]), float(v[1]), float(v[2]))
    else:
        raise DegenerateInputError(f"vertex {tuple(v)!r} must have 2 or 3 coordinates")
    if not all(math.isfinite(c) for c in p):
        raise DegenerateInputError(f"vertex {tuple(v)!r} has a non-finite coordinate")
    return p


def unit_vector(dx: float, dy: float, epsilon: float) -> Vector | None:
    """Normalize (dx, dy); None when its length is below *epsilon*."""
    if dx * dx + dy * dy < epsilon * epsilon:
        return None
    n = math.hypot(dx, dy)
    return (dx / n, dy / n)


@dataclass(frozen=True)
class Segment:
    """A straight run between two consecutive path vertices."""

    index: int
    start: Point
    end: Point
    start_distance: float
    end_distance: float

    @property
    def length(self) -> float:
        return self.end_distance - self.start_distance

    @property
    def delta(self) -> Vector:
        """Raw (unnormalized) planar start→end vector."""
        return (self.end[0] - self.start[0], self.end[1] - self.start[1])

    def contains_distance(self, d: float, tol: float = 0.0) -> bool:
        return self.start_distance - tol <= d <= self.end_distance + tol


class Path:
    """Immutable open polyline with cached cumulative distances.

    A single-vertex path is valid and has length 0.  Construction from
    zero vertices raises ``DegenerateInputError``; every query after
    construction clamps instead of raising.
    """

    def __init__(
        self,
        vertices: Sequence[Sequence[float]],
        *,
        rules: RailingRules = RAILING_RULES,
    ) -> None:
        pts = [as_point(v) for v in vertices]
        if not pts:
            raise DegenerateInputError("path has no vertices")

        cumulative = [0.0]
        for a, b in zip(pts, pts[1:]):
            cumulative.append(cumulative[-1] + math.hypot(b[0] - a[0], b[1] - a[1]))

        self._vertices: tuple[Point, ...] = tuple(pts)
        self._cumulative: tuple[float, ...] = tuple(cumulative)
        self._rules = rules
        # Shapely is only used for projection; it cannot project onto a
        # line without extent.
        self._line: LineString | None = None
        if self.length >= rules.geometry_epsilon:
            self._line = LineString([(p[0], p[1]) for p in pts])

    # ── Basic properties ───────────────────────────────────────────

    @property
    def vertices(self) -> tuple[Point, ...]:
        return self._vertices

    @property
    def cumulative_distances(self) -> tuple[float, ...]:
        return self._cumulative

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def segment_count(self) -> int:
        return max(0, len(self._vertices) - 1)

    @property
    def length(self) -> float:
        return self._cumulative[-1]

    @property
    def start(self) -> Point:
        return self._vertices[0]

    @property
    def end(self) -> Point:
        return self._vertices[-1]

    @property
    def rules(self) -> RailingRules:
        return self._rules

    @property
    def is_degenerate(self) -> bool:
        """True when every segment is shorter than the geometry epsilon."""
        return self.length < self._rules.geometry_epsilon

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"Path({self.vertex_count} vertices, length={self.length:.4f})"

    # ── Segments ───────────────────────────────────────────────────

    def segment(self, index: int) -> Segment:
        return Segment(
            index=index,
            start=self._vertices[index],
            end=self._vertices[index + 1],
            start_distance=self._cumulative[index],
            end_distance=self._cumulative[index + 1],
        )

    def segments(self) -> Iterator[Segment]:
        for i in range(self.segment_count):
            yield self.segment(i)

    def segment_index_at_distance(self, d: float) -> int:
        """Index of the segment holding distance *d*, or -1 if none.

        At a shared vertex the outgoing segment wins, so zero-length
        segments are stepped over except at the very end of the path.
        """
        if self.segment_count == 0:
            return -1
        d = self.clamp_distance(d)
        i = bisect_right(self._cumulative, d) - 1
        return min(max(i, 0), self.segment_count - 1)

    # ── Arc-length queries ─────────────────────────────────────────

    def clamp_distance(self, d: float) -> float:
        if d != d:  # NaN
            return 0.0
        return min(max(d, 0.0), self.length)

    def point_at_distance(self, d: float) -> Point:
        """Point at arc length *d*, clamped into [0, length]."""
        i = self.segment_index_at_distance(d)
        if i < 0:
            return self._vertices[0]
        d = self.clamp_distance(d)
        a, b = self._vertices[i], self._vertices[i + 1]
        d0, d1 = self._cumulative[i], self._cumulative[i + 1]
        span = d1 - d0
        if span <= 0.0:
            return a
        t = (d - d0) / span
        if t <= 0.0:
            return a
        if t >= 1.0:
            return b
        return (
            a[0] + t * (b[0] - a[0]),
            a[1] + t * (b[1] - a[1]),
            a[2] + t * (b[2] - a[2]),
        )

    def distance_at_closest_point(self, p: Sequence[float]) -> float:
        """Cumulative distance of the projection of *p* onto the path.

        Projections landing within the geometry epsilon of a vertex are
        snapped to that vertex's exact cumulative distance, so points
        generated at a vertex resolve to the same segment every time.
        """
        if self._line is None:
            return 0.0
        d = float(self._line.project(ShapelyPoint(float(p[0]), float(p[1]))))
        return self._snap_to_vertex(self.clamp_distance(d))

    def closest_point(self, p: Sequence[float]) -> Point:
        return self.point_at_distance(self.distance_at_closest_point(p))

    def tangent_at_distance(self, d: float) -> Vector:
        """Unit direction of the segment holding *d*.

        Returns the zero vector when that segment is degenerate (or the
        path has a single vertex); callers needing a guaranteed direction
        go through ``placement.orientation``.
        """
        i = self.segment_index_at_distance(d)
        if i < 0:
            return ZERO_VECTOR
        u = unit_vector(*self.segment(i).delta, self._rules.geometry_epsilon)
        return u if u is not None else ZERO_VECTOR

    # ── Helpers ────────────────────────────────────────────────────

    def _snap_to_vertex(self, d: float) -> float:
        cum = self._cumulative
        eps = self._rules.geometry_epsilon
        i = bisect_left(cum, d)
        for j in (i - 1, i):
            if 0 <= j < len(cum) and abs(cum[j] - d) <= eps:
                return cum[j]
        return d
