"""Picket placement strategies.

CLEAR_SPACING  Between consecutive posts: the fewest pickets whose clear
               gaps (face to face) stay strictly below the maximum.
FIXED_PITCH    Directly along the path: every vertex plus points marched
               at a fixed pitch from each segment start.
DECORATIVE     Between consecutive posts: a centered decorative element
               flanked on each side by evenly pitched pickets.

Post-bounded strategies skip a segment they cannot solve and report its
post-pair index instead of failing the whole pass.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from railkernel.config import RAILING_RULES, RailingRules
from railkernel.errors import GeometricUnsolvableError
from railkernel.geometry.path import Path

from .checks import positive_or_default, require_positive
from .dedup import dedupe_and_order
from .models import (
    PicketParameters, PicketStrategy, PlacementWarning, Station, WarningCode,
)


log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PicketLayout:
    """Solved clear-spacing layout for one post-to-post segment.

    ``offsets`` are picket centers measured from the start post's edge.
    """

    inside_distance: float
    count: int
    clear_spacing: float
    on_center_spacing: float
    offsets: tuple[float, ...]


@dataclass
class PicketPass:
    """Output of one picket placement pass."""

    pickets: list[Station] = field(default_factory=list)
    decoratives: list[Station] = field(default_factory=list)
    warnings: list[PlacementWarning] = field(default_factory=list)
    skipped_segments: list[int] = field(default_factory=list)

    def skip(self, exc: GeometricUnsolvableError) -> None:
        log.warning("%s; segment skipped", exc)
        self.warnings.append(PlacementWarning(
            WarningCode.UNSOLVABLE_SEGMENT, str(exc), exc.segment_index,
        ))
        self.skipped_segments.append(exc.segment_index)


# ── Clear-spacing solver ───────────────────────────────────────────


def _clear(inside: float, n: int, width: float) -> float:
    return (inside - n * width) / (n + 1)


def solve_clear_spacing(
    segment_length: float,
    post_width: float,
    picket_width: float,
    max_clear_spacing: float,
    *,
    segment_index: int = 0,
    epsilon: float = RAILING_RULES.geometry_epsilon,
) -> PicketLayout:
    """Fewest pickets (>= 1) whose clear spacing is < *max_clear_spacing*.

    The count never exceeds ``floor(inside / picket_width)``, so the
    clear spacing is never negative.  A non-positive *post_width* means
    the posts take no length and the whole segment is available.

    Raises
    ------
    GeometricUnsolvableError
        If no picket fits, or the constraint still fails with as many
        pickets as fit.
    InvalidParameterError
        If *picket_width* or *max_clear_spacing* is not > 0.
    """
    w = require_positive(picket_width, "picket width")
    m = require_positive(max_clear_spacing, "max clear spacing")
    inside = segment_length - max(post_width, 0.0)

    if inside <= epsilon:
        raise GeometricUnsolvableError(
            segment_index, f"no room between posts (inside distance {inside:.4f})",
        )
    max_count = math.floor(inside / w)
    if max_count < 1:
        raise GeometricUnsolvableError(
            segment_index,
            f"picket width {w:.4f} exceeds inside distance {inside:.4f}",
        )

    # clear(n) < m  <=>  n > (inside - m) / (w + m); then settle on the
    # exact minimum against the float formula.
    n = max(1, math.floor((inside - m) / (w + m)) + 1)
    while n > 1 and _clear(inside, n - 1, w) < m:
        n -= 1
    while n <= max_count and _clear(inside, n, w) >= m:
        n += 1
    if n > max_count:
        raise GeometricUnsolvableError(
            segment_index,
            f"clear spacing {_clear(inside, max_count, w):.4f} stays >= {m:.4f} "
            f"with the maximum of {max_count} pickets",
        )

    clear = _clear(inside, n, w)
    on_center = clear + w
    return PicketLayout(
        inside_distance=inside,
        count=n,
        clear_spacing=clear,
        on_center_spacing=on_center,
        offsets=tuple(clear + j * on_center + w / 2 for j in range(n)),
    )


# ── Strategies ─────────────────────────────────────────────────────


def _post_pairs(posts: list[Station]):
    for i, ((_, d0), (_, d1)) in enumerate(zip(posts, posts[1:])):
        yield i, d0, d1


def clear_spacing_stations(
    path: Path,
    posts: list[Station],
    post_width: float,
    picket_width: float,
    max_clear_spacing: float,
    *,
    rules: RailingRules = RAILING_RULES,
) -> PicketPass:
    """Pickets between each pair of consecutive posts."""
    out = PicketPass()
    footprint = max(post_width, 0.0)
    for i, d0, d1 in _post_pairs(posts):
        try:
            layout = solve_clear_spacing(
                d1 - d0, footprint, picket_width, max_clear_spacing,
                segment_index=i, epsilon=rules.geometry_epsilon,
            )
        except GeometricUnsolvableError as exc:
            out.skip(exc)
            continue

        log.debug(
            "Segment %d: length=%.2f inside=%.2f pickets=%d clear=%.4f on-center=%.4f",
            i, d1 - d0, layout.inside_distance, layout.count,
            layout.clear_spacing, layout.on_center_spacing,
        )
        edge = d0 + footprint / 2
        for offset in layout.offsets:
            d = edge + offset
            out.pickets.append((path.point_at_distance(d), d))

    out.pickets = dedupe_and_order(out.pickets, decimals=rules.dedup_decimals)
    return out


def fixed_pitch_stations(
    path: Path,
    pitch: float,
    *,
    rules: RailingRules = RAILING_RULES,
) -> list[Station]:
    """Every path vertex plus fixed-pitch points from each segment start.

    The pitch restarts at every vertex; the last interval of a segment
    takes whatever length remains.
    """
    step = require_positive(pitch, "picket pitch")
    eps = rules.geometry_epsilon

    stations: list[Station] = [(path.start, 0.0)]
    for seg in path.segments():
        stations.append((seg.start, seg.start_distance))
        if seg.length < eps:
            continue
        k = 1
        while k * step < seg.length - eps:
            d = seg.start_distance + k * step
            stations.append((path.point_at_distance(d), d))
            k += 1
    stations.append((path.end, path.length))

    return dedupe_and_order(stations, decimals=rules.dedup_decimals)


def decorative_stations(
    path: Path,
    posts: list[Station],
    post_width: float,
    decorative_width: float,
    max_clear_spacing: float,
    *,
    rules: RailingRules = RAILING_RULES,
) -> PicketPass:
    """A decorative element mid-span with pickets pitched out to each post."""
    out = PicketPass()
    footprint = max(post_width, 0.0)
    m = require_positive(max_clear_spacing, "max clear spacing")
    for i, d0, d1 in _post_pairs(posts):
        inside = (d1 - d0) - footprint
        run = (inside - decorative_width) / 2
        if run <= rules.geometry_epsilon:
            out.skip(GeometricUnsolvableError(
                i, f"decorative width {decorative_width:.4f} leaves no room "
                   f"(inside distance {inside:.4f})",
            ))
            continue

        centre = (d0 + d1) / 2
        out.decoratives.append((path.point_at_distance(centre), centre))

        n = max(1, math.ceil(run / m - rules.ceiling_epsilon))
        pitch = run / (n + 1)
        start_edge = d0 + footprint / 2
        end_edge = d1 - footprint / 2
        for j in range(1, n + 1):
            for d in (start_edge + j * pitch, end_edge - j * pitch):
                out.pickets.append((path.point_at_distance(d), d))
        log.debug(
            "Segment %d: decorative at %.2f, %d pickets per side, pitch=%.4f",
            i, centre, n, pitch,
        )

    out.pickets = dedupe_and_order(out.pickets, decimals=rules.dedup_decimals)
    out.decoratives = dedupe_and_order(out.decoratives, decimals=rules.dedup_decimals)
    return out


def _post_footprint(
    value: object,
    rules: RailingRules,
    warnings: list[PlacementWarning],
) -> float:
    """Post width for the post-bounded strategies.

    Non-numeric or non-finite widths take the default.  A finite width
    <= 0 is kept, so pickets span post centre to centre, but still
    reported.
    """
    try:
        width = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        width = math.nan
    if not math.isfinite(width):
        return positive_or_default(value, rules.default_post_width, "post width", warnings)
    if width <= 0:
        msg = (f"Invalid post width {value!r}: must be > 0; "
               f"pickets span post centre to centre")
        log.warning(msg)
        warnings.append(PlacementWarning(WarningCode.INVALID_PARAMETER, msg))
    return width


def picket_stations(
    path: Path,
    posts: list[Station],
    params: PicketParameters,
    post_width: float,
    *,
    rules: RailingRules = RAILING_RULES,
) -> PicketPass:
    """Run the strategy selected in *params*, defaulting bad numbers."""
    warnings: list[PlacementWarning] = []

    if params.strategy is PicketStrategy.FIXED_PITCH:
        pitch = positive_or_default(params.pitch, rules.picket_pitch, "picket pitch", warnings)
        out = PicketPass(pickets=fixed_pitch_stations(path, pitch, rules=rules))
        out.warnings[:0] = warnings
        return out

    post_width = _post_footprint(post_width, rules, warnings)
    max_clear = positive_or_default(
        params.max_clear_spacing, rules.max_clear_spacing, "max clear spacing", warnings)

    if params.strategy is PicketStrategy.DECORATIVE:
        deco = positive_or_default(
            params.decorative_width, rules.default_decorative_width,
            "decorative width", warnings)
        out = decorative_stations(path, posts, post_width, deco, max_clear, rules=rules)
    else:
        width = positive_or_default(
            params.width, rules.default_picket_width, "picket width", warnings)
        out = clear_spacing_stations(path, posts, post_width, width, max_clear, rules=rules)

    out.warnings[:0] = warnings
    return out
