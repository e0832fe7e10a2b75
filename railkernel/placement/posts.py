"""Post placement — per-segment even subdivision under a target spacing."""

from __future__ import annotations

import logging
import math

from railkernel.config import RAILING_RULES, RailingRules
from railkernel.geometry.path import Path

from .checks import require_positive
from .dedup import dedupe_and_order
from .models import Station


log = logging.getLogger(__name__)


MOUNT_POST_ADJUSTMENTS: dict[str, tuple[bool, float]] = {
    # mount type -> (subtract top cap, extra length)
    "Core-Drilled": (True, 3.5),
    "Plate": (True, -0.375),
    "Side-Mounted": (False, 2.0),
}


def post_stations(
    path: Path,
    target_spacing: float,
    *,
    rules: RailingRules = RAILING_RULES,
) -> list[Station]:
    """Post positions along *path*, ordered by distance.

    Every vertex gets a post.  Each segment of length L is split into
    ``n = ceil(L / target_spacing - ceiling_epsilon)`` equal intervals
    (at least one), so spacing is uniform within a segment but may
    differ between segments.  Segments shorter than the geometry epsilon
    are skipped.

    Raises
    ------
    InvalidParameterError
        If *target_spacing* is not > 0.
    """
    spacing = require_positive(target_spacing, "post spacing")
    eps = rules.geometry_epsilon

    stations: list[Station] = [(path.start, 0.0)]
    for seg in path.segments():
        length = seg.length
        if length < eps:
            log.debug("Segment %d: zero length, skipped", seg.index)
            continue

        n = max(1, math.ceil(length / spacing - rules.ceiling_epsilon))
        actual = length / n
        log.debug(
            "Segment %d: length=%.4f intervals=%d spacing=%.4f",
            seg.index, length, n, actual,
        )
        for k in range(1, n):
            d = seg.start_distance + k * actual
            stations.append((path.point_at_distance(d), d))
        stations.append((seg.end, seg.end_distance))

    return dedupe_and_order(stations, decimals=rules.dedup_decimals)


def post_length(rail_height: float, top_cap_height: float, mount_type: str | None) -> float:
    """Cut length of a post for the given mount type.

    Core-drilled posts run below the surface, plate-mounted posts stop
    short of the cap, side-mounted posts extend past the deck edge.
    Unknown mount types get the bare rail height.
    """
    rule = MOUNT_POST_ADJUSTMENTS.get(mount_type or "")
    if rule is None:
        return rail_height
    subtract_cap, extra = rule
    return rail_height - (top_cap_height if subtract_cap else 0.0) + extra
