"""Mount placement — fixed spacing marched along the whole path."""

from __future__ import annotations

import logging
import math

from railkernel.config import RAILING_RULES, RailingRules
from railkernel.geometry.path import Path

from .dedup import dedupe_and_order
from .models import PlacementWarning, Station, WarningCode


log = logging.getLogger(__name__)


def mount_stations(
    path: Path,
    spacing: float,
    warnings: list[PlacementWarning],
    *,
    rules: RailingRules = RAILING_RULES,
) -> list[Station]:
    """Start vertex, then every *spacing* along the path, then the end.

    Unlike posts, mounts ignore vertices: the march runs over the total
    length.  An unusable spacing yields only the start vertex.
    """
    eps = rules.geometry_epsilon
    stations: list[Station] = [(path.start, 0.0)]

    if not (spacing > eps):
        msg = f"Invalid mount spacing {spacing!r}; placing a single mount at the start"
        log.warning(msg)
        warnings.append(PlacementWarning(WarningCode.INVALID_PARAMETER, msg))
        return stations
    if path.is_degenerate:
        return stations

    k = 1
    while k * spacing < path.length - eps:
        d = k * spacing
        stations.append((path.point_at_distance(d), d))
        k += 1

    last = stations[-1][0]
    end = path.end
    if math.hypot(end[0] - last[0], end[1] - last[1]) > rules.mount_end_tolerance:
        stations.append((end, path.length))

    return dedupe_and_order(stations, decimals=rules.dedup_decimals)
