"""Placement engine — posts, then pickets bounded by posts, then mounts."""

from __future__ import annotations

import logging
from typing import Sequence

from railkernel.errors import DegenerateInputError
from railkernel.geometry.path import Path

from .checks import positive_or_default
from .models import (
    PlacementParameters, PlacementWarning, RailingPlacement, WarningCode,
)
from .mounts import mount_stations
from .orientation import orient_stations
from .pickets import picket_stations
from .posts import post_stations


log = logging.getLogger(__name__)


def place_railing(
    path: Path | Sequence[Sequence[float]],
    params: PlacementParameters | None = None,
) -> RailingPlacement:
    """Compute every placement for one railing path.

    Parameters
    ----------
    path : Path or sequence of (x, y[, z]) vertices
        The railing path.  Raw vertices are wrapped in a ``Path`` built
        with ``params.rules``.
    params : PlacementParameters
        Spacing and footprint inputs.  Defaults are used when omitted.

    Returns
    -------
    RailingPlacement
        Ordered, deduplicated placements per component class.  An empty
        vertex list gives an empty result with ``degenerate`` set; a
        zero-length path gives one post at its start vertex.  Invalid
        numbers and unsolvable segments are reported as warnings.
    """
    params = params or PlacementParameters()
    rules = params.rules
    result = RailingPlacement(post_length=params.post_length)

    if not isinstance(path, Path):
        try:
            path = Path(path, rules=rules)
        except DegenerateInputError as exc:
            log.warning("%s; nothing placed", exc)
            result.degenerate = True
            result.warnings.append(PlacementWarning(WarningCode.DEGENERATE_INPUT, str(exc)))
            return result

    log.info("Placing railing: %d vertices, length=%.4f", path.vertex_count, path.length)

    if path.is_degenerate:
        msg = (f"Path length {path.length:.6f} is below "
               f"{rules.geometry_epsilon}; placing at the start vertex only")
        log.warning(msg)
        result.degenerate = True
        result.warnings.append(PlacementWarning(WarningCode.DEGENERATE_INPUT, msg))

    # ── 1. Posts ───────────────────────────────────────────────────

    spacing = positive_or_default(
        params.posts.target_spacing, rules.post_target_spacing,
        "post spacing", result.warnings,
    )
    posts = post_stations(path, spacing, rules=rules)
    result.posts = orient_stations(path, posts)

    # ── 2. Pickets (bounded by posts) ──────────────────────────────

    if params.pickets is not None:
        picket_pass = picket_stations(
            path, posts, params.pickets, params.posts.width, rules=rules,
        )
        result.pickets = orient_stations(path, picket_pass.pickets)
        result.decoratives = orient_stations(path, picket_pass.decoratives)
        result.warnings.extend(picket_pass.warnings)
        result.skipped_segments.extend(picket_pass.skipped_segments)

    # ── 3. Mounts ──────────────────────────────────────────────────

    if params.mounts is not None:
        mounts = mount_stations(path, params.mounts.spacing, result.warnings, rules=rules)
        result.mounts = orient_stations(path, mounts)

    log.info(
        "Placed %d posts, %d pickets, %d decoratives, %d mounts "
        "(%d segments skipped, %d warnings)",
        len(result.posts), len(result.pickets), len(result.decoratives),
        len(result.mounts), len(result.skipped_segments), len(result.warnings),
    )
    return result
