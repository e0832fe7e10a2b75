"""Design resolution — string attributes to numeric placement parameters.

This is the one place that tolerates malformed form input: every size
string goes through ``parse_dimension`` and every failure becomes a
``PlacementWarning`` plus a ``RailingRules`` default, so the kernel
itself only ever sees numbers.
"""

from __future__ import annotations

import logging
from typing import Sequence

from railkernel.config import RAILING_RULES, RailingRules
from railkernel.errors import InvalidParameterError
from railkernel.geometry.dimensions import Dimension, ProfileKind, parse_dimension
from railkernel.geometry.path import Path
from railkernel.placement.engine import place_railing
from railkernel.placement.models import (
    MountParameters, PicketParameters, PicketStrategy, PlacementParameters,
    PlacementWarning, PostParameters, RailingPlacement, WarningCode,
)

from .models import RailingDesign


log = logging.getLogger(__name__)


# Infill types with no discrete vertical pickets along the path.
PANEL_TYPES = frozenset({"horizontal", "glasspanel", "glass", "mesh", "perforated"})


def strategy_for(picket_type: str) -> PicketStrategy | None:
    """Map a form picket type to a strategy; None if unrecognised."""
    kind = picket_type.strip().lower()
    if kind in ("vertical", "picket", ""):
        return PicketStrategy.CLEAR_SPACING
    if kind.startswith("deco"):
        return PicketStrategy.DECORATIVE
    if kind in ("fixed", "pitch", "fixed_pitch", "fixed-pitch"):
        return PicketStrategy.FIXED_PITCH
    return None


def _dimension_or_default(
    text: str,
    field: str,
    default_width: float,
    default_depth: float | None,
    warnings: list[PlacementWarning],
) -> Dimension:
    try:
        return parse_dimension(text, field)
    except InvalidParameterError as exc:
        log.warning("%s; using default width %s", exc, default_width)
        warnings.append(PlacementWarning(
            WarningCode.INVALID_PARAMETER, f"{exc}; using default width {default_width}",
        ))
        return Dimension(ProfileKind.RECTANGULAR, default_width, default_depth)


def resolve_parameters(
    design: RailingDesign,
    rules: RailingRules = RAILING_RULES,
) -> tuple[PlacementParameters, list[PlacementWarning]]:
    """Turn a design into PlacementParameters.

    Numeric fields pass through unchanged (the kernel defaults bad
    numbers itself); only the size strings and the picket type are
    interpreted here.
    """
    warnings: list[PlacementWarning] = []

    post = _dimension_or_default(
        design.post_size, "post_size",
        rules.default_post_width, rules.default_post_depth, warnings,
    )
    posts = PostParameters(
        target_spacing=design.post_spacing, width=post.footprint, depth=post.depth,
    )

    pickets: PicketParameters | None
    kind = design.picket_type.strip().lower()
    if kind in PANEL_TYPES:
        msg = f"Picket type '{design.picket_type}' has no vertical pickets; none placed"
        log.warning(msg)
        warnings.append(PlacementWarning(WarningCode.INVALID_PARAMETER, msg))
        pickets = None
    else:
        strategy = strategy_for(design.picket_type)
        if strategy is None:
            msg = f"Unknown picket type '{design.picket_type}'; using clear spacing"
            log.warning(msg)
            warnings.append(PlacementWarning(WarningCode.INVALID_PARAMETER, msg))
            strategy = PicketStrategy.CLEAR_SPACING
        picket = _dimension_or_default(
            design.picket_size, "picket_size", rules.default_picket_width, None, warnings,
        )
        pickets = PicketParameters(
            strategy=strategy,
            width=picket.footprint,
            depth=picket.depth,
            max_clear_spacing=design.picket_spacing,
            pitch=design.picket_pitch,
            decorative_width=(
                rules.default_decorative_width
                if design.decorative_width is None else design.decorative_width
            ),
        )

    params = PlacementParameters(
        posts=posts,
        pickets=pickets,
        mounts=MountParameters(spacing=design.effective_mount_spacing),
        post_length=design.post_length,
        rules=rules,
    )
    return params, warnings


def place_design(
    path: Path | Sequence[Sequence[float]],
    design: RailingDesign,
    rules: RailingRules = RAILING_RULES,
) -> RailingPlacement:
    """Resolve *design* and run the kernel on *path*.

    Resolution warnings come first in the result, followed by the
    kernel's own.
    """
    params, warnings = resolve_parameters(design, rules)
    result = place_railing(path, params)
    result.warnings[:0] = warnings
    return result
