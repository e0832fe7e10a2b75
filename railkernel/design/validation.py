"""Design validation — check a RailingDesign before placement."""

from __future__ import annotations

import math

from railkernel.errors import InvalidParameterError
from railkernel.geometry.dimensions import parse_dimension

from .models import RailingDesign
from .resolution import PANEL_TYPES, strategy_for


def _positive(value: object) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value) and value > 0


def validate_design(design: RailingDesign) -> list[str]:
    """Validate a RailingDesign. Returns error messages (empty = valid)."""
    errors: list[str] = []

    # ── Heights and spacings ──
    for name in ("rail_height", "post_spacing", "picket_spacing", "picket_pitch"):
        value = getattr(design, name)
        if not _positive(value):
            errors.append(f"{name} must be > 0, got {value!r}")
    if not (isinstance(design.top_cap_height, (int, float)) and design.top_cap_height >= 0):
        errors.append(f"top_cap_height must be >= 0, got {design.top_cap_height!r}")
    if design.mount_spacing is not None and not _positive(design.mount_spacing):
        errors.append(f"mount_spacing must be > 0, got {design.mount_spacing!r}")
    if design.decorative_width is not None and not _positive(design.decorative_width):
        errors.append(f"decorative_width must be > 0, got {design.decorative_width!r}")

    # ── Size strings ──
    try:
        parse_dimension(design.post_size, "post_size")
    except InvalidParameterError as exc:
        errors.append(str(exc))

    kind = design.picket_type.strip().lower()
    if kind not in PANEL_TYPES:
        try:
            parse_dimension(design.picket_size, "picket_size")
        except InvalidParameterError as exc:
            errors.append(str(exc))
        if strategy_for(design.picket_type) is None:
            errors.append(f"Unknown picket_type '{design.picket_type}'")

    # ── Cross-field ──
    if _positive(design.rail_height) and design.post_length <= 0:
        errors.append(
            f"post length {design.post_length:.3f} for mount type "
            f"'{design.mount_type}' is not positive"
        )
    return errors
