"""Parameter checks with warn-and-default recovery."""

from __future__ import annotations

import logging
import math

from railkernel.errors import InvalidParameterError

from .models import PlacementWarning, WarningCode


log = logging.getLogger(__name__)


def require_positive(value: object, field: str) -> float:
    """Return *value* as a float, or raise if it is not finite and > 0."""
    try:
        v = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise InvalidParameterError(field, value, "not a number") from None
    if not math.isfinite(v) or v <= 0:
        raise InvalidParameterError(field, value, "must be > 0")
    return v


def positive_or_default(
    value: object,
    default: float,
    field: str,
    warnings: list[PlacementWarning],
) -> float:
    """``require_positive``, substituting *default* and recording a warning."""
    try:
        return require_positive(value, field)
    except InvalidParameterError as exc:
        log.warning("%s; using default %s", exc, default)
        warnings.append(PlacementWarning(
            WarningCode.INVALID_PARAMETER, f"{exc}; using default {default}",
        ))
        return default
