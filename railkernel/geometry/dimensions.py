"""Profile dimensions parsed from attribute strings.

Attribute forms store component sizes as free text — ``"2x2"``,
``"0.75 round"``, ``"2x1 Rect"``, ``"0.75 sq"``.  ``parse_dimension``
turns such a string into a typed ``Dimension`` once, up front, so the
placement algorithms only ever see validated numbers.

The first number is always the in-plane width (the footprint that
consumes length along the path).  The second, when present, is the
orthogonal depth and is never used for spacing.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

from railkernel.errors import InvalidParameterError


class ProfileKind(str, Enum):
    RECTANGULAR = "rectangular"
    ROUND = "round"


@dataclass(frozen=True)
class Dimension:
    """A validated component cross-section."""

    kind: ProfileKind
    width: float
    depth: float | None = None

    @property
    def footprint(self) -> float:
        """Length the component occupies along the path."""
        return self.width

    @property
    def diameter(self) -> float | None:
        return self.width if self.kind is ProfileKind.ROUND else None


_LEADING_NUMBER = re.compile(r"^\s*(\d+(?:\.\d*)?|\.\d+)")
_SEPARATOR = re.compile(r"[xX×]")

_ROUND_WORDS = ("round", "pipe", "tube", "dia")
_SQUARE_WORDS = ("sq",)
# Infill without a discrete picket footprint.
_PANEL_WORDS = ("glass", "mesh", "perf")


def _leading_number(part: str, field: str, text: str) -> tuple[float, str]:
    m = _LEADING_NUMBER.match(part)
    if m is None:
        raise InvalidParameterError(field, text, f"expected a number in {part.strip()!r}")
    value = float(m.group(1))
    if not math.isfinite(value) or value <= 0:
        raise InvalidParameterError(field, text, "dimensions must be > 0")
    return value, part[m.end():].strip().lower()


def parse_dimension(text: str | None, field: str = "size") -> Dimension:
    """Parse a size string into a ``Dimension``.

    Raises
    ------
    InvalidParameterError
        If the string is empty, names a panel infill, or does not start
        with a positive number in each ``x``-separated part.
    """
    if text is None or not str(text).strip():
        raise InvalidParameterError(field, text, "size is empty")
    raw = str(text).strip()
    lower = raw.lower()
    if any(w in lower for w in _PANEL_WORDS):
        raise InvalidParameterError(field, text, "panel infill has no picket width")

    parts = _SEPARATOR.split(raw, maxsplit=1)
    width, suffix = _leading_number(parts[0], field, text)
    depth: float | None = None
    if len(parts) == 2:
        depth, suffix = _leading_number(parts[1], field, text)

    if any(w in suffix for w in _ROUND_WORDS):
        return Dimension(ProfileKind.ROUND, width, depth if depth is not None else width)
    if depth is None and any(w in suffix for w in _SQUARE_WORDS):
        depth = width
    return Dimension(ProfileKind.RECTANGULAR, width, depth)
