"""Shared tolerances and defaults for the placement kernel.

Every algorithm reads its epsilons and fallback dimensions from one
``RailingRules`` instance so posts, pickets and mounts agree on what
counts as "zero length" and on what a missing width defaults to.

All distances are in drawing units (inches in practice).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RailingRules:
    """Numeric rules for railing placement."""

    geometry_epsilon: float = 1e-6
    """Segments shorter than this are skipped; tangents shorter than
    this are treated as degenerate."""

    ceiling_epsilon: float = 1e-9
    """Subtracted before ``ceil`` so exact multiples of the spacing do
    not gain a spurious extra interval."""

    dedup_decimals: int = 6
    """Decimal places of the coordinate key used to merge coincident
    placements."""

    post_target_spacing: float = 50.0
    """Maximum on-center post spacing along a segment."""

    picket_pitch: float = 6.0
    """Fixed pitch for pickets marched directly along the path."""

    max_clear_spacing: float = 4.0
    """Clear gap between picket faces must stay strictly below this."""

    default_post_width: float = 2.0
    default_post_depth: float = 2.0
    default_picket_width: float = 1.5
    default_decorative_width: float = 2.0

    mount_end_tolerance: float = 1e-4
    """A trailing mount closer than this to the path end is not
    duplicated at the end vertex."""

    # ── Derived helpers ────────────────────────────────────────────

    @property
    def epsilon_sq(self) -> float:
        """Squared geometry epsilon, for comparing squared magnitudes."""
        return self.geometry_epsilon * self.geometry_epsilon


# Module-level singleton.
RAILING_RULES = RailingRules()
