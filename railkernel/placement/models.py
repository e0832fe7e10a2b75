"""Placement parameters, output dataclasses and warning records."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from railkernel.config import RAILING_RULES, RailingRules
from railkernel.geometry.path import Point, Vector

# A generated position paired with its cumulative distance along the path.
Station = tuple[Point, float]


# ── Output dataclasses ─────────────────────────────────────────────


@dataclass(frozen=True)
class PlacementPoint:
    """One component placement handed to the instantiator."""

    position: Point
    orientation: Vector     # unit tangent, never zero
    distance: float         # cumulative distance along the path

    @property
    def rotation_deg(self) -> float:
        """Rotation about +Z that aligns local +X with the tangent."""
        return math.degrees(math.atan2(self.orientation[1], self.orientation[0]))


class WarningCode(str, Enum):
    DEGENERATE_INPUT = "degenerate_input"
    INVALID_PARAMETER = "invalid_parameter"
    UNSOLVABLE_SEGMENT = "unsolvable_segment"


@dataclass(frozen=True)
class PlacementWarning:
    """A recoverable problem met during placement."""

    code: WarningCode
    message: str
    segment_index: int | None = None


@dataclass
class RailingPlacement:
    """Everything the kernel computed for one path."""

    posts: list[PlacementPoint] = field(default_factory=list)
    pickets: list[PlacementPoint] = field(default_factory=list)
    decoratives: list[PlacementPoint] = field(default_factory=list)
    mounts: list[PlacementPoint] = field(default_factory=list)
    warnings: list[PlacementWarning] = field(default_factory=list)
    skipped_segments: list[int] = field(default_factory=list)
    post_length: float | None = None
    degenerate: bool = False

    @property
    def ok(self) -> bool:
        return not self.degenerate and not self.skipped_segments


# ── Parameters ─────────────────────────────────────────────────────


class PicketStrategy(str, Enum):
    CLEAR_SPACING = "clear_spacing"     # between posts, minimal count under max clear gap
    FIXED_PITCH = "fixed_pitch"         # marched along the path, no post dependency
    DECORATIVE = "decorative"           # center element flanked by pickets


@dataclass(frozen=True)
class PostParameters:
    target_spacing: float = RAILING_RULES.post_target_spacing
    width: float = RAILING_RULES.default_post_width
    depth: float | None = RAILING_RULES.default_post_depth


@dataclass(frozen=True)
class PicketParameters:
    strategy: PicketStrategy = PicketStrategy.CLEAR_SPACING
    width: float = RAILING_RULES.default_picket_width
    depth: float | None = None
    max_clear_spacing: float = RAILING_RULES.max_clear_spacing
    pitch: float = RAILING_RULES.picket_pitch
    decorative_width: float = RAILING_RULES.default_decorative_width


@dataclass(frozen=True)
class MountParameters:
    spacing: float = RAILING_RULES.post_target_spacing


@dataclass(frozen=True)
class PlacementParameters:
    """All per-call inputs besides the path itself."""

    posts: PostParameters = field(default_factory=PostParameters)
    pickets: PicketParameters | None = field(default_factory=PicketParameters)
    mounts: MountParameters | None = None
    post_length: float | None = None
    rules: RailingRules = RAILING_RULES
