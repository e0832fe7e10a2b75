"""Placement — positions and orientations of railing components.

Submodules:
  models         Parameters, output dataclasses and warning records.
  checks         Parameter checks with warn-and-default recovery.
  dedup          Distance ordering and coincident-point suppression.
  orientation    Tangent lookup with degenerate-case fallbacks.
  posts          Per-segment even post subdivision; post cut length.
  pickets        Clear-spacing, fixed-pitch and decorative strategies.
  mounts         Fixed spacing along the whole path.
  engine         Top-level composition (place_railing).
  serialization  JSON conversion (placement_to_dict, parse_placement).
"""

from .models import (
    PlacementPoint, PlacementWarning, WarningCode, RailingPlacement,
    PicketStrategy, PostParameters, PicketParameters, MountParameters,
    PlacementParameters, Station,
)
from .dedup import dedupe_and_order, attach_distances, order_points
from .orientation import orientation_at, orient_stations
from .posts import post_stations, post_length
from .pickets import (
    PicketLayout, PicketPass, solve_clear_spacing, clear_spacing_stations,
    fixed_pitch_stations, decorative_stations, picket_stations,
)
from .mounts import mount_stations
from .engine import place_railing
from .serialization import placement_to_dict, parse_placement

__all__ = [
    # Models
    "PlacementPoint", "PlacementWarning", "WarningCode", "RailingPlacement",
    "PicketStrategy", "PostParameters", "PicketParameters", "MountParameters",
    "PlacementParameters", "Station",
    # Dedup / orientation
    "dedupe_and_order", "attach_distances", "order_points",
    "orientation_at", "orient_stations",
    # Algorithms
    "post_stations", "post_length",
    "PicketLayout", "PicketPass", "solve_clear_spacing", "clear_spacing_stations",
    "fixed_pitch_stations", "decorative_stations", "picket_stations",
    "mount_stations",
    # Engine
    "place_railing",
    # Serialization
    "placement_to_dict", "parse_placement",
]
