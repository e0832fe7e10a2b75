"""Railing placement kernel.

Computes where posts, pickets and mounts go along a railing path:

  geometry   Path arc-length queries and profile dimensions.
  placement  Post/picket/mount algorithms, orientation, dedup, engine.
  design     Attribute-entry design record, parsing, validation and
             resolution into numeric placement parameters.
"""

from .config import RailingRules, RAILING_RULES
from .errors import (
    RailKernelError, DegenerateInputError, InvalidParameterError,
    GeometricUnsolvableError,
)
from .geometry import Path, Segment, Dimension, ProfileKind, parse_dimension
from .placement import (
    PlacementPoint, PlacementParameters, PostParameters, PicketParameters,
    MountParameters, PicketStrategy, RailingPlacement, PlacementWarning,
    WarningCode, place_railing, placement_to_dict, parse_placement,
)
from .design import (
    RailingDesign, parse_design, parse_path, validate_design,
    resolve_parameters, place_design,
)

__all__ = [
    "RailingRules", "RAILING_RULES",
    "RailKernelError", "DegenerateInputError", "InvalidParameterError",
    "GeometricUnsolvableError",
    "Path", "Segment", "Dimension", "ProfileKind", "parse_dimension",
    "PlacementPoint", "PlacementParameters", "PostParameters",
    "PicketParameters", "MountParameters", "PicketStrategy",
    "RailingPlacement", "PlacementWarning", "WarningCode",
    "place_railing", "placement_to_dict", "parse_placement",
    "RailingDesign", "parse_design", "parse_path", "validate_design",
    "resolve_parameters", "place_design",
]
