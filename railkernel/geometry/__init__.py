"""Geometry — railing path and component profile dimensions."""

from .path import (
    Path, Segment, Point, Vector, X_AXIS, ZERO_VECTOR, as_point, unit_vector,
)
from .dimensions import Dimension, ProfileKind, parse_dimension

__all__ = [
    "Path", "Segment", "Point", "Vector", "X_AXIS", "ZERO_VECTOR",
    "as_point", "unit_vector",
    "Dimension", "ProfileKind", "parse_dimension",
]
