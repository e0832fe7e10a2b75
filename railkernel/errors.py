"""Exception taxonomy for the placement kernel.

Only ``DegenerateInputError`` escapes to callers, and only when a
``Path`` is built from zero vertices.  The other errors are raised by
the per-segment and per-parameter helpers and caught by the passes that
call them, which record a ``PlacementWarning`` and carry on.
"""

from __future__ import annotations


class RailKernelError(Exception):
    """Base class for all kernel errors."""


class DegenerateInputError(RailKernelError):
    """The path carries no usable geometry."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Degenerate path: {reason}")


class InvalidParameterError(RailKernelError):
    """A spacing, width or dimension string is unusable."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")


class GeometricUnsolvableError(RailKernelError):
    """No picket count satisfies the clear-spacing rule for a segment."""

    def __init__(self, segment_index: int, reason: str) -> None:
        self.segment_index = segment_index
        self.reason = reason
        super().__init__(f"Segment {segment_index}: {reason}")
