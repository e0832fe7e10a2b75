"""Railing design record — the attribute-entry form as a dataclass."""

from __future__ import annotations

from dataclasses import dataclass

from railkernel.placement.posts import post_length


@dataclass
class RailingDesign:
    """User-entered railing attributes.

    Sizes stay as the strings the form collects (``"2x2"``,
    ``"0.75 round"``); ``resolve_parameters`` parses them into numbers.
    Lengths are in inches.
    """

    rail_height: float = 36.0
    top_cap_height: float = 1.5
    post_size: str = "2x2"
    post_spacing: float = 72.0          # target on-center
    picket_type: str = "Vertical"       # Vertical | Decorative | Fixed | Horizontal | GlassPanel | Mesh
    picket_size: str = "0.75x0.75"
    picket_spacing: float = 4.0         # max clear gap between pickets
    picket_pitch: float = 6.0           # fixed-pitch strategy only
    mount_type: str = "Surface"         # Surface | Core-Drilled | Plate | Side-Mounted | Fascia
    mount_spacing: float | None = None  # None = same as post_spacing
    decorative_width: float | None = None

    @property
    def effective_mount_spacing(self) -> float:
        return self.post_spacing if self.mount_spacing is None else self.mount_spacing

    @property
    def post_length(self) -> float:
        return post_length(self.rail_height, self.top_cap_height, self.mount_type)
