"""Design parsing — convert raw dicts/JSON into RailingDesign and Path."""

from __future__ import annotations

from railkernel.config import RAILING_RULES, RailingRules
from railkernel.errors import DegenerateInputError, InvalidParameterError
from railkernel.geometry.path import Path

from .models import RailingDesign


# JSON key -> converter
_FIELDS = {
    "rail_height": float,
    "top_cap_height": float,
    "post_size": str,
    "post_spacing": float,
    "picket_type": str,
    "picket_size": str,
    "picket_spacing": float,
    "picket_pitch": float,
    "mount_type": str,
    "mount_spacing": float,
    "decorative_width": float,
}


def parse_design(data: dict) -> RailingDesign:
    """Parse a raw dict into a RailingDesign.

    Missing or ``None`` keys keep the form defaults.  Unknown keys are
    ignored.  Raises ``InvalidParameterError`` for a value that does not
    convert.
    """
    kwargs = {}
    for key, convert in _FIELDS.items():
        value = data.get(key)
        if value is None:
            continue
        try:
            kwargs[key] = convert(value)
        except (TypeError, ValueError):
            raise InvalidParameterError(key, value, "not a number") from None
    return RailingDesign(**kwargs)


def parse_path(data: list, *, rules: RailingRules = RAILING_RULES) -> Path:
    """Parse path vertices into a Path.

    Format, either:
        [{"x": 0, "y": 0}, {"x": 72, "y": 0, "z": 1.5}]
        [[0, 0], [72, 0, 1.5]]
    """
    vertices = []
    for v in data:
        if isinstance(v, dict):
            try:
                vertices.append((float(v["x"]), float(v["y"]), float(v.get("z", 0.0))))
            except KeyError as exc:
                raise DegenerateInputError(f"vertex {v!r} is missing {exc.args[0]!r}") from None
        else:
            vertices.append(tuple(float(c) for c in v))
    return Path(vertices, rules=rules)
