"""Placement serialization — JSON conversion for the instantiator."""

from __future__ import annotations

from .models import PlacementPoint, PlacementWarning, RailingPlacement, WarningCode


def _point_to_dict(p: PlacementPoint) -> dict:
    x, y, z = p.position
    dx, dy = p.orientation
    return {
        "x": x, "y": y, "z": z,
        "dx": dx, "dy": dy,
        "distance": p.distance,
        "rotation_deg": p.rotation_deg,
    }


def _parse_point(data: dict) -> PlacementPoint:
    return PlacementPoint(
        position=(float(data["x"]), float(data["y"]), float(data.get("z", 0.0))),
        orientation=(float(data["dx"]), float(data["dy"])),
        distance=float(data["distance"]),
    )


def placement_to_dict(rp: RailingPlacement) -> dict:
    """Serialize a RailingPlacement to a JSON-safe dict."""
    return {
        "posts": [_point_to_dict(p) for p in rp.posts],
        "pickets": [_point_to_dict(p) for p in rp.pickets],
        "decoratives": [_point_to_dict(p) for p in rp.decoratives],
        "mounts": [_point_to_dict(p) for p in rp.mounts],
        "warnings": [
            {
                "code": w.code.value,
                "message": w.message,
                **({"segment_index": w.segment_index} if w.segment_index is not None else {}),
            }
            for w in rp.warnings
        ],
        "skipped_segments": list(rp.skipped_segments),
        "post_length": rp.post_length,
        "degenerate": rp.degenerate,
    }


def parse_placement(data: dict) -> RailingPlacement:
    """Parse a placement dict back into a RailingPlacement.

    ``rotation_deg`` is derived from the orientation and ignored here.
    """
    return RailingPlacement(
        posts=[_parse_point(p) for p in data.get("posts", [])],
        pickets=[_parse_point(p) for p in data.get("pickets", [])],
        decoratives=[_parse_point(p) for p in data.get("decoratives", [])],
        mounts=[_parse_point(p) for p in data.get("mounts", [])],
        warnings=[
            PlacementWarning(
                code=WarningCode(w["code"]),
                message=w["message"],
                segment_index=w.get("segment_index"),
            )
            for w in data.get("warnings", [])
        ],
        skipped_segments=list(data.get("skipped_segments", [])),
        post_length=data.get("post_length"),
        degenerate=bool(data.get("degenerate", False)),
    )
