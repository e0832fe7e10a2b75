"""Tests for the design record: parsing, validation and resolution."""

from __future__ import annotations

import unittest

from railkernel.design import (
    RailingDesign, parse_design, parse_path, place_design, resolve_parameters,
    strategy_for, validate_design,
)
from railkernel.errors import DegenerateInputError, InvalidParameterError
from railkernel.placement import PicketStrategy, WarningCode
from tests.railing_fixture import STRAIGHT_72, make_deck_design


class TestParsing(unittest.TestCase):

    def test_defaults(self):
        design = parse_design({})
        self.assertEqual(design, RailingDesign())
        self.assertEqual(design.post_spacing, 72.0)
        self.assertEqual(design.effective_mount_spacing, 72.0)

    def test_converts_values(self):
        design = parse_design({
            "post_spacing": "60",
            "picket_type": "Decorative",
            "mount_spacing": None,
            "decorative_width": 3,
            "unknown": "ignored",
        })
        self.assertEqual(design.post_spacing, 60.0)
        self.assertEqual(design.picket_type, "Decorative")
        self.assertIsNone(design.mount_spacing)
        self.assertEqual(design.decorative_width, 3.0)
        self.assertEqual(design.effective_mount_spacing, 60.0)

    def test_unconvertible_value_raises(self):
        with self.assertRaises(InvalidParameterError) as ctx:
            parse_design({"post_spacing": "six feet"})
        self.assertEqual(ctx.exception.field, "post_spacing")
        self.assertEqual(ctx.exception.value, "six feet")

    def test_parse_path_dicts(self):
        path = parse_path([{"x": 0, "y": 0}, {"x": 72, "y": 0, "z": 1.5}])
        self.assertEqual(path.length, 72.0)
        self.assertEqual(path.end, (72.0, 0.0, 1.5))

    def test_parse_path_lists(self):
        self.assertEqual(parse_path([[0, 0], [3, 4]]).length, 5.0)

    def test_parse_path_missing_coordinate(self):
        with self.assertRaises(DegenerateInputError):
            parse_path([{"x": 1}])

    def test_parse_path_empty(self):
        with self.assertRaises(DegenerateInputError):
            parse_path([])


class TestPostLength(unittest.TestCase):

    def test_by_mount_type(self):
        self.assertEqual(make_deck_design().post_length, 36.0)
        self.assertAlmostEqual(make_deck_design(mount_type="Core-Drilled").post_length, 38.0)
        self.assertAlmostEqual(make_deck_design(mount_type="Plate").post_length, 34.125)
        self.assertAlmostEqual(make_deck_design(mount_type="Side-Mounted").post_length, 38.0)


class TestValidation(unittest.TestCase):

    def test_defaults_are_valid(self):
        self.assertEqual(validate_design(make_deck_design()), [])

    def test_bad_numbers(self):
        errors = validate_design(make_deck_design(post_spacing=0.0, picket_spacing=-1.0))
        self.assertEqual(len(errors), 2)
        self.assertTrue(any("post_spacing" in e for e in errors))

    def test_bad_sizes(self):
        errors = validate_design(make_deck_design(post_size="big", picket_size=""))
        self.assertEqual(len(errors), 2)

    def test_unknown_picket_type(self):
        errors = validate_design(make_deck_design(picket_type="Wavy"))
        self.assertEqual(errors, ["Unknown picket_type 'Wavy'"])

    def test_panel_skips_picket_size(self):
        self.assertEqual(validate_design(make_deck_design(
            picket_type="GlassPanel", picket_size="0.5 glass",
        )), [])

    def test_non_positive_post_length(self):
        errors = validate_design(make_deck_design(rail_height=1.0, mount_type="Plate"))
        self.assertEqual(len(errors), 1)
        self.assertIn("post length", errors[0])

    def test_optional_fields(self):
        errors = validate_design(make_deck_design(mount_spacing=0.0, decorative_width=-2.0))
        self.assertEqual(len(errors), 2)


class TestResolution(unittest.TestCase):

    def test_strategy_for(self):
        self.assertIs(strategy_for("Vertical"), PicketStrategy.CLEAR_SPACING)
        self.assertIs(strategy_for("Decorative"), PicketStrategy.DECORATIVE)
        self.assertIs(strategy_for("deco"), PicketStrategy.DECORATIVE)
        self.assertIs(strategy_for("Fixed"), PicketStrategy.FIXED_PITCH)
        self.assertIsNone(strategy_for("Wavy"))

    def test_defaults(self):
        params, warnings = resolve_parameters(make_deck_design())
        self.assertEqual(warnings, [])
        self.assertEqual(params.posts.target_spacing, 72.0)
        self.assertEqual(params.posts.width, 2.0)
        self.assertEqual(params.posts.depth, 2.0)
        self.assertIs(params.pickets.strategy, PicketStrategy.CLEAR_SPACING)
        self.assertEqual(params.pickets.width, 0.75)
        self.assertEqual(params.pickets.max_clear_spacing, 4.0)
        self.assertEqual(params.mounts.spacing, 72.0)
        self.assertEqual(params.post_length, 36.0)

    def test_round_picket_uses_diameter(self):
        params, _ = resolve_parameters(make_deck_design(picket_size="0.625 round"))
        self.assertEqual(params.pickets.width, 0.625)

    def test_bad_post_size_defaults(self):
        params, warnings = resolve_parameters(make_deck_design(post_size="huge"))
        self.assertEqual(params.posts.width, 2.0)
        self.assertEqual([w.code for w in warnings], [WarningCode.INVALID_PARAMETER])

    def test_panel_types_place_no_pickets(self):
        for kind in ("Horizontal", "GlassPanel", "Mesh"):
            with self.subTest(kind=kind):
                params, warnings = resolve_parameters(make_deck_design(picket_type=kind))
                self.assertIsNone(params.pickets)
                self.assertEqual(len(warnings), 1)

    def test_unknown_type_falls_back(self):
        params, warnings = resolve_parameters(make_deck_design(picket_type="Wavy"))
        self.assertIs(params.pickets.strategy, PicketStrategy.CLEAR_SPACING)
        self.assertEqual(len(warnings), 1)

    def test_decorative_width(self):
        params, _ = resolve_parameters(make_deck_design(picket_type="Decorative"))
        self.assertEqual(params.pickets.decorative_width, 2.0)
        params, _ = resolve_parameters(make_deck_design(
            picket_type="Decorative", decorative_width=5.0,
        ))
        self.assertEqual(params.pickets.decorative_width, 5.0)


class TestPlaceDesign(unittest.TestCase):

    def test_single_bay(self):
        result = place_design(STRAIGHT_72, make_deck_design())
        self.assertEqual(len(result.posts), 2)
        self.assertEqual(len(result.pickets), 14)
        self.assertEqual(len(result.mounts), 2)
        self.assertEqual(result.post_length, 36.0)
        self.assertEqual(result.warnings, [])

    def test_resolution_warnings_first(self):
        result = place_design(STRAIGHT_72, make_deck_design(
            post_size="huge", post_spacing=-1.0,
        ))
        self.assertEqual(len(result.warnings), 2)
        self.assertIn("post_size", result.warnings[0].message)
        self.assertIn("post spacing", result.warnings[1].message)


if __name__ == "__main__":
    unittest.main()
