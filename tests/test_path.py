"""Tests for the railing Path — arc-length queries and degenerate input."""

from __future__ import annotations

import math
import unittest

from railkernel.config import RailingRules
from railkernel.errors import DegenerateInputError
from railkernel.geometry import Path, as_point, unit_vector, ZERO_VECTOR
from tests.railing_fixture import COINCIDENT, DUPLICATE_VERTS, L_SHAPE, SINGLE_POINT


class TestPathConstruction(unittest.TestCase):

    def test_empty_path_raises(self):
        with self.assertRaises(DegenerateInputError):
            Path([])

    def test_bad_vertex_arity_raises(self):
        with self.assertRaises(DegenerateInputError):
            Path([(0, 0), (1, 2, 3, 4)])

    def test_non_finite_vertex_raises(self):
        for bad in ((math.nan, 0.0), (0.0, math.inf), (1.0, 2.0, -math.inf)):
            with self.subTest(bad=bad):
                with self.assertRaises(DegenerateInputError):
                    Path([(0, 0), bad])

    def test_as_point_pads_elevation(self):
        self.assertEqual(as_point((1, 2)), (1.0, 2.0, 0.0))
        self.assertEqual(as_point([1, 2, 3]), (1.0, 2.0, 3.0))

    def test_cumulative_distances(self):
        path = Path(L_SHAPE)
        self.assertEqual(path.cumulative_distances, (0.0, 100.0, 130.0))
        self.assertEqual(path.length, 130.0)
        self.assertEqual(path.segment_count, 2)
        self.assertEqual(len(path), 3)

    def test_distances_are_planar(self):
        """Elevation does not add to the run length."""
        path = Path([(0, 0, 0), (30, 40, 100)])
        self.assertAlmostEqual(path.length, 50.0)

    def test_single_vertex_is_valid_and_degenerate(self):
        path = Path(SINGLE_POINT)
        self.assertEqual(path.length, 0.0)
        self.assertEqual(path.segment_count, 0)
        self.assertTrue(path.is_degenerate)
        self.assertEqual(path.start, path.end)

    def test_coincident_vertices_are_degenerate(self):
        self.assertTrue(Path(COINCIDENT).is_degenerate)

    def test_rules_are_kept(self):
        rules = RailingRules(geometry_epsilon=1e-3)
        self.assertIs(Path(L_SHAPE, rules=rules).rules, rules)


class TestArcLengthQueries(unittest.TestCase):

    def setUp(self):
        self.path = Path(L_SHAPE)

    def test_point_at_distance_interior(self):
        self.assertEqual(self.path.point_at_distance(25.0), (25.0, 0.0, 0.0))
        self.assertEqual(self.path.point_at_distance(115.0), (100.0, 15.0, 0.0))

    def test_point_at_distance_exact_vertices(self):
        self.assertEqual(self.path.point_at_distance(0.0), (0.0, 0.0, 0.0))
        self.assertEqual(self.path.point_at_distance(100.0), (100.0, 0.0, 0.0))
        self.assertEqual(self.path.point_at_distance(130.0), (100.0, 30.0, 0.0))

    def test_point_at_distance_clamps(self):
        self.assertEqual(self.path.point_at_distance(-5.0), self.path.start)
        self.assertEqual(self.path.point_at_distance(500.0), self.path.end)
        self.assertEqual(self.path.point_at_distance(float("nan")), self.path.start)

    def test_elevation_is_interpolated(self):
        path = Path([(0, 0, 0), (10, 0, 10)])
        self.assertAlmostEqual(path.point_at_distance(5.0)[2], 5.0)

    def test_outgoing_segment_wins_at_vertex(self):
        self.assertEqual(self.path.segment_index_at_distance(0.0), 0)
        self.assertEqual(self.path.segment_index_at_distance(100.0), 1)
        self.assertEqual(self.path.segment_index_at_distance(130.0), 1)

    def test_segment_index_without_segments(self):
        self.assertEqual(Path(SINGLE_POINT).segment_index_at_distance(0.0), -1)

    def test_zero_length_segment_is_stepped_over(self):
        path = Path(DUPLICATE_VERTS)
        self.assertEqual(path.segment_index_at_distance(10.0), 2)

    def test_distance_at_closest_point(self):
        self.assertAlmostEqual(self.path.distance_at_closest_point((25.0, 3.0)), 25.0)
        self.assertAlmostEqual(self.path.distance_at_closest_point((120.0, 20.0)), 120.0)

    def test_closest_point_snaps_to_vertex(self):
        d = self.path.distance_at_closest_point((100.0 + 1e-9, 0.0))
        self.assertEqual(d, 100.0)

    def test_closest_point(self):
        p = self.path.closest_point((50.0, -7.0))
        self.assertAlmostEqual(p[0], 50.0)
        self.assertAlmostEqual(p[1], 0.0)

    def test_degenerate_projection_returns_zero(self):
        self.assertEqual(Path(SINGLE_POINT).distance_at_closest_point((9, 9)), 0.0)

    def test_tangent_at_distance(self):
        self.assertEqual(self.path.tangent_at_distance(50.0), (1.0, 0.0))
        self.assertEqual(self.path.tangent_at_distance(120.0), (0.0, 1.0))

    def test_tangent_is_zero_on_degenerate_path(self):
        self.assertEqual(Path(COINCIDENT).tangent_at_distance(0.0), ZERO_VECTOR)

    def test_unit_vector(self):
        ux, uy = unit_vector(3.0, 4.0, 1e-6)
        self.assertAlmostEqual(math.hypot(ux, uy), 1.0)
        self.assertIsNone(unit_vector(1e-9, 0.0, 1e-6))


if __name__ == "__main__":
    unittest.main()
