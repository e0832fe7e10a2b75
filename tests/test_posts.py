"""Tests for post placement and post cut length."""

from __future__ import annotations

import unittest

from railkernel.errors import InvalidParameterError
from railkernel.geometry import Path
from railkernel.placement.posts import post_length, post_stations
from tests.railing_fixture import DECK_RUN, DUPLICATE_VERTS, L_SHAPE, SINGLE_POINT, STRAIGHT_100


def _xy(stations):
    return [(round(p[0], 6), round(p[1], 6)) for p, _ in stations]


class TestPostStations(unittest.TestCase):

    def test_straight_run_halves(self):
        stations = post_stations(Path(STRAIGHT_100), 50.0)
        self.assertEqual(_xy(stations), [(0.0, 0.0), (50.0, 0.0), (100.0, 0.0)])

    def test_uneven_length_rounds_interval_count_up(self):
        stations = post_stations(Path([(0, 0), (120, 0)]), 50.0)
        self.assertEqual([d for _, d in stations], [0.0, 40.0, 80.0, 120.0])

    def test_exact_multiple_has_no_extra_interval(self):
        stations = post_stations(Path([(0, 0), (150, 0)]), 50.0)
        self.assertEqual(len(stations), 4)

    def test_short_segment_gets_posts_at_both_ends(self):
        stations = post_stations(Path([(0, 0), (10, 0)]), 50.0)
        self.assertEqual(_xy(stations), [(0.0, 0.0), (10.0, 0.0)])

    def test_every_vertex_gets_a_post(self):
        stations = post_stations(Path(L_SHAPE), 50.0)
        self.assertEqual(
            _xy(stations),
            [(0.0, 0.0), (50.0, 0.0), (100.0, 0.0), (100.0, 30.0)],
        )

    def test_spacing_never_exceeds_target(self):
        path = Path(DECK_RUN)
        for spacing in (7.0, 36.0, 50.0, 72.0, 1000.0):
            with self.subTest(spacing=spacing):
                stations = post_stations(path, spacing)
                self.assertEqual(stations[0][0], path.start)
                self.assertEqual(stations[-1][0], path.end)
                gaps = [b - a for (_, a), (_, b) in zip(stations, stations[1:])]
                self.assertTrue(all(g <= spacing + 1e-6 for g in gaps))
                self.assertTrue(all(g > 0 for g in gaps))

    def test_duplicate_vertex_collapses(self):
        stations = post_stations(Path(DUPLICATE_VERTS), 50.0)
        self.assertEqual(_xy(stations), [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0)])

    def test_single_vertex(self):
        stations = post_stations(Path(SINGLE_POINT), 50.0)
        self.assertEqual(stations, [((5.0, 5.0, 0.0), 0.0)])

    def test_deterministic(self):
        path = Path(DECK_RUN)
        self.assertEqual(post_stations(path, 36.0), post_stations(path, 36.0))

    def test_invalid_spacing_raises(self):
        for bad in (0.0, -5.0, float("nan"), float("inf"), "abc"):
            with self.subTest(bad=bad):
                with self.assertRaises(InvalidParameterError):
                    post_stations(Path(STRAIGHT_100), bad)


class TestPostLength(unittest.TestCase):

    def test_mount_rules(self):
        self.assertAlmostEqual(post_length(36.0, 1.5, "Core-Drilled"), 38.0)
        self.assertAlmostEqual(post_length(36.0, 1.5, "Plate"), 34.125)
        self.assertAlmostEqual(post_length(36.0, 1.5, "Side-Mounted"), 38.0)

    def test_unknown_mount_is_rail_height(self):
        self.assertEqual(post_length(36.0, 1.5, "Surface"), 36.0)
        self.assertEqual(post_length(36.0, 1.5, None), 36.0)


if __name__ == "__main__":
    unittest.main()
