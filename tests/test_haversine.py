"""
Tests for great-circle destination and distance.
"""

import math
import unittest
from collections import namedtuple

import numpy as np
from pyproj import Geod

from vecgeo import MEAN_EARTH_RADIUS, Point, haversine_destination, haversine_distance
from vecgeo.unit import Degree, Kilometer, Meter, Radian

# pyproj on a sphere of the same radius solves the same great-circle problem
SPHERE = Geod(a=MEAN_EARTH_RADIUS, b=MEAN_EARTH_RADIUS)

Vertex = namedtuple("Vertex", ["x", "y"])

STUTTGART = Point(9.177789688110352, 48.776781529534965)


class TestHaversineDestination(unittest.TestCase):
    """Test haversine_destination."""

    def test_known_destination(self):
        """Test 10 km to the north-east of Stuttgart."""
        p = STUTTGART.haversine_destination(45.0, 10000.0)
        self.assertAlmostEqual(p.x, 9.274410083250379, delta=1e-6)
        self.assertAlmostEqual(p.y, 48.84033282787534, delta=1e-6)

    def test_returns_new_point(self):
        """Test the origin is left untouched and a Point is returned."""
        origin = Point(STUTTGART.x, STUTTGART.y)
        p = haversine_destination(origin, 45.0, 10000.0)
        self.assertIsInstance(p, Point)
        self.assertEqual(origin, STUTTGART)
        self.assertNotEqual(p, origin)

    def test_round_trip_distance(self):
        """Test the distance back to the origin equals the distance travelled."""
        for bearing in range(0, 360, 15):
            for distance in (10.0, 10000.0, 250000.0):
                with self.subTest(bearing=bearing, distance=distance):
                    p = STUTTGART.haversine_destination(float(bearing), distance)
                    travelled = STUTTGART.haversine_distance(p)
                    self.assertLess(abs(travelled - distance) / distance, 1e-6)

    def test_matches_pyproj_on_sphere(self):
        """Test agreement with pyproj's forward solution on the same sphere."""
        origins = [STUTTGART, Point(-73.9857, 40.7484), Point(151.2093, -33.8688), Point(0.0, 0.0)]
        for origin in origins:
            for bearing in (0.0, 33.0, 90.0, 181.5, 270.0, 333.3):
                with self.subTest(origin=origin, bearing=bearing):
                    p = origin.haversine_destination(bearing, 123456.0)
                    lon, lat, _ = SPHERE.fwd(origin.x, origin.y, bearing, 123456.0)
                    self.assertAlmostEqual(p.x, lon, delta=1e-8)
                    self.assertAlmostEqual(p.y, lat, delta=1e-8)

    def test_due_north_keeps_longitude(self):
        """Test travelling north changes latitude only."""
        p = STUTTGART.haversine_destination(0.0, 1000.0)
        self.assertAlmostEqual(p.x, STUTTGART.x, delta=1e-12)
        self.assertGreater(p.y, STUTTGART.y)

    def test_zero_distance(self):
        """Test a zero distance lands on the origin."""
        p = STUTTGART.haversine_destination(123.0, 0.0)
        self.assertAlmostEqual(p.x, STUTTGART.x, delta=1e-12)
        self.assertAlmostEqual(p.y, STUTTGART.y, delta=1e-12)

    def test_unit_quantities(self):
        """Test Degree/Radian bearings and Meter/Kilometer distances."""
        expected = STUTTGART.haversine_destination(45.0, 10000.0)
        for bearing in (Degree(45), Radian(math.pi / 4)):
            for distance in (Meter(10000), Kilometer(10)):
                with self.subTest(bearing=bearing, distance=distance):
                    p = STUTTGART.haversine_destination(bearing, distance)
                    self.assertAlmostEqual(p.x, expected.x, delta=1e-12)
                    self.assertAlmostEqual(p.y, expected.y, delta=1e-12)

    def test_wrong_unit_family(self):
        """Test a length used as bearing or an angle used as distance is rejected."""
        with self.assertRaises(TypeError):
            STUTTGART.haversine_destination(Meter(45), 10000.0)
        with self.assertRaises(TypeError):
            STUTTGART.haversine_destination(45.0, Degree(10))

    def test_duck_typed_origin(self):
        """Test any value with x/y attributes can be an origin."""
        p = haversine_destination(Vertex(STUTTGART.x, STUTTGART.y), 45.0, 10000.0)
        self.assertAlmostEqual(p.x, 9.274410083250379, delta=1e-6)
        self.assertAlmostEqual(p.y, 48.84033282787534, delta=1e-6)

    def test_float32_is_preserved(self):
        """Test float32 inputs produce float32 coordinates."""
        origin = Point(np.float32(9.1777897), np.float32(48.7767815))
        p = origin.haversine_destination(np.float32(45.0), np.float32(10000.0))
        self.assertIsInstance(p.x, np.float32)
        self.assertIsInstance(p.y, np.float32)
        self.assertAlmostEqual(float(p.x), 9.27441, delta=1e-3)
        self.assertAlmostEqual(float(p.y), 48.84033, delta=1e-3)

    def test_nan_propagates(self):
        """Test non-finite input yields NaN instead of raising."""
        p = STUTTGART.haversine_destination(45.0, float("nan"))
        self.assertTrue(np.isnan(p.x))
        self.assertTrue(np.isnan(p.y))


class TestHaversineDistance(unittest.TestCase):
    """Test haversine_distance."""

    def test_same_point_is_zero(self):
        """Test the distance from a point to itself is zero."""
        self.assertEqual(haversine_distance(STUTTGART, STUTTGART), 0.0)

    def test_symmetry(self):
        """Test the distance does not depend on direction."""
        other = Point(13.404954, 52.520008)
        self.assertAlmostEqual(
            STUTTGART.haversine_distance(other), other.haversine_distance(STUTTGART), delta=1e-6
        )

    def test_one_degree_of_latitude(self):
        """Test one degree along a meridian is R * pi / 180."""
        d = haversine_distance(Point(0.0, 0.0), Point(0.0, 1.0))
        self.assertAlmostEqual(d, MEAN_EARTH_RADIUS * math.pi / 180, delta=1e-6)

    def test_matches_pyproj_on_sphere(self):
        """Test agreement with pyproj's inverse solution on the same sphere."""
        other = Point(-0.1278, 51.5074)
        _, _, expected = SPHERE.inv(STUTTGART.x, STUTTGART.y, other.x, other.y)
        self.assertLess(abs(STUTTGART.haversine_distance(other) - expected) / expected, 1e-9)


if __name__ == "__main__":
    unittest.main()
