import unittest

from kodak.coords import Dimension, Location, Region, rc_to_xy, xy_to_rc


class TestLocation(unittest.TestCase):
    def test_inside_region_edges(self):
        region = Region(Location(2, 3), Dimension(4, 5))  # x in [2, 6), y in [3, 8)
        self.assertTrue(Location(2, 3).inside_region(region))
        self.assertTrue(Location(5, 7).inside_region(region))
        self.assertFalse(Location(1, 3).inside_region(region))
        self.assertFalse(Location(6, 3).inside_region(region))
        self.assertFalse(Location(2, 2).inside_region(region))
        self.assertFalse(Location(2, 8).inside_region(region))
        self.assertIn(Location(4, 4), region)

    def test_loc_in_region(self):
        region = Region.from_top_left(Dimension(20, 20))
        self.assertTrue(Location(10, 10).inside_region(region))
        self.assertTrue(Location(10, 11).inside_region(region))

    def test_empty_region_contains_nothing(self):
        region = Region(Location(3, 3), Dimension(0, 4))
        self.assertFalse(Location(3, 3).inside_region(region))

    def test_index_roundtrip(self):
        for dim in [Dimension(1, 1), Dimension(7, 3), Dimension(3, 7)]:
            for i in range(dim.area):
                loc = Location.from_index(i, dim)
                self.assertTrue(loc.inside_region(Region.from_top_left(dim)))
                self.assertEqual(loc.as_index(dim), i)

    def test_from_index_row_major(self):
        self.assertEqual(Location.from_index(23, Dimension(10, 5)), Location(3, 2))

    def test_large_index_does_not_overflow(self):
        dim = Dimension(2**32 - 1, 4)
        loc = Location(5, 3)
        idx = loc.as_index(dim)
        self.assertGreater(idx, 2**32)
        self.assertEqual(Location.from_index(idx, dim), loc)

    def test_addition(self):
        self.assertEqual(Location(1, 2) + Dimension(3, 4), Location(4, 6))
        self.assertEqual(Location(1, 2) + Location(10, 20), Location(11, 22))
        with self.assertRaises(TypeError):
            Location(1, 2) + (1, 1)

    def test_negative_rejected(self):
        with self.assertRaises(ValueError):
            Location(-1, 0)
        with self.assertRaises(ValueError):
            Dimension(0, -3)

    def test_non_integer_rejected(self):
        with self.assertRaises(TypeError):
            Location(0.5, 0)
        with self.assertRaises(TypeError):
            Dimension(3, 2.0)


class TestDimensionRegion(unittest.TestCase):
    def test_square_and_expand(self):
        self.assertEqual(Dimension.square(7), Dimension(7, 7))
        self.assertEqual(Dimension(3, 4).expand(2), Dimension(5, 6))
        self.assertEqual(Dimension(3, 4).area, 12)

    def test_region_from_top_left(self):
        r = Region.from_top_left(Dimension(5, 6))
        self.assertEqual(r.top_left, Location(0, 0))
        self.assertEqual(r.far_corner, Location(5, 6))

    def test_xy_rc_roundtrip(self):
        for x, y in [(0, 0), (5, 2), (19, 33)]:
            r, c = xy_to_rc(x, y)
            self.assertEqual((r, c), (y, x))
            self.assertEqual(rc_to_xy(r, c), (x, y))


if __name__ == '__main__':
    unittest.main()
