import unittest

from kodak.colour import BLACK, WHITE, Colour
from kodak.errors import MalformedInputError


class TestColour(unittest.TestCase):
    def test_constants(self):
        self.assertEqual(Colour.BLACK, Colour(0, 0, 0))
        self.assertEqual(Colour.WHITE, Colour(255, 255, 255))
        self.assertIs(BLACK, Colour.BLACK)
        self.assertIs(WHITE, Colour.WHITE)

    def test_bytes_conversion(self):
        c = Colour.from_bytes([12, 34, 56])
        self.assertEqual((c.r, c.g, c.b), (12, 34, 56))
        self.assertEqual(c.to_bytes(), b"\x0c\x22\x38")
        self.assertEqual(Colour.from_bytes(c.to_bytes()), c)
        self.assertEqual(tuple(c), (12, 34, 56))

    def test_wrong_arity(self):
        for values in ([], [1, 2], [1, 2, 3, 4]):
            with self.assertRaises(MalformedInputError):
                Colour.from_bytes(values)

    def test_channel_range(self):
        with self.assertRaises(ValueError):
            Colour(256, 0, 0)
        with self.assertRaises(ValueError):
            Colour(0, -1, 0)

    def test_non_integer_channel(self):
        with self.assertRaises(TypeError):
            Colour(1.5, 0, 0)
        with self.assertRaises(TypeError):
            Colour(True, 0, 0)


if __name__ == '__main__':
    unittest.main()
