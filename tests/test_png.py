import os
import tempfile
import unittest
from io import BytesIO
from unittest import mock

import numpy as np
from PIL import Image as PILImage

from kodak.colour import WHITE, Colour
from kodak.coords import Dimension, Location, Region
from kodak.core.image import Image
from kodak.errors import CodecError
from kodak.io.png import decode_png, encode_png, load_png, save_png


class TestPngCodec(unittest.TestCase):
    def test_save_and_load(self):
        img = Image.blank(Dimension(12, 7)).fill_region(
            Region(Location(3, 2), Dimension(4, 4)), Colour(10, 200, 30)
        )
        with tempfile.TemporaryDirectory() as td:
            path = os.path.join(td, 'nested', 'out.png')
            save_png(img, path)
            self.assertTrue(os.path.exists(path))
            loaded = load_png(path)
        self.assertEqual(loaded, img)
        self.assertEqual(loaded.get_pixel(Location(3, 2)), Colour(10, 200, 30))

    def test_encoded_png_is_rgb(self):
        data = encode_png(Image.blank_with_colour(Dimension(3, 2), WHITE))
        with PILImage.open(BytesIO(data)) as pil:
            self.assertEqual(pil.format, 'PNG')
            self.assertEqual(pil.mode, 'RGB')
            self.assertEqual(pil.size, (3, 2))

    def test_alpha_is_dropped(self):
        arr = np.zeros((2, 2, 4), dtype=np.uint8)
        arr[..., 0] = 255
        arr[..., 3] = 10
        buf = BytesIO()
        PILImage.fromarray(arr).save(buf, format='PNG')
        img = decode_png(buf.getvalue())
        self.assertEqual(img.get_dimensions(), Dimension(2, 2))
        self.assertEqual(img.get_pixel(Location(1, 1)), Colour(255, 0, 0))

    def test_garbage_raises_codec_error(self):
        with self.assertRaises(CodecError):
            decode_png(b'definitely not a png')

    def test_oversized_image_raises_codec_error(self):
        buf = BytesIO()
        PILImage.new('RGB', (5, 5)).save(buf, format='PNG')
        # 25 pixels is more than twice the limit, which Pillow treats as a bomb.
        with mock.patch.object(PILImage, 'MAX_IMAGE_PIXELS', 10):
            with self.assertRaises(CodecError):
                decode_png(buf.getvalue())

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(FileNotFoundError):
                load_png(os.path.join(td, 'missing.png'))


if __name__ == '__main__':
    unittest.main()
