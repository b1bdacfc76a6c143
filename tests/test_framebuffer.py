import unittest

from src.saturn.framebuffer import Framebuffer


class FramebufferTests(unittest.TestCase):
    def setUp(self) -> None:
        self.fb = Framebuffer()

    def test_buffer_size(self) -> None:
        self.assertEqual(len(self.fb), 1024)
        self.assertEqual(len(self.fb.get_buffer()), 1024)
        self.assertEqual(len(Framebuffer(10, 12)), 20)

    def test_page_layout(self) -> None:
        self.fb.set_pixel(3, 10, 1)
        buffer = self.fb.get_buffer()
        self.assertEqual(buffer[3 + 1 * 128], 1 << 2)
        self.assertEqual(sum(buffer), 4)

        self.fb.set_pixel(127, 63, 1)
        self.assertEqual(self.fb.get_buffer()[127 + 7 * 128], 0x80)

    def test_set_get_round_trip(self) -> None:
        for x, y in ((0, 0), (64, 32), (127, 63), (5, 7), (5, 8)):
            with self.subTest(x=x, y=y):
                self.fb.set_pixel(x, y, 1)
                self.assertEqual(self.fb.get_pixel(x, y), 1)
                self.fb.set_pixel(x, y, 0)
                self.assertEqual(self.fb.get_pixel(x, y), 0)

    def test_clearing_one_bit_keeps_neighbours(self) -> None:
        for y in range(8):
            self.fb.set_pixel(9, y, 1)
        self.fb.set_pixel(9, 4, 0)
        self.assertEqual(self.fb.get_buffer()[9], 0xEF)

    def test_out_of_range_is_ignored(self) -> None:
        self.fb.set_pixel(10, 10, 1)
        before = self.fb.get_buffer()
        for x, y in ((-1, 0), (0, -1), (128, 0), (0, 64), (-1000, -1000), (500, 20)):
            with self.subTest(x=x, y=y):
                self.fb.set_pixel(x, y, 1)
                self.assertEqual(self.fb.get_pixel(x, y), 0)
        self.assertEqual(self.fb.get_buffer(), before)

    def test_clear(self) -> None:
        for x in range(0, 128, 3):
            for y in range(0, 64, 5):
                self.fb.set_pixel(x, y, 1)
        self.assertGreater(self.fb.lit_count(), 0)
        self.fb.clear()
        self.assertEqual(self.fb.lit_count(), 0)
        self.assertTrue(all(self.fb.get_pixel(x, y) == 0 for x in range(128) for y in range(64)))

    def test_invalid_size(self) -> None:
        with self.assertRaises(ValueError):
            Framebuffer(0, 64)


if __name__ == "__main__":
    unittest.main()
