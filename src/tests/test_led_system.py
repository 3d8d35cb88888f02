"""Unit tests for Pixel, MemoryStrip and the button light layout."""

import unittest

from simon_test_support import FakeClock

from led_system import MemoryStrip, Pixel
from simon_system import AnimationHelpers, SignalLightsAnimation


class TestPixel(unittest.TestCase):

    def test_rgb_packing(self) -> None:
        pixel = Pixel(0x12, 0x34, 0x56)
        self.assertEqual(int(pixel), 0x123456)
        self.assertEqual((pixel.r, pixel.g, pixel.b), (0x12, 0x34, 0x56))
        self.assertEqual(Pixel(0x123456), pixel)

    def test_partial_rgb_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Pixel(1, 2)

    def test_scaled(self) -> None:
        self.assertEqual(Pixel(200, 100, 50).scaled(0.5), Pixel(100, 50, 25))
        self.assertEqual(Pixel(200, 100, 50).scaled(2.0), Pixel(200, 100, 50))
        self.assertEqual(Pixel(200, 100, 50).scaled(-1), Pixel(0, 0, 0))


class TestMemoryStrip(unittest.TestCase):

    def setUp(self) -> None:
        self.strip = MemoryStrip(10)

    def test_starts_dark(self) -> None:
        self.assertEqual(self.strip.num_pixels(), 10)
        self.assertTrue(all(p == 0 for p in self.strip[:]))

    def test_single_and_slice_assignment(self) -> None:
        red = Pixel(255, 0, 0)
        self.strip[3] = red
        self.strip[5:8] = Pixel(0, 0, 255)
        self.assertEqual(self.strip[3], red)
        self.assertEqual(self.strip[5:8], [Pixel(0, 0, 255)] * 3)

    def test_list_assignment(self) -> None:
        colors = [Pixel(1, 1, 1), Pixel(2, 2, 2)]
        self.strip[0:2] = colors
        self.assertEqual(self.strip[0:2], colors)

    def test_list_length_mismatch(self) -> None:
        with self.assertRaises(ValueError):
            self.strip[0:3] = [Pixel(1, 1, 1)]

    def test_list_to_single_position(self) -> None:
        with self.assertRaises(TypeError):
            self.strip[0] = [Pixel(1, 1, 1)]

    def test_show_separates_buffer_from_visible(self) -> None:
        self.strip[0] = Pixel(9, 9, 9)
        self.assertEqual(self.strip.shown[0], 0)
        self.strip.show()
        self.assertEqual(self.strip.shown[0], Pixel(9, 9, 9))
        self.assertEqual(self.strip.show_count, 1)


class TestSignalLightsAnimation(unittest.TestCase):

    def setUp(self) -> None:
        self.clock = FakeClock()
        self.strip = MemoryStrip(41)
        self.lights = SignalLightsAnimation(self.strip, speed_ms=20, clock=self.clock)

    def test_segments(self) -> None:
        segments = AnimationHelpers.signal_segments(41)
        self.assertEqual(segments, [range(0, 10), range(10, 20), range(20, 30), range(30, 40)])
        self.assertEqual(AnimationHelpers.indicator_index(41), 40)

    def test_leftover_pixels_stay_dark(self) -> None:
        strip = MemoryStrip(44)
        lights = SignalLightsAnimation(strip, clock=self.clock)
        lights.set_status(True, False)
        lights.update_if_needed()
        self.assertEqual(strip[40:43], [Pixel(0)] * 3)

    def test_throttled(self) -> None:
        self.assertTrue(self.lights.update_if_needed())
        self.lights.set_lit(0, True)
        self.clock.advance(10)
        self.assertFalse(self.lights.update_if_needed())
        self.clock.advance(10)
        self.assertTrue(self.lights.update_if_needed())
        self.assertEqual(self.strip[0], AnimationHelpers.SIGNAL_COLORS[0])

    def test_skips_when_nothing_changed(self) -> None:
        self.lights.update_if_needed()
        self.clock.advance(100)
        self.assertFalse(self.lights.update_if_needed())

    def test_lit_signal_overrides_dark_when_off(self) -> None:
        self.lights.set_lit(3, True)
        self.lights.update_if_needed()
        self.assertEqual(self.strip[35], AnimationHelpers.SIGNAL_COLORS[3])
        self.assertEqual(self.strip[5], AnimationHelpers.BLACK)

    def test_all_off(self) -> None:
        self.lights.set_lit(1, True)
        self.lights.set_lit(2, True)
        self.lights.all_off()
        self.assertEqual(self.lights.lit, [False] * 4)


if __name__ == "__main__":
    unittest.main()
