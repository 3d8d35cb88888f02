"""
Colour constants and strip layout helpers for the button lights
"""

from typing import List, Tuple

from led_system.pixel import Pixel

from .engine import SIGNAL_COUNT


class AnimationHelpers:
    """Static colour palette and strip geometry"""

    BLACK = Pixel(0, 0, 0)
    STRICT_RED = Pixel(255, 0, 0)

    # Signal 0-3: green, red, yellow, blue
    SIGNAL_COLORS: Tuple[Pixel, ...] = (
        Pixel(0, 200, 0),
        Pixel(220, 0, 0),
        Pixel(230, 200, 0),
        Pixel(0, 60, 255),
    )

    # Brightness of an unlit button while powered on
    IDLE_BRIGHTNESS = 0.12

    @staticmethod
    def signal_segments(num_pixels: int) -> List[range]:
        """
        Split a strip into one pixel range per signal.

        The last pixel is kept for the strict indicator; leftover pixels
        after integer division stay dark.
        """
        per_signal = (num_pixels - 1) // SIGNAL_COUNT
        return [range(i * per_signal, (i + 1) * per_signal) for i in range(SIGNAL_COUNT)]

    @staticmethod
    def indicator_index(num_pixels: int) -> int:
        return num_pixels - 1
