"""
PixelStrip Adapter - rpi_ws281x implementation of LedStrip

The only module that touches rpi_ws281x.
"""
from typing import List, Union

from .interfaces import LedStrip
from .pixel import Pixel


class PixelStripAdapter(LedStrip):
    """
    LedStrip backed by an rpi_ws281x PixelStrip.

    Pixel values are ints, so they are written to the driver as-is.
    rpi_ws281x is imported on construction so the rest of the package can be
    used on machines without it.
    """

    def __init__(self, led_count: int, gpio_pin: int, freq_hz: int = 800000,
                 dma: int = 10, invert: bool = False, brightness: int = 255,
                 channel: int = 0) -> None:
        """
        Args:
            led_count: Number of LEDs in the strip
            gpio_pin: PWM-capable GPIO pin for the data line
            freq_hz: Signal frequency
            dma: DMA channel
            invert: Invert the signal (level shifter with inverting transistor)
            brightness: Global brightness 0-255
            channel: PWM channel

        Raises:
            ImportError: If rpi_ws281x is not installed
        """
        try:
            from rpi_ws281x import PixelStrip
        except ImportError as e:
            raise ImportError("rpi_ws281x not available - install the 'pi' extra on a Raspberry Pi") from e

        self._strip = PixelStrip(led_count, gpio_pin, freq_hz, dma, invert, brightness, channel)
        self._strip.begin()

    def __getitem__(self, pos: Union[int, slice]) -> Union[Pixel, List[Pixel]]:
        result = self._strip[pos]
        if isinstance(pos, slice):
            return [Pixel(color) for color in result]
        return Pixel(result)

    def __setitem__(self, pos: Union[int, slice], color: Union[Pixel, List[Pixel]]) -> None:
        if not isinstance(pos, slice):
            if isinstance(color, list):
                raise TypeError("Cannot assign list of colors to single position")
            self._strip[pos] = color
            return

        if not isinstance(color, list):
            self._strip[pos] = color
            return

        indices = range(*pos.indices(self._strip.size))
        if len(color) != len(indices):
            raise ValueError(f"Color list length ({len(color)}) must match slice length ({len(indices)})")
        for i, pixel in zip(indices, color):
            self._strip[i] = pixel

    def show(self) -> None:
        self._strip.show()

    def num_pixels(self) -> int:
        return self._strip.numPixels()
