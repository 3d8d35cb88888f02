"""
In-memory LedStrip for development machines and tests
"""
from typing import List, Union

from .interfaces import LedStrip
from .pixel import Pixel


class MemoryStrip(LedStrip):
    """
    LedStrip that keeps its pixels in a list.

    show() copies the buffer into `shown`, so tests can tell what would be
    visible apart from what is only buffered.
    """

    def __init__(self, led_count: int):
        self._pixels: List[Pixel] = [Pixel(0)] * led_count
        self.shown: List[Pixel] = list(self._pixels)
        self.show_count = 0

    def __getitem__(self, pos: Union[int, slice]) -> Union[Pixel, List[Pixel]]:
        return self._pixels[pos]

    def __setitem__(self, pos: Union[int, slice], color: Union[Pixel, List[Pixel]]) -> None:
        if not isinstance(pos, slice):
            if isinstance(color, list):
                raise TypeError("Cannot assign list of colors to single position")
            self._pixels[pos] = Pixel(color)
            return

        indices = range(*pos.indices(len(self._pixels)))
        if isinstance(color, list):
            if len(color) != len(indices):
                raise ValueError(f"Color list length ({len(color)}) must match slice length ({len(indices)})")
            colors = [Pixel(c) for c in color]
        else:
            colors = [Pixel(color)] * len(indices)

        for i, pixel in zip(indices, colors):
            self._pixels[i] = pixel

    def show(self) -> None:
        self.shown = list(self._pixels)
        self.show_count += 1

    def num_pixels(self) -> int:
        return len(self._pixels)
