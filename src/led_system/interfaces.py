"""
LED Strip Interface - contract shared by the hardware adapter and the
in-memory strip
"""
from abc import ABC, abstractmethod
from typing import List, Union

from .pixel import Pixel


class LedStrip(ABC):
    """
    Abstract LED strip addressed with Python indexing and slices.

    Supported Operations:
        strip[5] = Pixel(255, 0, 0)            # Single pixel
        strip[0:10] = Pixel(0, 255, 0)         # Slice to one colour
        strip[0:3] = [p1, p2, p3]              # Slice to a list of colours
        strip[:] = Pixel(0, 0, 0)              # Clear all
        strip.show()                           # Push buffer to the LEDs

    Assigning a list to a single position raises TypeError; a list whose
    length differs from the slice raises ValueError.
    """

    @abstractmethod
    def __getitem__(self, pos: Union[int, slice]) -> Union[Pixel, List[Pixel]]:
        pass

    @abstractmethod
    def __setitem__(self, pos: Union[int, slice], color: Union[Pixel, List[Pixel]]) -> None:
        pass

    @abstractmethod
    def show(self) -> None:
        """Make the current buffer visible"""
        pass

    @abstractmethod
    def num_pixels(self) -> int:
        pass
