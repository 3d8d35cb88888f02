#!/usr/bin/env python3
"""
LED System - button light strip control

- Pixel: packed RGB colour that is also an int
- LedStrip: abstract strip interface with slice support
- PixelStripAdapter: rpi_ws281x implementation
- MemoryStrip: in-memory implementation for development and tests

Usage:
    from led_system import MemoryStrip, Pixel

    strip = MemoryStrip(led_count=41)
    strip[0:10] = Pixel(0, 255, 0)
    strip.show()
"""

from .pixel import Pixel
from .interfaces import LedStrip
from .pixel_strip_adapter import PixelStripAdapter
from .memory_strip import MemoryStrip

__all__ = ['Pixel', 'LedStrip', 'PixelStripAdapter', 'MemoryStrip']
