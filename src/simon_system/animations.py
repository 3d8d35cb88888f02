"""
Animation base class and the button light renderer
"""

import time
from abc import ABC, abstractmethod
from typing import Callable, List, TYPE_CHECKING

from .animation_helpers import AnimationHelpers
from .engine import SIGNAL_COUNT

if TYPE_CHECKING:
    from led_system.interfaces import LedStrip


class Animation(ABC):
    """
    Time-throttled animation bound to one LED strip.

    update_if_needed() writes the strip buffer at most once per speed_ms and
    reports whether it did; the caller decides when to call strip.show().
    """

    def __init__(self, strip: 'LedStrip', speed_ms: int, clock: Callable[[], float] = time.monotonic):
        """
        Args:
            strip: LED strip to operate on
            speed_ms: Minimum interval between buffer updates
            clock: Seconds-based time source
        """
        self.strip: 'LedStrip' = strip
        self.speed_ms: int = speed_ms
        self._clock = clock
        self.last_update: float = float("-inf")

    def needs_update(self) -> bool:
        """Override to skip frames where nothing changed"""
        return True

    def update_if_needed(self) -> bool:
        """
        Advance the animation if it is due and has something to draw.

        Returns:
            True if the strip buffer was modified
        """
        now = self._clock()
        if (now - self.last_update) * 1000 < self.speed_ms or not self.needs_update():
            return False
        self.advance()
        self.last_update = now
        return True

    @abstractmethod
    def advance(self) -> None:
        """Write the next frame into the strip buffer (no show())"""
        pass


class SignalLightsAnimation(Animation):
    """
    Renders the four button lights and the strict indicator.

    Each signal owns a segment of the strip: full colour while lit, a dim
    glow while powered, dark when the box is off. The last pixel is red
    while strict mode is on.
    """

    def __init__(self, strip: 'LedStrip', speed_ms: int = 20, clock: Callable[[], float] = time.monotonic):
        super().__init__(strip, speed_ms, clock)
        self.lit: List[bool] = [False] * SIGNAL_COUNT
        self.powered = False
        self.strict = False
        self._dirty = True

        self._segments = AnimationHelpers.signal_segments(strip.num_pixels())
        self._indicator = AnimationHelpers.indicator_index(strip.num_pixels())

    def set_lit(self, signal: int, lit: bool) -> None:
        if self.lit[signal] != lit:
            self.lit[signal] = lit
            self._dirty = True

    def all_off(self) -> None:
        if any(self.lit):
            self.lit = [False] * SIGNAL_COUNT
            self._dirty = True

    def set_status(self, powered: bool, strict: bool) -> None:
        if (powered, strict) != (self.powered, self.strict):
            self.powered = powered
            self.strict = strict
            self._dirty = True

    def needs_update(self) -> bool:
        return self._dirty

    def advance(self) -> None:
        for signal, segment in enumerate(self._segments):
            base = AnimationHelpers.SIGNAL_COLORS[signal]
            if self.lit[signal]:
                color = base
            elif self.powered:
                color = base.scaled(AnimationHelpers.IDLE_BRIGHTNESS)
            else:
                color = AnimationHelpers.BLACK
            self.strip[segment.start:segment.stop] = color

        self.strip[self._indicator] = AnimationHelpers.STRICT_RED if self.powered and self.strict else AnimationHelpers.BLACK
        self._dirty = False
