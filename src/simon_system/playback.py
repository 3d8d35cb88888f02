"""
Timed light events for the computer demo and the win flourish
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple


@dataclass(frozen=True)
class LightEvent:
    """One signal lit during a demo"""
    signal: int
    light_ms: int       # How long the signal stays lit
    gap_ms: int         # Delay before the next event starts
    is_last: bool


class SequencePlayback:
    """
    Lazy, restartable demo of a signal sequence.

    Takes a snapshot of the sequence, so later engine changes do not leak
    into a demo that is already running. Every iter() starts from the first
    signal again, which is what a lenient mistake recovery needs.

    Example:
        playback = SequencePlayback(engine.get_sequence(), light_ms=600, gap_ms=1100)
        events = iter(playback)
        event = next(events)      # LightEvent(signal=2, light_ms=600, gap_ms=1100, is_last=False)
    """

    def __init__(self, sequence: Sequence[int], light_ms: int, gap_ms: int):
        self.sequence: Tuple[int, ...] = tuple(sequence)
        self.light_ms = light_ms
        self.gap_ms = gap_ms

    def __iter__(self) -> Iterator[LightEvent]:
        last_index = len(self.sequence) - 1
        for index, signal in enumerate(self.sequence):
            yield LightEvent(
                signal=signal,
                light_ms=self.light_ms,
                gap_ms=self.gap_ms,
                is_last=index == last_index
            )

    def __len__(self) -> int:
        return len(self.sequence)

    def total_duration_ms(self) -> int:
        """Time from the first light until the last one goes out"""
        if not self.sequence:
            return 0
        return self.gap_ms * (len(self.sequence) - 1) + self.light_ms


@dataclass(frozen=True)
class CelebrationStep:
    """
    One step of the win flourish.

    signal is the signal to light, None means "all lights off".
    restart marks the final step after which a new game begins.
    """
    at_ms: int
    signal: Optional[int] = None
    restart: bool = False


# (offset_ms, signal) for one pass of the flourish
WIN_PATTERN: Tuple[Tuple[int, int], ...] = ((0, 1), (100, 2), (225, 3), (450, 0))
WIN_ALL_OFF_MS = 1000
WIN_PASS_MS = 2000


def win_celebration(passes: int = 2) -> Iterator[CelebrationStep]:
    """
    Yield the win flourish: lights chase 1, 2, 3, 0, all go dark, and the
    pass repeats; a restart step follows the last pass.

    Args:
        passes: Number of times the chase is shown
    """
    for pass_index in range(passes):
        base = pass_index * WIN_PASS_MS
        for offset, signal in WIN_PATTERN:
            yield CelebrationStep(at_ms=base + offset, signal=signal)
        yield CelebrationStep(at_ms=base + WIN_ALL_OFF_MS)
    yield CelebrationStep(at_ms=passes * WIN_PASS_MS, restart=True)
