"""
Keyboard sampler for playing without GPIO hardware
"""

import select
import sys
import termios
import tty
from typing import Dict, List, Optional

from .interfaces import IButtonSampler


# Default key layout: colours on 1-4, then power, start, strict
DEFAULT_KEY_MAP: Dict[str, int] = {
    '1': 0,
    '2': 1,
    '3': 2,
    '4': 3,
    'p': 4,
    's': 5,
    't': 6,
}


class KeyboardSampler(IButtonSampler):
    """
    Momentary keyboard buttons over a raw TTY (works over SSH).

    A key press shows up as the button being down for exactly one sweep over
    the buttons, then released, so each keystroke gives one rising edge.
    The sweep starts when button 0 is read, which is what ButtonReader does
    every frame.

    Example:
        sampler = KeyboardSampler(num_buttons=7, logger=logger)
        # '1'-'4' colours, 'p' power, 's' start, 't' strict
    """

    def __init__(self, num_buttons: int, logger, key_map: Optional[Dict[str, int]] = None):
        """
        Args:
            num_buttons: Number of virtual buttons
            logger: ClassLogger instance
            key_map: Key character → button index (case-insensitive)
        """
        self._button_count = num_buttons
        self._logger = logger
        self._key_map = {k.lower(): v for k, v in (key_map or DEFAULT_KEY_MAP).items()}

        bad = [k for k, v in self._key_map.items() if not 0 <= v < num_buttons]
        if bad:
            raise ValueError(f"Keys {bad} map outside 0-{num_buttons - 1}")

        self._pressed_this_sweep: List[bool] = [False] * num_buttons
        self._original_terminal_settings = None

    def get_button_count(self) -> int:
        return self._button_count

    def setup(self) -> None:
        if not sys.stdin.isatty():
            self._logger.error("Keyboard input not available (stdin is not a TTY)")
            raise RuntimeError("Keyboard input not available")

        self._original_terminal_settings = termios.tcgetattr(sys.stdin)
        # cbreak keeps Ctrl+C working, unlike full raw mode
        tty.setcbreak(sys.stdin.fileno())

        keys = ", ".join(f"'{k}'=Btn{v}" for k, v in sorted(self._key_map.items(), key=lambda kv: kv[1]))
        self._logger.info(f"🎮 Keyboard sampler initialized (NO GPIO): {keys}")

    def _poll_keys(self) -> None:
        """Read every pending key without blocking and mark its button down"""
        self._pressed_this_sweep = [False] * self._button_count
        while select.select([sys.stdin], [], [], 0)[0]:
            key = sys.stdin.read(1).lower()
            button_index = self._key_map.get(key)
            if button_index is None:
                self._logger.debug(f"Unmapped key {key!r}")
                continue
            self._pressed_this_sweep[button_index] = True

    def read_button(self, button_index: int) -> bool:
        if button_index == 0:
            self._poll_keys()
        return self._pressed_this_sweep[button_index]

    def cleanup(self) -> None:
        """Restore the terminal settings saved in setup()"""
        if self._original_terminal_settings is None:
            return
        termios.tcsetattr(sys.stdin.fileno(), termios.TCSADRAIN, self._original_terminal_settings)
        self._original_terminal_settings = None
        self._logger.info("Keyboard sampler cleaned up")
