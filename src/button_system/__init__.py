"""
Button System Package

Reads the SimonBox buttons (four colours plus power, start and strict)
through a pluggable sampler and reports per-frame edges.
"""

from .button_state import ButtonState
from .interfaces import IButtonReader, IButtonSampler
from .button_reader import ButtonReader
from .gpio_sampler import GPIOSampler
from .keyboard_sampler import KeyboardSampler, DEFAULT_KEY_MAP

__all__ = [
    "ButtonState",
    "IButtonReader",
    "IButtonSampler",
    "ButtonReader",
    "GPIOSampler",
    "KeyboardSampler",
    "DEFAULT_KEY_MAP"
]
