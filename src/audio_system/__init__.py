"""
Audio System Module

Signal tones and sound effects for SimonBox.
"""

from .sound_controller import SoundController, SimonSounds
from .mock_sound_controller import MockSoundController

__all__ = [
    'SoundController',
    'SimonSounds',
    'MockSoundController'
]
