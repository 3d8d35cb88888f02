"""
Simon System - memory-sequence game engine and its cabinet driver

SimonEngine is the state machine; SimonController wires it to buttons,
lights, sound and timers.
"""

from .engine import GameState, SimonEngine, SIGNAL_COUNT, MAX_ROUND
from .scheduler import CallbackScheduler, ScheduledCallback
from .playback import SequencePlayback, LightEvent, CelebrationStep, win_celebration
from .animations import Animation, SignalLightsAnimation
from .animation_helpers import AnimationHelpers
from .simon_controller import SimonController
from .config import (
    GameConfig, LedStripConfig, ButtonConfig, AudioConfig, TimingConfig,
    POWER_BUTTON, START_BUTTON, STRICT_BUTTON, BUTTON_COUNT
)

__all__ = [
    # Engine
    "GameState",
    "SimonEngine",
    "SIGNAL_COUNT",
    "MAX_ROUND",
    # Driver
    "CallbackScheduler",
    "ScheduledCallback",
    "SequencePlayback",
    "LightEvent",
    "CelebrationStep",
    "win_celebration",
    "Animation",
    "SignalLightsAnimation",
    "AnimationHelpers",
    "SimonController",
    # Configuration
    "GameConfig",
    "LedStripConfig",
    "ButtonConfig",
    "AudioConfig",
    "TimingConfig",
    "POWER_BUTTON",
    "START_BUTTON",
    "STRICT_BUTTON",
    "BUTTON_COUNT"
]
