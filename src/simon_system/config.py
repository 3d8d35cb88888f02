"""
SimonBox configuration
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from .engine import MAX_ROUND, SIGNAL_COUNT


# Button indices after the four colour buttons (0-3)
POWER_BUTTON = SIGNAL_COUNT
START_BUTTON = SIGNAL_COUNT + 1
STRICT_BUTTON = SIGNAL_COUNT + 2
BUTTON_COUNT = SIGNAL_COUNT + 3

PULL_MODES = ("off", "up", "down")


@dataclass
class LedStripConfig:
    """Configuration for the button light strip"""
    gpio_pin: int
    led_count: int
    freq_hz: int = 800000
    dma: int = 10
    invert: bool = False
    brightness: int = 64  # 0-255
    channel: int = 0


@dataclass
class ButtonConfig:
    """
    Button hardware configuration.

    pins order: green, red, yellow, blue, power, start, strict
    """
    pins: List[int]
    pull_mode: str = "down"
    sample_rate_hz: int = 200


@dataclass
class AudioConfig:
    """Sound effect files, relative to sounds_folder"""
    sounds_folder: str = "sounds"
    signal_sounds: Tuple[str, ...] = (
        "simonSound1.mp3",
        "simonSound2.mp3",
        "simonSound3.mp3",
        "simonSound4.mp3",
    )
    mistake_sound: str = "simon_mistake.mp3"
    switch_sound: str = "switch.mp3"


@dataclass
class TimingConfig:
    """Light and delay durations, in milliseconds"""
    player_press_ms: int = 400          # Light time for a player press
    com_press_ms: int = 600             # Light time for a demo signal
    start_com_timeout_ms: int = 1100    # Gap between demo signals at round 1
    speed_increment_ms: int = 150       # Gap reduction at each increment round
    increment_rounds: Tuple[int, ...] = (5, 9, 13)
    next_round_delay_ms: int = 1600     # Pause after a completed round
    mistake_light_ms: int = 1000
    mistake_recovery_ms: int = 1500

    def demo_gap_ms_for_round(self, round_number: int) -> int:
        """
        Gap between demo signals for a round.

        The demo speeds up by speed_increment_ms at every increment round
        reached so far.
        """
        reached = sum(1 for r in self.increment_rounds if r <= round_number)
        return self.start_com_timeout_ms - reached * self.speed_increment_ms


@dataclass
class GameConfig:
    """Main SimonBox configuration"""

    button_config: ButtonConfig
    led_strip: LedStripConfig
    audio_config: AudioConfig = field(default_factory=AudioConfig)
    timing: TimingConfig = field(default_factory=TimingConfig)

    max_round: int = MAX_ROUND
    frame_duration_ms: float = 20  # 50 FPS

    @property
    def button_count(self) -> int:
        return len(self.button_config.pins)

    @property
    def target_fps(self) -> float:
        return 1000.0 / self.frame_duration_ms

    def validate(self) -> None:
        """Raise ValueError on an unusable configuration"""
        pins = self.button_config.pins
        if len(pins) != BUTTON_COUNT:
            raise ValueError(f"Expected {BUTTON_COUNT} button pins (4 colours, power, start, strict), got {len(pins)}")

        if len(set(pins)) != len(pins):
            raise ValueError(f"Duplicate button pins: {pins}")

        if self.led_strip.gpio_pin in pins:
            raise ValueError(f"GPIO pin conflict between buttons and LEDs: {self.led_strip.gpio_pin}")

        for pin in pins + [self.led_strip.gpio_pin]:
            if not (2 <= pin <= 27):  # Valid RPi GPIO range
                raise ValueError(f"GPIO pin {pin} out of valid range (2-27)")

        if self.button_config.pull_mode not in PULL_MODES:
            raise ValueError(f"Unknown pull mode '{self.button_config.pull_mode}', expected one of {PULL_MODES}")

        # One segment per signal plus the strict indicator pixel
        if self.led_strip.led_count < SIGNAL_COUNT + 1:
            raise ValueError(f"LED count must be at least {SIGNAL_COUNT + 1}, got {self.led_strip.led_count}")

        if not (0 <= self.led_strip.brightness <= 255):
            raise ValueError(f"LED brightness must be 0-255, got {self.led_strip.brightness}")

        if self.frame_duration_ms <= 0:
            raise ValueError("Frame duration must be positive")

        if self.max_round < 1:
            raise ValueError(f"max_round must be at least 1, got {self.max_round}")

        if len(self.audio_config.signal_sounds) != SIGNAL_COUNT:
            raise ValueError(f"Expected {SIGNAL_COUNT} signal sounds, got {len(self.audio_config.signal_sounds)}")

        fastest_gap = self.timing.demo_gap_ms_for_round(self.max_round)
        if fastest_gap <= 0:
            raise ValueError(f"Demo gap drops to {fastest_gap}ms by round {self.max_round}")
