"""
Mock Sound Controller - no-op audio for development and tests
"""

from typing import List, Tuple


class MockSoundController:
    """
    Drop-in replacement for SoundController without audio hardware.

    Every call is logged at DEBUG and appended to `played` as
    (kind, signal) so tests can check what would have been heard.
    """

    def __init__(self, logger):
        self.logger = logger
        self.played: List[Tuple[str, int]] = []

        self.logger.info("🔇 MockSoundController initialized (audio disabled)")

    def play_signal(self, signal: int) -> None:
        self.played.append(("signal", signal))
        self.logger.debug(f"Mock: signal tone {signal}")

    def play_mistake(self) -> None:
        self.played.append(("mistake", -1))
        self.logger.debug("Mock: mistake sound")

    def play_switch(self) -> None:
        self.played.append(("switch", -1))
        self.logger.debug("Mock: switch click")

    def stop_all(self) -> None:
        pass

    def cleanup(self) -> None:
        self.logger.info("Mock sound controller cleaned up")
