"""
Button reader - samples every button once per frame and tracks edges
"""

from typing import List

from .interfaces import IButtonReader, IButtonSampler
from .button_state import ButtonState


class ButtonReader(IButtonReader):
    """
    Turns raw sampler levels into ButtonState snapshots.

    Example:
        logger = main_logger.get_class_logger("ButtonReader", logging.INFO)
        reader = ButtonReader(GPIOSampler(pins, "down", logger), logger)

        state = reader.read_buttons()
        for index in state.just_pressed():
            ...
    """

    def __init__(self, sampler: IButtonSampler, logger):
        """
        Args:
            sampler: Hardware (or test) sampler; setup() is called here
            logger: ClassLogger instance
        """
        self._sampler = sampler
        self._logger = logger
        self._previous_state: List[bool] = [False] * sampler.get_button_count()
        self._sampler.setup()

        self._logger.info(f"ButtonReader initialized with {sampler.get_button_count()} buttons")

    def read_buttons(self) -> ButtonState:
        current = [self._sampler.read_button(i) for i in range(self._sampler.get_button_count())]

        state = ButtonState(for_button=current, previous_state_of=self._previous_state)
        self._previous_state = current

        for i in state.just_pressed():
            self._logger.debug(f"Button {i} pressed")
        for i in state.just_released():
            self._logger.debug(f"Button {i} released")

        return state

    def get_button_count(self) -> int:
        return self._sampler.get_button_count()

    def cleanup(self) -> None:
        self._sampler.cleanup()
        self._logger.info("ButtonReader cleaned up")
