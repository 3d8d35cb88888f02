"""
Abstract interfaces for button reading
"""

from abc import ABC, abstractmethod

from .button_state import ButtonState


class IButtonSampler(ABC):
    """
    Reads the raw pressed/released level of individual buttons.

    Implementations: GPIO, keyboard, scripted input for tests.
    """

    @abstractmethod
    def read_button(self, button_index: int) -> bool:
        """True if the button is currently down"""
        pass

    @abstractmethod
    def get_button_count(self) -> int:
        pass

    @abstractmethod
    def setup(self) -> None:
        pass

    @abstractmethod
    def cleanup(self) -> None:
        pass


class IButtonReader(ABC):
    """Produces one ButtonState per frame"""

    @abstractmethod
    def read_buttons(self) -> ButtonState:
        pass

    @abstractmethod
    def get_button_count(self) -> int:
        pass

    @abstractmethod
    def cleanup(self) -> None:
        """Release hardware resources before exit"""
        pass
