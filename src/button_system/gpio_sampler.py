"""
GPIO button sampler using RPi.GPIO
"""

from typing import List

from .interfaces import IButtonSampler


class GPIOSampler(IButtonSampler):
    """
    Reads button levels from GPIO pins (BCM numbering).

    RPi.GPIO is imported in setup(), so constructing the sampler on a
    development machine is harmless until the hardware is actually opened.
    """

    def __init__(self, button_pins: List[int], pull_mode: str, logger):
        """
        Args:
            button_pins: GPIO pins in button index order
            pull_mode: "off", "up" or "down"
            logger: ClassLogger instance
        """
        self._button_pins = list(button_pins)
        self._pull_mode = pull_mode
        self._logger = logger
        self._gpio = None

    def get_button_count(self) -> int:
        return len(self._button_pins)

    def setup(self) -> None:
        try:
            import RPi.GPIO as GPIO
        except ImportError as e:
            raise ImportError("RPi.GPIO is required for GPIOSampler - install the 'pi' extra on a Raspberry Pi") from e

        pull = {"off": GPIO.PUD_OFF, "up": GPIO.PUD_UP, "down": GPIO.PUD_DOWN}[self._pull_mode]

        GPIO.setmode(GPIO.BCM)
        for pin in self._button_pins:
            GPIO.setup(pin, GPIO.IN, pull_up_down=pull)
        self._gpio = GPIO

        pin_mapping = ", ".join(f"Btn{i}=GPIO{pin}" for i, pin in enumerate(self._button_pins))
        self._logger.info(f"GPIO sampler initialized: {len(self._button_pins)} pins (pull-{self._pull_mode})")
        self._logger.info(f"Pin mapping: {pin_mapping}")

    def read_button(self, button_index: int) -> bool:
        level = self._gpio.input(self._button_pins[button_index])
        # With pull-up wiring the button shorts the pin to ground
        if self._pull_mode == "up":
            return level == self._gpio.LOW
        return level == self._gpio.HIGH

    def cleanup(self) -> None:
        if self._gpio is None:
            return
        self._gpio.cleanup(self._button_pins)
        self._gpio = None
        self._logger.info("GPIO sampler cleaned up")
