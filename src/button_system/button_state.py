"""
ButtonState - one frame's button snapshot with edge detection
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class ButtonState:
    """
    Snapshot of all buttons for one frame.

    Usage:
        state = ButtonState([True, False], [False, False])
        state.was_changed      # [True, False]
        state.just_pressed()   # [0]
    """
    for_button: List[bool]           # Current: [button0, button1, ...]
    previous_state_of: List[bool]    # Previous frame

    was_changed: List[bool] = field(init=False)
    total_buttons_pressed: int = field(init=False)
    any_changed: bool = field(init=False)

    def __post_init__(self):
        if not isinstance(self.for_button, list) or not isinstance(self.previous_state_of, list):
            raise TypeError("Button states must be lists of bool")
        if len(self.for_button) != len(self.previous_state_of):
            raise ValueError(
                f"State lists must have same length: "
                f"for_button={len(self.for_button)}, previous_state_of={len(self.previous_state_of)}"
            )
        if not all(isinstance(x, bool) for x in self.for_button + self.previous_state_of):
            raise TypeError("All button states must be bool")

        self.was_changed = [prev != cur for prev, cur in zip(self.previous_state_of, self.for_button)]
        self.total_buttons_pressed = sum(self.for_button)
        self.any_changed = any(self.was_changed)

    def just_pressed(self) -> List[int]:
        """Indices of buttons that went down this frame, in index order"""
        return [i for i, (changed, pressed) in enumerate(zip(self.was_changed, self.for_button))
                if changed and pressed]

    def just_released(self) -> List[int]:
        return [i for i, (changed, pressed) in enumerate(zip(self.was_changed, self.for_button))
                if changed and not pressed]

    def get_button_count(self) -> int:
        return len(self.for_button)

    def __str__(self) -> str:
        pressed = [i for i, p in enumerate(self.for_button) if p]
        changed = [i for i, c in enumerate(self.was_changed) if c]
        return f"ButtonState(pressed={pressed}, changed={changed}, total_pressed={self.total_buttons_pressed})"
