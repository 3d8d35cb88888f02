"""
Simon game engine - round progression, sequence growth and input validation
"""

import enum
import random
from typing import List, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from utils import ClassLogger


SIGNAL_COUNT = 4
MAX_ROUND = 20


class GameState(enum.IntEnum):
    """Engine states. Codes are contiguous from POWER_OFF to WIN."""
    POWER_OFF = 0
    POWER_ON = 1
    START = 2
    ADD_RANDOM = 3
    COM_DEMO = 4
    PLAYER_SEQUENCE = 5
    MISTAKE = 6
    ALL_CORRECT = 7
    WIN = 8


class SimonEngine:
    """
    Finite-state machine behind the Simon game.

    The engine holds the signal sequence, the round and press counters and
    the strict flag. It never schedules anything itself: the controller reads
    the state after each call and decides what to light, play or delay.

    Transitions:
    - toggle_power(): POWER_OFF → POWER_ON (data reset), anything else → POWER_OFF (strict cleared)
    - start() / next_round(): → COM_DEMO, or WIN once max_round is exceeded
    - press(): PLAYER_SEQUENCE → PLAYER_SEQUENCE / ALL_CORRECT / MISTAKE

    start() and next_round() do not look at the power state. Only call them
    while powered on.

    Example:
        engine = SimonEngine()
        engine.toggle_power()            # POWER_ON
        engine.start()                   # COM_DEMO, round 1
        engine.set_state(GameState.PLAYER_SEQUENCE)
        engine.press(engine.get_sequence()[0])   # ALL_CORRECT
    """

    def __init__(self,
                 max_round: int = MAX_ROUND,
                 rng: Optional[random.Random] = None,
                 logger: Optional['ClassLogger'] = None):
        """
        Args:
            max_round: Rounds to complete before WIN
            rng: Random source for new signals (a fresh random.Random when None)
            logger: Optional ClassLogger for state change tracing
        """
        self.max_round = max_round
        self._rng = rng if rng is not None else random.Random()
        self._logger = logger

        self._state = GameState.POWER_OFF
        self._sequence: List[int] = []
        self._round = 0
        self._press_count = 0
        self._strict = False

    # Queries

    def get_round(self) -> int:
        return self._round

    def get_sequence(self) -> Tuple[int, ...]:
        """Read-only snapshot of the current signal sequence"""
        return tuple(self._sequence)

    def get_state(self) -> GameState:
        return self._state

    def get_strict(self) -> bool:
        return self._strict

    def get_press_count(self) -> int:
        """Correct presses made so far in the current round"""
        return self._press_count

    def is_state(self, state: GameState) -> bool:
        return self._state == state

    # Commands

    def set_state(self, state: int) -> None:
        """
        Set the current state.

        Values outside the GameState range are ignored.
        """
        if isinstance(state, bool) or not isinstance(state, int):
            return
        if not GameState.POWER_OFF <= state <= GameState.WIN:
            return

        self._state = GameState(state)
        if self._logger:
            self._logger.debug(f"State set to {self._state.name}")

    def start(self) -> None:
        """Start a new game from round 1"""
        self._reset()
        self.next_round()

    def next_round(self) -> None:
        """Grow the sequence by one signal, or declare the win after the last round"""
        self._press_count = 0

        if self._round + 1 > self.max_round:
            self.set_state(GameState.WIN)
            return

        self._round += 1
        self._sequence.append(self._rng.randrange(SIGNAL_COUNT))
        self.set_state(GameState.COM_DEMO)

        if self._logger:
            self._logger.info(f"Round {self._round} started")

    def press(self, signal: int) -> bool:
        """
        Register a player press.

        Args:
            signal: Pressed signal (0-3)

        Returns:
            True if the press was accepted. POWER_ON accepts presses as
            button tests without touching game data; only PLAYER_SEQUENCE
            compares the press against the sequence.
        """
        if self._state not in (GameState.POWER_ON, GameState.PLAYER_SEQUENCE):
            return False

        if self._state == GameState.POWER_ON:
            return True

        self._press_count += 1

        # An empty sequence has nothing to match
        expected = self._sequence[self._press_count - 1] if self._press_count <= len(self._sequence) else None

        if signal != expected:
            if self._logger:
                self._logger.info(
                    f"Mistake at press {self._press_count} of round {self._round}: "
                    f"got {signal}, expected {expected}"
                )
            self._press_count = 0
            self.set_state(GameState.MISTAKE)
        elif self._press_count == len(self._sequence):
            self.set_state(GameState.ALL_CORRECT)

        return True

    def toggle_power(self) -> None:
        if self._state == GameState.POWER_OFF:
            self.set_state(GameState.POWER_ON)
            self._reset()
        else:
            self.set_state(GameState.POWER_OFF)
            self._strict = False

    def toggle_strict(self) -> None:
        self._strict = not self._strict

    def _reset(self) -> None:
        self._sequence = []
        self._round = 0
        self._press_count = 0

    def __str__(self) -> str:
        return (
            f"SimonEngine(state={self._state.name}, round={self._round}, "
            f"press_count={self._press_count}, strict={self._strict})"
        )
