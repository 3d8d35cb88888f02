"""Unit tests for the Simon game engine."""

import random
import unittest

from simon_test_support import TempLogging

from simon_system.engine import GameState, MAX_ROUND, SIGNAL_COUNT, SimonEngine


def powered_engine(seed: int = 7, **kwargs) -> SimonEngine:
    engine = SimonEngine(rng=random.Random(seed), **kwargs)
    engine.toggle_power()
    return engine


def engine_with_sequence(sequence) -> SimonEngine:
    """Engine in PLAYER_SEQUENCE holding exactly `sequence`; later rounds add signal 0"""
    values = iter(sequence)

    class _Rng(random.Random):
        def randrange(self, *args, **kwargs):
            return next(values, 0)

    engine = SimonEngine(rng=_Rng())
    engine.toggle_power()
    engine.start()
    for _ in range(len(sequence) - 1):
        engine.next_round()
    engine.set_state(GameState.PLAYER_SEQUENCE)
    return engine


class TestInitialState(unittest.TestCase):
    """A new engine is off and empty."""

    def test_defaults(self) -> None:
        engine = SimonEngine()
        self.assertEqual(engine.get_state(), GameState.POWER_OFF)
        self.assertEqual(engine.get_round(), 0)
        self.assertEqual(engine.get_sequence(), ())
        self.assertEqual(engine.get_press_count(), 0)
        self.assertFalse(engine.get_strict())
        self.assertTrue(engine.is_state(GameState.POWER_OFF))

    def test_state_codes_are_contiguous(self) -> None:
        self.assertEqual([s.value for s in GameState], list(range(9)))
        self.assertEqual(GameState.POWER_OFF, 0)
        self.assertEqual(GameState.WIN, 8)

    def test_engines_are_independent(self) -> None:
        a = powered_engine()
        b = SimonEngine()
        a.start()
        self.assertEqual(a.get_round(), 1)
        self.assertEqual(b.get_round(), 0)
        self.assertTrue(b.is_state(GameState.POWER_OFF))


class TestPower(unittest.TestCase):
    """Power toggling and the strict flag."""

    def test_power_on_resets_data(self) -> None:
        engine = powered_engine()
        engine.start()
        engine.next_round()
        engine.toggle_power()
        self.assertTrue(engine.is_state(GameState.POWER_OFF))
        # Power off leaves the abandoned round's data in place
        self.assertEqual(engine.get_round(), 2)

        engine.toggle_power()
        self.assertTrue(engine.is_state(GameState.POWER_ON))
        self.assertEqual(engine.get_round(), 0)
        self.assertEqual(engine.get_sequence(), ())
        self.assertEqual(engine.get_press_count(), 0)

    def test_power_off_from_any_state(self) -> None:
        for state in GameState:
            if state == GameState.POWER_OFF:
                continue
            engine = SimonEngine()
            engine.set_state(state)
            engine.toggle_power()
            self.assertTrue(engine.is_state(GameState.POWER_OFF), state.name)

    def test_power_off_clears_strict(self) -> None:
        engine = powered_engine()
        engine.toggle_strict()
        self.assertTrue(engine.get_strict())
        engine.toggle_power()
        self.assertFalse(engine.get_strict())

    def test_power_off_with_strict_already_off(self) -> None:
        engine = powered_engine()
        engine.toggle_power()
        self.assertFalse(engine.get_strict())

    def test_power_on_keeps_strict(self) -> None:
        engine = SimonEngine()
        engine.toggle_strict()
        engine.toggle_power()
        self.assertTrue(engine.is_state(GameState.POWER_ON))
        self.assertTrue(engine.get_strict())

    def test_strict_toggle_twice_restores(self) -> None:
        for state in GameState:
            engine = SimonEngine()
            engine.set_state(state)
            before = engine.get_strict()
            engine.toggle_strict()
            engine.toggle_strict()
            self.assertEqual(engine.get_strict(), before)
            self.assertTrue(engine.is_state(state))

    def test_strict_even_toggles_are_noop(self) -> None:
        engine = powered_engine()
        for _ in range(6):
            engine.toggle_strict()
        self.assertFalse(engine.get_strict())
        engine.toggle_strict()
        self.assertTrue(engine.get_strict())


class TestRounds(unittest.TestCase):
    """start() and next_round()."""

    def test_start_begins_round_one(self) -> None:
        engine = powered_engine()
        engine.start()
        self.assertEqual(engine.get_round(), 1)
        self.assertEqual(len(engine.get_sequence()), 1)
        self.assertTrue(engine.is_state(GameState.COM_DEMO))

    def test_start_discards_previous_game(self) -> None:
        engine = powered_engine()
        engine.start()
        for _ in range(4):
            engine.next_round()
        engine.start()
        self.assertEqual(engine.get_round(), 1)
        self.assertEqual(len(engine.get_sequence()), 1)

    def test_start_does_not_check_power(self) -> None:
        engine = SimonEngine()
        engine.start()
        self.assertEqual(engine.get_round(), 1)
        self.assertTrue(engine.is_state(GameState.COM_DEMO))

    def test_sequence_length_matches_round(self) -> None:
        engine = powered_engine()
        engine.start()
        for _ in range(30):
            engine.next_round()
            self.assertEqual(len(engine.get_sequence()), engine.get_round())
            self.assertLessEqual(engine.get_round(), MAX_ROUND)

    def test_next_round_appends_and_keeps_prefix(self) -> None:
        engine = powered_engine()
        engine.start()
        before = engine.get_sequence()
        engine.next_round()
        after = engine.get_sequence()
        self.assertEqual(after[:len(before)], before)
        self.assertEqual(len(after), len(before) + 1)

    def test_signals_in_range(self) -> None:
        engine = powered_engine(seed=3)
        engine.start()
        for _ in range(MAX_ROUND - 1):
            engine.next_round()
        self.assertTrue(all(0 <= s < SIGNAL_COUNT for s in engine.get_sequence()))

    def test_twenty_rounds_then_win(self) -> None:
        engine = SimonEngine(rng=random.Random(1))
        engine.start()
        for _ in range(MAX_ROUND):
            engine.next_round()
        self.assertTrue(engine.is_state(GameState.WIN))
        self.assertEqual(engine.get_round(), MAX_ROUND)
        self.assertEqual(len(engine.get_sequence()), MAX_ROUND)

    def test_win_leaves_sequence_unchanged(self) -> None:
        engine = powered_engine(max_round=2)
        engine.start()
        engine.next_round()
        sequence = engine.get_sequence()
        engine.next_round()
        self.assertTrue(engine.is_state(GameState.WIN))
        self.assertEqual(engine.get_sequence(), sequence)
        engine.next_round()
        self.assertEqual(engine.get_round(), 2)

    def test_next_round_resets_press_count(self) -> None:
        engine = engine_with_sequence([1, 2])
        engine.press(1)
        self.assertEqual(engine.get_press_count(), 1)
        engine.next_round()
        self.assertEqual(engine.get_press_count(), 0)
        self.assertEqual(engine.get_sequence(), (1, 2, 0))

    def test_sequence_view_is_read_only(self) -> None:
        engine = powered_engine()
        engine.start()
        view = engine.get_sequence()
        self.assertIsInstance(view, tuple)
        engine.next_round()
        self.assertEqual(len(view), 1)

    def test_signals_cover_whole_domain(self) -> None:
        engine = SimonEngine(rng=random.Random(11), max_round=400)
        engine.start()
        for _ in range(399):
            engine.next_round()
        self.assertEqual(set(engine.get_sequence()), {0, 1, 2, 3})


class TestPress(unittest.TestCase):
    """Player input validation."""

    def test_rejected_outside_power_on_and_player_sequence(self) -> None:
        for state in GameState:
            if state in (GameState.POWER_ON, GameState.PLAYER_SEQUENCE):
                continue
            engine = SimonEngine()
            engine.start()
            engine.set_state(state)
            round_before = engine.get_round()
            sequence_before = engine.get_sequence()
            self.assertFalse(engine.press(0), state.name)
            self.assertTrue(engine.is_state(state))
            self.assertEqual(engine.get_round(), round_before)
            self.assertEqual(engine.get_sequence(), sequence_before)

    def test_power_on_press_is_a_button_test(self) -> None:
        engine = powered_engine()
        for signal in range(SIGNAL_COUNT):
            self.assertTrue(engine.press(signal))
        self.assertTrue(engine.is_state(GameState.POWER_ON))
        self.assertEqual(engine.get_round(), 0)
        self.assertEqual(engine.get_sequence(), ())
        self.assertEqual(engine.get_press_count(), 0)

    def test_single_round_scenario(self) -> None:
        engine = SimonEngine(rng=random.Random(5))
        engine.toggle_power()
        self.assertTrue(engine.is_state(GameState.POWER_ON))
        self.assertEqual(engine.get_round(), 0)
        self.assertEqual(engine.get_sequence(), ())

        engine.start()
        self.assertEqual(engine.get_round(), 1)
        self.assertEqual(len(engine.get_sequence()), 1)
        self.assertTrue(engine.is_state(GameState.COM_DEMO))

        engine.set_state(GameState.PLAYER_SEQUENCE)
        self.assertTrue(engine.press(engine.get_sequence()[0]))
        self.assertTrue(engine.is_state(GameState.ALL_CORRECT))

        engine.next_round()
        self.assertEqual(engine.get_round(), 2)
        self.assertEqual(len(engine.get_sequence()), 2)
        self.assertTrue(engine.is_state(GameState.COM_DEMO))

    def test_mistake_scenario(self) -> None:
        engine = engine_with_sequence([2, 0])
        self.assertEqual(engine.get_press_count(), 0)

        self.assertTrue(engine.press(2))
        self.assertEqual(engine.get_press_count(), 1)
        self.assertTrue(engine.is_state(GameState.PLAYER_SEQUENCE))

        self.assertTrue(engine.press(3))
        self.assertEqual(engine.get_press_count(), 0)
        self.assertTrue(engine.is_state(GameState.MISTAKE))

    def test_mistake_on_first_press(self) -> None:
        engine = engine_with_sequence([1, 1, 1])
        engine.press(0)
        self.assertTrue(engine.is_state(GameState.MISTAKE))
        self.assertEqual(engine.get_round(), 3)
        self.assertEqual(engine.get_sequence(), (1, 1, 1))

    def test_full_sequence_reaches_all_correct(self) -> None:
        engine = engine_with_sequence([3, 1, 0, 2])
        for signal in (3, 1, 0):
            engine.press(signal)
            self.assertTrue(engine.is_state(GameState.PLAYER_SEQUENCE))
        engine.press(2)
        self.assertTrue(engine.is_state(GameState.ALL_CORRECT))
        self.assertEqual(engine.get_press_count(), 4)

    def test_press_after_all_correct_is_rejected(self) -> None:
        engine = engine_with_sequence([0])
        engine.press(0)
        self.assertFalse(engine.press(0))
        self.assertEqual(engine.get_press_count(), 1)

    def test_replay_after_mistake_starts_from_first_signal(self) -> None:
        engine = engine_with_sequence([2, 0])
        engine.press(2)
        engine.press(1)
        engine.set_state(GameState.PLAYER_SEQUENCE)
        engine.press(2)
        engine.press(0)
        self.assertTrue(engine.is_state(GameState.ALL_CORRECT))

    def test_press_with_empty_sequence_is_a_mistake(self) -> None:
        engine = powered_engine()
        engine.set_state(GameState.PLAYER_SEQUENCE)
        self.assertTrue(engine.press(0))
        self.assertTrue(engine.is_state(GameState.MISTAKE))
        self.assertEqual(engine.get_press_count(), 0)


class TestSetState(unittest.TestCase):
    """Bounds-checked state setter."""

    def test_valid_values(self) -> None:
        engine = SimonEngine()
        engine.set_state(GameState.MISTAKE)
        self.assertTrue(engine.is_state(GameState.MISTAKE))
        engine.set_state(7)
        self.assertEqual(engine.get_state(), GameState.ALL_CORRECT)
        self.assertIsInstance(engine.get_state(), GameState)

    def test_out_of_range_ignored(self) -> None:
        engine = powered_engine()
        for value in (-1, 9, 100, None, "win", 4.0, True):
            engine.set_state(value)
            self.assertTrue(engine.is_state(GameState.POWER_ON), repr(value))


class TestEngineLogging(unittest.TestCase):
    """State changes are traced through the optional logger."""

    def setUp(self) -> None:
        self.logging = TempLogging()

    def tearDown(self) -> None:
        self.logging.close()

    def test_logs_state_changes_and_rounds(self) -> None:
        engine = SimonEngine(rng=random.Random(2), logger=self.logging.logger("SimonEngine"))
        engine.toggle_power()
        engine.start()
        text = self.logging.read_log()
        self.assertIn("[SimonEngine] State set to POWER_ON", text)
        self.assertIn("State set to COM_DEMO", text)
        self.assertIn("Round 1 started", text)


if __name__ == "__main__":
    unittest.main()
