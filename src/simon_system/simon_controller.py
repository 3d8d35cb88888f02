"""
Simon controller - drives the engine from buttons, timers, lights and sound
"""

import time
from functools import partial
from typing import Callable, Iterator, Optional, TYPE_CHECKING

import psutil

from utils import OnceInMs

from .animations import SignalLightsAnimation
from .config import POWER_BUTTON, START_BUTTON, STRICT_BUTTON, TimingConfig
from .engine import GameState, SIGNAL_COUNT
from .playback import CelebrationStep, LightEvent, SequencePlayback, win_celebration
from .scheduler import CallbackScheduler

if TYPE_CHECKING:
    from button_system.interfaces import IButtonReader
    from led_system.interfaces import LedStrip
    from utils import ClassLogger
    from .engine import SimonEngine


class SimonController:
    """
    Runs the game around a SimonEngine.

    Responsibilities:
    - Dispatch button presses (colours, power, start, strict)
    - Play the demo and the win flourish through the callback scheduler
    - Apply the mistake recovery policy (strict restarts, lenient replays)
    - Render the button lights and keep a fixed frame rate

    Every reset boundary (power toggle, start, strict restart) cancels all
    pending callbacks before the engine is touched again.
    """

    def __init__(self,
                 engine: 'SimonEngine',
                 button_reader: 'IButtonReader',
                 led_strip: 'LedStrip',
                 sound_controller,  # SoundController or MockSoundController
                 logger: 'ClassLogger',
                 timing: Optional[TimingConfig] = None,
                 frame_duration_ms: int = 20,
                 clock: Callable[[], float] = time.monotonic):
        """
        Args:
            engine: Game engine (owned by this controller from now on)
            button_reader: Reader producing one ButtonState per frame
            led_strip: Strip carrying the button lights
            sound_controller: Tone and effect player
            logger: ClassLogger for the controller
            timing: Light and delay durations
            frame_duration_ms: Target frame duration
            clock: Seconds-based monotonic time source
        """
        self.engine = engine
        self.button_reader = button_reader
        self.led_strip = led_strip
        self.sound_controller = sound_controller
        self.logger = logger
        self.timing = timing or TimingConfig()
        self.target_frame_duration = frame_duration_ms / 1000.0
        self._clock = clock
        self.running = True

        self.scheduler = CallbackScheduler(clock)
        self.lights = SignalLightsAnimation(led_strip, clock=clock)
        self.demo_gap_ms = self.timing.start_com_timeout_ms

        self._last_count_text: Optional[str] = None
        self._usage_monitor = OnceInMs(60000, clock)
        self._process = psutil.Process()

        self.logger.info(f"SimonController initialized: {frame_duration_ms}ms frame duration, max round {engine.max_round}")

    # Frame loop

    def run_game_loop(self) -> None:
        """Run update() at the target frame rate until stopped or interrupted"""
        self.logger.info(f"Starting game loop with {int(self.target_frame_duration * 1000)}ms frame duration")

        try:
            while self.running:
                frame_start = time.monotonic()
                self.update()

                sleep_time = self.target_frame_duration - (time.monotonic() - frame_start)
                if sleep_time > 0:
                    time.sleep(sleep_time)

        except KeyboardInterrupt:
            self.logger.info("Game stopped by user (Ctrl+C)")
        except Exception as e:
            self.logger.error(f"Game loop error: {e}", exception=e)
            raise
        finally:
            self.stop()

    def update(self) -> None:
        """
        One frame: input → due callbacks → lights.
        """
        if self._usage_monitor.should_execute():
            self._log_usage()

        button_state = self.button_reader.read_buttons()
        for index in button_state.just_pressed():
            self.handle_button(index)

        self.scheduler.run_due()

        self._sync_status()
        if self.lights.update_if_needed():
            self.led_strip.show()

    def stop(self) -> None:
        """Stop the loop and release hardware"""
        self.running = False
        self.scheduler.cancel_all()

        self.sound_controller.cleanup()
        self.button_reader.cleanup()

        self.led_strip[:] = 0
        self.led_strip.show()

        self.logger.info("Game stopped")
        self.logger.flush()

    # Player input

    def handle_button(self, index: int) -> None:
        if index < SIGNAL_COUNT:
            self.press_color(index)
        elif index == POWER_BUTTON:
            self.toggle_power()
        elif index == START_BUTTON:
            self.start()
        elif index == STRICT_BUTTON:
            self.toggle_strict()
        else:
            self.logger.warning(f"Button {index} has no function")

    def press_color(self, signal: int) -> None:
        """Feed a colour press to the engine and react to the resulting state"""
        if not 0 <= signal < SIGNAL_COUNT:
            self.logger.warning(f"Ignoring press of unknown signal {signal}")
            return
        if not self.engine.press(signal):
            return

        state = self.engine.get_state()

        if state == GameState.ALL_CORRECT:
            self._light(signal, self.timing.player_press_ms)
            self.logger.info(f"Round {self.engine.get_round()} complete")
            self.scheduler.call_later(self.timing.next_round_delay_ms, self._advance_round)

        elif state == GameState.MISTAKE:
            self._light(signal, self.timing.mistake_light_ms, sound=False)
            self.sound_controller.play_mistake()
            self.scheduler.call_later(self.timing.mistake_recovery_ms, self._recover_from_mistake)

        else:
            self._light(signal, self.timing.player_press_ms)

    def start(self) -> None:
        """Start a new game (only while powered)"""
        if not self.get_power_state():
            return

        self._reset()
        self.engine.start()
        self.logger.info("New game started" + (" (strict)" if self.engine.get_strict() else ""))
        self._continue_after_round()

    def toggle_power(self) -> None:
        self.sound_controller.play_switch()
        self.engine.toggle_power()
        self._reset()
        self.logger.info(f"Power {'on' if self.get_power_state() else 'off'}")

    def toggle_strict(self) -> None:
        if not self.get_power_state():
            return
        self.engine.toggle_strict()
        self.logger.info(f"Strict mode {'on' if self.engine.get_strict() else 'off'}")

    # Display queries

    def get_power_state(self) -> bool:
        return not self.engine.is_state(GameState.POWER_OFF)

    def get_strict_state(self) -> bool:
        return self.engine.get_strict()

    def get_count_text(self) -> str:
        """Round counter as shown on the display: blank when off, '--' before a game"""
        if not self.get_power_state():
            return ""
        if self.engine.is_state(GameState.POWER_ON):
            return "--"
        return str(self.engine.get_round())

    # Round flow

    def _advance_round(self) -> None:
        self.engine.next_round()
        self.demo_gap_ms = self.timing.demo_gap_ms_for_round(self.engine.get_round())
        self._continue_after_round()

    def _continue_after_round(self) -> None:
        if self.engine.is_state(GameState.COM_DEMO):
            self._play_demo()
        elif self.engine.is_state(GameState.WIN):
            self._celebrate_win()

    def _recover_from_mistake(self) -> None:
        if self.engine.get_strict():
            self.logger.info("Mistake in strict mode - restarting")
            self.start()
        else:
            self.logger.info(f"Mistake - replaying round {self.engine.get_round()}")
            self.engine.set_state(GameState.COM_DEMO)
            self._play_demo()

    def _play_demo(self) -> None:
        playback = SequencePlayback(self.engine.get_sequence(), self.timing.com_press_ms, self.demo_gap_ms)
        self.logger.debug(f"Demo of {len(playback)} signals, {self.demo_gap_ms}ms apart")
        self._play_next(iter(playback))

    def _play_next(self, events: Iterator[LightEvent]) -> None:
        event = next(events, None)
        if event is None:
            return

        if event.is_last:
            self._light(event.signal, event.light_ms, next_state=GameState.PLAYER_SEQUENCE)
        else:
            self._light(event.signal, event.light_ms)
            self.scheduler.call_later(event.gap_ms, partial(self._play_next, events))

    def _celebrate_win(self) -> None:
        self.logger.info(f"🏆 All {self.engine.max_round} rounds completed!")
        for step in win_celebration():
            self.scheduler.call_later(step.at_ms, partial(self._celebration_step, step))

    def _celebration_step(self, step: CelebrationStep) -> None:
        if step.restart:
            self.start()
        elif step.signal is None:
            self.lights.all_off()
        else:
            self.lights.set_lit(step.signal, True)
            self.sound_controller.play_signal(step.signal)

    def _light(self, signal: int, duration_ms: int, sound: bool = True,
               next_state: Optional[GameState] = None) -> None:
        """Light a signal for duration_ms, then optionally move the engine to next_state"""
        self.lights.set_lit(signal, True)
        if sound:
            self.sound_controller.play_signal(signal)
        self.scheduler.call_later(duration_ms, partial(self._unlight, signal, next_state))

    def _unlight(self, signal: int, next_state: Optional[GameState]) -> None:
        self.lights.set_lit(signal, False)
        if next_state is not None:
            self.engine.set_state(next_state)

    def _reset(self) -> None:
        """Cancel every pending callback and put the lights back to rest"""
        cancelled = self.scheduler.cancel_all()
        if cancelled:
            self.logger.debug(f"Cancelled {cancelled} pending callbacks")
        self.demo_gap_ms = self.timing.start_com_timeout_ms
        self.lights.all_off()

    def _sync_status(self) -> None:
        self.lights.set_status(self.get_power_state(), self.engine.get_strict())

        count_text = self.get_count_text()
        if count_text != self._last_count_text:
            self._last_count_text = count_text
            self.logger.info(f"Count display: '{count_text}'")

    def _log_usage(self) -> None:
        """Log process memory and CPU usage"""
        try:
            process_mb = self._process.memory_info().rss / 1024 / 1024
            process_cpu = self._process.cpu_percent(interval=None)
            sys_mem = psutil.virtual_memory()
        except psutil.Error as e:
            self.logger.warning(f"Failed to log system usage: {e}")
            return

        self.logger.info(
            f"💾 Memory - Process: {process_mb:.1f}MB | System: {sys_mem.percent:.1f}% used | "
            f"⚙️  CPU - Process: {process_cpu:.1f}%"
        )
