#!/usr/bin/env python3
"""
SimonBox - memory sequence game

Main application for the SimonBox cabinet: four colour buttons, power /
start / strict buttons, a WS281x light strip and a speaker.

Usage:
    python src/simon.py                  # GPIO buttons, real audio
    python src/simon.py --keyboard       # keys 1-4, p, s, t instead of GPIO
    python src/simon.py --mock-audio     # no audio hardware
"""

import argparse
import atexit
import logging
import signal
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from audio_system import MockSoundController, SoundController
from button_system import ButtonReader, GPIOSampler, KeyboardSampler
from led_system import MemoryStrip, PixelStripAdapter
from simon_system import (
    AudioConfig, ButtonConfig, GameConfig, LedStripConfig, SimonController, SimonEngine, TimingConfig
)
from utils import ClassLogger, HybridLogger


# Global logger reference for signal handlers
_global_logger = None


def emergency_flush_and_log(sig=None, frame=None):
    """Flush logs before the process goes away"""
    if _global_logger:
        if sig:
            _global_logger.critical(f"⚠️  SIGNAL RECEIVED: {sig} - Process terminating")
        _global_logger.flush()

    if sig:
        sys.exit(1)


def create_simon_config() -> GameConfig:
    """Default cabinet wiring"""
    button_config = ButtonConfig(
        pins=[
            5,   # green
            6,   # red
            13,  # yellow
            19,  # blue
            17,  # power
            27,  # start
            22,  # strict
        ],
        pull_mode="down",
        sample_rate_hz=200
    )

    led_strip = LedStripConfig(
        gpio_pin=18,
        led_count=41,  # 4 x 10 button LEDs + strict indicator
        dma=10,
        brightness=64,
        channel=0
    )

    return GameConfig(
        button_config=button_config,
        led_strip=led_strip,
        audio_config=AudioConfig(sounds_folder="sounds"),
        timing=TimingConfig(),
        frame_duration_ms=20  # 50 FPS
    )


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="SimonBox memory sequence game")
    parser.add_argument("--keyboard", action="store_true",
                        help="read buttons from the keyboard instead of GPIO")
    parser.add_argument("--mock-audio", action="store_true",
                        help="log sounds instead of playing them")
    parser.add_argument("--no-leds", action="store_true",
                        help="render lights into memory instead of the WS281x strip")
    parser.add_argument("--debug", action="store_true",
                        help="log engine and controller details")
    return parser.parse_args(argv)


def create_game_system(config: GameConfig, args: argparse.Namespace, simon_logger: ClassLogger) -> SimonController:
    """
    Build every component from the configuration.

    Args:
        config: Validated GameConfig
        args: Command line options
        simon_logger: ClassLogger used to derive component loggers

    Returns:
        SimonController ready to run
    """
    detail_level = logging.DEBUG if args.debug else logging.INFO

    controller_logger = simon_logger.create_class_logger("SimonController", detail_level)
    engine_logger = simon_logger.create_class_logger("SimonEngine", detail_level)
    button_logger = simon_logger.create_class_logger("ButtonReader", logging.INFO)
    sound_logger = simon_logger.create_class_logger("SoundController", logging.INFO)

    try:
        if args.keyboard:
            sampler = KeyboardSampler(num_buttons=config.button_count, logger=button_logger)
        else:
            sampler = GPIOSampler(
                button_pins=config.button_config.pins,
                pull_mode=config.button_config.pull_mode,
                logger=button_logger
            )
        button_reader = ButtonReader(sampler=sampler, logger=button_logger)

        if args.mock_audio:
            simon_logger.info("🔇 Using MockSoundController (audio hardware disabled)")
            sound_controller = MockSoundController(logger=sound_logger)
        else:
            sound_controller = SoundController(audio_config=config.audio_config, logger=sound_logger)

        strip_config = config.led_strip
        if args.no_leds:
            led_strip = MemoryStrip(strip_config.led_count)
        else:
            led_strip = PixelStripAdapter(
                led_count=strip_config.led_count,
                gpio_pin=strip_config.gpio_pin,
                freq_hz=strip_config.freq_hz,
                dma=strip_config.dma,
                invert=strip_config.invert,
                brightness=strip_config.brightness,
                channel=strip_config.channel
            )
        led_strip[:] = 0
        led_strip.show()

        engine = SimonEngine(max_round=config.max_round, logger=engine_logger)

        return SimonController(
            engine=engine,
            button_reader=button_reader,
            led_strip=led_strip,
            sound_controller=sound_controller,
            logger=controller_logger,
            timing=config.timing,
            frame_duration_ms=int(config.frame_duration_ms)
        )

    except Exception as e:
        simon_logger.error(f"Failed to initialize SimonBox: {e}", exception=e)
        raise


def main(argv=None):
    args = parse_args(argv)

    main_logger = HybridLogger("SimonBox")
    simon_logger = main_logger.get_class_logger("Simon")

    global _global_logger
    _global_logger = simon_logger
    signal.signal(signal.SIGTERM, emergency_flush_and_log)
    signal.signal(signal.SIGHUP, emergency_flush_and_log)
    atexit.register(emergency_flush_and_log)

    simon_logger.info("🎮 SIMONBOX MEMORY GAME")

    config = create_simon_config()
    config.validate()

    simon_logger.info(f"Buttons: GPIO {config.button_config.pins} (green, red, yellow, blue, power, start, strict)")
    simon_logger.info(f"LED strip: {config.led_strip.led_count} LEDs on GPIO {config.led_strip.gpio_pin}")
    simon_logger.info(f"Game settings: {config.max_round} rounds, {config.frame_duration_ms}ms frame duration ({config.target_fps:.1f} FPS)")

    try:
        controller = create_game_system(config, args, simon_logger)
        simon_logger.info("🚀 Starting SimonBox... press power, then start")
        controller.run_game_loop()

    except KeyboardInterrupt:
        simon_logger.info("⏹️  SimonBox stopped by user")
    except Exception as e:
        simon_logger.error(f"SimonBox system error: {e}", exception=e)
        raise
    finally:
        simon_logger.info("✅ SimonBox shut down")
        simon_logger.flush()
        main_logger.cleanup()


if __name__ == "__main__":
    main()
