"""
Sound Controller - signal tones and effects through the pygame mixer
"""

import enum
import os
from typing import Dict, List

import pygame


class SimonSounds(enum.Enum):
    """Sound effects besides the four signal tones"""
    MISTAKE = "mistake"
    SWITCH = "switch"


class SoundController:
    """
    Plays the four signal tones, the mistake buzz and the power switch click.

    All files are checked and loaded up front; a missing file stops startup
    instead of failing silently mid-game.
    """

    def __init__(self, audio_config, logger):
        """
        Args:
            audio_config: AudioConfig with the sounds folder and file names
            logger: ClassLogger instance

        Raises:
            FileNotFoundError: If any sound file is missing
            pygame.error: If a sound file fails to load
        """
        self.logger = logger
        self.mixer = pygame.mixer
        self.mixer.init()

        folder = audio_config.sounds_folder
        self._signal_paths: List[str] = [os.path.join(folder, name) for name in audio_config.signal_sounds]
        self._effect_paths: Dict[SimonSounds, str] = {
            SimonSounds.MISTAKE: os.path.join(folder, audio_config.mistake_sound),
            SimonSounds.SWITCH: os.path.join(folder, audio_config.switch_sound),
        }

        self._signal_sounds: List[pygame.mixer.Sound] = []
        self._effect_sounds: Dict[SimonSounds, pygame.mixer.Sound] = {}
        self._load_and_validate_sounds()

        self.logger.info(f"Loaded {len(self._signal_sounds)} signal tones and {len(self._effect_sounds)} effects from {folder}")

    def _load_and_validate_sounds(self) -> None:
        missing_files = [path for path in self._signal_paths + list(self._effect_paths.values())
                         if not os.path.exists(path)]
        if missing_files:
            raise FileNotFoundError(f"Required sound files not found: {missing_files}")

        for index, path in enumerate(self._signal_paths):
            self._signal_sounds.append(self._load(path, f"signal {index}"))
        for effect, path in self._effect_paths.items():
            self._effect_sounds[effect] = self._load(path, effect.name)

    def _load(self, path: str, name: str) -> pygame.mixer.Sound:
        try:
            return pygame.mixer.Sound(path)
        except pygame.error as e:
            raise pygame.error(f"Failed to load sound {name} from {path}: {e}") from e

    def play_signal(self, signal: int) -> None:
        """Play the tone of a colour button (restarts it if already playing)"""
        sound = self._signal_sounds[signal]
        sound.stop()
        sound.play()

    def play_mistake(self) -> None:
        self._effect_sounds[SimonSounds.MISTAKE].play()

    def play_switch(self) -> None:
        self._effect_sounds[SimonSounds.SWITCH].play()

    def stop_all(self) -> None:
        self.mixer.stop()

    def cleanup(self) -> None:
        """Stop playback and release the audio device"""
        self.mixer.stop()
        self.mixer.quit()
        self.logger.info("Sound controller cleaned up")
