"""User settings and discovery of the audio devices available on this machine."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass, field
from pathlib import Path

LANGUAGES: tuple[str, ...] = ("Русский", "English", "Español")
LOG_LEVELS: tuple[str, ...] = ("Error", "Warn", "Info", "Debug", "Trace")

_PCM_PATH = Path("/proc/asound/pcm")


class SettingsTab(enum.Enum):
    """The pages of the settings screen."""

    GENERAL = "general"
    AUDIO = "audio"
    ADVANCED = "advanced"


@dataclass
class GeneralSettings:
    theme_dark: bool = False
    language: str = "Русский"


@dataclass
class AudioSettings:
    input_devices: list[str] = field(default_factory=list)
    output_devices: list[str] = field(default_factory=list)
    selected_input: int = 0
    selected_output: int = 0
    mic_volume: float = 1.0
    speaker_volume: float = 1.0
    noise_suppression: bool = False
    echo_cancellation: bool = False

    def selected_input_name(self) -> str:
        """Name of the chosen input device; IndexError if there is none."""
        return self.input_devices[self.selected_input]

    def selected_output_name(self) -> str:
        """Name of the chosen output device; IndexError if there is none."""
        return self.output_devices[self.selected_output]


@dataclass
class AdvancedSettings:
    enable_logging: bool = False
    log_level: str = "Info"
    use_hardware_acceleration: bool = True


@dataclass
class Settings:
    tab: SettingsTab = SettingsTab.GENERAL
    general: GeneralSettings = field(default_factory=GeneralSettings)
    audio: AudioSettings = field(default_factory=AudioSettings)
    advanced: AdvancedSettings = field(default_factory=AdvancedSettings)


def _pcm_entries() -> list[tuple[str, set[str]]]:
    """Read the sound card PCM table as (name, capabilities) pairs."""
    entries = []
    for line in _PCM_PATH.read_text(encoding="utf-8").splitlines():
        parts = [part.strip() for part in line.split(" : ")]
        if not parts or not parts[0]:
            continue
        head = parts[0]
        _, sep, name = head.partition(": ")
        name = name.strip() if sep else head
        caps = {part.split()[0] for part in parts[1:] if part.split()}
        entries.append((name, caps))
    return entries


def _list_devices(capability: str, kind: str) -> list[str]:
    try:
        entries = _pcm_entries()
    except OSError as err:
        print(f"Error listing {kind} devices: {err}", file=sys.stderr)
        return []
    return [name for name, caps in entries if capability in caps]


def list_input_devices() -> list[str]:
    """Names of the audio capture devices; empty if they cannot be listed."""
    return _list_devices("capture", "input")


def list_output_devices() -> list[str]:
    """Names of the audio playback devices; empty if they cannot be listed."""
    return _list_devices("playback", "output")


def load_settings() -> Settings:
    """Settings for a first start, with the devices found on this machine."""
    return Settings(
        audio=AudioSettings(
            input_devices=list_input_devices(),
            output_devices=list_output_devices(),
        )
    )