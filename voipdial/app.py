"""Interactive text front end: shows the current screen and acts on choices."""

from __future__ import annotations

import argparse
import functools
import math
import sys
from dataclasses import dataclass
from typing import Callable, TextIO

from voipdial import actions
from voipdial.settings import LANGUAGES, LOG_LEVELS, SettingsTab
from voipdial.state import (
    AppState,
    CallEnded,
    Dashboard,
    Error,
    IncomingCall,
    InCall,
    Login,
    OutgoingCall,
    SettingsScreen,
    new_app_state,
)

TITLE = "My VoIP"
WINDOW_SIZE = (800.0, 700.0)

_SEPARATOR = "-" * 24
_TAB_LABELS = {
    SettingsTab.GENERAL: "Общие",
    SettingsTab.AUDIO: "Аудио",
    SettingsTab.ADVANCED: "Дополнительно",
}

_Choice = tuple[str, Callable[[], None]]


@dataclass(frozen=True)
class Style:
    """Look of the interface: spacing, text sizes and colour scheme."""

    button_padding: tuple[float, float] = (16.0, 12.0)
    item_spacing: tuple[float, float] = (12.0, 8.0)
    button_text_size: float = 20.0
    body_text_size: float = 18.0
    dark: bool = False


@functools.lru_cache(maxsize=None)
def build_style() -> Style:
    """The application style, built once and shared."""
    return Style()


def _checkbox(checked: bool, label: str) -> str:
    return f"[{'x' if checked else ' '}] {label}"


def _next_item(options: tuple[str, ...] | list[str], current: str) -> str:
    try:
        position = options.index(current)
    except ValueError:
        return options[0]
    return options[(position + 1) % len(options)]


class VoipApp:
    """Text front end over an application state."""

    def __init__(
        self,
        state: AppState | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.state = state if state is not None else new_app_state()
        self.style = build_style()
        self._stdin = stdin
        self._stdout = stdout

    @property
    def _in(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def _out(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def _ask(self, prompt: str) -> str | None:
        self._out.write(f"{prompt} ")
        self._out.flush()
        line = self._in.readline()
        return line.strip() if line else None

    def _ask_volume(self, prompt: str) -> float | None:
        answer = self._ask(f"{prompt} (0..1):")
        if answer is None:
            return None
        try:
            value = float(answer.replace(",", "."))
        except ValueError:
            value = math.nan
        if math.isnan(value):
            self._out.write("Неверное значение\n")
            return None
        return min(max(value, 0.0), 1.0)

    def _edit_name(self) -> None:
        answer = self._ask("Введите своё имя:")
        if answer is not None:
            self.state.user_name = answer

    def _edit_callee(self) -> None:
        answer = self._ask("Введите ID для звонка:")
        if answer is not None:
            self.state.temp_callee = answer

    def _login_screen(self) -> tuple[list[str], list[_Choice]]:
        lines = [f"Имя: {self.state.user_name}"]
        return lines, [
            ("Введите своё имя", self._edit_name),
            ("Далее", lambda: actions.login(self.state)),
        ]

    def _dashboard_screen(self) -> tuple[list[str], list[_Choice]]:
        lines = [
            "Главная",
            _SEPARATOR,
            f"Ваш ID: {self.state.user_id}",
            f"ID для звонка: {self.state.temp_callee}",
        ]
        return lines, [
            ("Настройки", lambda: actions.open_settings(self.state)),
            ("Введите ID для звонка", self._edit_callee),
            ("Позвонить", lambda: actions.place_call(self.state)),
        ]

    def _general_choices(self) -> list[_Choice]:
        general = self.state.settings.general

        def toggle_theme() -> None:
            general.theme_dark = not general.theme_dark

        def next_language() -> None:
            general.language = _next_item(LANGUAGES, general.language)

        return [
            (_checkbox(general.theme_dark, "Темная тема"), toggle_theme),
            (f"Язык: {general.language}", next_language),
        ]

    def _audio_choices(self) -> list[_Choice]:
        audio = self.state.settings.audio

        def next_input() -> None:
            if audio.input_devices:
                audio.selected_input = (audio.selected_input + 1) % len(audio.input_devices)

        def next_output() -> None:
            if audio.output_devices:
                audio.selected_output = (audio.selected_output + 1) % len(
                    audio.output_devices
                )

        def set_mic() -> None:
            value = self._ask_volume("Громкость микрофона")
            if value is not None:
                audio.mic_volume = value

        def set_speaker() -> None:
            value = self._ask_volume("Громкость колонок")
            if value is not None:
                audio.speaker_volume = value

        def toggle_noise() -> None:
            audio.noise_suppression = not audio.noise_suppression

        def toggle_echo() -> None:
            audio.echo_cancellation = not audio.echo_cancellation

        input_name = audio.selected_input_name() if audio.input_devices else "—"
        output_name = audio.selected_output_name() if audio.output_devices else "—"
        return [
            (f"Входное устройство: {input_name}", next_input),
            (f"Громкость микрофона: {audio.mic_volume:.2f}", set_mic),
            (f"Выходное устройство: {output_name}", next_output),
            (f"Громкость колонок: {audio.speaker_volume:.2f}", set_speaker),
            (_checkbox(audio.noise_suppression, "Шумоподавление"), toggle_noise),
            (_checkbox(audio.echo_cancellation, "Эхо-подавление"), toggle_echo),
        ]

    def _advanced_choices(self) -> list[_Choice]:
        advanced = self.state.settings.advanced

        def toggle_logging() -> None:
            advanced.enable_logging = not advanced.enable_logging

        def next_level() -> None:
            advanced.log_level = _next_item(LOG_LEVELS, advanced.log_level)

        def toggle_acceleration() -> None:
            advanced.use_hardware_acceleration = not advanced.use_hardware_acceleration

        return [
            (_checkbox(advanced.enable_logging, "Включить логирование"), toggle_logging),
            (f"Уровень логов: {advanced.log_level}", next_level),
            (
                _checkbox(advanced.use_hardware_acceleration, "Аппаратное ускорение"),
                toggle_acceleration,
            ),
        ]

    def _settings_screen(self) -> tuple[list[str], list[_Choice]]:
        current = self.state.settings.tab
        lines = ["Настройки", _SEPARATOR, f"Раздел: {_TAB_LABELS[current]}"]
        choices: list[_Choice] = [("← Назад", lambda: actions.close_settings(self.state))]
        for tab, label in _TAB_LABELS.items():
            marker = "*" if tab is current else " "
            choices.append(
                (f"{marker} {label}", functools.partial(actions.select_tab, self.state, tab))
            )
        pages = {
            SettingsTab.GENERAL: self._general_choices,
            SettingsTab.AUDIO: self._audio_choices,
            SettingsTab.ADVANCED: self._advanced_choices,
        }
        choices.extend(pages[current]())
        return lines, choices

    def _call_screen(self) -> tuple[list[str], list[_Choice]]:
        state = self.state
        lines = [actions.call_status_text(state)]
        match state.ui_state:
            case OutgoingCall():
                choices = [("Отменить", lambda: actions.cancel_call(state))]
            case IncomingCall():
                choices = [
                    ("Принять", lambda: actions.accept_call(state)),
                    ("Отклонить", lambda: actions.reject_call(state)),
                ]
            case InCall(is_video=video):
                choices = [
                    ("Завершить", lambda: actions.hang_up(state)),
                    ("Отключить камеру" if video else "Включить камеру", state.toggle_video),
                ]
            case _:
                choices = [("ОК", lambda: actions.acknowledge_end(state))]
        return lines, choices

    def _screen(self) -> tuple[list[str], list[_Choice]]:
        match self.state.ui_state:
            case Login():
                return self._login_screen()
            case Dashboard():
                return self._dashboard_screen()
            case SettingsScreen():
                return self._settings_screen()
            case OutgoingCall() | IncomingCall() | InCall() | CallEnded():
                return self._call_screen()
            case Error(message=message):
                return [message], []
        raise ValueError(f"unknown screen {self.state.ui_state!r}")

    @staticmethod
    def _format(lines: list[str], choices: list[_Choice]) -> str:
        numbered = [f"{number}. {label}" for number, (label, _) in enumerate(choices, 1)]
        return "\n".join([*lines, *numbered])

    def render(self) -> str:
        """The current screen as text, with its numbered choices."""
        return self._format(*self._screen())

    def run(self) -> None:
        """Show screens and act on the numbers typed until end of input or 'q'."""
        out = self._out
        out.write(f"{TITLE}\n")
        while True:
            lines, choices = self._screen()
            out.write(self._format(lines, choices) + "\n> ")
            out.flush()
            line = self._in.readline()
            if not line:
                break
            command = line.strip()
            if command in ("q", "quit"):
                break
            try:
                number = int(command)
            except ValueError:
                number = 0
            if not 1 <= number <= len(choices):
                out.write("Неизвестная команда\n")
                continue
            choices[number - 1][1]()
        out.write("\n")
        out.flush()


def main(argv: list[str] | None = None) -> int:
    """Start the interactive front end on the terminal."""
    parser = argparse.ArgumentParser(prog="voipdial", description=TITLE)
    parser.parse_args(argv)
    VoipApp().run()
    return 0