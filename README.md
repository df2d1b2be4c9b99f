# voipdial

voipdial is a small front end for a VoIP dialer. It keeps track of who you are
and which screen you are on, and it holds your general, audio and advanced
settings. The call flow is a plain state machine. You can drive it from code or
from the bundled text application in the terminal. The interface texts are in
Russian.

## Installation

```
pip install .
```

voipdial has no dependencies outside the standard library.

## Running the application

```
voipdial
```

This starts `VoipApp` in the terminal. Each screen is printed with numbered
choices. Type a number and press Enter to pick one. Type `q` or `quit`, or end
the input, to leave. A number that is out of range is answered with
"Неизвестная команда".

The screens work like this:

- **Login**: enter your name, then "Далее" goes on to the dashboard.
- **Dashboard**: shows your ID. From here you can open the settings, type the
  ID to call and place the call. An empty ID does not start a call.
- **Settings**: "← Назад" returns to the dashboard. There are three pages:
  - General: dark theme and language (Русский, English, Español).
  - Audio: input and output device, microphone and speaker volume, noise
    suppression and echo cancellation. A volume is asked for as a number. A
    comma is accepted as the decimal point, and the value is clamped to
    0..1.
  - Advanced: logging, log level (Error, Warn, Info, Debug, Trace) and
    hardware acceleration.

  Choices that cycle (language, level, device) move to the next option on
  each pick.
- **Call screens**: an outgoing call can be cancelled. An incoming call can
  be accepted or rejected. A running call can be ended, and its camera flag
  can be switched on or off. The call-ended notice is dismissed with "ОК".

## Using it as a library

```python
import random

from voipdial import actions
from voipdial.settings import SettingsTab, load_settings
from voipdial.state import new_app_state

state = new_app_state(load_settings(), random.Random(1))

actions.login(state)                          # Login -> Dashboard
actions.open_settings(state)                  # Dashboard -> SettingsScreen
actions.select_tab(state, SettingsTab.AUDIO)  # or "audio"
actions.close_settings(state)                 # back to Dashboard

state.temp_callee = "123456"
actions.place_call(state)                     # Dashboard -> OutgoingCall
print(actions.call_status_text(state))        # "Звонок на 123456 инициирован…"
actions.cancel_call(state)                    # back to Dashboard
```

### State (`voipdial.state`)

- `new_app_state(settings=None, rng=None)` builds an `AppState` on the
  `Login` screen. If no settings are given, it uses `load_settings()`.
- `generate_user_id(rng=None)` draws an ID between 100000 and 1000000
  inclusive. It uses the given `random.Random`, or the `random` module if
  none is given.
- `AppState` holds `user_id`, `user_name`, `ui_state`, `temp_callee` and
  `settings`. `AppState.toggle_video()` flips `is_video` while in a call. On
  any other screen it does nothing.
- `ui_state` is one of the frozen dataclasses `Login`, `Dashboard`,
  `OutgoingCall(callee_id)`, `IncomingCall(caller_id)`,
  `InCall(peer_id, is_video)`, `CallEnded(reason)`, `SettingsScreen` or
  `Error(message)`.
- `CallEndReason` lists why a call ended: `USER_HUNG_UP`, `PEER_HUNG_UP`,
  `CONNECTION_LOST`, `CALL_REJECTED`, `PEER_UNAVAILABLE`, `TIMEOUT` or
  `UNKNOWN`. `str()` of a member gives its value, for example `UserHungUp`.

### Actions (`voipdial.actions`)

`login`, `open_settings`, `close_settings`, `select_tab`, `place_call`,
`cancel_call`, `accept_call`, `reject_call`, `hang_up` and `acknowledge_end`
each move `state.ui_state` to the next screen. Each one raises `ValueError`
when called on the wrong screen.

- `accept_call` starts an audio-only `InCall` with the caller.
- `hang_up` ends the call with `CallEndReason.USER_HUNG_UP`.
- `call_status_text(state)` returns the status line of the current call
  screen. It raises `ValueError` on any other screen.

### Settings (`voipdial.settings`)

`load_settings()` returns a `Settings` with a `tab` (`SettingsTab.GENERAL`,
`AUDIO` or `ADVANCED`) and three parts:

- `GeneralSettings`: `theme_dark` (off by default) and `language` (default
  "Русский").
- `AudioSettings`: `input_devices`, `output_devices`, `selected_input`,
  `selected_output`, `mic_volume` and `speaker_volume` (both 1.0 by
  default), `noise_suppression` and `echo_cancellation` (both off by
  default). `selected_input_name()` and `selected_output_name()` return the
  chosen device's name. They raise `IndexError` if the list is empty.
- `AdvancedSettings`: `enable_logging` (off), `log_level` (default "Info")
  and `use_hardware_acceleration` (on).

`list_input_devices()` and `list_output_devices()` read the capture and
playback devices from the ALSA table `/proc/asound/pcm`. If that file cannot
be read, as on systems without it, they print an error to standard error and
return an empty list.

### Application (`voipdial.app`)

- `VoipApp(state=None, stdin=None, stdout=None)` has two methods.
  `render()` returns the current screen as text. `run()` runs the
  interactive loop.
- `build_style()` returns the shared `Style`: paddings, text sizes and the
  light scheme.
- `main(argv=None)` is the entry point of the `voipdial` command.

## What it does not do

voipdial is only the front end and its state. It does not:

- connect to a network or carry audio or video;
- ring on an incoming call, because nothing in the package moves to
  `IncomingCall` or `Error` by itself;
- save your settings between runs.

## Running the tests

```
pip install ".[test]"
pytest
```