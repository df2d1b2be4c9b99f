"""Application state: who the user is and which screen is shown."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field, replace
from typing import Union

from voipdial.settings import Settings, load_settings

USER_ID_MIN = 100_000
USER_ID_MAX = 1_000_000


class CallEndReason(enum.Enum):
    USER_HUNG_UP = "UserHungUp"
    PEER_HUNG_UP = "PeerHungUp"
    CONNECTION_LOST = "ConnectionLost"
    CALL_REJECTED = "CallRejected"
    PEER_UNAVAILABLE = "PeerUnavailable"
    TIMEOUT = "Timeout"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Login:
    pass


@dataclass(frozen=True)
class Dashboard:
    pass


@dataclass(frozen=True)
class OutgoingCall:
    callee_id: str


@dataclass(frozen=True)
class IncomingCall:
    caller_id: str


@dataclass(frozen=True)
class InCall:
    peer_id: str
    is_video: bool = False


@dataclass(frozen=True)
class CallEnded:
    reason: CallEndReason


@dataclass(frozen=True)
class SettingsScreen:
    pass


@dataclass(frozen=True)
class Error:
    message: str


UiState = Union[
    Login, Dashboard, OutgoingCall, IncomingCall, InCall, CallEnded, SettingsScreen, Error
]


def generate_user_id(rng: random.Random | None = None) -> int:
    """A random user id between 100000 and 1000000 inclusive."""
    return (rng or random).randint(USER_ID_MIN, USER_ID_MAX)


@dataclass
class AppState:
    user_id: int
    user_name: str = ""
    ui_state: UiState = field(default_factory=Login)
    temp_callee: str = ""
    settings: Settings = field(default_factory=Settings)

    def toggle_video(self) -> None:
        """Switch the camera on or off; does nothing outside a call."""
        if isinstance(self.ui_state, InCall):
            self.ui_state = replace(self.ui_state, is_video=not self.ui_state.is_video)


def new_app_state(
    settings: Settings | None = None, rng: random.Random | None = None
) -> AppState:
    """State for a fresh start: login screen and a newly drawn user id."""
    return AppState(
        user_id=generate_user_id(rng),
        settings=settings if settings is not None else load_settings(),
    )