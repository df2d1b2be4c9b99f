"""Moves between screens that the user's choices trigger."""

from __future__ import annotations

from typing import TypeVar

from voipdial.settings import SettingsTab
from voipdial.state import (
    AppState,
    CallEnded,
    CallEndReason,
    Dashboard,
    IncomingCall,
    InCall,
    Login,
    OutgoingCall,
    SettingsScreen,
)

_S = TypeVar("_S")


def _expect(state: AppState, kind: type[_S]) -> _S:
    """Return the current screen if it is of the given kind, else raise ValueError."""
    current = state.ui_state
    if not isinstance(current, kind):
        raise ValueError(
            f"not possible on the {type(current).__name__} screen "
            f"(needs {kind.__name__})"
        )
    return current


def login(state: AppState) -> None:
    """Leave the login screen for the dashboard."""
    _expect(state, Login)
    state.ui_state = Dashboard()


def open_settings(state: AppState) -> None:
    """Go from the dashboard to the settings screen."""
    _expect(state, Dashboard)
    state.ui_state = SettingsScreen()


def close_settings(state: AppState) -> None:
    """Go back from the settings screen to the dashboard."""
    _expect(state, SettingsScreen)
    state.ui_state = Dashboard()


def select_tab(state: AppState, tab: SettingsTab | str) -> None:
    """Show another page of the settings screen."""
    _expect(state, SettingsScreen)
    state.settings.tab = SettingsTab(tab)


def place_call(state: AppState) -> None:
    """Call the id typed on the dashboard; nothing happens while it is empty."""
    _expect(state, Dashboard)
    if state.temp_callee:
        state.ui_state = OutgoingCall(callee_id=state.temp_callee)


def cancel_call(state: AppState) -> None:
    """Give up an outgoing call and return to the dashboard."""
    _expect(state, OutgoingCall)
    state.ui_state = Dashboard()


def accept_call(state: AppState) -> None:
    """Answer an incoming call, audio only."""
    incoming = _expect(state, IncomingCall)
    state.ui_state = InCall(peer_id=incoming.caller_id, is_video=False)


def reject_call(state: AppState) -> None:
    """Turn down an incoming call and return to the dashboard."""
    _expect(state, IncomingCall)
    state.ui_state = Dashboard()


def hang_up(state: AppState) -> None:
    """End the running call."""
    _expect(state, InCall)
    state.ui_state = CallEnded(reason=CallEndReason.USER_HUNG_UP)


def acknowledge_end(state: AppState) -> None:
    """Dismiss the call-ended notice."""
    _expect(state, CallEnded)
    state.ui_state = Dashboard()


def call_status_text(state: AppState) -> str:
    """The line describing the call in progress; ValueError outside call screens."""
    match state.ui_state:
        case OutgoingCall(callee_id=callee):
            return f"Звонок на {callee} инициирован…"
        case IncomingCall(caller_id=caller):
            return f"Входящий звонок от {caller}"
        case InCall(peer_id=peer, is_video=video):
            return f"Вызов с {peer} (видео: {'true' if video else 'false'})"
        case CallEnded(reason=reason):
            return f"Звонок завершён: {reason}"
        case other:
            raise ValueError(f"no call on the {type(other).__name__} screen")