import io

import pytest

from voipdial import app as app_module
from voipdial.app import Style, VoipApp, build_style, main
from voipdial.settings import AudioSettings, Settings, SettingsTab
from voipdial.state import (
    AppState,
    CallEnded,
    CallEndReason,
    Dashboard,
    Error,
    IncomingCall,
    InCall,
    OutgoingCall,
    SettingsScreen,
)


def make_app(ui_state=None, lines="", **kwargs):
    settings = kwargs.pop("settings", Settings())
    state = AppState(user_id=123456, settings=settings, **kwargs)
    if ui_state is not None:
        state.ui_state = ui_state
    out = io.StringIO()
    return VoipApp(state, stdin=io.StringIO(lines), stdout=out), out


def test_build_style_values_and_sharing():
    style = build_style()
    assert style is build_style()
    assert style.button_padding == (16.0, 12.0)
    assert style.item_spacing == (12.0, 8.0)
    assert style.button_text_size == 20.0
    assert style.body_text_size == 18.0
    assert style.dark is False


def test_app_uses_shared_style():
    app, _ = make_app()
    assert app.style == Style()


def test_login_render_lists_choices():
    app, _ = make_app()
    text = app.render()
    assert "1. Введите своё имя" in text
    assert "2. Далее" in text


def test_run_enters_name_and_continues():
    app, out = make_app(lines="1\nАлиса\n2\nq\n")
    app.run()
    assert app.state.user_name == "Алиса"
    assert app.state.ui_state == Dashboard()
    assert "Главная" in out.getvalue()


def test_unknown_command_reported():
    app, out = make_app(lines="abc\n9\n")
    app.run()
    assert out.getvalue().count("Неизвестная команда") == 2
    assert app.state.ui_state != Dashboard()


def test_dashboard_shows_user_id():
    app, _ = make_app(Dashboard())
    assert "Ваш ID: 123456" in app.render()


def test_dashboard_call_flow():
    app, _ = make_app(Dashboard(), lines="2\n555\n3\n")
    app.run()
    assert app.state.ui_state == OutgoingCall(callee_id="555")


def test_incoming_call_accept_and_toggle_camera():
    app, _ = make_app(IncomingCall(caller_id="42"), lines="1\n2\n")
    app.run()
    assert app.state.ui_state == InCall(peer_id="42", is_video=True)
    assert "Отключить камеру" in app.render()


def test_hang_up_then_ok():
    app, out = make_app(InCall(peer_id="42"), lines="1\n1\n")
    app.run()
    assert app.state.ui_state == Dashboard()
    assert "Звонок завершён: UserHungUp" in out.getvalue()


def test_call_ended_render():
    app, _ = make_app(CallEnded(reason=CallEndReason.TIMEOUT))
    assert app.render().endswith("1. ОК")


def test_error_screen_shows_message_only():
    app, _ = make_app(Error(message="сбой"))
    assert app.render() == "сбой"


def test_settings_tabs_and_back():
    app, _ = make_app(SettingsScreen(), lines="4\n1\n")
    app.run()
    assert app.state.settings.tab is SettingsTab.ADVANCED
    assert app.state.ui_state == Dashboard()


def test_general_settings_toggle_and_language_cycle():
    app, _ = make_app(SettingsScreen(), lines="5\n6\n")
    app.run()
    assert app.state.settings.general.theme_dark is True
    assert app.state.settings.general.language == "English"


def test_audio_device_cycle_and_volume_clamped():
    settings = Settings(
        tab=SettingsTab.AUDIO,
        audio=AudioSettings(input_devices=["mic-a", "mic-b"], output_devices=["spk"]),
    )
    app, _ = make_app(SettingsScreen(), lines="5\n6\n3\n", settings=settings)
    app.run()
    assert app.state.settings.audio.selected_input_name() == "mic-b"
    assert app.state.settings.audio.mic_volume == 1.0
    assert "Входное устройство: mic-b" in app.render()


def test_audio_volume_rejects_garbage():
    settings = Settings(tab=SettingsTab.AUDIO)
    app, out = make_app(SettingsScreen(), lines="8\nloud\n", settings=settings)
    app.run()
    assert app.state.settings.audio.speaker_volume == 1.0
    assert "Неверное значение" in out.getvalue()


def test_audio_without_devices_renders():
    settings = Settings(tab=SettingsTab.AUDIO)
    app, _ = make_app(SettingsScreen(), lines="5\n", settings=settings)
    app.run()
    assert app.state.settings.audio.selected_input == 0
    assert "Входное устройство: —" in app.render()


def test_advanced_log_level_cycle_wraps():
    settings = Settings(tab=SettingsTab.ADVANCED)
    app, _ = make_app(SettingsScreen(), lines="6\n6\n6\n", settings=settings)
    app.run()
    assert app.state.settings.advanced.log_level == "Error"


def test_main_runs_until_quit(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("q\n"))
    assert main([]) == 0
    output = capsys.readouterr().out
    assert app_module.TITLE == "My VoIP"
    assert app_module.TITLE in output


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--bogus"])