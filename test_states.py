"""Headless walk through the state machine via the controller."""

import pytest

from controller import GameController
from fsm import State, StateMachine
from menu import OptionMenu

DT = 1.0 / 60.0


@pytest.fixture
def controller(input_state, audio, store):
    return GameController(800, 800, input_state=input_state, audio=audio, store=store)


def _step(controller, tap=None, action=None):
    if action is not None:
        tap(controller.input, action)
    controller.update(DT)
    return controller.fsm.current_name


def _login(controller, tap, name="ace"):
    controller.input.push_text(name)
    return _step(controller, tap, "enter")


def test_first_run_asks_for_pilot(controller, tap):
    assert controller.fsm.current_name == "UserSelectState"
    assert _login(controller, tap) == "MenuState"
    assert controller.user == "ace"
    assert controller.store.get_current_user() == "ace"


def test_blank_name_is_rejected(controller, tap):
    controller.input.push_text("   ")
    assert _step(controller, tap, "enter") == "UserSelectState"


def test_name_entry_supports_backspace(controller, tap):
    controller.input.push_text("acex")
    _step(controller)
    _step(controller, tap, "backspace")
    assert _step(controller, tap, "enter") == "MenuState"
    assert controller.user == "ace"


def test_known_pilot_skips_selection(input_state, audio, store):
    store.set_current_user("bob")
    c = GameController(800, 800, input_state=input_state, audio=audio, store=store)
    assert c.fsm.current_name == "MenuState"
    assert c.user == "bob"


def test_start_pause_menu_and_resume(controller, tap):
    _login(controller, tap)
    assert _step(controller, tap, "menu_select") == "PlayingState"
    session = controller.session
    assert session is not None

    assert _step(controller, tap, "pause") == "PausedState"
    _step(controller, tap, "menu_down")
    _step(controller, tap, "menu_down")
    assert _step(controller, tap, "menu_select") == "MenuState"
    assert controller.paused_session_exists
    assert controller.fsm.current_state.menu.options[0] == "Resume"

    assert _step(controller, tap, "menu_select") == "PausedState"
    assert _step(controller, tap, "escape") == "PlayingState"
    assert controller.session is session


def test_pause_leaves_entities_untouched(controller, tap):
    _login(controller, tap)
    _step(controller, tap, "menu_select")
    _step(controller, tap, "pause")
    rock = controller.session.state.asteroids[0]
    before = rock.pos.copy()
    for _ in range(10):
        _step(controller)
    assert rock.pos == before


def test_restart_from_pause_makes_new_session(controller, tap):
    _login(controller, tap)
    _step(controller, tap, "menu_select")
    first = controller.session
    _step(controller, tap, "pause")
    _step(controller, tap, "menu_down")
    assert _step(controller, tap, "menu_select") == "PlayingState"
    assert controller.session is not first


def test_choose_difficulty_from_menu(controller, tap):
    _login(controller, tap)
    for _ in range(4):
        _step(controller, tap, "menu_down")
    assert controller.fsm.current_state.menu.selected == "Easy"
    _step(controller, tap, "menu_select")
    assert controller.difficulty.key == "easy"
    assert controller.fsm.current_name == "MenuState"

    _step(controller, tap, "menu_up")
    _step(controller, tap, "menu_up")
    _step(controller, tap, "menu_up")
    _step(controller, tap, "menu_up")
    assert _step(controller, tap, "menu_select") == "PlayingState"
    assert controller.session.state.lives == 4


def test_menu_wraps_upwards(controller, tap):
    _login(controller, tap)
    _step(controller, tap, "menu_up")
    assert controller.fsm.current_state.menu.selected == "Reset Pilot Data"


def test_info_screens_return_to_menu(controller, tap):
    _login(controller, tap)
    for steps, name in ((1, "HighScoresState"), (2, "AchievementsState"), (3, "HelpState")):
        for _ in range(steps):
            _step(controller, tap, "menu_down")
        assert _step(controller, tap, "menu_select") == name
        assert _step(controller, tap, "escape") == "MenuState"


def test_game_over_records_high_score(controller, tap):
    _login(controller, tap)
    _step(controller, tap, "menu_select")
    session = controller.session
    session.state.score = 1234
    session.state.lives = 1
    session.handle_player_death()

    assert _step(controller) == "GameOverState"
    assert controller.final_score == 1234
    assert controller.store.load_high_scores("ace") == [{"name": "ace", "score": 1234}]

    assert _step(controller, tap, "menu_select") == "MenuState"
    assert not controller.paused_session_exists
    assert controller.fsm.current_state.menu.options[0] == "Start"


def test_reset_pilot_data_returns_to_selection(controller, tap):
    _login(controller, tap)
    controller.store.save_high_scores("ace", [{"name": "ace", "score": 5}])
    _step(controller, tap, "menu_up")
    assert _step(controller, tap, "menu_select") == "UserSelectState"
    assert controller.user is None
    assert controller.store.load_high_scores("ace") == []


def test_switch_pilot(controller, tap):
    _login(controller, tap)
    _step(controller, tap, "menu_up")
    _step(controller, tap, "menu_up")
    assert _step(controller, tap, "menu_select") == "UserSelectState"
    assert _login(controller, tap, "bob") == "MenuState"
    assert controller.user == "bob"
    assert controller.store.all_usernames() == ["ace", "bob"]


def test_mute_is_global_but_not_while_typing(controller, tap):
    _step(controller, tap, "toggle_mute")
    assert not controller.audio.muted
    _login(controller, tap)
    _step(controller, tap, "toggle_mute")
    assert controller.audio.muted


def test_unknown_state_raises():
    fsm = StateMachine()
    with pytest.raises(ValueError):
        fsm.set_state("NopeState")


def test_state_machine_enter_exit_order():
    calls = []

    class A(State):
        def enter(self):
            calls.append("enter A")

        def exit(self):
            calls.append("exit A")

    class B(State):
        def enter(self):
            calls.append("enter B")

    fsm = StateMachine(A(None))
    fsm.add_state(B(None))
    fsm.set_state("B")
    assert calls == ["enter A", "exit A", "enter B"]
    assert fsm.current_name == "B"


def test_option_menu_clamps_after_shrinking():
    menu = OptionMenu(["a", "b", "c"])
    menu.move(-1)
    assert menu.selected == "c"
    menu.set_options(["a"])
    assert menu.selected == "a"
    menu.set_options([])
    assert menu.selected is None
