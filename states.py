"""Game states logic."""

import logging

import config
from fsm import State
from logic import DIFFICULTIES
from menu import OptionMenu

LOG = logging.getLogger(__name__)

MAX_NAME_LENGTH = 12

HELP_LINES = (
    "Up / W          Thrust",
    "Left / A        Rotate left",
    "Right / D       Rotate right",
    "Space           Fire",
    "H               Hyperspace (risky)",
    "P / Esc         Pause",
    "M               Mute",
    "",
    f"Extra life every {config.EXTRA_LIFE_SCORE:,} points.",
)


def _draw_playing_scene(game) -> None:
    session = game.session
    if session is None or game.renderer is None:
        return
    game.renderer.draw_world(session.state)
    game.renderer.draw_hud(session.state, game.user, game.audio.muted)


def _back_requested(game) -> bool:
    return game.input.consume("escape") or game.input.consume("menu_select")


class UserSelectState(State):
    """Pilot identification: type a name and press Enter."""
    captures_text = True

    def enter(self):
        self.game.input.clear_pressed()
        self.entry = ""

    def update(self, dt: float):
        inp = self.game.input
        for ch in inp.take_text():
            if (ch.isalnum() or ch in " _-") and len(self.entry) < MAX_NAME_LENGTH:
                self.entry += ch
        if inp.consume("backspace"):
            self.entry = self.entry[:-1]

        if inp.consume("enter"):
            name = self.entry.strip()
            if name:
                self.game.select_user(name)
                self.game.fsm.set_state("MenuState")
            return

        if inp.consume("escape") and self.game.user:
            self.game.fsm.set_state("MenuState")

        # Keys typed into the name must not trigger menu actions.
        for action in ("menu_up", "menu_down", "menu_select", "toggle_mute", "hyperspace", "pause"):
            inp.consume(action)

    def draw(self):
        known = self.game.store.all_usernames()
        lines = [f"Pilot: {self.entry}_", "", "Type a name and press Enter."]
        if known:
            lines += ["", "Known pilots: " + ", ".join(known)]
        self.game.renderer.draw_list("WHO IS FLYING?", [(line, "menu_text") for line in lines])


class MenuState(State):
    """Main menu: start or resume, screens, difficulty and pilot management."""

    def __init__(self, game):
        super().__init__(game)
        self.menu = OptionMenu(self.options())

    def options(self) -> list[str]:
        first = "Resume" if self.game.paused_session_exists else "Start"
        return [first, "High Scores", "Achievements", "Help"] + \
            [d.name for d in DIFFICULTIES.values()] + ["Switch Pilot", "Reset Pilot Data"]

    def enter(self):
        self.game.input.clear_pressed()
        self.menu.set_options(self.options())
        self.menu.reset()

    def update(self, dt: float):
        self.menu.set_options(self.options())
        self.menu.handle_navigation(self.game.input)
        if not self.game.input.consume("menu_select"):
            return

        choice = self.menu.selected
        LOG.debug("Menu selection: %s", choice)
        if choice == "Resume":
            self.game.fsm.set_state("PausedState")
        elif choice == "Start":
            self.game.start_new_game()
        elif choice == "High Scores":
            self.game.fsm.set_state("HighScoresState")
        elif choice == "Achievements":
            self.game.fsm.set_state("AchievementsState")
        elif choice == "Help":
            self.game.fsm.set_state("HelpState")
        elif choice == "Switch Pilot":
            self.game.fsm.set_state("UserSelectState")
        elif choice == "Reset Pilot Data":
            self.game.reset_user_data()
            self.game.fsm.set_state("UserSelectState")
        else:
            for key, profile in DIFFICULTIES.items():
                if profile.name == choice:
                    self.game.set_difficulty(key)

    def draw(self):
        subtitle = f"Pilot: {self.game.user or '-'}   Difficulty: {self.game.difficulty.name}"
        self.game.renderer.draw_menu(
            "ASTEROIDS",
            self.menu.options,
            self.menu.index,
            subtitle=subtitle,
            active=self.game.difficulty.name,
        )


class PlayingState(State):
    def enter(self):
        self.game.input.clear_pressed()

    def update(self, dt: float):
        session = self.game.session
        if session is None:
            self.game.fsm.set_state("MenuState")
            return

        inp = self.game.input
        if inp.consume("pause") or inp.consume("escape"):
            session.pause()
            self.game.fsm.set_state("PausedState")
            return

        session.apply_controls(inp, dt)
        session.update(dt)
        if session.over:
            self.game.fsm.set_state("GameOverState")

    def draw(self):
        _draw_playing_scene(self.game)


class PausedState(State):
    """Frozen session with Resume / Restart / Main Menu."""

    def __init__(self, game):
        super().__init__(game)
        self.menu = OptionMenu(["Resume", "Restart", "Main Menu"])

    def enter(self):
        self.game.input.clear_pressed()
        self.menu.reset()
        if self.game.session is not None:
            self.game.session.pause()

    def update(self, dt: float):
        inp = self.game.input
        if self.game.session is None:
            self.game.fsm.set_state("MenuState")
            return
        if inp.consume("pause") or inp.consume("escape"):
            self.game.fsm.set_state("PlayingState")
            return

        self.menu.handle_navigation(inp)
        if not inp.consume("menu_select"):
            return
        choice = self.menu.selected
        if choice == "Resume":
            self.game.fsm.set_state("PlayingState")
        elif choice == "Restart":
            self.game.start_new_game()
        elif choice == "Main Menu":
            self.game.paused_session_exists = True
            self.game.fsm.set_state("MenuState")

    def draw(self):
        _draw_playing_scene(self.game)
        self.game.renderer.draw_menu("PAUSED", self.menu.options, self.menu.index, overlay=True)


class HighScoresState(State):
    def enter(self):
        self.game.input.clear_pressed()
        self.entries = self.game.store.load_high_scores(None)[:config.MAX_HIGH_SCORES]

    def update(self, dt: float):
        if _back_requested(self.game):
            self.game.fsm.set_state("MenuState")

    def draw(self):
        if self.entries:
            rows = [
                (f"{i + 1:>2}. {e.get('user', e.get('name', '?')):<{MAX_NAME_LENGTH}} {int(e.get('score', 0)):>8}", "menu_text")
                for i, e in enumerate(self.entries)
            ]
        else:
            rows = [("No scores yet.", "locked")]
        self.game.renderer.draw_list("HIGH SCORES", rows, footer="Esc / Enter: back")


class AchievementsState(State):
    def enter(self):
        self.game.input.clear_pressed()

    def update(self, dt: float):
        if _back_requested(self.game):
            self.game.fsm.set_state("MenuState")

    def draw(self):
        rows = []
        for achievement, unlocked in self.game.achievements.status():
            mark = "[x]" if unlocked else "[ ]"
            rows.append((f"{mark} {achievement.name} - {achievement.description}",
                         "unlocked" if unlocked else "locked"))
        self.game.renderer.draw_list("ACHIEVEMENTS", rows, footer="Esc / Enter: back")


class HelpState(State):
    def enter(self):
        self.game.input.clear_pressed()

    def update(self, dt: float):
        if _back_requested(self.game):
            self.game.fsm.set_state("MenuState")

    def draw(self):
        self.game.renderer.draw_list("HOW TO PLAY", [(line, "menu_text") for line in HELP_LINES],
                                     footer="Esc / Enter: back")


class GameOverState(State):
    def enter(self):
        self.game.input.clear_pressed()
        self.rank = self.game.finish_game()

    def update(self, dt: float):
        if self.game.input.consume("menu_select"):
            self.game.paused_session_exists = False
            self.game.fsm.set_state("MenuState")

    def draw(self):
        rows = [(f"Final score: {self.game.final_score}", "menu_text")]
        if self.rank is not None:
            rows.append((f"New high score! Rank #{self.rank + 1}", "menu_selected"))
        self.game.renderer.draw_list("GAME OVER", rows, footer="Enter / Space: menu")
