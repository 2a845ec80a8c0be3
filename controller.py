"""Top-level game controller: collaborators, pilot, difficulty and the state machine."""

from __future__ import annotations

from typing import Optional
import logging

import config
from achievements import AchievementTracker
from audio import AudioSink
from controls import InputState
from fsm import StateMachine
from logic import DifficultyProfile, get_difficulty
from score import insert_high_score
from session import GameSession
from states import (
    AchievementsState,
    GameOverState,
    HelpState,
    HighScoresState,
    MenuState,
    PausedState,
    PlayingState,
    UserSelectState,
)
from storage import PersistenceStore

LOG = logging.getLogger(__name__)


class GameController:
    """Owns the active session and routes each frame through the state machine.

    The renderer is optional so the whole flow can run headless.
    """

    def __init__(
        self,
        width: float = config.SCREEN_W,
        height: float = config.SCREEN_H,
        input_state: Optional[InputState] = None,
        audio: Optional[AudioSink] = None,
        store: Optional[PersistenceStore] = None,
        renderer=None,
    ):
        self.width = width
        self.height = height
        self.input = input_state if input_state is not None else InputState()
        self.audio = audio if audio is not None else AudioSink()
        self.store = store if store is not None else PersistenceStore()
        self.renderer = renderer

        self.user: Optional[str] = self.store.get_current_user()
        self.achievements = AchievementTracker(self.store)
        self.achievements.load_user(self.user)
        self.difficulty: DifficultyProfile = get_difficulty(config.DEFAULT_DIFFICULTY)
        self.session: Optional[GameSession] = None
        self.paused_session_exists = False
        self.final_score = 0

        self.fsm = StateMachine()
        for state in (
            UserSelectState(self),
            MenuState(self),
            PlayingState(self),
            PausedState(self),
            HighScoresState(self),
            AchievementsState(self),
            HelpState(self),
            GameOverState(self),
        ):
            self.fsm.add_state(state)
        self.fsm.set_state("MenuState" if self.user else "UserSelectState")

    # ------------------------------------------------------------------
    # Pilot and difficulty
    # ------------------------------------------------------------------

    def set_difficulty(self, key: str) -> None:
        self.difficulty = get_difficulty(key)
        LOG.info("Difficulty set to %s", self.difficulty.name)

    def _drop_session(self) -> None:
        self.audio.stop_all()
        self.session = None
        self.paused_session_exists = False

    def select_user(self, username: str) -> None:
        self.store.set_current_user(username)
        self.user = self.store.get_current_user()
        self.achievements.load_user(self.user)
        self._drop_session()

    def reset_user_data(self) -> None:
        if not self.user:
            LOG.debug("No pilot to reset")
            return
        self.store.reset_user_data(self.user)
        self.user = None
        self.achievements.load_user(None)
        self._drop_session()

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------

    def start_new_game(self) -> GameSession:
        self._drop_session()
        self.session = GameSession(
            self.difficulty,
            self.width,
            self.height,
            audio=self.audio,
            achievements=self.achievements,
            user=self.user,
        )
        self.session.start()
        self.fsm.set_state("PlayingState")
        return self.session

    def finish_game(self) -> Optional[int]:
        """Record the finished session. Returns the high-score rank, if any."""
        self.paused_session_exists = False
        self.audio.stop_all()
        if self.session is None:
            return None
        self.final_score = self.session.state.score
        if not self.user:
            return None

        entries = self.store.load_high_scores(self.user)
        rank = insert_high_score(entries, self.user, self.final_score, config.MAX_HIGH_SCORES)
        if rank is not None:
            self.store.save_high_scores(self.user, entries)
            LOG.info("High score for %s: %d (rank %d)", self.user, self.final_score, rank + 1)
        return rank

    # ------------------------------------------------------------------
    # Frame
    # ------------------------------------------------------------------

    def update(self, dt: float) -> None:
        dt = max(0.0, min(float(dt), config.MAX_FRAME_DT))
        self.fsm.update(dt)
        self.achievements.update_notifications(dt)
        if not self.fsm.current_state.captures_text and self.input.consume("toggle_mute"):
            self.audio.toggle_mute()

    def draw(self) -> None:
        if self.renderer is None:
            return
        self.fsm.draw()
        self.renderer.draw_notifications(self.achievements.active_notifications())

    def resize(self, width: float, height: float) -> None:
        """Later sessions use the new playfield size; the running one keeps its own."""
        self.width = width
        self.height = height
        if self.renderer is not None:
            self.renderer.resize(width, height)
