"""Achievement definitions and the per-pilot unlock tracker."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional, Union
import logging

import config

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreThreshold:
    value: int


@dataclass(frozen=True)
class LevelThreshold:
    value: int


@dataclass(frozen=True)
class StatThreshold:
    stat: str
    value: int


Condition = Union[ScoreThreshold, LevelThreshold, StatThreshold]


@dataclass(frozen=True)
class Achievement:
    id: str
    name: str
    description: str
    condition: Condition


ACHIEVEMENTS: tuple[Achievement, ...] = (
    Achievement("SCORE_10K", "Score Milestone I", "Achieve a score of 10,000 points.", ScoreThreshold(10_000)),
    Achievement("SCORE_50K", "Score Milestone II", "Achieve a score of 50,000 points.", ScoreThreshold(50_000)),
    Achievement("LEVEL_3", "Getting Started", "Reach Level 3.", LevelThreshold(3)),
    Achievement("LEVEL_10", "Veteran Pilot", "Reach Level 10.", LevelThreshold(10)),
    Achievement("ASTEROIDS_50", "Rock Breaker", "Destroy 50 asteroids (any size).",
                StatThreshold("asteroids_destroyed", 50)),
    Achievement("ASTEROIDS_250", "Pebble Pusher", "Destroy 250 asteroids (any size).",
                StatThreshold("asteroids_destroyed", 250)),
    Achievement("SAUCER_DESTROY_1", "Saucer Slayer", "Destroy your first saucer.",
                StatThreshold("saucers_destroyed", 1)),
    Achievement("SAUCER_DESTROY_10", "Alien Hunter", "Destroy 10 saucers.",
                StatThreshold("saucers_destroyed", 10)),
)


@dataclass
class SessionSnapshot:
    """What the evaluator sees of a running session."""
    score: int = 0
    level: int = 1
    user: Optional[str] = None
    stats: Mapping[str, int] = field(default_factory=dict)


def condition_met(condition: Condition, snapshot: SessionSnapshot) -> bool:
    if isinstance(condition, ScoreThreshold):
        return snapshot.score >= condition.value
    if isinstance(condition, LevelThreshold):
        return snapshot.level >= condition.value
    if isinstance(condition, StatThreshold):
        return int(snapshot.stats.get(condition.stat, 0)) >= condition.value
    LOG.warning("Unknown achievement condition %r", condition)
    return False


class AchievementTracker:
    """Evaluates achievements for the current pilot and queues unlock notifications."""

    def __init__(self, store, definitions: tuple[Achievement, ...] = ACHIEVEMENTS):
        self.store = store
        self.definitions = definitions
        self.user: Optional[str] = None
        self.unlocked: set[str] = set()
        self.recent: list[Achievement] = []
        self.notification_timer: float = 0.0

    def load_user(self, username: Optional[str]) -> None:
        self.user = username or None
        self.unlocked = self.store.load_achievements(self.user) if self.user else set()
        self.clear_notifications()
        LOG.info("Achievements loaded for %s: %d unlocked", self.user or "nobody", len(self.unlocked))

    def clear_notifications(self) -> None:
        self.recent = []
        self.notification_timer = 0.0

    def evaluate(self, snapshot: SessionSnapshot) -> list[Achievement]:
        """Unlock every definition the snapshot now satisfies. Returns the new ones."""
        if not self.user:
            return []

        newly: list[Achievement] = []
        for achievement in self.definitions:
            if achievement.id in self.unlocked:
                continue
            if condition_met(achievement.condition, snapshot):
                self.unlocked.add(achievement.id)
                newly.append(achievement)
                LOG.info("Achievement unlocked [%s]: %s", self.user, achievement.name)

        if newly:
            self.recent.extend(newly)
            self.notification_timer = config.NOTIFICATION_DURATION
            self.store.save_achievements(self.user, self.unlocked)
        return newly

    def update_notifications(self, dt: float) -> None:
        if self.notification_timer > 0:
            self.notification_timer -= dt
            if self.notification_timer <= 0:
                self.recent = []

    def active_notifications(self) -> list[Achievement]:
        return list(self.recent) if self.notification_timer > 0 else []

    def is_unlocked(self, achievement_id: str) -> bool:
        return achievement_id in self.unlocked

    def status(self) -> list[tuple[Achievement, bool]]:
        """Every definition paired with its unlocked flag, sorted by name."""
        rows = [(a, self.is_unlocked(a.id)) for a in self.definitions]
        rows.sort(key=lambda row: row[0].name)
        return rows
