"""Centralized difficulty presets and spawn pacing logic."""

from __future__ import annotations

from dataclasses import dataclass
import logging

import config
from utils import random_range

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class DifficultyProfile:
    """Per-difficulty tuning applied to a whole play-through."""

    key: str
    name: str
    starting_asteroids: int
    asteroid_speed_multiplier: float
    saucer_spawn_multiplier: float
    saucer_accuracy: float
    starting_lives: int
    score_multiplier: float


DIFFICULTIES: dict[str, DifficultyProfile] = {
    "easy": DifficultyProfile(
        key="easy",
        name="Easy",
        starting_asteroids=3,
        asteroid_speed_multiplier=0.8,
        saucer_spawn_multiplier=1.5,
        saucer_accuracy=0.6,
        starting_lives=4,
        score_multiplier=0.75,
    ),
    "medium": DifficultyProfile(
        key="medium",
        name="Medium",
        starting_asteroids=4,
        asteroid_speed_multiplier=1.0,
        saucer_spawn_multiplier=1.0,
        saucer_accuracy=0.8,
        starting_lives=3,
        score_multiplier=1.0,
    ),
    "hard": DifficultyProfile(
        key="hard",
        name="Hard",
        starting_asteroids=5,
        asteroid_speed_multiplier=1.2,
        saucer_spawn_multiplier=0.7,
        saucer_accuracy=0.95,
        starting_lives=2,
        score_multiplier=1.5,
    ),
}


def get_difficulty(key: str | None = None) -> DifficultyProfile:
    d = str(key or config.DEFAULT_DIFFICULTY).lower()
    profile = DIFFICULTIES.get(d)
    if profile is None:
        LOG.warning("Unknown difficulty %r, using %s", key, config.DEFAULT_DIFFICULTY)
        profile = DIFFICULTIES[config.DEFAULT_DIFFICULTY]
    return profile


class SpawnDirector:
    """Level-scaled asteroid counts and saucer spawn intervals for one difficulty."""

    def __init__(self, difficulty: DifficultyProfile) -> None:
        self.difficulty = difficulty
        # Later levels shorten the saucer interval down to this fraction.
        self.min_level_factor: float = 0.5
        self.level_factor_step: float = 0.05
        self.extra_asteroids_per_level: int = 2

    def asteroid_count(self, level: int) -> int:
        level_i = max(1, int(level))
        return self.difficulty.starting_asteroids + (level_i - 1) * self.extra_asteroids_per_level

    def saucer_interval(self, level: int) -> float:
        level_factor = max(self.min_level_factor, 1.0 - int(level) * self.level_factor_step)
        base = config.SAUCER_SPAWN_BASE_INTERVAL * self.difficulty.saucer_spawn_multiplier
        return base * level_factor * random_range(0.75, 1.25)
