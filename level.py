"""Game state and level management."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Optional
import logging
import random

import config
from asteroid import LARGE, Asteroid
from enemy import Saucer
from logic import DifficultyProfile, SpawnDirector, get_difficulty
from player import PlayerShip
from projectile import Projectile
from utils import Vec2, dist, random_screen_edge

LOG = logging.getLogger(__name__)


@dataclass
class GameState:
    """World state for one play-through."""
    width: float = config.SCREEN_W
    height: float = config.SCREEN_H
    difficulty: DifficultyProfile = field(default_factory=get_difficulty)
    score: int = 0
    lives: int = 0
    level: int = 1
    next_extra_life: int = config.EXTRA_LIFE_SCORE
    ship: Optional[PlayerShip] = None
    asteroids: list[Asteroid] = field(default_factory=list)
    projectiles: list[Projectile] = field(default_factory=list)
    saucers: list[Saucer] = field(default_factory=list)
    respawn_timer: float = 0.0
    saucer_timer: float = 0.0
    stats: Counter = field(default_factory=Counter)
    time: float = 0.0

    @property
    def center(self) -> Vec2:
        return Vec2(self.width / 2, self.height / 2)

    @property
    def director(self) -> SpawnDirector:
        return SpawnDirector(self.difficulty)

    def prune(self) -> None:
        """Drop dead entities from every collection."""
        self.asteroids = [a for a in self.asteroids if a.alive]
        self.projectiles = [p for p in self.projectiles if p.alive]
        self.saucers = [s for s in self.saucers if s.alive]

    def field_cleared(self) -> bool:
        return not self.asteroids and not self.saucers


SAFE_SPAWN_ATTEMPTS = 50


def _safe_edge_position(state: GameState) -> Vec2:
    center = state.center
    for _ in range(SAFE_SPAWN_ATTEMPTS):
        pos = random_screen_edge(state.width, state.height, LARGE.radius)
        if dist(pos, center) > config.SAFE_SPAWN_RADIUS:
            return pos
    # Playfield too small for the safe radius: use the farthest corner.
    LOG.warning("No safe edge point on a %.0fx%.0f field", state.width, state.height)
    margin = LARGE.radius
    return Vec2(random.choice((-margin, state.width + margin)),
                random.choice((-margin, state.height + margin)))


def spawn_level_asteroids(state: GameState) -> None:
    """Populate the field with LARGE asteroids for the current level."""
    count = state.director.asteroid_count(state.level)
    for _ in range(count):
        state.asteroids.append(
            Asteroid.create(
                _safe_edge_position(state),
                LARGE,
                speed_multiplier=state.difficulty.asteroid_speed_multiplier,
            )
        )
    LOG.info("Level %d: spawned %d asteroids", state.level, count)


def reset_saucer_timer(state: GameState) -> None:
    state.saucer_timer = state.director.saucer_interval(state.level)
    LOG.debug("Next saucer in %.1fs", state.saucer_timer)


def update_saucer_spawning(state: GameState, dt: float) -> Optional[Saucer]:
    """Count the saucer timer down and spawn a saucer when it expires.

    The countdown is frozen while the ship is waiting to respawn or the
    saucer ceiling is reached. Returns the new saucer, if any.
    """
    if state.respawn_timer > 0:
        return None
    if sum(1 for s in state.saucers if s.alive) >= config.MAX_ACTIVE_SAUCERS:
        return None

    state.saucer_timer -= dt
    if state.saucer_timer > 0:
        return None

    saucer = Saucer.spawn(state.width, state.height)
    state.saucers.append(saucer)
    reset_saucer_timer(state)
    return saucer
