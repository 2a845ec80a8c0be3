"""Enemy saucer entity and related functionality."""

from dataclasses import dataclass
from typing import Optional
import logging
import math
import random

import config
from physics import Entity
from projectile import OWNER_ENEMY, Projectile, spawn_projectile
from utils import Vec2, random_range

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class SaucerTier:
    """Fixed saucer stats."""

    radius: float
    speed: float
    score: int
    fire_interval: float
    bullet_speed: float


STANDARD = SaucerTier(
    radius=config.SAUCER_RADIUS,
    speed=config.SAUCER_SPEED,
    score=config.SAUCER_SCORE,
    fire_interval=config.SAUCER_FIRE_INTERVAL,
    bullet_speed=config.SAUCER_BULLET_SPEED,
)


@dataclass
class Saucer(Entity):
    """Hostile saucer crossing the screen horizontally and shooting at the player."""
    tier: SaucerTier = STANDARD
    fire_timer: float = 0.0

    def __post_init__(self) -> None:
        self.radius = self.tier.radius

    @property
    def score_value(self) -> int:
        return self.tier.score

    @classmethod
    def spawn(cls, width: float, height: float, tier: SaucerTier = STANDARD) -> "Saucer":
        """Create a saucer just off a random side edge, heading across."""
        from_left = random.random() < 0.5
        x = -tier.radius if from_left else width + tier.radius
        y = random_range(tier.radius, height - tier.radius)
        vx = tier.speed if from_left else -tier.speed
        saucer = cls(
            pos=Vec2(x, y),
            vel=Vec2(vx, 0.0),
            tier=tier,
            fire_timer=tier.fire_interval * random_range(0.5, 1.5),
        )
        LOG.info("Saucer spawned at (%.0f, %.0f) moving %s", x, y, "right" if from_left else "left")
        return saucer

    def has_exited(self, width: float) -> bool:
        if self.vel.x > 0:
            return self.pos.x > width + self.radius * 2
        return self.pos.x < -self.radius * 2

    def update(self, dt: float, width: float, height: float, target: Optional[Entity] = None,
               accuracy: float = 0.8) -> Optional[Projectile]:
        """Move, despawn past the far edge, and fire when the timer runs out."""
        self.integrate(dt, width, height)
        if self.has_exited(width):
            LOG.debug("Saucer left the playfield")
            self.alive = False

        self.fire_timer -= dt
        if self.fire_timer <= 0 and self.alive:
            shot = self.fire(target, accuracy)
            self.fire_timer = self.tier.fire_interval * random_range(0.8, 1.2)
            return shot
        return None

    def fire(self, target: Optional[Entity], accuracy: float) -> Optional[Projectile]:
        """Shoot at the target's current position with an error that shrinks as accuracy grows."""
        if target is None or not target.alive:
            return None
        bearing = math.atan2(target.pos.y - self.pos.y, target.pos.x - self.pos.x)
        max_offset = (1.0 - accuracy) * math.pi
        angle = bearing + random_range(-max_offset, max_offset)
        return spawn_projectile(self.pos, angle, self.tier.bullet_speed, OWNER_ENEMY)
