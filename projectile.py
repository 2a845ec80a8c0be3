"""Projectile entity and related functionality."""

from dataclasses import dataclass

import config
from physics import Entity
from utils import Vec2

OWNER_PLAYER = "player"
OWNER_ENEMY = "enemy"


@dataclass
class Projectile(Entity):
    """Short-lived bullet. Does not wrap; dies at the playfield edge."""
    radius: float = config.BULLET_RADIUS
    ttl: float = config.BULLET_LIFETIME
    owner: str = OWNER_PLAYER  # "player" or "enemy"

    @property
    def is_player(self) -> bool:
        return self.owner == OWNER_PLAYER

    def update(self, dt: float, width: float, height: float) -> None:
        """Move, burn lifetime, and despawn once outside the playfield."""
        self.integrate(dt, width, height)
        self.ttl -= dt
        if self.ttl <= 0:
            self.alive = False
        if self.pos.x < 0 or self.pos.x > width or self.pos.y < 0 or self.pos.y > height:
            self.alive = False


def spawn_projectile(origin: Vec2, angle: float, speed: float, owner: str) -> Projectile:
    """Create a projectile at origin travelling along angle (radians)."""
    return Projectile(pos=origin.copy(), vel=Vec2.from_angle(angle, speed), rotation=angle, owner=owner)
