"""Player ship entity and related functionality."""

from dataclasses import dataclass
from typing import ClassVar, Iterable, Optional
import logging
import math
import random

import config
from physics import Entity
from projectile import OWNER_PLAYER, Projectile, spawn_projectile
from utils import Vec2, deg_to_rad, random_range

LOG = logging.getLogger(__name__)


@dataclass
class PlayerShip(Entity):
    """Player-controlled ship."""
    radius: float = config.SHIP_RADIUS
    rotation: float = config.SHIP_START_ROTATION
    thrusting: bool = False
    fire_cooldown: float = config.SHIP_FIRE_COOLDOWN
    fire_timer: float = 0.0
    invulnerable: bool = False
    invulnerability_timer: float = 0.0
    blink_on: bool = True
    blink_timer: float = 0.0
    hyperspace_timer: float = 0.0
    hyperspace_risk: float = config.HYPERSPACE_SELF_DESTRUCT_CHANCE

    wraps: ClassVar[bool] = True

    def __post_init__(self) -> None:
        # Spawn protection.
        self.make_invulnerable()

    @property
    def heading(self) -> Vec2:
        return Vec2.from_angle(self.rotation)

    @property
    def hyperspace_ready(self) -> bool:
        return self.hyperspace_timer <= 0

    def make_invulnerable(self, duration: float = config.SHIP_INVULNERABILITY) -> None:
        self.invulnerable = True
        self.invulnerability_timer = duration
        self.blink_timer = config.SHIP_BLINK_INTERVAL
        self.blink_on = True

    def rotate(self, direction: int, dt: float) -> None:
        """Turn left (-1) or right (+1)."""
        self.rotation += deg_to_rad(config.SHIP_TURN_SPEED) * direction * dt

    def thrust(self, dt: float) -> None:
        self.thrusting = True
        accel = self.heading * config.SHIP_THRUST
        self.vel = self.vel + accel * (dt * config.THRUST_FRAME_SCALE)

    def fire(self) -> Optional[Projectile]:
        """Fire one bullet from the nose if the cooldown allows it."""
        if not self.alive or self.fire_timer > 0:
            return None
        nose = self.pos + self.heading * self.radius
        self.fire_timer = self.fire_cooldown
        return spawn_projectile(nose, self.rotation, config.PLAYER_BULLET_SPEED, OWNER_PLAYER)

    def hyperspace(self, width: float, height: float, obstacles: Iterable[Entity]) -> bool:
        """Jump to a random location.

        Returns True on a clean jump. A failed jump (random self-destruct or
        materialising inside an obstacle) destroys the ship and returns False.
        While on cooldown nothing happens and False is returned.
        """
        if not self.alive or not self.hyperspace_ready:
            LOG.debug("Hyperspace not ready")
            return False

        if random.random() < self.hyperspace_risk:
            LOG.info("Hyperspace failed: self-destruct")
            self.destroy(force=True)
            return False

        self.pos = Vec2(
            random_range(self.radius, width - self.radius),
            random_range(self.radius, height - self.radius),
        )
        self.vel = Vec2(0.0, 0.0)

        for other in obstacles:
            if other.alive and self.collides_with(other):
                LOG.info("Hyperspace failed: materialised inside %s", type(other).__name__)
                self.destroy(force=True)
                return False

        LOG.info("Hyperspace to (%.0f, %.0f)", self.pos.x, self.pos.y)
        self.hyperspace_timer = config.HYPERSPACE_COOLDOWN
        return True

    def update(self, dt: float, width: float, height: float) -> None:
        if self.fire_timer > 0:
            self.fire_timer -= dt
        if self.hyperspace_timer > 0:
            self.hyperspace_timer -= dt

        # Friction applies every tick, thrusting or not.
        self.vel = self.vel * config.SHIP_FRICTION

        self.integrate(dt, width, height)

        if self.invulnerable:
            self.invulnerability_timer -= dt
            self.blink_timer -= dt
            if self.blink_timer <= 0:
                self.blink_on = not self.blink_on
                self.blink_timer = config.SHIP_BLINK_INTERVAL
            if self.invulnerability_timer <= 0:
                self.invulnerable = False
                self.blink_on = True

    @property
    def visible(self) -> bool:
        return self.alive and (not self.invulnerable or self.blink_on)

    def destroy(self, force: bool = False) -> bool:
        """Destroy the ship. Ignored while invulnerable unless forced."""
        if not force and self.invulnerable:
            return False
        destroyed = super().destroy()
        if destroyed:
            LOG.info("Player ship destroyed%s", " (forced)" if force else "")
        return destroyed


def ship_outline(ship: PlayerShip) -> list[tuple[float, float]]:
    """Triangle outline (nose, rear-left, rear-right) in world coordinates."""
    back = deg_to_rad(140.0)
    pts = []
    for offset in (0.0, back, -back):
        a = ship.rotation + offset
        pts.append((ship.pos.x + math.cos(a) * ship.radius, ship.pos.y + math.sin(a) * ship.radius))
    return pts
