"""Asteroid entity: jagged polygon bodies that split into smaller tiers."""

from dataclasses import dataclass, field
from typing import ClassVar, Optional
import math

import config
from physics import Entity
from utils import Vec2, deg_to_rad, random_range


@dataclass(frozen=True)
class AsteroidTier:
    """Size class fixing radius, outline detail, speed and score."""

    name: str
    radius: float
    vertices: int
    speed_mult: float
    score: int


LARGE = AsteroidTier("large", 40.0, 10, 1.0, 20)
MEDIUM = AsteroidTier("medium", 20.0, 8, 1.5, 50)
SMALL = AsteroidTier("small", 10.0, 6, 2.0, 100)

TIERS: dict[str, AsteroidTier] = {t.name: t for t in (LARGE, MEDIUM, SMALL)}

# Tier a split produces; SMALL is absent and leaves nothing behind.
SPLITS_INTO: dict[AsteroidTier, AsteroidTier] = {
    LARGE: MEDIUM,
    MEDIUM: SMALL,
}


def generate_shape(radius: float, vertices: int) -> tuple[tuple[float, float], ...]:
    """Build a closed jagged outline around the origin.

    Vertices sit at uniform angular steps; each one's distance is the radius
    scaled by a factor drawn from [1 - jaggedness, 1].
    """
    step = math.tau / vertices
    points = []
    for i in range(vertices):
        angle = i * step
        r = radius * (1.0 - random_range(0.0, config.ASTEROID_JAGGEDNESS))
        points.append((math.cos(angle) * r, math.sin(angle) * r))
    return tuple(points)


@dataclass
class Asteroid(Entity):
    """Drifting rock. The outline is generated once and only ever rotated."""
    tier: AsteroidTier = LARGE
    spin: float = 0.0
    shape: tuple[tuple[float, float], ...] = field(default=())

    wraps: ClassVar[bool] = True

    def __post_init__(self) -> None:
        self.radius = self.tier.radius
        if not self.shape:
            self.shape = generate_shape(self.tier.radius, self.tier.vertices)

    @property
    def score_value(self) -> int:
        return self.tier.score

    @classmethod
    def create(
        cls,
        pos: Vec2,
        tier: AsteroidTier = LARGE,
        velocity: Optional[Vec2] = None,
        speed_multiplier: float = 1.0,
    ) -> "Asteroid":
        """Create an asteroid with a random spin and, unless given, a random heading."""
        if velocity is None:
            speed = config.ASTEROID_BASE_SPEED * speed_multiplier * tier.speed_mult
            velocity = Vec2.from_angle(random_range(0.0, math.tau), speed)
        spin = deg_to_rad(random_range(-config.ASTEROID_MAX_SPIN, config.ASTEROID_MAX_SPIN))
        return cls(pos=pos.copy(), vel=velocity, tier=tier, spin=spin)

    def update(self, dt: float, width: float, height: float) -> None:
        self.rotation += self.spin * dt
        self.integrate(dt, width, height)

    def split(self) -> list["Asteroid"]:
        """Destroy this asteroid and return its children (two, or none for SMALL)."""
        if not self.alive:
            return []

        children: list[Asteroid] = []
        next_tier = SPLITS_INTO.get(self.tier)
        if next_tier is not None:
            lo, hi = config.ASTEROID_SPLIT_SPEED_RANGE
            for _ in range(2):
                kick = Vec2.from_angle(random_range(-math.pi / 4, math.pi / 4), config.ASTEROID_SPLIT_KICK)
                vel = (self.vel + kick) * random_range(lo, hi)
                children.append(Asteroid.create(self.pos, next_tier, velocity=vel))

        self.destroy()
        return children
