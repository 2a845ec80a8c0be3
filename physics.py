"""Physics and collision detection logic."""

from dataclasses import dataclass, field
from typing import ClassVar

from utils import Vec2, wrap_position


def check_circle_collision(pos1: Vec2, r1: float, pos2: Vec2, r2: float) -> bool:
    """Check if two circles overlap. Touching circles do not collide."""
    d_sq = (pos1 - pos2).length_squared()
    r_sum = r1 + r2
    return d_sq < (r_sum * r_sum)


@dataclass
class Entity:
    """Common movement and collision state shared by every body in the playfield."""
    pos: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))
    vel: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))
    rotation: float = 0.0
    radius: float = 10.0
    alive: bool = True

    # Subclasses that should fold back across screen edges set this.
    wraps: ClassVar[bool] = False

    def integrate(self, dt: float, width: float, height: float) -> None:
        """Advance position by one time step, wrapping when the entity opts in."""
        self.pos = self.pos + self.vel * dt
        if self.wraps:
            wrap_position(self.pos, width, height)

    def update(self, dt: float, width: float, height: float) -> None:
        self.integrate(dt, width, height)

    def collides_with(self, other: "Entity") -> bool:
        if not self.alive or not other.alive:
            return False
        return check_circle_collision(self.pos, self.radius, other.pos, other.radius)

    def destroy(self) -> bool:
        """Mark dead. Returns True only if this call did the killing."""
        if not self.alive:
            return False
        self.alive = False
        return True
