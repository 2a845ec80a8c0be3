"""Per-tick collision resolution between the ship, rocks, saucers and bullets."""

from dataclasses import dataclass, field
from typing import Optional
import logging

from level import GameState
from utils import Vec2

LOG = logging.getLogger(__name__)

KIND_ASTEROID = "asteroid"
KIND_SAUCER = "saucer"


@dataclass
class Kill:
    """One target destroyed by a player bullet."""
    kind: str
    base_score: int
    pos: Vec2
    tier: Optional[str] = None


@dataclass
class CollisionReport:
    player_killed: bool = False
    # Tier name of an asteroid the ship flew into.
    rammed_tier: Optional[str] = None
    kills: list[Kill] = field(default_factory=list)


def _resolve_ship(state: GameState, report: CollisionReport) -> bool:
    """Check the ship against every hazard. Returns True if it died."""
    ship = state.ship
    if ship is None or not ship.alive or ship.invulnerable:
        return False

    for asteroid in state.asteroids:
        if ship.collides_with(asteroid):
            ship.destroy()
            report.rammed_tier = asteroid.tier.name
            state.asteroids.extend(asteroid.split())
            LOG.debug("Ship hit a %s asteroid", asteroid.tier.name)
            return True

    for saucer in state.saucers:
        if ship.collides_with(saucer):
            ship.destroy()
            saucer.destroy()
            LOG.debug("Ship rammed a saucer")
            return True

    for projectile in state.projectiles:
        if projectile.is_player:
            continue
        if ship.collides_with(projectile):
            ship.destroy()
            projectile.destroy()
            LOG.debug("Ship shot by a saucer")
            return True

    return False


def resolve_collisions(state: GameState) -> CollisionReport:
    """Resolve all hits for this tick in a fixed order.

    A ship death ends resolution for the tick. Otherwise player bullets are
    matched against asteroids first, then the survivors against saucers.
    Split products join the field immediately and can be hit later in the
    same pass.
    """
    report = CollisionReport()
    if _resolve_ship(state, report):
        report.player_killed = True
        return report

    bullets = [p for p in state.projectiles if p.is_player]

    for bullet in bullets:
        if not bullet.alive:
            continue
        for asteroid in state.asteroids:
            if bullet.collides_with(asteroid):
                bullet.destroy()
                report.kills.append(Kill(KIND_ASTEROID, asteroid.score_value, asteroid.pos.copy(), asteroid.tier.name))
                state.asteroids.extend(asteroid.split())
                break

    for bullet in bullets:
        if not bullet.alive:
            continue
        for saucer in state.saucers:
            if bullet.collides_with(saucer):
                bullet.destroy()
                saucer.destroy()
                report.kills.append(Kill(KIND_SAUCER, saucer.score_value, saucer.pos.copy()))
                break

    return report
