"""One play-through: the per-tick simulation chain, deaths, respawns and levels."""

from typing import Optional
import logging

import config
from achievements import AchievementTracker, SessionSnapshot
from audio import AudioSink
from collisions import KIND_ASTEROID, KIND_SAUCER, resolve_collisions
from level import GameState, reset_saucer_timer, spawn_level_asteroids, update_saucer_spawning
from logic import DifficultyProfile
from player import PlayerShip
from score import ScoreTracker

LOG = logging.getLogger(__name__)

STAT_FOR_KIND = {
    KIND_ASTEROID: "asteroids_destroyed",
    KIND_SAUCER: "saucers_destroyed",
}


class GameSession:
    """Owns the world state of a single game from first level to game over."""

    def __init__(
        self,
        difficulty: DifficultyProfile,
        width: float = config.SCREEN_W,
        height: float = config.SCREEN_H,
        audio: Optional[AudioSink] = None,
        achievements: Optional[AchievementTracker] = None,
        user: Optional[str] = None,
    ):
        self.difficulty = difficulty
        self.width = width
        self.height = height
        self.audio = audio if audio is not None else AudioSink()
        self.achievements = achievements
        self.user = user
        self.scorer = ScoreTracker(multiplier=difficulty.score_multiplier)
        self.state = GameState(width=width, height=height, difficulty=difficulty)
        self.over = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        self.scorer = ScoreTracker(multiplier=self.difficulty.score_multiplier)
        self.state = GameState(
            width=self.width,
            height=self.height,
            difficulty=self.difficulty,
            lives=self.difficulty.starting_lives,
            next_extra_life=self.scorer.next_extra_life,
        )
        self.over = False
        self.respawn_ship()
        spawn_level_asteroids(self.state)
        reset_saucer_timer(self.state)
        LOG.info("New game: difficulty=%s lives=%d pilot=%s",
                 self.difficulty.key, self.state.lives, self.user or "-")

    def pause(self) -> None:
        self.audio.stop_all()

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            score=self.state.score,
            level=self.state.level,
            user=self.user,
            stats=dict(self.state.stats),
        )

    def _evaluate_achievements(self) -> None:
        if self.achievements is not None:
            self.achievements.evaluate(self.snapshot())

    # ------------------------------------------------------------------
    # Controls
    # ------------------------------------------------------------------

    def apply_controls(self, input_state, dt: float) -> None:
        """Feed held and single-press actions to the ship."""
        ship = self.state.ship
        if self.over or ship is None or not ship.alive:
            self.audio.stop_loop("thrust")
            return

        if input_state.is_pressed("rotate_left"):
            ship.rotate(-1, dt)
        if input_state.is_pressed("rotate_right"):
            ship.rotate(1, dt)

        if input_state.is_pressed("thrust"):
            ship.thrust(dt)
            self.audio.start_loop("thrust")
        else:
            ship.thrusting = False
            self.audio.stop_loop("thrust")

        if input_state.is_pressed("fire"):
            bullet = ship.fire()
            if bullet is not None:
                self.state.projectiles.append(bullet)
                self.audio.play("player_shoot")

        if input_state.consume("hyperspace"):
            self.hyperspace()

    def hyperspace(self) -> bool:
        ship = self.state.ship
        if ship is None or not ship.alive or not ship.hyperspace_ready:
            return False

        obstacles = [*self.state.asteroids, *self.state.saucers]
        if ship.hyperspace(self.width, self.height, obstacles):
            self.audio.play("hyperspace")
            self.record_stat("hyperspace_jumps")
            return True

        if not ship.alive:
            self.handle_player_death(already_destroyed=True)
        return False

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def update(self, dt: float) -> None:
        if self.over:
            return
        state = self.state
        state.time += dt

        ship = state.ship
        if ship is not None:
            ship.update(dt, state.width, state.height)
        for asteroid in state.asteroids:
            asteroid.update(dt, state.width, state.height)
        for projectile in state.projectiles:
            projectile.update(dt, state.width, state.height)

        target = ship if ship is not None and ship.alive else None
        for saucer in list(state.saucers):
            shot = saucer.update(dt, state.width, state.height, target, state.difficulty.saucer_accuracy)
            if shot is not None:
                state.projectiles.append(shot)
                self.audio.play("saucer_shoot")

        report = resolve_collisions(state)
        if report.rammed_tier is not None:
            self.audio.play(f"asteroid_explode_{report.rammed_tier}")
        if report.player_killed:
            self.handle_player_death(already_destroyed=True)
        for kill in report.kills:
            if kill.kind == KIND_ASTEROID:
                self.audio.play(f"asteroid_explode_{kill.tier}")
            else:
                self.audio.play("saucer_explode")
            self.award_points(kill.base_score)
            self.record_stat(STAT_FOR_KIND[kill.kind])

        state.prune()
        if state.saucers and not self.over:
            self.audio.start_loop("saucer_hum")
        else:
            self.audio.stop_loop("saucer_hum")

        if self.over:
            return

        if state.respawn_timer > 0:
            state.respawn_timer -= dt
            if state.respawn_timer <= 0:
                state.respawn_timer = 0.0
                self.respawn_ship()

        update_saucer_spawning(state, dt)

        if state.field_cleared() and state.respawn_timer <= 0 and state.ship is not None and state.ship.alive:
            self.level_up()

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def award_points(self, base_points: int) -> int:
        """Score a kill with the difficulty multiplier. Returns the points added."""
        before = self.scorer.score
        lives = self.scorer.award(base_points)
        self.state.score = self.scorer.score
        self.state.next_extra_life = self.scorer.next_extra_life
        if lives:
            self.state.lives += lives
            self.audio.play("extra_life")
            LOG.info("Extra life! lives=%d", self.state.lives)
        self._evaluate_achievements()
        return self.scorer.score - before

    def record_stat(self, name: str) -> None:
        self.state.stats[name] += 1
        self._evaluate_achievements()

    def handle_player_death(self, already_destroyed: bool = False) -> None:
        ship = self.state.ship
        if ship is not None and not already_destroyed:
            ship.destroy(force=True)
        self.state.ship = None
        self.state.lives = max(0, self.state.lives - 1)
        self.audio.stop_loop("thrust")
        self.audio.play("player_explode")

        if self.state.lives <= 0:
            self.over = True
            self.audio.stop_all()
            LOG.info("Game over: score=%d level=%d", self.state.score, self.state.level)
        else:
            self.state.respawn_timer = config.RESPAWN_DELAY
            LOG.info("Ship lost, %d lives left", self.state.lives)

    def respawn_ship(self) -> PlayerShip:
        ship = PlayerShip(pos=self.state.center)
        self.state.ship = ship
        LOG.debug("Ship spawned at centre")
        return ship

    def level_up(self) -> None:
        self.state.level += 1
        LOG.info("Level %d", self.state.level)
        spawn_level_asteroids(self.state)
        reset_saucer_timer(self.state)
        self._evaluate_achievements()
