"""Saucer spawning, despawn and aimed fire."""

import math

from enemy import STANDARD, Saucer
from player import PlayerShip
from projectile import OWNER_ENEMY
from utils import Vec2


def test_spawn_just_off_a_side_edge():
    for _ in range(20):
        s = Saucer.spawn(800, 600)
        r = STANDARD.radius
        assert s.pos.x in (-r, 800 + r)
        assert r <= s.pos.y <= 600 - r
        if s.pos.x < 0:
            assert s.vel.x == STANDARD.speed
        else:
            assert s.vel.x == -STANDARD.speed
        assert s.vel.y == 0
        lo, hi = STANDARD.fire_interval * 0.5, STANDARD.fire_interval * 1.5
        assert lo <= s.fire_timer <= hi


def test_despawns_after_leaving_far_edge():
    s = Saucer(pos=Vec2(829.0, 300.0), vel=Vec2(100.0, 0.0), fire_timer=10.0)
    s.update(0.01, 800, 600)
    assert s.alive
    s.update(0.05, 800, 600)
    assert not s.alive


def test_saucer_does_not_wrap():
    s = Saucer(pos=Vec2(-20.0, 300.0), vel=Vec2(-100.0, 0.0), fire_timer=10.0)
    s.update(0.01, 800, 600)
    assert s.pos.x < 0


def test_perfect_accuracy_aims_at_target():
    s = Saucer(pos=Vec2(100.0, 100.0), vel=Vec2(100.0, 0.0))
    target = PlayerShip(pos=Vec2(200.0, 200.0))
    shot = s.fire(target, accuracy=1.0)
    assert shot.owner == OWNER_ENEMY
    assert math.isclose(math.atan2(shot.vel.y, shot.vel.x), math.pi / 4)
    assert math.isclose(shot.vel.length(), STANDARD.bullet_speed)


def test_aim_error_bounded_by_accuracy():
    s = Saucer(pos=Vec2(0.0, 0.0))
    target = PlayerShip(pos=Vec2(100.0, 0.0))
    for _ in range(50):
        shot = s.fire(target, accuracy=0.8)
        angle = math.atan2(shot.vel.y, shot.vel.x)
        assert abs(angle) <= 0.2 * math.pi + 1e-9


def test_no_shot_without_target_but_timer_resets():
    s = Saucer(pos=Vec2(400.0, 300.0), vel=Vec2(100.0, 0.0), fire_timer=0.01)
    assert s.update(0.05, 800, 600, target=None) is None
    assert s.fire_timer > 0


def test_timer_expiry_fires_at_live_target():
    s = Saucer(pos=Vec2(400.0, 300.0), vel=Vec2(100.0, 0.0), fire_timer=0.01)
    target = PlayerShip(pos=Vec2(100.0, 100.0))
    shot = s.update(0.05, 800, 600, target=target, accuracy=0.9)
    assert shot is not None
    lo, hi = STANDARD.fire_interval * 0.8, STANDARD.fire_interval * 1.2
    assert lo <= s.fire_timer <= hi


def test_dead_target_is_ignored():
    s = Saucer(pos=Vec2(400.0, 300.0))
    target = PlayerShip(pos=Vec2(100.0, 100.0))
    target.destroy(force=True)
    assert s.fire(target, 1.0) is None
