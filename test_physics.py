"""Entity integration, wrapping and collision tests."""

import math

from physics import Entity, check_circle_collision
from projectile import OWNER_ENEMY, Projectile, spawn_projectile
from utils import Vec2, random_screen_edge, round_half_up, wrap_position


def test_wrap_past_right_edge_goes_to_zero():
    p = Vec2(801.0, 400.0)
    wrap_position(p, 800, 800)
    assert p.x == 0.0
    assert p.y == 400.0


def test_wrap_past_left_edge_goes_to_width():
    p = Vec2(-1.0, 400.0)
    wrap_position(p, 800, 600)
    assert p.x == 800

    q = Vec2(10.0, -0.5)
    wrap_position(q, 800, 600)
    assert q.y == 600


def test_touching_circles_do_not_collide():
    assert not check_circle_collision(Vec2(0, 0), 5, Vec2(10, 0), 5)
    assert check_circle_collision(Vec2(0, 0), 5, Vec2(9.9, 0), 5)


def test_destroyed_entity_never_collides():
    a = Entity(pos=Vec2(0, 0), radius=10)
    b = Entity(pos=Vec2(1, 1), radius=10)
    assert a.collides_with(b)
    assert a.destroy() is True
    assert a.destroy() is False
    assert not a.collides_with(b)
    assert not b.collides_with(a)


def test_plain_entity_does_not_wrap():
    e = Entity(pos=Vec2(799.0, 10.0), vel=Vec2(100.0, 0.0))
    e.update(0.05, 800, 800)
    assert e.pos.x > 800


def test_projectile_expires_after_lifetime():
    p = Projectile(pos=Vec2(400, 400), vel=Vec2(0, 0))
    for _ in range(23):
        p.update(0.05, 800, 800)
    assert p.alive
    p.update(0.06, 800, 800)
    assert not p.alive


def test_projectile_dies_leaving_playfield():
    p = spawn_projectile(Vec2(795, 400), 0.0, 500.0, OWNER_ENEMY)
    assert not p.is_player
    p.update(0.05, 800, 800)
    assert not p.alive


def test_random_screen_edge_is_outside_by_margin():
    for _ in range(50):
        pos = random_screen_edge(800, 600, 40)
        on_x_edge = pos.x in (-40, 840)
        on_y_edge = pos.y in (-40, 640)
        assert on_x_edge or on_y_edge


def test_round_half_up():
    assert round_half_up(37.5) == 38
    assert round_half_up(2.5) == 3
    assert round_half_up(30.0) == 30
    assert round_half_up(0.49) == 0


def test_vec_from_angle():
    v = Vec2.from_angle(math.pi / 2, 2.0)
    assert abs(v.x) < 1e-9
    assert math.isclose(v.y, 2.0)
