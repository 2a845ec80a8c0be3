"""Asteroid shape, movement and split tests."""

import math

import pytest

import config
from asteroid import LARGE, MEDIUM, SMALL, Asteroid, generate_shape
from utils import Vec2


def test_large_splits_into_two_medium():
    parent = Asteroid.create(Vec2(100, 100), LARGE)
    children = parent.split()
    assert not parent.alive
    assert len(children) == 2
    assert all(c.tier is MEDIUM for c in children)
    assert all(c.radius == 20 for c in children)
    assert all(len(c.shape) == 8 for c in children)


def test_medium_splits_into_two_small():
    children = Asteroid.create(Vec2(100, 100), MEDIUM).split()
    assert [c.tier for c in children] == [SMALL, SMALL]


def test_small_leaves_nothing():
    rock = Asteroid.create(Vec2(100, 100), SMALL)
    assert rock.split() == []
    assert not rock.alive


def test_dead_asteroid_does_not_split():
    rock = Asteroid.create(Vec2(100, 100), LARGE)
    rock.destroy()
    assert rock.split() == []


def test_split_children_start_at_parent_position():
    parent = Asteroid.create(Vec2(321, 123), LARGE, velocity=Vec2(10, 0))
    for child in parent.split():
        assert (child.pos.x, child.pos.y) == (321, 123)
        assert child.pos is not parent.pos


def test_shape_vertices_within_jaggedness_band():
    radius = 40.0
    shape = generate_shape(radius, 10)
    assert len(shape) == 10
    low = radius * (1 - config.ASTEROID_JAGGEDNESS)
    for x, y in shape:
        assert low - 1e-9 <= math.hypot(x, y) <= radius + 1e-9


@pytest.mark.parametrize("tier", [LARGE, MEDIUM, SMALL])
def test_fresh_velocity_scales_with_tier(tier):
    rock = Asteroid.create(Vec2(0, 0), tier, speed_multiplier=1.2)
    expected = config.ASTEROID_BASE_SPEED * 1.2 * tier.speed_mult
    assert math.isclose(rock.vel.length(), expected)


def test_spin_is_bounded():
    for _ in range(20):
        rock = Asteroid.create(Vec2(0, 0))
        assert abs(rock.spin) <= math.radians(config.ASTEROID_MAX_SPIN) + 1e-9


def test_asteroid_wraps_and_rotates():
    rock = Asteroid(pos=Vec2(799.0, 400.0), vel=Vec2(100.0, 0.0), spin=1.0)
    shape = rock.shape
    rock.update(0.05, 800, 800)
    assert rock.pos.x == 0.0
    assert math.isclose(rock.rotation, 0.05)
    assert rock.shape == shape


def test_score_values():
    assert (LARGE.score, MEDIUM.score, SMALL.score) == (20, 50, 100)
