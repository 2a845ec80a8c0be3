"""Quick check that the game core imports and wires together."""

import importlib

import pytest

CORE_MODULES = [
    "achievements", "asteroid", "audio", "collisions", "config", "controller",
    "controls", "enemy", "fsm", "level", "logic", "menu", "physics", "player",
    "projectile", "score", "session", "states", "storage", "utils",
]


@pytest.mark.parametrize("name", CORE_MODULES)
def test_module_imports(name):
    assert importlib.import_module(name) is not None


def test_every_key_maps_to_known_actions():
    from controls import KEY_ACTIONS, SINGLE_PRESS_ACTIONS

    actions = {a for group in KEY_ACTIONS.values() for a in group}
    assert SINGLE_PRESS_ACTIONS <= actions
    assert {"thrust", "rotate_left", "rotate_right", "fire"} <= actions


def test_sound_names_cover_gameplay_events():
    from audio import SOUND_FILES

    for name in ("player_shoot", "saucer_shoot", "thrust", "saucer_hum", "player_explode",
                 "saucer_explode", "extra_life", "hyperspace", "asteroid_explode_large",
                 "asteroid_explode_medium", "asteroid_explode_small"):
        assert name in SOUND_FILES
