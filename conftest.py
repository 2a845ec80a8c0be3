"""Shared fixtures: recording audio, in-memory store, seeded randomness."""

import random

import pytest

from audio import AudioSink
from controls import InputState
from storage import PersistenceStore


class RecordingAudio(AudioSink):
    """Audio sink that remembers what it was asked to do."""

    def __init__(self):
        super().__init__()
        self.played: list[str] = []
        self.loops: set[str] = set()

    def play(self, name):
        if not self.muted:
            self.played.append(name)

    def start_loop(self, name):
        if not self.muted:
            self.loops.add(name)

    def stop_loop(self, name):
        self.loops.discard(name)

    def stop_all(self):
        self.loops.clear()


def _tap(input_state: InputState, action: str) -> None:
    input_state.press(action)
    input_state.release(action)


@pytest.fixture(autouse=True)
def seeded_random():
    random.seed(1234)


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def store():
    return PersistenceStore(path=None)


@pytest.fixture
def input_state():
    return InputState()


@pytest.fixture
def tap():
    """Press and release a single-press action."""
    return _tap
