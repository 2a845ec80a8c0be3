"""Utility functions and math helpers."""

import math
import random
from dataclasses import dataclass


@dataclass
class Vec2:
    """2D Vector class."""
    x: float
    y: float

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, s: float):
        return Vec2(self.x * s, self.y * s)

    def __rmul__(self, s: float):
        return self.__mul__(s)

    def __neg__(self):
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def copy(self) -> "Vec2":
        return Vec2(self.x, self.y)

    @staticmethod
    def from_angle(angle: float, length: float = 1.0) -> "Vec2":
        return Vec2(math.cos(angle) * length, math.sin(angle) * length)


def deg_to_rad(degrees: float) -> float:
    return degrees * (math.pi / 180.0)


def random_range(lo: float, hi: float) -> float:
    """Uniform sample in [lo, hi)."""
    return random.random() * (hi - lo) + lo


def wrap_position(p: Vec2, width: float, height: float) -> None:
    """Fold a position that crossed a screen edge back onto the opposite edge.

    Exact-edge wrap: x < 0 jumps to width, x > width jumps to 0 (same for y).
    """
    if p.x < 0:
        p.x = width
    elif p.x > width:
        p.x = 0.0
    if p.y < 0:
        p.y = height
    elif p.y > height:
        p.y = 0.0


def random_screen_edge(width: float, height: float, margin: float = 0.0) -> Vec2:
    """Pick a random point on one of the four screen edges, pushed out by margin."""
    edge = random.randint(0, 3)
    if edge == 0:  # top
        return Vec2(random_range(0, width), -margin)
    if edge == 1:  # right
        return Vec2(width + margin, random_range(0, height))
    if edge == 2:  # bottom
        return Vec2(random_range(0, width), height + margin)
    return Vec2(-margin, random_range(0, height))  # left


def dist(a: Vec2, b: Vec2) -> float:
    """Calculate distance between two positions."""
    return (a - b).length()


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))
