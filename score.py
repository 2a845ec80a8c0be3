"""Score tracking, extra-life thresholds, and high-score table handling."""

from typing import Optional

import config
from utils import round_half_up


class ScoreTracker:
    """Tracks score and extra-life thresholds for a single run."""

    def __init__(self, multiplier: float = 1.0, extra_life_every: int = config.EXTRA_LIFE_SCORE):
        self.score: int = 0
        self.multiplier: float = multiplier
        self.extra_life_every: int = extra_life_every
        self.next_extra_life: int = extra_life_every

    def scaled(self, base_points: int) -> int:
        """Apply the difficulty multiplier (half rounds up)."""
        return round_half_up(base_points * self.multiplier)

    def add(self, points: int) -> int:
        """Add already-scaled points. Returns the number of extra lives earned."""
        if points <= 0:
            return 0
        self.score += int(points)
        lives = 0
        # One large award can cross several thresholds.
        while self.score >= self.next_extra_life:
            lives += 1
            self.next_extra_life += self.extra_life_every
        return lives

    def award(self, base_points: int) -> int:
        return self.add(self.scaled(base_points))


def insert_high_score(entries: list[dict], name: str, score: int,
                      max_entries: int = config.MAX_HIGH_SCORES) -> Optional[int]:
    """Insert a score into a descending table in place.

    Returns the index the entry landed at, or None when the score does not
    qualify (non-positive, or lower than every entry of a full table).
    Ties go after existing entries.
    """
    if score <= 0:
        return None

    index = None
    for i, entry in enumerate(entries):
        if score > int(entry.get("score", 0)):
            index = i
            break
    if index is None:
        if len(entries) >= max_entries:
            return None
        index = len(entries)

    entries.insert(index, {"name": name, "score": int(score)})
    del entries[max_entries:]
    return index
