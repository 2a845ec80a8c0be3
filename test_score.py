"""Score tracking and high-score table insertion."""

from score import ScoreTracker, insert_high_score


def test_extra_life_at_threshold():
    tracker = ScoreTracker()
    assert tracker.add(9_990) == 0
    assert tracker.add(20) == 1
    assert tracker.score == 10_010
    assert tracker.next_extra_life == 20_000


def test_single_award_can_cross_several_thresholds():
    tracker = ScoreTracker()
    assert tracker.add(25_000) == 2
    assert tracker.next_extra_life == 30_000


def test_difficulty_multiplier_rounds_half_up():
    assert ScoreTracker(multiplier=0.75).scaled(50) == 38
    assert ScoreTracker(multiplier=1.5).scaled(20) == 30
    assert ScoreTracker(multiplier=0.75).scaled(20) == 15

    tracker = ScoreTracker(multiplier=0.75)
    tracker.award(50)
    assert tracker.score == 38


def test_non_positive_points_are_ignored():
    tracker = ScoreTracker()
    assert tracker.add(0) == 0
    assert tracker.add(-10) == 0
    assert tracker.score == 0


def _table(*scores):
    return [{"name": "X", "score": s} for s in scores]


def test_insert_into_empty_table():
    entries = []
    assert insert_high_score(entries, "ACE", 500) == 0
    assert entries == [{"name": "ACE", "score": 500}]


def test_zero_score_never_qualifies():
    entries = []
    assert insert_high_score(entries, "ACE", 0) is None
    assert entries == []


def test_insert_keeps_descending_order():
    entries = _table(900, 500, 100)
    assert insert_high_score(entries, "ACE", 600) == 1
    assert [e["score"] for e in entries] == [900, 600, 500, 100]


def test_ties_go_after_existing_entries():
    entries = _table(900, 500)
    assert insert_high_score(entries, "ACE", 500) == 2
    assert entries[2]["name"] == "ACE"


def test_low_score_appends_when_not_full():
    entries = _table(900, 500)
    assert insert_high_score(entries, "ACE", 10, max_entries=3) == 2


def test_full_table_rejects_low_score():
    entries = _table(*range(1000, 0, -100))
    assert len(entries) == 10
    assert insert_high_score(entries, "ACE", 50) is None
    assert len(entries) == 10


def test_full_table_drops_lowest():
    entries = _table(*range(1000, 0, -100))
    assert insert_high_score(entries, "ACE", 550) == 5
    assert len(entries) == 10
    assert entries[-1]["score"] == 200
