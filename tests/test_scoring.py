from __future__ import annotations

from chefs_challenge.core.scoring import calculate_bonus, record_high_score


def test_bonus_formula() -> None:
    assert calculate_bonus(20, 1) == 300
    assert calculate_bonus(0, 5) == 500
    assert calculate_bonus(7, 3) == 370


def test_bonus_floors_fractional_time() -> None:
    assert calculate_bonus(9.99, 1) == 190


def test_bonus_is_monotonic() -> None:
    for level in range(1, 6):
        for t in range(0, 20):
            assert calculate_bonus(t + 1, level) >= calculate_bonus(t, level)
            assert calculate_bonus(t, level + 1) >= calculate_bonus(t, level)


def test_record_high_score_sorts_and_caps() -> None:
    scores: list[int] = []
    for s in [100, 500, 0, 300, 900, 200]:
        scores = record_high_score(scores, s)
    assert scores == [900, 500, 300, 200, 100]


def test_record_high_score_keeps_duplicates_and_does_not_mutate_input() -> None:
    scores = [300, 300]
    out = record_high_score(scores, 300, limit=5)
    assert out == [300, 300, 300]
    assert scores == [300, 300]
