from __future__ import annotations

import pytest

from lottomatch.engine.matcher import Tally, generate_match_report, tally_to_frame


def test_tally_fills_every_level_with_zero():
    tally = Tally(min_matches=2, number_of_picks=5, counts={4: 2})

    assert tally.counts == {5: 0, 4: 2, 3: 0, 2: 0}
    assert list(tally.counts) == [5, 4, 3, 2]
    assert tally.levels() == [5, 4, 3, 2]
    assert tally.winners(3) == 0


def test_tally_counts_are_read_only():
    source = {4: 2}
    tally = Tally(min_matches=2, number_of_picks=5, counts=source)

    with pytest.raises(TypeError):
        tally.counts[5] += 1
    source[4] = 99

    assert tally.winners(4) == 2
    assert tally.total_winners == 2


def test_tally_rejects_levels_outside_range():
    with pytest.raises(ValueError, match="outside"):
        Tally(min_matches=2, number_of_picks=5, counts={1: 3})
    with pytest.raises(ValueError):
        Tally(min_matches=6, number_of_picks=5)


def test_partials_merge_commutatively():
    partials = [{5: 1, 3: 2}, {3: 4}, {}, {2: 7, 5: 1}]

    forward = Tally.from_partials(partials, min_matches=2, number_of_picks=5)
    backward = Tally.from_partials(list(reversed(partials)), min_matches=2, number_of_picks=5)

    assert forward == backward
    assert forward.counts == {5: 2, 4: 0, 3: 6, 2: 7}
    assert forward.total_winners == 15


def test_tally_merge():
    left = Tally(min_matches=2, number_of_picks=5, counts={5: 1, 2: 3})
    right = Tally(min_matches=2, number_of_picks=5, counts={2: 1, 4: 1})

    assert left.merge(right) == right.merge(left)
    assert left.merge(right).counts == {5: 1, 4: 1, 3: 0, 2: 4}

    with pytest.raises(ValueError, match="different match levels"):
        left.merge(Tally(min_matches=3, number_of_picks=5))


def test_report_lists_levels_best_first_including_zero():
    tally = Tally(min_matches=2, number_of_picks=5, counts={4: 2})

    report = generate_match_report(tally, elapsed_ms=12.34567, pool_size=3)

    assert report.json_report["winners"] == [
        {"matches": 5, "winners": 0},
        {"matches": 4, "winners": 2},
        {"matches": 3, "winners": 0},
        {"matches": 2, "winners": 0},
    ]
    assert report.json_report["meta"] == {
        "number_of_picks": 5,
        "min_matches": 2,
        "total_winners": 2,
        "pool_size": 3,
        "elapsed_ms": 12.346,
    }


def test_text_report_table():
    tally = Tally(min_matches=3, number_of_picks=5, counts={5: 1, 3: 10})

    lines = generate_match_report(tally).text_report.splitlines()

    assert lines[0] == "Numbers matching\tWinners"
    assert lines[1:] == [
        "5               \t1",
        "4               \t0",
        "3               \t10",
    ]


def test_report_meta_without_timing():
    meta = generate_match_report(Tally(min_matches=1, number_of_picks=2)).json_report["meta"]

    assert meta["elapsed_ms"] is None
    assert meta["pool_size"] is None


def test_tally_to_frame():
    frame = tally_to_frame(Tally(min_matches=2, number_of_picks=4, counts={2: 5, 4: 1}))

    assert frame.columns.tolist() == ["matches", "winners"]
    assert frame["matches"].tolist() == [4, 3, 2]
    assert frame["winners"].tolist() == [1, 0, 5]
