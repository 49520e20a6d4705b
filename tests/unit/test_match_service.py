from __future__ import annotations

import pytest

from lottomatch.config import MatchConfig
from lottomatch.engine.matcher import TargetParseError
from lottomatch.service import MatchService


@pytest.fixture
def picks_path(tmp_path):
    path = tmp_path / "picks.txt"
    path.write_text("1 2 3 4 5\n5 6 7 8 9\n1 2 3 89 90\n1 2 3\n", encoding="utf-8")
    return path


def test_match_returns_report_payload(picks_path):
    service = MatchService(MatchConfig(picks_path=str(picks_path), workers=2))

    result = service.match([1, 2, 3, 4, 90])

    assert result["winners"] == [
        {"matches": 5, "winners": 0},
        {"matches": 4, "winners": 2},
        {"matches": 3, "winners": 0},
        {"matches": 2, "winners": 0},
    ]
    assert result["meta"]["pool_size"] == 3
    assert result["meta"]["elapsed_ms"] >= 0


def test_match_accepts_text_entry_with_sorted_representation(picks_path):
    service = MatchService(MatchConfig(representation="sorted"), picks_path=picks_path)

    result = service.match("9 8 7 6 5")

    assert result["winners"][0] == {"matches": 5, "winners": 1}


def test_invalid_target_raises(picks_path):
    service = MatchService(MatchConfig(picks_path=str(picks_path)))

    with pytest.raises(TargetParseError):
        service.match([1, 2, 3, 4, 91])


def test_pool_status(picks_path):
    service = MatchService(MatchConfig(picks_path=str(picks_path), workers=3))

    status = service.pool_status()

    assert status["accepted"] == 3
    assert status["rejected"] == 1
    assert status["representation"] == "bitset"
    assert status["workers"] == 3
    assert status["picks_path"] == str(picks_path)


def test_missing_picks_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        MatchService(MatchConfig(picks_path=str(tmp_path / "missing.txt")))
