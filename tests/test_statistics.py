import pytest

from application.services.statistics import PERFECT_KDA, derive_stats, kda, most_common_role, win_rate
from domain.entities import NOT_AVAILABLE, DerivedStats, MatchHistoryBundle, MatchRecord


def _record(win: bool, lane: str, kills: int, deaths: int, assists: int) -> MatchRecord:
    return MatchRecord(
        queue_id=420,
        game_type="MATCHED_GAME",
        champion_id=103,
        kills=kills,
        deaths=deaths,
        assists=assists,
        minions=190,
        gold=11000,
        win=win,
        caused_early_surrender=False,
        lane=lane,
        spell1_id=4,
        spell2_id=14,
        items=(1, 2, 3, 4, 5, 6, None),
    )


def test_win_rate_counts_true_entries():
    assert win_rate(["true", "true", "false", "false"]) == "50%"


@pytest.mark.parametrize(
    "column, expected",
    [
        (["true", "false", "true"], "67%"),
        (["true"] + ["false"] * 7, "13%"),  # 12.5 rounds half up
        (["false", "false"], "0%"),
        ([True, False, True, True], "75%"),
        ("true,false,true", "67%"),
        (["TRUE", "False"], "50%"),
    ],
)
def test_win_rate_rounds_to_whole_percent(column, expected):
    assert win_rate(column) == expected


@pytest.mark.parametrize("column", [None, [], ""])
def test_win_rate_without_games_is_not_available(column):
    assert win_rate(column) == NOT_AVAILABLE


def test_most_common_role_reports_every_tie_in_first_seen_order():
    lanes = ["TOP", "jungle", "Top", "JUNGLE", "MIDDLE"]
    assert most_common_role(lanes) == "Top/Jungle"


def test_most_common_role_ignores_sentinels():
    assert most_common_role(["NONE", "", None, "BOTTOM", "none"]) == "Bottom"
    assert most_common_role("MIDDLE,NONE,MIDDLE,TOP") == "Middle"


@pytest.mark.parametrize("column", [None, [], ["NONE", "NONE"], [""]])
def test_most_common_role_without_roles_is_not_available(column):
    assert most_common_role(column) == NOT_AVAILABLE


def test_kda_two_decimals():
    assert kda([4], [6], [2]) == "5.00 KDA"
    assert kda([1, 2], [0, 1], [3, 0]) == "1.33 KDA"


def test_kda_without_deaths_is_perfect():
    assert kda([3, 0, 7], [1, 1, 1], [0, 0, 0]) == PERFECT_KDA
    assert kda([], [], []) == PERFECT_KDA


def test_kda_accepts_comma_joined_columns():
    assert kda("3,0,7", ["1", "1,1"], "2,2") == "3.25 KDA"


def test_kda_with_missing_column_is_not_available():
    assert kda(None, [1], [1]) == NOT_AVAILABLE
    assert kda([1], None, [1]) == NOT_AVAILABLE
    assert kda([1], [1], None) == NOT_AVAILABLE


def test_derive_stats_from_bundle():
    bundle = MatchHistoryBundle.from_records(
        [
            _record(True, "MIDDLE", 5, 2, 3),
            _record(True, "MIDDLE", 3, 1, 4),
            _record(False, "TOP", 2, 1, 5),
            _record(True, "NONE", 0, 0, 2),
        ]
    )
    stats = derive_stats(bundle)
    assert stats == DerivedStats(win_rate="75%", roles="Middle", kda="6.00 KDA")


def test_derive_stats_without_history():
    assert derive_stats(None) == DerivedStats(NOT_AVAILABLE, NOT_AVAILABLE, NOT_AVAILABLE)
