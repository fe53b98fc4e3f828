import math

import pytest

from pyroster.config import BatterWeights, PitcherWeights
from pyroster.models import BatterRecord, PitcherRecord
from pyroster.ranking import rank_batter, rank_batters, rank_pitcher, rank_pitchers, sort_ranked
from pyroster.valuation import value_batter, value_pitcher, value_pitchers

from tests.factories import prefs, ranked_pitcher


def _hitter(**extra) -> BatterRecord:
    fields = dict(
        player_id="b1",
        name="Table Setter",
        salary=0,
        at_bats=400,
        hits=120,
        doubles=20,
        triples=5,
        home_runs=25,
        walks=50,
        hit_by_pitch=5,
        stolen_bases=20,
        plate_appearances=460,
        games=100,
        defense="ss-2e10",
    )
    fields.update(extra)
    return BatterRecord(**fields)


def _batter_score(player: BatterRecord, **sliders) -> float:
    return rank_batter(player, value_batter(player, BatterWeights()), prefs(**sliders))


def test_batter_base_score_is_value_share():
    player = _hitter()
    valuation = value_batter(player, BatterWeights())
    assert _batter_score(player) == pytest.approx(valuation.value * 0.3)


@pytest.mark.parametrize(
    "slider, expected",
    [
        ("speed", (20 * 3 + 5 * 2) / 100 * 50),
        ("power", (25 * 4 + 20 * 2) / 100 * 50),
        ("defense", ((6 - 2) * 2 - 10 * 0.5) * 10),
        ("on_base", (50 + 5) / 100 * 30),
    ],
)
def test_batter_category_terms(slider, expected):
    player = _hitter()
    assert _batter_score(player, **{slider: 100}) - _batter_score(player) == pytest.approx(expected)


def test_batter_slider_scales_linearly():
    player = _hitter()
    full = _batter_score(player, power=100) - _batter_score(player)
    half = _batter_score(player, power=50) - _batter_score(player)
    assert half == pytest.approx(full / 2)


def test_batter_salary_value_term():
    player = _hitter(salary=2_000_000)
    valuation = value_batter(player, BatterWeights())
    assert _batter_score(player) == pytest.approx(valuation.value * 0.3 + valuation.per_salary * 2)


def test_batter_without_games_scores_finite():
    idle = BatterRecord(player_id="b0", name="Bench", salary=0, stolen_bases=3, defense="dh")
    score = _batter_score(idle, speed=100, power=100, defense=100, on_base=100)
    assert math.isfinite(score)
    # only the value share of 3 steals survives; per-game terms need games
    assert score == pytest.approx(3 * 2 * 0.3)


def _arm(endurance: str, **extra) -> PitcherRecord:
    fields = dict(
        player_id="p1",
        name="Arm",
        salary=0,
        innings_pitched=100.0,
        strikeouts=100,
        walks=30,
        hits_allowed=70,
        endurance=endurance,
    )
    fields.update(extra)
    return PitcherRecord(**fields)


def _pitcher_score(player: PitcherRecord, **sliders) -> float:
    return rank_pitcher(player, value_pitcher(player, PitcherWeights()), prefs(**sliders))


def test_reliever_score():
    # value 0, relief 80, strikeout rate 1.0 * 100, whip 1.0 -> 50
    assert _pitcher_score(_arm("R3"), reliever=100, strikeout=100) == pytest.approx(230.0)


def test_closer_adds_closer_and_relief_terms():
    assert _pitcher_score(_arm("C2"), reliever=100, closer=50, strikeout=100) == pytest.approx(260.0)


def test_starter_score_includes_per_start_value():
    starter = _arm("S7", strikeouts=120, games_started=20)
    # value 20 -> 6.0, starter 100, per start 1.0 * 5, whip 1.0 -> 50
    assert _pitcher_score(starter, starter=100) == pytest.approx(161.0)


def test_swingman_collects_both_role_terms():
    swing = _pitcher_score(_arm("S5R3"), starter=100, reliever=100)
    starter_only = _pitcher_score(_arm("S5"), starter=100, reliever=100)
    assert swing - starter_only == pytest.approx(80.0)


def test_efficiency_term_is_capped():
    wild = _arm("R1", walks=150, hits_allowed=150)
    # whip 3.0 is capped at 2.0, so efficiency contributes nothing
    assert _pitcher_score(wild) == pytest.approx(value_pitcher(wild, PitcherWeights()).value * 0.3)


def test_pitcher_without_innings_scores_finite():
    idle = PitcherRecord(player_id="p0", name="Call Up", salary=0, strikeouts=3, endurance="R1")
    score = _pitcher_score(idle, reliever=100, strikeout=100)
    assert math.isfinite(score)
    assert score == pytest.approx(3 * 0.3 + 80)


def test_rank_batters_keeps_input_order():
    pool = [_hitter(player_id="a"), _hitter(player_id="b", home_runs=5)]
    ranked = rank_batters(pool, BatterWeights(), prefs(power=100))
    assert [entry.player_id for entry in ranked] == ["a", "b"]
    assert ranked[0].score > ranked[1].score


def test_sort_ranked_is_stable_for_ties():
    entries = [
        ranked_pitcher("first", 50.0),
        ranked_pitcher("top", 90.0),
        ranked_pitcher("second", 50.0),
        ranked_pitcher("third", 50.0),
    ]
    ordered = sort_ranked(entries)
    assert [entry.player_id for entry in ordered] == ["top", "first", "second", "third"]


def test_unrated_fielding_adds_no_defense_term():
    no_card = _hitter(defense=None)
    unrated = _hitter(defense="1b")
    worst_rated = _hitter(defense="1b-5e0")

    baseline = _batter_score(no_card)
    assert _batter_score(no_card, defense=100) == pytest.approx(baseline)
    assert _batter_score(unrated, defense=100) == pytest.approx(baseline)
    assert _batter_score(worst_rated, defense=100) - baseline == pytest.approx(20.0)


def test_rank_pitchers_carries_pool_valuations():
    staff = [_arm("S7", player_id="a", strikeouts=150), _arm("R3", player_id="b")]
    ranked = rank_pitchers(staff, PitcherWeights(), prefs())
    expected = value_pitchers(staff, PitcherWeights())
    assert [(entry.player, entry.valuation) for entry in ranked] == expected
