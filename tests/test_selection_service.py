import pytest

from pyroster.config import RosterRequirements, get_requirements, get_strategy, get_weights
from pyroster.selection import (
    PITCHER_BUDGET_RELAXATION,
    build_roster,
    select_batters,
    select_pitchers,
    select_roster,
    split_budget,
)
from pyroster.validation import validate_selection

from tests.factories import batter, pitcher, prefs, ranked_batter, ranked_pitcher


def _ids(entries) -> list[str]:
    return [entry.player_id for entry in entries]


def _league_pool():
    pitchers = [pitcher(f"sp{i}", "S7", strikeouts=200 - i * 5) for i in range(6)]
    pitchers += [pitcher(f"sw{i}", "S5R3", strikeouts=140 - i * 5) for i in range(2)]
    pitchers += [pitcher(f"rp{i}", "R3", innings_pitched=70.0, strikeouts=70 - i * 3) for i in range(3)]
    pitchers += [pitcher(f"cl{i}", "C2", innings_pitched=65.0, strikeouts=75 - i * 3) for i in range(2)]

    positions = [
        "C", "C", "C/1B", "1B", "2B", "3B", "SS", "LF", "CF", "RF", "DH",
        "1B/DH", "LF, RF", "2B SS", "CF", "3B", "SS", "RF",
    ]
    batters = [
        batter(f"b{i}", pos, home_runs=30 - i, hits=150 - i)
        for i, pos in enumerate(positions)
    ]
    return batters, pitchers


def test_split_budget_uses_batter_percent():
    batter_budget, pitcher_budget = split_budget(1000, prefs(batter_budget_percent=55))
    assert batter_budget == pytest.approx(550)
    assert pitcher_budget == pytest.approx(450)


def test_relaxation_is_a_named_default():
    assert PITCHER_BUDGET_RELAXATION == pytest.approx(0.20)


def test_pitcher_quota_priority_over_raw_score():
    pool = [ranked_pitcher(f"s{i}", 100 - i, "S7") for i in range(6)]
    pool += [ranked_pitcher("r1", 10, "R3"), ranked_pitcher("r2", 9, "R4")]
    shape = prefs(target_pitchers=5, target_can_start=2, target_can_relieve=2, target_pure_relievers=2)

    chosen, spent = select_pitchers(pool, shape, budget=1000)

    assert _ids(chosen) == ["s0", "s1", "s2", "r1", "r2"]
    assert spent == 50


def test_quota_critical_pick_uses_relaxed_budget():
    pool = [
        ranked_pitcher("s1", 100, "S7", salary=50),
        ranked_pitcher("s2", 90, "S6", salary=40),
        ranked_pitcher("r1", 80, "R3", salary=25),
    ]
    shape = prefs(target_pitchers=3, target_can_start=1, target_can_relieve=0, target_pure_relievers=1)

    chosen, spent = select_pitchers(pool, shape, budget=100)
    assert _ids(chosen) == ["s1", "s2", "r1"]
    assert spent == 115

    strict, strict_spent = select_pitchers(pool, shape, budget=100, budget_relaxation=0.0)
    assert _ids(strict) == ["s1", "s2"]
    assert strict_spent == 90


def test_relaxed_ceiling_is_never_exceeded():
    pool = [
        ranked_pitcher("s1", 100, "S7", salary=50),
        ranked_pitcher("s2", 90, "S6", salary=40),
        ranked_pitcher("r1", 80, "R3", salary=35),
    ]
    shape = prefs(target_pitchers=3, target_can_start=1, target_can_relieve=0, target_pure_relievers=1)

    chosen, spent = select_pitchers(pool, shape, budget=100)
    assert "r1" not in _ids(chosen)
    assert spent <= 100 * (1 + PITCHER_BUDGET_RELAXATION)


def test_fill_pass_completes_roster_when_quota_cannot_be_met():
    pool = [
        ranked_pitcher("s1", 100, "S7"),
        ranked_pitcher("s2", 90, "S7"),
        ranked_pitcher("s3", 80, "S7"),
        ranked_pitcher("r1", 10, "R3"),
    ]
    shape = prefs(target_pitchers=3, target_can_start=0, target_can_relieve=0, target_pure_relievers=2)

    chosen, _ = select_pitchers(pool, shape, budget=1000)

    assert _ids(chosen) == ["s1", "r1", "s2"]


def test_negative_relaxation_is_a_programming_error():
    with pytest.raises(ValueError):
        select_pitchers([], prefs(), budget=100, budget_relaxation=-0.1)


def test_catchers_are_secured_before_generic_fill():
    pool = [
        ranked_batter("n1", 100, "1B", salary=30),
        ranked_batter("n2", 90, "SS", salary=30),
        ranked_batter("n3", 80, "LF", salary=30),
        ranked_batter("c1", 50, "C", salary=40),
        ranked_batter("c2", 40, "C", salary=40),
        ranked_batter("c3", 30, "C", salary=40),
    ]
    requirements = RosterRequirements(min_catchers=2)

    chosen, spent = select_batters(pool, prefs(target_batters=3), requirements, budget=100)

    assert _ids(chosen) == ["c1", "c2"]
    assert sum(1 for entry in chosen if entry.player.is_catcher) == 2
    assert spent == 80


def test_batters_never_exceed_strict_budget():
    pool = [ranked_batter(f"b{i}", 100 - i, "OF", salary=40) for i in range(5)]
    chosen, spent = select_batters(pool, prefs(target_batters=5), RosterRequirements(min_catchers=0), budget=100)
    assert _ids(chosen) == ["b0", "b1"]
    assert spent == 80


def test_budget_comparison_is_inclusive():
    pool = [ranked_batter("b0", 10, "OF", salary=50), ranked_batter("b1", 9, "OF", salary=50)]
    chosen, spent = select_batters(pool, prefs(target_batters=2), RosterRequirements(min_catchers=0), budget=100)
    assert len(chosen) == 2
    assert spent == 100


def test_position_coverage_pass_when_required():
    pool = [ranked_batter(f"first{i}", 100 - i, "1B") for i in range(5)]
    others = ["C", "2B", "3B", "SS", "LF", "CF", "RF", "DH"]
    pool += [ranked_batter(f"pos_{pos}", 50 - i, pos) for i, pos in enumerate(others)]
    requirements = get_requirements("full_coverage").with_overrides({"min_catchers": 1})

    chosen, _ = select_batters(pool, prefs(target_batters=9), requirements, budget=1000)

    codes = {code for entry in chosen for code in entry.player.position_codes}
    assert codes == {"C", "1B", "2B", "3B", "SS", "LF", "CF", "RF", "DH"}
    assert "first0" in _ids(chosen)


def test_pitcher_overage_comes_out_of_batter_budget():
    pitchers = [ranked_pitcher("s1", 100, "S7", salary=550)]
    batters = [ranked_batter("b1", 50, "1B", salary=250), ranked_batter("b2", 40, "2B", salary=250)]
    shape = prefs(
        batter_budget_percent=50,
        target_pitchers=1,
        target_can_start=1,
        target_can_relieve=0,
        target_pure_relievers=0,
        target_batters=2,
    )
    requirements = RosterRequirements(min_catchers=0, salary_cap=1000)

    result = select_roster(batters, pitchers, shape, requirements)

    assert result.pitcher_spend == 550
    assert result.batter_budget == pytest.approx(450)
    assert _ids(result.batters) == ["b1"]
    assert result.total_spend <= requirements.salary_cap


def test_empty_pools_give_empty_selection():
    result = select_roster([], [], get_strategy("balanced"), get_requirements("standard"))
    assert result.batters == ()
    assert result.pitchers == ()
    assert result.total_spend == 0
    assert result.total_score == 0


def test_selection_is_deterministic():
    batters, pitchers = _league_pool()
    args = (batters, pitchers, get_weights("standard"), get_strategy("balanced"), get_requirements("standard"))

    first = build_roster(*args).selection
    second = build_roster(*args).selection

    assert _ids(first.batters) == _ids(second.batters)
    assert _ids(first.pitchers) == _ids(second.pitchers)
    assert first.total_spend == second.total_spend


@pytest.mark.parametrize("budgets", [(30, 50, 100, 1000)])
def test_budget_increase_never_lowers_total_score(budgets):
    pitchers = [ranked_pitcher(f"p{i}", 100 - i * 7, "S7", salary=10) for i in range(8)]
    batters = [ranked_batter(f"b{i}", 80 - i * 3, "OF", salary=10) for i in range(10)]
    shape = prefs(
        target_pitchers=6,
        target_can_start=0,
        target_can_relieve=0,
        target_pure_relievers=0,
        target_batters=8,
    )
    requirements = RosterRequirements(min_catchers=0)

    pitcher_totals = [
        sum(entry.score for entry in select_pitchers(pitchers, shape, budget)[0]) for budget in budgets
    ]
    batter_totals = [
        sum(entry.score for entry in select_batters(batters, shape, requirements, budget)[0]) for budget in budgets
    ]

    assert pitcher_totals == sorted(pitcher_totals)
    assert batter_totals == sorted(batter_totals)


def test_feasible_pool_builds_a_valid_roster():
    batters, pitchers = _league_pool()

    for name in ("standard", "full_coverage"):
        requirements = get_requirements(name)
        build = build_roster(batters, pitchers, get_weights("standard"), get_strategy("balanced"), requirements)
        assert build.report.passed, build.report.deficits
        assert validate_selection(build.selection, requirements).passed


def test_pure_reliever_shortage_is_reported_not_raised():
    pitchers = [pitcher(f"sp{i}", "S7") for i in range(6)]
    pitchers += [pitcher("rp1", "R3"), pitcher("rp2", "R2")]
    batters, _ = _league_pool()
    shape = get_strategy("balanced").with_overrides({"target_can_start": 5, "target_pure_relievers": 4})

    build = build_roster(batters, pitchers, get_weights("standard"), shape, get_requirements("standard"))

    assert not build.report.passed
    deficit = build.report.deficit_for("min_pure_relievers")
    assert deficit is not None
    assert deficit.actual <= 2
    assert deficit.shortfall == 4 - deficit.actual
