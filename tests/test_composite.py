import pytest
from glicko2py import Glicko2, Rating, composite, new_player, update, update_team
from glicko2py.core.errors import InvalidArgumentError


def test_composite_mean():
    ratings = [Rating(1.0, 0.5, 0.05), Rating(-0.5, 1.5, 0.07)]
    assert tuple(composite(ratings)) == pytest.approx((0.25, 1.0, 0.06))


def test_composite_single():
    rating = Rating(0.7, 0.3, 0.04)
    assert composite([rating]) == rating


def test_composite_identical():
    rating = Rating(-1.3, 0.9, 0.061)
    assert composite([rating, rating]) == rating


def test_composite_empty():
    with pytest.raises(InvalidArgumentError):
        composite([])


def test_composite_rejects_non_ratings():
    with pytest.raises(InvalidArgumentError):
        composite([new_player(), (0.0, 2.0, 0.06)])


def test_mirrored_teams():
    team_a = [Rating(0.5, 2.0, 0.06), Rating(0.0, 2.0, 0.06), Rating(-0.2, 2.0, 0.06)]
    team_b = [Rating(-r.value, r.deviation, r.volatility) for r in team_a]

    new_a = update_team(team_a, [(team_b, 1.0)], tau=0.5)
    new_b = update_team(team_b, [(team_a, 0.0)], tau=0.5)

    assert len(new_a) == len(team_a)
    for before, after_a, after_b in zip(team_a, new_a, new_b):
        assert after_a.value == pytest.approx(-after_b.value, abs=1e-12)
        assert after_a.deviation == pytest.approx(after_b.deviation, abs=1e-12)
        assert after_a.value > before.value
        assert after_a.deviation < before.deviation
        assert after_a.volatility < before.volatility
        assert after_b.deviation < before.deviation
        assert after_b.volatility < before.volatility


def test_update_team_matches_member_updates():
    team = [Rating(0.1 * i, 1.0, 0.06) for i in range(4)]
    opponents = [new_player(), Rating(0.4, 0.7, 0.05)]
    updated = Glicko2().update_team(team, [(opponents, 0.5)])
    expected = [update(member, [(composite(opponents), 0.5)]) for member in team]
    assert updated == expected


def test_update_team_no_games():
    team = [Rating(0.3, 1.0, 0.06), Rating(-0.3, 1.2, 0.05)]
    updated = update_team(team, [])
    for before, after in zip(team, updated):
        assert after.value == before.value
        assert after.volatility == before.volatility
        assert after.deviation > before.deviation


def test_update_team_empty_opponent():
    with pytest.raises(InvalidArgumentError):
        update_team([new_player()], [([], 1.0)])
