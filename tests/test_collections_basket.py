import pytest

from kata.lessons.collections_basket import (
    Fruit,
    Team,
    build_scores_table,
    default_fruit_basket,
    fruit_basket,
)


def test_at_least_three_types_of_fruits():
    assert len(default_fruit_basket()) >= 3


def test_at_least_five_fruits():
    assert sum(default_fruit_basket().values()) >= 5


def _given_basket():
    return {Fruit.APPLE: 4, Fruit.MANGO: 2, Fruit.LYCHEE: 5}


def test_given_fruits_are_not_modified():
    basket = _given_basket()
    fruit_basket(basket)
    assert basket[Fruit.APPLE] == 4
    assert basket[Fruit.MANGO] == 2
    assert basket[Fruit.LYCHEE] == 5


def test_at_least_five_types_of_fruits():
    basket = _given_basket()
    fruit_basket(basket)
    assert len(basket) >= 5


def test_greater_than_eleven_fruits():
    basket = _given_basket()
    fruit_basket(basket)
    assert sum(basket.values()) > 11


def test_missing_fruits_are_added():
    basket = _given_basket()
    fruit_basket(basket)
    assert basket[Fruit.BANANA] == 4
    assert basket[Fruit.PINEAPPLE] == 10


RESULTS = (
    "England,France,4,2\n"
    "France,Italy,3,1\n"
    "Poland,Spain,2,0\n"
    "Germany,England,2,1\n"
)


def test_build_scores():
    scores = build_scores_table(RESULTS)
    assert sorted(scores) == ["England", "France", "Germany", "Italy", "Poland", "Spain"]


def test_validate_team_score_1():
    team = build_scores_table(RESULTS)["England"]
    assert (team.goals_scored, team.goals_conceded) == (5, 4)


def test_validate_team_score_2():
    team = build_scores_table(RESULTS)["Spain"]
    assert team == Team("Spain", 0, 2)


def test_bad_score_raises():
    with pytest.raises(ValueError):
        build_scores_table("A,B,x,1\n")


def test_short_line_raises():
    with pytest.raises(ValueError):
        build_scores_table("A,B,1\n")


def test_goal_overflow_raises():
    with pytest.raises(OverflowError):
        build_scores_table("A,B,200,0\nA,B,100,0\n")