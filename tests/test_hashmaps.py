import pytest

from rustlings.solutions.error_handling import ParseIntError
from rustlings.solutions.hashmaps import (
    Fruit,
    build_scores_table,
    fill_fruit_basket,
    fruit_basket,
)

RESULTS = (
    "England,France,4,2\n"
    "France,Italy,3,1\n"
    "Poland,Spain,2,0\n"
    "Germany,England,2,1\n"
)


def _given_basket():
    return {Fruit.APPLE: 4, Fruit.MANGO: 2, Fruit.LYCHEE: 5}


def test_at_least_three_types_of_fruits():
    assert len(fruit_basket()) >= 3


def test_at_least_five_fruits():
    assert sum(fruit_basket().values()) >= 5


def test_basket_keeps_the_two_bananas():
    assert fruit_basket()["banana"] == 2


def test_given_fruits_are_not_modified():
    basket = fill_fruit_basket(_given_basket())
    assert basket[Fruit.APPLE] == 4
    assert basket[Fruit.MANGO] == 2
    assert basket[Fruit.LYCHEE] == 5


def test_at_least_five_types_of_fruits():
    basket = fill_fruit_basket(_given_basket())
    assert len(basket) >= 5


def test_greater_than_eleven_fruits():
    basket = fill_fruit_basket(_given_basket())
    assert sum(basket.values()) > 11


def test_fill_changes_basket_in_place():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert Fruit.PINEAPPLE in basket and Fruit.BANANA in basket


def test_build_scores():
    scores = build_scores_table(RESULTS)
    assert sorted(scores) == ["England", "France", "Germany", "Italy", "Poland", "Spain"]


def test_validate_team_score_1():
    team = build_scores_table(RESULTS)["England"]
    assert team.goals_scored == 5
    assert team.goals_conceded == 4


def test_validate_team_score_2():
    team = build_scores_table(RESULTS)["Spain"]
    assert team.goals_scored == 0
    assert team.goals_conceded == 2


def test_team_name_is_recorded():
    assert build_scores_table(RESULTS)["Italy"].name == "Italy"


def test_invalid_score_raises():
    with pytest.raises(ParseIntError):
        build_scores_table("England,France,four,2\n")


def test_short_line_raises():
    with pytest.raises(ValueError):
        build_scores_table("England,France,4\n")


def test_score_overflow_raises():
    with pytest.raises(OverflowError):
        build_scores_table("A,B,200,0\nA,B,100,0\n")