import pytest

from rustlings.solutions.quizzes import (
    Append,
    ReportCard,
    Trim,
    Uppercase,
    calculate_price_of_apples,
    transformer,
)


@pytest.mark.parametrize(
    "quantity, price",
    [(35, 70), (40, 80), (41, 41), (65, 65)],
)
def test_verify(quantity, price):
    assert calculate_price_of_apples(quantity) == price


def test_transformer():
    output = transformer(
        [
            ("hello", Uppercase()),
            (" all roads lead to rome! ", Trim()),
            ("foo", Append(1)),
            ("bar", Append(5)),
        ]
    )
    assert output == [
        "HELLO",
        "all roads lead to rome!",
        "foobar",
        "barbarbarbarbarbar",
    ]


def test_append_zero_times():
    assert Append(0).apply("foo") == "foo"


def test_append_negative_count_rejected():
    with pytest.raises(ValueError):
        Append(-1).apply("foo")


def test_generate_numeric_report_card():
    card = ReportCard(grade=2.1, student_name="Tom Wriggle", student_age=12)
    assert card.print() == "Tom Wriggle (12) - achieved a grade of 2.1"


def test_generate_alphabetic_report_card():
    card = ReportCard(grade="A+", student_name="Gary Plotter", student_age=11)
    assert card.print() == "Gary Plotter (11) - achieved a grade of A+"