import io

import pytest

from aocsolutions.year2023.day07 import (
    Game,
    Hand,
    InvalidInputError,
    Round,
    new,
    parse,
    part1,
    part2,
    rank,
)

EXAMPLE = """32T3K 765
T55J5 684
KK677 28
KTJJT 220
QQQJA 483
"""


def test_example_part1():
    assert new().solve(1, io.StringIO(EXAMPLE)) == 6440


def test_example_part2():
    assert new().solve(2, io.StringIO(EXAMPLE)) == 5905


def test_run_prints_result():
    out = io.StringIO()
    result = new().run(1, stdin=io.StringIO(EXAMPLE), stdout=out)
    assert result == 6440
    assert out.getvalue().strip() == "6440"


def test_parse_rounds():
    game = parse(io.StringIO(EXAMPLE))
    assert game.rounds[0] == Round("32T3K", 765)
    assert len(game.rounds) == 5
    assert part1(game) == 6440
    assert part2(game) == 5905


@pytest.mark.parametrize(
    "cards, wildcard, expected",
    [
        ("32T3K", False, Hand.ONE_PAIR),
        ("KK677", False, Hand.TWO_PAIR),
        ("T55J5", False, Hand.THREE_OF_A_KIND),
        ("T55J5", True, Hand.FOUR_OF_A_KIND),
        ("KTJJT", False, Hand.TWO_PAIR),
        ("KTJJT", True, Hand.FOUR_OF_A_KIND),
        ("QQQJA", True, Hand.FOUR_OF_A_KIND),
        ("JJJJJ", True, Hand.FIVE_OF_A_KIND),
        ("JJJJ2", True, Hand.FIVE_OF_A_KIND),
        ("23332", False, Hand.FULL_HOUSE),
        ("23456", False, Hand.HIGH_CARD),
        ("J2345", True, Hand.ONE_PAIR),
        ("AA8AA", False, Hand.FOUR_OF_A_KIND),
    ],
)
def test_round_hand(cards, wildcard, expected):
    assert Round(cards, 1).hand(wildcard) is expected


def test_hand_matches_rejects_other_kinds():
    assert Hand.FULL_HOUSE.matches("23332", False)
    assert not Hand.FOUR_OF_A_KIND.matches("23332", False)
    assert not Hand.FIVE_OF_A_KIND.matches("23332", False)


@pytest.mark.parametrize(
    "card, wildcard, expected",
    [
        ("2", False, 1),
        ("T", False, 9),
        ("J", False, 10),
        ("J", True, 0),
        ("Q", True, 11),
        ("A", False, 13),
        ("X", False, 0),
    ],
)
def test_rank(card, wildcard, expected):
    assert rank(card, wildcard) == expected


def test_round_without_bid_raises():
    with pytest.raises(InvalidInputError):
        Round.from_text("AAAAA")


def test_round_with_bad_bid_raises():
    with pytest.raises(ValueError):
        Round.from_text("AAAAA abc")


def test_winnings_tie_breaks_on_card_rank():
    game = Game([Round("33332", 1), Round("2AAAA", 10)])
    assert game.winnings(False) == 1 * 2 + 10 * 1


def test_day_metadata():
    day = new()
    assert day.name == "07"
    assert day.parts == (1, 2)