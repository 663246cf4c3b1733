import io

import pytest

from aocsolutions.year2023.day09 import (
    History,
    PredictMode,
    Report,
    new,
    parse,
    part1,
    part2,
)

EXAMPLE = """\
0 3 6 9 12 15
1 3 6 10 15 21
10 13 16 21 30 45
"""


@pytest.mark.parametrize("part, want", [(1, 114), (2, 2)])
def test_example(part, want):
    assert new().solve(part, io.StringIO(EXAMPLE)) == want


def test_decode():
    report = parse(io.StringIO(EXAMPLE))
    assert [h.values for h in report.history] == [
        (0, 3, 6, 9, 12, 15),
        (1, 3, 6, 10, 15, 21),
        (10, 13, 16, 21, 30, 45),
    ]
    assert part1(report) == 114
    assert part2(report) == 2


@pytest.mark.parametrize(
    "line, future, past",
    [
        ("0 3 6 9 12 15", 18, -3),
        ("1 3 6 10 15 21", 28, 0),
        ("10 13 16 21 30 45", 68, 5),
        ("0 0 0", 0, 0),
        ("", 0, 0),
    ],
)
def test_history_predict(line, future, past):
    history = History.from_text(line)
    assert history.predict(PredictMode.FUTURE) == future
    assert history.predict(PredictMode.PAST) == past


def test_report_predict():
    report = Report([History((5, 5, 5)), History((1, 2, 3))])
    assert report.predict(PredictMode.FUTURE) == 9
    assert report.predict(PredictMode.PAST) == 5


def test_invalid_history():
    with pytest.raises(ValueError):
        History.from_text("1 two 3")