import io

import pytest

from aocsolutions.year2023.day05 import (
    Almanac,
    AlmanacMap,
    Rule,
    SeedRange,
    new,
    parse,
    part1,
    part2,
)

EXAMPLE = """\
seeds: 79 14 55 13

seed-to-soil map:
50 98 2
52 50 48

soil-to-fertilizer map:
0 15 37
37 52 2
39 0 15

fertilizer-to-water map:
49 53 8
0 11 42
42 0 7
57 7 4

water-to-light map:
88 18 7
18 25 70

light-to-temperature map:
45 77 23
81 45 19
68 64 13

temperature-to-humidity map:
0 69 1
1 0 69

humidity-to-location map:
60 56 37
56 93 4

"""


@pytest.mark.parametrize("part, want", [(1, 35), (2, 46)])
def test_example(part, want):
    assert new().solve(part, io.StringIO(EXAMPLE)) == want


def test_decode():
    almanac = parse(io.StringIO(EXAMPLE))
    assert almanac.seeds == [79, 14, 55, 13]
    assert [m.name for m in almanac.maps] == [
        "seed-to-soil",
        "soil-to-fertilizer",
        "fertilizer-to-water",
        "water-to-light",
        "light-to-temperature",
        "temperature-to-humidity",
        "humidity-to-location",
    ]
    assert almanac.maps[0].rules == [Rule(98, 100, -48), Rule(50, 98, 2)]


def test_locations():
    almanac = parse(io.StringIO(EXAMPLE))
    assert almanac.locations() == [82, 43, 86, 35]
    assert part1(almanac) == 35
    assert part2(almanac) == 46


def test_rule_transform():
    rule = Rule.from_text("50 98 2")
    assert rule == Rule(98, 100, -48)
    assert rule.transform(98) == 50
    assert rule.transform(99) == 51
    assert rule.transform(100) == 100
    assert rule.transform(97) == 97


def test_map_transform():
    m = AlmanacMap.from_text("seed-to-soil map:\n50 98 2\n52 50 48")
    assert m.name == "seed-to-soil"
    assert [m.transform(s) for s in (79, 14, 55, 13, 99)] == [81, 14, 57, 13, 51]


def test_seed_ranges():
    assert Almanac(seeds=[79, 14, 55, 13]).seed_ranges() == [
        SeedRange(79, 93),
        SeedRange(55, 68),
    ]


def test_odd_seed_count():
    with pytest.raises(ValueError):
        Almanac(seeds=[1, 2, 3]).seed_ranges()


def test_invalid_rule():
    with pytest.raises(ValueError):
        Rule.from_text("1 2")


def test_invalid_map_header():
    with pytest.raises(ValueError):
        AlmanacMap.from_text("seed-to-soil\n1 2 3")