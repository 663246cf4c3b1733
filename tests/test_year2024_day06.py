import io

import pytest

from aocsolutions.year2024.day06 import (
    Direction,
    Guard,
    new,
    parse,
    part1,
    part2,
)

EXAMPLE = """\
....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""

LOOP = """\
.#..
.^.#
#...
..#.
"""


def _parse(text):
    return parse(io.StringIO(text))


def test_example_part1():
    assert new().solve(1, io.StringIO(EXAMPLE)) == 41


def test_example_part2():
    assert new().solve(2, io.StringIO(EXAMPLE)) == 6


def test_parse_finds_guard():
    lab = _parse(EXAMPLE)
    assert lab.guard.pos == (4, 6)
    assert lab.guard.direction is Direction.NORTH
    assert (lab.width, lab.height) == (10, 10)


def test_str_round_trips_initial_map():
    assert str(_parse(EXAMPLE)) == EXAMPLE


def test_part1_marks_path_as_visited():
    lab = _parse(EXAMPLE)
    assert part1(lab) == 41
    assert str(lab).count("X") == 41


def test_guard_turns_clockwise_through_all_directions():
    guard = Guard((0, 0), Direction.NORTH)
    seen = [guard.turn().direction for _ in range(4)]
    assert seen == [Direction.EAST, Direction.SOUTH, Direction.WEST, Direction.NORTH]


def test_guard_next_pos_and_move():
    guard = Guard((2, 2), Direction.WEST)
    assert guard.next_pos() == (1, 2)
    guard.move()
    assert guard.pos == (1, 2)


def test_loop_is_detected():
    lab = _parse(LOOP)
    assert lab.run_forward() is False


def test_escape_is_detected():
    lab = _parse("...\n.^.\n...\n")
    assert lab.run_forward() is True
    assert lab.cells_visited() == 2


def test_save_and_restore_state():
    lab = _parse(EXAMPLE)
    before = str(lab)
    lab.save_state()
    lab.run_forward()
    lab.restore_state()
    assert str(lab) == before


def test_restore_without_save_raises():
    with pytest.raises(RuntimeError):
        _parse(EXAMPLE).restore_state()


def test_visits_on_obstacle_raises():
    lab = _parse(LOOP)
    with pytest.raises(ValueError):
        lab.visits((1, 0))


def test_outside_is_not_obstacle_and_unvisited():
    lab = _parse(LOOP)
    assert lab.is_obstacle((-1, 0)) is False
    assert lab.visits((10, 10)) == 0
    assert lab.is_obstacle((1, 0)) is True


def test_invalid_cell_raises():
    with pytest.raises(ValueError):
        _parse("..\n.?\n")


def test_part2_on_parsed_example():
    assert part2(_parse(EXAMPLE)) == 6