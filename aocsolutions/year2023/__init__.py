"""Solutions for days 1 to 9 of the 2023 Advent of Code puzzles."""