"""Solutions for days 1 to 8 of the 2024 Advent of Code puzzles."""