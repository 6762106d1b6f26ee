"""Puzzle fixtures shared by the test modules."""

# Solvable by propagation alone
EASY_PUZZLE = (
    "003020600"
    "900305001"
    "001806400"
    "008102900"
    "700000008"
    "006708200"
    "002609500"
    "800203009"
    "005010300"
)

EASY_SOLUTION = (
    "483921657"
    "967345821"
    "251876493"
    "548132976"
    "729564138"
    "136798245"
    "372689514"
    "814253769"
    "695417382"
)

TEST_PUZZLE = "53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79"

TEST_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

# Needs search after propagation
HARD_PUZZLE = "4.....8.5.3..........7......2.....6.....8.4......1.......6.3.7.5..2.....1.4......"

# Two 5s in row A
INVALID_PUZZLE = "55..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79"

# Clues consistent after propagation, but no solution exists
EXHAUSTED_PUZZLE = HARD_PUZZLE[0] + "9" + HARD_PUZZLE[2:]
