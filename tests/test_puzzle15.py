"""Board state, validation, move generator and solvability checks."""

from __future__ import annotations

import pytest

from puzzle15.domains.puzzle15 import (
    BLANK,
    GOAL,
    PUZZLE15,
    InvalidBoard,
    SlidingPuzzle,
    make_unsolvable_variant,
)

# -- helpers ------------------------------------------------------------------

OPPOSITE = {"U": "D", "D": "U", "L": "R", "R": "L"}


def _assert_well_formed(s, puzzle=PUZZLE15) -> None:
    assert len(s) == puzzle.size
    assert s.count(BLANK) == 1
    assert sorted(t for t in s if t != BLANK) == list(range(1, puzzle.size))


# A few boards with the blank in each kind of cell: corner, edge, interior.
BOARDS = [
    pytest.param(GOAL, id="goal-blank-bottom-right"),
    pytest.param((BLANK,) + tuple(range(1, 16)), id="blank-top-left"),
    pytest.param((1, 2, 3, 4, 5, BLANK, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15), id="blank-interior"),
    pytest.param((1, 2, BLANK, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15), id="blank-top-edge"),
    pytest.param(PUZZLE15.scramble(30, 7), id="scramble-30"),
]

# -- board state --------------------------------------------------------------


def test_goal_has_blank_last() -> None:
    assert GOAL == tuple(range(1, 16)) + (BLANK,)
    assert PUZZLE15.blank_index(GOAL) == 15


def test_blank_index_missing_blank_fails_loudly() -> None:
    with pytest.raises(InvalidBoard):
        PUZZLE15.blank_index(tuple(range(1, 17)))


def test_parse_board_accepts_strings_and_maps_blank() -> None:
    raw = [str(v) for v in range(1, 16)] + ["0"]
    assert PUZZLE15.parse_board(raw, blank=0) == GOAL


@pytest.mark.parametrize(
    "values",
    [
        pytest.param(list(range(1, 16)), id="too-few"),
        pytest.param(list(range(1, 16)) + [-1, -1], id="too-many"),
        pytest.param(list(range(1, 17)), id="no-blank"),
        pytest.param([-1, -1] + list(range(1, 15)), id="two-blanks"),
        pytest.param([1, 1] + list(range(3, 16)) + [-1], id="duplicate"),
        pytest.param(list(range(1, 15)) + [99, -1], id="out-of-range"),
        pytest.param(list(range(1, 15)) + ["x", -1], id="not-an-int"),
    ],
)
def test_parse_board_rejects_malformed(values) -> None:
    with pytest.raises(InvalidBoard):
        PUZZLE15.parse_board(values)


@pytest.mark.parametrize(
    "values",
    [
        pytest.param([str(v) for v in range(1, 16)] + ["-1"], id="minus-one-instead-of-zero"),
        pytest.param(list(range(1, 16)) + [-1], id="ints-minus-one"),
        pytest.param(list(range(1, 16)) + [16], id="no-zero"),
    ],
)
def test_parse_board_with_zero_blank_requires_a_zero(values) -> None:
    with pytest.raises(InvalidBoard):
        PUZZLE15.parse_board(values, blank=0)


# -- move generator -----------------------------------------------------------


def test_illegal_moves_return_the_same_state() -> None:
    top_left = (BLANK,) + tuple(range(1, 16))
    assert PUZZLE15.move_up(top_left) == top_left
    assert PUZZLE15.move_left(top_left) == top_left
    assert PUZZLE15.move_down(GOAL) == GOAL
    assert PUZZLE15.move_right(GOAL) == GOAL


def test_legal_moves_swap_with_expected_neighbour() -> None:
    up = PUZZLE15.move_up(GOAL)
    left = PUZZLE15.move_left(GOAL)
    assert PUZZLE15.blank_index(up) == 11 and up[15] == 12
    assert PUZZLE15.blank_index(left) == 14 and left[15] == 15


@pytest.mark.parametrize("board", BOARDS)
def test_successors_are_well_formed(board) -> None:
    succ = PUZZLE15.successors(board)
    assert [d for d, _ in succ] == ["U", "D", "L", "R"]
    for _, s in succ:
        _assert_well_formed(s)


@pytest.mark.parametrize("board", BOARDS)
@pytest.mark.parametrize("direction", ["U", "D", "L", "R"])
def test_opposite_move_round_trips(board, direction) -> None:
    moved = PUZZLE15.apply(board, direction)
    if moved == board:
        pytest.skip(f"{direction} is illegal here")
    assert PUZZLE15.apply(moved, OPPOSITE[direction]) == board


def test_apply_rejects_unknown_direction() -> None:
    with pytest.raises(ValueError):
        PUZZLE15.apply(GOAL, "X")


# -- instance generation ------------------------------------------------------


def test_scramble_is_deterministic_per_seed() -> None:
    assert PUZZLE15.scramble(20, 3) == PUZZLE15.scramble(20, 3)
    _assert_well_formed(PUZZLE15.scramble(20, 3))


@pytest.mark.parametrize("n", [2, 3, 4])
def test_scrambles_are_solvable_and_variants_are_not(n: int) -> None:
    puzzle = SlidingPuzzle(n)
    assert puzzle.is_solvable(puzzle.GOAL)
    for seed in range(5):
        s = puzzle.scramble(15, seed)
        assert puzzle.is_solvable(s)
        assert not puzzle.is_solvable(make_unsolvable_variant(s))
