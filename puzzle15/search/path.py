from __future__ import annotations
from typing import List, NamedTuple, Sequence

from puzzle15.domains.puzzle15 import State, SlidingPuzzle, PUZZLE15
from puzzle15.search.node import NodePool, ROOT


class Move(NamedTuple):
    row: int        # blank row before the move (0-indexed)
    col: int        # blank column before the move (0-indexed)
    direction: str  # U, D, L or R


def reconstruct_path(pool: NodePool, handle: int) -> List[State]:
    path: List[State] = []
    while handle != ROOT:
        node = pool[handle]
        path.append(node.state)
        handle = node.parent
    path.reverse()
    return path


def derive_moves(path: Sequence[State], puzzle: SlidingPuzzle = PUZZLE15) -> List[Move]:
    """Turn consecutive states into blank moves.

    Raises ValueError when two neighbouring states are not one blank move apart.
    """
    n = puzzle.N
    deltas = {-1: "L", 1: "R", -n: "U", n: "D"}
    moves: List[Move] = []
    for prev, curr in zip(path, path[1:]):
        i = puzzle.blank_index(prev)
        j = puzzle.blank_index(curr)
        direction = deltas.get(j - i)
        if direction is None:
            raise ValueError(f"states are not one move apart (blank {i} -> {j})")
        r, c = divmod(i, n)
        moves.append(Move(r, c, direction))
    return moves


def apply_moves(s: State, moves: Sequence[Move], puzzle: SlidingPuzzle = PUZZLE15) -> State:
    """Replay moves from `s`; an illegal move raises ValueError."""
    for k, m in enumerate(moves):
        nxt = puzzle.apply(s, m.direction)
        if nxt == s:
            raise ValueError(f"move {k} ({m.direction}) leaves the board at {divmod(puzzle.blank_index(s), puzzle.N)}")
        s = nxt
    return s
