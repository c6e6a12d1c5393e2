from __future__ import annotations
from functools import lru_cache
from typing import Tuple, Dict

from puzzle15.domains.puzzle15 import State, BLANK, GOAL


@lru_cache(maxsize=8)
def goal_positions(goal: State, n: int) -> Dict[int, Tuple[int, int]]:
    return {t: divmod(i, n) for i, t in enumerate(goal) if t != BLANK}


def manhattan(s: State, goal: State = GOAL, n: int = 4) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    pos = goal_positions(goal, n)
    dist = 0
    for idx, tile in enumerate(s):
        if tile == BLANK:
            continue
        r, c = divmod(idx, n)
        gr, gc = pos[tile]
        dist += abs(r - gr) + abs(c - gc)
    return dist
