from __future__ import annotations
from typing import Tuple, List, Dict, Sequence
import random

State = Tuple[int, ...]  # row-major, BLANK marks the empty cell
BLANK = -1


class InvalidBoard(ValueError):
    """Board is not a permutation of 1..n*n-1 plus exactly one blank."""


def _swap(s: State, i: int, j: int) -> State:
    lst = list(s)
    lst[i], lst[j] = lst[j], lst[i]
    return tuple(lst)


class SlidingPuzzle:
    """N×N sliding-tile puzzle (BLANK is the empty cell). N=4 is the 15-puzzle."""
    def __init__(self, n: int = 4):
        assert n >= 2
        self.N = n
        self.size = n * n
        self.GOAL: State = tuple(list(range(1, self.size)) + [BLANK])
        # Precompute neighbors for random walks
        self._nei: Dict[int, Tuple[int, ...]] = {}
        for i in range(self.size):
            r, c = divmod(i, n)
            moves = []
            if r > 0:       moves.append(i - n)
            if r < n - 1:   moves.append(i + n)
            if c > 0:       moves.append(i - 1)
            if c < n - 1:   moves.append(i + 1)
            self._nei[i] = tuple(moves)

    # ---------- Board state ----------
    def blank_index(self, s: State) -> int:
        try:
            return s.index(BLANK)
        except ValueError:
            raise InvalidBoard(f"no blank ({BLANK}) on board {s}") from None

    def parse_board(self, values: Sequence, blank: int = BLANK) -> State:
        """Validate raw tile values (ints or int-like strings) and return a State.

        `blank` is the sentinel used in `values`; it is mapped to BLANK.
        """
        if len(values) != self.size:
            raise InvalidBoard(f"expected {self.size} tiles, got {len(values)}")
        tiles: List[int] = []
        for v in values:
            try:
                t = int(v)
            except (TypeError, ValueError):
                raise InvalidBoard(f"tile {v!r} is not an integer") from None
            if t == BLANK and blank != BLANK:
                raise InvalidBoard(f"tile {t} is not valid when the blank is written as {blank}")
            tiles.append(BLANK if t == blank else t)
        blanks = tiles.count(BLANK)
        if blanks != 1:
            raise InvalidBoard(f"expected exactly one blank ({blank}), found {blanks}")
        rest = sorted(t for t in tiles if t != BLANK)
        if rest != list(range(1, self.size)):
            raise InvalidBoard(f"tiles must be 1..{self.size - 1} each exactly once")
        return tuple(tiles)

    # ---------- Move generator ----------
    # Each move returns the input state unchanged when it would leave the board.
    def move_up(self, s: State) -> State:
        z = self.blank_index(s)
        return _swap(s, z, z - self.N) if z // self.N > 0 else s

    def move_down(self, s: State) -> State:
        z = self.blank_index(s)
        return _swap(s, z, z + self.N) if z // self.N < self.N - 1 else s

    def move_left(self, s: State) -> State:
        z = self.blank_index(s)
        return _swap(s, z, z - 1) if z % self.N > 0 else s

    def move_right(self, s: State) -> State:
        z = self.blank_index(s)
        return _swap(s, z, z + 1) if z % self.N < self.N - 1 else s

    def successors(self, s: State) -> List[Tuple[str, State]]:
        """All four blank moves as (direction, next_state); illegal ones yield `s` itself."""
        return [
            ("U", self.move_up(s)),
            ("D", self.move_down(s)),
            ("L", self.move_left(s)),
            ("R", self.move_right(s)),
        ]

    def apply(self, s: State, direction: str) -> State:
        step = {"U": self.move_up, "D": self.move_down,
                "L": self.move_left, "R": self.move_right}
        if direction not in step:
            raise ValueError(f"unknown direction {direction!r}")
        return step[direction](s)

    # ---------- Instance generation ----------
    def scramble(self, depth: int, seed: int) -> State:
        """Depth-limited random walk from GOAL with no immediate backtrack."""
        rng = random.Random(seed)
        s = self.GOAL
        last_blank = None
        for _ in range(depth):
            z = self.blank_index(s)
            cand = list(self._nei[z])
            if last_blank in cand and len(cand) > 1:
                cand.remove(last_blank)
            j = rng.choice(cand)
            last_blank = z
            s = _swap(s, z, j)
        return s

    def is_solvable(self, s: State) -> bool:
        """Solvability rules:
           - N odd: inversions must be even
           - N even: (inversions + blank_row_from_bottom) must be ODD
             (row count is 1-based from the bottom)
        """
        arr = [x for x in s if x != BLANK]
        inv = 0
        for i in range(len(arr)):
            for j in range(i + 1, len(arr)):
                if arr[i] > arr[j]:
                    inv += 1
        if self.N % 2 == 1:
            return (inv % 2) == 0
        blank_row_from_bottom = self.N - self.blank_index(s) // self.N
        return ((inv + blank_row_from_bottom) % 2) == 1


def make_unsolvable_variant(s: State) -> State:
    """Swap the first two non-blank tiles, flipping permutation parity."""
    i = next(k for k, v in enumerate(s) if v != BLANK)
    j = next(k for k, v in enumerate(s[i + 1:], start=i + 1) if v != BLANK)
    return _swap(s, i, j)


PUZZLE15 = SlidingPuzzle(4)
GOAL: State = PUZZLE15.GOAL
