#!/usr/bin/env python3
from __future__ import annotations
import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List

from puzzle15.domains.puzzle15 import BLANK, SlidingPuzzle, State, make_unsolvable_variant
from puzzle15.experiments.puzzle_io import format_board

@dataclass
class Instance:
    seed: int
    depth: int
    state: State

def _gen(puzzle: SlidingPuzzle, depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        for _ in range(per_depth):
            out.append(Instance(seed=seed, depth=d, state=puzzle.scramble(d, seed)))
            seed += 1
    return out

def write_puzzles(path: Path, states: List[State], n: int = 4, blank: int = BLANK) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        for s in states:
            f.write(format_board(s, n, blank) + "\n\n")

def main(argv=None):
    ap = argparse.ArgumentParser(description="Write a file of scrambled sliding puzzles")
    ap.add_argument("--depths", type=int, nargs="+", default=[10, 20, 30])
    ap.add_argument("--per_depth", type=int, default=5)
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--n", type=int, default=4, help="Board side length")
    ap.add_argument("--blank", type=int, default=BLANK)
    ap.add_argument("--include_unsolvable", action="store_true",
                    help="Follow each instance with a parity-flipped (unsolvable) copy")
    ap.add_argument("--out", type=Path, default=Path("15_puzzles.txt"))
    args = ap.parse_args(argv)

    puzzle = SlidingPuzzle(args.n)
    states: List[State] = []
    for inst in _gen(puzzle, args.depths, args.per_depth, args.seed):
        states.append(inst.state)
        if args.include_unsolvable:
            states.append(make_unsolvable_variant(inst.state))

    write_puzzles(args.out, states, args.n, args.blank)
    solvable = sum(puzzle.is_solvable(s) for s in states)
    print(f"Wrote {args.out} ({len(states)} puzzles, {solvable} solvable)")

if __name__ == "__main__":
    main()
