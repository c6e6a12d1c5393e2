#!/usr/bin/env python3
import argparse, os
from pathlib import Path
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from itertools import islice
from typing import Optional

from puzzle15.domains.puzzle15 import BLANK, SlidingPuzzle, State
from puzzle15.experiments.puzzle_io import read_puzzles
from puzzle15.search.a_star import a_star

def draw_board(state: State, n: int, out_path: Path, title: Optional[str] = None):
    plt.figure(figsize=(3,3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(n+1):
        ax.plot([0,n],[i,i], linewidth=1)
        ax.plot([i,i],[0,n], linewidth=1)
    # tiles
    for idx, t in enumerate(state):
        if t == BLANK: continue
        r, c = divmod(idx, n)
        ax.text(c+0.5, r+0.6, str(t), ha="center", va="center", fontsize=16)
    if title:
        ax.set_title(title, fontsize=10)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()

def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one puzzle and save board images along the path.")
    p.add_argument("--puzzles", type=Path, default=None, help="Puzzle file; otherwise scramble one")
    p.add_argument("--index", type=int, default=1, help="1-based puzzle number in --puzzles")
    p.add_argument("--blank", type=int, default=BLANK)
    p.add_argument("--n", type=int, default=4)
    p.add_argument("--depth", type=int, default=10)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--max_nodes", type=int, default=None)
    p.add_argument("--outdir", default="figs/example_path")
    args = p.parse_args(argv)

    puzzle = SlidingPuzzle(args.n)
    if args.puzzles is not None:
        if args.index < 1:
            p.error(f"--index must be 1 or greater, got {args.index}")
        values = next(islice(read_puzzles(args.puzzles, puzzle.size), args.index - 1, None), None)
        if values is None:
            p.error(f"{args.puzzles} has fewer than {args.index} puzzles")
        start = puzzle.parse_board(values, blank=args.blank)
    else:
        start = puzzle.scramble(args.depth, args.seed)

    res = a_star(start, puzzle=puzzle, max_nodes=args.max_nodes)
    if not res.get("path"):
        print(f"No path ({res['termination']}).")
        return

    outdir = Path(args.outdir)
    moves = [None] + res["moves"]
    for i, (s, m) in enumerate(zip(res["path"], moves)):
        title = "start" if m is None else f"{i}: ({m.row},{m.col}) {m.direction}"
        draw_board(s, puzzle.N, outdir / f"step_{i:03d}.png", title)
    print(f"Saved {len(res['path'])} frames to {outdir}")

if __name__ == "__main__":
    main()
