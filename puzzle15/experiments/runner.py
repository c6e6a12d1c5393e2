from __future__ import annotations
import argparse, csv, logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, TextIO

from puzzle15.domains.puzzle15 import BLANK, InvalidBoard, SlidingPuzzle
from puzzle15.search.a_star import a_star
from puzzle15.search.bfs import bfs
from puzzle15.search.frontier import TIE_BREAKS
from puzzle15.experiments.puzzle_io import read_puzzles, write_record, status_of

logger = logging.getLogger(__name__)

STATS_HEADER = [
    "puzzle", "status", "termination", "moves", "h0",
    "expanded", "generated", "duplicates", "peak_open", "peak_closed",
    "time_sec", "algorithm", "tie_break",
]


@dataclass
class BatchContext:
    """Everything one batch run shares between puzzles."""
    out: TextIO
    stats: Optional[Any] = None  # csv.writer
    puzzle: SlidingPuzzle = field(default_factory=SlidingPuzzle)
    number: int = 0
    counts: Counter = field(default_factory=Counter)

    def next_number(self) -> int:
        self.number += 1
        return self.number


def solve_puzzle(values: Sequence, puzzle: SlidingPuzzle, algo: str = "a", blank: int = BLANK,
                 tie_break: str = "h", timeout_sec: float | None = None,
                 max_nodes: int | None = None) -> Dict:
    """Parse and solve one puzzle. Malformed input and MemoryError become results, not exceptions."""
    try:
        start = puzzle.parse_board(values, blank=blank)
    except InvalidBoard as e:
        return {"termination": "invalid", "error": str(e), "algorithm": "", "tie_break": ""}
    try:
        if algo == "bfs":
            return bfs(start, puzzle=puzzle, timeout_sec=timeout_sec, max_nodes=max_nodes)
        return a_star(start, puzzle=puzzle, tie_break=tie_break,
                      timeout_sec=timeout_sec, max_nodes=max_nodes)
    except MemoryError:
        return {"termination": "memory", "algorithm": algo, "tie_break": tie_break}


def write_stats_row(w, number: int, res: Dict) -> None:
    t = res.get("time")
    w.writerow([
        number, status_of(res), res.get("termination", ""),
        "" if res.get("g") is None else res["g"], "" if res.get("h0") is None else res["h0"],
        res.get("expanded", ""), res.get("generated", ""), res.get("duplicates", ""),
        res.get("peak_open", ""), res.get("peak_closed", ""),
        "" if t is None else f"{t:.6f}", res.get("algorithm", ""), res.get("tie_break", ""),
    ])


def run_batch(puzzles_path: Path, ctx: BatchContext, **solve_kw) -> Counter:
    for values in read_puzzles(puzzles_path, ctx.puzzle.size):
        number = ctx.next_number()
        res = solve_puzzle(values, ctx.puzzle, **solve_kw)
        status = status_of(res)
        ctx.counts[status] += 1
        if status == "solved":
            logger.info("puzzle %d: solved in %d moves (%d expanded, %.3fs)",
                        number, res["g"], res["expanded"], res["time"])
        elif status == "invalid":
            logger.warning("puzzle %d: invalid board: %s", number, res["error"])
        else:
            logger.warning("puzzle %d: %s (%s)", number, status, res["termination"])
        write_record(ctx.out, number, res)
        if ctx.stats is not None:
            write_stats_row(ctx.stats, number, res)
    return ctx.counts


def main(argv=None):
    ap = argparse.ArgumentParser(description="Batch 15-puzzle solver (A* + Manhattan)")
    ap.add_argument("puzzles", type=Path, help="File of puzzles: 16 integers each, row-major")
    ap.add_argument("--out", type=Path, default=Path("output.txt"))
    ap.add_argument("--csv", type=Path, default=None, help="Also write per-puzzle search statistics")
    ap.add_argument("--algo", choices=["a", "bfs"], default="a")
    ap.add_argument("--tie_break", choices=list(TIE_BREAKS), default="h")
    ap.add_argument("--timeout_sec", type=float, default=None, help="Per-puzzle wall time")
    ap.add_argument("--max_nodes", type=int, default=None, help="Per-puzzle node pool limit")
    ap.add_argument("--blank", type=int, default=BLANK, help="Value marking the blank in the input")
    ap.add_argument("--n", type=int, default=4, help="Board side length")
    ap.add_argument("--log_level", default="INFO")
    args = ap.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO),
                        format="%(asctime)s - %(levelname)s - %(message)s")

    args.out.parent.mkdir(parents=True, exist_ok=True)
    solve_kw = dict(algo=args.algo, blank=args.blank, tie_break=args.tie_break,
                    timeout_sec=args.timeout_sec, max_nodes=args.max_nodes)
    with args.out.open("w", encoding="utf-8") as out:
        ctx = BatchContext(out=out, puzzle=SlidingPuzzle(args.n))
        if args.csv is not None:
            args.csv.parent.mkdir(parents=True, exist_ok=True)
            with args.csv.open("w", newline="") as f:
                ctx.stats = csv.writer(f); ctx.stats.writerow(STATS_HEADER)
                counts = run_batch(args.puzzles, ctx, **solve_kw)
            print(f"Wrote {args.csv}")
        else:
            counts = run_batch(args.puzzles, ctx, **solve_kw)

    summary = ", ".join(f"{k}={v}" for k, v in sorted(counts.items()))
    print(f"Wrote {args.out} ({ctx.number} puzzles: {summary or 'none'})")

if __name__ == "__main__":
    main()
