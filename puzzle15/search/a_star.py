from __future__ import annotations
from enum import Enum
from typing import Callable, Dict, Optional, Set
from time import perf_counter
import math

from puzzle15.domains.puzzle15 import State, SlidingPuzzle, PUZZLE15
from puzzle15.heuristics.manhattan import manhattan
from puzzle15.search.frontier import Frontier
from puzzle15.search.node import NodePool
from puzzle15.search.path import reconstruct_path, derive_moves


class Status(str, Enum):
    READY = "ready"
    SEARCHING = "searching"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    TIMEOUT = "timeout"
    NODE_LIMIT = "node_limit"


# Status -> value of the result's "termination" field
TERMINATION = {
    Status.SOLVED: "ok",
    Status.EXHAUSTED: "exhausted",
    Status.TIMEOUT: "timeout",
    Status.NODE_LIMIT: "node_limit",
}


class AStar:
    """A* over sliding-puzzle states.

    Keeps a best-g map so a state is only re-enqueued when reached by a
    strictly cheaper path; moves that leave the board (successor == current)
    are dropped. The node pool lives as long as one call to run().
    """
    def __init__(
        self,
        start: State,
        goal: Optional[State] = None,
        puzzle: SlidingPuzzle = PUZZLE15,
        hfun: Optional[Callable[[State], int]] = None,
        tie_break: str = "h",
        timeout_sec: float | None = None,
        max_nodes: int | None = None,
    ):
        self.start = start
        self.puzzle = puzzle
        self.goal = goal if goal is not None else puzzle.GOAL
        self.hfun = hfun or (lambda s: manhattan(s, self.goal, puzzle.N))
        self.tie_break = tie_break
        self.timeout_sec = timeout_sec
        self.max_nodes = max_nodes
        self.status = Status.READY

    def run(self, return_path: bool = True) -> Dict:
        puzzle, goal, hfun = self.puzzle, self.goal, self.hfun
        puzzle.blank_index(self.start)  # fail fast on a board without a blank
        t0 = perf_counter()
        self.status = Status.SEARCHING

        pool = NodePool()
        frontier = Frontier(self.tie_break)
        h0 = hfun(self.start)
        root = pool.add(self.start, 0, h0)
        frontier.push(root, pool[root])

        best_g: Dict[State, int] = {self.start: 0}
        closed: Set[State] = set()

        expanded = 0
        generated = 0
        duplicates = 0
        peak_open = 1
        peak_closed = 0

        def result(handle: int | None = None) -> Dict:
            out = {
                "path": None, "moves": None, "g": None, "h0": h0,
                "expanded": expanded, "generated": generated, "duplicates": duplicates,
                "peak_open": peak_open, "peak_closed": peak_closed,
                "time": perf_counter() - t0,
                "algorithm": "A*",
                "tie_break": self.tie_break,
                "termination": TERMINATION[self.status],
            }
            if handle is not None:
                out["g"] = pool[handle].g
                if return_path:
                    path = reconstruct_path(pool, handle)
                    out["path"] = path
                    out["moves"] = derive_moves(path, puzzle)
            return out

        while len(frontier):
            if self.timeout_sec is not None and (perf_counter() - t0) > self.timeout_sec:
                self.status = Status.TIMEOUT
                return result()

            peak_open = max(peak_open, len(frontier))
            handle = frontier.pop()
            node = pool[handle]
            # stale entry: a cheaper copy of this state was pushed later
            if node.state in closed or node.g > best_g[node.state]:
                continue

            if node.state == goal:
                self.status = Status.SOLVED
                return result(handle)

            closed.add(node.state)
            expanded += 1
            peak_closed = max(peak_closed, len(closed))

            for _, s2 in puzzle.successors(node.state):
                if s2 == node.state:
                    continue
                generated += 1
                g2 = node.g + 1
                if s2 in best_g:
                    duplicates += 1
                if g2 >= best_g.get(s2, math.inf):
                    continue
                if self.max_nodes is not None and len(pool) >= self.max_nodes:
                    self.status = Status.NODE_LIMIT
                    return result()
                best_g[s2] = g2
                child = pool.add(s2, g2, hfun(s2), handle)
                frontier.push(child, pool[child])

        # Open exhausted without finding goal
        self.status = Status.EXHAUSTED
        return result()


def a_star(
    start: State,
    goal: Optional[State] = None,
    hfun: Optional[Callable[[State], int]] = None,
    puzzle: SlidingPuzzle = PUZZLE15,
    tie_break: str = "h",
    return_path: bool = True,
    timeout_sec: float | None = None,
    max_nodes: int | None = None,
):
    """
    A* with instrumentation.
    Returns a dict with path/moves/g (None unless solved), node counters,
    time and termination in {ok, exhausted, timeout, node_limit}.
    """
    engine = AStar(start, goal, puzzle=puzzle, hfun=hfun, tie_break=tie_break,
                   timeout_sec=timeout_sec, max_nodes=max_nodes)
    return engine.run(return_path=return_path)
