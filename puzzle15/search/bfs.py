from collections import deque
from time import perf_counter
from typing import List, Optional, Set, Dict

from puzzle15.domains.puzzle15 import State, SlidingPuzzle, PUZZLE15
from puzzle15.search.path import derive_moves

def bfs(start: State, goal: Optional[State] = None,
        puzzle: SlidingPuzzle = PUZZLE15,
        timeout_sec: float | None = None,
        max_nodes: int | None = None):
    """Uninformed baseline; result dict has the same keys as a_star()."""
    goal = goal if goal is not None else puzzle.GOAL
    puzzle.blank_index(start)
    t0 = perf_counter()
    q = deque([start])
    parent: Dict[State, Optional[State]] = {start: None}
    expanded = generated = duplicates = 0
    seen: Set[State] = {start}
    peak = 1

    def result(termination, path=None):
        return {"path": path, "moves": derive_moves(path, puzzle) if path else None,
                "g": len(path) - 1 if path else None, "h0": None,
                "expanded": expanded, "generated": generated, "duplicates": duplicates,
                "peak_open": peak, "peak_closed": len(seen),
                "time": perf_counter()-t0, "algorithm": "BFS", "tie_break": "",
                "termination": termination}

    while q:
        if timeout_sec is not None and (perf_counter() - t0) > timeout_sec:
            return result("timeout")
        peak = max(peak, len(q))
        s = q.popleft()
        if s == goal:
            path: List[State] = []
            while s is not None:
                path.append(s); s = parent[s]
            return result("ok", list(reversed(path)))
        expanded += 1
        for _, s2 in puzzle.successors(s):
            if s2 == s: continue
            generated += 1
            if s2 in seen:
                duplicates += 1
                continue
            if max_nodes is not None and len(seen) >= max_nodes:
                return result("node_limit")
            seen.add(s2); parent[s2] = s; q.append(s2)
    return result("exhausted")
