from __future__ import annotations
from typing import List, Tuple
import heapq
import itertools

from puzzle15.search.node import Node

TIE_BREAKS = ("h", "g", "fifo", "lifo")


class Frontier:
    """Open list ordered by f ascending.

    Ties on f are broken by `tie_break`:
      h    -> lower h first, then first inserted
      g    -> higher g first, then first inserted
      fifo -> first inserted
      lifo -> last inserted
    """
    def __init__(self, tie_break: str = "h"):
        if tie_break not in TIE_BREAKS:
            raise ValueError(f"unknown tie_break {tie_break!r}")
        self.tie_break = tie_break
        self._heap: List[Tuple[Tuple[int, int, int], int]] = []
        self._counter = itertools.count()

    def _priority(self, node: Node) -> Tuple[int, int, int]:
        ctr = next(self._counter)
        if self.tie_break == "h":    return (node.f, node.h, ctr)
        if self.tie_break == "g":    return (node.f, -node.g, ctr)
        if self.tie_break == "fifo": return (node.f, 0, ctr)
        return (node.f, 0, -ctr)

    def push(self, handle: int, node: Node) -> None:
        heapq.heappush(self._heap, (self._priority(node), handle))

    def pop(self) -> int:
        """Remove and return the handle with the lowest priority."""
        return heapq.heappop(self._heap)[1]

    def __len__(self) -> int:
        return len(self._heap)
