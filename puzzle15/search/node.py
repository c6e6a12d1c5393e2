from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from puzzle15.domains.puzzle15 import State

ROOT = -1  # parent handle of the start node


@dataclass
class Node:
    state: State
    g: int
    h: int
    parent: int = ROOT
    f: int = field(init=False)

    def __post_init__(self):
        self.f = self.g + self.h


class NodePool:
    """Arena of search nodes for one run; nodes are addressed by integer handle."""
    def __init__(self):
        self._nodes: List[Node] = []

    def add(self, state: State, g: int, h: int, parent: int = ROOT) -> int:
        self._nodes.append(Node(state=state, g=g, h=h, parent=parent))
        return len(self._nodes) - 1

    def __getitem__(self, handle: int) -> Node:
        if handle == ROOT:
            raise IndexError("ROOT is not a node handle")
        return self._nodes[handle]

    def __len__(self) -> int:
        return len(self._nodes)
