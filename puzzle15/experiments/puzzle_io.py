from __future__ import annotations
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, TextIO

from puzzle15.domains.puzzle15 import State, BLANK

# result["termination"] -> status word written to the output file
STATUS = {
    "ok": "solved",
    "exhausted": "unsolved",
    "timeout": "aborted",
    "node_limit": "aborted",
    "memory": "aborted",
    "invalid": "invalid",
}


def iter_puzzle_tokens(lines: Iterable[str], size: int = 16) -> Iterator[List[str]]:
    """Group whitespace-separated tokens into puzzles of `size` tiles.

    Tokens are not converted here, so a bad token only spoils its own puzzle.
    A trailing incomplete group is dropped.
    """
    buf: List[str] = []
    for line in lines:
        for tok in line.split():
            buf.append(tok)
            if len(buf) == size:
                yield buf
                buf = []


def read_puzzles(path: Path, size: int = 16) -> Iterator[List[str]]:
    with open(path, "r", encoding="utf-8") as f:
        yield from iter_puzzle_tokens(f, size)


def format_board(s: State, n: int = 4, blank: int = BLANK) -> str:
    rows = []
    for r in range(n):
        row = s[r * n:(r + 1) * n]
        rows.append(" ".join(str(blank if t == BLANK else t) for t in row))
    return "\n".join(rows)


def status_of(res: Dict) -> str:
    return STATUS.get(res.get("termination", ""), "aborted")


def format_record(number: int, res: Dict) -> str:
    """One output block: header line, a line per move when solved, blank separator."""
    status = status_of(res)
    if status == "solved":
        lines = [f"{number}, solved , {res['g']}:"]
        lines += [f"{m.row} {m.col} {m.direction}" for m in res["moves"] or []]
    elif status == "unsolved":
        lines = [f"{number}, unsolved , -:"]
    elif status == "invalid":
        lines = [f"{number}, invalid , {res.get('error', '')}:"]
    else:
        lines = [f"{number}, aborted , {res.get('termination', '')}:"]
    return "\n".join(lines) + "\n\n"


def write_record(f: TextIO, number: int, res: Dict) -> None:
    f.write(format_record(number, res))
