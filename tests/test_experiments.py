"""Instance generator, summary and path-visualiser smoke tests."""

from __future__ import annotations

import pytest

from puzzle15.domains.puzzle15 import PUZZLE15
from puzzle15.experiments import generate, summarize, visualize_path
from puzzle15.experiments.puzzle_io import read_puzzles
from puzzle15.experiments.runner import main as run_main


def test_generate_writes_readable_puzzles(tmp_path, capsys) -> None:
    out = tmp_path / "puzzles.txt"
    generate.main(["--depths", "5", "9", "--per_depth", "2", "--include_unsolvable", "--out", str(out)])

    boards = [PUZZLE15.parse_board(v) for v in read_puzzles(out)]
    assert len(boards) == 8
    assert [PUZZLE15.is_solvable(b) for b in boards] == [True, False] * 4
    assert "8 puzzles, 4 solvable" in capsys.readouterr().out


def test_generate_is_seeded() -> None:
    a = generate._gen(PUZZLE15, [6], 3, start_seed=10)
    b = generate._gen(PUZZLE15, [6], 3, start_seed=10)
    assert [i.state for i in a] == [i.state for i in b]
    assert [i.seed for i in a] == [10, 11, 12]


def test_summarize_end_to_end(tmp_path) -> None:
    puzzles = tmp_path / "puzzles.txt"
    stats = tmp_path / "stats.csv"
    generate.main(["--depths", "6", "10", "--per_depth", "3", "--include_unsolvable",
                   "--out", str(puzzles)])
    run_main([str(puzzles), "--out", str(tmp_path / "output.txt"), "--csv", str(stats),
              "--max_nodes", "2000", "--log_level", "ERROR"])

    df = summarize.load([stats])
    assert len(df) == 12
    status = summarize.by_status(df)
    assert dict(zip(status["status"], status["n"])) == {"solved": 6, "aborted": 6}
    lengths = summarize.by_length(df)
    assert lengths["n"].sum() == 6
    assert list(lengths["moves"]) == sorted(lengths["moves"])

    md = tmp_path / "summary.md"
    png = tmp_path / "expanded.png"
    summarize.main([str(stats), "--out", str(md), "--plot", str(png)])
    text = md.read_text()
    assert "| solved | 6 |" in text
    assert "## Solved, by solution length" in text
    assert png.exists()


def test_sem() -> None:
    assert summarize.sem([1.0]) == 0.0
    assert summarize.sem([1.0, 3.0]) == 1.0


@pytest.mark.parametrize("index", ["0", "-2"])
def test_visualize_path_rejects_non_positive_index(tmp_path, index: str) -> None:
    puzzles = tmp_path / "puzzles.txt"
    generate.main(["--depths", "3", "--per_depth", "1", "--out", str(puzzles)])
    with pytest.raises(SystemExit) as exc:
        visualize_path.main(["--puzzles", str(puzzles), "--index", index,
                             "--outdir", str(tmp_path / "frames")])
    assert exc.value.code == 2


def test_visualize_path_saves_one_frame_per_state(tmp_path, capsys) -> None:
    outdir = tmp_path / "frames"
    visualize_path.main(["--depth", "3", "--seed", "2", "--outdir", str(outdir)])
    frames = sorted(outdir.glob("step_*.png"))
    assert frames
    assert f"Saved {len(frames)} frames" in capsys.readouterr().out
