#!/usr/bin/env python3
from __future__ import annotations
import argparse, os
from pathlib import Path
from typing import List

import numpy as np
import pandas as pd
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

NEED = {"puzzle", "status", "moves", "expanded", "generated", "time_sec"}

def sem(x):
    x = np.asarray(x, float)
    n = np.sum(~np.isnan(x))
    return 0.0 if n <= 1 else np.nanstd(x, ddof=1) / np.sqrt(n)

def load(files: List[Path]) -> pd.DataFrame:
    """Concatenate runner CSVs; files missing the stats columns are skipped."""
    dfs = []
    for p in files:
        df = pd.read_csv(p)
        if not NEED.issubset(df.columns):
            print(f"Skipping {p}: missing {sorted(NEED - set(df.columns))}")
            continue
        df["file"] = Path(p).name
        dfs.append(df)
    if not dfs:
        return pd.DataFrame(columns=sorted(NEED | {"file"}))
    return pd.concat(dfs, ignore_index=True)

def by_status(df: pd.DataFrame) -> pd.DataFrame:
    return (df.groupby("status", as_index=False)
              .agg(n=("puzzle", "size"),
                   time_mean=("time_sec", "mean"),
                   exp_mean=("expanded", "mean"),
                   gen_mean=("generated", "mean")))

def by_length(df: pd.DataFrame) -> pd.DataFrame:
    """Solved puzzles grouped by solution length."""
    ok = df[df["status"] == "solved"].copy()
    ok["moves"] = ok["moves"].astype(int)
    return (ok.groupby("moves", as_index=False)
              .agg(n=("puzzle", "size"),
                   time_mean=("time_sec", "mean"),
                   time_sem=("time_sec", sem),
                   exp_mean=("expanded", "mean"),
                   exp_sem=("expanded", sem))
              .sort_values("moves"))

def write_summary_md(path: Path, status: pd.DataFrame, lengths: pd.DataFrame):
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("# Batch Summary\n\n")
        f.write("| status | n | time mean (s) | expanded mean | generated mean |\n")
        f.write("|:---|---:|---:|---:|---:|\n")
        for r in status.itertuples(index=False):
            f.write(f"| {r.status} | {r.n} | {r.time_mean:.6f} | {r.exp_mean:.1f} | {r.gen_mean:.1f} |\n")
        f.write("\n## Solved, by solution length\n\n")
        if lengths.empty:
            f.write("_No solved puzzles._\n")
            return
        f.write("| moves | n | time mean±sem (s) | expanded mean±sem |\n")
        f.write("|---:|---:|---:|---:|\n")
        for r in lengths.itertuples(index=False):
            f.write(f"| {r.moves} | {r.n} | {r.time_mean:.6f}±{r.time_sem:.6f} | {r.exp_mean:.1f}±{r.exp_sem:.1f} |\n")
    print(f"Wrote {path}")

def plot_expanded(lengths: pd.DataFrame, out_path: Path):
    fig, ax = plt.subplots(figsize=(7, 5))
    ax.errorbar(lengths["moves"], lengths["exp_mean"], yerr=lengths["exp_sem"],
                marker="o", capsize=3)
    ax.set_yscale("log")
    ax.set_xlabel("Solution length (moves)")
    ax.set_ylabel("Expanded nodes")
    ax.set_title("A* expanded nodes vs solution length (mean ± SEM)")
    ax.grid(True)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    print(f"Saved: {out_path}")

def main(argv=None):
    ap = argparse.ArgumentParser(description="Summarize runner statistics CSVs.")
    ap.add_argument("files", nargs="+", type=Path, help="CSV files from runner.py --csv")
    ap.add_argument("--out", type=Path, default=Path("results/summary.md"))
    ap.add_argument("--plot", type=Path, default=None, help="PNG of expanded nodes vs solution length")
    args = ap.parse_args(argv)

    df = load(args.files)
    if df.empty:
        print("No rows to summarize. Are your CSVs empty?")
        return
    lengths = by_length(df)
    write_summary_md(args.out, by_status(df), lengths)
    if args.plot is not None and not lengths.empty:
        plot_expanded(lengths, args.plot)

if __name__ == "__main__":
    main()
