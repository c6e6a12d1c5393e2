#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(cmd):
    print("Running:", cmd)
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("python -m puzzle15.experiments.generate --depths 10 20 30 40 --per_depth 5 --include_unsolvable --out results/15_puzzles.txt")
    run("python -m puzzle15.experiments.runner results/15_puzzles.txt --max_nodes 500000 --out results/output.txt --csv results/stats.csv")
    run("python -m puzzle15.experiments.summarize results/stats.csv --out results/summary.md --plot results/plots/expanded.png")

if __name__ == "__main__":
    main()
