#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

TRIALS = 1000

def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("RBFS all heuristics", f"python -m fifteen.experiments.runner --depths 10 20 30 40 50 --per_depth {TRIALS} --algo rbfs --heuristic all --node_limit 5000000 --out results/rbfs_{TRIALS}.csv")
    run("IDA* all heuristics", f"python -m fifteen.experiments.runner --depths 10 20 30 40 50 --per_depth {TRIALS} --algo ida --heuristic all --node_limit 5000000 --seed {5 * TRIALS} --out results/ida_{TRIALS}.csv")
    run("Summary", f"python -m fifteen.experiments.analyze results/rbfs_{TRIALS}.csv results/ida_{TRIALS}.csv --out results/summary_{TRIALS}.md")
    run("Plots", f"python -m fifteen.experiments.plot results/rbfs_{TRIALS}.csv results/ida_{TRIALS}.csv --save results/plots")

if __name__ == "__main__":
    main()
