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
    run("python -m fifteen.experiments.runner --depths 10 20 30 --per_depth 10 --algo both --heuristic all --out results/quick.csv")
    run("python -m fifteen.experiments.analyze results/quick.csv --out results/quick_summary.md")
    run("python -m fifteen.experiments.plot results/quick.csv --save results/plots")

if __name__ == "__main__":
    main()
