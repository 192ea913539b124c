#!/usr/bin/env python3
import argparse, os
from pathlib import Path
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from fifteen.domains.puzzle15 import Board, N, scramble
from fifteen.heuristics.registry import Heuristic
from fifteen.search.api import search


def draw_board(board: Board, out_path: Path):
    plt.figure(figsize=(3,3))
    ax = plt.gca()
    ax.set_xlim(0, N); ax.set_ylim(0, N)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    for i in range(N+1):
        ax.plot([0,N],[i,i], linewidth=1)
        ax.plot([i,i],[0,N], linewidth=1)
    for idx, t in enumerate(board.tiles):
        if t == 0: continue
        r, c = divmod(idx, N)
        ax.text(c+0.5, r+0.6, str(t), ha="center", va="center", fontsize=16)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()


def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--algo", choices=["ida","rbfs"], default="ida")
    p.add_argument("--heuristic", choices=[h.value for h in Heuristic], default="linear_conflict")
    p.add_argument("--depth", type=int, default=20)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--outdir", default="results/figs/example_path")
    args = p.parse_args(argv)

    start = scramble(args.depth, args.seed)
    res = search(args.algo, args.heuristic, start)

    outdir = Path(args.outdir)
    for i, s in enumerate(res.path):
        draw_board(s, outdir / f"step_{i:03d}.png")
    print(f"Saved {len(res.path)} frames to {outdir} ({res.moves} moves, {res.nodes_expanded} nodes expanded)")


if __name__ == "__main__":
    main()
