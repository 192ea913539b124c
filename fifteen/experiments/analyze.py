#!/usr/bin/env python3
from __future__ import annotations
import argparse
from pathlib import Path
from typing import Iterable, List, Tuple

import numpy as np
import pandas as pd

KEYS = ["algorithm", "heuristic", "depth"]
METRICS = ["expanded", "moves", "time_sec"]


def load_results(paths: Iterable) -> pd.DataFrame:
    """Concatenate runner CSVs, keeping only runs that terminated with a solution."""
    dfs = []
    for p in paths:
        df = pd.read_csv(p)
        df["__src__"] = Path(p).name
        dfs.append(df)
    if not dfs:
        return pd.DataFrame(columns=KEYS + METRICS)
    df = pd.concat(dfs, ignore_index=True, sort=False)

    term = df["termination"] if "termination" in df.columns else pd.Series("ok", index=df.index)
    df = df[term.fillna("ok") == "ok"].copy()
    for c in ("depth", "seed", "expanded", "moves", "time_sec"):
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    return df


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """mean / median / std / n per (algorithm, heuristic, depth)."""
    g = df.groupby(KEYS)
    out = g[METRICS].agg(["mean", "median", "std"])
    out.columns = [f"{m}_{s}" for m, s in out.columns]
    out["n"] = g.size()
    return out.reset_index().sort_values(KEYS, ignore_index=True)


def growth_violations(summary: pd.DataFrame, metric: str = "expanded_mean") -> List[Tuple[str, str, int, int]]:
    """(algorithm, heuristic, shallower depth, deeper depth) where the mean dropped as depth grew."""
    bad = []
    for (algo, heur), grp in summary.groupby(["algorithm", "heuristic"]):
        grp = grp.sort_values("depth")
        depths = grp["depth"].to_numpy()
        drops = np.flatnonzero(np.diff(grp[metric].to_numpy()) < 0)
        for i in drops:
            bad.append((algo, heur, int(depths[i]), int(depths[i + 1])))
    return bad


def write_markdown(summary: pd.DataFrame, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("# 15-puzzle benchmark summary\n\n")
        f.write("| algorithm | heuristic | depth | moves mean | expanded mean | expanded median | time mean (s) | n |\n")
        f.write("|:---|:---|---:|---:|---:|---:|---:|---:|\n")
        for r in summary.itertuples(index=False):
            f.write(f"| {r.algorithm} | {r.heuristic} | {r.depth} | {r.moves_mean:.2f} | "
                    f"{r.expanded_mean:.1f} | {r.expanded_median:.1f} | {r.time_sec_mean:.6f} | {r.n} |\n")
        bad = growth_violations(summary)
        f.write("\n")
        if bad:
            f.write("**Node counts that shrank with deeper scrambles:**\n\n")
            for algo, heur, d0, d1 in bad:
                f.write(f"- {algo} / {heur}: depth {d0} -> {d1}\n")
        else:
            f.write("Mean node expansions grow with scramble length for every algorithm/heuristic.\n")
    print(f"Wrote {path}")


def main(argv=None):
    ap = argparse.ArgumentParser(description="Summarize runner CSVs (node counts, moves, time).")
    ap.add_argument("files", nargs="+", help="CSV files from fifteen.experiments.runner")
    ap.add_argument("--out", default="results/summary.md")
    args = ap.parse_args(argv)

    df = load_results(args.files)
    if df.empty:
        print("No solved rows to summarize.")
        return
    summary = summarize(df)
    with pd.option_context("display.width", 160, "display.max_rows", 200):
        print(summary[KEYS + ["moves_mean", "expanded_mean", "time_sec_mean", "n"]].to_string(index=False))
    write_markdown(summary, Path(args.out))


if __name__ == "__main__":
    main()
