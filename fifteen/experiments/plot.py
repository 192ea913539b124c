#!/usr/bin/env python3
import argparse, os
from pathlib import Path

import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from fifteen.experiments.analyze import load_results, summarize


def plot_metric(ax, summary, metric, log=True):
    for (algo, heur), grp in summary.groupby(["algorithm", "heuristic"]):
        grp = grp.sort_values("depth")
        ax.errorbar(grp["depth"], grp[f"{metric}_mean"], yerr=grp[f"{metric}_std"].fillna(0.0),
                    marker="o", capsize=3, label=f"{algo} | {heur}")
    if log:
        ax.set_yscale("log")
    ax.set_xlabel("Scramble length")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs scramble length (mean ± std)")
    ax.grid(True, which="both", alpha=0.3)
    ax.legend(fontsize=8)


def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path


def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot runner CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    df = load_results(args.csv)
    if df.empty:
        print("No rows to plot. Are your CSVs empty?")
        return
    summary = summarize(df)
    outdir = Path(args.save)
    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem

    fig, axes = plt.subplots(1, 2, figsize=(13, 5))
    plot_metric(axes[0], summary, "expanded")
    plot_metric(axes[1], summary, "time_sec")
    plt.tight_layout()
    save_fig(fig, outdir, f"{base}_combined")

    if args.show:
        plt.show()
    plt.close(fig)


if __name__ == "__main__":
    main()
