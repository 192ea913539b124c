from __future__ import annotations
import argparse, csv, logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from fifteen.domains.puzzle15 import Board, format_path, scramble
from fifteen.errors import SearchLimitExceeded, Unsolvable
from fifteen.heuristics.registry import Heuristic, parse_heuristic
from fifteen.search.api import Algorithm, parse_algorithm, search

logger = logging.getLogger(__name__)

HEADER = [
    "board_id", "depth", "seed", "algorithm", "heuristic",
    "moves", "expanded", "time_sec", "time_us", "bound_final", "peak_depth",
    "termination",
]


@dataclass
class Instance:
    board_id: int
    seed: int
    depth: int
    state: Board


def make_instances(depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        for _ in range(per_depth):
            out.append(Instance(board_id=len(out) + 1, seed=seed, depth=d, state=scramble(d, seed)))
            seed += 1
    return out


def choose_algorithms(name: str) -> List[Algorithm]:
    return list(Algorithm) if name == "both" else [parse_algorithm(name)]


def choose_heuristics(name: str) -> List[Heuristic]:
    return list(Heuristic) if name == "all" else [parse_heuristic(name)]


def print_summary(inst: Instance, res) -> None:
    print(format_path(res.path))
    print()
    print(f"Scramble number:\t{inst.depth}")
    print(f"Algorithm:\t\t{res.algorithm}")
    print(f"Heuristic:\t\t{Heuristic(res.heuristic).label}")
    print(f"Moves:\t\t\t{res.moves}")
    print(f"Nodes expanded:\t\t{res.nodes_expanded}")
    print(f"Computation time:\t{max(1, int(res.time_sec * 1e6))} microseconds")
    print()


def run_one(w, inst: Instance, algo: Algorithm, heur: Heuristic, args) -> None:
    base = {"board_id": inst.board_id, "depth": inst.depth, "seed": inst.seed}
    try:
        res = search(algo, heur, inst.state, node_limit=args.node_limit, timeout_sec=args.timeout_sec)
    except SearchLimitExceeded as e:
        logger.warning("board %d (%s/%s): %s", inst.board_id, algo.label, heur.value, e)
        w.writerow({**base, "algorithm": algo.label, "heuristic": heur.value,
                    "expanded": e.nodes_expanded, "time_sec": f"{e.elapsed:.6f}",
                    "time_us": max(1, int(e.elapsed * 1e6)), "termination": "limit"})
        return
    except Unsolvable as e:
        logger.warning("board %d: %s", inst.board_id, e)
        w.writerow({**base, "algorithm": algo.label, "heuristic": heur.value, "termination": "unsolvable"})
        return
    w.writerow({**base, **res.as_row(), "termination": "ok"})
    if args.print_path:
        print_summary(inst, res)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="IDA*/RBFS 15-puzzle benchmark runner")
    ap.add_argument("--algo", choices=["ida", "rbfs", "both"], default="both")
    ap.add_argument("--heuristic", choices=[h.value for h in Heuristic] + ["all"], default="all")
    ap.add_argument("--depths", type=int, nargs="+", default=[10, 20, 30, 40, 50],
                    help="Scramble lengths (random blank moves from the goal)")
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--seed", type=int, default=0, help="Seed of the first scramble")
    ap.add_argument("--node_limit", type=int, default=None, help="Per-run node-expansion ceiling")
    ap.add_argument("--timeout_sec", type=float, default=None, help="Per-run wall time")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    ap.add_argument("--print_path", action="store_true", help="Print each solution path and summary")
    ap.add_argument("--log_level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv: Optional[Sequence[str]] = None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    algos = choose_algorithms(args.algo)
    heurs = choose_heuristics(args.heuristic)
    insts = make_instances(args.depths, args.per_depth, args.seed)
    args.out.parent.mkdir(parents=True, exist_ok=True)

    with args.out.open("w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=HEADER, restval="")
        w.writeheader()
        for algo in algos:
            for inst in insts:
                for heur in heurs:
                    run_one(w, inst, algo, heur, args)
            logger.info("%s done (%d instances)", algo.label, len(insts))

    print(f"Wrote {args.out} ({len(insts)} instances x {len(algos)} algorithms x {len(heurs)} heuristics)")


if __name__ == "__main__":
    main()
