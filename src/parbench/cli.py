from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Tuple

from .benchmark import WORKLOAD_NAMES, run_suite
from .config import MODES, Settings, load_settings


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return n


def _positive_float(value: str) -> float:
    f = float(value)
    if not f > 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {value}")
    return f


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="parbench", description="Sequential vs parallel micro-benchmarks")
    parser.add_argument("--only", nargs="+", choices=WORKLOAD_NAMES, help="Run only these workloads")
    parser.add_argument("--mode", choices=MODES, default=None, help="Executor kind for the parallel runs")
    parser.add_argument("--workers", type=_positive_int, default=None, help="Worker count (default: CPU count)")
    parser.add_argument("--scale", type=_positive_float, default=1.0, help="Multiply every dataset size by this factor")
    parser.add_argument("--out-json", dest="out_json", type=str, default="", help="Path to write results JSON")
    parser.add_argument("--out-png", dest="out_png", type=str, default="", help="Path to write plot PNG (needs --out-json)")
    parser.add_argument("--pause", action="store_true", help="Wait for Enter before exiting")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> Tuple[argparse.Namespace, Settings]:
    """Parse the command line and build the run settings.

    Invalid settings (e.g. a scale that empties the min/max dataset) are
    reported as usage errors.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.out_png and not args.out_json:
        parser.error("--out-png requires --out-json")
    try:
        settings = load_settings(mode=args.mode, workers=args.workers)
        if args.scale != 1.0:
            settings = settings.scaled(args.scale)
    except ValueError as e:
        parser.error(str(e))
    return args, settings


def main(argv: Optional[List[str]] = None) -> None:
    args, settings = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.out_json:
        Path(args.out_json).parent.mkdir(parents=True, exist_ok=True)

    print("=== parbench: sequential vs parallel ===\n")
    run_suite(settings, only=args.only, out_path=args.out_json or None)

    if args.out_png:
        from .viz import plot_results_json

        Path(args.out_png).parent.mkdir(parents=True, exist_ok=True)
        plot_results_json(args.out_json, args.out_png)
        print("Plot saved:", args.out_png)
    if args.out_json:
        print("Benchmark results saved:", args.out_json)

    print("All tasks finished.")
    if args.pause:
        input("Press Enter to exit.")


if __name__ == "__main__":
    main()
