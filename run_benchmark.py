#!/usr/bin/env python3
"""Benchmark the standard and optimized Floyd-Warshall variants.

Usage:
    python run_benchmark.py
    python run_benchmark.py --sizes 10 50 100 --density 0.5 --seed 7
    python run_benchmark.py --config config.json
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

log = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Compare standard and optimized Floyd-Warshall on random graphs"
    )
    parser.add_argument(
        "--sizes", type=int, nargs="+", default=None,
        help="Vertex counts to benchmark (default from config)",
    )
    parser.add_argument(
        "--density", type=float, default=None,
        help="Edge probability for the random graphs (default from config)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a run config JSON file",
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from dacite import DaciteError

    from apsp.benchmark import format_benchmark, run_benchmark
    from apsp.config import DEFAULT_CONFIG, load_config
    from apsp.reproducibility import set_seed

    if args.config and not Path(args.config).exists():
        print(f"Error: config file not found: {args.config}", file=sys.stderr)
        sys.exit(1)

    try:
        config = load_config(args.config) if args.config else DEFAULT_CONFIG
        benchmark = config.benchmark
        if args.sizes is not None:
            benchmark = replace(benchmark, sizes=tuple(args.sizes))
        if args.density is not None:
            benchmark = replace(benchmark, density=args.density)
        config = replace(
            config,
            benchmark=benchmark,
            seed=args.seed if args.seed is not None else config.seed,
        )

        rng = set_seed(config.seed)
        rows = run_benchmark(
            config.benchmark.sizes,
            config.benchmark.density,
            rng,
            max_vertices=config.engine.max_vertices,
            tolerance=config.engine.tolerance(),
        )
    except (ValueError, DaciteError) as exc:
        log.debug("Benchmark failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    print(format_benchmark(rows, config.benchmark.density), end="")


if __name__ == "__main__":
    main()
