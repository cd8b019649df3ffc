#!/usr/bin/env python3
"""Entry point for solving all-pairs shortest paths on a graph file.

Chains the stages into a single command:
file validation -> loading -> Floyd-Warshall -> path queries ->
results file / result.json / heatmap.

Usage:
    python run_floyd.py graph.txt
    python run_floyd.py -v -o results.txt graph.txt
    python run_floyd.py -p 0 3 graph.txt
    python run_floyd.py -s -m --config config.json graph.txt
    python run_floyd.py --generate 20 sample.txt
    python run_floyd.py sample.txt --generate

Graph file format:
    Line 1: number_of_vertices
    Line 2: number_of_edges
    Following lines: from_vertex to_vertex weight
"""

import argparse
import logging
import sys
import time
from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path
from typing import Generator

log = logging.getLogger(__name__)

# Value stored by a bare --generate; the vertex count comes from the config
SAMPLE_FROM_CONFIG = "config"


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that logs stage start and elapsed time."""
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    log.info("Completed: %s in %.3fs", name, time.monotonic() - t0)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="All-pairs shortest paths with the Floyd-Warshall algorithm",
        epilog="Example: %(prog)s -v -o results.txt graph.txt",
    )
    parser.add_argument("graph_file", type=str, help="Path to the graph file")
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Print the input graph, distance matrix and DEBUG-level logs",
    )
    parser.add_argument(
        "-o", "--output", type=str, default=None, metavar="FILE",
        help="Save the distance matrix and all paths to FILE",
    )
    parser.add_argument(
        "-p", "--path", type=int, nargs=2, default=None, metavar=("START", "END"),
        help="Show the shortest path from START to END",
    )
    parser.add_argument(
        "-s", "--optimized", action="store_true",
        help="Use the early-terminating variant",
    )
    parser.add_argument(
        "-m", "--memory", action="store_true",
        help="Show matrix memory statistics",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a run config JSON file",
    )
    parser.add_argument(
        "--json-dir", type=str, default=None, metavar="DIR",
        help="Write result.json under DIR/<run_id>/",
    )
    parser.add_argument(
        "--plot-dir", type=str, default=None, metavar="DIR",
        help="Write a distance heatmap (PNG + SVG) to DIR",
    )
    parser.add_argument(
        "--generate", type=int, nargs="?", const=SAMPLE_FROM_CONFIG, default=None,
        metavar="VERTICES",
        help=(
            "Write a random sample graph to graph_file before solving "
            "(VERTICES defaults to the config's sample.vertices)"
        ),
    )
    return parser


def run(args: argparse.Namespace) -> int:
    """Execute one solve as described by parsed arguments.

    Returns:
        Process exit code: 0 on success, 1 on any error.
    """
    from apsp.config import DEFAULT_CONFIG, load_config
    from apsp.engine import execute, execute_optimized
    from apsp.graph import memory_usage
    from apsp.io import (
        GraphFileError,
        generate_sample_graph_file,
        load_graph_file,
        validate_graph_file,
    )
    from apsp.reporting import (
        format_distances,
        format_execution_report,
        format_graph,
        format_path,
        write_results,
    )
    from apsp.reproducibility import set_seed

    config = load_config(args.config) if args.config else DEFAULT_CONFIG
    if args.optimized:
        config = replace(config, engine=replace(config.engine, optimized=True))
    graph_path = Path(args.graph_file)

    if args.generate is not None:
        if args.generate == SAMPLE_FROM_CONFIG:
            vertices = config.sample.vertices
        else:
            vertices = args.generate
        with stage_timer("Sample Generation"):
            rng = set_seed(config.seed)
            n_edges = generate_sample_graph_file(
                graph_path,
                vertices,
                config.sample.density,
                rng,
                min_weight=config.sample.min_weight,
                max_weight=config.sample.max_weight,
                max_vertices=config.engine.max_vertices,
            )
        print(f"Sample graph written to {graph_path}: {vertices} vertices, {n_edges} edges")

    errors = validate_graph_file(graph_path, config.engine.max_vertices)
    if errors:
        print(f"Error: Invalid graph file format: {graph_path}", file=sys.stderr)
        for error in errors:
            print(f"  - {error}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Loading graph from file: {graph_path}")
    with stage_timer("Graph Loading"):
        try:
            graph = load_graph_file(graph_path, config.engine)
        except GraphFileError as exc:
            print(f"Error: Failed to load graph from file: {graph_path}", file=sys.stderr)
            print(f"  {exc}", file=sys.stderr)
            return 1

    if args.verbose:
        print(f"Graph loaded successfully: {graph.vertex_count} vertices")
        print("Initial graph:")
        print(format_graph(graph), end="")

    if args.path is not None:
        start, end = args.path
        if not (graph.contains(start) and graph.contains(end)):
            print(
                f"Error: Invalid path vertices. Valid range: 0-{graph.vertex_count - 1}",
                file=sys.stderr,
            )
            return 1

    variant = "optimized" if config.engine.optimized else "standard"
    if args.verbose:
        print(f"Executing {variant} Floyd-Warshall algorithm...")
    with stage_timer(f"Floyd-Warshall ({variant})"):
        report = execute_optimized(graph) if config.engine.optimized else execute(graph)

    if not report.success:
        print("Error: Algorithm execution failed", file=sys.stderr)
        for error in graph.validate():
            print(f"  - {error}", file=sys.stderr)
        return 1

    if args.verbose or (args.output is None and args.path is None):
        print(format_execution_report(report), end="")

    if report.has_negative_cycle:
        log.warning("Negative cycle through vertex %s", report.negative_cycle_vertex)
        print("Warning: Negative cycle detected in the graph.")
        if report.negative_cycle_vertex is not None:
            print(f"Negative cycle involves vertex {report.negative_cycle_vertex}")
    else:
        if args.verbose and args.path is None:
            print(format_distances(graph), end="")

        if args.path is not None:
            print(format_path(graph, *args.path), end="")

        if args.output is not None:
            try:
                write_results(graph, args.output, report)
                print(f"Results saved to: {args.output}")
            except OSError as exc:
                log.warning("Writing %s failed: %s", args.output, exc)
                print(f"Error: Failed to save results to: {args.output}", file=sys.stderr)

        if args.plot_dir is not None:
            from apsp.visualization import render_distance_heatmap

            try:
                with stage_timer("Heatmap"):
                    png_path, _ = render_distance_heatmap(graph, args.plot_dir)
                print(f"Heatmap saved to: {png_path}")
            except OSError as exc:
                log.warning("Writing heatmap to %s failed: %s", args.plot_dir, exc)
                print(f"Error: Failed to save heatmap to: {args.plot_dir}", file=sys.stderr)

    if args.json_dir is not None:
        from apsp.results import build_result, write_result

        result = build_result(config, graph, report, graph_file=str(graph_path))
        try:
            result_path = write_result(result, args.json_dir)
            print(f"Result JSON saved to: {result_path}")
        except OSError as exc:
            log.warning("Writing result JSON to %s failed: %s", args.json_dir, exc)
            print(f"Error: Failed to save result JSON to: {args.json_dir}", file=sys.stderr)

    if args.memory:
        stats = memory_usage(graph)
        print("=== Memory Statistics ===")
        print(f"Distance matrix:  {stats.distance_bytes} bytes")
        print(f"Successor matrix: {stats.successor_bytes} bytes")
        print(f"Total:            {stats.total_bytes} bytes ({stats.total_kb:.2f} KB)")
        print(f"Allocations:      {stats.allocations}")

    if args.verbose:
        print("Program completed successfully.")
    return 0


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from dacite import DaciteError

    from apsp.graph import AllocationError

    if args.config and not Path(args.config).exists():
        print(f"Error: config file not found: {args.config}", file=sys.stderr)
        sys.exit(1)

    try:
        exit_code = run(args)
    except AllocationError:
        log.exception("Out of memory")
        print("Fatal: memory allocation failed", file=sys.stderr)
        sys.exit(1)
    except (ValueError, DaciteError) as exc:
        # config validation, malformed config JSON, bad sample arguments
        log.debug("Run failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
