"""Command-line interface for gsearch."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path
from statistics import median
from time import perf_counter
from typing import Any, Dict, List, Optional

from gsearch.domains.grid import GridMaze
from gsearch.loader import load_problem
from gsearch.logging import get_logger, level_from_flags, set_global_log_level
from gsearch.problem import Problem

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.000012 -> "12.0 us"; 0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 0.001:
        return f"{seconds * 1_000_000.0:.1f} us"
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    """Return grammatically correct unit for count n."""
    if n == 1:
        return singular
    return plural or (singular + "s")


def _solve_problem(path: Path, naive: bool, as_json: bool) -> None:
    """Load a problem file, run the search and print the result."""
    logger.info(f"Loading problem from: {path}")
    _start_time = perf_counter()

    try:
        problem = load_problem(path)

        if naive:
            logger.info("Using the path-copying search variant")
            result = problem.solve(naive=True)
            summary: Optional[Dict[str, Any]] = None
        else:
            result, run_summary = problem.solve_with_summary()
            summary = asdict(run_summary)

        _elapsed = perf_counter() - _start_time

        if as_json:
            payload = {
                "name": problem.name,
                "found": result is not None,
                "path": result,
                "summary": summary,
            }
            print(json.dumps(payload, indent=2, default=str))
        else:
            _print_result(problem, result, summary)

        logger.info(f"Problem '{problem.name}' solved in {_format_duration(_elapsed)}")

    except FileNotFoundError:
        logger.error(f"Problem file not found: {path}")
        print(f"❌ ERROR: Problem file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to solve problem: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to solve problem: {type(e).__name__}: {e}")
        sys.exit(1)


def _print_result(
    problem: Problem, result: Optional[List[Any]], summary: Optional[Dict[str, Any]]
) -> None:
    print(f"Problem: {problem.name}")
    if result is None:
        print("❌ No path: every reachable state was expanded without reaching a goal")
    else:
        steps = len(result) - 1
        print(f"✅ Path found: {steps} {_plural(steps, 'step')}")
        print("   " + " -> ".join(repr(state) for state in result))
        if isinstance(problem.domain, GridMaze):
            print()
            print(problem.domain.render(result))
    if summary is not None:
        print()
        print(
            f"   expanded={summary['expanded']} generated={summary['generated']}"
            f" duplicates_skipped={summary['duplicates_skipped']}"
            f" max_frontier={summary['max_frontier']}"
        )


def _bench_problem(path: Path, iterations: int, naive: bool) -> None:
    """Solve a problem repeatedly and report timing.

    Every run must return the same path as the first one.
    """
    logger.info(f"Loading problem from: {path}")

    try:
        if iterations <= 0:
            raise ValueError(f"iterations must be positive, got {iterations}")
        problem = load_problem(path)
        variant = "path-copying" if naive else "tree"
        logger.info(
            f"Benchmarking '{problem.name}' with the {variant} variant for "
            f"{iterations} {_plural(iterations, 'iteration')}"
        )

        durations: List[float] = []
        reference: Optional[List[Any]] = None
        for i in range(iterations):
            t0 = perf_counter()
            result = problem.solve(naive=naive)
            durations.append(perf_counter() - t0)
            if i == 0:
                reference = result
            elif result != reference:
                raise RuntimeError(f"Iteration {i} returned a different path")

        total = sum(durations)
        found = "no path" if reference is None else f"{len(reference) - 1} steps"
        print(f"Problem: {problem.name} ({variant} variant, {found})")
        print(f"   iterations: {iterations}")
        print(f"   total:      {_format_duration(total)}")
        print(f"   median:     {_format_duration(median(durations))}")
        print(f"   min:        {_format_duration(min(durations))}")
        print(f"   max:        {_format_duration(max(durations))}")
        logger.info(f"Benchmark completed in {_format_duration(total)}")

    except FileNotFoundError:
        logger.error(f"Problem file not found: {path}")
        print(f"❌ ERROR: Problem file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Benchmark failed: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Benchmark failed: {type(e).__name__}: {e}")
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``gsearch`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="gsearch",
        description="Solve breadth-first search problems described in YAML.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress informational logs"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{solve,bench}",
        help="Available commands",
    )

    solve_parser = subparsers.add_parser("solve", help="Solve a problem file")
    solve_parser.add_argument("problem", type=Path, help="Path to problem YAML")
    solve_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )

    bench_parser = subparsers.add_parser(
        "bench", help="Solve a problem repeatedly and report timing"
    )
    bench_parser.add_argument("problem", type=Path, help="Path to problem YAML")
    bench_parser.add_argument(
        "--iterations",
        "-n",
        type=int,
        default=1000,
        help="Number of runs (default: 1000)",
    )

    for p in (solve_parser, bench_parser):
        p.add_argument(
            "--naive",
            action="store_true",
            help="Use the path-copying variant instead of the search tree",
        )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    set_global_log_level(level_from_flags(verbose=args.verbose, quiet=args.quiet))
    logger.debug("Debug logging enabled")

    if args.command == "solve":
        _solve_problem(args.problem, naive=args.naive, as_json=args.json)
    elif args.command == "bench":
        _bench_problem(args.problem, iterations=args.iterations, naive=args.naive)


if __name__ == "__main__":
    main()
