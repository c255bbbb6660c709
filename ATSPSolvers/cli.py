from __future__ import annotations

import argparse
import json
import logging
import pathlib
import sys
from typing import Iterable

from ATSPSolvers.config import (
    DEFAULT_CROSSOVER_RATE,
    DEFAULT_MUTATION_RATE,
    DEFAULT_POPULATION_SIZE,
    DEFAULT_STAGNATION_FACTOR,
    DEFAULT_TABU_CAPACITY,
    DEFAULT_TIME_LIMIT_MILLIS,
    CrossoverOperator,
    GeneticConfig,
    SwapOperator,
    TabuSearchConfig,
)
from ATSPSolvers.core import solve
from ATSPSolvers.instances import generate_graph, read_tsplib
from ATSPSolvers.solvers import SOLVER_FAMILIES, SolverResult
from ATSPSolvers.utils.taxonomy import AlgorithmFamily

logger = logging.getLogger("ATSPSolvers.cli")


def parse_args(raw_args: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Solve an asymmetric TSP instance with one strategy.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--input", type=pathlib.Path, help="TSPLIB .atsp file (EXPLICIT FULL_MATRIX).")
    source.add_argument("--random", type=int, metavar="N", help="Generate a random N-node cost matrix.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for matrix generation and heuristics.")
    parser.add_argument(
        "--method",
        choices=sorted(SOLVER_FAMILIES),
        default="held_karp",
        help="Solving strategy (default: held_karp).",
    )
    parser.add_argument("--start-vertex", type=int, default=0, help="Start vertex for exact methods.")
    parser.add_argument(
        "--time-limit",
        type=int,
        default=DEFAULT_TIME_LIMIT_MILLIS,
        help="Heuristic time budget in milliseconds.",
    )
    parser.add_argument(
        "--swap-operator",
        choices=[op.value for op in SwapOperator],
        default=SwapOperator.VERTEX_SWAP.value,
        help="Neighbourhood move for tabu search.",
    )
    parser.add_argument("--tabu-capacity", type=int, default=DEFAULT_TABU_CAPACITY)
    parser.add_argument("--stagnation-factor", type=int, default=DEFAULT_STAGNATION_FACTOR)
    parser.add_argument("--population-size", type=int, default=DEFAULT_POPULATION_SIZE)
    parser.add_argument("--crossover-rate", type=float, default=DEFAULT_CROSSOVER_RATE)
    parser.add_argument("--mutation-rate", type=float, default=DEFAULT_MUTATION_RATE)
    parser.add_argument(
        "--crossover-operator",
        choices=[op.value for op in CrossoverOperator],
        default=CrossoverOperator.ORDER.value,
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every improvement.")
    return parser.parse_args(raw_args)


def solver_options(args: argparse.Namespace) -> dict:
    if SOLVER_FAMILIES[args.method] is AlgorithmFamily.EXACT:
        return {"start_vertex": args.start_vertex}
    if args.method == "tabu_search":
        config = TabuSearchConfig(
            time_limit_millis=args.time_limit,
            swap_operator=args.swap_operator,
            tabu_capacity=args.tabu_capacity,
            stagnation_limit_factor=args.stagnation_factor,
        )
    else:
        config = GeneticConfig(
            time_limit_millis=args.time_limit,
            population_size=args.population_size,
            crossover_rate=args.crossover_rate,
            mutation_rate=args.mutation_rate,
            crossover_operator=args.crossover_operator,
        )
    return {"config": config, "rng": args.seed}


def format_result(result: SolverResult) -> str:
    return "\n".join(
        [
            f"Method: {result.name}",
            f"Best path: {' -> '.join(str(node) for node in result.best_tour)}",
            f"Path cost: {result.best_cost}",
            f"Time: {result.elapsed_millis:.3f} ms",
        ]
    )


def main(raw_args: Iterable[str] | None = None) -> int:
    args = parse_args(raw_args)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s | %(message)s",
    )

    try:
        if args.input is not None:
            graph = read_tsplib(args.input).graph
        else:
            graph = generate_graph(args.random, rng=args.seed)
        result = solve(graph, args.method, **solver_options(args))
    except (OSError, ValueError, IndexError) as exc:
        logger.error("%s", exc)
        return 1

    if args.json:
        payload = {
            "name": result.name,
            "best_tour": result.best_tour,
            "best_cost": result.best_cost,
            "elapsed_millis": result.elapsed_millis,
            "status": result.status,
            "metadata": result.metadata,
        }
        print(json.dumps(payload, indent=2))
    else:
        print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
