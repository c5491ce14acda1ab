"""Command line front end for the NSGA and NSGA-II drivers.

Usage:
    moop nsga PROBLEM POP_SIZE {decision-space,objective-space} MAX_ITERATIONS
    moop nsga2 PROBLEM POP_SIZE MAX_ITERATIONS [--decision-out PATH] [--objective-out PATH]

PROBLEM is "1" (squares) or "2" (ratio). Both commands print the size of
every front and the members of the first front. nsga2 also writes the
final population's variables and objectives as comma-separated files.
"""

import argparse
import logging

import numpy as np

from moop.algorithms import nsga, nsga2
from moop.io import write_population
from moop.operators import arithmetic_crossover, gaussian_mutation, one_point_crossover
from moop.problems import get_problem
from moop.results import NSGA2Result, NSGAResult
from moop.sharing import DistanceSpace

logger = logging.getLogger(__name__)

# Reference operator settings
ONE_POINT_PROB = 0.9
ARITHMETIC_ALPHA = 0.5
MUTATION_PROB = 0.03
MUTATION_SIGMA = 1.0


def _format_vector(values: np.ndarray) -> str:
    return "[" + ", ".join(f"{v:.6f}" for v in values) + "]"


def report(result: NSGAResult | NSGA2Result) -> str:
    """Render front sizes followed by the first front's members."""
    lines = []
    fronts = result.fronts
    for i, front in enumerate(fronts):
        lines.append(f"Front {i}: {len(front)} solutions")

    if fronts:
        lines.append("")
        lines.append("First front:")
        pop = result.population
        for idx in fronts[0]:
            lines.append(f"Solution: {_format_vector(pop.x[idx])} => Objectives: {_format_vector(pop.objectives[idx])}")
    return "\n".join(lines)


def _nsga_cmd(args) -> None:
    problem = get_problem(args.problem)
    space = DistanceSpace.parse(args.distance_space)
    bounds = (problem.lower, problem.upper)

    result = nsga(
        problem,
        crossover=one_point_crossover(ONE_POINT_PROB),
        mutate=gaussian_mutation(MUTATION_PROB, MUTATION_SIGMA, bounds),
        pop_size=args.pop_size,
        n_generations=args.max_iterations,
        distance_space=space,
        seed=args.seed,
    )
    print(report(result))


def _nsga2_cmd(args) -> None:
    problem = get_problem(args.problem)
    bounds = (problem.lower, problem.upper)

    result = nsga2(
        problem,
        crossover=arithmetic_crossover(ARITHMETIC_ALPHA, bounds),
        mutate=gaussian_mutation(MUTATION_PROB, MUTATION_SIGMA, bounds),
        pop_size=args.pop_size,
        n_generations=args.max_iterations,
        seed=args.seed,
    )
    print(report(result))

    write_population(args.decision_out, result.population.x)
    write_population(args.objective_out, result.population.objectives)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="moop", description="Multi-objective minimization with NSGA and NSGA-II.")
    p.add_argument("--seed", type=int, default=None, help="Seed for the run's random generator")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    nsga_p = sub.add_parser("nsga", help="Run NSGA with fitness sharing")
    nsga_p.add_argument("problem", help='Problem index ("1" or "2") or name')
    nsga_p.add_argument("pop_size", type=int)
    nsga_p.add_argument("distance_space", choices=[s.value for s in DistanceSpace])
    nsga_p.add_argument("max_iterations", type=int)
    nsga_p.set_defaults(func=_nsga_cmd)

    nsga2_p = sub.add_parser("nsga2", help="Run NSGA-II")
    nsga2_p.add_argument("problem", help='Problem index ("1" or "2") or name')
    nsga2_p.add_argument("pop_size", type=int)
    nsga2_p.add_argument("max_iterations", type=int)
    nsga2_p.add_argument("--decision-out", default="izlaz-dec.txt", help="File for the final decision variables")
    nsga2_p.add_argument("--objective-out", default="izlaz-obj.txt", help="File for the final objective values")
    nsga2_p.set_defaults(func=_nsga2_cmd)

    return p


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s - %(levelname)s - %(message)s")

    try:
        args.func(args)
    except (ValueError, KeyError, OSError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
