#!/usr/bin/env python3
"""
PSO Runner Script

Runs the particle swarm optimizer on one of the benchmark functions and
prints per-iteration progress followed by the final global best.
"""

import argparse
import sys

from BASIC_PSO.CONFIG import *
from BASIC_PSO.Graphics.graphing import plot_gbest_convergence, plot_swarm_diversity
from BASIC_PSO.Logs import logger
from BASIC_PSO.Logs.logger import log_error, log_header, log_info
from BASIC_PSO.PSO.Errors import InvalidParameter, ObjectiveEvaluationFailure
from BASIC_PSO.PSO.ObjectiveFunctions.Loader import get_objective_function, objective_function_classes
from BASIC_PSO.PSO.PSO import optimize
from BASIC_PSO.PSO.Reporting import ConsoleReporter, SilentReporter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Minimize a benchmark function with Particle Swarm Optimization')

    parser.add_argument('--function', type=str, default=DEFAULT_FUNCTION,
                        help=f'Objective function to minimize (default: {DEFAULT_FUNCTION})')
    parser.add_argument('--particles', type=int, default=NUM_PARTICLES,
                        help=f'Number of particles (default: {NUM_PARTICLES})')
    parser.add_argument('--dim', type=int, default=NUM_DIMENSIONS,
                        help=f'Problem dimension (default: {NUM_DIMENSIONS})')
    parser.add_argument('--iterations', type=int, default=MAX_ITERATIONS,
                        help=f'Number of PSO iterations (default: {MAX_ITERATIONS})')

    parser.add_argument('--omega', type=float, default=INERTIA_WEIGHT,
                        help=f'Inertia weight (default: {INERTIA_WEIGHT})')
    parser.add_argument('--c1', type=float, default=COGNITIVE_COEFF,
                        help=f'Cognitive coefficient (default: {COGNITIVE_COEFF})')
    parser.add_argument('--c2', type=float, default=SOCIAL_COEFF,
                        help=f'Social coefficient (default: {SOCIAL_COEFF})')
    parser.add_argument('--lb', type=float, default=None,
                        help="Lower bound (default: the function's own bounds)")
    parser.add_argument('--ub', type=float, default=None,
                        help="Upper bound (default: the function's own bounds)")

    parser.add_argument('--seed', type=int, default=RANDOM_SEED,
                        help='Random seed for a reproducible run (default: fresh entropy)')
    parser.add_argument('--report-every', type=int, default=REPORT_EVERY,
                        help=f'Print progress every N iterations (default: {REPORT_EVERY})')
    parser.add_argument('--time-limit', type=float, default=TIME_LIMIT,
                        help='Stop after this many seconds, keeping the best so far')
    parser.add_argument('--quiet', action='store_true',
                        help='Suppress per-iteration progress lines')
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug logging')

    # Plotting options
    parser.add_argument('--plot', action='store_true',
                        help='Save convergence and diversity plots after the run')
    parser.add_argument('--show-plots', action='store_true',
                        help='Display plots in addition to saving them')
    parser.add_argument('--checkpoint-dir', type=str, default=CHECKPOINT_BASE_DIR,
                        help=f'Directory for saved plots (default: {CHECKPOINT_BASE_DIR})')
    parser.add_argument('--list-functions', action='store_true',
                        help='List available objective functions and exit')
    return parser


def main(argv=None) -> int:
    """Main function to run a single PSO optimization."""
    args = build_parser().parse_args(argv)

    if args.list_functions:
        print("Available objective functions:")
        for name, func_class in sorted(objective_function_classes.items()):
            print(f"  {name}: {func_class.__name__}")
        return 0

    logger.set_debug(args.debug)
    log_header("PSO Runner", "main")

    try:
        obj_func = get_objective_function(args.function, dim=args.dim)
    except ValueError as e:
        log_error(str(e), "main")
        return 2

    lb = args.lb if args.lb is not None else obj_func.bounds[0]
    ub = args.ub if args.ub is not None else obj_func.bounds[1]

    log_info("Configuration:", "main")
    log_info(f"  Function: {obj_func.__class__.__name__}", "main")
    log_info(f"  Particles: {args.particles}, Dimensions: {args.dim}, Iterations: {args.iterations}", "main")
    log_info(f"  omega={args.omega}, c1={args.c1}, c2={args.c2}, bounds=[{lb}, {ub}]", "main")
    log_info(f"  Seed: {args.seed}", "main")

    if args.quiet:
        reporter = SilentReporter()
    else:
        try:
            reporter = ConsoleReporter(report_every=args.report_every)
        except ValueError as e:
            log_error(str(e), "main")
            return 2

    try:
        result = optimize(obj_func,
                          num_particles=args.particles,
                          num_dimensions=args.dim,
                          max_iterations=args.iterations,
                          w=args.omega, c1=args.c1, c2=args.c2,
                          lb=lb, ub=ub,
                          rng=args.seed,
                          reporter=reporter,
                          time_limit=args.time_limit)
    except InvalidParameter:
        return 2
    except ObjectiveEvaluationFailure:
        return 1

    if args.quiet:
        ConsoleReporter().on_finish(result.gbest_value, result.gbest_position)

    if args.plot or args.show_plots:
        prefix = f"{args.function}_{args.dim}d"
        plot_gbest_convergence(result.gbest_history, args.checkpoint_dir, prefix, show=args.show_plots)
        plot_swarm_diversity(result.metrics_history, args.checkpoint_dir, prefix, show=args.show_plots)

    return 0


if __name__ == "__main__":
    sys.exit(main())
