# File: BASIC_PSO/PSO/PSO.py
# Vectorized global-best PSO over a box [lb, ub]^dim.
# Hard position clamping, no velocity clamping, fixed iteration budget.

import math
import time
import numpy as np
from pathlib import Path  # To get module name
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from BASIC_PSO.CONFIG import *
from BASIC_PSO.Logs.logger import *
from BASIC_PSO.PSO.Errors import InvalidParameter, ObjectiveEvaluationFailure
from BASIC_PSO.PSO.Metrics.Metrics import SwarmMetrics
from BASIC_PSO.PSO.ObjectiveFunctions.ObjectiveFunction import ObjectiveFunction
from BASIC_PSO.PSO.RandomSource import UniformRandomSource, resolve_random_source
from BASIC_PSO.PSO.Reporting import ConsoleReporter, ProgressReporter, SilentReporter, format_position

# --- Module Name for Logging ---
module_name = Path(__file__).stem  # Gets 'PSO'

Objective = Union[ObjectiveFunction, Callable[[np.ndarray], float]]


def _is_int(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def _fail(message: str):
    log_error(message, module_name)
    raise InvalidParameter(message)


def validate_parameters(num_particles=None, num_dimensions=None, lb=None, ub=None,
                        max_iterations=None, w=None, c1=None, c2=None, time_limit=None):
    """
    Rejects malformed run configuration. Arguments left as None are not checked.

    Raises:
        InvalidParameter: on the first offending argument.
    """
    if num_particles is not None and (not _is_int(num_particles) or num_particles < 1):
        _fail(f"num_particles must be an integer >= 1, got {num_particles!r}")
    if num_dimensions is not None and (not _is_int(num_dimensions) or num_dimensions < 1):
        _fail(f"num_dimensions must be an integer >= 1, got {num_dimensions!r}")
    if max_iterations is not None and (not _is_int(max_iterations) or max_iterations < 0):
        _fail(f"max_iterations must be an integer >= 0, got {max_iterations!r}")
    if lb is not None or ub is not None:
        try:
            lb_f, ub_f = float(lb), float(ub)
        except (TypeError, ValueError):
            _fail(f"Bounds must be real numbers, got lb={lb!r}, ub={ub!r}")
        if not (math.isfinite(lb_f) and math.isfinite(ub_f)):
            _fail(f"Bounds must be finite, got lb={lb!r}, ub={ub!r}")
        if lb_f >= ub_f:
            _fail(f"Lower bound must be below upper bound, got lb={lb!r}, ub={ub!r}")
    for name, value in (("w", w), ("c1", c1), ("c2", c2)):
        if value is None:
            continue
        try:
            finite = math.isfinite(float(value))
        except (TypeError, ValueError):
            finite = False
        if not finite:
            _fail(f"{name} must be a finite real number, got {value!r}")
    if time_limit is not None:
        try:
            positive = float(time_limit) > 0
        except (TypeError, ValueError):
            positive = False
        if not positive:
            _fail(f"time_limit must be positive, got {time_limit!r}")


class OptimizationResult:
    """
    Outcome of one optimizer run.

    Unpacks as ``(gbest_value, gbest_position)``; the remaining attributes
    carry the trajectory summary.
    """

    def __init__(self, gbest_value: float, gbest_position: np.ndarray, iterations: int,
                 gbest_history: List[float], metrics_history: List[Dict[str, Any]],
                 terminated_early: bool = False):
        self.gbest_value = gbest_value
        self.gbest_position = gbest_position
        self.iterations = iterations
        self.gbest_history = gbest_history
        self.metrics_history = metrics_history
        self.terminated_early = terminated_early

    def __iter__(self):
        return iter((self.gbest_value, self.gbest_position))

    def __repr__(self):
        return (f"OptimizationResult(gbest_value={self.gbest_value:.6g}, "
                f"gbest_position={format_position(self.gbest_position)}, "
                f"iterations={self.iterations}, terminated_early={self.terminated_early})")


class PSOSwarm:
    """
    Swarm state for a single optimizer run, stored as NumPy arrays.

    Attributes:
        positions (np.ndarray): (num_particles, dim) current positions, always inside [lb, ub].
        velocities (np.ndarray): (num_particles, dim) current velocities, never clamped.
        previous_positions (np.ndarray): Positions before the last step.
        pbest_positions (np.ndarray): Best position each particle has visited.
        pbest_values (np.ndarray): Objective value at each pbest position.
        gbest_position (np.ndarray): Best position found by any particle.
        gbest_value (float): min(pbest_values).
    """

    def __init__(self,
                 objective_function: Objective,
                 num_particles: int = NUM_PARTICLES,
                 num_dimensions: Optional[int] = None,
                 lb: Optional[float] = None,
                 ub: Optional[float] = None,
                 rng: Optional[Union[UniformRandomSource, int]] = None):
        """
        Validates the configuration, then samples the initial swarm.

        Args:
            objective_function: ObjectiveFunction instance or plain callable on one vector.
            num_particles (int): Swarm size.
            num_dimensions (int): Problem dimension. Defaults to objective_function.dim.
            lb, ub (float): Box bounds. Default to objective_function.bounds.
            rng: Uniform random source, a seed, or None for fresh entropy.
        """
        objective_dim = getattr(objective_function, "dim", None)
        if num_dimensions is None:
            num_dimensions = objective_dim
        if lb is None and ub is None and hasattr(objective_function, "bounds"):
            lb, ub = objective_function.bounds
        if num_dimensions is None or lb is None or ub is None:
            _fail("num_dimensions, lb and ub are required when the objective does not define dim/bounds")
        validate_parameters(num_particles=num_particles, num_dimensions=num_dimensions, lb=lb, ub=ub)
        if _is_int(objective_dim) and objective_dim != num_dimensions:
            _fail(f"Objective expects {objective_dim} dimensions, swarm has {num_dimensions}")
        if not callable(objective_function) and not hasattr(objective_function, "evaluate_matrix"):
            message = f"Objective {objective_function!r} is not callable."
            log_error(message, module_name)
            raise TypeError(message)

        self.objective_function = objective_function
        self.num_particles = int(num_particles)
        self.dim = int(num_dimensions)
        self.bounds = (float(lb), float(ub))
        self.rng = resolve_random_source(rng)

        # --- Initialize Swarm State ---
        lower_bound, upper_bound = self.bounds
        self.positions: np.ndarray = lower_bound + (upper_bound - lower_bound) * self.rng.random(
            (self.num_particles, self.dim))
        self.velocities: np.ndarray = np.zeros((self.num_particles, self.dim))
        self.previous_positions: np.ndarray = self.positions.copy()

        self.pbest_positions: np.ndarray = self.positions.copy()
        self.pbest_values: np.ndarray = self._evaluate(self.positions)

        # argmin returns the first minimal index
        min_idx = int(np.argmin(self.pbest_values))
        self.gbest_position: np.ndarray = self.pbest_positions[min_idx].copy()
        self.gbest_value: float = float(self.pbest_values[min_idx])

        self.metrics_calculator = SwarmMetrics()

        log_info(f"Initialized PSO: {self.num_particles} particles, {self.dim} dimensions, "
                 f"bounds [{lower_bound}, {upper_bound}].", module_name)
        log_info(f"Initial GBest Value: {self.gbest_value:.4e}", module_name)

    def _evaluate(self, positions: np.ndarray) -> np.ndarray:
        """
        Evaluates the objective at every row of `positions`.

        The objective receives a copy, so it cannot alter swarm state.

        Raises:
            ObjectiveEvaluationFailure: if the objective raises, returns a
                wrongly shaped result, or returns NaN/Inf.
        """
        candidates = positions.copy()
        try:
            if hasattr(self.objective_function, 'evaluate_matrix') and callable(
                    self.objective_function.evaluate_matrix):
                values = self.objective_function.evaluate_matrix(candidates)
            else:
                values = [self.objective_function(p) for p in candidates]
            values = np.asarray(values, dtype=float)
        except Exception as e:
            message = f"Objective function raised {type(e).__name__}: {e}"
            log_error(message, module_name)
            raise ObjectiveEvaluationFailure(message, positions=candidates) from e

        if values.shape != (self.num_particles,):
            message = f"Objective returned shape {values.shape}, expected ({self.num_particles},)"
            log_error(message, module_name)
            raise ObjectiveEvaluationFailure(message, positions=candidates)

        bad_mask = ~np.isfinite(values)
        if np.any(bad_mask):
            bad_idx = int(np.argmax(bad_mask))
            message = (f"Objective returned non-finite value {values[bad_idx]} at "
                       f"{format_position(candidates[bad_idx])} (particle {bad_idx})")
            log_error(message, module_name)
            raise ObjectiveEvaluationFailure(message, positions=candidates[bad_mask])

        return values

    def optimize_step(self, omega: float, c1: float, c2: float, step: int = 0) -> Tuple[Dict[str, Any], float]:
        """
        Performs one PSO iteration.

        Args:
            omega (float): Inertia weight.
            c1 (float): Cognitive coefficient.
            c2 (float): Social coefficient.
            step (int): Iteration number, used for logging only.

        Returns:
            tuple: (metrics, gbest_value) after the step.
        """
        self.previous_positions = self.positions.copy()

        # --- Generate Random Numbers ---
        # Fresh per particle and per dimension, r1 drawn before r2
        r1 = self.rng.random((self.num_particles, self.dim))
        r2 = self.rng.random((self.num_particles, self.dim))

        # --- Update Velocities ---
        inertia_velocity = omega * self.velocities
        cognitive_velocity = c1 * r1 * (self.pbest_positions - self.positions)
        social_velocity = c2 * r2 * (self.gbest_position - self.positions)
        self.velocities = inertia_velocity + cognitive_velocity + social_velocity

        # --- Update Positions ---
        # Hard clamp; velocity is left as is even for particles pinned at a bound
        lower_bound, upper_bound = self.bounds
        self.positions = np.clip(self.positions + self.velocities, lower_bound, upper_bound)

        fitness_values = self._evaluate(self.positions)

        # --- Update Personal Bests ---
        # Strict improvement only; ties keep the old pbest
        improvement_mask = fitness_values < self.pbest_values
        self.pbest_positions[improvement_mask] = self.positions[improvement_mask]
        self.pbest_values[improvement_mask] = fitness_values[improvement_mask]

        # --- Update Global Best ---
        current_min_idx = int(np.argmin(self.pbest_values))
        current_best_value = float(self.pbest_values[current_min_idx])
        if current_best_value < self.gbest_value:
            self.gbest_value = current_best_value
            self.gbest_position = self.pbest_positions[current_min_idx].copy()

        metrics = self.metrics_calculator.compute(
            positions=self.positions,
            previous_positions=self.previous_positions,
            velocities=self.velocities,
            bounds=self.bounds,
        )
        metrics['improved_particles'] = int(np.sum(improvement_mask))
        metrics['gbest_value'] = self.gbest_value
        log_debug(f"Step {step}: gbest={self.gbest_value:.6e}, "
                  f"improved={metrics['improved_particles']}/{self.num_particles}", module_name)

        return metrics, self.gbest_value

    def run(self, max_iterations: int = MAX_ITERATIONS,
            omega: float = INERTIA_WEIGHT, c1: float = COGNITIVE_COEFF, c2: float = SOCIAL_COEFF,
            reporter: Optional[ProgressReporter] = None,
            time_limit: Optional[float] = TIME_LIMIT) -> OptimizationResult:
        """
        Runs `max_iterations` steps and returns the best position found.

        Args:
            max_iterations (int): Iteration budget; 0 returns the initial gbest.
            omega, c1, c2 (float): Control parameters, constant over the run.
            reporter (ProgressReporter): Progress hook. Silent when None.
            time_limit (float): Optional wall clock limit in seconds, checked
                before each iteration. When hit, the best so far is returned.
        """
        validate_parameters(max_iterations=max_iterations, w=omega, c1=c1, c2=c2, time_limit=time_limit)
        reporter = reporter if reporter is not None else SilentReporter()

        gbest_history = [self.gbest_value]
        metrics_history = []
        terminated_early = False
        completed = 0
        start_time = time.perf_counter()

        for iteration in range(1, max_iterations + 1):
            if time_limit is not None and time.perf_counter() - start_time >= time_limit:
                terminated_early = True
                log_warning(f"Time limit of {time_limit}s reached after {completed} iterations.", module_name)
                break
            metrics, gbest_value = self.optimize_step(omega, c1, c2, step=iteration)
            completed = iteration
            gbest_history.append(gbest_value)
            metrics_history.append(metrics)
            reporter.on_iteration(iteration, gbest_value)

        reporter.on_finish(self.gbest_value, self.gbest_position)
        log_info(f"Finished {completed} iterations. GBest Value: {self.gbest_value:.6e}", module_name)

        return OptimizationResult(
            gbest_value=self.gbest_value,
            gbest_position=self.gbest_position.copy(),
            iterations=completed,
            gbest_history=gbest_history,
            metrics_history=metrics_history,
            terminated_early=terminated_early,
        )


def optimize(objective: Objective,
             num_particles: int = NUM_PARTICLES,
             num_dimensions: int = NUM_DIMENSIONS,
             max_iterations: int = MAX_ITERATIONS,
             w: float = INERTIA_WEIGHT,
             c1: float = COGNITIVE_COEFF,
             c2: float = SOCIAL_COEFF,
             lb: float = LOWER_BOUND,
             ub: float = UPPER_BOUND,
             rng: Optional[Union[UniformRandomSource, int]] = RANDOM_SEED,
             reporter: Optional[ProgressReporter] = None,
             time_limit: Optional[float] = TIME_LIMIT) -> OptimizationResult:
    """
    Minimizes `objective` over [lb, ub]^num_dimensions.

    Every parameter is validated before the swarm is allocated. Progress is
    printed through a ConsoleReporter unless another reporter is given.

    Returns:
        OptimizationResult, which unpacks as (gbest_value, gbest_position).

    Raises:
        InvalidParameter: malformed configuration.
        ObjectiveEvaluationFailure: objective raised or returned NaN/Inf.
    """
    validate_parameters(num_particles=num_particles, num_dimensions=num_dimensions, lb=lb, ub=ub,
                        max_iterations=max_iterations, w=w, c1=c1, c2=c2, time_limit=time_limit)
    if reporter is None:
        reporter = ConsoleReporter(report_every=REPORT_EVERY)

    swarm = PSOSwarm(objective, num_particles=num_particles, num_dimensions=num_dimensions,
                     lb=lb, ub=ub, rng=rng)
    return swarm.run(max_iterations=max_iterations, omega=w, c1=c1, c2=c2,
                     reporter=reporter, time_limit=time_limit)
