# File: BASIC_PSO/PSO/Metrics/Metrics.py
# Read-only swarm statistics computed once per iteration.

import numpy as np
from pathlib import Path  # To get module name

from BASIC_PSO.Logs.logger import log_debug, log_warning

# --- Module Name for Logging ---
module_name = Path(__file__).stem  # Gets 'Metrics'


class SwarmMetrics:
    """
    Calculates swarm metrics using vectorized NumPy operations.

    None of the inputs are modified; callers may pass live swarm arrays.
    """

    def compute(self,
                positions: np.ndarray,
                previous_positions: np.ndarray,
                velocities: np.ndarray,
                bounds: tuple) -> dict:
        """
        Computes swarm metrics from the provided state arrays.

        Args:
            positions: Current particle positions (after clamping).
            previous_positions: Positions before this iteration's update.
            velocities: Current particle velocities.
            bounds: Problem bounds (lower, upper).

        Returns:
            dict with keys avg_step_size, avg_current_velocity_magnitude,
            swarm_diversity and bound_contact_ratio.
        """
        if previous_positions is None or positions.shape != previous_positions.shape:
            log_warning("Compute called with mismatched arrays.", module_name)
            return {
                'avg_step_size': np.nan,
                'avg_current_velocity_magnitude': np.nan,
                'swarm_diversity': np.nan,
                'bound_contact_ratio': np.nan,
            }

        num_particles = positions.shape[0]
        metrics = {}

        # 1. Average distance travelled this step
        step_sizes = np.linalg.norm(positions - previous_positions, axis=1)
        metrics['avg_step_size'] = float(np.mean(step_sizes))

        # 2. Velocity magnitude (unclamped, may exceed the box width)
        metrics['avg_current_velocity_magnitude'] = float(np.mean(np.linalg.norm(velocities, axis=1)))

        # 3. Swarm diversity: mean distance to centroid
        if num_particles > 1:
            centroid = np.mean(positions, axis=0)
            metrics['swarm_diversity'] = float(np.mean(np.linalg.norm(positions - centroid, axis=1)))
        else:
            metrics['swarm_diversity'] = 0.0  # Defined as 0 for single particle

        # 4. Particles pinned against a bound by the hard clamp
        lower_bound, upper_bound = bounds
        on_bound = np.any((positions == lower_bound) | (positions == upper_bound), axis=1)
        metrics['bound_contact_ratio'] = float(np.sum(on_bound)) / num_particles

        log_debug(f"Computed metrics: {metrics}", module_name)
        return metrics
