# File: BASIC_PSO/Graphics/graphing.py
# Convergence and diversity plots for a single optimizer run.

import os
import traceback
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

import matplotlib
import matplotlib.pyplot as plt
import numpy as np

from BASIC_PSO.Logs.logger import log_debug, log_error, log_info, log_success, log_warning

# --- Module Name for Logging ---
module_name = Path(__file__).stem  # Gets 'graphing'


def generate_timestamped_filename(base_name: str, extension: str = "png") -> str:
    """
    Generate a filename with timestamp and base name.

    Returns:
        str: Timestamped filename in format "YYYYMMDD_HHMMSS_base_name.extension"
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{timestamp}_{base_name}.{extension}"


def _plot_series(steps, values, title, ylabel, color, output_dir, filename,
                 use_log_scale=False, show=False) -> Optional[str]:
    """Generic single-series line plot, saved to output_dir/filename."""
    if len(steps) == 0:
        log_warning(f"No data to plot for '{title}'.", module_name)
        return None

    log_info(f"Generating plot: {title}", module_name)
    values = np.asarray(values, dtype=float)

    fig = plt.figure(figsize=(10, 6))
    plt.plot(steps, values, label=ylabel, color=color, linewidth=1.5)
    plt.xlabel("PSO Iterations")
    plt.ylabel(ylabel + (" (log scale)" if use_log_scale else ""))
    plt.title(title)
    plt.legend(loc='best')
    plt.grid(True, which='both' if use_log_scale else 'major', linestyle='--')

    if use_log_scale:
        # Sphere-like objectives reach exactly 0, which log scale cannot show
        if np.all(values > 0):
            plt.yscale('log')
        else:
            log_debug(f"Non-positive values in '{title}', keeping linear scale.", module_name)

    plt.xlim(0, max(steps[-1], 1))
    plt.tight_layout()

    os.makedirs(output_dir, exist_ok=True)
    plot_filename = os.path.join(output_dir, filename)
    try:
        plt.savefig(plot_filename)
        log_success(f"Plot saved to {plot_filename}", module_name)
    except OSError as e:
        log_error(f"Could not save plot {plot_filename}: {e}", module_name)
        log_error(traceback.format_exc(), module_name)
        plot_filename = None

    if show and matplotlib.get_backend().lower() != "agg":
        plt.show()
    plt.close(fig)
    return plot_filename


def plot_gbest_convergence(gbest_history: Sequence[float], output_dir: str,
                           prefix: str = "pso", show: bool = False) -> Optional[str]:
    """Plots the global best value per iteration (index 0 is the initial swarm)."""
    steps = list(range(len(gbest_history)))
    return _plot_series(steps, gbest_history,
                        "Global Best Value Convergence", "Global Best Value", "tab:gray",
                        output_dir, generate_timestamped_filename(f"{prefix}_gbest"),
                        use_log_scale=True, show=show)


def plot_swarm_diversity(metrics_history: Sequence[dict], output_dir: str,
                         prefix: str = "pso", show: bool = False) -> Optional[str]:
    """Plots mean distance to the swarm centroid per iteration."""
    diversity = [m.get('swarm_diversity', np.nan) for m in metrics_history]
    steps = list(range(1, len(diversity) + 1))
    return _plot_series(steps, diversity,
                        "Swarm Diversity", "Mean Distance to Centroid", "tab:blue",
                        output_dir, generate_timestamped_filename(f"{prefix}_diversity"),
                        use_log_scale=True, show=show)
