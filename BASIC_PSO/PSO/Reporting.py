# File: BASIC_PSO/PSO/Reporting.py
# Progress hooks called by the swarm. Reporters only observe; they never touch swarm arrays.

import sys
from pathlib import Path

import numpy as np

from BASIC_PSO.Logs.logger import log_debug

module_name = Path(__file__).stem


def format_position(position, precision: int = 4) -> str:
    """
    Formats a vector as a bracketed, space separated list with `precision`
    significant digits, e.g. ``[0.001234 -2.5]``.
    """
    values = np.asarray(position, dtype=float).ravel()
    return "[" + " ".join(f"{v:.{precision}g}" for v in values) + "]"


class ProgressReporter:
    """Base reporter. Both hooks are no-ops."""

    def on_iteration(self, iteration: int, gbest_value: float):
        pass

    def on_finish(self, gbest_value: float, gbest_position: np.ndarray):
        pass


class SilentReporter(ProgressReporter):
    pass


class ConsoleReporter(ProgressReporter):
    """
    Prints one line per iteration followed by a two line summary.

    Args:
        report_every (int): Print only every N-th iteration (1 prints all).
        stream: File-like target, defaults to sys.stdout at call time.
    """

    def __init__(self, report_every: int = 1, stream=None):
        if report_every < 1:
            raise ValueError("report_every must be >= 1")
        self.report_every = report_every
        self.stream = stream

    def _print(self, line: str):
        print(line, file=self.stream if self.stream is not None else sys.stdout)

    def on_iteration(self, iteration: int, gbest_value: float):
        if iteration % self.report_every == 0:
            self._print(f"Iteration {iteration}: Best Value = {gbest_value:.6f}")
        log_debug(f"Reported iteration {iteration}", module_name)

    def on_finish(self, gbest_value: float, gbest_position: np.ndarray):
        self._print(f"Global Best Value = {gbest_value:.6f}")
        self._print(f"Global Best Position = {format_position(gbest_position)}")


class HistoryReporter(ProgressReporter):
    """Records (iteration, gbest_value) pairs; handy in tests and notebooks."""

    def __init__(self):
        self.iterations = []
        self.values = []
        self.final = None

    def on_iteration(self, iteration: int, gbest_value: float):
        self.iterations.append(iteration)
        self.values.append(gbest_value)

    def on_finish(self, gbest_value: float, gbest_position: np.ndarray):
        self.final = (gbest_value, np.array(gbest_position, copy=True))
