# --- Ackley Function Implementation ---
import numpy as np

from BASIC_PSO.PSO.ObjectiveFunctions.ObjectiveFunction import ObjectiveFunction


class AckleyFunction(ObjectiveFunction):
    def __init__(self, dim=2):
        super().__init__(dim)
        self.bounds = (-32, 32)

    def evaluate(self, x: np.ndarray) -> float:
        return float(-20 * np.exp(-0.2 * np.sqrt(np.sum(x ** 2) / self.dim))
                     - np.exp(np.sum(np.cos(2 * np.pi * x)) / self.dim) + 20 + np.e)
