# --- Rastrigin Function Implementation ---
import numpy as np

from BASIC_PSO.PSO.ObjectiveFunctions.ObjectiveFunction import ObjectiveFunction


class RastriginFunction(ObjectiveFunction):
    def __init__(self, dim=2):
        super().__init__(dim)
        self.bounds = (-5.12, 5.12)

    def evaluate(self, x: np.ndarray) -> float:
        return float(10 * self.dim + np.sum(x ** 2 - 10 * np.cos(2 * np.pi * x)))

    def evaluate_matrix(self, X: np.ndarray) -> np.ndarray:
        return 10 * X.shape[1] + np.sum(X ** 2 - 10 * np.cos(2 * np.pi * X), axis=1)
