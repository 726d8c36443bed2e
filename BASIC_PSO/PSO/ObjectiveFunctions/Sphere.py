# --- Sphere Function Implementation ---
import numpy as np

from BASIC_PSO.PSO.ObjectiveFunctions.ObjectiveFunction import ObjectiveFunction


class SphereFunction(ObjectiveFunction):
    """f(x) = sum(x_j^2), minimum 0 at the origin."""

    def __init__(self, dim=2):
        super().__init__(dim)
        self.bounds = (-10, 10)

    def evaluate(self, x: np.ndarray) -> float:
        return float(np.sum(x ** 2))

    def evaluate_matrix(self, X: np.ndarray) -> np.ndarray:
        return np.sum(X ** 2, axis=1)
