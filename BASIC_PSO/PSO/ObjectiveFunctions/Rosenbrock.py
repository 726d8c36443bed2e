import numpy as np

from BASIC_PSO.PSO.ObjectiveFunctions.ObjectiveFunction import ObjectiveFunction


class RosenbrockFunction(ObjectiveFunction):
    def __init__(self, dim=2):
        super().__init__(dim)
        self.bounds = (-30, 30)

    def evaluate(self, x: np.ndarray) -> float:
        return float(np.sum(100 * (x[1:] - x[:-1] ** 2) ** 2 + (x[:-1] - 1) ** 2))

    def evaluate_matrix(self, X: np.ndarray) -> np.ndarray:
        return np.sum(100 * (X[:, 1:] - X[:, :-1] ** 2) ** 2 + (X[:, :-1] - 1) ** 2, axis=1)
