# --- Objective Function Base Class ---
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

import numpy as np
from matplotlib import pyplot as plt

from BASIC_PSO.Logs.logger import log_success

module_name = Path(__file__).stem


class ObjectiveFunction(ABC):
    """
    A scalar function to minimize over a box.

    Subclasses implement `evaluate` for a single position. `evaluate_matrix`
    falls back to a row loop; vectorized subclasses override it.
    """

    def __init__(self, dim=2):
        self.dim = dim
        self.bounds = (-5.12, 5.12)  # Default bounds

    @abstractmethod
    def evaluate(self, x: np.ndarray) -> float:
        pass

    def evaluate_matrix(self, X: np.ndarray) -> np.ndarray:
        return np.array([self.evaluate(x) for x in X], dtype=float)

    def __call__(self, x: np.ndarray) -> float:
        return self.evaluate(x)

    def plot_3d_surface(self, resolution=100, save_path: Optional[str] = None, show=False):
        if self.dim != 2:
            raise ValueError("3D surface plot only supports 2D objective functions.")

        x = np.linspace(self.bounds[0], self.bounds[1], resolution)
        y = np.linspace(self.bounds[0], self.bounds[1], resolution)
        X, Y = np.meshgrid(x, y)

        Z = self.evaluate_matrix(np.column_stack([np.ravel(X), np.ravel(Y)])).reshape(X.shape)

        fig = plt.figure(figsize=(10, 7))
        ax = fig.add_subplot(111, projection='3d')
        ax.plot_surface(X, Y, Z, cmap='viridis', edgecolor='k', alpha=0.8)
        ax.set_title(f"3D Surface of {self.__class__.__name__}")
        ax.set_xlabel("x1")
        ax.set_ylabel("x2")
        ax.set_zlabel("f(x)")

        if save_path is not None:
            Path(save_path).parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(save_path)
            log_success(f"Surface plot saved to {save_path}", module_name)
        if show:
            plt.show()
        plt.close(fig)
        return save_path
