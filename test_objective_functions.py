import numpy as np
import pytest

from BASIC_PSO.PSO.ObjectiveFunctions.Ackley import AckleyFunction
from BASIC_PSO.PSO.ObjectiveFunctions.Loader import get_objective_function, objective_function_classes
from BASIC_PSO.PSO.ObjectiveFunctions.Rastrigin import RastriginFunction
from BASIC_PSO.PSO.ObjectiveFunctions.Rosenbrock import RosenbrockFunction
from BASIC_PSO.PSO.ObjectiveFunctions.Sphere import SphereFunction


@pytest.mark.parametrize("func, optimum", [
    (SphereFunction(dim=3), np.zeros(3)),
    (RastriginFunction(dim=3), np.zeros(3)),
    (RosenbrockFunction(dim=3), np.ones(3)),
    (AckleyFunction(dim=3), np.zeros(3)),
])
def test_known_minimum_is_zero(func, optimum):
    assert func.evaluate(optimum) == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("name", sorted(objective_function_classes))
def test_evaluate_matrix_matches_rows(name):
    func = get_objective_function(name, dim=4)
    X = np.random.default_rng(3).uniform(func.bounds[0], func.bounds[1], (7, 4))
    expected = np.array([func.evaluate(x) for x in X])
    assert np.allclose(func.evaluate_matrix(X), expected)


def test_sphere_defaults_to_reference_box():
    assert SphereFunction().bounds == (-10, 10)
    assert SphereFunction()(np.array([3.0, 4.0])) == 25.0


def test_unknown_function_name():
    with pytest.raises(ValueError):
        get_objective_function("himmelblau", dim=2)


def test_surface_plot_saved(tmp_path):
    path = tmp_path / "sphere_surface.png"
    SphereFunction(dim=2).plot_3d_surface(resolution=20, save_path=str(path))
    assert path.exists()


def test_surface_plot_requires_two_dimensions():
    with pytest.raises(ValueError):
        SphereFunction(dim=3).plot_3d_surface()
