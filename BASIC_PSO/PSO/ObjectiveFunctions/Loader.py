# Name registry of the benchmark functions, used by the CLI.
from BASIC_PSO.PSO.ObjectiveFunctions.Ackley import AckleyFunction
from BASIC_PSO.PSO.ObjectiveFunctions.Rastrigin import RastriginFunction
from BASIC_PSO.PSO.ObjectiveFunctions.Rosenbrock import RosenbrockFunction
from BASIC_PSO.PSO.ObjectiveFunctions.Sphere import SphereFunction

objective_function_classes = {
    "sphere": SphereFunction,
    "rastrigin": RastriginFunction,
    "rosenbrock": RosenbrockFunction,
    "ackley": AckleyFunction,
}


def get_objective_function(name: str, dim: int):
    try:
        func_class = objective_function_classes[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown objective function '{name}'. "
                         f"Available: {', '.join(sorted(objective_function_classes))}") from None
    return func_class(dim=dim)
