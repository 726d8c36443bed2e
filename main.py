from BASIC_PSO.CONFIG import *
from BASIC_PSO.PSO.ObjectiveFunctions.Sphere import SphereFunction
from BASIC_PSO.PSO.PSO import optimize


if __name__ == "__main__":
    # Reference run: 30 particles on the 2-D Sphere over [-10, 10]
    obj_func = SphereFunction(dim=NUM_DIMENSIONS)
    optimize(obj_func,
             num_particles=NUM_PARTICLES,
             num_dimensions=NUM_DIMENSIONS,
             max_iterations=MAX_ITERATIONS,
             w=INERTIA_WEIGHT, c1=COGNITIVE_COEFF, c2=SOCIAL_COEFF,
             lb=LOWER_BOUND, ub=UPPER_BOUND)
