# === Central Hyperparameter Definition ===
# --- Swarm Config ---
NUM_PARTICLES = 30  # Number of particles
NUM_DIMENSIONS = 2  # Problem dimensionality
MAX_ITERATIONS = 100  # Fixed iteration budget, no early stopping

# --- Control Parameters ---
INERTIA_WEIGHT = 0.7  # w
COGNITIVE_COEFF = 1.5  # c1, pull toward personal best
SOCIAL_COEFF = 2.0  # c2, pull toward global best

# --- Search Space ---
LOWER_BOUND = -10.0  # Applied to every dimension
UPPER_BOUND = 10.0

# --- Objective ---
DEFAULT_FUNCTION = "sphere"

# --- Run Control ---
RANDOM_SEED = None  # None draws fresh OS entropy
REPORT_EVERY = 1  # Print a progress line every N iterations
TIME_LIMIT = None  # Seconds; None runs the full iteration budget

# --- Checkpoint/Output Config ---
CHECKPOINT_BASE_DIR = "Figures/"  # Relative path for saved plots
