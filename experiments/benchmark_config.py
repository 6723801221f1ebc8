import os


class BenchmarkConfig:
    # --- Experiment Settings ---
    DENSITIES = [0.0, 0.05, 0.10, 0.15, 0.20, 0.25]   # Obstacle densities to test
    NUM_TRIALS = 20                                   # Number of maps per density
    RANDOM_SEED_BASE = 1000                           # Base seed for reproducibility

    # --- Output Paths ---
    _BASE_DIR = os.path.dirname(os.path.abspath(__file__))
    _PROJECT_DIR = os.path.dirname(_BASE_DIR)
    LOG_DIR = os.path.join(_PROJECT_DIR, "logs", "experiments_turns")

    # --- Map Parameters ---
    MAP_WIDTH = 60
    MAP_HEIGHT = 60
    MAX_WEIGHT = 1.0          # > 1 enables random terrain weights

    # --- Start & Goal (grid indices, inside the border wall) ---
    START = (1, 1)
    GOAL = (58, 58)

    # --- Algorithm Parameters ---
    # name -> JPSConfig kwargs
    VARIANTS = {
        'JPS': {'minimize_turns': False},
        'JPS-MT(L=3)': {'minimize_turns': True, 'look_ahead_distance': 3, 'turn_penalty': 0.5},
        'JPS-MT(L=8)': {'minimize_turns': True, 'look_ahead_distance': 8, 'turn_penalty': 0.5},
        'JPS-MT(L=8,p=2)': {'minimize_turns': True, 'look_ahead_distance': 8, 'turn_penalty': 2.0},
    }
