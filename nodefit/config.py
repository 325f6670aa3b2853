import os

# Plan output
UNASSIGNED_LABEL = "NULL"

# Input format
COMMENT_PREFIX = "#"

# Strategies
DEFAULT_STRATEGY = "load-balance"

# Synthetic inputs
DEFAULT_SEED = 42
DEFAULT_LOAD_FACTOR = 0.8

# Paths
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
LOG_DIR = os.path.join(BASE_DIR, "..", "logs")
PLOT_DIR = os.path.join(LOG_DIR, "plots")
