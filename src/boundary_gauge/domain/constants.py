"""
Domain Constants

Centrally manages constants shared across evaluation and boundary estimation.
"""

# Probability at which the classifier flips its label
DECISION_THRESHOLD = 0.5

# Boundary search defaults
DEFAULT_PROBE_COUNT = 30
DEFAULT_TOLERANCE = 0.05
DEFAULT_MAX_ITERATIONS = 15
DEFAULT_CONVERGENCE_THRESHOLD = 100.0  # native units of the free dimension

# Default dimensions (loan application data set)
DEFAULT_PROBE_DIMENSION = "loan_amount"
DEFAULT_FREE_DIMENSION = "monthly_income"
DEFAULT_LABEL_COLUMN = "is_approved"

# Representative values holding the remaining features fixed while probing.
# Features not listed here fall back to the sample median (numeric) or the
# most common value (categorical).
DEFAULT_FIXED_FEATURES = {
    "age": 35.0,
    "return_time": 24.0,  # months
}

# A fitted boundary above this R² is reported as linear
LINEAR_R_SQUARED_THRESHOLD = 0.7

# Qualitative report bands
ACCURACY_EXCELLENT = 0.85
ACCURACY_GOOD = 0.75
MSE_VERY_LOW = 0.1
MSE_LOW = 0.2
