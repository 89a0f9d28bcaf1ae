"""
Domain Errors

Exception taxonomy for evaluation runs. Non-convergence of a single boundary
probe is not an error and has no exception type.
"""


class BoundaryGaugeError(Exception):
    """Base class for all evaluation errors"""


class InvalidInput(BoundaryGaugeError, ValueError):
    """Empty or malformed input (fatal to the evaluation call)"""


class InsufficientData(BoundaryGaugeError):
    """Too few boundary points to describe the decision boundary"""
