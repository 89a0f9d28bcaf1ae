"""
Domain Layer

Defines constants, errors, entities, and value objects that form the core of
the evaluation logic. Has no dependencies on external libraries.
"""

from boundary_gauge.domain.constants import (
    DECISION_THRESHOLD,
    DEFAULT_FIXED_FEATURES,
    DEFAULT_FREE_DIMENSION,
    DEFAULT_LABEL_COLUMN,
    DEFAULT_PROBE_DIMENSION,
    LINEAR_R_SQUARED_THRESHOLD,
)
from boundary_gauge.domain.entities import (
    EvaluationReport,
    OracleCheckResult,
    Sample,
)
from boundary_gauge.domain.errors import (
    BoundaryGaugeError,
    InsufficientData,
    InvalidInput,
)
from boundary_gauge.domain.value_objects import (
    BoundaryPoint,
    ClassificationMetrics,
    ConfusionCounts,
    FitResult,
    Prediction,
    PredictionRecord,
)

__all__ = [
    # constants
    "DECISION_THRESHOLD",
    "DEFAULT_FIXED_FEATURES",
    "DEFAULT_FREE_DIMENSION",
    "DEFAULT_LABEL_COLUMN",
    "DEFAULT_PROBE_DIMENSION",
    "LINEAR_R_SQUARED_THRESHOLD",
    # entities
    "EvaluationReport",
    "OracleCheckResult",
    "Sample",
    # errors
    "BoundaryGaugeError",
    "InsufficientData",
    "InvalidInput",
    # value objects
    "BoundaryPoint",
    "ClassificationMetrics",
    "ConfusionCounts",
    "FitResult",
    "Prediction",
    "PredictionRecord",
]
