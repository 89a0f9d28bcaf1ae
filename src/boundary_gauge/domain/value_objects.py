"""
Domain Value Objects

Defines immutable data structures representing values such as predictions,
confusion counts, metrics, boundary points, and line fits.
"""

from dataclasses import dataclass

from boundary_gauge.domain.constants import LINEAR_R_SQUARED_THRESHOLD
from boundary_gauge.domain.errors import InvalidInput


@dataclass(frozen=True)
class Prediction:
    """Oracle answer for one feature mapping"""
    label: bool
    probability: float

    def __post_init__(self):
        if not 0.0 <= self.probability <= 1.0:
            raise InvalidInput(f"probability must be within [0, 1]: {self.probability}")


@dataclass(frozen=True)
class PredictionRecord:
    """Prediction paired with the ground truth of the evaluated sample"""
    probability: float
    predicted_label: bool
    actual_label: bool


@dataclass(frozen=True)
class ConfusionCounts:
    """Confusion matrix of a binary classifier"""
    true_positive: int = 0
    false_positive: int = 0
    false_negative: int = 0
    true_negative: int = 0

    def __post_init__(self):
        for name in ("true_positive", "false_positive", "false_negative", "true_negative"):
            if getattr(self, name) < 0:
                raise InvalidInput(f"{name} must be non-negative")

    @property
    def total(self) -> int:
        return self.true_positive + self.false_positive + self.false_negative + self.true_negative


@dataclass(frozen=True)
class ClassificationMetrics:
    """Metrics over a held-out sample set. None marks an undefined value."""
    counts: ConfusionCounts
    accuracy: float
    precision: float | None
    recall: float | None
    f1: float
    auc: float | None
    mse: float
    rmse: float


@dataclass(frozen=True)
class BoundaryPoint:
    """Point where the oracle sits at ~50% confidence"""
    probe_value: float     # value along the stepped (probe) dimension
    boundary_value: float  # value along the bisected (free) dimension


@dataclass(frozen=True)
class FitResult:
    """Least-squares line through boundary points"""
    slope: float
    intercept: float
    r_squared: float
    n_points: int
    horizontal: bool = False  # every boundary value identical, R² = 1 by convention

    @property
    def is_linear(self) -> bool:
        return self.r_squared > LINEAR_R_SQUARED_THRESHOLD

    def predict(self, probe_value: float) -> float:
        return self.slope * probe_value + self.intercept
