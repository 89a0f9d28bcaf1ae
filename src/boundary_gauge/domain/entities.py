"""
Domain Entities

Defines the primary data structures used in the evaluation process.
"""

from dataclasses import dataclass, field, asdict
from types import MappingProxyType
from typing import Any, Mapping

from boundary_gauge.domain.value_objects import (
    BoundaryPoint,
    ClassificationMetrics,
    FitResult,
)


@dataclass(frozen=True)
class Sample:
    """Labeled evaluation sample (read-only feature mapping + ground truth)

    Samples compare by value but are not hashable: the feature mapping is a
    read-only view of a dict.
    """
    features: Mapping[str, Any]
    label: bool

    __hash__ = None

    def __post_init__(self):
        object.__setattr__(self, "features", MappingProxyType(dict(self.features)))


@dataclass
class EvaluationReport:
    """Result of a single evaluation run"""
    metrics: ClassificationMetrics
    probe_dimension: str
    free_dimension: str
    boundary_points: list[BoundaryPoint]
    fit: FitResult | None  # None: boundary indeterminate
    boundary_description: str
    accuracy_band: str
    error_band: str
    interpretation: list[str] = field(default_factory=list)

    @property
    def boundary_determined(self) -> bool:
        return self.fit is not None

    def to_dict(self) -> dict:
        """Convert to dictionary format"""
        data = asdict(self)
        data["metrics"]["counts"]["total"] = self.metrics.counts.total
        if self.fit is not None:
            data["fit"]["is_linear"] = self.fit.is_linear
        return data


@dataclass
class OracleCheckResult:
    """Oracle health check result"""
    success: bool
    latency_ms: int | None
    error: str | None
