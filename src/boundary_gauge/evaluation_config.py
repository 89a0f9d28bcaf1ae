"""
Evaluation Configuration

Manages loading from environment variables and default values.
"""

import os
from dataclasses import dataclass, field, asdict
from typing import Any

from boundary_gauge.domain.constants import (
    DEFAULT_CONVERGENCE_THRESHOLD,
    DEFAULT_FIXED_FEATURES,
    DEFAULT_FREE_DIMENSION,
    DEFAULT_LABEL_COLUMN,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_PROBE_COUNT,
    DEFAULT_PROBE_DIMENSION,
    DEFAULT_TOLERANCE,
)


def _env_int(key: str, default: int) -> int:
    """Convert an environment variable to int"""
    val = os.environ.get(key)
    if val is None:
        return default
    try:
        return int(val)
    except ValueError:
        raise ValueError(f"The value '{val}' of environment variable '{key}' cannot be converted to an integer.")


def _env_float(key: str, default: float) -> float:
    """Convert an environment variable to float"""
    val = os.environ.get(key)
    if val is None:
        return default
    try:
        return float(val)
    except ValueError:
        raise ValueError(f"The value '{val}' of environment variable '{key}' cannot be converted to a number.")


def _env_str(key: str, default: str) -> str:
    """Get an environment variable as a string"""
    return os.environ.get(key, default)


@dataclass
class BoundarySearchConfig:
    """Decision boundary search configuration"""
    probe_dimension: str = DEFAULT_PROBE_DIMENSION
    free_dimension: str = DEFAULT_FREE_DIMENSION
    probe_count: int = DEFAULT_PROBE_COUNT
    tolerance: float = DEFAULT_TOLERANCE          # accepted |p - 0.5|
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    convergence_threshold: float = DEFAULT_CONVERGENCE_THRESHOLD

    def __post_init__(self):
        if self.probe_count < 1:
            raise ValueError("probe_count must be at least 1")
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")
        if not 0.0 < self.tolerance < 0.5:
            raise ValueError("tolerance must be between 0 and 0.5 (exclusive)")
        if self.convergence_threshold < 0:
            raise ValueError("convergence_threshold must be non-negative")
        if self.probe_dimension == self.free_dimension:
            raise ValueError("probe_dimension and free_dimension must differ")


@dataclass
class SampleConfig:
    """Evaluation sample configuration"""
    label_column: str = DEFAULT_LABEL_COLUMN


@dataclass
class EvaluationConfig:
    """Overall evaluation configuration"""
    boundary: BoundarySearchConfig = field(default_factory=BoundarySearchConfig)
    samples: SampleConfig = field(default_factory=SampleConfig)
    fixed_features: dict[str, Any] = field(default_factory=lambda: dict(DEFAULT_FIXED_FEATURES))

    def to_dict(self) -> dict:
        """Convert to dictionary format"""
        return {"evaluation_config": asdict(self)}

    @classmethod
    def from_dict(cls, data: dict) -> "EvaluationConfig":
        """Create from dictionary (handles presence/absence of evaluation_config key)"""
        config_data = data.get("evaluation_config", data)
        boundary = BoundarySearchConfig(**config_data.get("boundary", {}))
        samples = SampleConfig(**config_data.get("samples", {}))
        fixed_features = config_data.get("fixed_features", dict(DEFAULT_FIXED_FEATURES))
        return cls(boundary=boundary, samples=samples, fixed_features=dict(fixed_features))


def load_config() -> EvaluationConfig:
    """
    Load configuration from environment variables

    Uses default values when environment variables are not set.

    Returns:
        EvaluationConfig
    """
    boundary = BoundarySearchConfig(
        probe_dimension=_env_str("BOUNDARY_PROBE_DIMENSION", DEFAULT_PROBE_DIMENSION),
        free_dimension=_env_str("BOUNDARY_FREE_DIMENSION", DEFAULT_FREE_DIMENSION),
        probe_count=_env_int("BOUNDARY_PROBE_COUNT", DEFAULT_PROBE_COUNT),
        tolerance=_env_float("BOUNDARY_TOLERANCE", DEFAULT_TOLERANCE),
        max_iterations=_env_int("BOUNDARY_MAX_ITERATIONS", DEFAULT_MAX_ITERATIONS),
        convergence_threshold=_env_float("BOUNDARY_CONVERGENCE_THRESHOLD", DEFAULT_CONVERGENCE_THRESHOLD),
    )
    samples = SampleConfig(
        label_column=_env_str("SAMPLES_LABEL_COLUMN", DEFAULT_LABEL_COLUMN),
    )
    return EvaluationConfig(boundary=boundary, samples=samples)
