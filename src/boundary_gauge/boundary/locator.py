"""
Decision Boundary Locator

For each value of a probe dimension, bisects a free dimension to find where
the oracle is ~50% confident while every other feature is held fixed.

Bisection assumes the oracle's probability is monotonically increasing along
the free dimension. This is not verified: a non-monotone oracle yields fewer
or misleading points.
"""

from __future__ import annotations

import logging
from collections import Counter
from numbers import Real
from statistics import median
from typing import Any, Mapping, Sequence

from boundary_gauge.domain.constants import DECISION_THRESHOLD, DEFAULT_FIXED_FEATURES
from boundary_gauge.domain.entities import Sample
from boundary_gauge.domain.errors import InvalidInput
from boundary_gauge.domain.value_objects import BoundaryPoint
from boundary_gauge.evaluation_config import BoundarySearchConfig
from boundary_gauge.infrastructure.oracles.base import PredictionOracle

logger = logging.getLogger(__name__)


def _is_numeric(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def feature_range(samples: Sequence[Sample], name: str) -> tuple[float, float]:
    """
    Observed (min, max) of a numeric feature

    Raises:
        InvalidInput: If samples is empty, or the feature is missing or non-numeric
    """
    if not samples:
        raise InvalidInput("At least one sample is required")
    values = []
    for sample in samples:
        if name not in sample.features:
            raise InvalidInput(f"Feature '{name}' is missing from a sample")
        value = sample.features[name]
        if not _is_numeric(value):
            raise InvalidInput(f"Feature '{name}' must be numeric: {value!r}")
        values.append(float(value))
    return min(values), max(values)


def probe_values(low: float, high: float, count: int) -> list[float]:
    """
    count equally spaced values across [low, high], both ends included

    A zero-width range yields the single value low.
    """
    if count < 1:
        raise ValueError("count must be at least 1")
    if high < low:
        raise ValueError(f"high ({high}) must not be below low ({low})")
    if high == low or count == 1:
        return [low]
    step = (high - low) / (count - 1)
    values = [low + i * step for i in range(count - 1)]
    values.append(high)
    return values


def representative_features(
    samples: Sequence[Sample],
    exclude: Sequence[str] = (),
    overrides: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Values that hold non-searched features fixed

    Explicit overrides win. Remaining numeric features take the sample median
    and categorical ones the most common value (first seen on ties).

    Args:
        samples: Evaluation samples
        exclude: Features to leave out (the probe and free dimensions)
        overrides: Named representative values (DEFAULT_FIXED_FEATURES if None)
    """
    if overrides is None:
        overrides = DEFAULT_FIXED_FEATURES

    names: list[str] = []
    for sample in samples:
        for name in sample.features:
            if name not in names:
                names.append(name)

    fixed: dict[str, Any] = {}
    for name in names:
        if name in exclude:
            continue
        if name in overrides:
            fixed[name] = overrides[name]
            continue
        values = [s.features[name] for s in samples if name in s.features]
        if all(_is_numeric(v) for v in values):
            fixed[name] = float(median(values))
        else:
            fixed[name] = Counter(values).most_common(1)[0][0]
    return fixed


def find_boundary_value(
    oracle: PredictionOracle,
    probe_dimension: str,
    probe_value: float,
    free_dimension: str,
    low: float,
    high: float,
    fixed_features: Mapping[str, Any],
    config: BoundarySearchConfig,
) -> float | None:
    """
    Bisect the free dimension for the ~50% confidence point

    Args:
        oracle: Prediction oracle
        probe_dimension: Feature held at probe_value
        probe_value: Value of the probe dimension
        free_dimension: Feature being bisected
        low: Lower bound of the free dimension
        high: Upper bound of the free dimension
        fixed_features: Values for every other feature
        config: Search configuration (tolerance, iterations, convergence)

    Returns:
        The boundary value, or None if the search did not converge. When
        the range narrows below config.convergence_threshold, mid is reported
        if probabilities on both sides of 0.5 were observed. If only one side
        was seen, the endpoint bisection never visited is queried once and
        mid is reported only when it lies on the other side, so an oracle
        that stays on one side of the threshold yields None.
    """
    if high <= low:
        logger.debug("%s=%s: empty %s range, no boundary", probe_dimension, probe_value, free_dimension)
        return None

    start_low, start_high = low, high
    seen_above = seen_below = False
    for iteration in range(config.max_iterations):
        mid = (low + high) / 2
        features = dict(fixed_features)
        features[probe_dimension] = probe_value
        features[free_dimension] = mid
        p = oracle.predict(features).probability

        if abs(p - DECISION_THRESHOLD) < config.tolerance:
            logger.debug(
                "%s=%s: p=%.4f at %s=%s after %d iterations",
                probe_dimension, probe_value, p, free_dimension, mid, iteration + 1,
            )
            return mid

        if p > DECISION_THRESHOLD:
            high = mid
            seen_above = True
        else:
            low = mid
            seen_below = True

        if high - low < config.convergence_threshold:
            if not (seen_above and seen_below):
                # Only one side seen: the unvisited endpoint decides whether a crossing exists
                features[free_dimension] = start_low if seen_above else start_high
                endpoint_p = oracle.predict(features).probability
                if (endpoint_p > DECISION_THRESHOLD) == seen_above:
                    logger.debug(
                        "%s=%s: range narrowed without a crossing in %s",
                        probe_dimension, probe_value, free_dimension,
                    )
                    return None
            logger.debug(
                "%s=%s: range narrowed below %s at %s=%s",
                probe_dimension, probe_value, config.convergence_threshold, free_dimension, mid,
            )
            return mid

    logger.debug("%s=%s: no crossing found", probe_dimension, probe_value)
    return None


def locate_boundary(
    oracle: PredictionOracle,
    samples: Sequence[Sample],
    config: BoundarySearchConfig | None = None,
    fixed_features: Mapping[str, Any] | None = None,
) -> list[BoundaryPoint]:
    """
    Locate decision boundary points across the probe dimension

    Args:
        oracle: Prediction oracle
        samples: Samples defining the observed feature ranges
        config: Search configuration (defaults if None)
        fixed_features: Representative value overrides (DEFAULT_FIXED_FEATURES if None)

    Returns:
        Boundary points ordered by probe value; may be empty

    Raises:
        InvalidInput: If samples is empty or a searched feature is unusable
    """
    if config is None:
        config = BoundarySearchConfig()

    probe_low, probe_high = feature_range(samples, config.probe_dimension)
    free_low, free_high = feature_range(samples, config.free_dimension)
    fixed = representative_features(
        samples,
        exclude=(config.probe_dimension, config.free_dimension),
        overrides=fixed_features,
    )

    points = []
    for probe_value in probe_values(probe_low, probe_high, config.probe_count):
        boundary_value = find_boundary_value(
            oracle,
            config.probe_dimension,
            probe_value,
            config.free_dimension,
            free_low,
            free_high,
            fixed,
            config,
        )
        if boundary_value is not None:
            points.append(BoundaryPoint(probe_value=probe_value, boundary_value=boundary_value))

    logger.debug("Located %d/%d boundary points", len(points), config.probe_count)
    return points
