"""
Logistic oracle

A linear-logistic classifier over named features, used for demonstrations and
as a known ground truth when checking boundary recovery.
"""

import math
from typing import Any, Mapping

from boundary_gauge.domain.constants import DECISION_THRESHOLD
from boundary_gauge.domain.value_objects import Prediction
from boundary_gauge.infrastructure.oracles.base import PredictionOracle


def sigmoid(z: float) -> float:
    """Numerically stable logistic function"""
    if z >= 0:
        return 1.0 / (1.0 + math.exp(-z))
    ez = math.exp(z)
    return ez / (1.0 + ez)


class LogisticOracle(PredictionOracle):
    """
    probability = sigmoid(intercept + sum(weights[f] * x[f]) + offsets[f][x[f]])

    Args:
        weights: Coefficient per numeric feature
        intercept: Bias term
        categorical_offsets: {feature: {category: offset}}; unknown categories add 0
        threshold: Probability at or above which the label is positive
    """

    def __init__(
        self,
        weights: Mapping[str, float],
        intercept: float = 0.0,
        categorical_offsets: Mapping[str, Mapping[str, float]] | None = None,
        threshold: float = DECISION_THRESHOLD,
    ):
        self.weights = dict(weights)
        self.intercept = intercept
        self.categorical_offsets = {k: dict(v) for k, v in (categorical_offsets or {}).items()}
        self.threshold = threshold

    def decision_function(self, features: Mapping[str, Any]) -> float:
        z = self.intercept
        for name, weight in self.weights.items():
            if name not in features:
                raise KeyError(f"Feature '{name}' is missing")
            z += weight * float(features[name])
        for name, offsets in self.categorical_offsets.items():
            z += offsets.get(features.get(name), 0.0)
        return z

    def predict(self, features: Mapping[str, Any]) -> Prediction:
        probability = sigmoid(self.decision_function(features))
        return Prediction(label=probability >= self.threshold, probability=probability)
