"""
Oracle package

Provides the prediction-oracle capability and its adapters.
"""

from boundary_gauge.infrastructure.oracles.base import (
    FunctionOracle,
    PredictionOracle,
    to_prediction,
)
from boundary_gauge.infrastructure.oracles.factory import load_oracle
from boundary_gauge.infrastructure.oracles.logistic import LogisticOracle, sigmoid
from boundary_gauge.infrastructure.oracles.memo import MemoizingOracle
from boundary_gauge.domain.value_objects import Prediction

__all__ = [
    "FunctionOracle",
    "LogisticOracle",
    "MemoizingOracle",
    "Prediction",
    "PredictionOracle",
    "load_oracle",
    "sigmoid",
    "to_prediction",
]
