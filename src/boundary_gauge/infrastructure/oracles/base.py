"""
Prediction oracle base class and callable adapter

Defines the abstract base class inherited by all oracles and the adapter that
turns a plain function into one.
"""

from abc import ABC, abstractmethod
from numbers import Real
from typing import Any, Callable, Mapping, Sequence

from boundary_gauge.domain.constants import DECISION_THRESHOLD
from boundary_gauge.domain.value_objects import Prediction


class PredictionOracle(ABC):
    """Abstract base class for black-box classifiers.

    Implementations must be deterministic for identical input and must not
    mutate shared state: the boundary search queries them repeatedly with
    synthetic feature mappings.
    """

    @abstractmethod
    def predict(self, features: Mapping[str, Any]) -> Prediction:
        """Return the thresholded label and positive-class probability"""
        pass


def to_prediction(result: Any, threshold: float = DECISION_THRESHOLD) -> Prediction:
    """
    Normalize a raw predictor result to a Prediction.

    Accepts a Prediction, a (label, probability) pair (tuple or list), a
    mapping with "label"/"probability" keys, or a bare real probability such
    as a numpy scalar (the label is then derived with the decision threshold).

    Raises:
        TypeError: If the result has none of the supported shapes
    """
    if isinstance(result, Prediction):
        return result
    if isinstance(result, Mapping):
        return Prediction(label=bool(result["label"]), probability=float(result["probability"]))
    if isinstance(result, Sequence) and not isinstance(result, (str, bytes)) and len(result) == 2:
        label, probability = result
        return Prediction(label=bool(label), probability=float(probability))
    if isinstance(result, Real) and not isinstance(result, bool):
        probability = float(result)
        return Prediction(label=probability >= threshold, probability=probability)
    raise TypeError(f"Unsupported prediction result: {result!r}")


class FunctionOracle(PredictionOracle):
    """Oracle backed by a plain callable"""

    def __init__(
        self,
        fn: Callable[[Mapping[str, Any]], Any],
        threshold: float = DECISION_THRESHOLD,
    ):
        self.fn = fn
        self.threshold = threshold

    def predict(self, features: Mapping[str, Any]) -> Prediction:
        return to_prediction(self.fn(features), self.threshold)
