"""
Memoizing oracle

Caches answers for identical feature mappings. Valid only because oracles are
required to be deterministic.
"""

from typing import Any, Mapping

from boundary_gauge.domain.value_objects import Prediction
from boundary_gauge.infrastructure.oracles.base import PredictionOracle


class MemoizingOracle(PredictionOracle):
    """Wraps another oracle and reuses answers for repeated queries"""

    def __init__(self, inner: PredictionOracle):
        self.inner = inner
        self._cache: dict[tuple, Prediction] = {}
        self.hits = 0
        self.misses = 0

    @staticmethod
    def _key(features: Mapping[str, Any]) -> tuple:
        return tuple(sorted(features.items()))

    def predict(self, features: Mapping[str, Any]) -> Prediction:
        key = self._key(features)
        cached = self._cache.get(key)
        if cached is not None:
            self.hits += 1
            return cached
        self.misses += 1
        prediction = self.inner.predict(features)
        self._cache[key] = prediction
        return prediction

    def clear(self) -> None:
        self._cache.clear()
        self.hits = 0
        self.misses = 0
