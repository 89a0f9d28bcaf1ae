"""
Oracle factory

Resolves a user-supplied oracle from an import path of the form
"package.module:attribute".
"""

from __future__ import annotations

import importlib
import inspect

from boundary_gauge.domain.constants import DECISION_THRESHOLD
from boundary_gauge.infrastructure.oracles.base import FunctionOracle, PredictionOracle
from boundary_gauge.infrastructure.oracles.memo import MemoizingOracle


def load_oracle(
    target: str,
    memoize: bool = False,
    threshold: float = DECISION_THRESHOLD,
) -> PredictionOracle:
    """
    Load an oracle by import path

    The attribute may be a PredictionOracle instance, a PredictionOracle
    subclass (instantiated without arguments), a zero-argument factory
    returning an oracle, or a predict function taking a feature mapping.

    Args:
        target: "module:attribute" path
        memoize: Wrap the oracle in a MemoizingOracle
        threshold: Decision threshold used when adapting plain functions

    Returns:
        PredictionOracle

    Raises:
        ValueError: If the path is malformed
        ImportError: If the module cannot be imported
        AttributeError: If the attribute does not exist
        TypeError: If the attribute cannot be turned into an oracle
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"Oracle path must look like 'module:attribute': {target}")

    obj = importlib.import_module(module_name)
    for part in attr_path.split("."):
        obj = getattr(obj, part)

    oracle = _coerce_oracle(obj, threshold)
    return MemoizingOracle(oracle) if memoize else oracle


def _coerce_oracle(obj, threshold: float) -> PredictionOracle:
    if isinstance(obj, PredictionOracle):
        return obj
    if inspect.isclass(obj):
        if issubclass(obj, PredictionOracle):
            return obj()
        raise TypeError(f"{obj.__name__} is not a PredictionOracle subclass")
    if callable(obj):
        # Zero-argument callables are factories, anything else is a predict function
        try:
            params = inspect.signature(obj).parameters
        except (TypeError, ValueError):
            params = None
        if params is not None and len(params) == 0:
            return _coerce_oracle(obj(), threshold)
        return FunctionOracle(obj, threshold=threshold)
    raise TypeError(f"Cannot build an oracle from {obj!r}")
