"""
Health Check

Verifies that an oracle answers, stays in range, and is deterministic before
an evaluation run relies on it.
"""

import logging
import time
from typing import Any, Mapping

from boundary_gauge.domain.entities import OracleCheckResult
from boundary_gauge.infrastructure.oracles.base import PredictionOracle

logger = logging.getLogger(__name__)


def check_oracle(oracle: PredictionOracle, features: Mapping[str, Any]) -> OracleCheckResult:
    """
    Execute a health check for an oracle.

    The oracle is queried twice with the same features; differing answers fail
    the check because the boundary search relies on determinism. Run it on
    the bare oracle: behind a MemoizingOracle the second query is a cache hit.

    Args:
        oracle: Oracle to check
        features: A representative feature mapping (e.g. the first sample)

    Returns:
        OracleCheckResult: Health check result
    """
    try:
        start = time.perf_counter()
        first = oracle.predict(features)
        latency_ms = int((time.perf_counter() - start) * 1000)
        second = oracle.predict(features)
    except Exception as e:
        logger.warning("Oracle health check failed: %s", e)
        return OracleCheckResult(success=False, latency_ms=None, error=str(e))

    if first != second:
        error = f"Oracle is not deterministic: {first} != {second}"
        logger.warning("Oracle health check failed: %s", error)
        return OracleCheckResult(success=False, latency_ms=latency_ms, error=error)
    return OracleCheckResult(success=True, latency_ms=latency_ms, error=None)
