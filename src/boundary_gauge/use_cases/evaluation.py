"""
Evaluation Execution

Runs an oracle over labeled samples, estimates its decision boundary, and
builds the report.
"""

import logging
from typing import Any, Iterable, Mapping

from boundary_gauge.boundary.fitter import fit_line
from boundary_gauge.boundary.locator import locate_boundary
from boundary_gauge.classification_metrics import calculate_all_metrics
from boundary_gauge.domain.entities import EvaluationReport, Sample
from boundary_gauge.domain.errors import InsufficientData, InvalidInput
from boundary_gauge.domain.value_objects import PredictionRecord
from boundary_gauge.evaluation_config import EvaluationConfig, load_config
from boundary_gauge.infrastructure.oracles.base import PredictionOracle
from boundary_gauge.use_cases.report import build_report

logger = logging.getLogger(__name__)


def predict_samples(oracle: PredictionOracle, samples: Iterable[Sample]) -> list[PredictionRecord]:
    """
    Query the oracle once per sample.

    Args:
        oracle: Prediction oracle
        samples: Labeled samples

    Returns:
        list[PredictionRecord]: One record per sample, in order
    """
    records = []
    for sample in samples:
        prediction = oracle.predict(sample.features)
        records.append(PredictionRecord(
            probability=prediction.probability,
            predicted_label=prediction.label,
            actual_label=sample.label,
        ))
    return records


def evaluate_model(
    oracle: PredictionOracle,
    samples: Iterable[Sample],
    config: EvaluationConfig | None = None,
    fixed_features: Mapping[str, Any] | None = None,
) -> EvaluationReport:
    """
    Evaluate an oracle and estimate its decision boundary.

    Fewer than two boundary points is not fatal: the report then carries an
    indeterminate boundary.

    Args:
        oracle: Prediction oracle
        samples: Held-out labeled samples (non-empty)
        config: EvaluationConfig (loads from env if not provided)
        fixed_features: Representative values overriding config.fixed_features

    Returns:
        EvaluationReport

    Raises:
        InvalidInput: If samples is empty or a searched feature is unusable
    """
    if config is None:
        config = load_config()

    samples = list(samples)
    if not samples:
        raise InvalidInput("The evaluation sample set is empty")

    metrics = calculate_all_metrics(predict_samples(oracle, samples))

    search = config.boundary
    if fixed_features is None:
        fixed_features = config.fixed_features
    points = locate_boundary(oracle, samples, search, fixed_features=fixed_features)

    try:
        fit = fit_line(points)
    except InsufficientData as e:
        logger.info("Decision boundary indeterminate: %s", e)
        fit = None

    return build_report(metrics, points, fit, search.probe_dimension, search.free_dimension)
