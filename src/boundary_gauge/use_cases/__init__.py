"""
Use Cases Layer

Aggregates evaluation logic and provides use cases called from the runner.
"""

from boundary_gauge.use_cases.evaluation import (
    evaluate_model,
    predict_samples,
)
from boundary_gauge.use_cases.health_check import check_oracle
from boundary_gauge.use_cases.report import (
    accuracy_band,
    boundary_points_frame,
    build_report,
    error_band,
    format_report,
    interpret,
)

__all__ = [
    # evaluation
    "evaluate_model",
    "predict_samples",
    # health_check
    "check_oracle",
    # report
    "accuracy_band",
    "boundary_points_frame",
    "build_report",
    "error_band",
    "format_report",
    "interpret",
]
