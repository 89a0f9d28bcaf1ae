"""
Evaluation Report

Composes metrics and the boundary estimate into a report with qualitative
commentary, and renders it as text or a DataFrame.
"""

import pandas as pd

from boundary_gauge.boundary.fitter import describe_boundary
from boundary_gauge.domain.constants import (
    ACCURACY_EXCELLENT,
    ACCURACY_GOOD,
    MSE_LOW,
    MSE_VERY_LOW,
)
from boundary_gauge.domain.entities import EvaluationReport
from boundary_gauge.domain.value_objects import BoundaryPoint, ClassificationMetrics, FitResult


def accuracy_band(value: float) -> str:
    if value > ACCURACY_EXCELLENT:
        return "excellent"
    if value > ACCURACY_GOOD:
        return "good"
    return "needs improvement"


def error_band(mse: float) -> str:
    if mse < MSE_VERY_LOW:
        return "very low error"
    if mse < MSE_LOW:
        return "low error"
    return "high error - consider tuning"


def interpret(metrics: ClassificationMetrics) -> list[str]:
    """Commentary lines for the interpretation section"""
    lines = []
    band = accuracy_band(metrics.accuracy)
    if band == "excellent":
        lines.append("Excellent model accuracy")
    elif band == "good":
        lines.append("Good model accuracy")
    else:
        lines.append("Consider improving the model")

    band = error_band(metrics.mse)
    if band == "very low error":
        lines.append("Very low prediction error (MSE)")
    elif band == "low error":
        lines.append("Low prediction error (MSE)")
    else:
        lines.append("High prediction error - consider model tuning")
    return lines


def build_report(
    metrics: ClassificationMetrics,
    boundary_points: list[BoundaryPoint],
    fit: FitResult | None,
    probe_dimension: str,
    free_dimension: str,
) -> EvaluationReport:
    """
    Build an evaluation report

    Args:
        metrics: Classification metrics
        boundary_points: Located boundary points
        fit: Line fit over the points, None if the boundary is indeterminate
        probe_dimension: Stepped feature name
        free_dimension: Bisected feature name

    Returns:
        EvaluationReport
    """
    return EvaluationReport(
        metrics=metrics,
        probe_dimension=probe_dimension,
        free_dimension=free_dimension,
        boundary_points=list(boundary_points),
        fit=fit,
        boundary_description=describe_boundary(fit, probe_dimension, free_dimension),
        accuracy_band=accuracy_band(metrics.accuracy),
        error_band=error_band(metrics.mse),
        interpretation=interpret(metrics),
    )


def _fmt(value: float | None, spec: str = ".4f") -> str:
    return "undefined" if value is None else format(value, spec)


def format_report(report: EvaluationReport) -> str:
    """Render the report as the multi-section console summary"""
    m = report.metrics
    c = m.counts
    lines = [
        "=== Model Evaluation Metrics ===",
        f"  Accuracy:  {m.accuracy:.2%}",
        f"  Precision: {_fmt(m.precision)}",
        f"  Recall:    {_fmt(m.recall)}",
        f"  F1 Score:  {m.f1:.4f}",
        f"  AUC:       {_fmt(m.auc)}",
        f"  MSE:       {m.mse:.4f}",
        f"  RMSE:      {m.rmse:.4f}",
        "",
        "=== Confusion Matrix ===",
        f"  True Positive:  {c.true_positive}",
        f"  False Positive: {c.false_positive}",
        f"  False Negative: {c.false_negative}",
        f"  True Negative:  {c.true_negative}",
        "",
        "=== Decision Boundary ===",
        f"  Axes: {report.probe_dimension} (probe) x {report.free_dimension} (free)",
        f"  Points found: {len(report.boundary_points)}",
        f"  Formula: {report.boundary_description}",
        "",
        "=== Interpretation ===",
    ]
    lines.extend(f"  {line}" for line in report.interpretation)
    return "\n".join(lines)


def boundary_points_frame(points: list[BoundaryPoint]) -> pd.DataFrame:
    """Boundary points as a DataFrame (probe_value, boundary_value columns)"""
    return pd.DataFrame(
        [{"probe_value": p.probe_value, "boundary_value": p.boundary_value} for p in points],
        columns=["probe_value", "boundary_value"],
    )
