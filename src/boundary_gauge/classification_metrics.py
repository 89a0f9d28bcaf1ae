"""
Classification Metrics Calculation

Computes confusion counts, accuracy, precision, recall, F1, ROC AUC, and the
squared error between predicted probabilities and 0/1 ground truth.
"""

import math
from typing import Sequence

from boundary_gauge.domain.errors import InvalidInput
from boundary_gauge.domain.value_objects import (
    ClassificationMetrics,
    ConfusionCounts,
    PredictionRecord,
)


def _require_records(records: Sequence[PredictionRecord]) -> None:
    if not records:
        raise InvalidInput("At least one prediction record is required")


def confusion_counts(records: Sequence[PredictionRecord]) -> ConfusionCounts:
    """
    Count predictions per confusion matrix cell

    Args:
        records: Prediction records (non-empty)

    Returns:
        ConfusionCounts whose total equals len(records)
    """
    _require_records(records)
    tp = fp = fn = tn = 0
    for r in records:
        if r.predicted_label and r.actual_label:
            tp += 1
        elif r.predicted_label:
            fp += 1
        elif r.actual_label:
            fn += 1
        else:
            tn += 1
    return ConfusionCounts(true_positive=tp, false_positive=fp, false_negative=fn, true_negative=tn)


def accuracy(counts: ConfusionCounts) -> float:
    """(TP + TN) / total"""
    if counts.total == 0:
        raise InvalidInput("Accuracy is undefined for an empty confusion matrix")
    return (counts.true_positive + counts.true_negative) / counts.total


def precision(counts: ConfusionCounts) -> float | None:
    """TP / (TP + FP), or None when nothing was predicted positive"""
    predicted_positive = counts.true_positive + counts.false_positive
    if predicted_positive == 0:
        return None
    return counts.true_positive / predicted_positive


def recall(counts: ConfusionCounts) -> float | None:
    """TP / (TP + FN), or None when there are no actual positives"""
    actual_positive = counts.true_positive + counts.false_negative
    if actual_positive == 0:
        return None
    return counts.true_positive / actual_positive


def f1_score(precision_value: float | None, recall_value: float | None) -> float:
    """
    Harmonic mean of precision and recall

    An undefined precision or recall counts as 0. Returns 0 if P + R = 0.
    """
    p = precision_value or 0.0
    r = recall_value or 0.0
    if p + r == 0:
        return 0.0
    return 2 * p * r / (p + r)


def _average_ranks(values: Sequence[float]) -> list[float]:
    """1-based ranks with ties sharing the mean of their positions"""
    order = sorted(range(len(values)), key=lambda i: values[i])
    ranks = [0.0] * len(values)
    i = 0
    while i < len(order):
        j = i
        while j + 1 < len(order) and values[order[j + 1]] == values[order[i]]:
            j += 1
        mean_rank = (i + j) / 2 + 1
        for k in range(i, j + 1):
            ranks[order[k]] = mean_rank
        i = j + 1
    return ranks


def roc_auc(probabilities: Sequence[float], labels: Sequence[bool]) -> float | None:
    """
    Area under the ROC curve via the rank-sum (Mann-Whitney U) statistic

    Equals the probability that a random positive is ranked above a random
    negative; tied probabilities split the credit 0.5.

    Args:
        probabilities: Predicted positive-class probabilities
        labels: Ground truth labels (same length)

    Returns:
        AUC (0.0 to 1.0), or None if only one class is present
    """
    if len(probabilities) != len(labels):
        raise InvalidInput("probabilities and labels must have the same length")
    n_pos = sum(1 for label in labels if label)
    n_neg = len(labels) - n_pos
    if n_pos == 0 or n_neg == 0:
        return None

    ranks = _average_ranks(probabilities)
    pos_rank_sum = sum(rank for rank, label in zip(ranks, labels) if label)
    u = pos_rank_sum - n_pos * (n_pos + 1) / 2
    return u / (n_pos * n_neg)


def mean_squared_error(records: Sequence[PredictionRecord]) -> float:
    """
    Mean of (actual - probability)^2 with actual mapped to 1.0 / 0.0

    Args:
        records: Prediction records (non-empty)

    Returns:
        MSE (0.0 to 1.0)
    """
    _require_records(records)
    total = 0.0
    for r in records:
        error = (1.0 if r.actual_label else 0.0) - r.probability
        total += error * error
    return total / len(records)


def root_mean_squared_error(mse: float) -> float:
    return math.sqrt(mse)


def calculate_all_metrics(records: Sequence[PredictionRecord]) -> ClassificationMetrics:
    """
    Calculate all classification metrics

    Args:
        records: Prediction records (non-empty)

    Returns:
        ClassificationMetrics

    Raises:
        InvalidInput: If records is empty
    """
    _require_records(records)
    counts = confusion_counts(records)
    p = precision(counts)
    r = recall(counts)
    mse = mean_squared_error(records)
    return ClassificationMetrics(
        counts=counts,
        accuracy=accuracy(counts),
        precision=p,
        recall=r,
        f1=f1_score(p, r),
        auc=roc_auc(
            [rec.probability for rec in records],
            [rec.actual_label for rec in records],
        ),
        mse=mse,
        rmse=root_mean_squared_error(mse),
    )
