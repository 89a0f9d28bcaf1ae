"""Tests for domain entities and value objects"""

import pytest

from boundary_gauge.domain.entities import EvaluationReport, OracleCheckResult, Sample
from boundary_gauge.domain.errors import InvalidInput
from boundary_gauge.domain.value_objects import (
    BoundaryPoint,
    ClassificationMetrics,
    ConfusionCounts,
    FitResult,
    Prediction,
)


class TestSample:
    def test_construction(self):
        sample = Sample(features={"loan_amount": 10000.0, "job_type": "Full-time"}, label=True)
        assert sample.features["loan_amount"] == 10000.0
        assert sample.features["job_type"] == "Full-time"
        assert sample.label is True

    def test_features_are_read_only(self):
        sample = Sample(features={"age": 30.0}, label=False)
        with pytest.raises(TypeError):
            sample.features["age"] = 40.0

    def test_source_dict_changes_do_not_leak(self):
        raw = {"age": 30.0}
        sample = Sample(features=raw, label=False)
        raw["age"] = 99.0
        assert sample.features["age"] == 30.0

    def test_equal_by_value_but_unhashable(self):
        first = Sample(features={"age": 30.0}, label=True)
        second = Sample(features={"age": 30.0}, label=True)
        assert first == second
        with pytest.raises(TypeError):
            hash(first)


class TestPrediction:
    def test_construction(self):
        prediction = Prediction(label=True, probability=0.8)
        assert prediction.label is True
        assert prediction.probability == 0.8

    @pytest.mark.parametrize("probability", [-0.01, 1.01])
    def test_out_of_range_probability(self, probability):
        with pytest.raises(InvalidInput, match="probability"):
            Prediction(label=False, probability=probability)

    def test_bounds_are_valid(self):
        assert Prediction(label=False, probability=0.0).probability == 0.0
        assert Prediction(label=True, probability=1.0).probability == 1.0


class TestConfusionCounts:
    def test_total(self):
        counts = ConfusionCounts(true_positive=3, false_positive=1, false_negative=2, true_negative=4)
        assert counts.total == 10

    def test_negative_count_raises_error(self):
        with pytest.raises(InvalidInput, match="false_negative must be non-negative"):
            ConfusionCounts(false_negative=-1)


class TestFitResult:
    def test_is_linear_threshold(self):
        assert FitResult(slope=1.0, intercept=0.0, r_squared=0.71, n_points=5).is_linear is True
        assert FitResult(slope=1.0, intercept=0.0, r_squared=0.7, n_points=5).is_linear is False

    def test_predict(self):
        fit = FitResult(slope=0.3, intercept=2000.0, r_squared=1.0, n_points=2)
        assert fit.predict(10000.0) == pytest.approx(5000.0)


class TestEvaluationReport:
    def _make_report(self, fit):
        counts = ConfusionCounts(true_positive=1, false_positive=0, false_negative=1, true_negative=1)
        metrics = ClassificationMetrics(
            counts=counts, accuracy=2 / 3, precision=1.0, recall=0.5, f1=2 / 3,
            auc=0.75, mse=0.1267, rmse=0.356,
        )
        return EvaluationReport(
            metrics=metrics,
            probe_dimension="loan_amount",
            free_dimension="monthly_income",
            boundary_points=[BoundaryPoint(1000.0, 2300.0), BoundaryPoint(2000.0, 2600.0)],
            fit=fit,
            boundary_description="desc",
            accuracy_band="needs improvement",
            error_band="low error",
        )

    def test_to_dict(self):
        fit = FitResult(slope=0.3, intercept=2000.0, r_squared=1.0, n_points=2)
        d = self._make_report(fit).to_dict()
        assert d["metrics"]["counts"]["total"] == 3
        assert d["fit"]["is_linear"] is True
        assert d["boundary_points"][0] == {"probe_value": 1000.0, "boundary_value": 2300.0}
        assert d["interpretation"] == []

    def test_indeterminate_boundary(self):
        report = self._make_report(None)
        assert report.boundary_determined is False
        assert report.to_dict()["fit"] is None


class TestOracleCheckResult:
    def test_success(self):
        result = OracleCheckResult(success=True, latency_ms=3, error=None)
        assert result.success is True
        assert result.error is None

    def test_failure(self):
        result = OracleCheckResult(success=False, latency_ms=None, error="boom")
        assert result.success is False
        assert result.latency_ms is None
