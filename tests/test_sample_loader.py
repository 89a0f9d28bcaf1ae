"""
Tests for the CSV sample loader
"""

import pandas as pd
import pytest

from boundary_gauge.domain.errors import InvalidInput
from boundary_gauge.sample_loader import (
    load_samples,
    normalize_column_name,
    samples_from_frame,
)


LOAN_CSV = """MonthlyIncome,LoanAmount,ReturnTime,Age,JobType,IsApproved
4000,10000,24,30,Full-time,true
1500,30000,12,22,Part-time,false
8000,5000,36,45,Self-employed,true
"""


class TestNormalizeColumnName:
    @pytest.mark.parametrize("raw,expected", [
        ("MonthlyIncome", "monthly_income"),
        ("IsApproved", "is_approved"),
        ("loan_amount", "loan_amount"),
        ("Job Type", "job_type"),
        (" Age ", "age"),
    ])
    def test_snake_case(self, raw, expected):
        assert normalize_column_name(raw) == expected


class TestLoadSamples:
    def test_loan_csv(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text(LOAN_CSV, encoding="utf-8")
        samples = load_samples(path)

        assert len(samples) == 3
        first = samples[0]
        assert first.label is True
        assert first.features["monthly_income"] == 4000
        assert first.features["job_type"] == "Full-time"
        assert "is_approved" not in first.features
        assert [s.label for s in samples] == [True, False, True]

    def test_features_are_builtin_types(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text(LOAN_CSV, encoding="utf-8")
        features = load_samples(path)[0].features
        assert type(features["loan_amount"]) is int
        assert type(features["job_type"]) is str

    def test_custom_label_column(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("x,approved\n1.5,1\n2.5,0\n", encoding="utf-8")
        samples = load_samples(path, label_column="approved")
        assert [s.label for s in samples] == [True, False]
        assert samples[0].features == {"x": 1.5}

    def test_missing_label_column(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("x,y\n1,2\n", encoding="utf-8")
        with pytest.raises(InvalidInput, match="is_approved"):
            load_samples(path)

    def test_header_only(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("x,is_approved\n", encoding="utf-8")
        with pytest.raises(InvalidInput, match="empty"):
            load_samples(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("", encoding="utf-8")
        with pytest.raises(InvalidInput, match="empty"):
            load_samples(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_samples(tmp_path / "nope.csv")


class TestSamplesFromFrame:
    def test_string_labels(self):
        df = pd.DataFrame({"x": [1.0, 2.0, 3.0], "is_approved": ["yes", "No", "approved"]})
        assert [s.label for s in samples_from_frame(df)] == [True, False, True]

    def test_unparseable_label(self):
        df = pd.DataFrame({"x": [1.0], "is_approved": ["maybe"]})
        with pytest.raises(InvalidInput, match="maybe"):
            samples_from_frame(df)

    def test_missing_values(self):
        df = pd.DataFrame({"x": [1.0, None], "is_approved": [True, False]})
        with pytest.raises(InvalidInput, match="x"):
            samples_from_frame(df)
