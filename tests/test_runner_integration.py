"""
Integration test for the CLI pipeline (using an in-memory oracle module).

Verifies the full evaluation pipeline works end-to-end:
1. Load samples from CSV
2. Health-check the oracle
3. Evaluate metrics and estimate the decision boundary
4. Save boundary points (CSV) and the report (JSON)
"""

import itertools
import json
import sys
import types
from unittest.mock import patch

import pandas as pd
import pytest

from boundary_gauge.infrastructure.oracles.logistic import LogisticOracle
from boundary_gauge.runner import _apply_overrides, main, parse_args
from boundary_gauge.evaluation_config import EvaluationConfig


@pytest.fixture
def loan_oracle_module(monkeypatch):
    module = types.ModuleType("loan_oracle")
    module.ORACLE = LogisticOracle(
        weights={"monthly_income": 0.01, "loan_amount": -0.003},
        intercept=-20.0,
        categorical_offsets={"job_type": {"Unemployed": -2.0}},
    )
    module.flaky = lambda features: 2.0  # probability out of range
    answers = itertools.cycle([0.1, 0.2, 0.3, 0.4])
    module.drifting = lambda features: next(answers)  # different answer on every call
    monkeypatch.setitem(sys.modules, "loan_oracle", module)
    return module


@pytest.fixture
def loan_csv(tmp_path):
    rows = []
    for loan in (1000, 10000, 25000, 35000, 50000):
        for income in (1500, 6000, 9000, 14000, 20000):
            rows.append({
                "MonthlyIncome": income,
                "LoanAmount": loan,
                "ReturnTime": 24,
                "Age": 35,
                "JobType": "Full-time",
                "IsApproved": income > 0.3 * loan + 2000,
            })
    path = tmp_path / "loans.csv"
    pd.DataFrame(rows).to_csv(path, index=False)
    return path


@patch("boundary_gauge.runner.load_dotenv")
class TestMain:
    def test_end_to_end(self, _dotenv, loan_oracle_module, loan_csv, tmp_path, capsys):
        output_dir = tmp_path / "results"
        code = main([
            "--data", str(loan_csv),
            "--oracle", "loan_oracle:ORACLE",
            "--probe-count", "10",
            "--convergence-threshold", "1",
            "--output-dir", str(output_dir),
        ])
        assert code == 0

        out = capsys.readouterr().out
        assert "Samples: 25" in out
        assert "OK (" in out
        assert "=== Decision Boundary ===" in out
        assert "Excellent model accuracy" in out

        points_files = list(output_dir.glob("boundary_points_*.csv"))
        report_files = list(output_dir.glob("report_*.json"))
        assert len(points_files) == 1
        assert len(report_files) == 1

        points = pd.read_csv(points_files[0])
        assert len(points) == 10
        with open(report_files[0], encoding="utf-8") as f:
            report = json.load(f)
        assert report["metrics"]["accuracy"] == 1.0
        assert report["fit"]["is_linear"] is True
        assert report["probe_dimension"] == "loan_amount"

    def test_health_check_failure(self, _dotenv, loan_oracle_module, loan_csv, tmp_path, capsys):
        code = main([
            "--data", str(loan_csv),
            "--oracle", "loan_oracle:flaky",
            "--output-dir", str(tmp_path / "results"),
        ])
        assert code == 1
        assert "FAILED" in capsys.readouterr().out
        assert not (tmp_path / "results").exists()

    def test_memoize_reports_cache_stats(self, _dotenv, loan_oracle_module, loan_csv, tmp_path, capsys):
        code = main([
            "--data", str(loan_csv),
            "--oracle", "loan_oracle:ORACLE",
            "--probe-count", "5",
            "--memoize",
            "--output-dir", str(tmp_path / "results"),
        ])
        assert code == 0
        assert "Oracle cache: " in capsys.readouterr().out

    def test_memoize_does_not_hide_non_deterministic_oracle(
        self, _dotenv, loan_oracle_module, loan_csv, tmp_path, capsys,
    ):
        code = main([
            "--data", str(loan_csv),
            "--oracle", "loan_oracle:drifting",
            "--memoize",
            "--output-dir", str(tmp_path / "results"),
        ])
        assert code == 1
        out = capsys.readouterr().out
        assert "FAILED" in out
        assert "not deterministic" in out
        assert not (tmp_path / "results").exists()

    def test_missing_data_file(self, _dotenv, loan_oracle_module, tmp_path, capsys):
        code = main([
            "--data", str(tmp_path / "nope.csv"),
            "--oracle", "loan_oracle:ORACLE",
            "--output-dir", str(tmp_path / "results"),
        ])
        assert code == 1
        assert "ERROR" in capsys.readouterr().out

    def test_missing_label_column(self, _dotenv, loan_oracle_module, loan_csv, tmp_path, capsys):
        code = main([
            "--data", str(loan_csv),
            "--oracle", "loan_oracle:ORACLE",
            "--label-column", "approved",
            "--output-dir", str(tmp_path / "results"),
        ])
        assert code == 1
        assert "ERROR" in capsys.readouterr().out

    def test_unknown_oracle_attribute(self, _dotenv, loan_oracle_module, loan_csv, tmp_path, capsys):
        code = main([
            "--data", str(loan_csv),
            "--oracle", "loan_oracle:missing",
            "--output-dir", str(tmp_path / "results"),
        ])
        assert code == 1
        assert "Could not load oracle" in capsys.readouterr().out

    def test_invalid_search_flags(self, _dotenv, loan_oracle_module, loan_csv, capsys):
        code = main([
            "--data", str(loan_csv),
            "--oracle", "loan_oracle:ORACLE",
            "--tolerance", "0.7",
        ])
        assert code == 1
        assert "tolerance" in capsys.readouterr().out


class TestApplyOverrides:
    def test_flags_override_config(self):
        args = parse_args([
            "--data", "d.csv", "--oracle", "m:o",
            "--probe-dimension", "age", "--probe-count", "5", "--label-column", "approved",
        ])
        config = _apply_overrides(EvaluationConfig(), args)
        assert config.boundary.probe_dimension == "age"
        assert config.boundary.probe_count == 5
        assert config.samples.label_column == "approved"
        # untouched values keep their defaults
        assert config.boundary.free_dimension == "monthly_income"
        assert config.boundary.tolerance == 0.05

    def test_no_flags(self):
        args = parse_args(["--data", "d.csv", "--oracle", "m:o"])
        assert _apply_overrides(EvaluationConfig(), args) == EvaluationConfig()
