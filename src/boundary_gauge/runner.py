"""
boundary-gauge CLI Runner

Minimal CLI for evaluating a classifier and estimating its decision boundary.

Usage:
    python -m boundary_gauge.runner --data data/loans.csv --oracle my_models.loan:predict
    python -m boundary_gauge.runner --data data/loans.csv --oracle my_models.loan:ORACLE \
        --probe-dimension loan_amount --free-dimension monthly_income --probe-count 50
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from boundary_gauge.domain.errors import InvalidInput
from boundary_gauge.evaluation_config import EvaluationConfig, load_config
from boundary_gauge.infrastructure.oracles.factory import load_oracle
from boundary_gauge.infrastructure.oracles.memo import MemoizingOracle
from boundary_gauge.sample_loader import load_samples
from boundary_gauge.use_cases.evaluation import evaluate_model
from boundary_gauge.use_cases.health_check import check_oracle
from boundary_gauge.use_cases.report import boundary_points_frame, format_report


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="boundary-gauge: Evaluate a binary classifier and estimate its decision boundary",
    )
    parser.add_argument(
        "--data",
        required=True,
        help="Path to the labeled evaluation CSV file",
    )
    parser.add_argument(
        "--oracle",
        required=True,
        help="Import path of the oracle, e.g. 'my_models.loan:predict'",
    )
    parser.add_argument("--label-column", default=None, help="Ground truth column (default: SAMPLES_LABEL_COLUMN from .env)")
    parser.add_argument("--probe-dimension", default=None, help="Feature stepped across its range")
    parser.add_argument("--free-dimension", default=None, help="Feature bisected for the 50%% point")
    parser.add_argument("--probe-count", type=int, default=None, help="Number of probe values")
    parser.add_argument("--tolerance", type=float, default=None, help="Accepted |p - 0.5|")
    parser.add_argument("--max-iterations", type=int, default=None, help="Bisection steps per probe value")
    parser.add_argument(
        "--convergence-threshold",
        type=float,
        default=None,
        help="Free-dimension width at which bisection stops (native units)",
    )
    parser.add_argument("--memoize", action="store_true", help="Cache identical oracle queries")
    parser.add_argument(
        "--output-dir",
        default="results",
        help="Directory for output files (default: results)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log each bisection outcome")
    return parser.parse_args(argv)


def _apply_overrides(config: EvaluationConfig, args: argparse.Namespace) -> EvaluationConfig:
    """CLI flags take precedence over environment configuration"""
    overrides = {
        "probe_dimension": args.probe_dimension,
        "free_dimension": args.free_dimension,
        "probe_count": args.probe_count,
        "tolerance": args.tolerance,
        "max_iterations": args.max_iterations,
        "convergence_threshold": args.convergence_threshold,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    boundary = replace(config.boundary, **overrides)
    samples = config.samples
    if args.label_column:
        samples = replace(samples, label_column=args.label_column)
    return EvaluationConfig(boundary=boundary, samples=samples, fixed_features=config.fixed_features)


def _save_outputs(report, output_dir: Path, run_id: str) -> tuple[Path, Path]:
    """Save boundary points (CSV) and the report (JSON)."""
    output_dir.mkdir(parents=True, exist_ok=True)
    points_path = output_dir / f"boundary_points_{run_id}.csv"
    report_path = output_dir / f"report_{run_id}.json"
    boundary_points_frame(report.boundary_points).to_csv(points_path, index=False)
    with open(report_path, "w", encoding="utf-8") as f:
        json.dump(report.to_dict(), f, ensure_ascii=False, indent=2)
    return points_path, report_path


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _apply_overrides(load_config(), args)
    except ValueError as e:
        print(f"ERROR: {e}")
        return 1

    run_id = datetime.now().strftime("%Y%m%d_%H%M%S")

    # Load samples
    print(f"\n=== Loading samples: {args.data} ===\n")
    try:
        samples = load_samples(args.data, config.samples.label_column)
    except (InvalidInput, FileNotFoundError) as e:
        print(f"ERROR: {e}")
        return 1
    search = config.boundary
    print(f"  Samples: {len(samples)}")
    print(f"  Probe dimension: {search.probe_dimension} ({search.probe_count} values)")
    print(f"  Free dimension: {search.free_dimension}")
    print(f"  Tolerance: {search.tolerance} | Max iterations: {search.max_iterations}")
    print(f"  Run ID: {run_id}")
    print()

    # Step 1: Oracle health check (before any caching wrapper)
    try:
        oracle = load_oracle(args.oracle)
    except (ImportError, AttributeError, TypeError, ValueError) as e:
        print(f"ERROR: Could not load oracle '{args.oracle}': {e}")
        return 1
    print(f"=== Oracle Health Check ===\n")
    print(f"  {args.oracle}... ", end="", flush=True)
    check = check_oracle(oracle, samples[0].features)
    if not check.success:
        print("FAILED")
        print(f"    Error: {(check.error or 'Unknown error')[:200]}")
        return 1
    print(f"OK ({check.latency_ms}ms)\n")
    if args.memoize:
        oracle = MemoizingOracle(oracle)

    # Step 2: Evaluate
    try:
        report = evaluate_model(oracle, samples, config)
    except InvalidInput as e:
        print(f"ERROR: {e}")
        return 1

    print(format_report(report))
    print()
    if isinstance(oracle, MemoizingOracle):
        print(f"  Oracle cache: {oracle.hits} hits, {oracle.misses} misses\n")

    # Step 3: Save outputs
    points_path, report_path = _save_outputs(report, Path(args.output_dir), run_id)
    print(f"=== Output ===\n")
    print(f"  Boundary points: {points_path}")
    print(f"  Report:          {report_path}")
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
