"""
Boundary Shape Fitter

Fits a least-squares line through boundary points and describes it.
"""

from typing import Sequence

from boundary_gauge.domain.errors import InsufficientData
from boundary_gauge.domain.value_objects import BoundaryPoint, FitResult

INDETERMINATE_BOUNDARY = "Could not determine decision boundary"


def fit_line(points: Sequence[BoundaryPoint]) -> FitResult:
    """
    Ordinary least squares over (probe_value, boundary_value) pairs

    slope = (nΣxy - ΣxΣy) / (nΣx² - (Σx)²), intercept = (Σy - slope·Σx) / n,
    R² = 1 - SS_res / SS_tot. When every boundary value is identical SS_tot is
    0, so the fit is reported as horizontal with R² = 1.

    Args:
        points: Boundary points

    Returns:
        FitResult

    Raises:
        InsufficientData: Fewer than 2 points, or all points share one probe value
    """
    n = len(points)
    if n < 2:
        raise InsufficientData(f"At least 2 boundary points are required (got {n})")

    sum_x = sum(p.probe_value for p in points)
    sum_y = sum(p.boundary_value for p in points)
    sum_xy = sum(p.probe_value * p.boundary_value for p in points)
    sum_xx = sum(p.probe_value * p.probe_value for p in points)

    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        raise InsufficientData("Boundary points share a single probe value")

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n

    first_y = points[0].boundary_value
    if all(p.boundary_value == first_y for p in points):
        return FitResult(slope=0.0, intercept=first_y, r_squared=1.0, n_points=n, horizontal=True)

    mean_y = sum_y / n
    ss_tot = sum((p.boundary_value - mean_y) ** 2 for p in points)
    ss_res = sum((p.boundary_value - (slope * p.probe_value + intercept)) ** 2 for p in points)
    return FitResult(slope=slope, intercept=intercept, r_squared=1.0 - ss_res / ss_tot, n_points=n)


def format_formula(fit: FitResult, probe_dimension: str, free_dimension: str) -> str:
    """e.g. "monthly_income = 0.3000 * loan_amount + 2000" """
    sign = "-" if fit.intercept < 0 else "+"
    return f"{free_dimension} = {fit.slope:.4f} * {probe_dimension} {sign} {abs(fit.intercept):.0f}"


def describe_boundary(fit: FitResult | None, probe_dimension: str, free_dimension: str) -> str:
    """
    Human-readable boundary description

    Args:
        fit: Line fit, or None if the boundary is indeterminate
        probe_dimension: x-axis feature name
        free_dimension: y-axis feature name
    """
    if fit is None:
        return INDETERMINATE_BOUNDARY
    if fit.is_linear:
        return f"{format_formula(fit, probe_dimension, free_dimension)} (R² = {fit.r_squared:.3f})"
    return f"Non-linear boundary (R² = {fit.r_squared:.3f})"
