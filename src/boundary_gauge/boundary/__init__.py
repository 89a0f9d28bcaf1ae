"""
Boundary sub-package

Locates the oracle's 50% confidence surface and fits a line through it.
"""

from boundary_gauge.boundary.fitter import (
    INDETERMINATE_BOUNDARY,
    describe_boundary,
    fit_line,
    format_formula,
)
from boundary_gauge.boundary.locator import (
    feature_range,
    find_boundary_value,
    locate_boundary,
    probe_values,
    representative_features,
)

__all__ = [
    # fitter
    "INDETERMINATE_BOUNDARY",
    "describe_boundary",
    "fit_line",
    "format_formula",
    # locator
    "feature_range",
    "find_boundary_value",
    "locate_boundary",
    "probe_values",
    "representative_features",
]
