"""
Sample Loader

Loads labeled evaluation samples from CSV files.
Headers are normalized to snake_case (e.g. "MonthlyIncome" -> "monthly_income").
"""

import re
from pathlib import Path

import pandas as pd

from boundary_gauge.domain.constants import DEFAULT_LABEL_COLUMN
from boundary_gauge.domain.entities import Sample
from boundary_gauge.domain.errors import InvalidInput

_TRUE_VALUES = {"true", "1", "yes", "y", "approved"}
_FALSE_VALUES = {"false", "0", "no", "n", "rejected"}


def normalize_column_name(name: str) -> str:
    """CamelCase / spaced header -> snake_case"""
    name = str(name).strip()
    name = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name)
    name = re.sub(r"[^0-9a-zA-Z]+", "_", name)
    return name.strip("_").lower()


def _parse_label(value) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)) and value in (0, 1):
        return bool(value)
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise InvalidInput(f"Cannot interpret label value: {value!r}")


def _to_python(value):
    """numpy scalar -> built-in type"""
    return value.item() if hasattr(value, "item") else value


def samples_from_frame(df: pd.DataFrame, label_column: str = DEFAULT_LABEL_COLUMN) -> list[Sample]:
    """
    Create Sample objects from a DataFrame

    Args:
        df: One row per sample
        label_column: Ground truth column (after header normalization)

    Returns:
        list[Sample]

    Raises:
        InvalidInput: If the frame is empty, the label column is missing,
            or a label or feature value is missing or unparseable
    """
    df = df.rename(columns=normalize_column_name)
    label_column = normalize_column_name(label_column)

    if label_column not in df.columns:
        raise InvalidInput(f"Label column '{label_column}' is missing (columns: {list(df.columns)})")
    if df.empty:
        raise InvalidInput("The sample set is empty")
    if df.isna().any().any():
        missing = [c for c in df.columns if df[c].isna().any()]
        raise InvalidInput(f"Missing values in columns: {missing}")

    feature_columns = [c for c in df.columns if c != label_column]
    samples = []
    for record in df.to_dict("records"):
        features = {c: _to_python(record[c]) for c in feature_columns}
        samples.append(Sample(features=features, label=_parse_label(_to_python(record[label_column]))))
    return samples


def load_samples(file_path: str | Path, label_column: str = DEFAULT_LABEL_COLUMN) -> list[Sample]:
    """
    Load samples from a CSV file

    Args:
        file_path: Path to the CSV file (header row required)
        label_column: Ground truth column

    Returns:
        list[Sample]

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidInput: If the file holds no samples or is malformed
    """
    try:
        df = pd.read_csv(file_path)
    except pd.errors.EmptyDataError:
        raise InvalidInput(f"The sample file is empty: {file_path}")
    return samples_from_frame(df, label_column)
