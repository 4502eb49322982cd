"""Stage 1: Loading, cleaning and writing the layoffs data.

This module chains the standardization steps and the duplicate removal into
one pipeline and wraps it with CSV loading and writing.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd

from .config import LAYOFFS_COLUMNS, CleaningSettings, cleaning_settings, data_paths
from .deduplication import drop_duplicates
from .standardize import (
    blank_to_null,
    drop_unreported,
    fill_from_group,
    parse_dates,
    strip_trailing_punctuation,
    trim_whitespace,
    unify_industry,
)


class SchemaError(ValueError):
    """Raised when a loaded file does not carry the layoffs columns."""


def load_raw_data(path: Path | None = None, null_markers: tuple = ("NULL",)) -> pd.DataFrame:
    """Load the raw layoffs CSV.

    Only the ``null_markers`` and empty cells load as nulls; other text such
    as "NA" or "None" is kept as-is. Rows with the wrong number of fields
    make pandas raise ``ParserError``.

    Returns:
        The raw DataFrame, columns in schema order.
    """
    path = Path(path) if path is not None else data_paths.layoffs_raw_csv
    if not path.exists():
        raise FileNotFoundError(
            f"Raw layoffs file not found: {path}\n"
            "Place the export at data/layoffs.csv or pass its path explicitly."
        )

    df = pd.read_csv(path, na_values=["", *null_markers], keep_default_na=False)
    print(f"Loaded layoffs (raw): {df.shape}")

    missing = [col for col in LAYOFFS_COLUMNS if col not in df.columns]
    extra = [col for col in df.columns if col not in LAYOFFS_COLUMNS]
    if missing or extra:
        raise SchemaError(
            f"Unexpected layoffs columns in {path}: "
            f"missing={missing}, unexpected={extra}"
        )
    return df[list(LAYOFFS_COLUMNS)]


def create_staging(df: pd.DataFrame) -> pd.DataFrame:
    """Working copy of the raw data; the raw frame is never modified."""
    return df.copy(deep=True)


def frame_to_records(df: pd.DataFrame) -> list:
    """Rows as dicts, with NaN/NaT turned into None."""
    cleaned = df.astype(object).where(df.notna(), None)
    return cleaned.to_dict(orient="records")


def records_to_frame(records: list, columns: tuple = LAYOFFS_COLUMNS) -> pd.DataFrame:
    df = pd.DataFrame.from_records(list(records), columns=list(columns))
    return df.where(df.notna(), np.nan)


def clean_layoffs(df: pd.DataFrame, settings: CleaningSettings | None = None) -> pd.DataFrame:
    """Run every cleaning step over the raw frame and return the result.

    Order: staging copy, duplicates, trimming, industry labels, country
    punctuation, dates, blank industries, industry fill, unreported rows.
    """
    settings = settings or cleaning_settings

    staging = create_staging(df)
    df_clean = drop_duplicates(staging, settings.duplicate_key)
    print(f"Removed duplicates: {len(staging) - len(df_clean)}")

    df_clean = trim_whitespace(df_clean, settings.trim_columns)
    df_clean = unify_industry(df_clean, settings.canonical_industries())
    df_clean = strip_trailing_punctuation(
        df_clean, settings.country_column, settings.country_strip_chars
    )
    df_clean = parse_dates(df_clean, settings.date_column, settings.date_format)
    df_clean = blank_to_null(df_clean, settings.blank_columns)
    df_clean = fill_from_group(df_clean, settings.fill_column, settings.fill_by)

    before = len(df_clean)
    df_clean = drop_unreported(df_clean, settings.reported_columns)
    print(f"Removed rows without layoff figures: {before - len(df_clean)}")

    return df_clean.reset_index(drop=True)


def run_cleaning(input_path: Path | None = None, output_path: Path | None = None) -> pd.DataFrame:
    """Main entry point for the cleaning stage."""
    print("Layoffs – Stage 1: Data cleaning")

    output_path = Path(output_path) if output_path is not None else data_paths.layoffs_clean_csv

    df_raw = load_raw_data(input_path, cleaning_settings.null_markers)
    df_clean = clean_layoffs(df_raw)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    df_clean.to_csv(output_path, index=False)

    print(f"Total rows: {len(df_raw):,}")
    print(f"Clean rows: {len(df_clean):,}")
    print(f"Clean file: {output_path}")
    return df_clean


if __name__ == "__main__":
    run_cleaning()
