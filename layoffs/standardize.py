"""Row-level standardization steps for the layoffs data.

Every function takes a DataFrame and returns a new one; the input is left
untouched so each step can be run and checked on its own.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np
import pandas as pd


def trim_whitespace(df: pd.DataFrame, columns: Iterable[str]) -> pd.DataFrame:
    """Strip leading/trailing whitespace from text values."""
    out = df.copy()
    for col in columns:
        out[col] = out[col].map(lambda v: v.strip() if isinstance(v, str) else v)
    return out


def unify_industry(
    df: pd.DataFrame,
    canonical: dict,
    column: str = "industry",
) -> pd.DataFrame:
    """Collapse label variants onto one canonical label.

    ``canonical`` maps a prefix to its label, e.g. ``{"Crypto": "Crypto"}``
    turns "Crypto Currency" and "CryptoCurrency" into "Crypto".
    """
    out = df.copy()
    text = out[column].astype("string")
    for prefix, label in canonical.items():
        mask = text.str.startswith(prefix, na=False).astype(bool)
        out.loc[mask, column] = label
    return out


def strip_trailing_punctuation(df: pd.DataFrame, column: str, chars: str = ".") -> pd.DataFrame:
    """'United States.' -> 'United States'"""
    out = df.copy()
    out[column] = out[column].map(lambda v: v.rstrip(chars) if isinstance(v, str) else v)
    return out


def parse_dates(df: pd.DataFrame, column: str, fmt: str = "%m/%d/%Y") -> pd.DataFrame:
    """Convert text dates to datetime64. Values that do not parse become NaT."""
    out = df.copy()
    out[column] = pd.to_datetime(out[column], format=fmt, errors="coerce")
    return out


def blank_to_null(df: pd.DataFrame, columns: Iterable[str]) -> pd.DataFrame:
    out = df.copy()
    for col in columns:
        out[col] = out[col].replace(r"^\s*$", np.nan, regex=True)
    return out


def fill_from_group(df: pd.DataFrame, column: str, by: Iterable[str]) -> pd.DataFrame:
    """Fill nulls in ``column`` from other rows sharing the ``by`` values.

    The first non-null value of the group is used. Rows whose ``by`` values
    are themselves null are left alone.
    """
    out = df.copy()
    filler = out.groupby(list(by), sort=False)[column].transform("first")
    out[column] = out[column].fillna(filler)
    return out


def drop_unreported(df: pd.DataFrame, columns: Iterable[str]) -> pd.DataFrame:
    """Drop rows where every one of ``columns`` is null."""
    return df.dropna(subset=list(columns), how="all").copy()
