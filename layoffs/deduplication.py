"""Duplicate removal over layoff records.

Two renditions of the same rule live here: ``deduplicate`` works on plain
records (mappings) and ``drop_duplicates`` works on a DataFrame through the
row-number idiom (rank each row inside its key group, keep rank 1).

In both, a null key value is an ordinary value equal to every other null,
so rows that agree everywhere except for being null in the same columns
are duplicates of each other.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

import pandas as pd


# Stands in for None / NaN / NaT / pd.NA inside a fingerprint
_NULL = object()

_RANK_COLUMN = "_row_num"


class InvalidKeyError(ValueError):
    """Raised when a duplicate key is empty or names an unknown field."""


def validate_key(key: Sequence[str] | str, fields: Iterable[str] | None = None) -> tuple:
    """Normalize ``key`` to a tuple and check it against ``fields``.

    A bare string is taken as a single field name.
    """
    if isinstance(key, str):
        key = (key,)
    key = tuple(key)
    if not key:
        raise InvalidKeyError("Duplicate key must name at least one field")

    if fields is not None:
        known = set(fields)
        missing = [name for name in key if name not in known]
        if missing:
            raise InvalidKeyError(
                f"Duplicate key references unknown field(s): {', '.join(missing)}"
            )
    return key


def _is_null(value) -> bool:
    return pd.api.types.is_scalar(value) and bool(pd.isna(value))


def record_fingerprint(record: Mapping, key: tuple) -> tuple:
    """Key tuple of ``record`` with every null mapped to one sentinel."""
    return tuple(_NULL if _is_null(record[name]) else record[name] for name in key)


def deduplicate(
    records: Iterable[Mapping],
    key: Sequence[str] | str,
    fields: Iterable[str] | None = None,
) -> list:
    """Keep the first record of every distinct key combination.

    Args:
        records: Records in input order.
        key: Field names forming the duplicate key.
        fields: Optional record schema; the key is checked against it even
            when there are no records.

    Returns:
        The surviving records, in the order they first appeared.

    Raises:
        InvalidKeyError: if the key is empty, names a field outside
            ``fields``, or any record lacks a key field. Raised before
            anything is returned.
    """
    records = list(records)
    key = validate_key(key, fields)

    for position, record in enumerate(records):
        missing = [name for name in key if name not in record]
        if missing:
            raise InvalidKeyError(
                f"Record {position} has no field(s) {', '.join(missing)} "
                "named in the duplicate key"
            )

    unique_records = []
    seen = set()
    for record in records:
        fingerprint = record_fingerprint(record, key)
        if fingerprint in seen:
            continue
        seen.add(fingerprint)
        unique_records.append(record)
    return unique_records


def add_row_numbers(
    df: pd.DataFrame,
    key: Sequence[str] | str,
    column: str = "row_num",
) -> pd.DataFrame:
    """Number each row within its key group, starting at 1.

    Rows are ranked in the order they appear. Nulls form their own group.
    """
    key = validate_key(key, df.columns)
    if column in df.columns:
        raise ValueError(f"Column '{column}' already exists")

    ranked = df.copy()
    ranked[column] = df.groupby(list(key), dropna=False, sort=False).cumcount() + 1
    return ranked


def drop_duplicates(df: pd.DataFrame, key: Sequence[str] | str | None = None) -> pd.DataFrame:
    """DataFrame counterpart of ``deduplicate``.

    ``key`` defaults to every column. The original index is kept.
    """
    if key is None:
        key = tuple(df.columns)
    ranked = add_row_numbers(df, key, column=_RANK_COLUMN)
    return ranked.loc[ranked[_RANK_COLUMN] == 1].drop(columns=_RANK_COLUMN)
