import numpy as np
import pandas as pd

from layoffs.standardize import (
    blank_to_null,
    drop_unreported,
    fill_from_group,
    parse_dates,
    strip_trailing_punctuation,
    trim_whitespace,
    unify_industry,
)


def test_trim_whitespace():
    df = pd.DataFrame({"company": [" Included Health", "Uber ", np.nan], "total_laid_off": [1, 2, 3]})
    result = trim_whitespace(df, ["company"])

    assert result["company"].tolist()[:2] == ["Included Health", "Uber"]
    assert pd.isna(result["company"].iloc[2])
    # input untouched
    assert df["company"].iloc[0] == " Included Health"


def test_unify_industry():
    df = pd.DataFrame({"industry": ["Crypto Currency", "CryptoCurrency", "Crypto", "Retail", np.nan]})
    result = unify_industry(df, {"Crypto": "Crypto"})

    assert result["industry"].tolist()[:4] == ["Crypto", "Crypto", "Crypto", "Retail"]
    assert pd.isna(result["industry"].iloc[4])
    assert df["industry"].iloc[0] == "Crypto Currency"


def test_strip_trailing_punctuation():
    df = pd.DataFrame({"country": ["United States.", "United States", "Canada", np.nan]})
    result = strip_trailing_punctuation(df, "country")

    assert result["country"].tolist()[:3] == ["United States", "United States", "Canada"]
    assert result["country"].nunique() == 2
    assert df["country"].iloc[0] == "United States."


def test_parse_dates():
    df = pd.DataFrame({"date": ["3/6/2023", "12/16/2022", "not a date", np.nan]})
    result = parse_dates(df, "date")

    assert pd.api.types.is_datetime64_any_dtype(result["date"])
    assert result["date"].iloc[0] == pd.Timestamp("2023-03-06")
    assert result["date"].iloc[1] == pd.Timestamp("2022-12-16")
    assert result["date"].iloc[2:].isna().all()
    assert df["date"].iloc[0] == "3/6/2023"


def test_blank_to_null():
    df = pd.DataFrame({"industry": ["", "   ", "Travel", np.nan]})
    result = blank_to_null(df, ["industry"])

    assert result["industry"].isna().tolist() == [True, True, False, True]
    assert result["industry"].iloc[2] == "Travel"
    assert df["industry"].tolist()[:3] == ["", "   ", "Travel"]


def test_fill_from_group():
    df = pd.DataFrame({
        "company": ["Airbnb", "Airbnb", "Bally's Interactive", "Juul", "Juul", np.nan],
        "industry": [np.nan, "Travel", np.nan, "Consumer", np.nan, np.nan],
    })
    result = fill_from_group(df, "industry", ["company"])

    assert result["industry"].iloc[0] == "Travel"
    assert result["industry"].iloc[1] == "Travel"
    assert pd.isna(result["industry"].iloc[2])
    assert result["industry"].iloc[4] == "Consumer"
    assert pd.isna(result["industry"].iloc[5])
    assert pd.isna(df["industry"].iloc[0])


def test_drop_unreported():
    df = pd.DataFrame({
        "company": ["A", "B", "C"],
        "total_laid_off": [np.nan, 10, np.nan],
        "percentage_laid_off": [np.nan, np.nan, 0.5],
    })
    result = drop_unreported(df, ["total_laid_off", "percentage_laid_off"])

    assert result["company"].tolist() == ["B", "C"]
    assert len(df) == 3
