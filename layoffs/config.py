"""Central configuration for the layoffs cleaning pipeline.

File locations and the cleaning rules are collected here so that the rest of
the code does not contain hard-coded machine-specific paths or magic values.
"""

from dataclasses import dataclass
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parents[1]

LAYOFFS_COLUMNS = (
    "company",
    "location",
    "industry",
    "total_laid_off",
    "percentage_laid_off",
    "date",
    "stage",
    "country",
    "funds_raised_millions",
)


@dataclass
class DataPaths:
    """All data paths, pointing to the local ./data folder."""

    base_data: Path = PROJECT_ROOT / "data"

    # Raw export as downloaded
    layoffs_raw_csv: Path = base_data / "layoffs.csv"
    # Cleaned output written by the pipeline
    layoffs_clean_csv: Path = base_data / "layoffs_clean.csv"


@dataclass
class CleaningSettings:
    # Every column takes part in the duplicate key; the raw export has no id
    duplicate_key: tuple = LAYOFFS_COLUMNS
    trim_columns: tuple = ("company",)
    # Label prefix -> canonical label ("Crypto Currency" -> "Crypto")
    industry_labels: dict = None
    country_column: str = "country"
    country_strip_chars: str = "."
    date_column: str = "date"
    date_format: str = "%m/%d/%Y"
    blank_columns: tuple = ("industry",)
    fill_column: str = "industry"
    fill_by: tuple = ("company",)
    # A row with none of these is dropped
    reported_columns: tuple = ("total_laid_off", "percentage_laid_off")
    null_markers: tuple = ("NULL",)

    def canonical_industries(self) -> dict:
        return self.industry_labels or {"Crypto": "Crypto"}


data_paths = DataPaths()
cleaning_settings = CleaningSettings()
