"""Layoffs: cleaning pipeline for the company layoffs dataset.

The raw export is copied to a staging frame and cleaned in small, separate
steps, each returning a new DataFrame:

- ``layoffs.deduplication`` → duplicate removal by key, first row kept
- ``layoffs.standardize``   → trimming, labels, dates, blanks, nulls
- ``python -m layoffs.cleaning`` → load, clean and write the whole file
"""
