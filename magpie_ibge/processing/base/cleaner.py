"""Record cleaner for raw SIDRA fact tables"""

import logging
from typing import Optional

import pandas as pd

from magpie_ibge.constants import (
    FACT_COLUMN_COUNT,
    MUNICIPALITY_COLUMN,
    NOT_APPLICABLE,
    NOT_AVAILABLE,
    SENTINEL_FILL_VALUE,
    SIDRA_HEADER_LABEL,
    VALUE_COLUMN,
    YEAR_COLUMN,
)
from magpie_ibge.mapping.models import IbgeSurvey

logger = logging.getLogger(__name__)


def zero_fill_sentinels(values: pd.Series) -> pd.Series:
    """Replace the "-" and "..." encodings with 0, leaving other cells as they are"""
    return values.mask(values.isin([NOT_AVAILABLE, NOT_APPLICABLE]), SENTINEL_FILL_VALUE)


def coerce_numeric(values: pd.Series, column: str) -> pd.Series:
    """Convert to numbers, failing on anything that is present but not numeric"""
    numeric = pd.to_numeric(values, errors="coerce")
    invalid = numeric.isna() & values.notna()
    if invalid.any():
        examples = values[invalid].astype(str).unique()[:5].tolist()
        raise ValueError(
            f"Column '{column}' has {int(invalid.sum())} non-numeric values, e.g. {examples}"
        )
    return numeric


def _coerce_integer(values: pd.Series, column: str) -> pd.Series:
    numeric = coerce_numeric(values, column)
    if numeric.isna().any():
        raise ValueError(f"Column '{column}' has {int(numeric.isna().sum())} missing values")
    return numeric.astype(int)


def clean_records(
    raw: pd.DataFrame,
    survey: IbgeSurvey,
    start_year: Optional[int] = None,
    end_year: Optional[int] = None,
) -> pd.DataFrame:
    """Clean a raw 14-column SIDRA table

    Columns are renamed positionally, sentinel values zero-filled, then
    value/cd_mun/year coerced. Coercion failures are fatal.

    Args:
        raw: Fact table as read, every cell as text
        survey: Survey the table belongs to (decides the category column name)
        start_year: First year kept (inclusive), None for no lower bound
        end_year: Last year kept (inclusive), None for no upper bound

    Returns:
        DataFrame with cd_mun, nm_<category>, nm_unidmedida, year, cd_year, value
    """
    if len(raw.columns) != FACT_COLUMN_COUNT:
        raise ValueError(
            f"{survey.name} fact table must have {FACT_COLUMN_COUNT} columns, got {len(raw.columns)}"
        )

    df = raw.copy()
    df.columns = survey.column_names()

    # SIDRA API responses repeat the descriptive header as the first data row
    if len(df) > 0 and df.iloc[0, 0] == SIDRA_HEADER_LABEL:
        df = df.iloc[1:]

    category_column = survey.category_name_column
    cleaned = df[
        [MUNICIPALITY_COLUMN, category_column, "nm_unidmedida", YEAR_COLUMN, "cd_year", VALUE_COLUMN]
    ].copy()

    cleaned[VALUE_COLUMN] = coerce_numeric(
        zero_fill_sentinels(cleaned[VALUE_COLUMN]), VALUE_COLUMN
    ).astype(float)
    cleaned[MUNICIPALITY_COLUMN] = _coerce_integer(cleaned[MUNICIPALITY_COLUMN], MUNICIPALITY_COLUMN)
    cleaned[YEAR_COLUMN] = _coerce_integer(cleaned[YEAR_COLUMN], YEAR_COLUMN)
    cleaned[category_column] = cleaned[category_column].astype(str)

    if start_year is not None:
        cleaned = cleaned[cleaned[YEAR_COLUMN] >= start_year]
    if end_year is not None:
        cleaned = cleaned[cleaned[YEAR_COLUMN] <= end_year]

    logger.info(
        f"Cleaned {survey.name}: {len(cleaned)} of {len(df)} records kept "
        f"({cleaned[MUNICIPALITY_COLUMN].nunique()} municipalities)"
    )
    return cleaned.reset_index(drop=True)
