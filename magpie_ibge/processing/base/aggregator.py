"""Group-wise summation of redistributed values"""

import logging
from typing import List, Sequence

import pandas as pd

from magpie_ibge.constants import CATEGORY_COLUMN, GRID_ID_COLUMN, YEAR_COLUMN, VALUE_FINAL_COLUMN

logger = logging.getLogger(__name__)


def sum_ignoring_nulls(
    df: pd.DataFrame, keys: List[str], value_column: str = VALUE_FINAL_COLUMN
) -> pd.DataFrame:
    """Sum value_column per key, skipping nulls (an all-null group sums to 0)"""
    aggregated = (
        df.groupby(keys, as_index=False, sort=True)[value_column]
        .sum(min_count=0)
    )
    return aggregated.sort_values(keys).reset_index(drop=True)


def add_rollup(
    df: pd.DataFrame,
    rollup_category: str,
    components: Sequence[str],
    keys: Sequence[str] = (GRID_ID_COLUMN, YEAR_COLUMN),
    category_column: str = CATEGORY_COLUMN,
    value_column: str = VALUE_FINAL_COLUMN,
) -> pd.DataFrame:
    """Append a derived category equal to the sum of its components

    A component missing for a (grid, year) counts as 0. The base rows are
    kept, so summing over all categories counts the components twice.
    """
    keys = list(keys)
    parts = df[df[category_column].isin(components)]
    rollup = sum_ignoring_nulls(parts, keys, value_column)
    rollup[category_column] = rollup_category

    combined = pd.concat([df, rollup[df.columns]], ignore_index=True)
    logger.debug(
        f"Added {len(rollup)} '{rollup_category}' rows from components {list(components)}"
    )
    return combined.sort_values(keys + [category_column]).reset_index(drop=True)
