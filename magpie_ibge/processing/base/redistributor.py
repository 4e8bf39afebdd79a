"""Spatial redistribution of municipality values onto grid cells"""

import logging

import pandas as pd

from magpie_ibge.constants import (
    MUNICIPALITY_COLUMN,
    SHARE_COLUMN,
    VALUE_COLUMN,
    VALUE_FINAL_COLUMN,
)

logger = logging.getLogger(__name__)


def exclude_missing_shares(redistributed: pd.DataFrame) -> pd.DataFrame:
    """Drop rows whose municipality has no grid share

    A missing share means incomplete reference data, not a zero value, so
    these rows never reach the aggregate.
    """
    missing = redistributed[SHARE_COLUMN].isna()
    if missing.any():
        municipalities = redistributed.loc[missing, MUNICIPALITY_COLUMN].unique()
        logger.warning(
            f"{len(municipalities)} municipalities ({int(missing.sum())} records) "
            f"are not in the grid mapping and were excluded"
        )
        logger.debug(f"Municipalities without grid share: {sorted(municipalities)[:20]}")
    return redistributed[~missing]


class SpatialRedistributor:
    """Split municipality values across grid cells by share weight"""

    def __init__(self, grid_mapping: pd.DataFrame):
        self.grid_mapping = grid_mapping

    def fan_out(self, facts: pd.DataFrame) -> pd.DataFrame:
        """Left-join facts to grid shares and weight the values

        Each fact becomes one row per grid cell of its municipality. Facts
        from municipalities without shares keep a single row with null share
        and null value_final.
        """
        merged = facts.merge(self.grid_mapping, on=MUNICIPALITY_COLUMN, how="left")
        merged[VALUE_FINAL_COLUMN] = merged[VALUE_COLUMN] * merged[SHARE_COLUMN]
        return merged

    def redistribute(self, facts: pd.DataFrame) -> pd.DataFrame:
        """Fan out facts and exclude those without a grid share"""
        redistributed = exclude_missing_shares(self.fan_out(facts))
        logger.info(
            f"Redistributed {len(facts)} records onto {len(redistributed)} grid cell rows"
        )
        return redistributed.reset_index(drop=True)
