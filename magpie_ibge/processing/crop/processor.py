"""Crop processor: PAM planted area onto the MagPIE grid by MagPIE crop"""

import logging
from typing import Optional

import pandas as pd

from magpie_ibge.constants import (
    CATEGORY_COLUMN,
    IBGE_CROP_COLUMN,
    MAGPIE_CROP_COLUMN,
    UNIT_CHANGE_YEAR,
    VALUE_COLUMN,
    YEAR_COLUMN,
)
from magpie_ibge.mapping.models import THOUSAND_FRUIT_PRODUCTS, UNIT_CHANGE_PRODUCTS
from magpie_ibge.processing.base.errors import UnmappedCategoryError
from magpie_ibge.processing.base.processor import BaseProcessor
from magpie_ibge.processing.base.reference import ReferenceData
from magpie_ibge.processing.crop.config import CropConfig

logger = logging.getLogger(__name__)


def apply_unit_correction(cleaned: pd.DataFrame, category_column: str) -> pd.DataFrame:
    """Zero out fruit values reported in fruit counts instead of tonnes

    Products listed in UNIT_CHANGE_PRODUCTS switched to tonnes in 2001, so
    earlier years are zeroed; THOUSAND_FRUIT_PRODUCTS are zeroed for all years.
    Only meaningful for production tables.
    """
    corrected = cleaned.copy()
    before_change = corrected[category_column].isin(UNIT_CHANGE_PRODUCTS) & (
        corrected[YEAR_COLUMN] < UNIT_CHANGE_YEAR
    )
    fruit_counts = corrected[category_column].isin(THOUSAND_FRUIT_PRODUCTS)
    zeroed = before_change | fruit_counts

    corrected.loc[zeroed, VALUE_COLUMN] = 0.0
    logger.info(f"Unit correction zeroed {int(zeroed.sum())} records")
    return corrected


class CropProcessor(BaseProcessor):
    """Map PAM crops to MagPIE crops through the crop taxonomy table"""

    def __init__(self, config: CropConfig, reference: Optional[ReferenceData] = None):
        super().__init__(config, reference)
        self.config = config

    def load_reference(self) -> ReferenceData:
        return ReferenceData.load(
            self.config.grid_mapping_file, self.config.crop_mapping_file
        )

    def reclassify(self, cleaned: pd.DataFrame) -> pd.DataFrame:
        """Inner-join on crop name; unmapped crops are dropped (or fatal in strict mode)"""
        category_column = self.survey.category_name_column
        if self.config.apply_unit_correction:
            cleaned = apply_unit_correction(cleaned, category_column)

        crop_mapping = self.reference.crop_mapping
        if crop_mapping is None:
            raise ValueError("Crop processing requires a crop mapping table")

        known = cleaned[category_column].isin(crop_mapping[IBGE_CROP_COLUMN])
        if not known.all():
            unmapped = cleaned.loc[~known, category_column].unique()
            if self.config.strict_mapping:
                raise UnmappedCategoryError(self.survey.name, unmapped)
            logger.warning(
                f"Dropped {int((~known).sum())} records of {len(unmapped)} unmapped crops: "
                f"{sorted(unmapped)}"
            )

        mapped = cleaned.merge(
            crop_mapping, left_on=category_column, right_on=IBGE_CROP_COLUMN, how="inner"
        )
        mapped = mapped.drop(columns=[IBGE_CROP_COLUMN]).rename(
            columns={MAGPIE_CROP_COLUMN: CATEGORY_COLUMN}
        )
        logger.info(
            f"Mapped {len(mapped)} records onto {mapped[CATEGORY_COLUMN].nunique()} MagPIE crops"
        )
        return mapped
