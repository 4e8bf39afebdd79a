"""Forestry processor: PEVS production as dry matter onto the MagPIE grid"""

import logging
from typing import Optional

import pandas as pd

from magpie_ibge.constants import CATEGORY_COLUMN, VALUE_COLUMN
from magpie_ibge.processing.base.aggregator import add_rollup
from magpie_ibge.processing.base.errors import UnmappedCategoryError
from magpie_ibge.processing.base.processor import BaseProcessor
from magpie_ibge.processing.base.reference import ReferenceData
from magpie_ibge.processing.forestry.config import ForestryConfig

logger = logging.getLogger(__name__)


class ForestryProcessor(BaseProcessor):
    """Allowlisted PEVS products converted to dry matter, plus a timber roll-up"""

    def __init__(self, config: ForestryConfig, reference: Optional[ReferenceData] = None):
        super().__init__(config, reference)
        self.config = config

    def reclassify(self, cleaned: pd.DataFrame) -> pd.DataFrame:
        """Attach category and conversion factor; products off the allowlist are excluded"""
        product_column = self.survey.category_name_column
        categories = {name: category for name, (category, _) in self.config.product_mapping.items()}
        factors = {name: factor for name, (_, factor) in self.config.product_mapping.items()}

        mapped = cleaned.copy()
        mapped[CATEGORY_COLUMN] = mapped[product_column].map(categories)
        mapped["conv_factor"] = mapped[product_column].map(factors)
        # Unknown products carry a null factor, hence a null dry-matter value
        mapped[VALUE_COLUMN] = mapped[VALUE_COLUMN] * mapped["conv_factor"]

        unmapped = mapped[CATEGORY_COLUMN].isna()
        if unmapped.any():
            products = mapped.loc[unmapped, product_column].unique()
            if self.config.strict_mapping:
                raise UnmappedCategoryError(self.survey.name, products)
            logger.info(
                f"Excluded {int(unmapped.sum())} records of {len(products)} products "
                f"outside the forestry mapping"
            )
            logger.debug(f"Excluded products: {sorted(products)}")

        mapped = mapped[~unmapped]
        logger.info(
            f"Converted {len(mapped)} records to dry matter for categories "
            f"{sorted(mapped[CATEGORY_COLUMN].unique())}"
        )
        return mapped

    def aggregate(self, redistributed: pd.DataFrame) -> pd.DataFrame:
        """Sum per (grid, year, category) and add the roll-up category"""
        aggregated = super().aggregate(redistributed)
        return add_rollup(
            aggregated, self.config.rollup_category, self.config.rollup_components
        )
