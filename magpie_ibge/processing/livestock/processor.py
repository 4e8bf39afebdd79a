"""Livestock processor: PPM herd counts onto the MagPIE grid"""

import logging
from typing import Optional

import pandas as pd

from magpie_ibge.processing.base.processor import BaseProcessor
from magpie_ibge.processing.base.reference import ReferenceData
from magpie_ibge.processing.livestock.config import LivestockConfig

logger = logging.getLogger(__name__)


class LivestockProcessor(BaseProcessor):
    """Keep the selected herds (cattle by default) without a category column"""

    has_category = False

    def __init__(self, config: LivestockConfig, reference: Optional[ReferenceData] = None):
        super().__init__(config, reference)
        self.config = config

    def reclassify(self, cleaned: pd.DataFrame) -> pd.DataFrame:
        herd_column = self.survey.category_name_column
        selected = cleaned[cleaned[herd_column].isin(self.config.herd_categories)]

        logger.info(
            f"Selected {len(selected)} of {len(cleaned)} records for herds "
            f"{list(self.config.herd_categories)}"
        )
        if len(selected) == 0:
            logger.warning(
                f"No records for herds {list(self.config.herd_categories)}; "
                f"available: {sorted(cleaned[herd_column].unique())}"
            )
        return selected
