"""Base processor: clean → reclassify → redistribute → aggregate → write"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

import pandas as pd

from magpie_ibge.constants import (
    CATEGORY_COLUMN,
    GRID_ID_COLUMN,
    OUTPUT_CATEGORY_COLUMN,
    OUTPUT_GRID_COLUMN,
    OUTPUT_VALUE_COLUMN,
    OUTPUT_YEAR_COLUMN,
    SUMMARY_SCALE,
    VALUE_FINAL_COLUMN,
    YEAR_COLUMN,
)
from magpie_ibge.processing.base.aggregator import sum_ignoring_nulls
from magpie_ibge.processing.base.cleaner import clean_records
from magpie_ibge.processing.base.config import ProcessingConfig
from magpie_ibge.processing.base.io import read_table, write_table
from magpie_ibge.processing.base.redistributor import SpatialRedistributor
from magpie_ibge.processing.base.reference import ReferenceData

logger = logging.getLogger(__name__)


class BaseProcessor(ABC):
    """Generic IBGE → MagPIE pipeline, specialised per survey by subclasses"""

    # Whether the output carries the kcr category column
    has_category = True

    def __init__(self, config: ProcessingConfig, reference: Optional[ReferenceData] = None):
        """Initialize processor

        Args:
            config: Pipeline configuration
            reference: Preloaded reference tables; loaded from config paths when omitted
        """
        self.config = config
        self.survey = config.survey
        self._reference = reference

        self._setup_logging()
        logger.info(f"Initialized {self.__class__.__name__} for {self.survey.name}")

    def _setup_logging(self):
        """Setup logging configuration"""
        log_level = logging.DEBUG if self.config.debug else logging.INFO
        logging.basicConfig(
            level=log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    @property
    def reference(self) -> ReferenceData:
        """Reference tables, loading them if needed"""
        if self._reference is None:
            self._reference = self.load_reference()
        return self._reference

    def load_reference(self) -> ReferenceData:
        """Load the reference tables this survey needs"""
        return ReferenceData.load(self.config.grid_mapping_file)

    @property
    def output_keys(self) -> List[str]:
        """Aggregation key of the output"""
        keys = [GRID_ID_COLUMN, YEAR_COLUMN]
        if self.has_category:
            keys.append(CATEGORY_COLUMN)
        return keys

    @abstractmethod
    def reclassify(self, cleaned: pd.DataFrame) -> pd.DataFrame:
        """Map source categories to MagPIE categories - to be implemented by subclasses

        Must return the rows to redistribute, with a kcr column when the
        output has a category.
        """
        pass

    def aggregate(self, redistributed: pd.DataFrame) -> pd.DataFrame:
        """Sum redistributed values per output key"""
        return sum_ignoring_nulls(redistributed, self.output_keys)

    def transform(self, raw: pd.DataFrame) -> pd.DataFrame:
        """Run every in-memory step on a raw fact table

        Returns:
            Output table with MagPIE column names
        """
        cleaned = clean_records(
            raw, self.survey, self.config.start_year, self.config.end_year
        )
        reclassified = self.reclassify(cleaned)
        redistributor = SpatialRedistributor(self.reference.grid_mapping)
        redistributed = redistributor.redistribute(reclassified)
        aggregated = self.aggregate(redistributed)
        logger.info(f"Aggregated to {len(aggregated)} rows by {self.output_keys}")
        return self.format_output(aggregated)

    def format_output(self, aggregated: pd.DataFrame) -> pd.DataFrame:
        """Rename to the MagPIE header and strip quotes from grid ids"""
        renames = {
            GRID_ID_COLUMN: OUTPUT_GRID_COLUMN,
            YEAR_COLUMN: OUTPUT_YEAR_COLUMN,
            CATEGORY_COLUMN: OUTPUT_CATEGORY_COLUMN,
            VALUE_FINAL_COLUMN: OUTPUT_VALUE_COLUMN,
        }
        columns = [OUTPUT_GRID_COLUMN, OUTPUT_YEAR_COLUMN]
        if self.has_category:
            columns.append(OUTPUT_CATEGORY_COLUMN)
        columns.append(OUTPUT_VALUE_COLUMN)

        output = aggregated.rename(columns=renames)[columns].copy()
        output[OUTPUT_GRID_COLUMN] = (
            output[OUTPUT_GRID_COLUMN].astype(str).str.replace('"', "", regex=False)
        )
        return output

    def summarize(self, output: pd.DataFrame) -> pd.DataFrame:
        """National totals per year (and category), in millions"""
        keys = [OUTPUT_YEAR_COLUMN]
        if self.has_category:
            keys.append(OUTPUT_CATEGORY_COLUMN)
        summary = sum_ignoring_nulls(output, keys, OUTPUT_VALUE_COLUMN)
        summary[OUTPUT_VALUE_COLUMN] = summary[OUTPUT_VALUE_COLUMN] / SUMMARY_SCALE
        return summary.rename(columns={OUTPUT_VALUE_COLUMN: "total"})

    def save_output(self, output: pd.DataFrame) -> Path:
        """Write the output table to the configured path"""
        return write_table(output, self.config.get_output_path(), self.config.output_format)

    def process_with_validation(self) -> List[Path]:
        """Template method that validates config before processing"""
        self.config.validate()
        return self.process()

    def process(self) -> List[Path]:
        """Read the fact table, transform it and write the result"""
        logger.info(f"Processing {self.survey.name} facts from {self.config.fact_file}")
        raw = read_table(self.config.fact_file, raw=True)
        output = self.transform(raw)
        output_path = self.save_output(output)

        summary = self.summarize(output)
        logger.debug(f"Totals in millions:\n{summary.to_string(index=False)}")

        return [output_path]
