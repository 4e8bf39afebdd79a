"""Forestry (PEVS production) processing configuration"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

from magpie_ibge.mapping.models import (
    IbgeSurvey,
    TIMBER_CATEGORY,
    TIMBER_COMPONENTS,
    default_forestry_mapping,
)
from magpie_ibge.processing.base.config import ProcessingConfig


@dataclass
class ForestryConfig(ProcessingConfig):
    """Configuration for PEVS forestry production mapping

    product_mapping maps an IBGE product name to its MagPIE category and the
    factor converting reported units to dry-matter mass.
    """

    product_mapping: Dict[str, Tuple[str, float]] = field(
        default_factory=default_forestry_mapping
    )
    rollup_category: str = TIMBER_CATEGORY
    rollup_components: Tuple[str, ...] = TIMBER_COMPONENTS

    survey = IbgeSurvey.PEVS

    def validate(self) -> None:
        """Validate forestry specific configuration"""
        super().validate()

        if not self.product_mapping:
            raise ValueError("Forestry product mapping must not be empty")

        for product, (_, factor) in self.product_mapping.items():
            if factor <= 0:
                raise ValueError(
                    f"Conversion factor for '{product}' must be positive, got {factor}"
                )

        categories = {category for category, _ in self.product_mapping.values()}
        if self.rollup_category in categories:
            raise ValueError(
                f"Roll-up category '{self.rollup_category}' clashes with a mapped category"
            )
