"""Livestock (PPM herd) processing configuration"""

from dataclasses import dataclass
from typing import Tuple

from magpie_ibge.mapping.models import DEFAULT_HERD_CATEGORIES, IbgeSurvey
from magpie_ibge.processing.base.config import ProcessingConfig


@dataclass
class LivestockConfig(ProcessingConfig):
    """Configuration for PPM herd mapping"""

    herd_categories: Tuple[str, ...] = DEFAULT_HERD_CATEGORIES

    survey = IbgeSurvey.PPM

    def __post_init__(self):
        super().__post_init__()
        self.herd_categories = tuple(self.herd_categories or ())

    def validate(self) -> None:
        """Validate livestock specific configuration"""
        super().validate()

        if not self.herd_categories:
            raise ValueError("At least one herd category must be selected")
