"""Shared pipeline components"""

from magpie_ibge.processing.base.config import ProcessingConfig
from magpie_ibge.processing.base.errors import UnmappedCategoryError
from magpie_ibge.processing.base.processor import BaseProcessor
from magpie_ibge.processing.base.redistributor import SpatialRedistributor
from magpie_ibge.processing.base.reference import ReferenceData

__all__ = [
    "BaseProcessor",
    "ProcessingConfig",
    "ReferenceData",
    "SpatialRedistributor",
    "UnmappedCategoryError",
]
