"""IBGE → MagPIE processing pipelines"""

from magpie_ibge.processing.crop import CropConfig, CropProcessor
from magpie_ibge.processing.forestry import ForestryConfig, ForestryProcessor
from magpie_ibge.processing.livestock import LivestockConfig, LivestockProcessor

__all__ = [
    "CropConfig",
    "CropProcessor",
    "ForestryConfig",
    "ForestryProcessor",
    "LivestockConfig",
    "LivestockProcessor",
]
