"""PEVS forestry production → MagPIE wood, woodfuel and timber"""

from magpie_ibge.processing.forestry.config import ForestryConfig
from magpie_ibge.processing.forestry.processor import ForestryProcessor

__all__ = ["ForestryConfig", "ForestryProcessor"]
