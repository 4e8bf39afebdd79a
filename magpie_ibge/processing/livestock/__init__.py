"""PPM herd counts → MagPIE livestock"""

from magpie_ibge.processing.livestock.config import LivestockConfig
from magpie_ibge.processing.livestock.processor import LivestockProcessor

__all__ = ["LivestockConfig", "LivestockProcessor"]
