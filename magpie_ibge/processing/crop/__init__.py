"""PAM planted area → MagPIE crops"""

from magpie_ibge.processing.crop.config import CropConfig
from magpie_ibge.processing.crop.processor import CropProcessor

__all__ = ["CropConfig", "CropProcessor"]
