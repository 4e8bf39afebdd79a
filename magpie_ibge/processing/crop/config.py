"""Crop (PAM planted area) processing configuration"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from magpie_ibge.constants import CROP_MAPPING_FILENAME
from magpie_ibge.mapping.models import IbgeSurvey
from magpie_ibge.processing.base.config import ProcessingConfig


@dataclass
class CropConfig(ProcessingConfig):
    """Configuration for PAM planted area mapping"""

    crop_mapping_file: Optional[Path] = None
    apply_unit_correction: bool = False

    survey = IbgeSurvey.PAM

    def __post_init__(self):
        super().__post_init__()
        self.crop_mapping_file = Path(
            self.crop_mapping_file or self.data_dir / CROP_MAPPING_FILENAME
        )

    def validate(self) -> None:
        """Validate crop specific configuration"""
        super().validate()

        if not self.crop_mapping_file.exists():
            raise FileNotFoundError(f"Crop mapping file not found: {self.crop_mapping_file}")
