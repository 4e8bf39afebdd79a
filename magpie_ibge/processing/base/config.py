"""Base configuration class for IBGE → MagPIE pipelines"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from magpie_ibge.constants import (
    DATA_DIR,
    DEFAULT_END_YEAR,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_START_YEAR,
    GRID_MAPPING_FILENAME,
    OUTPUT_FORMAT_CSV,
    OUTPUT_FORMAT_PARQUET,
    OUTPUT_SUBDIR,
)
from magpie_ibge.mapping.models import IbgeSurvey


@dataclass
class ProcessingConfig:
    """Shared parameters: input/output paths, year window and mapping policy

    Paths left as None are resolved against ``data_dir`` in ``__post_init__``
    using the defaults of the survey the subclass handles.
    """

    data_dir: Path = Path(DATA_DIR)
    fact_file: Optional[Path] = None
    grid_mapping_file: Optional[Path] = None
    output_dir: Optional[Path] = None
    output_file: Optional[str] = None
    start_year: Optional[int] = DEFAULT_START_YEAR
    end_year: Optional[int] = DEFAULT_END_YEAR
    output_format: str = DEFAULT_OUTPUT_FORMAT
    strict_mapping: bool = False
    debug: bool = False

    survey = IbgeSurvey.PAM

    def __post_init__(self):
        """Coerce paths and fill in survey defaults"""
        self.data_dir = Path(self.data_dir or DATA_DIR)
        self.fact_file = Path(self.fact_file or self.data_dir / self.survey.fact_filename)
        self.grid_mapping_file = Path(
            self.grid_mapping_file or self.data_dir / GRID_MAPPING_FILENAME
        )
        self.output_dir = Path(self.output_dir or self.data_dir / OUTPUT_SUBDIR)
        if self.output_file is None:
            self.output_file = self.survey.output_filename

    def validate(self) -> None:
        """Validate configuration parameters"""
        valid_formats = [OUTPUT_FORMAT_CSV, OUTPUT_FORMAT_PARQUET]
        if self.output_format not in valid_formats:
            raise ValueError(
                f"Invalid output_format: {self.output_format}. Must be one of {valid_formats}"
            )

        if (
            self.start_year is not None
            and self.end_year is not None
            and self.end_year < self.start_year
        ):
            raise ValueError(
                f"End year ({self.end_year}) must be >= start year ({self.start_year})"
            )

        for label, path in [
            ("Fact file", self.fact_file),
            ("Grid mapping file", self.grid_mapping_file),
        ]:
            if not path.exists():
                raise FileNotFoundError(f"{label} not found: {path}")

    def get_output_path(self) -> Path:
        """Output file path with the extension matching output_format"""
        return (self.output_dir / self.output_file).with_suffix(f".{self.output_format}")
