"""Reference data: grid shares and crop taxonomy"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np
import pandas as pd

from magpie_ibge.constants import (
    GRID_ID_COLUMN,
    IBGE_CROP_COLUMN,
    MAGPIE_CROP_COLUMN,
    MUNICIPALITY_COLUMN,
    SHARE_COLUMN,
    SHARE_SUM_TOLERANCE,
)
from magpie_ibge.processing.base.io import read_table

logger = logging.getLogger(__name__)


def _require_columns(df: pd.DataFrame, columns: list, path: Path) -> None:
    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise ValueError(
            f"{path} is missing required columns {missing} (found {list(df.columns)})"
        )


def load_grid_mapping(path: Path) -> pd.DataFrame:
    """Load the municipality → grid cell share table

    Returns:
        DataFrame with cd_mun (int), idsbrazil and adjusted_share_mun_tocr (float)
    """
    path = Path(path)
    grid = read_table(path)
    _require_columns(grid, [MUNICIPALITY_COLUMN, GRID_ID_COLUMN, SHARE_COLUMN], path)

    grid = grid[[MUNICIPALITY_COLUMN, GRID_ID_COLUMN, SHARE_COLUMN]].copy()
    grid[MUNICIPALITY_COLUMN] = grid[MUNICIPALITY_COLUMN].astype(int)
    grid[SHARE_COLUMN] = pd.to_numeric(grid[SHARE_COLUMN], errors="raise").astype(float)

    logger.info(
        f"Loaded grid mapping: {len(grid)} shares for "
        f"{grid[MUNICIPALITY_COLUMN].nunique()} municipalities and "
        f"{grid[GRID_ID_COLUMN].nunique()} grid cells"
    )
    check_share_sums(grid)
    return grid


def check_share_sums(
    grid: pd.DataFrame, tolerance: float = SHARE_SUM_TOLERANCE
) -> pd.Series:
    """Find municipalities whose shares do not sum to 1

    Shares summing to 1 are a precondition on the reference data, not
    something the pipeline enforces; deviations are only reported.

    Returns:
        Share sums of the deviating municipalities, indexed by cd_mun
    """
    sums = grid.groupby(MUNICIPALITY_COLUMN)[SHARE_COLUMN].sum()
    deviating = sums[~np.isclose(sums.values, 1.0, rtol=0.0, atol=tolerance)]

    if len(deviating) > 0:
        logger.warning(
            f"{len(deviating)} of {len(sums)} municipalities have shares not summing to 1 "
            f"(min {deviating.min():.6f}, max {deviating.max():.6f})"
        )
        for cd_mun, total in deviating.head(10).items():
            logger.debug(f"  - {cd_mun}: {total:.6f}")
    else:
        logger.debug("All municipality shares sum to 1")

    return deviating


def load_crop_mapping(path: Path) -> pd.DataFrame:
    """Load the IBGE crop → MagPIE crop taxonomy

    Every IBGE crop must resolve to exactly one MagPIE crop; conflicting
    entries raise ValueError.
    """
    path = Path(path)
    mapping = read_table(path)
    _require_columns(mapping, [IBGE_CROP_COLUMN, MAGPIE_CROP_COLUMN], path)

    mapping = mapping[[IBGE_CROP_COLUMN, MAGPIE_CROP_COLUMN]].dropna().drop_duplicates()
    mapping[IBGE_CROP_COLUMN] = mapping[IBGE_CROP_COLUMN].astype(str)
    mapping[MAGPIE_CROP_COLUMN] = mapping[MAGPIE_CROP_COLUMN].astype(str)

    conflicts = mapping[mapping[IBGE_CROP_COLUMN].duplicated(keep=False)]
    if len(conflicts) > 0:
        raise ValueError(
            f"Crop mapping {path} assigns several MagPIE crops to: "
            f"{sorted(conflicts[IBGE_CROP_COLUMN].unique())}"
        )

    logger.info(
        f"Loaded crop mapping: {len(mapping)} IBGE crops -> "
        f"{mapping[MAGPIE_CROP_COLUMN].nunique()} MagPIE crops"
    )
    return mapping.reset_index(drop=True)


@dataclass
class ReferenceData:
    """Reference tables loaded once per run and shared read-only"""

    grid_mapping: pd.DataFrame
    crop_mapping: Optional[pd.DataFrame] = None

    @classmethod
    def load(
        cls, grid_mapping_file: Path, crop_mapping_file: Optional[Path] = None
    ) -> "ReferenceData":
        """Load and validate the reference tables"""
        grid_mapping = load_grid_mapping(grid_mapping_file)
        crop_mapping = (
            load_crop_mapping(crop_mapping_file) if crop_mapping_file is not None else None
        )
        return cls(grid_mapping=grid_mapping, crop_mapping=crop_mapping)
