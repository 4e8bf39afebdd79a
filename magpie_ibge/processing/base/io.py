"""Table readers and writers"""

import logging
from pathlib import Path

import pandas as pd

from magpie_ibge.constants import (
    OUTPUT_FORMAT_CSV,
    OUTPUT_FORMAT_PARQUET,
    OUTPUT_SEPARATOR,
)

logger = logging.getLogger(__name__)


def read_table(path: Path, raw: bool = False) -> pd.DataFrame:
    """Read a CSV or Parquet table

    Args:
        path: Input file (.csv or .parquet)
        raw: Keep every CSV cell as text so sentinel encodings survive.
            Only empty cells become missing.

    Returns:
        Loaded DataFrame
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".csv":
        if raw:
            df = pd.read_csv(path, dtype=str, keep_default_na=False, na_values=[""])
        else:
            df = pd.read_csv(path)
    elif suffix == ".parquet":
        df = pd.read_parquet(path)
    else:
        raise ValueError(f"Unsupported input format: {path.suffix} ({path})")

    logger.debug(f"Read {len(df)} rows x {len(df.columns)} columns from {path}")
    return df


def write_table(df: pd.DataFrame, path: Path, output_format: str) -> Path:
    """Write the whole table in one pass

    CSV output is semicolon-delimited without index. The parent directory is
    created; any write error propagates and no partial file is removed.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if output_format == OUTPUT_FORMAT_CSV:
        df.to_csv(path, sep=OUTPUT_SEPARATOR, index=False)
    elif output_format == OUTPUT_FORMAT_PARQUET:
        df.to_parquet(path, index=False)
    else:
        raise ValueError(f"Unsupported output format: {output_format}")

    logger.info(f"Saved {len(df)} rows to {path}")
    return path
