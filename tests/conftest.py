"""Shared fixtures: synthetic SIDRA fact tables and reference files"""

from pathlib import Path
from typing import Iterable, Tuple

import pandas as pd
import pytest

SIDRA_COLUMNS = [
    "NC", "NN", "MC", "MN", "V", "D1C", "D1N", "D2C", "D2N", "D3C", "D3N", "D4C", "D4N", "Ano",
]


def make_raw_facts(rows: Iterable[Tuple[int, str, int, str]]) -> pd.DataFrame:
    """Build a raw 14-column fact table from (cd_mun, category, year, value) rows

    Every cell is text, as read from a SIDRA export.
    """
    records = []
    for cd_mun, category, year, value in rows:
        records.append(
            [
                "6", "Município", "1017", "Hectares", str(value),
                str(cd_mun), f"Município {cd_mun}", "109", "Área plantada",
                str(year), str(year), "0", category, str(year),
            ]
        )
    return pd.DataFrame(records, columns=SIDRA_COLUMNS)


def write_raw_facts(path: Path, rows) -> Path:
    make_raw_facts(rows).to_csv(path, index=False)
    return path


@pytest.fixture
def grid_mapping() -> pd.DataFrame:
    """Municipality 1 split 60/40 over cells A and B, municipality 2 entirely in C"""
    return pd.DataFrame(
        {
            "cd_mun": [1, 1, 2],
            "idsbrazil": ["A", "B", "C"],
            "adjusted_share_mun_tocr": [0.6, 0.4, 1.0],
        }
    )


@pytest.fixture
def grid_mapping_file(tmp_path, grid_mapping) -> Path:
    path = tmp_path / "mapping_grid_municipio_adjust.csv"
    grid_mapping.to_csv(path, index=False)
    return path


@pytest.fixture
def crop_mapping_file(tmp_path) -> Path:
    path = tmp_path / "mapping_crops.csv"
    pd.DataFrame(
        {
            "IBGE_Crops": ["Soja (em grão)", "Milho (em grão)", "Laranja"],
            "MagPie_Crops": ["soybean", "maiz", "others"],
        }
    ).to_csv(path, index=False)
    return path
