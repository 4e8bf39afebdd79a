"""Tests for spatial redistribution"""

import pandas as pd
import pytest

from magpie_ibge.processing.base.redistributor import SpatialRedistributor


def facts(rows):
    return pd.DataFrame(rows, columns=["cd_mun", "year", "value"])


def test_fact_fans_out_to_every_grid_cell(grid_mapping):
    redistributor = SpatialRedistributor(grid_mapping)

    result = redistributor.redistribute(facts([(1, 2000, 100.0)]))

    assert len(result) == 2
    assert sorted(result["idsbrazil"]) == ["A", "B"]
    assert result["value_final"].sum() == pytest.approx(100.0)
    assert dict(zip(result["idsbrazil"], result["value_final"])) == pytest.approx(
        {"A": 60.0, "B": 40.0}
    )


def test_fan_out_sum_matches_share_total():
    grid = pd.DataFrame(
        {
            "cd_mun": [7, 7, 7],
            "idsbrazil": ["X", "Y", "Z"],
            "adjusted_share_mun_tocr": [0.5, 0.3, 0.1],
        }
    )

    result = SpatialRedistributor(grid).redistribute(facts([(7, 2001, 50.0)]))

    assert len(result) == 3
    assert result["value_final"].sum() == pytest.approx(50.0 * 0.9)


def test_municipality_without_share_is_excluded(grid_mapping):
    redistributor = SpatialRedistributor(grid_mapping)

    fanned = redistributor.fan_out(facts([(99, 2000, 10.0)]))
    result = redistributor.redistribute(facts([(99, 2000, 10.0), (2, 2000, 5.0)]))

    assert fanned["value_final"].isna().all()
    assert result["idsbrazil"].tolist() == ["C"]
    assert result["value_final"].tolist() == [5.0]
