"""Tests for aggregation and roll-up categories"""

import numpy as np
import pandas as pd
import pytest

from magpie_ibge.processing.base.aggregator import add_rollup, sum_ignoring_nulls

KEYS = ["idsbrazil", "year", "kcr"]


def redistributed():
    return pd.DataFrame(
        {
            "idsbrazil": ["A", "A", "A", "B", "B"],
            "year": [2000, 2000, 2001, 2000, 2000],
            "kcr": ["wood", "wood", "wood", "woodfuel", "wood"],
            "value_final": [1.0, 2.0, np.nan, 4.0, 8.0],
        }
    )


def test_sum_ignores_nulls():
    result = sum_ignoring_nulls(redistributed(), KEYS)

    values = {tuple(row[:3]): row[3] for row in result.itertuples(index=False)}
    assert values[("A", 2000, "wood")] == 3.0
    assert values[("A", 2001, "wood")] == 0.0
    assert values[("B", 2000, "woodfuel")] == 4.0


def test_sum_is_independent_of_row_order():
    df = redistributed()
    shuffled = df.sample(frac=1.0, random_state=7)

    pd.testing.assert_frame_equal(
        sum_ignoring_nulls(df, KEYS), sum_ignoring_nulls(shuffled, KEYS)
    )


def test_rollup_sums_components_and_keeps_base_rows():
    aggregated = sum_ignoring_nulls(redistributed(), KEYS)

    result = add_rollup(aggregated, "timber", ["wood", "woodfuel"])

    timber = result[result["kcr"] == "timber"].set_index(["idsbrazil", "year"])["value_final"]
    assert timber.loc[("A", 2000)] == pytest.approx(3.0)
    assert timber.loc[("B", 2000)] == pytest.approx(12.0)
    assert len(result) == len(aggregated) + len(timber)


def test_rollup_counts_missing_component_as_zero():
    aggregated = pd.DataFrame(
        {"idsbrazil": ["A"], "year": [2000], "kcr": ["woodfuel"], "value_final": [5.0]}
    )

    result = add_rollup(aggregated, "timber", ["wood", "woodfuel"])

    assert result[result["kcr"] == "timber"]["value_final"].tolist() == [5.0]
