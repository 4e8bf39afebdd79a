"""Tests for the raw fact table cleaner"""

import pandas as pd
import pytest

from magpie_ibge.mapping.models import IbgeSurvey
from magpie_ibge.processing.base.cleaner import clean_records, zero_fill_sentinels
from tests.conftest import make_raw_facts


def test_sentinels_become_zero():
    raw = make_raw_facts(
        [
            (1, "Soja (em grão)", 2000, "-"),
            (1, "Milho (em grão)", 2000, "..."),
            (2, "Soja (em grão)", 2000, "12.5"),
        ]
    )

    cleaned = clean_records(raw, IbgeSurvey.PAM)

    assert cleaned["value"].tolist() == [0.0, 0.0, 12.5]


def test_only_exact_sentinels_are_replaced():
    values = pd.Series(["-", "...", "-5", "1.5"])

    assert zero_fill_sentinels(values).tolist() == ["0", "0", "-5", "1.5"]


def test_columns_are_renamed_and_coerced():
    raw = make_raw_facts([(3550308, "Bovino", 2010, "100")])

    cleaned = clean_records(raw, IbgeSurvey.PPM)

    assert list(cleaned.columns) == ["cd_mun", "nm_herd", "nm_unidmedida", "year", "cd_year", "value"]
    assert cleaned.loc[0, "cd_mun"] == 3550308
    assert pd.api.types.is_integer_dtype(cleaned["cd_mun"])
    assert pd.api.types.is_integer_dtype(cleaned["year"])
    assert cleaned.loc[0, "nm_herd"] == "Bovino"


def test_sidra_header_row_is_dropped():
    raw = make_raw_facts([(1, "Soja (em grão)", 2000, "5")])
    header = pd.DataFrame([["Nível Territorial (Código)"] + ["x"] * 13], columns=raw.columns)
    raw = pd.concat([header, raw], ignore_index=True)

    cleaned = clean_records(raw, IbgeSurvey.PAM)

    assert len(cleaned) == 1
    assert cleaned.loc[0, "value"] == 5.0


def test_non_numeric_value_is_fatal():
    raw = make_raw_facts([(1, "Soja (em grão)", 2000, "X")])

    with pytest.raises(ValueError, match="non-numeric"):
        clean_records(raw, IbgeSurvey.PAM)


def test_wrong_column_count_is_fatal():
    raw = make_raw_facts([(1, "Soja (em grão)", 2000, "5")]).iloc[:, :13]

    with pytest.raises(ValueError, match="14 columns"):
        clean_records(raw, IbgeSurvey.PAM)


def test_year_window_is_inclusive():
    raw = make_raw_facts(
        [(1, "Soja (em grão)", year, "1") for year in (1997, 1998, 2023, 2024)]
    )

    cleaned = clean_records(raw, IbgeSurvey.PAM, start_year=1998, end_year=2023)

    assert cleaned["year"].tolist() == [1998, 2023]
