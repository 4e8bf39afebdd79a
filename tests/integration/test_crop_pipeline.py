"""End-to-end tests for the PAM crop pipeline"""

import pandas as pd
import pytest

from magpie_ibge.processing.base.errors import UnmappedCategoryError
from magpie_ibge.processing.crop import CropConfig, CropProcessor
from tests.conftest import make_raw_facts, write_raw_facts


@pytest.fixture
def crop_config(tmp_path, grid_mapping_file, crop_mapping_file):
    def build(rows, **kwargs):
        fact_file = write_raw_facts(tmp_path / "pam.csv", rows)
        return CropConfig(
            data_dir=tmp_path,
            fact_file=fact_file,
            grid_mapping_file=grid_mapping_file,
            crop_mapping_file=crop_mapping_file,
            output_dir=tmp_path / "output",
            **kwargs,
        )

    return build


def read_output(path):
    return pd.read_csv(path, sep=";")


def test_split_municipality_round_trip(crop_config):
    config = crop_config([(1, "Soja (em grão)", 2000, "100")])

    output_files = CropProcessor(config).process_with_validation()

    assert output_files == [config.output_dir / "crop_planted_area_1998_2023.csv"]
    output = read_output(output_files[0])
    assert list(output.columns) == ["x.y.iso", "t", "kcr", "value"]
    assert len(output) == 2
    assert output["value"].sum() == pytest.approx(100.0)
    assert dict(zip(output["x.y.iso"], output["value"])) == pytest.approx({"A": 60.0, "B": 40.0})
    assert set(output["kcr"]) == {"soybean"}


def test_unmapped_crop_produces_no_rows(crop_config):
    config = crop_config(
        [(2, "Soja (em grão)", 2000, "10"), (2, "Cultura desconhecida", 2000, "99")]
    )
    processor = CropProcessor(config)

    output = processor.transform(make_raw_facts([(2, "Cultura desconhecida", 2000, "99")]))
    assert output.empty

    output_files = processor.process_with_validation()
    output = read_output(output_files[0])
    assert output["value"].tolist() == [10.0]


def test_strict_mapping_rejects_unmapped_crop(crop_config):
    config = crop_config([(2, "Cultura desconhecida", 2000, "99")], strict_mapping=True)

    with pytest.raises(UnmappedCategoryError, match="Cultura desconhecida"):
        CropProcessor(config).process_with_validation()


def test_values_are_summed_per_cell_year_and_crop(crop_config):
    config = crop_config(
        [
            (1, "Soja (em grão)", 2000, "10"),
            (2, "Soja (em grão)", 2000, "5"),
            (1, "Milho (em grão)", 2000, "-"),
            (1, "Soja (em grão)", 2001, "20"),
        ]
    )
    # Two municipalities sharing a cell add up
    grid = pd.DataFrame(
        {"cd_mun": [1, 2], "idsbrazil": ['"A"', '"A"'], "adjusted_share_mun_tocr": [1.0, 1.0]}
    )
    grid.to_csv(config.grid_mapping_file, index=False)

    output = read_output(CropProcessor(config).process_with_validation()[0])

    rows = {(r[1], r[2]): r[3] for r in output.itertuples(index=False)}
    assert set(output["x.y.iso"]) == {"A"}
    assert rows[(2000, "soybean")] == pytest.approx(15.0)
    assert rows[(2000, "maiz")] == 0.0
    assert rows[(2001, "soybean")] == pytest.approx(20.0)


def test_unit_correction_zeroes_pre_2001_fruit(crop_config):
    config = crop_config([], apply_unit_correction=True)
    raw = make_raw_facts([(2, "Laranja", 2000, "7"), (2, "Laranja", 2001, "9")])

    output = CropProcessor(config).transform(raw)

    assert output.set_index("t")["value"].to_dict() == {2000: 0.0, 2001: 9.0}


def test_missing_crop_mapping_file_fails_validation(tmp_path, grid_mapping_file):
    fact_file = write_raw_facts(tmp_path / "pam.csv", [(1, "Soja (em grão)", 2000, "1")])
    config = CropConfig(
        data_dir=tmp_path, fact_file=fact_file, grid_mapping_file=grid_mapping_file
    )

    with pytest.raises(FileNotFoundError, match="Crop mapping"):
        CropProcessor(config).process_with_validation()
