"""Tests for the command line entry points"""

import pandas as pd
import pytest

from cli.process_all import main as process_all_main
from cli.process_forestry import main as process_forestry_main
from cli.process_livestock import main as process_livestock_main
from tests.conftest import write_raw_facts


@pytest.fixture
def data_dir(tmp_path, grid_mapping_file, crop_mapping_file):
    write_raw_facts(
        tmp_path / "PAM_data_planted_area_1998_to_2023.csv", [(1, "Soja (em grão)", 2000, "10")]
    )
    write_raw_facts(
        tmp_path / "PPM_data_livestock_1998_to_2023.csv", [(2, "Bovino", 2000, "4")]
    )
    write_raw_facts(
        tmp_path / "PEVS_data_production_1998_to_2023.csv", [(2, "1.2 - Lenha", 2000, "1")]
    )
    return tmp_path


def test_process_livestock_with_herd_option(data_dir):
    process_livestock_main(["--data-dir", str(data_dir), "--herd", "Bovino"])

    output = pd.read_csv(data_dir / "output" / "livestock_herd_bovine_1998_2023.csv", sep=";")
    assert output["value"].tolist() == [4.0]


def test_process_all_writes_every_output(data_dir):
    process_all_main(["--data-dir", str(data_dir)])

    names = sorted(path.name for path in (data_dir / "output").iterdir())
    assert names == [
        "crop_planted_area_1998_2023.csv",
        "forestry_products_1998_2023.csv",
        "livestock_herd_bovine_1998_2023.csv",
    ]


def test_failure_exits_with_status_one(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        process_forestry_main(["--data-dir", str(tmp_path / "missing")])

    assert excinfo.value.code == 1
