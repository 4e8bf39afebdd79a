"""Constants used throughout the project"""

# Data directory
DATA_DIR = "data"

# Reference and output file names
GRID_MAPPING_FILENAME = "mapping_grid_municipio_adjust.csv"
CROP_MAPPING_FILENAME = "mapping_crops.csv"
OUTPUT_SUBDIR = "output"

# Year coverage of the IBGE tables
START_YEAR = 1998
END_YEAR = 2023

# Raw IBGE encodings
SIDRA_HEADER_LABEL = "Nível Territorial (Código)"
NOT_AVAILABLE = "-"  # dado numérico igual a zero não resultante de arredondamento
NOT_APPLICABLE = "..."  # dado numérico não disponível
SENTINEL_FILL_VALUE = "0"

# Grid share table columns
MUNICIPALITY_COLUMN = "cd_mun"
GRID_ID_COLUMN = "idsbrazil"
SHARE_COLUMN = "adjusted_share_mun_tocr"
SHARE_SUM_TOLERANCE = 1e-6

# Crop taxonomy table columns
IBGE_CROP_COLUMN = "IBGE_Crops"
MAGPIE_CROP_COLUMN = "MagPie_Crops"

# Intermediate columns
YEAR_COLUMN = "year"
VALUE_COLUMN = "value"
VALUE_FINAL_COLUMN = "value_final"
CATEGORY_COLUMN = "kcr"

# MagPIE output header
OUTPUT_GRID_COLUMN = "x.y.iso"
OUTPUT_YEAR_COLUMN = "t"
OUTPUT_CATEGORY_COLUMN = "kcr"
OUTPUT_VALUE_COLUMN = "value"
OUTPUT_SEPARATOR = ";"

# Output formats
OUTPUT_FORMAT_CSV = "csv"
OUTPUT_FORMAT_PARQUET = "parquet"

# Summary totals are reported in millions
SUMMARY_SCALE = 1e6

# Default values for CLI (only place defaults are allowed)
DEFAULT_OUTPUT_FORMAT = OUTPUT_FORMAT_CSV
DEFAULT_START_YEAR = START_YEAR
DEFAULT_END_YEAR = END_YEAR
DEFAULT_WORKERS = 1

# Fact table layout
FACT_COLUMN_COUNT = 14
UNIT_CHANGE_YEAR = 2001
