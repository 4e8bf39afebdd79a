"""IBGE survey layouts and fixed IBGE → MagPIE taxonomies"""

from enum import Enum
from typing import Dict, List, Tuple


class IbgeSurvey(Enum):
    """IBGE municipality surveys handled by the pipelines"""

    # (category column suffix, default fact file, default output file)
    PAM = ("prod", "PAM_data_planted_area_1998_to_2023.csv", "crop_planted_area_1998_2023.csv")
    PPM = ("herd", "PPM_data_livestock_1998_to_2023.csv", "livestock_herd_bovine_1998_2023.csv")
    PEVS = ("prod", "PEVS_data_production_1998_to_2023.csv", "forestry_products_1998_2023.csv")

    def __init__(self, category_suffix: str, fact_filename: str, output_filename: str):
        self.category_suffix = category_suffix
        self.fact_filename = fact_filename
        self.output_filename = output_filename
        self.key = self.name.lower()

    @property
    def category_name_column(self) -> str:
        return f"nm_{self.category_suffix}"

    def column_names(self) -> List[str]:
        """Semantic names for the 14 positional SIDRA columns"""
        return [
            "cd_nivel_terri",
            "nm_nivel_terri",
            "cd_unidmedida",
            "nm_unidmedida",
            "value",
            "cd_mun",
            "nm_mun",
            "cd_var",
            "nm_var",
            "cd_year",
            "nm_year",
            f"cd_{self.category_suffix}",
            f"nm_{self.category_suffix}",
            "year",
        ]


class ForestryProduct(Enum):
    """PEVS products kept for MagPIE, with their dry-matter conversion factor"""

    CHARCOAL = ("1.1 - Carvão vegetal", "woodfuel", 721.0)
    FIREWOOD = ("1.2 - Lenha", "woodfuel", 350.0)
    ROUNDWOOD = ("1.3 - Madeira em tora", "wood", 350.0)

    def __init__(self, ibge_name: str, category: str, conversion_factor: float):
        self.ibge_name = ibge_name
        self.category = category
        self.conversion_factor = conversion_factor
        self.key = self.name.lower()


def default_forestry_mapping() -> Dict[str, Tuple[str, float]]:
    """IBGE product name -> (MagPIE category, conversion factor)"""
    return {
        product.ibge_name: (product.category, product.conversion_factor)
        for product in ForestryProduct
    }


# Livestock: only cattle herds are mapped
DEFAULT_HERD_CATEGORIES: Tuple[str, ...] = ("Bovino",)

# Forestry roll-up
WOOD_CATEGORY = "wood"
WOODFUEL_CATEGORY = "woodfuel"
TIMBER_CATEGORY = "timber"
TIMBER_COMPONENTS: Tuple[str, ...] = (WOOD_CATEGORY, WOODFUEL_CATEGORY)

# From 2001 on, PAM reports these fruits in tonnes; earlier years are in
# thousand fruits (bananas in thousand bunches)
UNIT_CHANGE_PRODUCTS: Tuple[str, ...] = (
    "Abacate",
    "Banana (cacho)",
    "Caqui",
    "Figo",
    "Goiaba",
    "Laranja",
    "Limão",
    "Maçã",
    "Mamão",
    "Manga",
    "Maracujá",
    "Marmelo",
    "Melancia",
    "Melão",
    "Pera",
    "Pêssego",
)

# Still reported in thousand fruits for every year
THOUSAND_FRUIT_PRODUCTS: Tuple[str, ...] = ("Abacaxi*", "Coco-da-baía*")
