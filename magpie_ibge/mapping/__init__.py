"""IBGE → MagPIE category mappings"""

from magpie_ibge.mapping.models import (
    DEFAULT_HERD_CATEGORIES,
    ForestryProduct,
    IbgeSurvey,
    TIMBER_CATEGORY,
    TIMBER_COMPONENTS,
    default_forestry_mapping,
)

__all__ = [
    "DEFAULT_HERD_CATEGORIES",
    "ForestryProduct",
    "IbgeSurvey",
    "TIMBER_CATEGORY",
    "TIMBER_COMPONENTS",
    "default_forestry_mapping",
]
