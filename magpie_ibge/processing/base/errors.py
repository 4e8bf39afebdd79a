"""Errors raised by the processing pipelines"""

from typing import Iterable


class UnmappedCategoryError(ValueError):
    """Raised in strict mode when source categories have no MagPIE target"""

    def __init__(self, survey: str, categories: Iterable[str]):
        self.survey = survey
        self.categories = sorted(set(categories))
        super().__init__(
            f"{len(self.categories)} {survey} categories have no MagPIE mapping: "
            f"{self.categories}"
        )
