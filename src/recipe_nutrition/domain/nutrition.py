"""Nutrition domain models."""

from dataclasses import dataclass
from typing import Literal

ConversionMethod = Literal["mass", "portion", "first_portion", "assumed_grams"]


@dataclass(frozen=True)
class FoodSummary:
    """Summary information about a food from FDC search results."""

    fdc_id: int
    description: str
    brand_owner: str | None
    brand_name: str | None
    data_type: str | None


@dataclass(frozen=True)
class NutrientEntry:
    """Nutrient amount per 100 g of food."""

    name: str
    amount: float
    unit_name: str | None = None


@dataclass(frozen=True)
class PortionEntry:
    """Household portion mapped to a gram weight."""

    description: str
    gram_weight: float | None


@dataclass(frozen=True)
class FoodRecord:
    """Food details fetched from FDC for nutrition calculations."""

    fdc_id: int
    description: str
    nutrients: tuple[NutrientEntry, ...] = ()
    portions: tuple[PortionEntry, ...] = ()

    def nutrient(self, name: str) -> NutrientEntry | None:
        """Return the first nutrient whose name matches exactly."""
        for entry in self.nutrients:
            if entry.name == name:
                return entry
        return None


@dataclass(frozen=True)
class GramConversion:
    """Result of converting an amount to grams."""

    value: float
    exact: bool
    method: ConversionMethod


@dataclass(frozen=True)
class NutrientTotal:
    """Aggregated amount of one nutrient across a recipe."""

    name: str
    label: str
    unit_name: str
    amount: float
    display: str
    exact: bool


@dataclass(frozen=True)
class NutritionFacts:
    """Nutrition panel for a recipe at a given scale."""

    recipe_id: int
    scale_factor: float
    totals: list[NutrientTotal]
    approximate_ingredients: list[str]
    unlinked_ingredients: list[str]
