"""Domain models for recipes."""

from dataclasses import dataclass, replace
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class Ingredient:
    """One ingredient line of a recipe."""

    name: str
    amount: float
    unit: str
    food_reference_id: int | None = None

    @property
    def has_food_reference(self) -> bool:
        """Return true when the ingredient is linked to an FDC food."""
        return self.food_reference_id is not None

    def with_quantity(self, amount: float, unit: str) -> "Ingredient":
        """Return a copy with a replaced amount and unit."""
        return replace(self, amount=amount, unit=unit)


@dataclass(frozen=True)
class Recipe:
    """A stored recipe with its ordered ingredients."""

    id: int
    owner_id: UUID
    ingredients: tuple[Ingredient, ...]
    created_at: datetime | None = None

    @property
    def food_reference_ids(self) -> list[int]:
        """Unique FDC ids referenced by the recipe, in ingredient order."""
        seen: list[int] = []
        for ingredient in self.ingredients:
            fdc_id = ingredient.food_reference_id
            if fdc_id is not None and fdc_id not in seen:
                seen.append(fdc_id)
        return seen
