"""Pydantic models for request payloads."""

from pydantic import BaseModel, ConfigDict, Field

from recipe_nutrition.domain.recipes import Ingredient


class IngredientPayload(BaseModel):
    """One ingredient line submitted with a new recipe."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    amount: float
    unit: str
    fdc_id: int | None = Field(default=None, alias="fdcId")

    def to_domain(self) -> Ingredient:
        """Convert to the domain ingredient."""
        return Ingredient(
            name=self.name,
            amount=self.amount,
            unit=self.unit,
            food_reference_id=self.fdc_id,
        )


class RecipeCreate(BaseModel):
    """Payload for creating a recipe."""

    ingredients: list[IngredientPayload]


class RecipeQuantitiesUpdate(BaseModel):
    """Full replacement of a recipe's amounts and units."""

    amounts: list[float]
    units: list[str]


class NutritionLookup(BaseModel):
    """Batch of FDC ids to fetch nutrition records for."""

    model_config = ConfigDict(populate_by_name=True)

    fdc_ids: list[int | None] = Field(default_factory=list, alias="fdcIds")
