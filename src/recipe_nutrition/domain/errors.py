"""Domain exceptions raised by recipe services."""


class RecipeError(Exception):
    """Base class for recipe domain errors."""


class RecipeNotFoundError(RecipeError):
    """Raised when a recipe id does not exist."""

    def __init__(self, recipe_id: int) -> None:
        self.recipe_id = recipe_id
        super().__init__(f"Recipe {recipe_id} not found")


class RecipeNotOwnedError(RecipeError):
    """Raised when a user modifies a recipe they do not own."""

    def __init__(self, recipe_id: int) -> None:
        self.recipe_id = recipe_id
        super().__init__("No rows were updated. Recipe may not belong to you.")


class RecipeValidationError(RecipeError):
    """Raised when recipe input is malformed."""


class NoNutritionDataError(RecipeError):
    """Raised when no ingredient of a recipe links to a food record."""

    def __init__(self, recipe_id: int) -> None:
        self.recipe_id = recipe_id
        super().__init__("No nutrition data available")


class InvalidScaleFactorError(RecipeError):
    """Raised when a scale factor is below the allowed minimum."""


class AuthenticationError(Exception):
    """Raised when a request cannot be tied to a user."""
