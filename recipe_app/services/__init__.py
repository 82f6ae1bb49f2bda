from .category_service import CategoryService
from .ingredient_service import IngredientService
from .recipe_service import RecipeService
from .unit_of_measure_service import UnitOfMeasureService

__all__ = ["CategoryService", "IngredientService", "RecipeService", "UnitOfMeasureService"]
