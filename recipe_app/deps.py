"""FastAPI dependencies for the recipe manager.

Provides:
- Converters (stateless, composed once)
- Repositories bound to the request's database session
- Services built from the above
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from .converters import (
    CategoryConverter,
    IngredientConverter,
    NotesConverter,
    RecipeConverter,
    UnitOfMeasureConverter,
)
from .db import get_db
from .repositories import CategoryRepository, RecipeRepository, UnitOfMeasureRepository
from .services import CategoryService, IngredientService, RecipeService, UnitOfMeasureService


uom_converter = UnitOfMeasureConverter()
category_converter = CategoryConverter()
ingredient_converter = IngredientConverter(uom_converter)
recipe_converter = RecipeConverter(ingredient_converter, category_converter, NotesConverter())


def get_recipe_service(db: Session = Depends(get_db)) -> RecipeService:
    return RecipeService(
        RecipeRepository(db),
        recipe_converter,
        CategoryRepository(db),
        UnitOfMeasureRepository(db),
    )


def get_ingredient_service(db: Session = Depends(get_db)) -> IngredientService:
    return IngredientService(
        ingredient_converter,
        RecipeRepository(db),
        UnitOfMeasureRepository(db),
    )


def get_uom_service(db: Session = Depends(get_db)) -> UnitOfMeasureService:
    return UnitOfMeasureService(UnitOfMeasureRepository(db), uom_converter)


def get_category_service(db: Session = Depends(get_db)) -> CategoryService:
    return CategoryService(CategoryRepository(db), category_converter)
