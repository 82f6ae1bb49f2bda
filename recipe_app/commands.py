"""Command objects exchanged between controllers and services.

Commands mirror the ORM entities but carry plain ids instead of object
references, and are never persisted directly:
- UnitOfMeasureCommand / CategoryCommand / NotesCommand
- IngredientCommand (with recipe_id)
- RecipeCommand (form-validated)
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from .models import Difficulty


# --- Reference data ---

class UnitOfMeasureCommand(BaseModel):
    id: Optional[int] = None
    description: Optional[str] = None

    class Config:
        from_attributes = True


class CategoryCommand(BaseModel):
    id: Optional[int] = None
    description: Optional[str] = None

    class Config:
        from_attributes = True


# --- Recipe parts ---

class NotesCommand(BaseModel):
    id: Optional[int] = None
    recipe_notes: Optional[str] = None


class IngredientCommand(BaseModel):
    id: Optional[int] = None
    recipe_id: Optional[int] = None
    description: Optional[str] = Field(None, max_length=255)
    amount: Optional[Decimal] = Field(None, ge=0)
    uom: Optional[UnitOfMeasureCommand] = None


# --- Recipe ---

class RecipeCommand(BaseModel):
    id: Optional[int] = None
    description: Optional[str] = Field(None, min_length=3, max_length=255)
    prep_time: Optional[int] = Field(None, ge=1, le=999)
    cook_time: Optional[int] = Field(None, ge=0, le=999)
    servings: Optional[int] = Field(None, ge=1, le=100)
    source: Optional[str] = Field(None, max_length=255)
    url: Optional[str] = Field(None, max_length=500, pattern=r"^https?://")
    directions: Optional[str] = None
    difficulty: Optional[Difficulty] = None
    notes: Optional[NotesCommand] = None
    ingredients: list[IngredientCommand] = []
    categories: list[CategoryCommand] = []
