"""SQLAlchemy ORM models for the recipe manager.

Tables:
- recipes: Recipe aggregate root (owns notes and ingredients)
- ingredients: Ingredient lines of a recipe
- unit_of_measure: Reference data used by ingredients
- categories / recipe_category: Many-to-many recipe categorisation
- notes: Free-text notes of a recipe
"""

from __future__ import annotations

import enum
from decimal import Decimal
from typing import Optional

from sqlalchemy import (
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Table,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .db import Base


class Difficulty(str, enum.Enum):
    EASY = "EASY"
    MODERATE = "MODERATE"
    KIND_OF_HARD = "KIND_OF_HARD"
    HARD = "HARD"


recipe_category = Table(
    "recipe_category",
    Base.metadata,
    Column("recipe_id", Integer, ForeignKey("recipes.id", ondelete="CASCADE"), primary_key=True),
    Column("category_id", Integer, ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True),
)


class UnitOfMeasure(Base):
    """Reference unit (Teaspoon, Cup, ...) shared by many ingredients."""
    __tablename__ = "unit_of_measure"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    description: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<UnitOfMeasure(id={self.id}, description={self.description})>"


class Category(Base):
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    description: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    recipes: Mapped[list["Recipe"]] = relationship(
        "Recipe", secondary=recipe_category, back_populates="categories"
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, description={self.description})>"


class Notes(Base):
    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    recipe_notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class Ingredient(Base):
    """Ingredient line owned by exactly one recipe.

    Only the owning recipe's id is kept here. The recipe holds the
    collection; there is no object reference back to it.
    """
    __tablename__ = "ingredients"
    __table_args__ = (
        Index("ix_ingredients_recipe_id", "recipe_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    recipe_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False
    )

    description: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    amount: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 4), nullable=True)
    uom_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("unit_of_measure.id"), nullable=True
    )

    uom: Mapped[Optional["UnitOfMeasure"]] = relationship("UnitOfMeasure")

    def __repr__(self) -> str:
        return f"<Ingredient(id={self.id}, description={self.description})>"


class Recipe(Base):
    """Aggregate root: a recipe with its notes and ingredient lines."""
    __tablename__ = "recipes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    description: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    prep_time: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    cook_time: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    servings: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    source: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    directions: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    difficulty: Mapped[Optional[Difficulty]] = mapped_column(
        Enum(Difficulty, name="difficulty"), nullable=True
    )

    notes_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("notes.id", ondelete="SET NULL"), nullable=True
    )

    # Relationships
    notes: Mapped[Optional["Notes"]] = relationship(
        "Notes", cascade="all, delete-orphan", single_parent=True
    )
    ingredients: Mapped[list["Ingredient"]] = relationship(
        "Ingredient", cascade="all, delete-orphan", order_by="Ingredient.id"
    )
    categories: Mapped[list["Category"]] = relationship(
        "Category", secondary=recipe_category, back_populates="recipes"
    )

    def add_ingredient(self, ingredient: Ingredient) -> "Recipe":
        ingredient.recipe_id = self.id
        self.ingredients.append(ingredient)
        return self

    def __repr__(self) -> str:
        return f"<Recipe(id={self.id}, description={self.description})>"
