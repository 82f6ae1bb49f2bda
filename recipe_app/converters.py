"""Entity <-> command converters.

Every converter offers ``to_command`` and ``to_entity``. Both map ``None``
to ``None`` and have no side effects. Converters for aggregates receive
the converters of their parts through the constructor.
"""

from typing import Optional

from .commands import (
    CategoryCommand,
    IngredientCommand,
    NotesCommand,
    RecipeCommand,
    UnitOfMeasureCommand,
)
from .models import Category, Ingredient, Notes, Recipe, UnitOfMeasure


class UnitOfMeasureConverter:
    def to_command(self, uom: Optional[UnitOfMeasure]) -> Optional[UnitOfMeasureCommand]:
        if uom is None:
            return None
        return UnitOfMeasureCommand.model_validate(uom)

    def to_entity(self, command: Optional[UnitOfMeasureCommand]) -> Optional[UnitOfMeasure]:
        if command is None:
            return None
        return UnitOfMeasure(id=command.id, description=command.description)


class CategoryConverter:
    def to_command(self, category: Optional[Category]) -> Optional[CategoryCommand]:
        if category is None:
            return None
        return CategoryCommand.model_validate(category)

    def to_entity(self, command: Optional[CategoryCommand]) -> Optional[Category]:
        if command is None:
            return None
        return Category(id=command.id, description=command.description)


class NotesConverter:
    def to_command(self, notes: Optional[Notes]) -> Optional[NotesCommand]:
        if notes is None:
            return None
        return NotesCommand(id=notes.id, recipe_notes=notes.recipe_notes)

    def to_entity(self, command: Optional[NotesCommand]) -> Optional[Notes]:
        if command is None:
            return None
        return Notes(id=command.id, recipe_notes=command.recipe_notes)


class IngredientConverter:
    """Converts ingredient lines, delegating the unit to ``uom_converter``."""

    def __init__(self, uom_converter: UnitOfMeasureConverter) -> None:
        self.uom_converter = uom_converter

    def to_command(self, ingredient: Optional[Ingredient]) -> Optional[IngredientCommand]:
        if ingredient is None:
            return None
        return IngredientCommand(
            id=ingredient.id,
            recipe_id=ingredient.recipe_id,
            description=ingredient.description,
            amount=ingredient.amount,
            uom=self.uom_converter.to_command(ingredient.uom),
        )

    def to_entity(self, command: Optional[IngredientCommand]) -> Optional[Ingredient]:
        if command is None:
            return None
        # recipe_id is left to Recipe.add_ingredient
        return Ingredient(
            id=command.id,
            description=command.description,
            amount=command.amount,
            uom=self.uom_converter.to_entity(command.uom),
        )


class RecipeConverter:
    def __init__(
        self,
        ingredient_converter: IngredientConverter,
        category_converter: CategoryConverter,
        notes_converter: NotesConverter,
    ) -> None:
        self.ingredient_converter = ingredient_converter
        self.category_converter = category_converter
        self.notes_converter = notes_converter

    def to_command(self, recipe: Optional[Recipe]) -> Optional[RecipeCommand]:
        if recipe is None:
            return None
        return RecipeCommand(
            id=recipe.id,
            description=recipe.description,
            prep_time=recipe.prep_time,
            cook_time=recipe.cook_time,
            servings=recipe.servings,
            source=recipe.source,
            url=recipe.url,
            directions=recipe.directions,
            difficulty=recipe.difficulty,
            notes=self.notes_converter.to_command(recipe.notes),
            ingredients=[self.ingredient_converter.to_command(i) for i in recipe.ingredients],
            categories=[self.category_converter.to_command(c) for c in recipe.categories],
        )

    def to_entity(self, command: Optional[RecipeCommand]) -> Optional[Recipe]:
        if command is None:
            return None
        recipe = Recipe(
            id=command.id,
            description=command.description,
            prep_time=command.prep_time,
            cook_time=command.cook_time,
            servings=command.servings,
            source=command.source,
            url=command.url,
            directions=command.directions,
            difficulty=command.difficulty,
            notes=self.notes_converter.to_entity(command.notes),
            categories=[self.category_converter.to_entity(c) for c in command.categories],
        )
        for ingredient_command in command.ingredients:
            recipe.add_ingredient(self.ingredient_converter.to_entity(ingredient_command))
        return recipe
