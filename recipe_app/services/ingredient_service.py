"""Ingredient lines of a recipe.

Ingredients are never stored on their own: every change loads the owning
recipe, edits its ingredient collection and saves the whole recipe.
"""

import logging
from typing import Optional

from ..commands import IngredientCommand
from ..converters import IngredientConverter
from ..exceptions import IngredientNotFound, RecipeNotFound, UnitOfMeasureNotFound
from ..models import Ingredient, Recipe, UnitOfMeasure
from ..repositories import RecipeRepository, UnitOfMeasureRepository

logger = logging.getLogger("recipe_app.ingredients")


def _find_ingredient(recipe: Recipe, ingredient_id: Optional[int]) -> Optional[Ingredient]:
    if ingredient_id is None:
        return None
    return next((i for i in recipe.ingredients if i.id == ingredient_id), None)


def _uom_id(ingredient: Ingredient) -> Optional[int]:
    if ingredient.uom is not None:
        return ingredient.uom.id
    return ingredient.uom_id


class IngredientService:
    def __init__(
        self,
        ingredient_converter: IngredientConverter,
        recipe_repository: RecipeRepository,
        uom_repository: UnitOfMeasureRepository,
    ) -> None:
        self.ingredient_converter = ingredient_converter
        self.recipe_repository = recipe_repository
        self.uom_repository = uom_repository

    def _load_recipe(self, recipe_id: int) -> Recipe:
        recipe = self.recipe_repository.find_by_id(recipe_id)
        if recipe is None:
            raise RecipeNotFound(recipe_id)
        return recipe

    def _resolve_uom(self, command: IngredientCommand) -> Optional[UnitOfMeasure]:
        if command.uom is None or command.uom.id is None:
            return None
        uom = self.uom_repository.find_by_id(command.uom.id)
        if uom is None:
            raise UnitOfMeasureNotFound(command.uom.id)
        return uom

    def find_by_recipe_id_and_ingredient_id(
        self, recipe_id: int, ingredient_id: int
    ) -> IngredientCommand:
        recipe = self._load_recipe(recipe_id)
        ingredient = _find_ingredient(recipe, ingredient_id)
        if ingredient is None:
            raise IngredientNotFound(ingredient_id)

        command = self.ingredient_converter.to_command(ingredient)
        command.recipe_id = recipe_id
        return command

    def save_ingredient_command(self, command: IngredientCommand) -> IngredientCommand:
        """Add or update an ingredient line and save the owning recipe.

        Returns the saved line as found in the recipe handed back by the
        repository, so new lines carry their generated id.
        """
        recipe = self._load_recipe(command.recipe_id)
        uom = self._resolve_uom(command)
        existing_ids = {i.id for i in recipe.ingredients if i.id is not None}

        ingredient = _find_ingredient(recipe, command.id)
        is_update = ingredient is not None
        if is_update:
            ingredient.description = command.description
            ingredient.amount = command.amount
            ingredient.uom = uom
            logger.info(f"Updating ingredient {ingredient.id} of recipe {command.recipe_id}")
        else:
            ingredient = self.ingredient_converter.to_entity(command)
            # New lines get their id from the store; reference data too
            ingredient.id = None
            ingredient.uom = uom
            recipe.add_ingredient(ingredient)
            logger.info(f"Adding ingredient '{command.description}' to recipe {command.recipe_id}")

        saved_recipe = self.recipe_repository.save(recipe)

        saved = _find_ingredient(saved_recipe, command.id) if is_update else None
        if saved is None:
            # New line: prefer a content match among the new ids, newest wins
            wanted_uom_id = uom.id if uom is not None else None
            new_lines = [i for i in saved_recipe.ingredients if i.id not in existing_ids]
            matching = [
                i for i in new_lines
                if i.description == command.description
                and i.amount == command.amount
                and _uom_id(i) == wanted_uom_id
            ]
            candidates = matching or new_lines
            if not candidates:
                raise IngredientNotFound(command.id)
            saved = max(candidates, key=lambda i: i.id or 0)

        saved_command = self.ingredient_converter.to_command(saved)
        saved_command.recipe_id = saved_recipe.id if saved_recipe.id is not None else command.recipe_id
        return saved_command

    def remove_ingredient_of_recipe(self, recipe_id: int, ingredient_id: int) -> None:
        """Remove an ingredient line. Removing an unknown line is a no-op."""
        recipe = self._load_recipe(recipe_id)
        ingredient = _find_ingredient(recipe, ingredient_id)
        if ingredient is None:
            logger.info(f"Ingredient {ingredient_id} not in recipe {recipe_id}, nothing to remove")
            return

        recipe.ingredients.remove(ingredient)
        self.recipe_repository.save(recipe)
        logger.info(f"Removed ingredient {ingredient_id} from recipe {recipe_id}")
