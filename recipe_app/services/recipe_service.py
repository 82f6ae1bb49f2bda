import logging

from ..commands import CategoryCommand, RecipeCommand
from ..converters import RecipeConverter
from ..exceptions import CategoryNotFound, RecipeNotFound, UnitOfMeasureNotFound
from ..models import Category, Notes, Recipe
from ..repositories import CategoryRepository, RecipeRepository, UnitOfMeasureRepository

logger = logging.getLogger("recipe_app.recipes")


class RecipeService:
    def __init__(
        self,
        recipe_repository: RecipeRepository,
        recipe_converter: RecipeConverter,
        category_repository: CategoryRepository,
        uom_repository: UnitOfMeasureRepository,
    ) -> None:
        self.recipe_repository = recipe_repository
        self.recipe_converter = recipe_converter
        self.category_repository = category_repository
        self.uom_repository = uom_repository

    def get_recipes(self) -> list[Recipe]:
        return self.recipe_repository.find_all()

    def find_by_id(self, recipe_id: int) -> Recipe:
        recipe = self.recipe_repository.find_by_id(recipe_id)
        if recipe is None:
            raise RecipeNotFound(recipe_id)
        return recipe

    def find_command_by_id(self, recipe_id: int) -> RecipeCommand:
        return self.recipe_converter.to_command(self.find_by_id(recipe_id))

    def _resolve_categories(self, commands: list[CategoryCommand]) -> list[Category]:
        categories = []
        for command in commands:
            category = self.category_repository.find_by_id(command.id)
            if category is None:
                raise CategoryNotFound(command.id)
            categories.append(category)
        return categories

    def save_recipe_command(self, command: RecipeCommand) -> RecipeCommand:
        """Create a recipe, or update an existing one in place.

        Updates touch the recipe's own fields, notes and categories only;
        ingredient lines are managed by IngredientService.
        """
        categories = self._resolve_categories(command.categories)

        if command.id is None:
            recipe = self.recipe_converter.to_entity(command)
            for ingredient in recipe.ingredients:
                if ingredient.uom is not None:
                    uom = self.uom_repository.find_by_id(ingredient.uom.id)
                    if uom is None:
                        raise UnitOfMeasureNotFound(ingredient.uom.id)
                    ingredient.uom = uom
        else:
            recipe = self.find_by_id(command.id)
            recipe.description = command.description
            recipe.prep_time = command.prep_time
            recipe.cook_time = command.cook_time
            recipe.servings = command.servings
            recipe.source = command.source
            recipe.url = command.url
            recipe.directions = command.directions
            recipe.difficulty = command.difficulty
            if command.notes is not None:
                if recipe.notes is None:
                    recipe.notes = Notes()
                recipe.notes.recipe_notes = command.notes.recipe_notes

        recipe.categories = categories
        saved = self.recipe_repository.save(recipe)
        logger.info(f"Saved recipe {saved.id}")
        return self.recipe_converter.to_command(saved)

    def delete_by_id(self, recipe_id: int) -> None:
        recipe = self.find_by_id(recipe_id)
        self.recipe_repository.delete(recipe)
        logger.info(f"Deleted recipe {recipe_id}")
