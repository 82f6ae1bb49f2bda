"""Tests for the entity <-> command converters."""

from decimal import Decimal

import pytest

from recipe_app.commands import (
    CategoryCommand,
    IngredientCommand,
    NotesCommand,
    RecipeCommand,
    UnitOfMeasureCommand,
)
from recipe_app.converters import (
    CategoryConverter,
    IngredientConverter,
    NotesConverter,
    RecipeConverter,
    UnitOfMeasureConverter,
)
from recipe_app.models import Category, Difficulty, Ingredient, Notes, Recipe, UnitOfMeasure


@pytest.fixture
def ingredient_converter():
    return IngredientConverter(UnitOfMeasureConverter())


@pytest.fixture
def recipe_converter(ingredient_converter):
    return RecipeConverter(ingredient_converter, CategoryConverter(), NotesConverter())


@pytest.mark.parametrize(
    "converter",
    [
        UnitOfMeasureConverter(),
        CategoryConverter(),
        NotesConverter(),
        IngredientConverter(UnitOfMeasureConverter()),
        RecipeConverter(IngredientConverter(UnitOfMeasureConverter()), CategoryConverter(), NotesConverter()),
    ],
)
def test_none_maps_to_none(converter):
    assert converter.to_command(None) is None
    assert converter.to_entity(None) is None


def test_uom_to_command():
    command = UnitOfMeasureConverter().to_command(UnitOfMeasure(id=1, description="Teaspoon"))

    assert command.id == 1
    assert command.description == "Teaspoon"


def test_uom_to_entity():
    uom = UnitOfMeasureConverter().to_entity(UnitOfMeasureCommand(id=2, description="Cup"))

    assert isinstance(uom, UnitOfMeasure)
    assert uom.id == 2
    assert uom.description == "Cup"


def test_ingredient_to_command_converts_uom(ingredient_converter):
    ingredient = Ingredient(
        id=5,
        description="Cheeseburger",
        amount=Decimal("1"),
        uom=UnitOfMeasure(id=3, description="Each"),
    )
    ingredient.recipe_id = 8

    command = ingredient_converter.to_command(ingredient)

    assert command.id == 5
    assert command.recipe_id == 8
    assert command.description == "Cheeseburger"
    assert command.amount == Decimal("1")
    assert command.uom.id == 3
    assert command.uom.description == "Each"


def test_ingredient_to_command_without_uom(ingredient_converter):
    command = ingredient_converter.to_command(Ingredient(id=1, description="Salt"))

    assert command.uom is None


def test_ingredient_to_entity_has_no_recipe_reference(ingredient_converter):
    command = IngredientCommand(
        id=4,
        recipe_id=9,
        description="Basil",
        amount=Decimal("2.5"),
        uom=UnitOfMeasureCommand(id=7, description="Pinch"),
    )

    ingredient = ingredient_converter.to_entity(command)

    assert ingredient.id == 4
    assert ingredient.description == "Basil"
    assert ingredient.amount == Decimal("2.5")
    assert ingredient.uom.id == 7
    assert ingredient.recipe_id is None
    assert not hasattr(ingredient, "recipe")


def test_category_round_trip_values():
    converter = CategoryConverter()

    assert converter.to_command(Category(id=1, description="Mexican")).description == "Mexican"
    assert converter.to_entity(CategoryCommand(id=2, description="Italian")).id == 2


def test_notes_to_command():
    command = NotesConverter().to_command(Notes(id=3, recipe_notes="Serve cold"))

    assert command.id == 3
    assert command.recipe_notes == "Serve cold"


def test_recipe_to_command(recipe_converter):
    recipe = Recipe(
        id=1,
        description="Perfect Guacamole",
        prep_time=10,
        cook_time=0,
        servings=4,
        difficulty=Difficulty.EASY,
        url="http://www.simplyrecipes.com/recipes/perfect_guacamole/",
        notes=Notes(id=2, recipe_notes="Chunky"),
        categories=[Category(id=3, description="Mexican")],
    )
    recipe.add_ingredient(Ingredient(id=4, description="avocado", amount=Decimal("2")))
    recipe.add_ingredient(Ingredient(id=5, description="salt", amount=Decimal("0.5")))

    command = recipe_converter.to_command(recipe)

    assert command.id == 1
    assert command.description == "Perfect Guacamole"
    assert command.difficulty == Difficulty.EASY
    assert command.notes.recipe_notes == "Chunky"
    assert [c.id for c in command.categories] == [3]
    assert {i.id for i in command.ingredients} == {4, 5}
    assert all(i.recipe_id == 1 for i in command.ingredients)


def test_recipe_to_entity(recipe_converter):
    command = RecipeCommand(
        id=1,
        description="Spicy Grilled Chicken Taco",
        prep_time=20,
        cook_time=9,
        servings=4,
        difficulty=Difficulty.MODERATE,
        notes=NotesCommand(recipe_notes="Tortillas"),
        categories=[CategoryCommand(id=1), CategoryCommand(id=2)],
        ingredients=[IngredientCommand(id=3, description="Oregano"), IngredientCommand(id=4, description="Cumin")],
    )

    recipe = recipe_converter.to_entity(command)

    assert recipe.id == 1
    assert recipe.cook_time == 9
    assert recipe.notes.recipe_notes == "Tortillas"
    assert len(recipe.categories) == 2
    assert len(recipe.ingredients) == 2
    assert all(i.recipe_id == 1 for i in recipe.ingredients)
