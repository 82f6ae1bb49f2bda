"""Startup data: reference units, categories and two sample recipes.

Only loaded into an empty store, so restarting the app never duplicates data.
"""

import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from .models import Category, Difficulty, Ingredient, Notes, Recipe, UnitOfMeasure
from .repositories import CategoryRepository, RecipeRepository, UnitOfMeasureRepository

logger = logging.getLogger("recipe_app.bootstrap")


UNITS_OF_MEASURE = ["Teaspoon", "Tablespoon", "Cup", "Pinch", "Ounce", "Each", "Dash", "Pint"]

CATEGORIES = ["American", "Italian", "Mexican", "Fast Food"]

SEED_RECIPES = [
    {
        "description": "Perfect Guacamole",
        "prep_time": 10,
        "cook_time": 0,
        "servings": 4,
        "difficulty": Difficulty.EASY,
        "source": "Simply Recipes",
        "url": "http://www.simplyrecipes.com/recipes/perfect_guacamole/",
        "directions": (
            "1 Cut avocado, remove flesh: Cut the avocados in half. Remove seed. "
            "Score the inside of the avocado with a blunt knife and scoop out the flesh with a spoon.\n"
            "2 Mash with a fork: Using a fork, roughly mash the avocado. "
            "Don't overdo it! The guacamole should be a little chunky.\n"
            "3 Add salt, lime juice, and the rest: Sprinkle with salt and lime (or lemon) juice. "
            "Add the chopped onion, cilantro, black pepper, and chiles.\n"
            "4 Cover with plastic and chill to store: Place plastic wrap on the surface of the "
            "guacamole to prevent air reaching it. Refrigerate until ready to serve."
        ),
        "notes": (
            "For a very quick guacamole just take a 1/4 cup of salsa and mix it in with "
            "your mashed avocados."
        ),
        "categories": ["American", "Mexican"],
        "ingredients": [
            ("ripe avocados", "2", "Each"),
            ("Kosher salt", ".5", "Teaspoon"),
            ("fresh lime juice or lemon juice", "2", "Tablespoon"),
            ("minced red onion or thinly sliced green onion", "2", "Tablespoon"),
            ("serrano chiles, stems and seeds removed, minced", "2", "Each"),
            ("Cilantro", "2", "Tablespoon"),
            ("freshly grated black pepper", "2", "Dash"),
            ("ripe tomato, seeds and pulp removed, chopped", ".5", "Each"),
        ],
    },
    {
        "description": "Spicy Grilled Chicken Taco",
        "prep_time": 20,
        "cook_time": 9,
        "servings": 4,
        "difficulty": Difficulty.MODERATE,
        "source": "Simply Recipes",
        "url": "http://www.simplyrecipes.com/recipes/spicy_grilled_chicken_tacos/",
        "directions": (
            "1 Prepare a gas or charcoal grill for medium-high, direct heat.\n"
            "2 Make the marinade and coat the chicken: In a large bowl, stir together the chili "
            "powder, oregano, cumin, sugar, salt, garlic and orange zest. Stir in the orange juice "
            "and olive oil to make a loose paste. Add the chicken to the bowl and toss to coat.\n"
            "3 Grill the chicken: Grill the chicken for 3 to 4 minutes per side, or until a "
            "thermometer inserted into the thickest part of the meat registers 165F. "
            "Transfer to a plate and rest for 5 minutes.\n"
            "4 Warm the tortillas on the grill.\n"
            "5 Assemble the tacos: Slice the chicken into strips. On each tortilla, place a small "
            "handful of arugula. Top with chicken slices, sliced avocado, radishes, tomatoes, and "
            "onion slices. Drizzle with the thinned sour cream. Serve with lime wedges."
        ),
        "notes": (
            "We have a family motto and it is this: Everything goes better in a tortilla."
        ),
        "categories": ["American", "Mexican"],
        "ingredients": [
            ("Ancho Chili Powder", "2", "Tablespoon"),
            ("Dried Oregano", "1", "Teaspoon"),
            ("Dried Cumin", "1", "Teaspoon"),
            ("Sugar", "1", "Teaspoon"),
            ("Salt", ".5", "Teaspoon"),
            ("Clove of Garlic, Chopped", "1", "Each"),
            ("finely grated orange zest", "1", "Tablespoon"),
            ("fresh-squeezed orange juice", "3", "Tablespoon"),
            ("Olive Oil", "2", "Tablespoon"),
            ("boneless chicken thighs", "4", "Tablespoon"),
            ("small corn tortillas", "8", "Each"),
            ("packed baby arugula", "3", "Cup"),
            ("medium ripe avocados, sliced", "2", "Each"),
            ("radishes, thinly sliced", "4", "Each"),
            ("cherry tomatoes, halved", ".5", "Pint"),
            ("red onion, thinly sliced", ".25", "Each"),
            ("Roughly chopped cilantro", "4", "Each"),
            ("cup sour cream thinned with 1/4 cup milk", "4", "Cup"),
            ("lime, cut into wedges", "4", "Each"),
        ],
    },
]


def seed(db: Session) -> int:
    """Load reference data and sample recipes. Returns recipes created."""
    recipe_repository = RecipeRepository(db)
    if recipe_repository.count():
        logger.info("Recipes present, skipping bootstrap data")
        return 0

    uom_repository = UnitOfMeasureRepository(db)
    category_repository = CategoryRepository(db)

    uoms = {}
    for description in UNITS_OF_MEASURE:
        uom = uom_repository.find_by_description(description)
        if uom is None:
            uom = uom_repository.save(UnitOfMeasure(description=description))
        uoms[description] = uom

    categories = {}
    for description in CATEGORIES:
        category = category_repository.find_by_description(description)
        if category is None:
            category = category_repository.save(Category(description=description))
        categories[description] = category

    for data in SEED_RECIPES:
        recipe = Recipe(
            description=data["description"],
            prep_time=data["prep_time"],
            cook_time=data["cook_time"],
            servings=data["servings"],
            difficulty=data["difficulty"],
            source=data["source"],
            url=data["url"],
            directions=data["directions"],
            notes=Notes(recipe_notes=data["notes"]),
            categories=[categories[c] for c in data["categories"]],
        )
        for description, amount, uom in data["ingredients"]:
            recipe.add_ingredient(
                Ingredient(description=description, amount=Decimal(amount), uom=uoms[uom])
            )
        recipe_repository.save(recipe)
        logger.info(f"Seeded recipe: {recipe.description}")

    return len(SEED_RECIPES)
