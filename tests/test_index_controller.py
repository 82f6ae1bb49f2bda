from unittest.mock import MagicMock

from recipe_app.controllers.index import ATTR_RECIPES, IndexController
from recipe_app.models import Recipe


def test_get_index_page():
    recipe_service = MagicMock()
    model = MagicMock()
    recipes = {Recipe(description="Stoofvlees"), Recipe(description="Spaghetti")}
    recipe_service.get_recipes.return_value = recipes

    view_name = IndexController(recipe_service).get_index_page(model)

    assert view_name == "index"
    recipe_service.get_recipes.assert_called_once_with()
    model.add_attribute.assert_called_once()
    key, value = model.add_attribute.call_args.args
    assert key == ATTR_RECIPES == "ATTR_RECIPES"
    assert len(value) == 2


def test_index_page_renders(client, seeded):
    response = client.get("/")
    assert response.status_code == 200
    assert "Perfect Guacamole" in response.text
    assert "Spicy Grilled Chicken Taco" in response.text


def test_index_alias(client):
    response = client.get("/index")
    assert response.status_code == 200
    assert "No recipes yet." in response.text
