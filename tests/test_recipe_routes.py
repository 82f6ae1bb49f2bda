"""Tests for the recipe pages.

Tests cover:
- Show / new / update pages
- Create and update through the form
- Form validation
- Delete
- 404 / 400 error pages
"""

from recipe_app.models import Recipe


def test_show_recipe(client, seeded):
    recipe_id = seeded["Perfect Guacamole"]

    response = client.get(f"/recipe/{recipe_id}/show")

    assert response.status_code == 200
    assert "Perfect Guacamole" in response.text
    assert "ripe avocados" in response.text
    assert "Mexican" in response.text


def test_show_recipe_not_found(client):
    response = client.get("/recipe/999/show")
    assert response.status_code == 404
    assert "Recipe 999 not found" in response.text


def test_show_recipe_bad_id(client):
    response = client.get("/recipe/asdf/show")
    assert response.status_code == 400
    assert "400 Bad Request" in response.text


def test_new_recipe_form(client, seeded):
    response = client.get("/recipe/new")
    assert response.status_code == 200
    assert 'action="/recipe"' in response.text
    assert "Fast Food" in response.text


def test_update_recipe_form(client, seeded):
    recipe_id = seeded["Spicy Grilled Chicken Taco"]

    response = client.get(f"/recipe/{recipe_id}/update")

    assert response.status_code == 200
    assert 'value="Spicy Grilled Chicken Taco"' in response.text


def test_create_recipe(client, seeded, db_session):
    response = client.post(
        "/recipe",
        data={
            "id": "",
            "description": "Stoofvlees",
            "prep_time": "30",
            "cook_time": "180",
            "servings": "6",
            "difficulty": "MODERATE",
            "recipe_notes": "Use dark beer",
            "categories": ["1"],
        },
        follow_redirects=False,
    )

    assert response.status_code == 303
    location = response.headers["location"]
    assert location.startswith("/recipe/") and location.endswith("/show")

    page = client.get(location)
    assert page.status_code == 200
    assert "Stoofvlees" in page.text
    assert "Use dark beer" in page.text


def test_update_recipe(client, seeded, db_session):
    recipe_id = seeded["Perfect Guacamole"]

    response = client.post(
        "/recipe",
        data={
            "id": str(recipe_id),
            "description": "Chunky Guacamole",
            "prep_time": "15",
            "servings": "2",
            "difficulty": "EASY",
        },
        follow_redirects=False,
    )

    assert response.status_code == 303
    assert response.headers["location"] == f"/recipe/{recipe_id}/show"

    db_session.expire_all()
    recipe = db_session.get(Recipe, recipe_id)
    assert recipe.description == "Chunky Guacamole"
    assert recipe.prep_time == 15
    # Ingredient lines are untouched by the recipe form
    assert len(recipe.ingredients) == 8


def test_create_recipe_invalid_form(client, seeded):
    response = client.post(
        "/recipe",
        data={"description": "ab", "prep_time": "0", "url": "not-a-url"},
        follow_redirects=False,
    )

    assert response.status_code == 200
    assert "Please correct the errors below." in response.text
    assert 'value="ab"' in response.text


def test_create_recipe_requires_description(client):
    response = client.post("/recipe", data={"description": ""}, follow_redirects=False)

    assert response.status_code == 200
    assert "Description is required" in response.text


def test_delete_recipe(client, seeded, db_session):
    recipe_id = seeded["Perfect Guacamole"]

    response = client.get(f"/recipe/{recipe_id}/delete", follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"] == "/"
    db_session.expire_all()
    assert db_session.get(Recipe, recipe_id) is None


def test_delete_recipe_not_found(client):
    response = client.get("/recipe/999/delete", follow_redirects=False)
    assert response.status_code == 404
