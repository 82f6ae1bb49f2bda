"""Recipe pages.

Endpoints:
- GET /recipe/{id}/show - Recipe details
- GET /recipe/new - Empty recipe form
- GET /recipe/{id}/update - Recipe form for an existing recipe
- POST /recipe - Create or update from the form
- GET /recipe/{id}/delete - Delete and go back to the index
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from ..commands import RecipeCommand
from ..deps import get_category_service, get_recipe_service
from ..models import Difficulty
from ..rate_limit import form_limit
from ..services import CategoryService, RecipeService
from ..views import Model, field_errors, form_fields, render

router = APIRouter()
logger = logging.getLogger("recipe_app.controllers.recipes")

RECIPE_FORM_VIEW = "recipe/recipeform"

RECIPE_FIELDS = (
    "id", "description", "prep_time", "cook_time", "servings",
    "source", "url", "directions", "difficulty",
)


def _form_model(
    recipe: RecipeCommand | dict,
    category_service: CategoryService,
    errors: dict[str, str] | None = None,
) -> Model:
    model = Model()
    model.add_attribute("recipe", recipe)
    model.add_attribute("categories", category_service.list_all_categories())
    model.add_attribute("difficulties", list(Difficulty))
    model.add_attribute("errors", errors or {})
    return model


@router.get("/recipe/{recipe_id}/show", response_class=HTMLResponse)
def show_recipe(
    request: Request,
    recipe_id: int,
    recipe_service: RecipeService = Depends(get_recipe_service),
):
    model = Model().add_attribute("recipe", recipe_service.find_by_id(recipe_id))
    return render(request, "recipe/show", model)


@router.get("/recipe/new", response_class=HTMLResponse)
def new_recipe(
    request: Request,
    category_service: CategoryService = Depends(get_category_service),
):
    return render(request, RECIPE_FORM_VIEW, _form_model(RecipeCommand(), category_service))


@router.get("/recipe/{recipe_id}/update", response_class=HTMLResponse)
def update_recipe(
    request: Request,
    recipe_id: int,
    recipe_service: RecipeService = Depends(get_recipe_service),
    category_service: CategoryService = Depends(get_category_service),
):
    command = recipe_service.find_command_by_id(recipe_id)
    return render(request, RECIPE_FORM_VIEW, _form_model(command, category_service))


@router.post("/recipe", response_class=HTMLResponse)
@form_limit
async def save_or_update(
    request: Request,
    recipe_service: RecipeService = Depends(get_recipe_service),
    category_service: CategoryService = Depends(get_category_service),
):
    """Create or update a recipe; invalid input re-renders the form."""
    async with request.form() as form:
        data = form_fields(form, *RECIPE_FIELDS)
        notes = form_fields(form, "recipe_notes")["recipe_notes"]
        category_ids = [c for c in form.getlist("categories") if str(c).strip()]

    submitted = dict(
        data,
        notes={"recipe_notes": notes},
        categories=[{"id": c} for c in category_ids],
    )

    try:
        command = RecipeCommand.model_validate(submitted)
    except ValidationError as exc:
        logger.info(f"Rejected recipe form: {exc.error_count()} error(s)")
        return render(request, RECIPE_FORM_VIEW, _form_model(submitted, category_service, field_errors(exc)))

    if not command.description:
        errors = {"description": "Description is required"}
        return render(request, RECIPE_FORM_VIEW, _form_model(submitted, category_service, errors))

    saved = recipe_service.save_recipe_command(command)
    return RedirectResponse(url=f"/recipe/{saved.id}/show", status_code=303)


@router.get("/recipe/{recipe_id}/delete")
def delete_recipe(
    recipe_id: int,
    recipe_service: RecipeService = Depends(get_recipe_service),
):
    recipe_service.delete_by_id(recipe_id)
    return RedirectResponse(url="/", status_code=303)
