"""Ingredient pages of a recipe.

Endpoints:
- GET /recipe/{recipe_id}/ingredients - Ingredient list
- GET /recipe/{recipe_id}/ingredient/{id}/show - Ingredient details
- GET /recipe/{recipe_id}/ingredient/new - Empty ingredient form
- GET /recipe/{recipe_id}/ingredient/{id}/update - Ingredient form
- POST /recipe/{recipe_id}/ingredient - Add or update an ingredient
- GET /recipe/{recipe_id}/ingredient/{id}/delete - Remove an ingredient
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from ..commands import IngredientCommand, UnitOfMeasureCommand
from ..deps import get_ingredient_service, get_recipe_service, get_uom_service
from ..rate_limit import form_limit
from ..services import IngredientService, RecipeService, UnitOfMeasureService
from ..views import Model, field_errors, form_fields, render

router = APIRouter()
logger = logging.getLogger("recipe_app.controllers.ingredients")

INGREDIENT_FORM_VIEW = "recipe/ingredient/ingredientform"


def _form_model(
    ingredient: IngredientCommand | dict,
    uom_service: UnitOfMeasureService,
    errors: dict[str, str] | None = None,
) -> Model:
    model = Model()
    model.add_attribute("ingredient", ingredient)
    model.add_attribute("uoms", uom_service.list_all_uoms())
    model.add_attribute("errors", errors or {})
    return model


@router.get("/recipe/{recipe_id}/ingredients", response_class=HTMLResponse)
def list_ingredients(
    request: Request,
    recipe_id: int,
    recipe_service: RecipeService = Depends(get_recipe_service),
):
    model = Model().add_attribute("recipe", recipe_service.find_command_by_id(recipe_id))
    return render(request, "recipe/ingredient/list", model)


@router.get("/recipe/{recipe_id}/ingredient/{ingredient_id}/show", response_class=HTMLResponse)
def show_ingredient(
    request: Request,
    recipe_id: int,
    ingredient_id: int,
    ingredient_service: IngredientService = Depends(get_ingredient_service),
):
    ingredient = ingredient_service.find_by_recipe_id_and_ingredient_id(recipe_id, ingredient_id)
    return render(request, "recipe/ingredient/show", Model().add_attribute("ingredient", ingredient))


@router.get("/recipe/{recipe_id}/ingredient/new", response_class=HTMLResponse)
def new_ingredient(
    request: Request,
    recipe_id: int,
    recipe_service: RecipeService = Depends(get_recipe_service),
    uom_service: UnitOfMeasureService = Depends(get_uom_service),
):
    # 404 for unknown recipes before showing the form
    recipe_service.find_by_id(recipe_id)
    ingredient = IngredientCommand(recipe_id=recipe_id, uom=UnitOfMeasureCommand())
    return render(request, INGREDIENT_FORM_VIEW, _form_model(ingredient, uom_service))


@router.get("/recipe/{recipe_id}/ingredient/{ingredient_id}/update", response_class=HTMLResponse)
def update_ingredient(
    request: Request,
    recipe_id: int,
    ingredient_id: int,
    ingredient_service: IngredientService = Depends(get_ingredient_service),
    uom_service: UnitOfMeasureService = Depends(get_uom_service),
):
    ingredient = ingredient_service.find_by_recipe_id_and_ingredient_id(recipe_id, ingredient_id)
    return render(request, INGREDIENT_FORM_VIEW, _form_model(ingredient, uom_service))


@router.post("/recipe/{recipe_id}/ingredient", response_class=HTMLResponse)
@form_limit
async def save_or_update(
    request: Request,
    recipe_id: int,
    ingredient_service: IngredientService = Depends(get_ingredient_service),
    uom_service: UnitOfMeasureService = Depends(get_uom_service),
):
    async with request.form() as form:
        data = form_fields(form, "id", "description", "amount")
        uom_id = form_fields(form, "uom_id")["uom_id"]

    submitted = dict(data, recipe_id=recipe_id, uom={"id": uom_id} if uom_id else None)
    try:
        command = IngredientCommand.model_validate(submitted)
    except ValidationError as exc:
        logger.info(f"Rejected ingredient form for recipe {recipe_id}")
        return render(request, INGREDIENT_FORM_VIEW, _form_model(submitted, uom_service, field_errors(exc)))

    saved = ingredient_service.save_ingredient_command(command)
    return RedirectResponse(
        url=f"/recipe/{saved.recipe_id}/ingredient/{saved.id}/show", status_code=303
    )


@router.get("/recipe/{recipe_id}/ingredient/{ingredient_id}/delete")
def delete_ingredient(
    recipe_id: int,
    ingredient_id: int,
    ingredient_service: IngredientService = Depends(get_ingredient_service),
):
    ingredient_service.remove_ingredient_of_recipe(recipe_id, ingredient_id)
    return RedirectResponse(url=f"/recipe/{recipe_id}/ingredients", status_code=303)
