from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from ..deps import get_recipe_service
from ..services import RecipeService
from ..views import Model, render

router = APIRouter()

ATTR_RECIPES = "ATTR_RECIPES"
INDEX_VIEW = "index"


class IndexController:
    def __init__(self, recipe_service: RecipeService) -> None:
        self.recipe_service = recipe_service

    def get_index_page(self, model: Model) -> str:
        model.add_attribute(ATTR_RECIPES, self.recipe_service.get_recipes())
        return INDEX_VIEW


@router.get("/", response_class=HTMLResponse)
@router.get("/index", response_class=HTMLResponse)
def index(request: Request, recipe_service: RecipeService = Depends(get_recipe_service)):
    """Overview of all recipes."""
    model = Model()
    view_name = IndexController(recipe_service).get_index_page(model)
    return render(request, view_name, model)
