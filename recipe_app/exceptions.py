class RecipeManagerError(Exception):
    pass


class NotFoundError(RecipeManagerError):
    """An entity addressed by id does not exist."""

    entity = "Entity"

    def __init__(self, entity_id) -> None:
        self.entity_id = entity_id
        super().__init__(f"{self.entity} {entity_id} not found")


class RecipeNotFound(NotFoundError):
    entity = "Recipe"


class IngredientNotFound(NotFoundError):
    entity = "Ingredient"


class UnitOfMeasureNotFound(NotFoundError):
    entity = "Unit of measure"


class CategoryNotFound(NotFoundError):
    entity = "Category"
