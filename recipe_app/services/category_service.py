from ..commands import CategoryCommand
from ..converters import CategoryConverter
from ..repositories import CategoryRepository


class CategoryService:
    def __init__(
        self,
        category_repository: CategoryRepository,
        category_converter: CategoryConverter,
    ) -> None:
        self.category_repository = category_repository
        self.category_converter = category_converter

    def list_all_categories(self) -> list[CategoryCommand]:
        return [
            self.category_converter.to_command(category)
            for category in self.category_repository.find_all()
        ]
