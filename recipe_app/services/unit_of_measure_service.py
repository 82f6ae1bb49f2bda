from ..commands import UnitOfMeasureCommand
from ..converters import UnitOfMeasureConverter
from ..repositories import UnitOfMeasureRepository


class UnitOfMeasureService:
    def __init__(
        self,
        uom_repository: UnitOfMeasureRepository,
        uom_converter: UnitOfMeasureConverter,
    ) -> None:
        self.uom_repository = uom_repository
        self.uom_converter = uom_converter

    def list_all_uoms(self) -> list[UnitOfMeasureCommand]:
        return [self.uom_converter.to_command(uom) for uom in self.uom_repository.find_all()]
