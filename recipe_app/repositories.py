"""Repositories over the SQLAlchemy session.

Each repository wraps one request-scoped ``Session``. ``save`` and
``delete`` commit, so every call is its own transaction.
"""

from typing import Generic, Optional, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from .models import Category, Recipe, UnitOfMeasure

T = TypeVar("T")


class Repository(Generic[T]):
    model: type

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_id(self, id: int) -> Optional[T]:
        return self.db.get(self.model, id)

    def find_all(self) -> list[T]:
        return list(self.db.scalars(select(self.model).order_by(self.model.id)))

    def save(self, entity: T) -> T:
        self.db.add(entity)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(entity)
        return entity

    def delete(self, entity: T) -> None:
        self.db.delete(entity)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def count(self) -> int:
        return self.db.scalar(select(func.count()).select_from(self.model))


class RecipeRepository(Repository[Recipe]):
    model = Recipe


class UnitOfMeasureRepository(Repository[UnitOfMeasure]):
    model = UnitOfMeasure

    def find_by_description(self, description: str) -> Optional[UnitOfMeasure]:
        return self.db.scalar(
            select(UnitOfMeasure).where(UnitOfMeasure.description == description)
        )


class CategoryRepository(Repository[Category]):
    model = Category

    def find_by_description(self, description: str) -> Optional[Category]:
        return self.db.scalar(
            select(Category).where(Category.description == description)
        )
