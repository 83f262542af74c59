"""Request and response bodies for the categories resource."""

from pydantic import Field

from src.bookstore.api.http.schemas.base import CamelModel
from src.bookstore.entities.catalog.category import Category


class CategoryAdd(CamelModel):
    name: str = Field(min_length=2, max_length=150)

    def to_entity(self) -> Category:
        return Category(name=self.name)


class CategoryEdit(CategoryAdd):
    id: int

    def to_entity(self) -> Category:
        return Category(id=self.id, name=self.name)


class CategoryResult(CamelModel):
    id: int
    name: str

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryResult":
        return cls(id=category.id, name=category.name)
