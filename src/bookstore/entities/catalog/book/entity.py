"""Entity: Book."""

from datetime import date
from typing import Any

from pydantic import Field

from src.bookstore.entities._base import Entity
from src.bookstore.entities.catalog.category.entity import Category


class Book(Entity):
    """Book entity representing a title in the catalog.

    ``category`` is populated on reads from the store and ignored on writes;
    ``category_id`` is the owning reference.
    """

    name: str = Field(description="Title of the book, unique in the catalog")
    author: str = Field(description="Author name")
    description: str | None = Field(default=None, description="Free-form summary")
    value: float = Field(description="Price")
    publish_date: date = Field(description="Publication date")
    category_id: int = Field(description="Identifier of the owning category")
    category: Category | None = Field(default=None, description="Owning category")

    def __eq__(self, other: Any) -> bool:
        """Compare books by their own attributes, ignoring the loaded category."""
        if not isinstance(other, Book):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.author == other.author
            and self.description == other.description
            and self.value == other.value
            and self.publish_date == other.publish_date
            and self.category_id == other.category_id
        )

    def __hash__(self) -> int:
        return hash((self.id, self.name, self.category_id))
