"""Book database table model."""

from datetime import date
from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship

from src.bookstore.entities._base import EntityTable

if TYPE_CHECKING:
    from src.bookstore.entities.catalog.category.table import CategoryTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books.

    Name uniqueness is a business rule checked by the book service, so the
    column is indexed but carries no unique constraint.
    """

    __tablename__ = "books"

    name: str = Field(index=True)
    author: str
    description: str | None = None
    value: float
    publish_date: date
    category_id: int = Field(foreign_key="categories.id", index=True)

    category: Optional["CategoryTable"] = Relationship(back_populates="books")
