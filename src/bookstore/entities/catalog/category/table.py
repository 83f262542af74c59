"""Category database table model."""

from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship

from src.bookstore.entities._base import EntityTable

if TYPE_CHECKING:
    from src.bookstore.entities.catalog.book.table import BookTable


class CategoryTable(EntityTable, table=True):
    """Database persistence model for categories.

    ``books`` is the inverse side of ``BookTable.category``; categories do not
    own their books and deleting one is guarded by the category service.
    """

    __tablename__ = "categories"

    name: str = Field(index=True)

    books: list["BookTable"] = Relationship(back_populates="category")
