"""Entity: Category."""

from pydantic import Field

from src.bookstore.entities._base import Entity


class Category(Entity):
    """Category grouping books in the catalog.

    The name is unique among all categories; uniqueness is checked by the
    category service before every write.
    """

    name: str = Field(description="Category name")
