"""Category data-access layer."""

from src.bookstore.entities._repository import EntityRepository
from src.bookstore.entities.catalog.category.entity import Category
from src.bookstore.entities.catalog.category.table import CategoryTable


class CategoryRepository(EntityRepository[Category, CategoryTable]):
    """Data-access layer for categories."""

    entity_type = Category
    table_type = CategoryTable
