"""Business rules for categories."""

from loguru import logger
from sqlmodel import col

from src.bookstore.core.services.book_service import BookService
from src.bookstore.entities.catalog.category import (
    Category,
    CategoryRepository,
    CategoryTable,
)


class CategoryService:
    """Catalog operations on categories.

    Holds a ``BookService`` only to refuse removing a category that books
    still reference. The check and the delete are not atomic: a book added
    in between is not detected.
    """

    def __init__(
        self, category_repository: CategoryRepository, book_service: BookService
    ) -> None:
        self._categories = category_repository
        self._book_service = book_service

    def get_all(self) -> list[Category]:
        return self._categories.get_all()

    def get_by_id(self, category_id: int) -> Category | None:
        return self._categories.get_by_id(category_id)

    def add(self, category: Category) -> Category | None:
        if self._categories.search(CategoryTable.name == category.name):
            logger.info("Rejected category {!r}: name already in use", category.name)
            return None

        return self._categories.add(category)

    def update(self, category: Category) -> Category | None:
        if self._categories.search(
            CategoryTable.name == category.name, CategoryTable.id != category.id
        ):
            logger.info(
                "Rejected update of category {}: name {!r} already in use",
                category.id,
                category.name,
            )
            return None

        return self._categories.update(category)

    def remove(self, category: Category) -> bool:
        books = self._book_service.get_books_by_category(category.id)
        if books:
            logger.warning(
                "Refused to remove category {}: {} book(s) still reference it",
                category.id,
                len(books),
            )
            return False

        self._categories.remove(category)
        return True

    def search(self, category_name: str) -> list[Category]:
        if not category_name.strip():
            return self.get_all()
        return self._categories.search(
            col(CategoryTable.name).contains(category_name, autoescape=True)
        )
