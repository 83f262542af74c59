"""Book data-access layer."""

from sqlalchemy import or_
from sqlalchemy.orm import selectinload
from sqlmodel import col
from sqlmodel.sql.expression import SelectOfScalar

from src.bookstore.entities._repository import EntityRepository
from src.bookstore.entities.catalog.book.entity import Book
from src.bookstore.entities.catalog.book.table import BookTable
from src.bookstore.entities.catalog.category.table import CategoryTable


class BookRepository(EntityRepository[Book, BookTable]):
    """Data-access layer for books.

    Every read loads the owning category along with the book.
    """

    entity_type = Book
    table_type = BookTable

    def _query(self) -> SelectOfScalar[BookTable]:
        return super()._query().options(selectinload(BookTable.category))

    def get_books_by_category(self, category_id: int) -> list[Book]:
        return self.search(BookTable.category_id == category_id)

    def search_book_with_category(self, value: str) -> list[Book]:
        """Books whose name, author, description or category name contains ``value``."""
        statement = (
            self._query()
            .join(CategoryTable, col(BookTable.category_id) == col(CategoryTable.id))
            .where(
                or_(
                    col(BookTable.name).contains(value, autoescape=True),
                    col(BookTable.author).contains(value, autoescape=True),
                    col(BookTable.description).contains(value, autoescape=True),
                    col(CategoryTable.name).contains(value, autoescape=True),
                )
            )
        )
        return [self._to_entity(row) for row in self._session.exec(statement).all()]
