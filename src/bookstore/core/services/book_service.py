"""Business rules for books."""

from loguru import logger
from sqlmodel import col

from src.bookstore.entities.catalog.book import Book, BookRepository, BookTable
from src.bookstore.entities.catalog.category import CategoryRepository


class BookService:
    """Catalog operations on books.

    Rejected writes are reported by returning ``None`` rather than raising:
    a book is rejected when another book already uses its name, or when it
    points at a category that does not exist.
    """

    def __init__(
        self, book_repository: BookRepository, category_repository: CategoryRepository
    ) -> None:
        self._books = book_repository
        self._categories = category_repository

    def get_all(self) -> list[Book]:
        return self._books.get_all()

    def get_by_id(self, book_id: int) -> Book | None:
        return self._books.get_by_id(book_id)

    def add(self, book: Book) -> Book | None:
        if self._books.search(BookTable.name == book.name):
            logger.info("Rejected book {!r}: name already in use", book.name)
            return None
        if not self._category_exists(book.category_id):
            return None

        return self._books.add(book)

    def update(self, book: Book) -> Book | None:
        if self._books.search(BookTable.name == book.name, BookTable.id != book.id):
            logger.info("Rejected update of book {}: name {!r} already in use", book.id, book.name)
            return None
        if not self._category_exists(book.category_id):
            return None

        return self._books.update(book)

    def remove(self, book: Book) -> bool:
        self._books.remove(book)
        return True

    def get_books_by_category(self, category_id: int) -> list[Book]:
        return self._books.get_books_by_category(category_id)

    def search(self, book_name: str) -> list[Book]:
        if not book_name.strip():
            return self.get_all()
        return self._books.search(col(BookTable.name).contains(book_name, autoescape=True))

    def search_book_with_category(self, searched_value: str) -> list[Book]:
        if not searched_value.strip():
            return self.get_all()
        return self._books.search_book_with_category(searched_value)

    def _category_exists(self, category_id: int) -> bool:
        if self._categories.get_by_id(category_id) is None:
            logger.info("Rejected book: category {} does not exist", category_id)
            return False
        return True
