"""Request and response bodies for the books resource."""

from datetime import date

from pydantic import Field

from src.bookstore.api.http.schemas.base import CamelModel
from src.bookstore.entities.catalog.book import Book


class BookAdd(CamelModel):
    category_id: int
    name: str = Field(min_length=2, max_length=150)
    author: str = Field(min_length=2, max_length=150)
    description: str | None = None
    value: float
    publish_date: date

    def to_entity(self) -> Book:
        return Book(**self.model_dump())


class BookEdit(BookAdd):
    id: int


class BookResult(CamelModel):
    id: int
    name: str
    author: str
    description: str | None = None
    value: float
    publish_date: date
    category_id: int
    category_name: str | None = None

    @classmethod
    def from_entity(cls, book: Book) -> "BookResult":
        return cls(
            id=book.id,
            name=book.name,
            author=book.author,
            description=book.description,
            value=book.value,
            publish_date=book.publish_date,
            category_id=book.category_id,
            category_name=book.category.name if book.category else None,
        )
