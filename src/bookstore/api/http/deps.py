"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.bookstore.api.http.app_data import ApplicationDependencies
from src.bookstore.core.services import BookService, CategoryService
from src.bookstore.entities.catalog import BookRepository, CategoryRepository


def get_session(request: Request) -> Iterator[Session]:
    """Yield a database session scoped to the current request."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_book_service(session: Session = Depends(get_session)) -> BookService:
    """Get a book service bound to the request session."""
    return BookService(BookRepository(session), CategoryRepository(session))


def get_category_service(
    session: Session = Depends(get_session),
    book_service: BookService = Depends(get_book_service),
) -> CategoryService:
    """Get a category service bound to the request session."""
    return CategoryService(CategoryRepository(session), book_service)
