"""Core services exports."""

from .book_service import BookService
from .category_service import CategoryService
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

__all__ = [
    "BookService",
    "CategoryService",
    "DbManageService",
    "DbSessionService",
]
