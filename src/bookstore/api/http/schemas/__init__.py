"""HTTP request and response models."""

from .book import BookAdd, BookEdit, BookResult
from .category import CategoryAdd, CategoryEdit, CategoryResult

__all__ = [
    "BookAdd",
    "BookEdit",
    "BookResult",
    "CategoryAdd",
    "CategoryEdit",
    "CategoryResult",
]
