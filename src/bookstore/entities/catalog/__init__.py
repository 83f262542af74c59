"""Catalog entities.

Both table models are imported together so that the relationship between
books and categories can be resolved whichever one is used first.
"""

from .book import Book, BookRepository, BookTable
from .category import Category, CategoryRepository, CategoryTable

__all__ = [
    "Book",
    "BookRepository",
    "BookTable",
    "Category",
    "CategoryRepository",
    "CategoryTable",
]
