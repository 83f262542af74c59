"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model returned by repositories and services
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .catalog import (
    Book,
    BookRepository,
    BookTable,
    Category,
    CategoryRepository,
    CategoryTable,
)

__all__ = [
    "Book",
    "BookRepository",
    "BookTable",
    "Category",
    "CategoryRepository",
    "CategoryTable",
]
