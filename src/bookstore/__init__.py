"""Bookstore catalog service.

This package contains the catalog API for books and categories: the
persistence layer, the business services with their validation rules,
the HTTP adapter and a client that drives list and search views.
"""

__version__ = "0.1.0"
