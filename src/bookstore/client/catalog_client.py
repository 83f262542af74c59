"""Async HTTP client for the catalog API."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx
from loguru import logger

from src.bookstore.api.http.schemas import (
    BookAdd,
    BookEdit,
    BookResult,
    CategoryAdd,
    CategoryEdit,
    CategoryResult,
)
from src.bookstore.runtime.context import get_config


class CatalogClient:
    """Thin wrapper over the ``/api/books`` and ``/api/categories`` resources.

    Any non-2xx response raises ``httpx.HTTPStatusError``; searches that find
    nothing therefore raise with a 404.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        client_config = get_config().client
        self._base_url = (base_url or client_config.base_url).rstrip("/") + "/api/"
        self._client = client or httpx.AsyncClient(timeout=client_config.timeout_seconds)
        self._owns_client = client is None

    async def __aenter__(self) -> CatalogClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _request(self, method: str, path: str, json: Any = None) -> Any:
        response = await self._client.request(method, self._base_url + path, json=json)
        if response.is_error:
            logger.debug("{} {} -> {}", method, path, response.status_code)
        response.raise_for_status()
        return response.json() if response.content else None

    # Books

    async def get_books(self) -> list[BookResult]:
        data = await self._request("GET", "books")
        return [BookResult.model_validate(item) for item in data]

    async def get_book(self, book_id: int) -> BookResult:
        return BookResult.model_validate(await self._request("GET", f"books/{book_id}"))

    async def get_books_by_category(self, category_id: int) -> list[BookResult]:
        data = await self._request("GET", f"books/get-books-by-category/{category_id}")
        return [BookResult.model_validate(item) for item in data]

    async def add_book(self, book: BookAdd) -> BookResult:
        data = await self._request("POST", "books", json=book.model_dump(mode="json", by_alias=True))
        return BookResult.model_validate(data)

    async def update_book(self, book_id: int, book: BookEdit) -> BookResult:
        data = await self._request(
            "PUT", f"books/{book_id}", json=book.model_dump(mode="json", by_alias=True)
        )
        return BookResult.model_validate(data)

    async def delete_book(self, book_id: int) -> None:
        await self._request("DELETE", f"books/{book_id}")

    async def search_books_with_category(self, searched_value: str) -> list[BookResult]:
        data = await self._request(
            "GET", f"books/search-book-with-category/{quote(searched_value, safe='')}"
        )
        return [BookResult.model_validate(item) for item in data]

    # Categories

    async def get_categories(self) -> list[CategoryResult]:
        data = await self._request("GET", "categories")
        return [CategoryResult.model_validate(item) for item in data]

    async def get_category(self, category_id: int) -> CategoryResult:
        return CategoryResult.model_validate(
            await self._request("GET", f"categories/{category_id}")
        )

    async def add_category(self, category: CategoryAdd) -> CategoryResult:
        data = await self._request(
            "POST", "categories", json=category.model_dump(mode="json", by_alias=True)
        )
        return CategoryResult.model_validate(data)

    async def update_category(
        self, category_id: int, category: CategoryEdit
    ) -> CategoryResult:
        data = await self._request(
            "PUT",
            f"categories/{category_id}",
            json=category.model_dump(mode="json", by_alias=True),
        )
        return CategoryResult.model_validate(data)

    async def delete_category(self, category_id: int) -> None:
        await self._request("DELETE", f"categories/{category_id}")

    async def search_categories(self, category_name: str) -> list[CategoryResult]:
        data = await self._request(
            "GET", f"categories/search/{quote(category_name, safe='')}"
        )
        return [CategoryResult.model_validate(item) for item in data]
