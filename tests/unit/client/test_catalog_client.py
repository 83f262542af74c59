"""CatalogClient tests against a mocked HTTP transport."""

import json
from datetime import date

import httpx
import pytest

from src.bookstore.api.http.schemas import BookAdd, CategoryEdit
from src.bookstore.client import CatalogClient

BOOK_JSON = {
    "id": 1,
    "name": "Dune",
    "author": "Frank Herbert",
    "description": None,
    "value": 39.9,
    "publishDate": "1965-08-01",
    "categoryId": 2,
    "categoryName": "Fiction",
}


def _client(handler) -> CatalogClient:
    transport = httpx.MockTransport(handler)
    return CatalogClient("http://catalog.test/", client=httpx.AsyncClient(transport=transport))


@pytest.mark.asyncio
async def test_get_books_parses_camel_case():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        return httpx.Response(200, json=[BOOK_JSON])

    async with _client(handler) as client:
        books = await client.get_books()

    assert seen == ["/api/books"]
    assert books[0].publish_date == date(1965, 8, 1)
    assert books[0].category_name == "Fiction"


@pytest.mark.asyncio
async def test_add_book_sends_camel_case_body():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["method"] = request.method
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json=BOOK_JSON)

    book = BookAdd(
        category_id=2,
        name="Dune",
        author="Frank Herbert",
        value=39.9,
        publish_date=date(1965, 8, 1),
    )
    async with _client(handler) as client:
        created = await client.add_book(book)

    assert captured["method"] == "POST"
    assert captured["body"]["categoryId"] == 2
    assert captured["body"]["publishDate"] == "1965-08-01"
    assert created.id == 1


@pytest.mark.asyncio
async def test_update_category_targets_record_path():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["path"] = request.url.path
        return httpx.Response(200, json={"id": 3, "name": "Poetry"})

    async with _client(handler) as client:
        result = await client.update_category(3, CategoryEdit(id=3, name="Poetry"))

    assert captured["path"] == "/api/categories/3"
    assert result.name == "Poetry"


@pytest.mark.asyncio
async def test_search_term_is_path_encoded():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["raw_path"] = request.url.raw_path
        return httpx.Response(200, json=[BOOK_JSON])

    async with _client(handler) as client:
        await client.search_books_with_category("sci/fi classics")

    assert captured["raw_path"] == b"/api/books/search-book-with-category/sci%2Ffi%20classics"


@pytest.mark.asyncio
async def test_not_found_raises_status_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"detail": "None category was founded"})

    async with _client(handler) as client:
        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            await client.search_categories("nothing")

    assert exc_info.value.response.status_code == 404


@pytest.mark.asyncio
async def test_delete_returns_none():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "DELETE"
        return httpx.Response(200)

    async with _client(handler) as client:
        assert await client.delete_book(5) is None
