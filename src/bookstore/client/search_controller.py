"""Debounced search driving a list view of catalog records."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

import httpx
from loguru import logger

from src.bookstore.api.http.schemas import BookResult, CategoryResult
from src.bookstore.client.catalog_client import CatalogClient
from src.bookstore.runtime.context import get_config

T = TypeVar("T")


@dataclass(frozen=True)
class Notification:
    """Outcome of a user action, shown to the user as a transient message."""

    level: Literal["success", "error"]
    message: str


class SearchController(Generic[T]):
    """Holds the visible results of a list view and keeps them in sync with the API.

    Keystrokes are reported with :meth:`search_term_changed`. Only after
    ``debounce_ms`` without a new keystroke is a single query sent: a blank
    term fetches everything, anything else runs the search. When a query
    fails the visible results are cleared rather than left stale.
    """

    def __init__(
        self,
        fetch_all: Callable[[], Awaitable[list[T]]],
        search: Callable[[str], Awaitable[list[T]]],
        remove: Callable[[int], Awaitable[None]] | None = None,
        *,
        noun: str = "record",
        debounce_ms: int | None = None,
    ) -> None:
        self._fetch_all = fetch_all
        self._search = search
        self._remove = remove
        self._noun = noun
        if debounce_ms is None:
            debounce_ms = get_config().client.search_debounce_ms
        self._debounce_seconds = debounce_ms / 1000
        self._pending: asyncio.Task[None] | None = None

        self.search_term = ""
        self.results: list[T] = []
        self.notifications: list[Notification] = []

    @classmethod
    def for_books(
        cls, client: CatalogClient, *, debounce_ms: int | None = None
    ) -> SearchController[BookResult]:
        return cls(
            client.get_books,
            client.search_books_with_category,
            client.delete_book,
            noun="book",
            debounce_ms=debounce_ms,
        )

    @classmethod
    def for_categories(
        cls, client: CatalogClient, *, debounce_ms: int | None = None
    ) -> SearchController[CategoryResult]:
        return cls(
            client.get_categories,
            client.search_categories,
            client.delete_category,
            noun="category",
            debounce_ms=debounce_ms,
        )

    async def load(self) -> None:
        """Show the full, unfiltered list."""
        await self._run(self._fetch_all)

    async def refresh(self) -> None:
        """Re-run the query for the current search term."""
        await self.query(self.search_term)

    def search_term_changed(self, term: str) -> None:
        """Record a keystroke and (re)start the debounce timer.

        Must be called from within a running event loop.
        """
        self.search_term = term
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = asyncio.get_running_loop().create_task(self._debounced(term))

    async def wait(self) -> None:
        """Wait until the pending debounced query, if any, has completed."""
        task = self._pending
        if task is None:
            return
        await asyncio.wait({task})
        if not task.cancelled():
            task.result()

    async def close(self) -> None:
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        await self.wait()

    async def delete(self, record_id: int) -> bool:
        """Delete a record, then refresh the list on success."""
        if self._remove is None:
            raise RuntimeError(f"{self._noun} list does not support deletion")

        try:
            await self._remove(record_id)
        except httpx.HTTPError as e:
            logger.warning("Failed to delete {} {}: {}", self._noun, record_id, e)
            self.notifications.append(
                Notification("error", f"Failed to delete the {self._noun}.")
            )
            return False

        self.notifications.append(
            Notification("success", f"The {self._noun} has been deleted")
        )
        await self.refresh()
        return True

    async def _debounced(self, term: str) -> None:
        await asyncio.sleep(self._debounce_seconds)
        await self.query(term)

    async def query(self, term: str) -> None:
        """Run the query for ``term`` immediately, bypassing the debounce."""
        if not term.strip():
            await self._run(self._fetch_all)
        else:
            await self._run(lambda: self._search(term))

    async def _run(self, fetch: Callable[[], Awaitable[list[T]]]) -> None:
        try:
            self.results = await fetch()
        except httpx.HTTPError as e:
            logger.debug("{} query failed: {}", self._noun, e)
            self.results = []
