"""SearchController debounce and list-refresh behaviour."""

import asyncio

import httpx
import pytest

from src.bookstore.client import Notification, SearchController


class FakeCatalog:
    """Records the calls a controller makes and serves canned results."""

    def __init__(self, records: list[str]) -> None:
        self.records = records
        self.calls: list[tuple[str, object]] = []
        self.fail_search = False
        self.fail_delete = False

    async def fetch_all(self) -> list[str]:
        self.calls.append(("all", None))
        return list(self.records)

    async def search(self, term: str) -> list[str]:
        self.calls.append(("search", term))
        if self.fail_search:
            request = httpx.Request("GET", "http://catalog.test/api/categories/search/x")
            raise httpx.HTTPStatusError(
                "Not Found", request=request, response=httpx.Response(404, request=request)
            )
        return [record for record in self.records if term in record]

    async def remove(self, record_id: int) -> None:
        self.calls.append(("remove", record_id))
        if self.fail_delete:
            raise httpx.ConnectError("connection refused")
        del self.records[record_id]


@pytest.fixture
def fake_catalog() -> FakeCatalog:
    return FakeCatalog(["Fiction", "Science", "History"])


@pytest.fixture
def controller(fake_catalog: FakeCatalog) -> SearchController[str]:
    return SearchController(
        fake_catalog.fetch_all,
        fake_catalog.search,
        fake_catalog.remove,
        noun="category",
        debounce_ms=20,
    )


@pytest.mark.asyncio
async def test_load_shows_everything(controller, fake_catalog):
    await controller.load()

    assert controller.results == ["Fiction", "Science", "History"]
    assert fake_catalog.calls == [("all", None)]


@pytest.mark.asyncio
async def test_rapid_keystrokes_send_one_query(controller, fake_catalog):
    for term in ("F", "Fi", "Fic"):
        controller.search_term_changed(term)
        await asyncio.sleep(0)

    await controller.wait()

    assert fake_catalog.calls == [("search", "Fic")]
    assert controller.results == ["Fiction"]
    assert controller.search_term == "Fic"


@pytest.mark.asyncio
async def test_keystrokes_spaced_beyond_debounce_each_query(controller, fake_catalog):
    controller.search_term_changed("Sci")
    await controller.wait()
    controller.search_term_changed("His")
    await controller.wait()

    assert fake_catalog.calls == [("search", "Sci"), ("search", "His")]
    assert controller.results == ["History"]


@pytest.mark.asyncio
async def test_blank_term_fetches_all(controller, fake_catalog):
    controller.search_term_changed("   ")
    await controller.wait()

    assert fake_catalog.calls == [("all", None)]
    assert len(controller.results) == 3


@pytest.mark.asyncio
async def test_failed_search_clears_results(controller, fake_catalog):
    await controller.load()
    fake_catalog.fail_search = True

    controller.search_term_changed("Astronomy")
    await controller.wait()

    assert controller.results == []


@pytest.mark.asyncio
async def test_delete_success_notifies_and_refreshes(controller, fake_catalog):
    await controller.load()

    assert await controller.delete(2) is True

    assert controller.notifications == [Notification("success", "The category has been deleted")]
    assert controller.results == ["Fiction", "Science"]


@pytest.mark.asyncio
async def test_delete_failure_notifies_and_keeps_list(controller, fake_catalog):
    await controller.load()
    fake_catalog.fail_delete = True

    assert await controller.delete(0) is False

    assert controller.notifications == [Notification("error", "Failed to delete the category.")]
    assert controller.results == ["Fiction", "Science", "History"]


@pytest.mark.asyncio
async def test_delete_without_remover_is_rejected(fake_catalog):
    read_only = SearchController(fake_catalog.fetch_all, fake_catalog.search, debounce_ms=20)

    with pytest.raises(RuntimeError):
        await read_only.delete(1)


@pytest.mark.asyncio
async def test_close_cancels_pending_query(controller, fake_catalog):
    controller.search_term_changed("Fic")
    await controller.close()
    await asyncio.sleep(0.05)

    assert fake_catalog.calls == []


@pytest.mark.asyncio
async def test_refresh_reapplies_current_term(controller, fake_catalog):
    controller.search_term_changed("i")
    await controller.wait()
    fake_catalog.records.append("Poetry")
    fake_catalog.records.append("Mythic")

    await controller.refresh()

    assert fake_catalog.calls == [("search", "i"), ("search", "i")]
    assert controller.results == ["Fiction", "Science", "History", "Mythic"]


@pytest.mark.asyncio
async def test_delete_refreshes_filtered_list(controller, fake_catalog):
    controller.search_term_changed("Sci")
    await controller.wait()

    assert await controller.delete(1) is True

    assert fake_catalog.calls == [("search", "Sci"), ("remove", 1), ("search", "Sci")]
    assert controller.results == []
