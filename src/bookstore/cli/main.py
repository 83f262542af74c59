"""Command-line interface for running and preparing the catalog service."""

from datetime import date
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from src.bookstore.core.services import (
    BookService,
    CategoryService,
    DbManageService,
    DbSessionService,
)
from src.bookstore.entities.catalog import (
    Book,
    BookRepository,
    Category,
    CategoryRepository,
)
from src.bookstore.runtime.context import get_config

console = Console()

app = typer.Typer(
    name="bookstore",
    help="Bookstore catalog service - database setup, sample data and server",
    rich_markup_mode="rich",
)

SAMPLE_CATALOG: dict[str, list[dict]] = {
    "Fiction": [
        {
            "name": "Dune",
            "author": "Frank Herbert",
            "description": "Politics and prophecy on the desert planet Arrakis.",
            "value": 39.9,
            "publish_date": date(1965, 8, 1),
        },
        {
            "name": "The Left Hand of Darkness",
            "author": "Ursula K. Le Guin",
            "description": "An envoy on the winter world of Gethen.",
            "value": 29.5,
            "publish_date": date(1969, 3, 1),
        },
    ],
    "Science": [
        {
            "name": "A Brief History of Time",
            "author": "Stephen Hawking",
            "description": "From the Big Bang to black holes.",
            "value": 25.0,
            "publish_date": date(1988, 4, 1),
        },
    ],
    "History": [],
}


def seed_catalog(category_service: CategoryService, book_service: BookService) -> tuple[int, int]:
    """Insert the sample catalog, skipping records whose names already exist.

    Returns:
        The number of categories and books actually added.
    """
    added_categories = added_books = 0
    existing = {category.name: category for category in category_service.get_all()}

    for category_name, books in SAMPLE_CATALOG.items():
        category = existing.get(category_name)
        if category is None:
            category = category_service.add(Category(name=category_name))
            added_categories += 1

        for book in books:
            if book_service.add(Book(category_id=category.id, **book)) is not None:
                added_books += 1

    return added_categories, added_books


@app.command(name="init-db")
def init_db(
    drop: bool = typer.Option(False, help="Drop existing tables first"),
) -> None:
    """Create the catalog tables."""
    db_service = DbSessionService()
    manager = DbManageService(db_service.engine)
    if drop:
        manager.drop_all()
    manager.create_all()
    console.print(f"[green]Tables ready at[/green] {get_config().database.url}")
    db_service.dispose()


@app.command()
def seed() -> None:
    """Load a small sample catalog (safe to run repeatedly)."""
    db_service = DbSessionService()
    DbManageService(db_service.engine).create_all()

    with db_service.session_scope() as session:
        book_service = BookService(BookRepository(session), CategoryRepository(session))
        category_service = CategoryService(CategoryRepository(session), book_service)
        added_categories, added_books = seed_catalog(category_service, book_service)

        table = Table(title="Catalog")
        table.add_column("Book")
        table.add_column("Author")
        table.add_column("Category")
        for book in book_service.get_all():
            table.add_row(book.name, book.author, book.category.name if book.category else "-")

    console.print(table)
    console.print(
        f"[green]Added {added_categories} categories and {added_books} books[/green]"
    )
    db_service.dispose()


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Host to bind the server to"),
    port: Optional[int] = typer.Option(None, help="Port to bind the server to"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """Start the catalog API with uvicorn."""
    import uvicorn

    config = get_config()
    host = host or config.app.host
    port = port or config.app.port

    console.print(
        Panel.fit(
            f"[bold green]Bookstore API[/bold green] on http://{host}:{port}",
            border_style="green",
        )
    )
    uvicorn.run(
        "src.bookstore.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        access_log=False,
    )


if __name__ == "__main__":
    app()
