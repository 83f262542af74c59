"""Book API router."""

from fastapi import APIRouter, Depends, HTTPException, Response

from src.bookstore.api.http.deps import get_book_service
from src.bookstore.api.http.schemas import BookAdd, BookEdit, BookResult
from src.bookstore.core.services import BookService

router = APIRouter(prefix="/api/books", tags=["books"])

NO_BOOK_FOUND = "None book was founded"


@router.get("", response_model=list[BookResult])
def get_all(service: BookService = Depends(get_book_service)) -> list[BookResult]:
    """List all books."""
    return [BookResult.from_entity(book) for book in service.get_all()]


@router.get("/get-books-by-category/{category_id}", response_model=list[BookResult])
def get_books_by_category(
    category_id: int,
    service: BookService = Depends(get_book_service),
) -> list[BookResult]:
    """List the books of one category."""
    books = service.get_books_by_category(category_id)
    if not books:
        raise HTTPException(status_code=404, detail="Category has no books")
    return [BookResult.from_entity(book) for book in books]


@router.get("/search/{book_name}", response_model=list[BookResult])
def search(
    book_name: str,
    service: BookService = Depends(get_book_service),
) -> list[BookResult]:
    """Find books whose name contains ``book_name``."""
    books = service.search(book_name)
    if not books:
        raise HTTPException(status_code=404, detail=NO_BOOK_FOUND)
    return [BookResult.from_entity(book) for book in books]


@router.get("/search-book-with-category/{searched_value}", response_model=list[BookResult])
def search_book_with_category(
    searched_value: str,
    service: BookService = Depends(get_book_service),
) -> list[BookResult]:
    """Find books matching on name, author, description or category name."""
    books = service.search_book_with_category(searched_value)
    if not books:
        raise HTTPException(status_code=404, detail=NO_BOOK_FOUND)
    return [BookResult.from_entity(book) for book in books]


@router.get("/{book_id}", response_model=BookResult)
def get_by_id(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> BookResult:
    """Get a book by ID."""
    book = service.get_by_id(book_id)
    if book is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return BookResult.from_entity(book)


@router.post("", response_model=BookResult)
def add(
    book_add: BookAdd,
    service: BookService = Depends(get_book_service),
) -> BookResult:
    """Create a new book."""
    created = service.add(book_add.to_entity())
    if created is None:
        raise HTTPException(status_code=400, detail="Book could not be added")
    return BookResult.from_entity(created)


@router.put("/{book_id}", response_model=BookResult)
def update(
    book_id: int,
    book_edit: BookEdit,
    service: BookService = Depends(get_book_service),
) -> BookResult:
    """Update a book."""
    if book_id != book_edit.id:
        raise HTTPException(status_code=400, detail="Path id does not match body id")

    try:
        updated = service.update(book_edit.to_entity())
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    if updated is None:
        raise HTTPException(status_code=400, detail="Book could not be updated")
    return BookResult.from_entity(updated)


@router.delete("/{book_id}", response_class=Response)
def remove(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> Response:
    """Delete a book."""
    book = service.get_by_id(book_id)
    if book is None:
        raise HTTPException(status_code=404, detail="Book not found")

    service.remove(book)
    return Response(status_code=200)
