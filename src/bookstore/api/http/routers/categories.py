"""Category API router."""

from fastapi import APIRouter, Depends, HTTPException, Response

from src.bookstore.api.http.deps import get_category_service
from src.bookstore.api.http.schemas import CategoryAdd, CategoryEdit, CategoryResult
from src.bookstore.core.services import CategoryService

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=list[CategoryResult])
def get_all(
    service: CategoryService = Depends(get_category_service),
) -> list[CategoryResult]:
    """List all categories."""
    return [CategoryResult.from_entity(category) for category in service.get_all()]


@router.get("/search/{category_name}", response_model=list[CategoryResult])
def search(
    category_name: str,
    service: CategoryService = Depends(get_category_service),
) -> list[CategoryResult]:
    """Find categories whose name contains ``category_name``."""
    categories = service.search(category_name)
    if not categories:
        raise HTTPException(status_code=404, detail="None category was founded")
    return [CategoryResult.from_entity(category) for category in categories]


@router.get("/{category_id}", response_model=CategoryResult)
def get_by_id(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
) -> CategoryResult:
    """Get a category by ID."""
    category = service.get_by_id(category_id)
    if category is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return CategoryResult.from_entity(category)


@router.post("", response_model=CategoryResult)
def add(
    category_add: CategoryAdd,
    service: CategoryService = Depends(get_category_service),
) -> CategoryResult:
    """Create a new category."""
    created = service.add(category_add.to_entity())
    if created is None:
        raise HTTPException(status_code=400, detail="Category could not be added")
    return CategoryResult.from_entity(created)


@router.put("/{category_id}", response_model=CategoryResult)
def update(
    category_id: int,
    category_edit: CategoryEdit,
    service: CategoryService = Depends(get_category_service),
) -> CategoryResult:
    """Update a category."""
    if category_id != category_edit.id:
        raise HTTPException(status_code=400, detail="Path id does not match body id")

    try:
        updated = service.update(category_edit.to_entity())
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    if updated is None:
        raise HTTPException(status_code=400, detail="Category could not be updated")
    return CategoryResult.from_entity(updated)


@router.delete("/{category_id}", response_class=Response)
def remove(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
) -> Response:
    """Delete a category that no book references."""
    category = service.get_by_id(category_id)
    if category is None:
        raise HTTPException(status_code=404, detail="Category not found")

    if not service.remove(category):
        raise HTTPException(
            status_code=400, detail="Category is still referenced by books"
        )
    return Response(status_code=200)
