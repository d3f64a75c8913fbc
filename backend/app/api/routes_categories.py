from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.api.deps import get_category_repo, get_product_repo, require_admin
from app.repositories.base import DataAccessError
from app.repositories.category_repo import CategoryRepository
from app.repositories.product_repo import ProductRepository
from app.schemas.category_schema import CategoryIn, CategoryOut
from app.schemas.product_schema import ProductOut

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=List[CategoryOut], summary="List categories")
def list_categories(repo: CategoryRepository = Depends(get_category_repo)):
    try:
        return [CategoryOut.model_validate(c) for c in repo.list_all()]
    except DataAccessError:
        raise HTTPException(status_code=500, detail="Error retrieving categories.")


@router.get("/{category_id}", response_model=CategoryOut, summary="Get category by id")
def get_category(category_id: int, repo: CategoryRepository = Depends(get_category_repo)):
    category = repo.get_by_id(category_id)
    if category is None:
        raise HTTPException(status_code=404, detail="Category not found.")
    return CategoryOut.model_validate(category)


@router.get(
    "/{category_id}/products",
    response_model=List[ProductOut],
    summary="List products in a category",
)
def list_category_products(
    category_id: int, products: ProductRepository = Depends(get_product_repo)
):
    try:
        return [ProductOut.model_validate(p) for p in products.list_by_category_id(category_id)]
    except DataAccessError:
        raise HTTPException(status_code=500, detail="Error retrieving products for category.")


@router.post(
    "",
    response_model=CategoryOut,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
    summary="Create category",
)
def create_category(payload: CategoryIn, repo: CategoryRepository = Depends(get_category_repo)):
    try:
        return CategoryOut.model_validate(repo.create(payload.to_model()))
    except DataAccessError:
        raise HTTPException(status_code=500, detail="Error creating category.")


@router.put(
    "/{category_id}",
    response_model=CategoryOut,
    dependencies=[Depends(require_admin)],
    summary="Update category",
)
def update_category(
    category_id: int, payload: CategoryIn, repo: CategoryRepository = Depends(get_category_repo)
):
    try:
        outcome = repo.update(category_id, payload.to_model())
        updated = repo.get_by_id(category_id) if outcome.ok else None
    except DataAccessError:
        raise HTTPException(status_code=500, detail="Error updating category.")
    if updated is None:
        raise HTTPException(status_code=500, detail="Error updating category.")
    return CategoryOut.model_validate(updated)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
    summary="Delete category",
)
def delete_category(category_id: int, repo: CategoryRepository = Depends(get_category_repo)):
    try:
        repo.delete(category_id)
    except DataAccessError:
        raise HTTPException(status_code=500, detail="Error deleting category.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
