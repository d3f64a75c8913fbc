from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from app.api.deps import get_product_repo, require_admin
from app.repositories.base import DataAccessError
from app.repositories.product_repo import ProductRepository
from app.repositories.query_builder import ProductSearchCriteria
from app.schemas.product_schema import ProductIn, ProductOut

router = APIRouter(prefix="/products", tags=["catalogue"])


@router.get("", response_model=List[ProductOut], summary="Search products")
def search_products(
    cat: Optional[int] = Query(None, description="category id"),
    min_price: Optional[Decimal] = Query(None, alias="minPrice"),
    max_price: Optional[Decimal] = Query(None, alias="maxPrice"),
    color: Optional[str] = Query(None),
    repo: ProductRepository = Depends(get_product_repo),
):
    criteria = ProductSearchCriteria(
        category_id=cat, min_price=min_price, max_price=max_price, color=color
    )
    try:
        return [ProductOut.model_validate(p) for p in repo.search(criteria)]
    except DataAccessError:
        raise HTTPException(status_code=500, detail="Error retrieving products.")


@router.get("/{product_id}", response_model=ProductOut, summary="Get product by id")
def get_product(product_id: int, repo: ProductRepository = Depends(get_product_repo)):
    try:
        product = repo.get_by_id(product_id)
    except DataAccessError:
        raise HTTPException(status_code=500, detail="Error retrieving product.")
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found.")
    return ProductOut.model_validate(product)


@router.post(
    "",
    response_model=ProductOut,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
    summary="Create product",
)
def create_product(payload: ProductIn, repo: ProductRepository = Depends(get_product_repo)):
    try:
        created = repo.create(payload.to_model())
    except DataAccessError:
        raise HTTPException(status_code=500, detail="Error creating product.")
    if created is None:
        raise HTTPException(status_code=500, detail="Error creating product.")
    return ProductOut.model_validate(created)


@router.put(
    "/{product_id}",
    response_model=ProductOut,
    dependencies=[Depends(require_admin)],
    summary="Update product",
)
def update_product(
    product_id: int, payload: ProductIn, repo: ProductRepository = Depends(get_product_repo)
):
    try:
        outcome = repo.update(product_id, payload.to_model())
        updated = repo.get_by_id(product_id) if outcome.ok else None
    except DataAccessError:
        raise HTTPException(status_code=500, detail="Error updating product.")
    if updated is None:
        raise HTTPException(status_code=500, detail="Error updating product.")
    return ProductOut.model_validate(updated)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
    summary="Delete product",
)
def delete_product(product_id: int, repo: ProductRepository = Depends(get_product_repo)):
    try:
        if repo.get_by_id(product_id) is None:
            raise HTTPException(status_code=404, detail="Product not found.")
        repo.delete(product_id)
    except DataAccessError:
        raise HTTPException(status_code=500, detail="Error deleting product.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
