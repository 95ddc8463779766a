# catalog/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, Response

from catalog.data.database import ProductStore, get_store
from catalog.domain.schemas import ProductRead
from catalog.repos.product_repo import ProductRepo
from catalog.services.catalog_service import CatalogService

router = APIRouter(prefix="/api/products", tags=["products"])


def get_service(store: ProductStore = Depends(get_store)) -> CatalogService:
    return CatalogService(ProductRepo(store))


@router.get("", response_model=List[ProductRead])
def list_products(svc: CatalogService = Depends(get_service)):
    return svc.get_all_products()


# premium musi byc zarejestrowane przed /{product_id}
@router.get("/premium", response_model=List[ProductRead])
def list_premium_products(svc: CatalogService = Depends(get_service)):
    return svc.get_premium_products()


@router.get(
    "/{product_id:int}",
    response_model=ProductRead,
    responses={404: {"description": "Product not found (empty body)"}},
)
def get_product(product_id: int, svc: CatalogService = Depends(get_service)):
    product = svc.get_product_by_id(product_id)
    if product is None:
        return Response(status_code=404)
    return product
