from fastapi import APIRouter, Depends

from catalog.data.database import ProductStore, get_store
from catalog.domain.schemas import HealthOut

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
def health(store: ProductStore = Depends(get_store)):
    return {"status": "ok", "products": len(store)}
