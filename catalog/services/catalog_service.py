# catalog/services/catalog_service.py
from typing import List

from catalog.data.models.product import ProductModel
from catalog.repos.product_repo import ProductRepo
from catalog.domain.schemas import ProductRead
from catalog.utils.logging import get_logger

logger = get_logger(__name__)


def _to_read(product: ProductModel) -> ProductRead:
    return ProductRead(
        id=product.id,
        name=product.name,
        price=product.price,
        is_premium=product.is_premium,
    )


class CatalogService:
    """
    Use case'y katalogu produktow, tylko zapytania (read-only).
    Jedyna regula biznesowa: filtr produktow premium.
    """

    def __init__(self, repo: ProductRepo):
        self.repo = repo

    def get_all_products(self) -> List[ProductRead]:
        return [_to_read(p) for p in self.repo.get_all()]

    def get_product_by_id(self, product_id: int) -> ProductRead | None:
        product = self.repo.get_by_id(product_id)
        if product is None:
            logger.info(f"Product {product_id} not found")
            return None
        return _to_read(product)

    def get_premium_products(self) -> List[ProductRead]:
        # get_all jest posortowane po id, filtr zachowuje kolejnosc
        return [_to_read(p) for p in self.repo.get_all() if p.is_premium]
