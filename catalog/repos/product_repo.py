from typing import List

from catalog.data.database import ProductStore
from catalog.data.models.product import ProductModel


class ProductRepo:
    def __init__(self, store: ProductStore):
        self.store = store

    def get_all(self) -> List[ProductModel]:
        return sorted(self.store.values(), key=lambda p: p.id)

    def get_by_id(self, product_id: int) -> ProductModel | None:
        return self.store.get(product_id)
