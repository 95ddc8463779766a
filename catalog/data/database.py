# catalog/data/database.py
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from fastapi import Request

from catalog.data.models.product import ProductModel


class ProductStore:
    """
    Magazyn produktow w pamieci procesu.
    Mapa id -> produkt jest budowana raz w konstruktorze i potem tylko czytana,
    wiec rownolegle requesty nie potrzebuja zadnego locka.
    """

    def __init__(self, products: Iterable[ProductModel]):
        data: dict[int, ProductModel] = {}
        for product in products:
            if product.id in data:
                raise ValueError(f"Duplicate product id {product.id}")
            data[product.id] = product
        self._products: Mapping[int, ProductModel] = MappingProxyType(data)

    def get(self, product_id: int) -> ProductModel | None:
        return self._products.get(product_id)

    def values(self) -> Iterator[ProductModel]:
        return iter(self._products.values())

    def __len__(self) -> int:
        return len(self._products)


def get_store(request: Request) -> ProductStore:
    return request.app.state.product_store
