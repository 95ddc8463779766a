"""
Unit tests for CatalogService
"""
from decimal import Decimal

from catalog.data.database import ProductStore
from catalog.data.models.product import ProductModel
from catalog.domain.schemas import ProductRead
from catalog.repos.product_repo import ProductRepo
from catalog.services.catalog_service import CatalogService


class TestCatalogService:
    """Test CatalogService use cases"""

    def test_get_all_products_returns_every_product_in_order(self, service):
        products = service.get_all_products()

        assert len(products) == 4
        assert all(isinstance(p, ProductRead) for p in products)
        assert [p.id for p in products] == [1, 2, 3, 4]

    def test_get_product_by_id_maps_fields(self, service):
        product = service.get_product_by_id(3)

        assert product == ProductRead(
            id=3, name="Pro Gear", price=Decimal("99.99"), is_premium=True
        )

    def test_get_product_by_id_propagates_not_found(self, service):
        assert service.get_product_by_id(99) is None

    def test_get_premium_products_filters_flag(self, service):
        products = service.get_premium_products()

        assert [p.id for p in products] == [3, 4]
        assert all(p.is_premium for p in products)

    def test_get_premium_products_preserves_id_order(self):
        """Test premium subset keeps ascending ids for an unordered store"""
        # Arrange
        store = ProductStore([
            ProductModel(id=9, name="Nine", price=Decimal("9"), is_premium=True),
            ProductModel(id=2, name="Two", price=Decimal("2")),
            ProductModel(id=5, name="Five", price=Decimal("5"), is_premium=True),
        ])
        service = CatalogService(ProductRepo(store))

        # Act
        products = service.get_premium_products()

        # Assert
        assert [p.id for p in products] == [5, 9]

    def test_no_premium_products(self):
        store = ProductStore([ProductModel(id=1, name="One", price=Decimal("1"))])
        service = CatalogService(ProductRepo(store))

        assert service.get_premium_products() == []
