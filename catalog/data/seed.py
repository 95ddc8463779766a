# catalog/data/seed.py
from decimal import Decimal

from catalog.data.database import ProductStore
from catalog.data.models.product import ProductModel
from catalog.utils.logging import get_logger

logger = get_logger(__name__)

SEED_PRODUCTS = (
    {"id": 1, "name": "Basic Widget", "price": Decimal("9.99")},
    {"id": 2, "name": "Standard Kit", "price": Decimal("24.50")},
    {"id": 3, "name": "Pro Gear", "price": Decimal("99.99"), "is_premium": True},
    {"id": 4, "name": "Elite Bundle", "price": Decimal("249.00"), "is_premium": True},
)


def seed() -> ProductStore:
    store = ProductStore(ProductModel(**row) for row in SEED_PRODUCTS)
    logger.info(f"Seeded product store with {len(store)} products")
    return store
