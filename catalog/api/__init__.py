# catalog/api/__init__.py
from fastapi import FastAPI

from catalog.api.routers import health, products
from catalog.data.seed import seed
from catalog.utils.settings import APP_ENV
from catalog.utils.logging import get_logger

logger = get_logger(__name__)


def create_app(environment: str | None = None) -> FastAPI:
    environment = environment or APP_ENV
    dev = environment == "development"

    # docs tylko w trybie development
    app = FastAPI(
        title="Product Catalog Service",
        version="1.0.0",
        docs_url="/docs" if dev else None,
        redoc_url="/redoc" if dev else None,
        openapi_url="/openapi.json" if dev else None,
    )

    # magazyn budowany raz, handlery dostaja go przez app.state
    app.state.product_store = seed()

    app.include_router(health.router)
    app.include_router(products.router)

    logger.info(f"Product Catalog Service created (environment={environment})")
    return app
